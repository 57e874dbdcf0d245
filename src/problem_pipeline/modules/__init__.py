"""Feature modules mounted under ``/api``.

Each subpackage that defines a module-level ``router`` is mounted; other
subpackages are ignored.
"""

import pkgutil
from importlib import import_module

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> list[APIRouter]:
    """Import every feature package and collect its router, sorted by name."""
    packages = sorted(
        info.name
        for info in pkgutil.iter_modules(__path__)
        if info.ispkg and not info.name.startswith("_")
    )

    routers: list[APIRouter] = []
    for name in packages:
        router = getattr(import_module(f"{__name__}.{name}"), "router", None)
        if isinstance(router, APIRouter):
            routers.append(router)
            logger.debug("module_loaded", module=name, prefix=router.prefix)
    return routers
