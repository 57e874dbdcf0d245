"""Tests for feature module discovery."""

from fastapi import APIRouter

from problem_pipeline.modules import discover_modules


def test_discovers_feature_routers():
    """Verify each feature package with a router is found, in name order."""
    routers = discover_modules()

    assert all(isinstance(router, APIRouter) for router in routers)
    assert [router.prefix for router in routers] == ["/products", "/users"]
