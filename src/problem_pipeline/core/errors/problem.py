"""RFC 7807 Problem Details document and its HTTP response.

See: https://tools.ietf.org/html/rfc7807
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python
from starlette.responses import JSONResponse

from problem_pipeline.core.constants import (
    PROBLEM_JSON_INDENT,
    PROBLEM_JSON_MEDIA_TYPE,
)


class ProblemDocument(BaseModel):
    """RFC 7807 Problem Details for one failed request.

    Attributes:
        type: URI reference identifying the problem type
        title: Short human-readable summary
        status: HTTP status code
        detail: Human-readable explanation specific to this occurrence
        instance: Path of the request that failed
        extensions: Extension members (correlationId, errors, diagnostics)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str = "about:blank"
    title: str
    status: int | None = None
    detail: str
    instance: str
    extensions: dict[str, Any] = Field(default_factory=dict)

    def to_content(self) -> dict[str, Any]:
        """Flatten into the JSON object sent on the wire.

        Extension members sit beside the standard members, which they
        never override.
        """
        content: dict[str, Any] = self.model_dump(
            by_alias=True, exclude={"extensions"}, exclude_none=True
        )
        for key, value in self.extensions.items():
            if key not in content:
                content[key] = value
        return to_jsonable_python(content, fallback=str)


class ProblemJSONResponse(JSONResponse):
    """Indented ``application/problem+json`` response."""

    media_type = PROBLEM_JSON_MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=PROBLEM_JSON_INDENT,
        ).encode("utf-8")
