"""Exception to Problem Details conversion.

``convert`` is the single place where a failure is classified. It only
reads the request path and the correlation id from request state, so the
same failure and request always produce the same document.
"""

from typing import NamedTuple

from starlette import status
from starlette.requests import Request

from problem_pipeline.core.constants import (
    GENERIC_ERROR_DETAIL,
    PROBLEM_TYPE_BAD_REQUEST,
    PROBLEM_TYPE_NOT_FOUND,
    PROBLEM_TYPE_SERVER_ERROR,
)
from problem_pipeline.core.correlation import peek_correlation_id
from problem_pipeline.core.errors.exceptions import (
    AppException,
    FailureKind,
    ValidationFailureError,
    classify,
)
from problem_pipeline.core.errors.problem import ProblemDocument


class ProblemType(NamedTuple):
    type: str
    title: str


PROBLEM_TYPES: dict[FailureKind, ProblemType] = {
    FailureKind.VALIDATION: ProblemType(PROBLEM_TYPE_BAD_REQUEST, "Validation Error"),
    FailureKind.NOT_FOUND: ProblemType(PROBLEM_TYPE_NOT_FOUND, "Resource Not Found"),
    FailureKind.APPLICATION: ProblemType(
        PROBLEM_TYPE_SERVER_ERROR, "Application Error"
    ),
    FailureKind.UNCLASSIFIED: ProblemType(
        PROBLEM_TYPE_SERVER_ERROR, "Internal Server Error"
    ),
}


def convert(exc: BaseException, request: Request) -> ProblemDocument:
    """Build the Problem Details document for a failed request.

    Typed failures report their own status code and message. Unclassified
    failures always report 500 with a generic detail so internal messages
    never reach the caller.

    Args:
        exc: The failure raised while handling the request
        request: The request being handled

    Returns:
        The problem document to send back
    """
    kind = classify(exc)
    problem_type = PROBLEM_TYPES[kind]

    extensions: dict[str, object] = {}
    correlation_id = peek_correlation_id(request)
    if correlation_id is not None:
        extensions["correlationId"] = correlation_id

    match exc:
        case ValidationFailureError(status_code=status_code, message=detail):
            extensions["errors"] = exc.errors
        case AppException(status_code=status_code, message=detail):
            pass
        case _:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            detail = GENERIC_ERROR_DETAIL

    return ProblemDocument(
        type=problem_type.type,
        title=problem_type.title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        extensions=extensions,
    )
