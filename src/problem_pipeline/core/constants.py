"""Application-wide constants.

Header names, request-state keys and problem document vocabulary shared by
the correlation and error handling middleware.
"""

ENVIRONMENTS = frozenset({"development", "staging", "production"})

# Correlation
CORRELATION_ID_HEADER = "X-Correlation-Id"
CORRELATION_ID_STATE_KEY = "correlation_id"
MISSING_CORRELATION_ID = "N/A"

# Problem documents
PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"
PROBLEM_JSON_INDENT = 2
GENERIC_ERROR_DETAIL = "An unexpected error occurred. Please try again later."

# RFC 9110 status code sections used as problem types
PROBLEM_TYPE_BAD_REQUEST = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
PROBLEM_TYPE_NOT_FOUND = "https://tools.ietf.org/html/rfc9110#section-15.5.5"
PROBLEM_TYPE_SERVER_ERROR = "https://tools.ietf.org/html/rfc9110#section-15.6.1"

# Paths kept out of request logs
QUIET_PATHS = (
    "/health/live",
    "/docs",
    "/redoc",
    "/openapi.json",
)
