"""Problem Pipeline - uniform RFC 7807 error responses with request correlation."""

__version__ = "0.1.0"
