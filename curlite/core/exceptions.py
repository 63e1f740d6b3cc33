"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.

Pre-flight errors (MalformedURLError, MalformedPairError) are raised before
any network activity. TransportError wraps every failure of the HTTP
exchange itself. ContentTypeUnparseableError and BodyNotValidJsonError are
recoverable and never leave the rendering layer.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ApplicationError, ValueError):
    """Raised when command-line input fails validation."""

    def __init__(self, message: str = "Validation failed", code: str = "VAL_VALIDATION_ERROR") -> None:
        super().__init__(message, code=code)


class MalformedURLError(ValidationError):
    """Raised when a URL is not an absolute URL with scheme and host."""

    def __init__(self, token: str, reason: str | None = None) -> None:
        self.token = token
        message = f"Invalid URL {token!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, code="VAL_MALFORMED_URL")


class MalformedPairError(ValidationError):
    """Raised when a body token has no '=' separator."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Failed to parse {token!r}", code="VAL_MALFORMED_PAIR")


class TransportError(ApplicationError):
    """Raised when the HTTP exchange could not complete (DNS, connect, TLS, timeout)."""

    def __init__(self, message: str = "Transport error") -> None:
        super().__init__(message, code="SYS_TRANSPORT_ERROR")


class ContentTypeUnparseableError(ApplicationError):
    """Raised when a Content-Type header value is not a valid media type."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unparseable media type {value!r}", code="RSP_CONTENT_TYPE_UNPARSEABLE")


class BodyNotValidJsonError(ApplicationError):
    """Raised when a body declared as JSON cannot be decoded."""

    def __init__(self, message: str = "Body is not valid JSON") -> None:
        super().__init__(message, code="RSP_BODY_NOT_JSON")
