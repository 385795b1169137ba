from typing import Optional, Any


class MessenteError(Exception):
    """Base exception for all Messente client errors."""
    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class RequestError(MessenteError):
    """Raised when a request cannot be built from the caller's input. Never retried."""
    pass


class ValidationError(RequestError, ValueError):
    """Raised when a required field is missing, blank or malformed."""
    pass


class EncodingError(RequestError):
    """Raised when a parameter value cannot be encoded in the requested charset."""
    pass


class UrlBuildError(RequestError):
    """Raised when the assembled endpoint is not a valid URL."""
    pass


class TransportError(MessenteError):
    """Raised when a host cannot be reached or its response cannot be read."""
    def __init__(self, message: str, host: Optional[str] = None, status_code: Optional[int] = None, details: Any = None):
        self.host = host
        self.status_code = status_code
        super().__init__(f"[{host or 'unknown'}] {message}", details=details)


class GatewayError(MessenteError):
    """Raised on demand for a non-success response from a reachable gateway."""
    def __init__(self, message: str, code: Optional[str] = None, status_code: Optional[int] = None):
        self.code = code
        self.status_code = status_code
        super().__init__(message, details=code)


class SignatureError(MessenteError):
    """Raised when a callback signature cannot be computed or compared."""
    pass


class MissingParameterError(SignatureError):
    """Raised when a parameter or the secret required for signing is absent."""
    pass
