from typing import Sequence


__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "HttpError",
    "P2PB2BError",
    "TransportError",
    "ValidationError"
]

class P2PB2BError(Exception):
    """The default base class for all P2PB2B exceptions."""
    pass


class AuthenticationError(P2PB2BError):

    def __init__(self, message: str=None):
        if not message:
            message = "API key or API secret is missing, private requests " + \
                "cannot be executed."
        super().__init__(message)


class ConfigurationError(P2PB2BError):

    def __init__(self, message: str=None):
        if not message:
            message = "Invalid client configuration."
        super().__init__(message)


class HttpError(P2PB2BError):
    """The exchange responded, but not with a success status.

    The raw response body is kept, since the exchange describes
    what went wrong in it.

    """

    def __init__(self, status_code: int, body: str, message: str=None):
        self.status_code = status_code
        self.body = body

        if not message:
            message = f"Request failed with status {status_code}: {body}"
        super().__init__(message)


class TransportError(P2PB2BError):

    def __init__(self, message: str=None):
        if not message:
            message = "No response was received from the exchange."
        super().__init__(message)


class ValidationError(P2PB2BError):

    def __init__(self, allowed: Sequence, message: str=None):
        self.allowed = tuple(allowed)

        if not message:
            message = "Invalid value. Value should be from the list: " + \
                ",".join(str(a) for a in self.allowed)
        super().__init__(message)
