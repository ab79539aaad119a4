"""Failures surfaced by the network module."""

from enum import Enum


class NetworkErrorKind(str, Enum):
    """Kinds of failure a request can end with."""

    INVALID_TARGET = "invalid_target"
    INVALID_RESPONSE = "invalid_response"
    SERVER_ERROR = "server_error"
    DECODING_ERROR = "decoding_error"


class DecodeFailure(str, Enum):
    """Why a response body could not be decoded into the requested type."""

    DATA_CORRUPTED = "data_corrupted"
    KEY_NOT_FOUND = "key_not_found"
    TYPE_MISMATCH = "type_mismatch"
    VALUE_NOT_FOUND = "value_not_found"
    UNKNOWN = "unknown"


class NetworkError(Exception):
    """Base class for all request failures."""

    kind: NetworkErrorKind

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value.replace("_", " "))


class InvalidTarget(NetworkError):
    """Neither a valid endpoint nor a valid raw URL was supplied."""

    kind = NetworkErrorKind.INVALID_TARGET


class InvalidResponse(NetworkError):
    """The transport result could not be interpreted as an HTTP response."""

    kind = NetworkErrorKind.INVALID_RESPONSE


class ServerError(NetworkError):
    """The server answered with a status outside the 2xx range."""

    kind = NetworkErrorKind.SERVER_ERROR

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"server error (status {status_code})")


class DecodingError(NetworkError):
    """The response body could not be decoded into the requested type."""

    kind = NetworkErrorKind.DECODING_ERROR
