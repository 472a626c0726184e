"""
Exception hierarchy shared by the transport, the stream decoder and the
resource facades. Every failure reaches the caller as one of these.
"""

from __future__ import annotations

import json
from typing import Any


class OpenAIError(Exception):
    """Base exception for everything raised by oairest."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class APIConnectionError(OpenAIError):
    """Raised when the connection to the API fails."""
    pass


class APITimeoutError(APIConnectionError):
    """Raised when a caller-supplied timeout expires."""
    pass


class APIError(OpenAIError):
    """Raised for non-2xx responses. Carries the server's error object verbatim."""

    def __init__(
        self,
        message: str,
        status_code: int = None,
        type: str = None,
        param: Any = None,
        code: Any = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.type = type
        self.param = param
        self.code = code
        self.body = body

    def __str__(self):
        label = f"{self.type}: {self.message}" if self.type else self.message
        if self.status_code:
            return f"[{self.status_code}] {label}"
        return label


class BadRequestError(APIError):
    """Raised for 400 errors."""
    pass


class AuthenticationError(APIError):
    """Raised for 401 errors."""
    pass


class PermissionDeniedError(APIError):
    """Raised for 403 errors."""
    pass


class NotFoundError(APIError):
    """Raised for 404 errors."""
    pass


class ConflictError(APIError):
    """Raised for 409 errors."""
    pass


class UnprocessableEntityError(APIError):
    """Raised for 422 errors."""
    pass


class RateLimitError(APIError):
    """Raised for 429 errors."""
    pass


class InternalServerError(APIError):
    """Raised for 500+ errors."""
    pass


class DeserializationError(OpenAIError):
    """Raised when a payload does not match the expected shape."""

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload


class StreamError(OpenAIError):
    """Raised when a live event stream fails or is framed incorrectly."""
    pass


class InvalidArgumentError(OpenAIError, ValueError):
    """Raised by local validation, before any request leaves the process."""
    pass


class FileSaveError(OpenAIError):
    """Raised when a response body cannot be written to disk."""
    pass


class FileReadError(OpenAIError):
    """Raised when a file to upload cannot be read."""
    pass


_STATUS_ERRORS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def error_from_response(status_code: int, body: str) -> APIError:
    """Build the APIError for a non-2xx response body.

    The server normally answers ``{"error": {"message", "type", "param", "code"}}``.
    Anything else still becomes an APIError, with the raw text as message.
    """
    message = body or f"HTTP {status_code}"
    type_ = param = code = None
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        payload = None

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            message = error.get("message") or message
            type_ = error.get("type")
            param = error.get("param")
            code = error.get("code")
        elif isinstance(error, str):
            message = error

    error_class = _STATUS_ERRORS.get(
        status_code, InternalServerError if status_code >= 500 else APIError
    )
    return error_class(
        message=message,
        status_code=status_code,
        type=type_,
        param=param,
        code=code,
        body=payload if payload is not None else body,
    )
