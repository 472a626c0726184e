from .client import Client
from .errors import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DeserializationError,
    FileReadError,
    FileSaveError,
    InternalServerError,
    InvalidArgumentError,
    NotFoundError,
    OpenAIError,
    PermissionDeniedError,
    RateLimitError,
    StreamError,
    UnprocessableEntityError,
)
from .models import BaseModel, FileUpload, Request
from .streaming import EventStream, StreamState
from .transport import API_BASE, HTTPTransport
