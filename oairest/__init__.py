"""Asynchronous typed client for the OpenAI REST API."""

__version__ = "0.1.0"

import logging

from .core import (
    API_BASE,
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    Client,
    ConflictError,
    DeserializationError,
    EventStream,
    FileReadError,
    FileSaveError,
    FileUpload,
    InternalServerError,
    InvalidArgumentError,
    NotFoundError,
    OpenAIError,
    PermissionDeniedError,
    RateLimitError,
    StreamError,
    StreamState,
    UnprocessableEntityError,
)
from .types import (
    ChatMessage,
    CreateChatRequest,
    CreateSpeechRequest,
    CreateTranscriptionRequest,
    CreateTranslationRequest,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
