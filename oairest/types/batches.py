from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request, check_range, enum_value, require
from .shared import check_metadata

COMPLETION_WINDOW = "24h"


class BatchEndpoint(str, Enum):
    CHAT_COMPLETIONS = "/v1/chat/completions"
    EMBEDDINGS = "/v1/embeddings"
    COMPLETIONS = "/v1/completions"


@dataclass(frozen=True)
class CreateBatchRequest(Request):
    input_file_id: str
    endpoint: Union[BatchEndpoint, str]
    completion_window: str = COMPLETION_WINDOW
    metadata: Optional[Dict[str, str]] = None

    def validate(self) -> None:
        require(self.input_file_id, "input_file_id")
        enum_value(BatchEndpoint, self.endpoint, "endpoint")
        if self.completion_window != COMPLETION_WINDOW:
            raise InvalidArgumentError(
                f"`completion_window` must be {COMPLETION_WINDOW!r}, got {self.completion_window!r}"
            )
        check_metadata(self.metadata)


@dataclass(frozen=True)
class ListBatchRequest(Request):
    after: Optional[str] = None
    limit: Optional[int] = None  # default: 20

    def validate(self) -> None:
        check_range(self.limit, "limit", 1, 100)


@dataclass(frozen=True)
class RequestCounts(BaseModel):
    total: int
    completed: int
    failed: int


@dataclass(frozen=True)
class BatchResponse(BaseModel):
    id: str
    object: str
    endpoint: str
    input_file_id: str
    completion_window: str
    status: str
    created_at: int
    errors: Optional[Dict[str, Any]] = None
    output_file_id: Optional[str] = None
    error_file_id: Optional[str] = None
    in_progress_at: Optional[int] = None
    expires_at: Optional[int] = None
    finalizing_at: Optional[int] = None
    completed_at: Optional[int] = None
    failed_at: Optional[int] = None
    expired_at: Optional[int] = None
    cancelling_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    request_counts: Optional[RequestCounts] = None
    metadata: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class ListBatchResponse(BaseModel):
    object: str
    data: List[BatchResponse]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False
