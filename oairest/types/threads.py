from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..core.models import BaseModel, Request
from .messages import CreateMessageRequest
from .shared import check_metadata


@dataclass(frozen=True)
class CreateThreadRequest(Request):
    messages: Optional[List[CreateMessageRequest]] = None
    tool_resources: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, str]] = None

    def validate(self) -> None:
        check_metadata(self.metadata)


@dataclass(frozen=True)
class ModifyThreadRequest(Request):
    tool_resources: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, str]] = None

    def validate(self) -> None:
        check_metadata(self.metadata)


@dataclass(frozen=True)
class ThreadResponse(BaseModel):
    id: str
    object: str
    created_at: int
    tool_resources: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
