from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request, enum_value
from .chat import Role
from .shared import PageRequest, check_metadata

# A string, or content parts such as {"type": "text", "text": ...},
# {"type": "image_file", "image_file": {"file_id": ...}} and
# {"type": "image_url", "image_url": {"url": ...}}.
MessageContent = Union[str, List[Dict[str, Any]]]


@dataclass(frozen=True)
class CreateMessageRequest(Request):
    content: MessageContent
    role: Union[Role, str] = Role.USER
    attachments: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, str]] = None

    def validate(self) -> None:
        role = enum_value(Role, self.role, "role")
        if role not in (Role.USER, Role.ASSISTANT):
            raise InvalidArgumentError("thread messages must have role user or assistant")
        if not self.content:
            raise InvalidArgumentError("`content` must not be empty")
        check_metadata(self.metadata)


@dataclass(frozen=True)
class ModifyMessageRequest(Request):
    metadata: Optional[Dict[str, str]] = None

    def validate(self) -> None:
        check_metadata(self.metadata)


@dataclass(frozen=True)
class ListMessageRequest(PageRequest):
    run_id: Optional[str] = None


@dataclass(frozen=True)
class IncompleteDetails(BaseModel):
    reason: str


@dataclass(frozen=True)
class MessageResponse(BaseModel):
    id: str
    object: str
    created_at: int
    thread_id: str
    role: str
    content: List[Dict[str, Any]]
    status: Optional[str] = None
    incomplete_details: Optional[IncompleteDetails] = None
    completed_at: Optional[int] = None
    incomplete_at: Optional[int] = None
    assistant_id: Optional[str] = None
    run_id: Optional[str] = None
    attachments: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, Any]] = None

    @property
    def text(self) -> str:
        """Concatenated value of the text content parts."""
        parts = []
        for part in self.content:
            if part.get("type") == "text":
                text = part.get("text")
                parts.append(text.get("value", "") if isinstance(text, dict) else str(text))
        return "".join(parts)


@dataclass(frozen=True)
class ListMessageResponse(BaseModel):
    object: str
    data: List[MessageResponse]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False
