from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request, check_range, require
from .assistants import ResponseFormat, Tool, check_tools
from .messages import CreateMessageRequest
from .shared import PageRequest, check_metadata


@dataclass(frozen=True)
class CreateRunRequest(Request):
    assistant_id: str
    model: Optional[str] = None
    instructions: Optional[str] = None
    additional_instructions: Optional[str] = None
    additional_messages: Optional[List[CreateMessageRequest]] = None
    tools: Optional[List[Tool]] = None
    metadata: Optional[Dict[str, str]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_prompt_tokens: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    truncation_strategy: Optional[Dict[str, Any]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[bool] = None
    response_format: Optional[ResponseFormat] = None

    def validate(self) -> None:
        require(self.assistant_id, "assistant_id")
        check_tools(self.tools)
        check_metadata(self.metadata)
        check_range(self.temperature, "temperature", 0, 2)
        check_range(self.top_p, "top_p", 0, 1)
        for name in ("max_prompt_tokens", "max_completion_tokens"):
            value = getattr(self, name)
            if value is not None and value < 256:
                raise InvalidArgumentError(f"`{name}` must be at least 256")


@dataclass(frozen=True)
class ModifyRunRequest(Request):
    metadata: Optional[Dict[str, str]] = None

    def validate(self) -> None:
        check_metadata(self.metadata)


ListRunRequest = PageRequest


@dataclass(frozen=True)
class RunResponse(BaseModel):
    id: str
    object: str
    created_at: int
    thread_id: str
    assistant_id: str
    status: str
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Tool]] = None
    required_action: Optional[Dict[str, Any]] = None
    last_error: Optional[Dict[str, Any]] = None
    expires_at: Optional[int] = None
    started_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    incomplete_details: Optional[Dict[str, Any]] = None
    usage: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_prompt_tokens: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    truncation_strategy: Optional[Dict[str, Any]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[bool] = None
    response_format: Optional[ResponseFormat] = None


@dataclass(frozen=True)
class ListRunResponse(BaseModel):
    object: str
    data: List[RunResponse]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False
