from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request, check_range, require
from .shared import PageRequest, check_metadata

# Tool definitions are passed through as JSON objects:
# {"type": "code_interpreter"}, {"type": "file_search", "file_search": {...}},
# {"type": "function", "function": {"name": ..., "parameters": {...}}}.
Tool = Dict[str, Any]

# "auto" or {"type": "text" | "json_object" | "json_schema", ...}
ResponseFormat = Union[str, Dict[str, Any]]

_TOOL_TYPES = ("code_interpreter", "file_search", "function")


def check_tools(tools: Optional[List[Tool]]) -> None:
    if tools is None:
        return
    if len(tools) > 128:
        raise InvalidArgumentError("at most 128 tools are allowed")
    for tool in tools:
        kind = tool.get("type")
        if kind not in _TOOL_TYPES:
            raise InvalidArgumentError(f"unknown tool type {kind!r}")
        if kind == "function" and not (tool.get("function") or {}).get("name"):
            raise InvalidArgumentError("function tools must include `function.name`")


def _check_assistant(req) -> None:
    if req.name is not None and len(req.name) > 256:
        raise InvalidArgumentError("`name` must be at most 256 characters")
    if req.description is not None and len(req.description) > 512:
        raise InvalidArgumentError("`description` must be at most 512 characters")
    check_tools(req.tools)
    check_metadata(req.metadata)
    check_range(req.temperature, "temperature", 0, 2)
    check_range(req.top_p, "top_p", 0, 1)


@dataclass(frozen=True)
class AssistantRequest(Request):
    model: str
    name: Optional[str] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Tool]] = None
    tool_resources: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, str]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    response_format: Optional[ResponseFormat] = None

    def validate(self) -> None:
        require(self.model, "model")
        _check_assistant(self)


@dataclass(frozen=True)
class ModifyAssistantRequest(Request):
    """Partial update; only the fields that are set are sent."""
    model: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Tool]] = None
    tool_resources: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, str]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    response_format: Optional[ResponseFormat] = None

    def validate(self) -> None:
        _check_assistant(self)


ListAssistantRequest = PageRequest


@dataclass(frozen=True)
class AssistantResponse(BaseModel):
    id: str
    object: str
    created_at: int
    model: str
    name: Optional[str] = None
    description: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[Tool]] = None
    tool_resources: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    response_format: Optional[ResponseFormat] = None


@dataclass(frozen=True)
class ListAssistantResponse(BaseModel):
    object: str
    data: List[AssistantResponse]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False
