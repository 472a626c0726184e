from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request, check_range, enum_value, require
from .shared import Stop, Usage, check_stop


class Role(str, Enum):
    SYSTEM = "system"
    DEVELOPER = "developer"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass(frozen=True)
class ChatMessage(Request):
    """A message in the conversation sent to the model.

    ``content`` is a string or a list of content parts
    (``{"type": "text", ...}``, ``{"type": "image_url", ...}``).
    """
    role: Union[Role, str]
    content: Optional[Union[str, List[Dict[str, Any]]]] = None
    name: Optional[str] = None
    tool_calls: Optional[List[Dict[str, Any]]] = None
    tool_call_id: Optional[str] = None

    def validate(self) -> None:
        role = enum_value(Role, self.role, "role")
        if role is Role.TOOL and not self.tool_call_id:
            raise InvalidArgumentError("tool messages must include `tool_call_id`")
        if self.content is None and not (role is Role.ASSISTANT and self.tool_calls):
            raise InvalidArgumentError(f"`content` is required for {role.value} messages")

    @classmethod
    def system(cls, content: str, **kwargs) -> "ChatMessage":
        return cls(role=Role.SYSTEM, content=content, **kwargs)

    @classmethod
    def user(cls, content: Union[str, List[Dict[str, Any]]], **kwargs) -> "ChatMessage":
        return cls(role=Role.USER, content=content, **kwargs)

    @classmethod
    def assistant(cls, content: str = None, **kwargs) -> "ChatMessage":
        return cls(role=Role.ASSISTANT, content=content, **kwargs)

    @classmethod
    def tool(cls, content: str, tool_call_id: str) -> "ChatMessage":
        return cls(role=Role.TOOL, content=content, tool_call_id=tool_call_id)


@dataclass(frozen=True)
class CreateChatRequest(Request):
    model: str
    messages: List[ChatMessage]
    temperature: Optional[float] = None  # min: 0, max: 2, default: 1
    top_p: Optional[float] = None  # default: 1
    n: Optional[int] = None  # default: 1
    stream: Optional[bool] = None
    stream_options: Optional[Dict[str, Any]] = None
    stop: Optional[Stop] = None
    max_tokens: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None  # min: -2.0, max: 2.0, default: 0
    frequency_penalty: Optional[float] = None  # min: -2.0, max: 2.0, default: 0
    logit_bias: Optional[Dict[str, int]] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = None
    response_format: Optional[Dict[str, Any]] = None
    seed: Optional[int] = None
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    parallel_tool_calls: Optional[bool] = None
    user: Optional[str] = None

    def validate(self) -> None:
        require(self.model, "model")
        if not self.messages:
            raise InvalidArgumentError("`messages` must contain at least one message")
        check_range(self.temperature, "temperature", 0, 2)
        check_range(self.top_p, "top_p", 0, 1)
        check_range(self.n, "n", 1, 128)
        check_range(self.presence_penalty, "presence_penalty", -2, 2)
        check_range(self.frequency_penalty, "frequency_penalty", -2, 2)
        check_range(self.top_logprobs, "top_logprobs", 0, 20)
        check_stop(self.stop)
        if self.stream_options is not None and not self.stream:
            raise InvalidArgumentError("`stream_options` is only allowed when `stream` is true")


@dataclass(frozen=True)
class FunctionCall(BaseModel):
    name: str
    arguments: str


@dataclass(frozen=True)
class ToolCall(BaseModel):
    id: str
    function: FunctionCall
    type: str = "function"


@dataclass(frozen=True)
class ResponseMessage(BaseModel):
    role: str
    content: Optional[str] = None
    refusal: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None


@dataclass(frozen=True)
class ChatChoice(BaseModel):
    index: int
    message: ResponseMessage
    finish_reason: Optional[str] = None
    logprobs: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class ChatResponse(BaseModel):
    id: str
    object: str
    created: int
    model: str
    choices: List[ChatChoice]
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None


@dataclass(frozen=True)
class Delta(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None
    refusal: Optional[str] = None
    # Partial tool calls; arguments arrive in fragments across chunks.
    tool_calls: Optional[List[Dict[str, Any]]] = None


@dataclass(frozen=True)
class ChatChoiceStream(BaseModel):
    index: int
    delta: Delta
    finish_reason: Optional[str] = None
    logprobs: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class ChatStreamResponse(BaseModel):
    id: str
    object: str
    created: int
    model: str
    choices: List[ChatChoiceStream]
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None
