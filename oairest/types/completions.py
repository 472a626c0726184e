from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request, check_range, require
from .shared import Stop, Usage, check_stop

# A string, a list of strings, a list of token ids, or a list of token id lists.
Prompt = Union[str, List[str], List[int], List[List[int]]]


@dataclass(frozen=True)
class CreateCompletionRequest(Request):
    model: str
    prompt: Optional[Prompt] = None  # default: <|endoftext|>
    suffix: Optional[str] = None
    max_tokens: Optional[int] = None  # default: 16
    temperature: Optional[float] = None  # min: 0, max: 2, default: 1
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stream_options: Optional[Dict[str, Any]] = None
    logprobs: Optional[int] = None  # max: 5
    echo: Optional[bool] = None
    stop: Optional[Stop] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    best_of: Optional[int] = None
    logit_bias: Optional[Dict[str, int]] = None
    seed: Optional[int] = None
    user: Optional[str] = None

    def validate(self) -> None:
        require(self.model, "model")
        check_range(self.temperature, "temperature", 0, 2)
        check_range(self.top_p, "top_p", 0, 1)
        check_range(self.n, "n", 1, 128)
        check_range(self.logprobs, "logprobs", 0, 5)
        check_range(self.presence_penalty, "presence_penalty", -2, 2)
        check_range(self.frequency_penalty, "frequency_penalty", -2, 2)
        check_range(self.best_of, "best_of", 0, 20)
        check_stop(self.stop)
        if self.best_of is not None and self.n is not None and self.best_of < self.n:
            raise InvalidArgumentError("`best_of` must be greater than or equal to `n`")
        if self.best_of is not None and self.stream:
            raise InvalidArgumentError("results cannot be streamed when `best_of` is set")


@dataclass(frozen=True)
class CompletionChoice(BaseModel):
    text: str
    index: int
    logprobs: Optional[Dict[str, Any]] = None
    finish_reason: Optional[str] = None


@dataclass(frozen=True)
class CompletionResponse(BaseModel):
    id: str
    object: str
    created: int
    model: str
    choices: List[CompletionChoice]
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None
