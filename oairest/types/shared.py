from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request, check_range, enum_value

# A stop sequence: a single string or up to four of them.
Stop = Union[str, List[str]]


@dataclass(frozen=True)
class Usage(BaseModel):
    prompt_tokens: int
    total_tokens: int
    completion_tokens: Optional[int] = None


@dataclass(frozen=True)
class DeletedObject(BaseModel):
    id: str
    object: str
    deleted: bool


def check_stop(stop: Optional[Stop]) -> None:
    if isinstance(stop, (list, tuple)) and len(stop) > 4:
        raise InvalidArgumentError(f"`stop` accepts at most 4 sequences, got {len(stop)}")


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class PageRequest(Request):
    """Cursor pagination query used by the assistants-family list endpoints."""
    limit: Optional[int] = None  # default: 20, min: 1, max: 100
    order: Optional[Union[Order, str]] = None  # default: desc
    after: Optional[str] = None
    before: Optional[str] = None

    def validate(self) -> None:
        check_range(self.limit, "limit", 1, 100)
        if self.order is not None:
            enum_value(Order, self.order, "order")


def check_metadata(metadata: Optional[Dict[str, str]]) -> None:
    if metadata is None:
        return
    if len(metadata) > 16:
        raise InvalidArgumentError("`metadata` accepts at most 16 pairs")
    for key, value in metadata.items():
        if len(key) > 64:
            raise InvalidArgumentError(f"metadata key {key!r} is longer than 64 characters")
        if isinstance(value, str) and len(value) > 512:
            raise InvalidArgumentError(f"metadata value for {key!r} is longer than 512 characters")
