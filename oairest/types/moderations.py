from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request

# A string, a list of strings, or a list of multimodal parts
# ({"type": "text", "text": ...} / {"type": "image_url", "image_url": {"url": ...}}).
ModerationInput = Union[str, List[str], List[Dict[str, Any]]]

_PART_TYPES = ("text", "image_url")


@dataclass(frozen=True)
class CreateModerationRequest(Request):
    input: ModerationInput
    model: Optional[str] = None  # default: "omni-moderation-latest"

    def validate(self) -> None:
        if self.input is None or (isinstance(self.input, (str, list)) and len(self.input) == 0):
            raise InvalidArgumentError("`input` must not be empty")
        if isinstance(self.input, list):
            for part in self.input:
                if isinstance(part, dict) and part.get("type") not in _PART_TYPES:
                    raise InvalidArgumentError(
                        f"moderation input parts must have type text or image_url, got {part.get('type')!r}"
                    )

    @staticmethod
    def text_part(text: str) -> Dict[str, Any]:
        return {"type": "text", "text": text}

    @staticmethod
    def image_part(url: str) -> Dict[str, Any]:
        return {"type": "image_url", "image_url": {"url": url}}


@dataclass(frozen=True)
class ModerationResult(BaseModel):
    # Category names contain slashes ("self-harm/intent"), so they stay as maps.
    flagged: bool
    categories: Dict[str, bool]
    category_scores: Dict[str, float]
    category_applied_input_types: Optional[Dict[str, List[str]]] = None


@dataclass(frozen=True)
class ModerationResponse(BaseModel):
    id: str
    model: str
    results: List[ModerationResult]
