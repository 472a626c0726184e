from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.models import BaseModel


@dataclass(frozen=True)
class ModelResponse(BaseModel):
    id: str
    object: str
    created: int
    owned_by: str
    root: Optional[str] = None
    parent: Optional[str] = None


@dataclass(frozen=True)
class ListModelResponse(BaseModel):
    object: str
    data: List[ModelResponse]
