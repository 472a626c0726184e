from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request, enum_value, require
from .shared import Usage

EmbeddingInput = Union[str, List[str], List[int], List[List[int]]]


class EncodingFormat(str, Enum):
    FLOAT = "float"
    BASE64 = "base64"


@dataclass(frozen=True)
class CreateEmbeddingRequest(Request):
    model: str
    input: EmbeddingInput
    encoding_format: Optional[Union[EncodingFormat, str]] = None
    dimensions: Optional[int] = None
    user: Optional[str] = None

    def validate(self) -> None:
        require(self.model, "model")
        if self.input is None or (isinstance(self.input, (str, list)) and len(self.input) == 0):
            raise InvalidArgumentError("`input` must not be empty")
        if self.encoding_format is not None:
            enum_value(EncodingFormat, self.encoding_format, "encoding_format")
        if self.dimensions is not None and self.dimensions < 1:
            raise InvalidArgumentError("`dimensions` must be positive")


@dataclass(frozen=True)
class Embedding(BaseModel):
    index: int
    # A list of floats, or a base64 string when encoding_format is base64.
    embedding: Union[List[float], str]
    object: str = "embedding"


@dataclass(frozen=True)
class EmbeddingResponse(BaseModel):
    object: str
    data: List[Embedding]
    model: str
    usage: Optional[Usage] = None
