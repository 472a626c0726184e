from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from ..core.models import BaseModel, FileUpload, Request, check_range, enum_value, require


class ImageResponseFormat(str, Enum):
    URL = "url"
    B64_JSON = "b64_json"


class ImageSize(str, Enum):
    S256x256 = "256x256"
    S512x512 = "512x512"
    S1024x1024 = "1024x1024"
    S1792x1024 = "1792x1024"
    S1024x1792 = "1024x1792"


class ImageQuality(str, Enum):
    STANDARD = "standard"
    HD = "hd"


class ImageStyle(str, Enum):
    VIVID = "vivid"
    NATURAL = "natural"


def _check_common(n, size, response_format) -> None:
    check_range(n, "n", 1, 10)
    if size is not None:
        enum_value(ImageSize, size, "size")
    if response_format is not None:
        enum_value(ImageResponseFormat, response_format, "response_format")


@dataclass(frozen=True)
class CreateImageRequest(Request):
    prompt: str
    model: Optional[str] = None
    n: Optional[int] = None  # default: 1, min: 1, max: 10
    quality: Optional[Union[ImageQuality, str]] = None
    size: Optional[Union[ImageSize, str]] = None  # default: "1024x1024"
    style: Optional[Union[ImageStyle, str]] = None
    response_format: Optional[Union[ImageResponseFormat, str]] = None  # default: "url"
    user: Optional[str] = None

    def validate(self) -> None:
        require(self.prompt, "prompt")
        _check_common(self.n, self.size, self.response_format)
        if self.quality is not None:
            enum_value(ImageQuality, self.quality, "quality")
        if self.style is not None:
            enum_value(ImageStyle, self.style, "style")


@dataclass(frozen=True)
class CreateImageEditRequest(Request):
    image: FileUpload
    prompt: str
    mask: Optional[FileUpload] = None
    model: Optional[str] = None
    n: Optional[int] = None
    size: Optional[Union[ImageSize, str]] = None
    response_format: Optional[Union[ImageResponseFormat, str]] = None
    user: Optional[str] = None

    def validate(self) -> None:
        require(self.image, "image")
        require(self.prompt, "prompt")
        _check_common(self.n, self.size, self.response_format)


@dataclass(frozen=True)
class CreateImageVariationRequest(Request):
    image: FileUpload
    model: Optional[str] = None
    n: Optional[int] = None
    size: Optional[Union[ImageSize, str]] = None
    response_format: Optional[Union[ImageResponseFormat, str]] = None
    user: Optional[str] = None

    def validate(self) -> None:
        require(self.image, "image")
        _check_common(self.n, self.size, self.response_format)


@dataclass(frozen=True)
class ImageData(BaseModel):
    url: Optional[str] = None
    b64_json: Optional[str] = None
    revised_prompt: Optional[str] = None


@dataclass(frozen=True)
class ImageResponse(BaseModel):
    created: int
    data: List[ImageData]
