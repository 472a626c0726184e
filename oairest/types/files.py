from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from ..core.models import BaseModel, FileUpload, Request, require


class FilePurpose(str, Enum):
    ASSISTANTS = "assistants"
    BATCH = "batch"
    FINE_TUNE = "fine-tune"
    VISION = "vision"


@dataclass(frozen=True)
class UploadFileRequest(Request):
    file: FileUpload
    purpose: Union[FilePurpose, str]

    def validate(self) -> None:
        require(self.file, "file")
        require(self.purpose, "purpose")


@dataclass(frozen=True)
class FileResponse(BaseModel):
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str
    status: Optional[str] = None
    status_details: Optional[str] = None


@dataclass(frozen=True)
class FileListResponse(BaseModel):
    object: str
    data: List[FileResponse]
    has_more: Optional[bool] = None
