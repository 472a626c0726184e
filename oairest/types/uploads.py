from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, FileUpload, Request, require
from .files import FilePurpose, FileResponse

# An upload may not exceed 8 GB.
MAX_UPLOAD_BYTES = 8 * 1024 ** 3
# Each part may not exceed 64 MB.
MAX_PART_BYTES = 64 * 1024 ** 2


@dataclass(frozen=True)
class CreateUploadRequest(Request):
    filename: str
    purpose: Union[FilePurpose, str]
    bytes: int
    mime_type: str

    def validate(self) -> None:
        require(self.filename, "filename")
        require(self.purpose, "purpose")
        require(self.mime_type, "mime_type")
        if not (0 < self.bytes <= MAX_UPLOAD_BYTES):
            raise InvalidArgumentError(f"`bytes` must be between 1 and {MAX_UPLOAD_BYTES}")


@dataclass(frozen=True)
class AddUploadPartRequest(Request):
    data: FileUpload

    def validate(self) -> None:
        require(self.data, "data")
        if len(self.data.buffer) > MAX_PART_BYTES:
            raise InvalidArgumentError("upload parts must be at most 64 MB")


@dataclass(frozen=True)
class CompleteUploadRequest(Request):
    part_ids: List[str]
    md5: Optional[str] = None

    def validate(self) -> None:
        if not self.part_ids:
            raise InvalidArgumentError("`part_ids` must contain at least one part")


@dataclass(frozen=True)
class UploadResponse(BaseModel):
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str
    status: str
    expires_at: int
    file: Optional[FileResponse] = None


@dataclass(frozen=True)
class UploadPartResponse(BaseModel):
    id: str
    object: str
    created_at: int
    upload_id: str
