from ..types.uploads import (
    AddUploadPartRequest,
    CompleteUploadRequest,
    CreateUploadRequest,
    UploadPartResponse,
    UploadResponse,
)
from ._base import APIResource, path


class Uploads(APIResource):
    """Uploads resource: send a large file in parts, then complete it into a File."""

    async def create(self, req: CreateUploadRequest) -> UploadResponse:
        return await self._transport.post("/uploads", UploadResponse, req.to_dict())

    async def add_part(self, upload_id: str, req: AddUploadPartRequest) -> UploadPartResponse:
        data, files = req.to_form()
        return await self._transport.post_form(
            path("/uploads/{upload_id}/parts", upload_id=upload_id), UploadPartResponse, data, files
        )

    async def complete(self, upload_id: str, req: CompleteUploadRequest) -> UploadResponse:
        return await self._transport.post(
            path("/uploads/{upload_id}/complete", upload_id=upload_id), UploadResponse, req.to_dict()
        )

    async def cancel(self, upload_id: str) -> UploadResponse:
        return await self._transport.post(path("/uploads/{upload_id}/cancel", upload_id=upload_id), UploadResponse)
