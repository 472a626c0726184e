from ..types.files import FileListResponse, FileResponse, UploadFileRequest
from ..types.shared import DeletedObject
from ._base import APIResource, path


class Files(APIResource):
    """Files resource: upload documents for fine-tuning, batches and assistants."""

    async def list(self) -> FileListResponse:
        return await self._transport.get("/files", FileListResponse)

    async def upload(self, req: UploadFileRequest) -> FileResponse:
        data, files = req.to_form()
        return await self._transport.post_form("/files", FileResponse, data, files)

    async def retrieve(self, file_id: str) -> FileResponse:
        return await self._transport.get(path("/files/{file_id}", file_id=file_id), FileResponse)

    async def delete(self, file_id: str) -> DeletedObject:
        return await self._transport.delete(path("/files/{file_id}", file_id=file_id), DeletedObject)

    async def retrieve_content(self, file_id: str) -> str:
        """Return the raw contents of a file."""
        return await self._transport.get_text(path("/files/{file_id}/content", file_id=file_id))
