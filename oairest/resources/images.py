from ..types.images import (
    CreateImageEditRequest,
    CreateImageRequest,
    CreateImageVariationRequest,
    ImageResponse,
)
from ._base import APIResource


class Images(APIResource):
    """Images resource: generation, edits and variations."""

    async def create(self, req: CreateImageRequest) -> ImageResponse:
        """Create an image from a prompt."""
        return await self._transport.post("/images/generations", ImageResponse, req.to_dict())

    async def create_edit(self, req: CreateImageEditRequest) -> ImageResponse:
        """Edit an image given a prompt and an optional mask (multipart upload)."""
        data, files = req.to_form()
        return await self._transport.post_form("/images/edits", ImageResponse, data, files)

    async def create_variation(self, req: CreateImageVariationRequest) -> ImageResponse:
        data, files = req.to_form()
        return await self._transport.post_form("/images/variations", ImageResponse, data, files)
