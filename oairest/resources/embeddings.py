from ..types.embeddings import CreateEmbeddingRequest, EmbeddingResponse
from ._base import APIResource


class Embeddings(APIResource):
    """Embeddings resource."""

    async def create(self, req: CreateEmbeddingRequest) -> EmbeddingResponse:
        return await self._transport.post("/embeddings", EmbeddingResponse, req.to_dict())
