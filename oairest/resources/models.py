from ..types.models import ListModelResponse, ModelResponse
from ..types.shared import DeletedObject
from ._base import APIResource, path


class Models(APIResource):
    """Models resource."""

    async def list(self) -> ListModelResponse:
        """List available models."""
        return await self._transport.get("/models", ListModelResponse)

    async def retrieve(self, model: str) -> ModelResponse:
        """Retrieve a specific model."""
        return await self._transport.get(path("/models/{model}", model=model), ModelResponse)

    async def delete(self, model: str) -> DeletedObject:
        """Delete a fine-tuned model."""
        return await self._transport.delete(path("/models/{model}", model=model), DeletedObject)
