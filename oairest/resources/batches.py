from ..types.batches import BatchResponse, CreateBatchRequest, ListBatchRequest, ListBatchResponse
from ._base import APIResource, path


class Batches(APIResource):
    """Batches resource: asynchronous groups of requests."""

    async def create(self, req: CreateBatchRequest) -> BatchResponse:
        """Create and execute a batch from an uploaded file of requests."""
        return await self._transport.post("/batches", BatchResponse, req.to_dict())

    async def retrieve(self, batch_id: str) -> BatchResponse:
        return await self._transport.get(path("/batches/{batch_id}", batch_id=batch_id), BatchResponse)

    async def cancel(self, batch_id: str) -> BatchResponse:
        """Cancels an in-progress batch."""
        return await self._transport.post(path("/batches/{batch_id}/cancel", batch_id=batch_id), BatchResponse)

    async def list(self, req: ListBatchRequest = None) -> ListBatchResponse:
        params = req.to_query() if req is not None else None
        return await self._transport.get("/batches", ListBatchResponse, params)
