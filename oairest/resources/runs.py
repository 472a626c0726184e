from ..types.runs import CreateRunRequest, ListRunRequest, ListRunResponse, ModifyRunRequest, RunResponse
from ._base import APIResource, path

_COLLECTION = "/threads/{thread_id}/runs"
_ITEM = "/threads/{thread_id}/runs/{run_id}"


class Runs(APIResource):
    """Runs: executions of an assistant on a thread."""

    async def create(self, thread_id: str, req: CreateRunRequest) -> RunResponse:
        return await self._transport.post(path(_COLLECTION, thread_id=thread_id), RunResponse, req.to_dict())

    async def list(self, thread_id: str, req: ListRunRequest = None) -> ListRunResponse:
        params = req.to_query() if req is not None else None
        return await self._transport.get(path(_COLLECTION, thread_id=thread_id), ListRunResponse, params)

    async def retrieve(self, thread_id: str, run_id: str) -> RunResponse:
        return await self._transport.get(path(_ITEM, thread_id=thread_id, run_id=run_id), RunResponse)

    async def modify(self, thread_id: str, run_id: str, req: ModifyRunRequest) -> RunResponse:
        return await self._transport.post(
            path(_ITEM, thread_id=thread_id, run_id=run_id), RunResponse, req.to_dict()
        )

    async def cancel(self, thread_id: str, run_id: str) -> RunResponse:
        """Cancel a run that is in_progress."""
        return await self._transport.post(
            path(_ITEM + "/cancel", thread_id=thread_id, run_id=run_id), RunResponse
        )
