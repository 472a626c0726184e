from ..types.shared import DeletedObject
from ..types.threads import CreateThreadRequest, ModifyThreadRequest, ThreadResponse
from ._base import APIResource, path


class Threads(APIResource):
    """Threads resource: conversations that assistants interact with."""

    async def create(self, req: CreateThreadRequest = None) -> ThreadResponse:
        body = req.to_dict() if req is not None else {}
        return await self._transport.post("/threads", ThreadResponse, body)

    async def retrieve(self, thread_id: str) -> ThreadResponse:
        return await self._transport.get(path("/threads/{thread_id}", thread_id=thread_id), ThreadResponse)

    async def modify(self, thread_id: str, req: ModifyThreadRequest) -> ThreadResponse:
        """Only ``metadata`` and ``tool_resources`` can be modified."""
        return await self._transport.post(
            path("/threads/{thread_id}", thread_id=thread_id), ThreadResponse, req.to_dict()
        )

    async def delete(self, thread_id: str) -> DeletedObject:
        return await self._transport.delete(path("/threads/{thread_id}", thread_id=thread_id), DeletedObject)
