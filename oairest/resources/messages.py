from ..types.messages import (
    CreateMessageRequest,
    ListMessageRequest,
    ListMessageResponse,
    MessageResponse,
    ModifyMessageRequest,
)
from ..types.shared import DeletedObject
from ._base import APIResource, path

_COLLECTION = "/threads/{thread_id}/messages"
_ITEM = "/threads/{thread_id}/messages/{message_id}"


class Messages(APIResource):
    """Messages within a thread."""

    async def create(self, thread_id: str, req: CreateMessageRequest) -> MessageResponse:
        return await self._transport.post(
            path(_COLLECTION, thread_id=thread_id), MessageResponse, req.to_dict()
        )

    async def list(self, thread_id: str, req: ListMessageRequest = None) -> ListMessageResponse:
        params = req.to_query() if req is not None else None
        return await self._transport.get(path(_COLLECTION, thread_id=thread_id), ListMessageResponse, params)

    async def retrieve(self, thread_id: str, message_id: str) -> MessageResponse:
        return await self._transport.get(
            path(_ITEM, thread_id=thread_id, message_id=message_id), MessageResponse
        )

    async def modify(self, thread_id: str, message_id: str, req: ModifyMessageRequest) -> MessageResponse:
        return await self._transport.post(
            path(_ITEM, thread_id=thread_id, message_id=message_id), MessageResponse, req.to_dict()
        )

    async def delete(self, thread_id: str, message_id: str) -> DeletedObject:
        return await self._transport.delete(
            path(_ITEM, thread_id=thread_id, message_id=message_id), DeletedObject
        )
