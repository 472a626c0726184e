from ..types.assistants import (
    AssistantRequest,
    AssistantResponse,
    ListAssistantRequest,
    ListAssistantResponse,
    ModifyAssistantRequest,
)
from ..types.shared import DeletedObject
from ._base import APIResource, path


class Assistants(APIResource):
    """Assistants resource."""

    async def create(self, req: AssistantRequest) -> AssistantResponse:
        return await self._transport.post("/assistants", AssistantResponse, req.to_dict())

    async def list(self, req: ListAssistantRequest = None) -> ListAssistantResponse:
        params = req.to_query() if req is not None else None
        return await self._transport.get("/assistants", ListAssistantResponse, params)

    async def retrieve(self, assistant_id: str) -> AssistantResponse:
        return await self._transport.get(
            path("/assistants/{assistant_id}", assistant_id=assistant_id), AssistantResponse
        )

    async def modify(self, assistant_id: str, req: ModifyAssistantRequest) -> AssistantResponse:
        return await self._transport.post(
            path("/assistants/{assistant_id}", assistant_id=assistant_id),
            AssistantResponse,
            req.to_dict(),
        )

    async def delete(self, assistant_id: str) -> DeletedObject:
        return await self._transport.delete(
            path("/assistants/{assistant_id}", assistant_id=assistant_id), DeletedObject
        )
