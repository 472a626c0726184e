from ..core.errors import InvalidArgumentError
from ..core.streaming import EventStream
from ..types.completions import CompletionResponse, CreateCompletionRequest
from ._base import APIResource


class Completions(APIResource):
    """Legacy /completions resource."""

    async def create(self, req: CreateCompletionRequest) -> CompletionResponse:
        if req.stream:
            raise InvalidArgumentError("use create_stream() when `stream` is true")
        return await self._transport.post("/completions", CompletionResponse, req.to_dict())

    async def create_stream(self, req: CreateCompletionRequest) -> EventStream[CompletionResponse]:
        if not req.stream:
            raise InvalidArgumentError("create_stream() requires `stream` to be true")
        return await self._transport.post_stream("/completions", CompletionResponse, req.to_dict())
