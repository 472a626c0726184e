from ..core.errors import InvalidArgumentError
from ..core.streaming import EventStream
from ..core.transport import HTTPTransport
from ..types.chat import ChatResponse, ChatStreamResponse, CreateChatRequest
from ._base import APIResource


class Completions(APIResource):
    """chat.completions resource."""

    async def create(self, req: CreateChatRequest) -> ChatResponse:
        """Create a chat completion."""
        if req.stream:
            raise InvalidArgumentError("use create_stream() when `stream` is true")
        return await self._transport.post("/chat/completions", ChatResponse, req.to_dict())

    async def create_stream(self, req: CreateChatRequest) -> EventStream[ChatStreamResponse]:
        """Create a chat completion delivered as a stream of chunks."""
        if not req.stream:
            raise InvalidArgumentError("create_stream() requires `stream` to be true")
        return await self._transport.post_stream("/chat/completions", ChatStreamResponse, req.to_dict())


class Chat:
    """chat resource namespace."""

    def __init__(self, transport: HTTPTransport):
        self.completions = Completions(transport)
