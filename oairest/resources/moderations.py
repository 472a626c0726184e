from ..types.moderations import CreateModerationRequest, ModerationResponse
from ._base import APIResource


class Moderations(APIResource):
    """Moderations resource."""

    async def create(self, req: CreateModerationRequest) -> ModerationResponse:
        """Classify whether text or images are potentially harmful."""
        return await self._transport.post("/moderations", ModerationResponse, req.to_dict())
