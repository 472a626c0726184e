from typing import Union

from ..core.errors import InvalidArgumentError
from ..core.transport import HTTPTransport
from ..types.audio import (
    CreateSpeechRequest,
    CreateTranscriptionRequest,
    CreateTranslationRequest,
    SttResponse,
    SttResponseFormat,
    is_json_format,
)
from ._base import APIResource

SttRequest = Union[CreateTranscriptionRequest, CreateTranslationRequest]


def _require_json(req: SttRequest) -> None:
    if not is_json_format(req.response_format):
        fmt = SttResponseFormat(req.response_format).value
        raise InvalidArgumentError(f"response_format {fmt} returns text; use create_text()")


def _require_text(req: SttRequest) -> None:
    if is_json_format(req.response_format):
        raise InvalidArgumentError(
            "create_text() needs response_format text, srt or vtt; use create() for JSON"
        )


class _SpeechToText(APIResource):
    route = ""

    async def create(self, req: SttRequest) -> SttResponse:
        """Upload audio and decode the JSON (or verbose_json) result."""
        _require_json(req)
        data, files = req.to_form()
        return await self._transport.post_form(self.route, SttResponse, data, files)

    async def create_text(self, req: SttRequest) -> str:
        """Upload audio and return the text, srt or vtt result as-is."""
        _require_text(req)
        data, files = req.to_form()
        return await self._transport.post_form_text(self.route, data, files)


class Transcriptions(_SpeechToText):
    """audio.transcriptions resource."""

    route = "/audio/transcriptions"


class Translations(_SpeechToText):
    """audio.translations resource (into English)."""

    route = "/audio/translations"


class Speech(APIResource):
    """audio.speech resource."""

    async def create(self, req: CreateSpeechRequest, path: str) -> None:
        """Generate audio from text and write it to ``path``."""
        await self._transport.post_to_file("/audio/speech", req.to_dict(), path)


class Audio:
    """audio resource namespace."""

    def __init__(self, transport: HTTPTransport):
        self.speech = Speech(transport)
        self.transcriptions = Transcriptions(transport)
        self.translations = Translations(transport)
