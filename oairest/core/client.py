"""
Main API client.

Usage:
    async with Client(api_key="sk-...") as client:
        reply = await client.chat.completions.create(
            CreateChatRequest(model="gpt-4o-mini", messages=[ChatMessage.user("Hello!")])
        )

        stream = await client.chat.completions.create_stream(
            CreateChatRequest(model="gpt-4o-mini", messages=[ChatMessage.user("Hello!")], stream=True)
        )
        async with stream:
            async for chunk in stream:
                print(chunk.choices[0].delta.content or "", end="")
"""

from typing import Optional

import httpx

from ..resources import (
    Assistants,
    Audio,
    Batches,
    Chat,
    Completions,
    Embeddings,
    Files,
    FineTuning,
    Images,
    Messages,
    Models,
    Moderations,
    Runs,
    Threads,
    Uploads,
)
from .errors import InvalidArgumentError
from .transport import API_BASE, HTTPTransport


class Client:
    """Owns one HTTP transport and exposes every resource namespace on it."""

    def __init__(
        self,
        api_key: str,
        organization: str = None,
        base_url: str = API_BASE,
        timeout: Optional[float] = None,
        default_headers: dict = None,
        http_client: httpx.AsyncClient = None,
    ):
        self._transport = HTTPTransport(
            api_key=api_key,
            organization=organization,
            base_url=base_url,
            timeout=timeout,
            default_headers=default_headers,
            http_client=http_client,
        )

        self.chat = Chat(self._transport)
        self.completions = Completions(self._transport)
        self.embeddings = Embeddings(self._transport)
        self.images = Images(self._transport)
        self.audio = Audio(self._transport)
        self.files = Files(self._transport)
        self.fine_tuning = FineTuning(self._transport)
        self.moderations = Moderations(self._transport)
        self.models = Models(self._transport)
        self.assistants = Assistants(self._transport)
        self.threads = Threads(self._transport)
        self.messages = Messages(self._transport)
        self.runs = Runs(self._transport)
        self.batches = Batches(self._transport)
        self.uploads = Uploads(self._transport)

    @classmethod
    def from_env(cls, **kwargs) -> "Client":
        """Build a client from OPENAI_* environment variables (and a .env file)."""
        from ..config import Config

        Config.load()
        if not Config.API_KEY:
            raise InvalidArgumentError("OPENAI_API_KEY is not set")
        options = {
            "api_key": Config.API_KEY,
            "organization": Config.ORGANIZATION,
            "base_url": Config.BASE_URL,
        }
        # OPENAI_TIMEOUT configures the client built here, not a supplied one.
        if kwargs.get("http_client") is None:
            options["timeout"] = Config.TIMEOUT
        options.update(kwargs)
        return cls(**options)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    def __repr__(self):
        return f"Client(base_url={self.base_url!r})"

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()
