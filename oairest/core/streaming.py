"""
Server-sent event decoding.

``EventStream`` turns a live ``text/event-stream`` response into typed items.
A background task reads the body, decodes each ``message`` event and forwards
the result through a bounded queue; the caller consumes it as an async
iterator. The task owns the connection and always closes it on exit.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, AsyncIterator, Generic, List, Optional, TypeVar, Union

import httpx

from .errors import DeserializationError, OpenAIError, StreamError
from .models import parse_json

logger = logging.getLogger(__name__)

T = TypeVar("T")

DONE_SENTINEL = "[DONE]"
DEFAULT_QUEUE_SIZE = 32

_END = object()


class StreamState(str, Enum):
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class ServerSentEvent:
    """One dispatched SSE event."""
    event: str = "message"
    data: str = ""
    id: Optional[str] = None
    retry: Optional[int] = None


class SSEDecoder:
    """Incremental SSE parser fed one line at a time (line terminators stripped)."""

    def __init__(self):
        self._event: Optional[str] = None
        self._data: List[str] = []
        self._last_event_id: Optional[str] = None
        self._retry: Optional[int] = None

    def decode(self, line: str) -> Optional[ServerSentEvent]:
        """Feed a line; returns an event when a blank line dispatches one."""
        if not line:
            if not self._data and self._event is None and self._retry is None:
                return None
            sse = ServerSentEvent(
                event=self._event or "message",
                data="\n".join(self._data),
                id=self._last_event_id,
                retry=self._retry,
            )
            self._event = None
            self._data = []
            self._retry = None
            return sse

        if line.startswith(":"):
            return None

        name, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]

        if name == "data":
            self._data.append(value)
        elif name == "event":
            self._event = value
        elif name == "id":
            if "\0" not in value:
                self._last_event_id = value
        elif name == "retry" and value.isdigit():
            self._retry = int(value)
        return None


class _Channel:
    """State shared between the consumer handle and the producer task."""

    __slots__ = ("queue", "state")

    def __init__(self, maxsize: int):
        self.queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self.state = StreamState.CONNECTING


async def _forward_events(response: httpx.Response, cast: Any, channel: _Channel) -> None:
    # Holds no reference to the EventStream so that dropping the handle
    # lets it be collected (and its finalizer cancel this task).
    decoder = SSEDecoder()
    try:
        done = False
        try:
            async for line in response.aiter_lines():
                sse = decoder.decode(line)
                if sse is None or sse.event != "message":
                    continue
                if sse.data == DONE_SENTINEL:
                    done = True
                    break
                try:
                    item = parse_json(cast, sse.data)
                except DeserializationError as e:
                    logger.debug("Undecodable stream record: %s", e)
                    item = e
                await channel.queue.put(item)
        except (httpx.HTTPError, httpx.StreamError) as e:
            logger.warning("Event stream failed: %s", e)
            await channel.queue.put(StreamError(f"stream failed: {e}"))
        except Exception as e:
            logger.exception("Event stream producer crashed")
            await channel.queue.put(StreamError(f"stream failed: {e}"))
        else:
            if not done:
                logger.warning("Event stream ended before %s", DONE_SENTINEL)
                await channel.queue.put(StreamError(f"stream ended before {DONE_SENTINEL}"))
    finally:
        await response.aclose()
        channel.state = StreamState.CLOSED
        logger.debug("Event stream closed")
    await channel.queue.put(_END)


class EventStream(Generic[T]):
    """
    Consumer handle for a live event stream.

    Iterating yields decoded items in the order the server sent them. A record
    that fails to decode is raised as ``DeserializationError`` in its place;
    the stream stays usable and iterating again continues with the next
    record. A connection failure is raised as ``StreamError`` and ends the
    stream. Use ``results()`` to receive errors as values instead.

    Usage:
        async with await client.chat.completions.create_stream(req) as stream:
            async for chunk in stream:
                print(chunk.choices[0].delta.content or "", end="")
    """

    def __init__(self, cast: Any, max_queue: int = DEFAULT_QUEUE_SIZE):
        self._cast = cast
        self._channel = _Channel(max_queue)
        self._task: Optional[asyncio.Task] = None
        self._exhausted = False

    @property
    def state(self) -> StreamState:
        return self._channel.state

    def _start(self, response: httpx.Response) -> None:
        self._channel.state = StreamState.OPEN
        self._task = asyncio.get_running_loop().create_task(
            _forward_events(response, self._cast, self._channel)
        )

    async def _next(self) -> Union[T, OpenAIError]:
        if self._exhausted:
            raise StopAsyncIteration
        item = await self._channel.queue.get()
        if item is _END:
            self._exhausted = True
            raise StopAsyncIteration
        return item

    def __aiter__(self) -> "EventStream[T]":
        return self

    async def __anext__(self) -> T:
        item = await self._next()
        if isinstance(item, OpenAIError):
            raise item
        return item

    async def results(self) -> AsyncIterator[Union[T, OpenAIError]]:
        """Yield items and error items alike, without raising."""
        while True:
            try:
                item = await self._next()
            except StopAsyncIteration:
                return
            yield item

    async def collect(self) -> List[T]:
        """Consume the whole stream; the first error item is raised."""
        return [item async for item in self]

    async def aclose(self) -> None:
        """Stop consuming. Cancels the producer, which closes the connection."""
        self._exhausted = True
        task = self._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
            # Wake a consumer already waiting in _next on another task.
            with contextlib.suppress(asyncio.QueueFull):
                self._channel.queue.put_nowait(_END)

    async def __aenter__(self) -> "EventStream[T]":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    def __del__(self):
        task = getattr(self, "_task", None)
        if task is not None and not task.done() and not task.get_loop().is_closed():
            task.cancel()

    def __repr__(self):
        return f"EventStream(state={self.state.value})"
