import asyncio
import json

import httpx
import pytest

from oairest import Client

API_KEY = "sk-test"


class SSEBody(httpx.AsyncByteStream):
    """Chunked event-stream body that can fail or hang after its chunks."""

    def __init__(self, chunks, fail_with=None, hang=False):
        self.chunks = [c.encode() if isinstance(c, str) else c for c in chunks]
        self.fail_with = fail_with
        self.hang = hang
        self.closed = False
        self.sent = 0

    async def __aiter__(self):
        for chunk in self.chunks:
            self.sent += 1
            yield chunk
        if self.fail_with is not None:
            raise self.fail_with
        if self.hang:
            await asyncio.Event().wait()

    async def aclose(self):
        self.closed = True


def sse(*payloads) -> str:
    """Frame each payload as a data-only event."""
    return "".join(f"data: {p if isinstance(p, str) else json.dumps(p)}\n\n" for p in payloads)


def json_response(payload, status_code=200):
    return httpx.Response(status_code, json=payload)


def event_stream_response(body: SSEBody, status_code=200):
    return httpx.Response(status_code, headers={"content-type": "text/event-stream"}, stream=body)


class Recorder:
    """MockTransport handler that records requests and replays a canned response."""

    def __init__(self, response=None):
        self.response = response if response is not None else json_response({})
        self.requests = []

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        if callable(self.response):
            return self.response(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
async def client(recorder):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    async with Client(api_key=API_KEY, http_client=http_client) as c:
        yield c
    await http_client.aclose()
