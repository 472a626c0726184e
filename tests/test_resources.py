import json

import httpx
import pytest

from oairest.core.errors import InvalidArgumentError, NotFoundError
from oairest.core.models import FileUpload
from oairest.types.assistants import AssistantRequest, ListAssistantRequest, ModifyAssistantRequest
from oairest.types.batches import CreateBatchRequest, ListBatchRequest
from oairest.types.chat import ChatMessage, CreateChatRequest
from oairest.types.completions import CreateCompletionRequest
from oairest.types.embeddings import CreateEmbeddingRequest
from oairest.types.files import UploadFileRequest
from oairest.types.fine_tuning import CreateFineTuningRequest, Hyperparameters, ListFineTuningRequest
from oairest.types.images import CreateImageEditRequest, CreateImageRequest
from oairest.types.messages import CreateMessageRequest, ListMessageRequest
from oairest.types.moderations import CreateModerationRequest
from oairest.types.runs import CreateRunRequest
from oairest.types.threads import CreateThreadRequest
from oairest.types.uploads import AddUploadPartRequest, CompleteUploadRequest, CreateUploadRequest

from .conftest import SSEBody, event_stream_response, json_response, sse

CHAT = {
    "id": "chatcmpl-1",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-4o-mini",
    "choices": [
        {"index": 0, "message": {"role": "assistant", "content": "Hi!"}, "finish_reason": "stop"}
    ],
    "usage": {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7},
}

FILE = {
    "id": "file-1",
    "object": "file",
    "bytes": 120,
    "created_at": 1700000000,
    "filename": "train.jsonl",
    "purpose": "fine-tune",
}

JOB = {
    "id": "ftjob-1",
    "object": "fine_tuning.job",
    "model": "gpt-4o-mini-2024-07-18",
    "created_at": 1700000000,
    "status": "queued",
    "training_file": "file-1",
    "hyperparameters": {"n_epochs": "auto", "batch_size": 4},
    "result_files": [],
}

BATCH = {
    "id": "batch_1",
    "object": "batch",
    "endpoint": "/v1/chat/completions",
    "input_file_id": "file-1",
    "completion_window": "24h",
    "status": "validating",
    "created_at": 1700000000,
    "request_counts": {"total": 0, "completed": 0, "failed": 0},
}

UPLOAD = {
    "id": "upload_1",
    "object": "upload",
    "bytes": 2147483648,
    "created_at": 1700000000,
    "filename": "training_examples.jsonl",
    "purpose": "fine-tune",
    "status": "pending",
    "expires_at": 1700003600,
}


def chat_request(**kwargs):
    return CreateChatRequest(model="gpt-4o-mini", messages=[ChatMessage.user("Hello")], **kwargs)


class TestChat:
    async def test_create(self, client, recorder):
        recorder.response = json_response(CHAT)

        response = await client.chat.completions.create(chat_request(temperature=0.5))

        assert response.choices[0].message.content == "Hi!"
        assert response.usage.total_tokens == 7
        assert recorder.last.url.path == "/v1/chat/completions"
        assert recorder.last_json() == {
            "model": "gpt-4o-mini",
            "messages": [{"role": "user", "content": "Hello"}],
            "temperature": 0.5,
        }

    async def test_create_sends_tool_schema_nulls(self, client, recorder):
        recorder.response = json_response(CHAT)
        tool = {
            "type": "function",
            "function": {
                "name": "lookup",
                "parameters": {
                    "type": "object",
                    "properties": {"x": {"type": ["string", "null"], "default": None}},
                },
            },
        }

        await client.chat.completions.create(chat_request(tools=[tool]))

        assert recorder.last_json()["tools"] == [tool]

    async def test_create_rejects_stream(self, client, recorder):
        with pytest.raises(InvalidArgumentError):
            await client.chat.completions.create(chat_request(stream=True))
        assert recorder.requests == []

    async def test_create_stream_requires_stream_flag(self, client, recorder):
        with pytest.raises(InvalidArgumentError):
            await client.chat.completions.create_stream(chat_request())
        assert recorder.requests == []

    async def test_create_stream(self, client, recorder):
        chunk = {
            "id": "chatcmpl-1",
            "object": "chat.completion.chunk",
            "created": 1700000000,
            "model": "gpt-4o-mini",
        }
        recorder.response = event_stream_response(
            SSEBody(
                [
                    sse(
                        dict(chunk, choices=[{"index": 0, "delta": {"role": "assistant", "content": "Hel"}}]),
                        dict(chunk, choices=[{"index": 0, "delta": {"content": "lo"}, "finish_reason": "stop"}]),
                        "[DONE]",
                    )
                ]
            )
        )

        stream = await client.chat.completions.create_stream(chat_request(stream=True))
        chunks = await stream.collect()

        assert "".join(c.choices[0].delta.content for c in chunks) == "Hello"
        assert recorder.last_json()["stream"] is True

    def test_tool_message_needs_call_id(self):
        with pytest.raises(InvalidArgumentError):
            ChatMessage(role="tool", content="42")
        assert ChatMessage.tool("42", tool_call_id="call_1").tool_call_id == "call_1"

    def test_request_validation(self):
        with pytest.raises(InvalidArgumentError):
            chat_request(temperature=2.5)
        with pytest.raises(InvalidArgumentError):
            chat_request(stop=["a", "b", "c", "d", "e"])
        with pytest.raises(InvalidArgumentError):
            chat_request(stream_options={"include_usage": True})
        with pytest.raises(InvalidArgumentError):
            CreateChatRequest(model="gpt-4o-mini", messages=[])


class TestCompletions:
    async def test_create(self, client, recorder):
        recorder.response = json_response(
            {
                "id": "cmpl-1",
                "object": "text_completion",
                "created": 1700000000,
                "model": "gpt-3.5-turbo-instruct",
                "choices": [{"text": " world", "index": 0, "finish_reason": "length"}],
            }
        )

        response = await client.completions.create(
            CreateCompletionRequest(model="gpt-3.5-turbo-instruct", prompt="hello", max_tokens=1)
        )

        assert response.choices[0].text == " world"
        assert recorder.last.url.path == "/v1/completions"

    def test_best_of_must_cover_n(self):
        with pytest.raises(InvalidArgumentError):
            CreateCompletionRequest(model="m", n=3, best_of=2)


async def test_embeddings(client, recorder):
    recorder.response = json_response(
        {
            "object": "list",
            "data": [{"object": "embedding", "index": 0, "embedding": [0.1, -0.2]}],
            "model": "text-embedding-3-small",
            "usage": {"prompt_tokens": 2, "total_tokens": 2},
        }
    )

    response = await client.embeddings.create(
        CreateEmbeddingRequest(model="text-embedding-3-small", input=["hi"], dimensions=2)
    )

    assert response.data[0].embedding == [0.1, -0.2]
    assert recorder.last.url.path == "/v1/embeddings"


class TestImages:
    async def test_create(self, client, recorder):
        recorder.response = json_response({"created": 1, "data": [{"url": "https://img/1.png"}]})

        response = await client.images.create(CreateImageRequest(prompt="a cat", n=1, size="1024x1024"))

        assert response.data[0].url == "https://img/1.png"
        assert recorder.last.url.path == "/v1/images/generations"

    async def test_edit_sends_image_and_mask(self, client, recorder):
        recorder.response = json_response({"created": 1, "data": [{"b64_json": "AAAA"}]})
        req = CreateImageEditRequest(
            image=FileUpload(b"image-bytes", "image.png", "image/png"),
            mask=FileUpload(b"mask-bytes", "mask.png", "image/png"),
            prompt="add a hat",
            response_format="b64_json",
        )

        await client.images.create_edit(req)

        body = recorder.last.content
        assert recorder.last.url.path == "/v1/images/edits"
        assert b'name="mask"; filename="mask.png"' in body
        assert b"mask-bytes" in body
        assert b"image-bytes" in body

    @pytest.mark.parametrize("n", [0, 11])
    def test_n_range(self, n):
        with pytest.raises(InvalidArgumentError):
            CreateImageRequest(prompt="a cat", n=n)


class TestFiles:
    async def test_upload(self, client, recorder):
        recorder.response = json_response(FILE)

        file = await client.files.upload(
            UploadFileRequest(file=FileUpload(b"{}\n", "train.jsonl"), purpose="fine-tune")
        )

        assert file.id == "file-1"
        assert recorder.last.method == "POST"
        assert b'name="purpose"\r\n\r\nfine-tune' in recorder.last.content

    async def test_list_retrieve_delete_content(self, client, recorder):
        def respond(request):
            if request.method == "DELETE":
                return json_response({"id": "file-1", "object": "file", "deleted": True})
            if request.url.path.endswith("/content"):
                return httpx.Response(200, text="line-1\nline-2\n")
            if request.url.path == "/v1/files":
                return json_response({"object": "list", "data": [FILE]})
            return json_response(FILE)

        recorder.response = respond

        assert (await client.files.list()).data[0].filename == "train.jsonl"
        assert (await client.files.retrieve("file-1")).bytes == 120
        assert (await client.files.delete("file-1")).deleted is True
        assert await client.files.retrieve_content("file-1") == "line-1\nline-2\n"
        assert [r.url.path for r in recorder.requests] == [
            "/v1/files",
            "/v1/files/file-1",
            "/v1/files/file-1",
            "/v1/files/file-1/content",
        ]

    async def test_empty_id_is_rejected(self, client, recorder):
        with pytest.raises(InvalidArgumentError):
            await client.files.retrieve("")
        assert recorder.requests == []


class TestFineTuning:
    async def test_create(self, client, recorder):
        recorder.response = json_response(JOB)
        req = CreateFineTuningRequest(
            model="gpt-4o-mini-2024-07-18",
            training_file="file-1",
            hyperparameters=Hyperparameters(n_epochs=3),
        )

        job = await client.fine_tuning.jobs.create(req)

        assert job.hyperparameters.n_epochs == "auto"
        assert job.hyperparameters.batch_size == 4
        assert recorder.last_json()["hyperparameters"] == {"n_epochs": 3}

    async def test_routes(self, client, recorder):
        def respond(request):
            path = request.url.path
            if path.endswith("/events"):
                return json_response(
                    {
                        "object": "list",
                        "data": [
                            {
                                "id": "ev-1",
                                "object": "fine_tuning.job.event",
                                "created_at": 1,
                                "level": "info",
                                "message": "Job started",
                            }
                        ],
                        "has_more": False,
                    }
                )
            if path.endswith("/checkpoints"):
                return json_response({"object": "list", "data": [], "has_more": False})
            if path == "/v1/fine_tuning/jobs":
                return json_response({"object": "list", "data": [JOB], "has_more": True})
            return json_response(JOB)

        recorder.response = respond
        jobs = client.fine_tuning.jobs

        assert (await jobs.list(ListFineTuningRequest(limit=2))).has_more is True
        assert (await jobs.retrieve("ftjob-1")).id == "ftjob-1"
        assert (await jobs.cancel("ftjob-1")).status == "queued"
        assert (await jobs.list_events("ftjob-1")).data[0].message == "Job started"
        assert (await jobs.list_checkpoints("ftjob-1", ListFineTuningRequest(after="cp-0"))).data == []

        requests = recorder.requests
        assert requests[0].url.params["limit"] == "2"
        assert requests[2].method == "POST"
        assert requests[2].url.path == "/v1/fine_tuning/jobs/ftjob-1/cancel"
        assert requests[4].url.params["after"] == "cp-0"

    def test_hyperparameters_accept_auto_only(self):
        with pytest.raises(InvalidArgumentError):
            Hyperparameters(n_epochs="many")


async def test_moderations(client, recorder):
    recorder.response = json_response(
        {
            "id": "modr-1",
            "model": "omni-moderation-latest",
            "results": [
                {
                    "flagged": False,
                    "categories": {"hate": False, "self-harm/intent": False},
                    "category_scores": {"hate": 0.001, "self-harm/intent": 0.0},
                }
            ],
        }
    )

    response = await client.moderations.create(
        CreateModerationRequest(
            input=[CreateModerationRequest.text_part("hi"), CreateModerationRequest.image_part("https://x/y.png")]
        )
    )

    assert response.results[0].categories["self-harm/intent"] is False
    assert recorder.last_json()["input"][1] == {"type": "image_url", "image_url": {"url": "https://x/y.png"}}


class TestModels:
    async def test_list_and_retrieve(self, client, recorder):
        model = {"id": "gpt-4o", "object": "model", "created": 1, "owned_by": "system"}

        def respond(request):
            if request.url.path == "/v1/models":
                return json_response({"object": "list", "data": [model]})
            return json_response(model)

        recorder.response = respond

        assert (await client.models.list()).data[0].id == "gpt-4o"
        assert (await client.models.retrieve("gpt-4o")).owned_by == "system"

    async def test_missing_model(self, client, recorder):
        recorder.response = json_response(
            {"error": {"message": "The model 'nope' does not exist", "type": "invalid_request_error", "param": "model", "code": "model_not_found"}},
            status_code=404,
        )

        with pytest.raises(NotFoundError) as excinfo:
            await client.models.retrieve("nope")

        assert excinfo.value.code == "model_not_found"

    async def test_delete_fine_tuned_model(self, client, recorder):
        recorder.response = json_response({"id": "ft:gpt-4o-mini:acme", "object": "model", "deleted": True})

        result = await client.models.delete("ft:gpt-4o-mini:acme")

        assert result.deleted is True
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.raw_path == b"/v1/models/ft%3Agpt-4o-mini%3Aacme"


class TestAssistants:
    ASSISTANT = {
        "id": "asst_1",
        "object": "assistant",
        "created_at": 1,
        "model": "gpt-4o",
        "name": "Math Tutor",
        "tools": [{"type": "code_interpreter"}],
        "metadata": {},
        "response_format": "auto",
    }

    async def test_create_and_modify(self, client, recorder):
        recorder.response = lambda request: json_response(self.ASSISTANT)

        created = await client.assistants.create(
            AssistantRequest(model="gpt-4o", name="Math Tutor", tools=[{"type": "code_interpreter"}])
        )
        await client.assistants.modify("asst_1", ModifyAssistantRequest(instructions="Be brief."))

        assert created.tools == [{"type": "code_interpreter"}]
        assert recorder.requests[1].url.path == "/v1/assistants/asst_1"
        assert recorder.last_json() == {"instructions": "Be brief."}

    async def test_list_query(self, client, recorder):
        recorder.response = json_response({"object": "list", "data": [self.ASSISTANT], "has_more": False})

        await client.assistants.list(ListAssistantRequest(limit=5, order="asc"))

        assert recorder.last.url.params["limit"] == "5"
        assert recorder.last.url.params["order"] == "asc"

    def test_tool_validation(self):
        with pytest.raises(InvalidArgumentError):
            AssistantRequest(model="gpt-4o", tools=[{"type": "browser"}])
        with pytest.raises(InvalidArgumentError):
            AssistantRequest(model="gpt-4o", tools=[{"type": "function", "function": {}}])


class TestThreadsMessagesRuns:
    async def test_thread_with_initial_messages(self, client, recorder):
        recorder.response = json_response({"id": "thread_1", "object": "thread", "created_at": 1, "metadata": {}})

        thread = await client.threads.create(
            CreateThreadRequest(messages=[CreateMessageRequest(content="Hi")], metadata={"user": "u1"})
        )

        assert thread.id == "thread_1"
        assert recorder.last_json() == {
            "messages": [{"content": "Hi", "role": "user"}],
            "metadata": {"user": "u1"},
        }

    async def test_message_routes(self, client, recorder):
        message = {
            "id": "msg_1",
            "object": "thread.message",
            "created_at": 1,
            "thread_id": "thread_1",
            "role": "user",
            "content": [{"type": "text", "text": {"value": "Hi", "annotations": []}}],
        }

        def respond(request):
            if request.method == "GET" and request.url.path.endswith("/messages"):
                return json_response({"object": "list", "data": [message], "has_more": False})
            if request.method == "DELETE":
                return json_response({"id": "msg_1", "object": "thread.message.deleted", "deleted": True})
            return json_response(message)

        recorder.response = respond

        created = await client.messages.create("thread_1", CreateMessageRequest(content="Hi"))
        listed = await client.messages.list("thread_1", ListMessageRequest(run_id="run_1"))
        deleted = await client.messages.delete("thread_1", "msg_1")

        assert created.text == "Hi"
        assert listed.data[0].id == "msg_1"
        assert deleted.deleted is True
        assert recorder.requests[0].url.path == "/v1/threads/thread_1/messages"
        assert recorder.requests[1].url.params["run_id"] == "run_1"
        assert recorder.requests[2].url.path == "/v1/threads/thread_1/messages/msg_1"

    async def test_run_routes(self, client, recorder):
        run = {
            "id": "run_1",
            "object": "thread.run",
            "created_at": 1,
            "thread_id": "thread_1",
            "assistant_id": "asst_1",
            "status": "queued",
        }
        recorder.response = lambda request: json_response(run)

        await client.runs.create("thread_1", CreateRunRequest(assistant_id="asst_1"))
        await client.runs.retrieve("thread_1", "run_1")
        cancelled = await client.runs.cancel("thread_1", "run_1")

        assert cancelled.status == "queued"
        assert [(r.method, r.url.path) for r in recorder.requests] == [
            ("POST", "/v1/threads/thread_1/runs"),
            ("GET", "/v1/threads/thread_1/runs/run_1"),
            ("POST", "/v1/threads/thread_1/runs/run_1/cancel"),
        ]

    def test_message_role(self):
        with pytest.raises(InvalidArgumentError):
            CreateMessageRequest(content="Hi", role="system")


class TestBatches:
    async def test_create_and_list(self, client, recorder):
        def respond(request):
            if request.method == "GET" and request.url.path == "/v1/batches":
                return json_response({"object": "list", "data": [BATCH], "has_more": False})
            return json_response(BATCH)

        recorder.response = respond

        batch = await client.batches.create(
            CreateBatchRequest(input_file_id="file-1", endpoint="/v1/chat/completions")
        )
        batches = await client.batches.list(ListBatchRequest(limit=10))

        assert batch.request_counts.total == 0
        assert batches.data[0].id == "batch_1"
        assert recorder.requests[0].url.path == "/v1/batches"
        assert recorder.last.url.params["limit"] == "10"

    def test_completion_window_is_fixed(self):
        with pytest.raises(InvalidArgumentError):
            CreateBatchRequest(input_file_id="file-1", endpoint="/v1/chat/completions", completion_window="48h")

    def test_unknown_endpoint(self):
        with pytest.raises(InvalidArgumentError):
            CreateBatchRequest(input_file_id="file-1", endpoint="/v1/images/generations")


class TestUploads:
    async def test_lifecycle(self, client, recorder):
        def respond(request):
            path = request.url.path
            if path.endswith("/parts"):
                return json_response({"id": "part_1", "object": "upload.part", "created_at": 1, "upload_id": "upload_1"})
            if path.endswith("/complete"):
                return json_response(dict(UPLOAD, status="completed", file=FILE))
            if path.endswith("/cancel"):
                return json_response(dict(UPLOAD, status="cancelled"))
            return json_response(UPLOAD)

        recorder.response = respond

        upload = await client.uploads.create(
            CreateUploadRequest(
                filename="training_examples.jsonl",
                purpose="fine-tune",
                bytes=2147483648,
                mime_type="text/jsonl",
            )
        )
        part = await client.uploads.add_part(upload.id, AddUploadPartRequest(data=FileUpload(b"{}\n", "part-1")))
        done = await client.uploads.complete(upload.id, CompleteUploadRequest(part_ids=[part.id]))
        cancelled = await client.uploads.cancel(upload.id)

        assert done.file.id == "file-1"
        assert cancelled.status == "cancelled"
        assert recorder.requests[0].url.path == "/v1/uploads"
        assert recorder.requests[1].url.path == "/v1/uploads/upload_1/parts"
        assert b'name="data"; filename="part-1"' in recorder.requests[1].content
        assert json.loads(recorder.requests[2].content) == {"part_ids": ["part_1"]}

    def test_part_ids_required(self):
        with pytest.raises(InvalidArgumentError):
            CompleteUploadRequest(part_ids=[])
