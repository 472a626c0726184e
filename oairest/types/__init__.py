from .assistants import AssistantRequest, AssistantResponse, ListAssistantRequest, ListAssistantResponse, ModifyAssistantRequest
from .audio import (
    CreateSpeechRequest,
    CreateTranscriptionRequest,
    CreateTranslationRequest,
    Language,
    SttResponse,
    SttResponseFormat,
    TtsResponseFormat,
    Voice,
)
from .batches import BatchResponse, CreateBatchRequest, ListBatchRequest, ListBatchResponse
from .chat import ChatMessage, ChatResponse, ChatStreamResponse, CreateChatRequest, Role
from .completions import CompletionResponse, CreateCompletionRequest
from .embeddings import CreateEmbeddingRequest, EmbeddingResponse
from .files import FileListResponse, FilePurpose, FileResponse, UploadFileRequest
from .fine_tuning import (
    CheckpointList,
    CreateFineTuningRequest,
    FineTuningEventList,
    FineTuningJob,
    FineTuningJobList,
    Hyperparameters,
    ListFineTuningRequest,
)
from .images import CreateImageEditRequest, CreateImageRequest, CreateImageVariationRequest, ImageResponse
from .messages import CreateMessageRequest, ListMessageRequest, ListMessageResponse, MessageResponse, ModifyMessageRequest
from .models import ListModelResponse, ModelResponse
from .moderations import CreateModerationRequest, ModerationResponse
from .runs import CreateRunRequest, ListRunRequest, ListRunResponse, ModifyRunRequest, RunResponse
from .shared import DeletedObject, PageRequest, Usage
from .threads import CreateThreadRequest, ModifyThreadRequest, ThreadResponse
from .uploads import AddUploadPartRequest, CompleteUploadRequest, CreateUploadRequest, UploadPartResponse, UploadResponse
