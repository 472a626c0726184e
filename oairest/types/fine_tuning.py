from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, Request, check_range, require

# "auto" or an explicit number.
AutoOrNumber = Union[str, int, float]


def _check_auto(value: Optional[AutoOrNumber], name: str) -> None:
    if isinstance(value, str) and value != "auto":
        raise InvalidArgumentError(f"`{name}` must be \"auto\" or a number, got {value!r}")


@dataclass(frozen=True)
class Hyperparameters(BaseModel):
    batch_size: Optional[AutoOrNumber] = None
    learning_rate_multiplier: Optional[AutoOrNumber] = None
    n_epochs: Optional[AutoOrNumber] = None

    def __post_init__(self):
        _check_auto(self.batch_size, "batch_size")
        _check_auto(self.learning_rate_multiplier, "learning_rate_multiplier")
        _check_auto(self.n_epochs, "n_epochs")


@dataclass(frozen=True)
class Wandb(BaseModel):
    project: str
    name: Optional[str] = None
    entity: Optional[str] = None
    tags: Optional[List[str]] = None


@dataclass(frozen=True)
class Integration(BaseModel):
    wandb: Wandb
    type: str = "wandb"


@dataclass(frozen=True)
class CreateFineTuningRequest(Request):
    model: str
    training_file: str
    hyperparameters: Optional[Hyperparameters] = None
    suffix: Optional[str] = None
    validation_file: Optional[str] = None
    integrations: Optional[List[Integration]] = None
    seed: Optional[int] = None

    def validate(self) -> None:
        require(self.model, "model")
        require(self.training_file, "training_file")
        if self.suffix is not None and len(self.suffix) > 64:
            raise InvalidArgumentError("`suffix` must be at most 64 characters")


@dataclass(frozen=True)
class ListFineTuningRequest(Request):
    """Pagination query shared by the job, event and checkpoint listings."""
    after: Optional[str] = None
    limit: Optional[int] = None  # default: 20

    def validate(self) -> None:
        check_range(self.limit, "limit", 1, 100)


@dataclass(frozen=True)
class FineTuningJob(BaseModel):
    id: str
    object: str
    model: str
    created_at: int
    status: str
    training_file: str
    organization_id: Optional[str] = None
    finished_at: Optional[int] = None
    fine_tuned_model: Optional[str] = None
    result_files: Optional[List[str]] = None
    validation_file: Optional[str] = None
    trained_tokens: Optional[int] = None
    hyperparameters: Optional[Hyperparameters] = None
    integrations: Optional[List[Integration]] = None
    seed: Optional[int] = None
    estimated_finish: Optional[int] = None
    error: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class FineTuningJobList(BaseModel):
    object: str
    data: List[FineTuningJob]
    has_more: bool = False


@dataclass(frozen=True)
class FineTuningEvent(BaseModel):
    id: str
    object: str
    created_at: int
    level: str
    message: str
    type: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class FineTuningEventList(BaseModel):
    object: str
    data: List[FineTuningEvent]
    has_more: bool = False


@dataclass(frozen=True)
class Metrics(BaseModel):
    step: Optional[float] = None
    train_loss: Optional[float] = None
    train_mean_token_accuracy: Optional[float] = None
    valid_loss: Optional[float] = None
    valid_mean_token_accuracy: Optional[float] = None
    full_valid_loss: Optional[float] = None
    full_valid_mean_token_accuracy: Optional[float] = None


@dataclass(frozen=True)
class Checkpoint(BaseModel):
    id: str
    object: str
    created_at: int
    fine_tuned_model_checkpoint: str
    fine_tuning_job_id: str
    step_number: int
    metrics: Metrics


@dataclass(frozen=True)
class CheckpointList(BaseModel):
    object: str
    data: List[Checkpoint]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False
