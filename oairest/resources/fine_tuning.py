from ..core.transport import HTTPTransport
from ..types.fine_tuning import (
    CheckpointList,
    CreateFineTuningRequest,
    FineTuningEventList,
    FineTuningJob,
    FineTuningJobList,
    ListFineTuningRequest,
)
from ._base import APIResource, path


def _query(req: ListFineTuningRequest = None) -> dict:
    return req.to_query() if req is not None else None


class Jobs(APIResource):
    """fine_tuning.jobs resource."""

    async def create(self, req: CreateFineTuningRequest) -> FineTuningJob:
        """Create a job that fine-tunes a model from a training file."""
        return await self._transport.post("/fine_tuning/jobs", FineTuningJob, req.to_dict())

    async def list(self, req: ListFineTuningRequest = None) -> FineTuningJobList:
        return await self._transport.get("/fine_tuning/jobs", FineTuningJobList, _query(req))

    async def retrieve(self, job_id: str) -> FineTuningJob:
        return await self._transport.get(
            path("/fine_tuning/jobs/{job_id}", job_id=job_id), FineTuningJob
        )

    async def cancel(self, job_id: str) -> FineTuningJob:
        """Immediately cancel a job."""
        return await self._transport.post(
            path("/fine_tuning/jobs/{job_id}/cancel", job_id=job_id), FineTuningJob
        )

    async def list_events(self, job_id: str, req: ListFineTuningRequest = None) -> FineTuningEventList:
        """Status updates for a job."""
        return await self._transport.get(
            path("/fine_tuning/jobs/{job_id}/events", job_id=job_id), FineTuningEventList, _query(req)
        )

    async def list_checkpoints(self, job_id: str, req: ListFineTuningRequest = None) -> CheckpointList:
        return await self._transport.get(
            path("/fine_tuning/jobs/{job_id}/checkpoints", job_id=job_id), CheckpointList, _query(req)
        )


class FineTuning:
    """fine_tuning resource namespace."""

    def __init__(self, transport: HTTPTransport):
        self.jobs = Jobs(transport)
