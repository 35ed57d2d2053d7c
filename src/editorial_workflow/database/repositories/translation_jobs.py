"""Repository for the translation_jobs container (partitioned by /id)."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, cast

from azure.core import MatchConditions
from azure.cosmos.exceptions import CosmosHttpResponseError, CosmosResourceNotFoundError

from editorial_workflow.database.repositories.base import BaseRepository
from editorial_workflow.database.store import TranslationJobStore
from editorial_workflow.exceptions import NotFoundError, TranslationJobError
from editorial_workflow.models.translation import TranslationJob, TranslationJobStatus

_HTTP_PRECONDITION_FAILED = 412


class TranslationJobRepository(BaseRepository[TranslationJob], TranslationJobStore):
    """Cosmos-backed translation job store."""

    container_name = "translation_jobs"
    model_class = TranslationJob

    async def get(self, job_id: str, partition_key: str | None = None) -> TranslationJob:  # type: ignore[override]
        job = await super().get(job_id, partition_key or job_id)
        if job is None:
            raise NotFoundError(f"Translation job {job_id} not found")
        return job

    async def update(self, job: TranslationJob, partition_key: str | None = None) -> TranslationJob:  # type: ignore[override]
        return await super().update(job, partition_key or job.id)

    async def claim_completion(self, job_id: str) -> TranslationJob:
        """Mark an active job completed, guarded by the document's etag."""
        try:
            data = cast(
                "dict[str, Any]",
                await self._container.read_item(item=job_id, partition_key=job_id),
            )
        except CosmosResourceNotFoundError as exc:
            raise NotFoundError(f"Translation job {job_id} not found") from exc
        if data.get("deleted_at") is not None:
            raise NotFoundError(f"Translation job {job_id} not found")

        job = self._to_model(data)
        if job.status == TranslationJobStatus.COMPLETED:
            raise TranslationJobError(f"Translation job {job_id} is already completed")

        job.status = TranslationJobStatus.COMPLETED
        job.completed_at = datetime.now(UTC)
        job.updated_at = job.completed_at
        try:
            await self._container.replace_item(
                item=job.id,
                body=self._to_body(job),
                etag=data.get("_etag"),
                match_condition=MatchConditions.IfNotModified,
            )
        except CosmosHttpResponseError as exc:
            if exc.status_code == _HTTP_PRECONDITION_FAILED:
                raise TranslationJobError(
                    f"Translation job {job_id} was completed concurrently"
                ) from exc
            raise
        return job
