"""In-memory record store that mediates every change through the jobs API.

Local state only moves after the API answers: each operation makes exactly one
request and, on success, one update to the collection. Failures come back as
a ``StoreResult`` with ``ok=False`` rather than an exception, so the UI can
show them without wrapping every call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from job_tracker.api import JobsApi
from job_tracker.errors import TrackerError
from job_tracker.log import get_logger
from job_tracker.models import JobRecord, JobStatus, NewJobRecord

log = get_logger(__name__)


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a store operation and the collection it left behind."""

    ok: bool
    records: tuple[JobRecord, ...]
    record: JobRecord | None = None
    error: TrackerError | None = None

    def __bool__(self) -> bool:
        return self.ok


class RecordStore:
    def __init__(self, api: JobsApi) -> None:
        self.api = api
        self._records: list[JobRecord] = []
        self.loaded = False

    @property
    def records(self) -> tuple[JobRecord, ...]:
        return tuple(self._records)

    def get(self, job_id: Any) -> JobRecord | None:
        key = str(job_id)
        return next((r for r in self._records if r.id == key), None)

    def _ok(self, record: JobRecord | None = None) -> StoreResult:
        return StoreResult(ok=True, records=self.records, record=record)

    def _failed(self, op: str, exc: TrackerError) -> StoreResult:
        log.warning("%s failed: %s", op, exc)
        return StoreResult(ok=False, records=self.records, error=exc)

    def load(self) -> StoreResult:
        try:
            jobs = self.api.list_jobs()
        except TrackerError as exc:
            return self._failed("load", exc)
        self._records = list(jobs)
        self.loaded = True
        log.info("Loaded %d job records", len(self._records))
        return self._ok()

    def create(self, data: NewJobRecord | Mapping[str, Any]) -> StoreResult:
        try:
            new = NewJobRecord.from_input(data)
            created = self.api.add_job(new)
        except TrackerError as exc:
            return self._failed("create", exc)

        # the server may already have been listed with this id
        idx = next((i for i, r in enumerate(self._records) if r.id == created.id), None)
        if idx is None:
            self._records.append(created)
        else:
            self._records[idx] = created
        log.info("Created job %s: %s @ %s", created.id, created.role, created.company)
        return self._ok(created)

    def set_status(self, job_id: Any, new_status: JobStatus | str) -> StoreResult:
        key = str(job_id)
        try:
            status = JobStatus.parse(new_status)
            updated = self.api.update_job(key, status)
        except TrackerError as exc:
            return self._failed(f"set_status({key})", exc)

        if self.get(key) is None:
            log.debug("Status of %s updated remotely; not held locally", key)
        else:
            self._records = [updated if r.id == key else r for r in self._records]
        log.info("Job %s → %s", key, updated.status.value)
        return self._ok(updated)

    def remove(self, job_id: Any) -> StoreResult:
        key = str(job_id)
        try:
            self.api.delete_job(key)
        except TrackerError as exc:
            return self._failed(f"remove({key})", exc)

        self._records = [r for r in self._records if r.id != key]
        log.info("Removed job %s", key)
        return self._ok()
