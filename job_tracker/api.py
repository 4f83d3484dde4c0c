"""Client for the jobs REST API (list / create / update status / delete)."""
from __future__ import annotations

from typing import Any

import requests
from pydantic import ValidationError

from job_tracker.errors import ApiError
from job_tracker.log import get_logger
from job_tracker.models import JobRecord, JobStatus, NewJobRecord

log = get_logger(__name__)

HEADERS = {"Content-Type": "application/json"}


class JobsApi:
    """Thin wrapper over the four endpoints; every failure becomes ApiError.

    No retries: a failed call is reported once and the caller decides.
    """

    def __init__(self, base_url: str, timeout: float = 15.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _url(self, job_id: str | None = None) -> str:
        return f"{self.base_url}/" if job_id is None else f"{self.base_url}/{job_id}"

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        sender = getattr(requests, method)
        try:
            r = sender(url, headers=HEADERS, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise ApiError(f"{method.upper()} {url} failed: {exc}") from exc
        if not 200 <= r.status_code < 300:
            raise ApiError(f"{method.upper()} {url} returned HTTP {r.status_code}", status_code=r.status_code)
        return r

    @staticmethod
    def _json(r: requests.Response) -> Any:
        try:
            return r.json()
        except ValueError as exc:
            raise ApiError("jobs API returned invalid JSON", status_code=r.status_code) from exc

    @staticmethod
    def _record(data: Any) -> JobRecord:
        try:
            return JobRecord.model_validate(data)
        except ValidationError as exc:
            raise ApiError(f"jobs API returned a malformed record: {exc.error_count()} error(s)") from exc

    def list_jobs(self) -> list[JobRecord]:
        r = self._send("get", self._url())
        data = self._json(r)
        if not isinstance(data, list):
            raise ApiError(f"expected a list of jobs, got {type(data).__name__}", status_code=r.status_code)

        jobs: list[JobRecord] = []
        for hit in data:
            try:
                jobs.append(JobRecord.model_validate(hit))
            except ValidationError as exc:
                log.warning("Skipping malformed job entry: %s", exc.errors()[0]["msg"])
        log.debug("Fetched %d jobs (%d dropped)", len(jobs), len(data) - len(jobs))
        return jobs

    def add_job(self, new: NewJobRecord) -> JobRecord:
        r = self._send("post", self._url(), json=new.to_payload())
        return self._record(self._json(r))

    def update_job(self, job_id: str, status: JobStatus) -> JobRecord:
        r = self._send("patch", self._url(job_id), json={"status": JobStatus.parse(status).value})
        record = self._record(self._json(r))
        if record.id != str(job_id):
            raise ApiError(f"PATCH {job_id} answered with record {record.id}", status_code=r.status_code)
        return record

    def delete_job(self, job_id: str) -> None:
        self._send("delete", self._url(job_id))
