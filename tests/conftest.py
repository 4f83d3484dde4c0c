"""Shared fixtures: mocked HTTP layer and an in-memory stand-in for the jobs API."""
from __future__ import annotations

import itertools
from unittest.mock import MagicMock

import pytest

from job_tracker.api import JobsApi
from job_tracker.errors import ApiError
from job_tracker.models import JobRecord, JobStatus, NewJobRecord
from job_tracker.store import RecordStore

BASE_URL = "https://jobs.example/api/jobs"


def create_mock_response(status_code, json_data=None):
    """Helper to create a mock Response object."""
    mock_resp = MagicMock()
    mock_resp.status_code = status_code
    mock_resp.json.return_value = json_data
    return mock_resp


def make_record(job_id="1", company="Acme", role="Engineer", status="Applied", date="2024-01-10", link=None):
    return JobRecord(_id=job_id, company=company, role=role, status=status, date=date, link=link)


@pytest.fixture
def mock_requests(mocker):
    """Mock the requests module for all HTTP methods used by the client."""
    return {
        "get": mocker.patch("job_tracker.api.requests.get"),
        "post": mocker.patch("job_tracker.api.requests.post"),
        "patch": mocker.patch("job_tracker.api.requests.patch"),
        "delete": mocker.patch("job_tracker.api.requests.delete"),
    }


@pytest.fixture
def api():
    return JobsApi(BASE_URL, timeout=5)


class FakeJobsApi:
    """Server-side state held in a dict; ``fail`` makes the next calls raise."""

    def __init__(self, records=()):
        self.server: dict[str, JobRecord] = {r.id: r for r in records}
        self.calls: list[tuple] = []
        self.fail: ApiError | None = None
        self._ids = itertools.count(100)

    def _check(self):
        if self.fail is not None:
            raise self.fail

    def list_jobs(self):
        self.calls.append(("list",))
        self._check()
        return list(self.server.values())

    def add_job(self, new: NewJobRecord):
        self.calls.append(("add", new))
        self._check()
        record = JobRecord(_id=str(next(self._ids)), **new.to_payload())
        self.server[record.id] = record
        return record

    def update_job(self, job_id, status: JobStatus):
        self.calls.append(("update", job_id, status))
        self._check()
        current = self.server.get(job_id) or make_record(job_id=job_id)
        record = current.model_copy(update={"status": status})
        self.server[job_id] = record
        return record

    def delete_job(self, job_id):
        self.calls.append(("delete", job_id))
        self._check()
        self.server.pop(job_id, None)


@pytest.fixture
def fake_api():
    return FakeJobsApi(
        [
            make_record("1", "Acme", "Engineer", "Applied", "2024-01-10"),
            make_record("2", "Globex", "Analyst", "Offer", "2024-02-01"),
        ]
    )


@pytest.fixture
def store(fake_api):
    s = RecordStore(fake_api)
    assert s.load().ok
    return s
