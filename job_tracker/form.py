"""State behind the "add job" form.

Values survive a failed submit so the user can fix or retry; a successful
submit clears them.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import asdict, dataclass, fields

from job_tracker.models import JobStatus
from job_tracker.store import RecordStore, StoreResult


@dataclass
class JobForm:
    company: str = ""
    role: str = ""
    status: str = JobStatus.APPLIED.value
    date: dt.date | str | None = None
    link: str = ""

    def values(self) -> dict[str, object]:
        return asdict(self)

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)

    def submit(self, store: RecordStore) -> StoreResult:
        result = store.create(self.values())
        if result.ok:
            self.reset()
        return result
