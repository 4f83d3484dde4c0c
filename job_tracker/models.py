"""Data models for job records and list filters.

``JobRecord`` is what the jobs API hands back; ``NewJobRecord`` is what the
entry form sends to create one. Both are validated with pydantic so malformed
payloads stop at the API boundary instead of leaking into the store.
"""
from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from job_tracker.errors import RecordValidationError

ALL = "all"


class JobStatus(str, Enum):
    APPLIED = "Applied"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"

    @classmethod
    def parse(cls, value: Any) -> "JobStatus":
        """Return the member for ``value`` or raise RecordValidationError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise RecordValidationError("status", f"{value!r} is not one of {choices}") from None


def parse_day(value: Any) -> dt.date | None:
    """Calendar date of ``value`` as written, or None if absent/unparseable.

    Timestamps keep their own date component: ``2024-01-10T23:30:00-05:00``
    is the 10th, not shifted to UTC.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return dt.datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class JobRecord(BaseModel):
    """One tracked application, as confirmed by the jobs API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore", str_strip_whitespace=True)

    id: str = Field(alias="_id", min_length=1)
    company: str = Field(min_length=1)
    role: str = Field(min_length=1)
    status: JobStatus = JobStatus.APPLIED
    date: str | None = None
    link: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_as_text(cls, value: Any) -> Any:
        if isinstance(value, (dt.date, dt.datetime)):
            return value.isoformat()
        if value is not None and not isinstance(value, str):
            return str(value)
        return _blank_to_none(value)

    @field_validator("link", mode="before")
    @classmethod
    def _link_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @property
    def day(self) -> dt.date | None:
        return parse_day(self.date)


class NewJobRecord(BaseModel):
    """A job record before the API has assigned its id."""

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    company: str = Field(min_length=1)
    role: str = Field(min_length=1)
    status: JobStatus = JobStatus.APPLIED
    date: dt.date
    link: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return JobStatus.APPLIED
        return value

    @field_validator("link", mode="before")
    @classmethod
    def _link_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @classmethod
    def from_input(cls, data: "NewJobRecord | Mapping[str, Any]") -> "NewJobRecord":
        """Validate form input, naming the first offending field on failure."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise RecordValidationError("input", "must be a mapping")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first.get("loc") else "input"
            raw = first.get("input")
            blank = first["type"] == "missing" or (isinstance(raw, str) and not raw.strip())
            message = "is required" if blank else first["msg"]
            raise RecordValidationError(field, message) from None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class FilterSpec(BaseModel):
    """Which records the list view shows: a status selector and an optional day."""

    model_config = ConfigDict(frozen=True)

    status: JobStatus | Literal["all"] = ALL
    date: dt.date | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and value.strip().lower() in {"", ALL}):
            return ALL
        return JobStatus.parse(value)

    @field_validator("date", mode="before")
    @classmethod
    def _date(cls, value: Any) -> Any:
        return _blank_to_none(value)
