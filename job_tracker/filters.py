"""Pure filtering of job records by status and application day.

Items are either ``JobRecord`` objects or raw mappings as the API sent them;
either way the original objects are returned, never copies.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from job_tracker.log import get_logger
from job_tracker.models import ALL, FilterSpec, JobRecord, parse_day

log = get_logger(__name__)


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def match_status(record: JobRecord | Mapping[str, Any], spec: FilterSpec) -> bool:
    return spec.status == ALL or _field(record, "status") == spec.status


def match_date(record: JobRecord | Mapping[str, Any], spec: FilterSpec) -> bool:
    if spec.date is None:
        return True
    day = parse_day(_field(record, "date"))
    return day is not None and day == spec.date


def filter_records(collection: Any, spec: FilterSpec | None = None) -> list[Any]:
    """Records in ``collection`` matching ``spec``, in their original order.

    Anything that is not a list/tuple of records (a failed load, None, a
    mapping) yields an empty list rather than an error. Items that are
    neither records nor mappings are skipped.
    """
    spec = spec or FilterSpec()
    if not isinstance(collection, Sequence) or isinstance(collection, (str, bytes)):
        log.debug("filter_records got %s, not a sequence", type(collection).__name__)
        return []

    visible: list[Any] = []
    for item in collection:
        if not isinstance(item, (JobRecord, Mapping)):
            continue
        if match_status(item, spec) and match_date(item, spec):
            visible.append(item)
    return visible
