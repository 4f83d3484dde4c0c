from .errors import ApiError, ConfigError, RecordValidationError, TrackerError
from .models import ALL, FilterSpec, JobRecord, JobStatus, NewJobRecord
from .api import JobsApi
from .store import RecordStore, StoreResult
from .filters import filter_records

__all__ = [
    "ALL", "ApiError", "ConfigError", "FilterSpec", "JobRecord", "JobStatus",
    "JobsApi", "NewJobRecord", "RecordStore", "RecordValidationError",
    "StoreResult", "TrackerError", "filter_records", "build_store",
]


def build_store(settings=None) -> RecordStore:
    """Store wired to the configured jobs API."""
    from .config import load_settings

    settings = settings or load_settings()
    return RecordStore(JobsApi(settings.api_base_url, timeout=settings.timeout))
