from .record_repository import RecordRepository
from .record_fetch_client import RecordFetchClient

__all__ = [
    "RecordRepository",
    "RecordFetchClient",
]
