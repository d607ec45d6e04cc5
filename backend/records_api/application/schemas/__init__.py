from .record import RecordSchema, ErrorDetail, ErrorResponse
from .remote import Volume, VolumeInfo, VolumeSearchResponse

__all__ = [
    "RecordSchema",
    "ErrorDetail",
    "ErrorResponse",
    "Volume",
    "VolumeInfo",
    "VolumeSearchResponse",
]
