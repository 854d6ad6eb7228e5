from .base import BaseResponse
from .enums import ResponseCode, ResponseMessage
from .formatting import (
    BatchFormatRequest,
    CountsModel,
    ExtractionModel,
    FormatRequest,
    FormattedMessageModel,
    HealthData,
    SegmentMetadataModel,
    SegmentModel,
    SpeechModel,
    SpeechRequest,
)

__all__ = [
    "BaseResponse",
    "ResponseCode",
    "ResponseMessage",
    "BatchFormatRequest",
    "CountsModel",
    "ExtractionModel",
    "FormatRequest",
    "FormattedMessageModel",
    "HealthData",
    "SegmentMetadataModel",
    "SegmentModel",
    "SpeechModel",
    "SpeechRequest",
]
