"""Data models for vidinfo."""

from vidinfo.models.errors import (
    InputClosedError,
    InputError,
    RetryLimitExceededError,
    UnsupportedFormatError,
    VidinfoError,
)
from vidinfo.models.video import ResolutionClass, VideoFields, VideoRecord, VideoSummary

__all__ = [
    "InputClosedError",
    "InputError",
    "ResolutionClass",
    "RetryLimitExceededError",
    "UnsupportedFormatError",
    "VideoFields",
    "VideoRecord",
    "VideoSummary",
    "VidinfoError",
]
