"""Video record data models."""

import logging
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vidinfo.config import get_settings
from vidinfo.formatting import format_duration, format_size
from vidinfo.models.errors import UnsupportedFormatError

logger = logging.getLogger(__name__)


class ResolutionClass(StrEnum):
    """Resolution buckets, highest first."""

    UHD_4K = "4K"
    FHD_1080P = "1080p"
    HD_720P = "720p"
    SD = "SD"


# (class, min width, min height) in priority order
RESOLUTION_THRESHOLDS: list[tuple[ResolutionClass, int, int]] = [
    (ResolutionClass.UHD_4K, 3840, 2160),
    (ResolutionClass.FHD_1080P, 1920, 1080),
    (ResolutionClass.HD_720P, 1280, 720),
]


def classify_resolution(width: int, height: int) -> ResolutionClass:
    """Return the first class whose width and height thresholds are both met."""
    for resolution, min_width, min_height in RESOLUTION_THRESHOLDS:
        if width >= min_width and height >= min_height:
            return resolution
    return ResolutionClass.SD


def calculate_bitrate(size: float, duration: float) -> float:
    """Average bitrate in Mbps for ``size`` bytes played over ``duration`` seconds."""
    return (size * 8) / (duration * 1_000_000)


def validate_format(fmt: str, supported_formats: list[str]) -> None:
    """Raise UnsupportedFormatError unless ``fmt`` is one of ``supported_formats``."""
    if fmt not in supported_formats:
        names = ", ".join(f.lstrip(".") for f in supported_formats)
        raise UnsupportedFormatError(
            f"Unsupported video format. Supported formats: {names}",
            details={"format": fmt, "supported": list(supported_formats)},
        )


class VideoFields(BaseModel):
    """Raw values gathered by the input collector, in prompt order."""

    filename: str = ""
    format: str = ""
    duration: float
    size: float
    width: int
    height: int
    frame_rate: float
    codec: str = ""


class VideoRecord(BaseModel):
    """Metadata for a single video file."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(default="", description="File name without extension")
    format: str = Field(..., description="Container extension including the dot")
    duration: float = Field(..., gt=0, allow_inf_nan=False, description="Duration in seconds")
    size: float = Field(..., gt=0, allow_inf_nan=False, description="Size in bytes")
    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")
    frame_rate: float = Field(..., gt=0, allow_inf_nan=False, description="Frames per second")
    codec: str = Field(default="", description="Video codec name")

    @model_validator(mode="after")
    def validate_supported_format(self) -> "VideoRecord":
        validate_format(self.format, get_settings().supported_formats)
        return self

    @classmethod
    def from_fields(cls, fields: VideoFields) -> "VideoRecord":
        """Build a record from collected input, validating the format."""
        record = cls.model_validate(fields.model_dump())
        logger.info("Constructed record for %s%s", record.filename, record.format)
        return record

    def calculate_bitrate(self) -> float:
        return calculate_bitrate(self.size, self.duration)

    def resolution_name(self) -> ResolutionClass:
        return classify_resolution(self.width, self.height)

    def to_summary(self) -> "VideoSummary":
        """Bundle the record with its derived values."""
        return VideoSummary(
            record=self,
            bitrate_mbps=self.calculate_bitrate(),
            resolution=self.resolution_name(),
            duration_text=format_duration(self.duration),
            size_text=format_size(self.size),
        )


class VideoSummary(BaseModel):
    """A record plus the values derived from it."""

    record: VideoRecord
    bitrate_mbps: float = Field(..., ge=0, description="Average bitrate in Mbps")
    resolution: ResolutionClass
    duration_text: str = Field(..., description="Duration as H:MM:SS")
    size_text: str = Field(..., description="Size in 1024-based units")
