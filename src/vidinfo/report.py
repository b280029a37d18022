"""Text and JSON rendering of a video record."""

import logging
import sys
from typing import TextIO

from vidinfo.formatting import format_bitrate, format_frame_rate
from vidinfo.models.video import VideoRecord

logger = logging.getLogger(__name__)

HEADER = "=== Video Information ==="
FOOTER = "====================="


def render_report(record: VideoRecord) -> str:
    """Build the fixed-layout report, including the leading blank line."""
    summary = record.to_summary()
    lines = [
        "",
        HEADER,
        f"Filename: {record.filename}{record.format}",
        f"Duration: {summary.duration_text}",
        f"Size: {summary.size_text}",
        f"Resolution: {record.width}x{record.height} ({summary.resolution})",
        f"Frame Rate: {format_frame_rate(record.frame_rate)} fps",
        f"Video Codec: {record.codec}",
        f"Bitrate: {format_bitrate(summary.bitrate_mbps)} Mbps",
        FOOTER,
    ]
    return "\n".join(lines) + "\n"


def render_json(record: VideoRecord) -> str:
    """Serialize the record and its derived values to indented JSON."""
    return record.to_summary().model_dump_json(indent=2) + "\n"


def display_info(record: VideoRecord, stream: TextIO | None = None, output: str = "text") -> None:
    """Write the report for ``record`` to ``stream`` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    logger.info("Rendering %s report for %s%s", output, record.filename, record.format)
    out.write(render_json(record) if output == "json" else render_report(record))
    out.flush()
