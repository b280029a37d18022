"""Interactive collection of video metadata from a text stream."""

import logging
import math
import sys
from collections.abc import Callable
from typing import TextIO

from vidinfo.models.errors import InputClosedError, RetryLimitExceededError
from vidinfo.models.video import VideoFields

logger = logging.getLogger(__name__)

BANNER = "Enter video information:\n"

FILENAME_PROMPT = "Filename (without extension): "
FORMAT_PROMPT = "Format (e.g., .mp4, .mkv): "
CODEC_PROMPT = "Video Codec (e.g., H.264, H.265): "

DURATION_PROMPT = "Duration (in seconds): "
SIZE_PROMPT = "Size (in bytes): "
WIDTH_PROMPT = "Width (pixels): "
HEIGHT_PROMPT = "Height (pixels): "
FRAME_RATE_PROMPT = "Frame Rate (fps): "


def retry_message(field: str) -> str:
    return f"Please enter a valid {field}: "


def parse_positive_float(text: str) -> float:
    """Parse a strictly positive, finite float or raise ValueError."""
    value = float(text.strip())
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"Expected a positive number, got {text!r}")
    return value


def parse_positive_int(text: str) -> int:
    """Parse a strictly positive integer or raise ValueError."""
    value = int(text.strip())
    if value <= 0:
        raise ValueError(f"Expected a positive integer, got {text!r}")
    return value


class InputCollector:
    """Prompts for each field and re-prompts until numeric values are valid.

    With ``max_attempts`` left as ``None`` a numeric field is retried for as
    long as input keeps arriving.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        max_attempts: int | None = None,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.max_attempts = max_attempts

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _readline(self, prompt: str) -> str:
        line = self.stdin.readline()
        if not line:
            raise InputClosedError(
                f"Input closed before a value was entered for: {prompt.strip()}",
                details={"prompt": prompt},
            )
        return line.rstrip("\r\n")

    def read_text(self, prompt: str) -> str:
        """Read one whole line; any content, including an empty line, is accepted."""
        self._write(prompt)
        return self._readline(prompt)

    def read_positive(
        self,
        prompt: str,
        retry_prompt: str,
        parse: Callable[[str], float | int],
    ) -> float | int:
        """Read lines until ``parse`` accepts one.

        Blank lines are skipped silently. A rejected line is discarded whole
        and ``retry_prompt`` is written before the next read.
        """
        self._write(prompt)
        attempts = 0
        while True:
            line = self._readline(prompt)
            if not line.strip():
                continue
            try:
                return parse(line)
            except ValueError:
                attempts += 1
                logger.debug("Rejected %r for %r (attempt %d)", line, prompt.strip(), attempts)
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise RetryLimitExceededError(
                    f"No valid value after {attempts} attempts for: {prompt.strip()}",
                    details={"prompt": prompt, "attempts": attempts},
                )
            self._write(retry_prompt)

    def collect(self) -> VideoFields:
        """Run the full prompt sequence and return the raw field values."""
        self._write(BANNER)
        filename = self.read_text(FILENAME_PROMPT)
        fmt = self.read_text(FORMAT_PROMPT)
        duration = self.read_positive(
            DURATION_PROMPT, retry_message("duration"), parse_positive_float
        )
        size = self.read_positive(SIZE_PROMPT, retry_message("size"), parse_positive_float)
        width = self.read_positive(WIDTH_PROMPT, retry_message("width"), parse_positive_int)
        height = self.read_positive(HEIGHT_PROMPT, retry_message("height"), parse_positive_int)
        frame_rate = self.read_positive(
            FRAME_RATE_PROMPT, retry_message("frame rate"), parse_positive_float
        )
        codec = self.read_text(CODEC_PROMPT)
        return VideoFields(
            filename=filename,
            format=fmt,
            duration=duration,
            size=size,
            width=width,
            height=height,
            frame_rate=frame_rate,
            codec=codec,
        )
