"""Shared test fixtures."""

import io
import os

import pytest

from vidinfo.models.video import VideoFields, VideoRecord

MOVIE_INPUT_LINES = [
    "movie",
    ".mp4",
    "3661",
    "104857600",
    "1920",
    "1080",
    "29.97",
    "H.264",
]


def make_stdin(lines: list[str]) -> io.StringIO:
    """Build an input stream with one entry per line."""
    return io.StringIO("".join(f"{line}\n" for line in lines))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep VIDINFO_* variables from the outer environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("VIDINFO_"):
            monkeypatch.delenv(key)


@pytest.fixture
def movie_fields():
    """Fields for a 1h01m01s 1080p H.264 clip of 100 MB."""
    return VideoFields(
        filename="movie",
        format=".mp4",
        duration=3661.0,
        size=104857600.0,
        width=1920,
        height=1080,
        frame_rate=29.97,
        codec="H.264",
    )


@pytest.fixture
def movie_record(movie_fields):
    return VideoRecord.from_fields(movie_fields)


@pytest.fixture
def movie_stdin():
    return make_stdin(MOVIE_INPUT_LINES)
