"""Property-based tests for formatting and input retry."""

import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from vidinfo.collector import InputCollector, parse_positive_float, retry_message
from vidinfo.formatting import GB, KB, MB, format_duration, format_size

pytestmark = pytest.mark.property


class TestFormattingProperties:
    @given(seconds=st.floats(min_value=0.0, max_value=1e7))
    @settings(max_examples=200)
    def test_duration_reassembles(self, seconds):
        """H:MM:SS adds back up to the truncated duration."""
        hours, minutes, secs = format_duration(seconds).split(":")
        assert len(minutes) == 2 and len(secs) == 2
        assert 0 <= int(minutes) < 60 and 0 <= int(secs) < 60
        assert int(hours) * 3600 + int(minutes) * 60 + int(secs) == int(seconds)

    @given(size=st.floats(min_value=1.0, max_value=1e15))
    @settings(max_examples=200)
    def test_size_unit_choice(self, size):
        """The unit is the largest one whose threshold the size reaches."""
        unit = format_size(size).rsplit(" ", 1)[1]
        if size >= GB:
            assert unit == "GB"
        elif size >= MB:
            assert unit == "MB"
        elif size >= KB:
            assert unit == "KB"
        else:
            assert unit == "bytes"

    @given(n=st.integers(min_value=1, max_value=1023))
    @settings(max_examples=50)
    def test_exact_multiples_have_no_decimals(self, n):
        assert format_size(n * MB) == f"{n} MB"


class TestRetryProperties:
    @given(
        junk=st.lists(
            st.sampled_from(["abc", "0", "-1", "x1", "1.2.3", "nan", "-0.5"]),
            max_size=10,
        ),
        value=st.floats(min_value=0.001, max_value=1e9),
    )
    @settings(max_examples=100)
    def test_invalid_entries_never_accepted(self, junk, value):
        """Every rejected line yields one retry prompt and the valid value wins."""
        text = "".join(f"{line}\n" for line in junk) + f"{value!r}\n"
        out = io.StringIO()
        collector = InputCollector(stdin=io.StringIO(text), stdout=out)
        result = collector.read_positive(
            "Duration (in seconds): ", retry_message("duration"), parse_positive_float
        )
        assert result == value
        assert out.getvalue().count(retry_message("duration")) == len(junk)
