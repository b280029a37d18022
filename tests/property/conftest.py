"""Hypothesis strategies for property-based testing."""

from hypothesis import strategies as st

from vidinfo.models.video import VideoRecord

SUPPORTED_FORMATS = [".mp4", ".mkv", ".avi", ".mov"]

positive_floats = st.floats(min_value=1e-3, max_value=1e12, allow_nan=False, allow_infinity=False)
dimensions = st.integers(min_value=1, max_value=10_000)


@st.composite
def generate_video_record(draw):
    """Generate a random valid VideoRecord."""
    alphabet = "abcdefghijklmnopqrstuvwxyz0123456789_-"
    return VideoRecord(
        filename=draw(st.text(max_size=20, alphabet=alphabet)),
        format=draw(st.sampled_from(SUPPORTED_FORMATS)),
        duration=draw(st.floats(min_value=0.01, max_value=1e6)),
        size=draw(positive_floats),
        width=draw(dimensions),
        height=draw(dimensions),
        frame_rate=draw(st.floats(min_value=0.5, max_value=240.0)),
        codec=draw(st.sampled_from(["H.264", "H.265", "VP9", "AV1", ""])),
    )
