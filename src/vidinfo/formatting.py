"""Text rendering helpers for sizes, durations and rates."""

KB = 1024
MB = KB * 1024
GB = MB * 1024


def plain_number(value: float) -> str:
    """Render a number in fixed-point form without trailing zeros.

    ``2.0`` becomes ``"2"`` and ``97.65625`` stays ``"97.65625"``; at most six
    decimal places are kept. Values too small for that fall back to
    exponent form.
    """
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("0", "-0") and value != 0:
        return f"{value:g}"
    return text


def format_size(size_in_bytes: float) -> str:
    """Human-readable size using 1024-based units."""
    if size_in_bytes >= GB:
        return f"{plain_number(size_in_bytes / GB)} GB"
    if size_in_bytes >= MB:
        return f"{plain_number(size_in_bytes / MB)} MB"
    if size_in_bytes >= KB:
        return f"{plain_number(size_in_bytes / KB)} KB"
    return f"{plain_number(size_in_bytes)} bytes"


def format_duration(seconds: float) -> str:
    """Render seconds as ``H:MM:SS``; the fractional part is dropped."""
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60
    return f"{hours}:{minutes:02d}:{secs:02d}"


def format_frame_rate(fps: float) -> str:
    return f"{fps:g}"


def format_bitrate(mbps: float) -> str:
    return f"{mbps:.2f}"
