"""Command-line entry point."""

import argparse
import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from vidinfo.collector import InputCollector
from vidinfo.config import LOG_LEVELS, get_settings
from vidinfo.models.errors import VidinfoError
from vidinfo.models.video import VideoRecord
from vidinfo.report import display_info

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Send log records to stderr so they never mix with the report."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="vidinfo",
        description="Collect video metadata interactively and print a summary",
    )
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default=settings.output,
        help="Report format (default: %(default)s)",
    )
    parser.add_argument(
        "--max-attempts",
        type=positive_int,
        default=settings.max_attempts,
        help="Give up on a numeric field after this many invalid entries (default: unlimited)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    return parser


def describe_settings_error(exc: ValidationError) -> str:
    """One-line summary naming each offending VIDINFO_ variable."""
    parts = []
    for error in exc.errors():
        name = f"VIDINFO_{str(error['loc'][0]).upper()}" if error["loc"] else "VIDINFO_*"
        parts.append(f"{name}: {error['msg']}")
    return "; ".join(parts)


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run one interactive session and return the process exit status."""
    err = stderr if stderr is not None else sys.stderr
    try:
        parser = build_parser()
    except ValidationError as e:
        err.write(f"Error: Invalid configuration: {describe_settings_error(e)}\n")
        err.flush()
        return 1
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    collector = InputCollector(stdin=stdin, stdout=stdout, max_attempts=args.max_attempts)
    try:
        fields = collector.collect()
        record = VideoRecord.from_fields(fields)
    except VidinfoError as e:
        logger.debug("Session failed in %s: %s", e.component, e.details)
        err.write(f"Error: {e.message}\n")
        err.flush()
        return 1

    display_info(record, stream=stdout, output=args.output)
    return 0


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())
