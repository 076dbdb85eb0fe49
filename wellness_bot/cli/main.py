"""Wellness Bot command-line entry point.

Usage:
    wellness-bot [--log-level LEVEL]

Exit codes:
    0 assessment completed
    1 input closed early, interrupted, or unexpected error
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from wellness_bot import __version__
from wellness_bot.application.wellness.assessment_service import (
    build_assessment_service,
)
from wellness_bot.cli.prompts import InputFn, collect_profile
from wellness_bot.cli.report import FAREWELL, WELCOME, render_assessment
from wellness_bot.config import configure_logging, load_environment
from wellness_bot.domain.wellness.core.value_objects.reference_values import (
    WellnessConstants,
)

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wellness-bot",
        description="Interactive wellness calculator.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Log level (default: $WELLNESS_LOG_LEVEL, $LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def run(input_fn: InputFn, out: TextIO) -> None:
    """One session: collect, assess, render."""
    constants = WellnessConstants.default()
    service = build_assessment_service(constants)

    profile = collect_profile(input_fn, out)
    assessment = service.assess(profile)
    logger.info("Assessment completed")

    print("", file=out)
    out.write(render_assessment(assessment))


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: InputFn = input,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    load_environment()
    configure_logging(args.log_level)

    out = out or sys.stdout
    err = err or sys.stderr

    print(WELCOME, file=out)
    try:
        run(input_fn, out)
    except EOFError:
        print("\nInput ended before the assessment was complete.", file=err)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=err)
        return 1
    except Exception as e:
        logger.exception("Wellness assessment failed")
        print(f"An error occurred: {e}", file=err)
        return 1

    print(f"\n{FAREWELL}", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
