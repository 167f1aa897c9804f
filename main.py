# main.py

from __future__ import annotations

import argparse
import asyncio
import sys

from config import DEFAULT_EYES, DEFAULT_WATER, load_config
from duration import DurationParseError
from reminder_worker import run_reminders

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="health-reminder",
        description="Eye & water break reminders",
    )
    parser.add_argument(
        "--eyes",
        default=DEFAULT_EYES,
        metavar="SPEC",
        help="Interval for resting eyes (e.g. 20m, 30m, 2h)",
    )
    parser.add_argument(
        "--water",
        default=DEFAULT_WATER,
        metavar="SPEC",
        help="Interval for drinking water (e.g. 1h, 45m)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.eyes, args.water)
    except DurationParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"⏱️  Reminders started: "
        f"eyes every {config.eyes} ({config.eyes_seconds}s), "
        f"water every {config.water} ({config.water_seconds}s)."
    )
    for name, seconds in (("eyes", config.eyes_seconds), ("water", config.water_seconds)):
        if seconds == 0:
            print(
                f"[WARN] --{name} is zero: reminders will fire continuously.",
                file=sys.stderr,
            )
    print("Stop with Ctrl+C", flush=True)

    try:
        asyncio.run(run_reminders(config))
    except KeyboardInterrupt:
        # платформы без loop.add_signal_handler (Windows)
        pass

    print("\n👋 Exit requested. Take care!")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
