"""packet-guardian-scan: run flow detection over a log file."""

import logging
import sys
from argparse import ArgumentParser

from packet_guardian.core.config import ConfigurationError, DetectionConfig
from packet_guardian.core.formatter import REPORT_FILENAME, format_summary, to_csv
from packet_guardian.core.pipeline import NoParsableLinesError, run_report
from packet_guardian.samples import SAMPLE_LOG

logger = logging.getLogger("packet_guardian.scan")

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="packet-guardian-scan",
        description="Flag flows with large byte totals or steadily growing packet sizes.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Log file to scan, '-' for stdin",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Scan the built-in sample log instead of a file",
    )
    parser.add_argument(
        "--time-window",
        type=int,
        default=None,
        help="Time window in seconds (reserved, default: 60)",
    )
    parser.add_argument(
        "--byte-threshold",
        type=int,
        default=None,
        help="Alert when a flow totals at least this many bytes (default: 1000000)",
    )
    parser.add_argument(
        "--run-length",
        type=int,
        default=None,
        help="Alert on this many strictly increasing sizes in a row (default: 3)",
    )
    parser.add_argument(
        "--csv",
        nargs="?",
        const=REPORT_FILENAME,
        default=None,
        metavar="OUT",
        help=f"Write a CSV report (default name: {REPORT_FILENAME})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log dropped lines and pipeline counts",
    )
    return parser


def read_text(args) -> str:
    if args.sample:
        return SAMPLE_LOG
    if args.file == "-":
        return sys.stdin.read()
    with open(args.file, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def run_scan(args) -> int:
    """Read input, run the pipeline, print alerts. Returns the exit code."""
    if not args.sample and not args.file:
        print("Error: give a log file, '-' for stdin, or --sample", file=sys.stderr)
        return EXIT_USAGE

    try:
        config = DetectionConfig.from_env().updated(
            time_window_seconds=args.time_window,
            byte_threshold=args.byte_threshold,
            increasing_run_length=args.run_length,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    text = read_text(args)
    if not text.strip():
        print("Error: paste logs or give a non-empty file", file=sys.stderr)
        return EXIT_USAGE

    report = run_report(text, config=config)
    if not report.has_records:
        print(f"Error: {NoParsableLinesError()}", file=sys.stderr)
        return EXIT_USAGE

    print(format_summary(report.alerts))

    if args.csv and report.alerts:
        with open(args.csv, "w", encoding="utf-8", newline="") as f:
            f.write(to_csv(report.alerts))
        logger.info("report written to %s", args.csv)

    return EXIT_OK


def main():
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        code = run_scan(args)
    except KeyboardInterrupt:
        code = EXIT_OK
    except BrokenPipeError:
        code = EXIT_OK
    sys.exit(code)


if __name__ == "__main__":
    main()
