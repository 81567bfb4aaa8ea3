#!/usr/bin/env python3
"""Log Stats - Entry point"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from logstats import VERSION, LogAnalyzer, LogReadError, print_report
from logstats.patterns import RECENT_SAMPLES_LIMIT, TOP_IPS_LIMIT

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("logstats")


class ArgumentParser(argparse.ArgumentParser):
    """Parser whose usage errors exit with status 1"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"count must be at least 1: {value!r}")
    return number


def build_parser():
    parser = ArgumentParser(
        prog="logstats",
        description="Log Stats - level, status code and client IP statistics for a log file",
        epilog="Example: logstats /var/log/nginx/access.log",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", help="Log file to analyze")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-n", "--top", type=positive_int, default=TOP_IPS_LIMIT,
                        help=f"Number of IP addresses to list (default: {TOP_IPS_LIMIT})")
    parser.add_argument("-s", "--samples", type=positive_int, default=RECENT_SAMPLES_LIMIT,
                        help=f"Number of recent errors/warnings to list (default: {RECENT_SAMPLES_LIMIT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"LogStats v{VERSION}")
    return parser


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    analyzer = LogAnalyzer(top_ips=args.top, recent_samples=args.samples, console=err_console)

    try:
        stats = analyzer.analyze_file(args.logfile)
    except LogReadError as e:
        logger.debug("Analysis of %s aborted: %r", e.path, e.reason)
        print(f"Error: failed to read {e.path}: {e.reason}", file=sys.stderr)
        sys.exit(1)

    report = analyzer.generate_report(stats)
    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(report, console)


if __name__ == "__main__":
    main()
