import argparse
import logging
import sys
import time

from urlpinger.config import __version__, settings
from urlpinger.formatting import format_result, format_summary
from urlpinger.models import Mode
from urlpinger.pinger import ConfigError, Pinger
from urlpinger.targets import load_targets_file, parse_targets

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urlpinger",
        description="A simple URL pinger that gives you response times and status codes",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"urlpinger {__version__}",
    )
    parser.add_argument(
        "-u", "--urls",
        help="Comma separated list of URLs to ping",
    )
    parser.add_argument(
        "-f", "--file",
        help="YAML file with a 'urls' list to ping",
    )
    parser.add_argument(
        "-m", "--mode",
        choices=[m.value for m in Mode],
        default=None,
        help=f"Execution mode (default: {settings.DEFAULT_MODE})",
    )
    parser.add_argument(
        "-t", "--timeout",
        type=float,
        default=None,
        help=f"Per-request timeout in seconds (default: {settings.REQUEST_TIMEOUT_SECONDS})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.urls is None and args.file is None:
        parser.error("one of -u/--urls or -f/--file is required")

    _setup_logging(args.verbose)

    urls: list[str] = []
    if args.file is not None:
        try:
            urls.extend(load_targets_file(args.file))
        except (FileNotFoundError, ValueError) as e:
            logger.error("Targets file error: %s", e)
            sys.exit(1)
    if args.urls is not None:
        urls.extend(parse_targets(args.urls))

    try:
        pinger = Pinger(urls, mode=args.mode, timeout_s=args.timeout)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    start = time.perf_counter()
    results = pinger.ping_urls()
    elapsed = time.perf_counter() - start

    for result in results:
        print(format_result(result))
    print(format_summary(results, elapsed))
