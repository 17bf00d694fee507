"""Command-line interface for cvd.

Prints the selected device identifiers as one comma-separated line, ready
for ``CUDA_VISIBLE_DEVICES``:

    $ cvd
    GPU-0a1b...,GPU-5c6d...
    $ CUDA_VISIBLE_DEVICES=$(cvd --empty-only -n 1) python train.py

Exit status is 0 on success, 1 when selection fails and 2 on bad arguments.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from cvd import __version__
from cvd.domain.entities.selection import SelectionRequest
from cvd.domain.errors import CVDError
from cvd.infrastructure.config import Config, get_config
from cvd.infrastructure.container import Container
from cvd.infrastructure.tracing import shutdown_tracing

EXIT_OK = 0
EXIT_FAILURE = 1


def _non_negative_int(value: str) -> int:
    """argparse type for device counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"count must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cvd",
        description="Show CUDA visible devices",
    )
    parser.add_argument(
        "-n",
        type=_non_negative_int,
        default=None,
        metavar="NUM",
        help="Number of devices to show (default: all eligible devices)",
    )
    parser.add_argument(
        "-e",
        "--empty-only",
        action="store_true",
        help="Only show devices without running compute processes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _with_debug_logging(config: Config) -> Config:
    observability = config.observability.model_copy(update={"log_level": "DEBUG"})
    return config.model_copy(update={"observability": observability})


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``cvd`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    if args.verbose:
        config = _with_debug_logging(config)

    container = Container.create(config)
    request = SelectionRequest(empty_only=args.empty_only, count=args.n)

    try:
        result = container.selector.select(request)
    except CVDError as e:
        container.logger.debug(
            "device_selection_failed",
            error_type=type(e).__name__,
            error=str(e),
        )
        print(f"cvd: error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        shutdown_tracing()

    print(result.to_visible_devices(container.config.output.separator))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
