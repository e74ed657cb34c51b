"""Command line entrypoint.

Usage:
    html-depth https://example.com/page.html
    python -m app.cli https://example.com/page.html

Prints exactly one line: the deepest text line, ``malformed HTML`` or
``URL connection error``. Exit status is 0 whenever an analysis ran and 1
when the invocation itself is wrong.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from app.core.config import get_settings
from app.services.pipeline import analyze_url

EXIT_OK = 0
EXIT_USAGE = 1


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    if argv is None:
        argv = sys.argv[1:]
    parser = _ArgumentParser(
        prog="html-depth",
        description="Print the most deeply nested text line of a document.",
        add_help=False,
    )
    parser.add_argument("url", help="absolute http(s) URL of the document")
    if len(argv) != 1:
        parser.error(f"expected exactly one URL argument, got {len(argv)}")
    # Anything, including "--help" or "-x", is taken as the URL.
    return parser.parse_args(["--", *argv])


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        stream=sys.stderr,
        level=_log_level(settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = asyncio.run(analyze_url(args.url, settings=settings))
    print(result.render())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
