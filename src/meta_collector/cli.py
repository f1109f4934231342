"""meta-collector CLI: print the social metadata of a page as JSON.

Usage:
    meta-collector [-h] [-v] TARGET

TARGET is a local file when it starts with "~", "." or "/", otherwise a URL.
"""

from __future__ import annotations

import argparse
import platform
import sys

from meta_collector import __version__
from meta_collector.collector import parse_file, parse_html
from meta_collector.config import load_settings
from meta_collector.errors import MetaCollectorError
from meta_collector.logging_config import configure
from meta_collector.serialize import dumps


def is_path(target: str) -> bool:
    """True for things which look like paths."""
    return target.startswith(("~", ".", "/"))


def version_text() -> str:
    return f"collector version: {__version__} ({platform.system().lower()})"


class _HelpAction(argparse.Action):
    """-h: version line on stderr, then the usual help."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):  # noqa: A002, ANN001
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):  # noqa: ANN001
        print(version_text(), file=sys.stderr)
        parser.print_help()
        parser.exit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meta-collector",
        add_help=False,
        description="Extract Open Graph, Twitter Card and App Links metadata from a page.",
    )
    parser.add_argument("-h", action=_HelpAction, help="show this help text")
    parser.add_argument("-v", dest="show_version", action="store_true", help="show version information")
    parser.add_argument("target", nargs="*", metavar="TARGET", help="file path or URL")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.show_version:
        print(version_text(), file=sys.stderr)
        return 0

    if len(args.target) != 1:
        parser.print_usage(sys.stderr)
        return 1

    target = args.target[0]
    try:
        settings = load_settings()
        configure(json_output=settings.log_json, level=settings.log_level)
        if is_path(target):
            attrs = parse_file(target, settings=settings)
        else:
            attrs = parse_html(target, settings=settings)
        text = dumps(attrs)
    except (MetaCollectorError, OSError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
