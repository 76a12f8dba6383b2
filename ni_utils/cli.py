#!/usr/bin/env python3
"""CLI for ni-utils."""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from ni_utils.commands import cmd_exists, get_volta_prefix
from ni_utils.errors import NiError
from ni_utils.process import invariant
from ni_utils.safe_io import write_file_safe
from ni_utils.text import limit_text


def configure_logging(verbose: bool) -> None:
    """Attach a stderr handler to the ni_utils logger."""
    # Default: INFO with bare messages. --verbose: DEBUG with module-prefixed format.
    handler = logging.StreamHandler(sys.stderr)
    if verbose:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
        logging.getLogger("ni_utils").setLevel(logging.DEBUG)
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger("ni_utils").setLevel(logging.INFO)
    logging.getLogger("ni_utils").addHandler(handler)


def cmd_write(args: argparse.Namespace) -> None:
    """Write --text (or stdin) to the target path."""
    data = args.text if args.text is not None else sys.stdin.read()
    ok = write_file_safe(args.path, data)
    invariant(ok, f"Error: failed to write {args.path}")
    print(f"Wrote {args.path}")


def cmd_exists_all(args: argparse.Namespace) -> None:
    """Report which of the given commands are on PATH."""
    missing = 0
    for name in args.commands:
        found = cmd_exists(name)
        if not found:
            missing += 1
        print(f"{name}: {'yes' if found else 'no'}")
    if missing:
        sys.exit(1)


def cmd_prefix(args: argparse.Namespace) -> None:
    print(get_volta_prefix())


def cmd_limit(args: argparse.Namespace) -> None:
    print(limit_text(args.text, args.width))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ni-utils",
        description="Helpers used by the ni package-manager runner.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ni-utils write package.json < new.json
  ni-utils write .npmrc --text "auto-install-peers=true"
  ni-utils exists pnpm yarn bun
  ni-utils prefix
  ni-utils limit 20 "a very long package script description"
        """,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    write = sub.add_parser("write", help="Atomically write stdin (or --text) to PATH")
    write.add_argument("path", type=Path, help="Destination file")
    write.add_argument("--text", default=None, help="Content to write instead of stdin")
    write.set_defaults(func=cmd_write)

    exists = sub.add_parser("exists", help="Check whether commands are on PATH")
    exists.add_argument("commands", nargs="+", metavar="CMD")
    exists.set_defaults(func=cmd_exists_all)

    prefix = sub.add_parser("prefix", help="Print the Volta run prefix, if Volta is installed")
    prefix.set_defaults(func=cmd_prefix)

    limit = sub.add_parser("limit", help="Truncate TEXT to WIDTH characters")
    limit.add_argument("width", type=int)
    limit.add_argument("text")
    limit.set_defaults(func=cmd_limit)

    return parser


def main(argv: list[str] | None = None) -> None:
    # Load environment variables from .env file (NI_TEMP_DIR)
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    configure_logging(args.verbose)

    try:
        args.func(args)
    except NiError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
