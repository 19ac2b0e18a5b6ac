"""Entry point for the alias-generator CLI."""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .constants import SUBCOMMANDS
from .log import enable_verbose, logger
from .preferences import load_preferences, preferences_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alias",
        description="Create persistent cmd.exe aliases backed by .cmd shims.",
        epilog=f"Sub-commands: {', '.join(SUBCOMMANDS)}, or <name> <command...>",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"alias-generator {__version__}",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Preferences file (default: ~/.alias-generator/preferences.yaml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log file operations to stderr",
    )
    parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Answer yes to every confirmation",
    )
    parser.add_argument(
        "words",
        nargs=argparse.REMAINDER,
        help="Sub-command and its arguments",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run alias-generator."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        enable_verbose()

    prefs = load_preferences(preferences_path(args.config))
    if args.yes:
        prefs.prompts.assume_yes = True

    from .app import AliasApp

    try:
        status = AliasApp(prefs).run(args.words)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        status = 1
    except Exception:
        logger.debug("Fatal error in alias-generator", exc_info=True)
        import traceback

        traceback.print_exc()
        status = 1

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
