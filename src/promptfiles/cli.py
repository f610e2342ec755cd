"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from promptfiles import __version__
from promptfiles.config import LOG_LEVEL_KEY, load_user_settings, resolve_path


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the package logger: level from --verbose/--quiet or the
    `promptfiles.logLevel` user setting, console handler on stderr.
    """
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = str(load_user_settings().get(LOG_LEVEL_KEY) or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger("promptfiles")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptfiles",
        description="Inspect and edit the reusable prompt files setting (chat.promptFiles).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "promptfiles show . -v" works; SUPPRESS defaults
    # leave a flag given before the subcommand in place
    global_flags = argparse.ArgumentParser(add_help=False)
    global_flags.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Verbose (DEBUG) output.")
    global_flags.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS, help="Quiet (errors only).")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # show
    p_show = subparsers.add_parser(
        "show",
        help="Show whether prompt files are enabled and the resolved source folders.",
        parents=[global_flags],
    )
    p_show.add_argument("path", type=Path, nargs="?", default=Path("."), help="Workspace path (default: .).")
    p_show.add_argument("--json", action="store_true", help="Print the result as JSON.")
    p_show.set_defaults(run="show")

    # config
    p_config = subparsers.add_parser("config", help="Edit the chat.promptFiles setting.", parents=[global_flags])
    p_config.add_argument("path", type=Path, nargs="?", default=Path("."), help="Workspace path for workspace settings (default: .).")
    p_config.add_argument("--enable", metavar="FOLDER", help="Enable FOLDER as a prompt files source.")
    p_config.add_argument("--disable", metavar="FOLDER", help="Disable FOLDER (use .github/prompts to turn off the default).")
    p_config.add_argument("--remove", metavar="FOLDER", help="Remove FOLDER from the setting.")
    toggle = p_config.add_mutually_exclusive_group()
    toggle.add_argument("--on", action="store_true", help="Enable the feature (keeps existing folders).")
    toggle.add_argument("--off", action="store_true", help="Disable the feature.")
    p_config.add_argument("--global", dest="global_", action="store_true", help="Write to user settings even when inside a workspace.")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    run = getattr(args, "run", None)
    if not run:
        parser.print_help()
        sys.exit(0)

    if hasattr(args, "path"):
        args.path = resolve_path(args.path)

    if run == "show":
        from promptfiles.commands.show import run as cmd_run
    elif run == "config":
        from promptfiles.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
