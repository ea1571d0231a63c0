"""Command line entry point: run a script file or stdin through runscript."""

from __future__ import annotations

import sys
from argparse import REMAINDER, ArgumentParser

from runscript.config import settings
from runscript.runner import run
from runscript.types import IoOptions, ScriptError, ScriptOptions
from runscript.utils.logger import get_logger, setup_logging

logger = get_logger("runscript.cli")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="runscript", description="Run a shell script as a standalone file"
    )
    parser.add_argument("script", help="Path to the script text, or '-' for stdin")
    parser.add_argument(
        "args", nargs=REMAINDER, help="Arguments passed to the script"
    )
    parser.add_argument("--runner", help="Interpreter used instead of the shell")
    parser.add_argument(
        "--exit-on-error",
        action="store_true",
        help="Abort on the first failing command (POSIX only)",
    )
    parser.add_argument(
        "--print-commands",
        action="store_true",
        help="Echo each command before it runs (POSIX only)",
    )
    parser.add_argument(
        "--log-format",
        choices=["pretty", "json"],
        help="Log format (pretty or json). Overrides LOG_FORMAT env var.",
    )
    parser.add_argument(
        "--log-colors",
        type=lambda x: x.lower() in ("true", "1", "yes", "on"),
        help="Enable colored logs (true/false). Overrides LOG_COLORS env var.",
    )
    parser.add_argument(
        "--log-level", help="Log level. Overrides RUNSCRIPT_LOG_LEVEL env var."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        log_format=args.log_format or settings.log_format,
        log_colors=settings.log_colors if args.log_colors is None else args.log_colors,
        level=args.log_level or settings.log_level,
    )

    try:
        if args.script == "-":
            script = sys.stdin.read()
        else:
            # Non-UTF-8 bytes round-trip to the staged file unchanged
            with open(args.script, encoding="utf-8", errors="surrogateescape") as f:
                script = f.read()
    except OSError as e:
        logger.error("Unable to read script", path=args.script, error=str(e))
        return 1

    options = ScriptOptions(
        runner=args.runner,
        exit_on_error=args.exit_on_error,
        print_commands=args.print_commands,
        capture_input=IoOptions.NULL if args.script == "-" else IoOptions.INHERIT,
        capture_output=IoOptions.INHERIT,
    )

    try:
        code, _, _ = run(script, args.args, options)
    except ScriptError as e:
        logger.error("Script invocation failed", error=str(e))
        return 1

    logger.info("Script exited", exit_code=code)
    # Killed by a signal; sys.exit(-1) would surface as 255
    return 1 if code < 0 else code


if __name__ == "__main__":
    sys.exit(main())
