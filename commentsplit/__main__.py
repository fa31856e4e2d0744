"""
commentsplit Entry Point
========================

Command-line merge tool. Rewrites the right-hand directory so it keeps only
the code changes relative to the left-hand directory.

Usage:
    python -m commentsplit <left_dir> <right_dir> [--strict-blank-lines] [--verbose]

Set COMMENTSPLIT_LOG=1 (or JJ_SPLIT_LOG=1) to log the action taken per file.
"""
import argparse
import logging
import os
import sys
from .tree_controller import INSTRUCTIONS_FILE, TreeController

# Default Configuration
DEFAULT_CONFIG = {
    "KEEP_BLANK_LINES": True,
    "INSTRUCTIONS_FILE": INSTRUCTIONS_FILE,
}

LOG_ENV_VARS = ("COMMENTSPLIT_LOG", "JJ_SPLIT_LOG")


def verbose_from_env(environ=None) -> bool:
    """True when any of the logging environment variables is "1" or "true"."""
    environ = os.environ if environ is None else environ
    return any(environ.get(name, "").strip().lower() in ("1", "true") for name in LOG_ENV_VARS)


def configure_logging(verbose: bool):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger("commentsplit")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commentsplit",
        description="commentsplit: keep code changes, drop comment-only edits")
    parser.add_argument("left", help="Directory with the prior revision")
    parser.add_argument("right", help="Directory with the candidate revision (rewritten in place)")
    parser.add_argument("--strict-blank-lines", action="store_true",
                        help="Drop inserted blank lines as well as comments")
    parser.add_argument("--verbose", action="store_true",
                        help="Log one line per processed file to stderr")
    return parser


def main(argv=None) -> int:
    """
    Main execution function.

    1. Parses command line arguments.
    2. Validates both directories.
    3. Reconciles the right tree against the left one.

    Returns:
        int: 0 on success, 2 on usage or path errors, 1 on I/O failures.
    """
    args = build_parser().parse_args(argv)

    config = dict(DEFAULT_CONFIG)
    if args.strict_blank_lines:
        config["KEEP_BLANK_LINES"] = False
    configure_logging(args.verbose or verbose_from_env())

    left = os.path.abspath(args.left)
    right = os.path.abspath(args.right)
    for label, path in (("left", left), ("right", right)):
        if not os.path.exists(path):
            print(f"Error: {label} path does not exist: {path}", file=sys.stderr)
            return 2
        if not os.path.isdir(path):
            print(f"Error: {label} path is not a directory: {path}", file=sys.stderr)
            return 2

    print("[commentsplit] Keeping only non-comment changes:")
    print(f"  left:  {left}")
    print(f"  right: {right}")

    controller = TreeController(
        keep_blank_lines=config["KEEP_BLANK_LINES"],
        instructions_file=config["INSTRUCTIONS_FILE"])
    try:
        controller.process(left, right)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
