"""
polarity CLI — Command-line interface for negating posts.
"""

import argparse
import json
import sys
from pathlib import Path

from polarity import __version__
from polarity.batch import negate_posts
from polarity.core.context import InversionRequest
from polarity.core.engine import get_engine
from polarity.grammar.contractions import expand_contractions
from polarity.ir.serialization import to_json
from polarity.lexicon import get_lexicon
from polarity.passes.p00_normalize import normalize_text


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="polarity",
        description="Invert the polarity of English sentences",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"polarity {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Negate command
    negate_parser = subparsers.add_parser("negate", help="Negate a post")
    negate_parser.add_argument(
        "input",
        type=str,
        help="Input text or path to file (use - for stdin)",
    )
    negate_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )
    negate_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json",
    )
    negate_parser.add_argument(
        "--per-line",
        action="store_true",
        help="Treat every non-empty input line as a separate post",
    )
    negate_parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker threads for --per-line (default: 1)",
    )
    _add_logging_arguments(negate_parser)

    # Normalize command
    normalize_parser = subparsers.add_parser(
        "normalize", help="Show the cleaned-up text the negation runs on"
    )
    normalize_parser.add_argument(
        "input",
        type=str,
        help="Input text or path to file (use - for stdin)",
    )
    _add_logging_arguments(normalize_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    _configure_logging(args)

    if args.command == "negate":
        return run_negate(args)
    if args.command == "normalize":
        return run_normalize(args)

    return 0


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or POLARITY_LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (pipeline,normalize,grammar,inversion,lexicon,system). Default: all",
    )


def _configure_logging(args: argparse.Namespace) -> None:
    from polarity.core.logging import LogChannel, configure_logging, get_current_config, get_logger

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(
        level=args.log_level,
        channels=channels,
        force=True,
    )
    get_logger(LogChannel.SYSTEM).verbose("logging_configured", config=get_current_config())


def read_input(value: str) -> str:
    """Literal text, a file path, or "-" for stdin."""
    if value == "-":
        return sys.stdin.read()
    # Only check as path if it's short enough to be a valid path
    if len(value) < 256 and Path(value).is_file():
        return Path(value).read_text(encoding="utf-8")
    return value


def write_output(output: str, path) -> None:
    if path:
        Path(path).write_text(output + "\n", encoding="utf-8")
    else:
        print(output)


def run_negate(args: argparse.Namespace) -> int:
    """Run negation command."""
    text = read_input(args.input)

    if args.per_line:
        return run_batch(args, text)

    engine = get_engine()
    result = engine.transform(InversionRequest(text=text))

    if args.format == "json":
        output = to_json(result)
    else:
        output = result.output_text
        if result.diagnostics:
            output += "\n\n--- Diagnostics ---\n"
            for diag in result.diagnostics:
                output += f"[{diag.level.value}] {diag.code}: {diag.message}\n"

    write_output(output, args.output)

    return 0 if result.status.value in ("success", "partial") else 1


def run_batch(args: argparse.Namespace, text: str) -> int:
    """Negate every non-empty line as its own post."""
    posts = [line for line in text.splitlines() if line.strip()]
    try:
        records = negate_posts(posts, workers=args.workers)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        output = json.dumps(
            [record.model_dump(mode="json") for record in records],
            indent=2,
        )
    else:
        output = "\n".join(record.inverted for record in records)

    write_output(output, args.output)
    return 0


def run_normalize(args: argparse.Namespace) -> int:
    """Print the normalized and contraction-expanded text."""
    text = read_input(args.input)
    print(expand_contractions(normalize_text(text), get_lexicon()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
