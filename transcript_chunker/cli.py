"""Command-line interface for the Transcript Chunker.

WHY: Users need a simple way to turn a saved fragment transcript into a
readable, timestamped document from the terminal. The CLI wires together
fragment loading, the chunker, pluggable formatter output, and file
saving behind a single command.

HOW: Uses argparse to accept an input JSON file (or "-" for stdin), the
block threshold, the line interval, output format selection, and either
an output directory or --stdout. Status messages go to stderr; output
files are saved next to the source (or to --output-dir).

RULES:
- Positional argument: fragment JSON file path, or "-" for stdin
- --formats: comma-separated formatter keys (default: timestamped_text)
- --stdout writes the first selected format to stdout, nothing to disk
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-transcript-2.txt)
- Status output goes to stderr (not stdout)
- An empty transcript is "nothing to insert": no files, exit 0
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from transcript_chunker.config import (
    DEFAULT_THRESHOLD_SECONDS,
    DEFAULT_TIMESTAMP_INTERVAL,
    load_settings,
    parse_threshold,
)
from transcript_chunker.core.ir import TimedFragment
from transcript_chunker.core.loader import load_fragments_file, loads_fragments
from transcript_chunker.formatters import DEFAULT_FORMAT, FORMATTERS
from transcript_chunker.formatters.base import FormatterOutput


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may run the chunker several times on the same transcript
    with different thresholds. Overwriting earlier output would lose work.

    RULES:
    - First attempt: {stem}{suffix} (e.g. lecture-transcript.txt)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. lecture-transcript-2.txt)
    - Counter starts at 2 and increments

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # e.g. "-transcript.txt" → ("-transcript", ".txt")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Write one formatter output to a conflict-free path as UTF-8."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _parse_format_keys(formats: Optional[str]) -> List[str]:
    if not formats:
        return [DEFAULT_FORMAT]
    keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return keys


def _load_input(input_file: str) -> List[TimedFragment]:
    if input_file == "-":
        return loads_fragments(sys.stdin.read())
    return load_fragments_file(input_file)


def run(args: argparse.Namespace) -> int:
    """Execute the load → chunk → format → save pipeline.

    Returns:
        Number of documents written (to disk or stdout).
    """
    format_keys = _parse_format_keys(args.formats)

    reading_stdin = args.input_file == "-"
    input_path = None if reading_stdin else Path(args.input_file).resolve()
    if input_path is not None and not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    if not args.stdout:
        if args.output_dir:
            output_dir = Path(args.output_dir).resolve()
        elif input_path is not None:
            output_dir = input_path.parent
        else:
            output_dir = Path.cwd()
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))

    try:
        settings = load_settings(
            threshold_seconds=parse_threshold(args.threshold) if args.threshold is not None else None,
            timestamp_interval=args.interval,
        )
        _status("Loading transcript...")
        fragments = _load_input(args.input_file)
    except (ValueError, OSError) as e:
        _fail(str(e))

    _status("  Loaded {} fragments".format(len(fragments)))
    if not fragments:
        _status("Nothing to insert: transcript has no fragments.")
        return 0

    if args.stdout:
        formatter = FORMATTERS[format_keys[0]]()
        for output in formatter.format(fragments, settings):
            sys.stdout.write(output.content)
        sys.stdout.flush()
        return 1

    stem = input_path.stem if input_path is not None else "stdin"
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(fragments, settings):
            try:
                saved_path = _save_output(output, stem, output_dir)
            except OSError as e:
                _fail(str(e))
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return len(saved_files)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="transcript_chunker",
        description="Group timed transcript fragments into timestamped blocks "
                    "and write readable documents (plain text, Markdown, ...).",
    )

    parser.add_argument(
        "input_file",
        help="Path to a fragment JSON file, or '-' to read from stdin.",
    )

    parser.add_argument(
        "--threshold",
        default=None,
        help="Seconds of speech per block before a new timestamp "
             "(default: TRANSCRIPT_THRESHOLD_SECONDS or {}).".format(
                 int(DEFAULT_THRESHOLD_SECONDS)),
    )

    parser.add_argument(
        "--interval",
        type=int,
        default=None,
        help="Fragments per timestamp for the line_interval format "
             "(default: TRANSCRIPT_TIMESTAMP_INTERVAL or {}).".format(
                 DEFAULT_TIMESTAMP_INTERVAL),
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), DEFAULT_FORMAT),
    )

    destination = parser.add_mutually_exclusive_group()
    destination.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )
    destination.add_argument(
        "--stdout",
        action="store_true",
        help="Write the first selected format to stdout instead of saving files.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    run(args)


if __name__ == "__main__":
    main()
