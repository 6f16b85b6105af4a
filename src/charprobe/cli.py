"""Command-line interface for charprobe."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO

import charprobe
from charprobe._utils import DEFAULT_CHUNK_SIZE
from charprobe.universaldetector import UniversalDetector


def description_of(
    stream: BinaryIO, name: str = "stdin", minimal: bool = False
) -> str:
    """Return a string describing the probable encoding of a stream.

    The stream is read in :data:`~charprobe._utils.DEFAULT_CHUNK_SIZE` chunks
    until the detector is done or the stream is exhausted.

    :param stream: A binary stream to examine.
    :param name: Name to print for the stream.
    :param minimal: Print only the encoding name.
    """
    detector = UniversalDetector()
    while not detector.done:
        chunk = stream.read(DEFAULT_CHUNK_SIZE)
        if not chunk:
            break
        detector.feed(chunk)
    result = detector.finish()
    encoding = result.encoding if result is not None else None
    if minimal:
        return f"{encoding}"
    confidence = result.confidence if result is not None else 0.0
    return f"{name}: {encoding} with confidence {confidence}"


def main(argv: list[str] | None = None) -> None:
    """Run the ``charprobe`` command-line tool.

    Exits with status 1 if any of the given files could not be read.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(description="Detect character encoding of files.")
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log the detector's decisions"
    )
    parser.add_argument(
        "--version", action="version", version=f"charprobe {charprobe.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not args.files:
        print(description_of(sys.stdin.buffer, minimal=args.minimal))
        return

    failed = False
    for filepath in args.files:
        try:
            with Path(filepath).open("rb") as f:
                print(description_of(f, filepath, minimal=args.minimal))
        except OSError as e:
            print(f"charprobe: {filepath}: {e}", file=sys.stderr)
            failed = True
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
