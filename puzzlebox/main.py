"""
Main entry point for building and exporting a puzzle.

Usage:
    python -m puzzlebox.main puzzle.yaml
    python -m puzzlebox.main puzzle.yaml --output out/puzzle.html --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

from .builder import build_puzzle
from .config import load_config
from .errors import ConfigurationInvalid, GenerationFailure
from .exporter import export_puzzle


def main(argv=None, provider=None):
    parser = argparse.ArgumentParser(
        description="Build a Puzzle Box puzzle and export it as standalone HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example puzzle.yaml:
  puzzle_type: WORD_SEARCH
  secret:
    type: text
    value: Dinner is on me
  params:
    words: [apple, banana, cherry]
    secret_message: HELLO
  provider:
    model: gemini/gemini-2.5-flash
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML puzzle configuration"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path for the HTML file (default: <output_dir>/<type>-puzzle.html)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Config: {args.config}")
        print(f"Puzzle type: {config.puzzle_type.value}")
        print()

    try:
        puzzle = build_puzzle(config, provider=provider)
    except ConfigurationInvalid as e:
        print("Invalid puzzle configuration:", file=sys.stderr)
        for issue in e.issues:
            print(f"  [{issue.code}] {issue.message}", file=sys.stderr)
        return 1
    except GenerationFailure as e:
        print(f"Error generating puzzle: {e}", file=sys.stderr)
        return 2

    output_path = export_puzzle(
        config.puzzle_type,
        puzzle.export_state(),
        output_dir=config.output_dir,
        output_path=Path(args.output) if args.output else None,
    )

    print(f"Puzzle exported: {output_path}")
    print(f"Open in browser: open {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
