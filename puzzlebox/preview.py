"""
Standalone CLI for inspecting an exported puzzle.

Usage:
    python -m puzzlebox.preview word-search-puzzle.html
    python -m puzzlebox.preview crossword-puzzle.html --reveal
"""

import argparse
import sys
from pathlib import Path

from .exporter import extract_payload, extract_variant
from .puzzles.models import PuzzleType
from .puzzles.registry import restore_puzzle
from .verifiers.render import render_grid


def describe(html: str, reveal: bool = False) -> str:
    """Plain-text summary of an artifact: its type, board and secret kind."""
    variant = extract_variant(html)
    puzzle = restore_puzzle(variant, extract_payload(html))

    lines = [f"Type: {variant.value}", f"Secret: {puzzle.secret.type}"]
    if reveal:
        lines.append(f"Secret value: {puzzle.secret.value}")
    lines.append("")

    if variant == PuzzleType.SLIDING_TILE:
        board = [[None if v is None else str(v) for v in row] for row in puzzle.board()]
        lines.append(render_grid(board, empty="_"))
    elif variant == PuzzleType.WORD_GUESS:
        lines.append(puzzle.solution if reveal else "? " * len(puzzle.solution))
    elif variant == PuzzleType.CROSSWORD:
        grid = puzzle.puzzle_data.grid
        if not reveal:
            grid = [["_" if cell else None for cell in row] for row in grid]
        lines.append(render_grid(grid, empty="#"))
        for direction, clues in (("Across", puzzle.puzzle_data.clues.across), ("Down", puzzle.puzzle_data.clues.down)):
            if clues:
                lines.append(f"{direction}:")
                lines.extend(f"  {clue.number}. {clue.clue}" for clue in clues)
    elif variant == PuzzleType.WORD_LADDER:
        for index, step in enumerate(puzzle.ladder):
            lines.append(step if reveal or puzzle.is_fixed(index) else "?" * len(step))
    elif variant == PuzzleType.CHESS:
        lines.append(render_grid(puzzle.board()))
        if puzzle.description:
            lines.append(puzzle.description)
        if reveal:
            lines.append(f"Solution: {puzzle.puzzle_data.solution}")
    else:
        marked = None
        if reveal:
            for solution in puzzle.puzzle_data.solutions:
                puzzle.match(solution.start.as_cell(), solution.end.as_cell())
            marked = puzzle.found_cells()
        lines.append(render_grid(puzzle.puzzle_data.grid, marked=marked))
        lines.append("Words: " + ", ".join(puzzle.words))

    return "\n".join(lines).rstrip()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print a text preview of an exported puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m puzzlebox.preview word-search-puzzle.html
  python -m puzzlebox.preview crossword-puzzle.html --reveal
        """
    )
    parser.add_argument(
        "artifact",
        help="Path to an exported puzzle HTML file"
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Show answers and the secret value"
    )

    args = parser.parse_args(argv)

    path = Path(args.artifact)
    if not path.exists():
        print(f"Error: Puzzle file not found: {args.artifact}", file=sys.stderr)
        return 1

    try:
        with open(path, encoding="utf-8") as f:
            print(describe(f.read(), reveal=args.reveal))
    except Exception as e:
        print(f"Error reading puzzle: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
