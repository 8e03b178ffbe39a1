"""Matching rules shared by the puzzle variants."""

import re
from typing import List, Optional

from .models import LetterStatus


_MOVE_DECORATION = re.compile(r"[+#\s]")


def letters_match(entry: Optional[str], expected: Optional[str]) -> bool:
    """Case-insensitive comparison where a missing entry never matches."""
    if not entry or not expected:
        return False
    return entry.strip().upper() == expected.strip().upper()


def score_guess(guess: str, solution: str) -> List[LetterStatus]:
    """
    Score a guess against the solution with Wordle-style feedback.

    Pass 1 marks exact-position matches as correct and consumes those letters
    from a working copy of the solution. Pass 2 walks the remaining guess
    letters left to right; each one consumes the first unused occurrence in
    the working copy and becomes present, otherwise it is absent.

    Raises:
        ValueError: If guess and solution lengths differ
    """
    guess = guess.upper()
    solution = solution.upper()
    if len(guess) != len(solution):
        raise ValueError(
            f"Guess length {len(guess)} does not match solution length {len(solution)}"
        )

    statuses: List[LetterStatus] = ["absent"] * len(guess)
    remaining: List[Optional[str]] = list(solution)

    for i, letter in enumerate(guess):
        if letter == solution[i]:
            statuses[i] = "correct"
            remaining[i] = None

    for i, letter in enumerate(guess):
        if statuses[i] == "correct":
            continue
        if letter in remaining:
            statuses[i] = "present"
            remaining[remaining.index(letter)] = None

    return statuses


def normalize_move(move: str) -> str:
    """Strip whitespace and check/mate marks from algebraic notation, lower-cased."""
    return _MOVE_DECORATION.sub("", move or "").lower()


def moves_match(submitted: str, solution: str) -> bool:
    """Compare two moves ignoring decoration only; Qh7 and Qxh7 stay different."""
    normalized = normalize_move(submitted)
    return bool(normalized) and normalized == normalize_move(solution)
