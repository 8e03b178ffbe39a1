"""Verification rules and geometry shared by the puzzle variants."""

from .models import (
    Secret,
    SecretType,
    LetterStatus,
    Cell,
    Guess,
    GuessOutcome,
    CrosswordCheck,
    SelectionOutcome,
)
from .geometry import line_cells, trusted_walk, is_line, chebyshev, direction
from .scoring import score_guess, normalize_move, moves_match, letters_match
from .render import render_grid

__all__ = [
    # Models
    "Secret",
    "SecretType",
    "LetterStatus",
    "Cell",
    "Guess",
    "GuessOutcome",
    "CrosswordCheck",
    "SelectionOutcome",
    # Geometry
    "line_cells",
    "trusted_walk",
    "is_line",
    "chebyshev",
    "direction",
    # Scoring
    "score_guess",
    "normalize_move",
    "moves_match",
    "letters_match",
    # Rendering
    "render_grid",
]
