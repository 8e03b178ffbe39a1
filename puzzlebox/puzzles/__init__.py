"""Puzzle variants: configuration, play and win detection."""

from .models import (
    PuzzleType,
    Phase,
    Tile,
    Coordinate,
    CrosswordClue,
    CrosswordClues,
    CrosswordData,
    ChessPuzzleData,
    WordSearchSolution,
    WordSearchData,
    WordLadderData,
)
from .sliding_tile import SlidingTilePuzzle, shuffle_tiles, is_solvable, GRID_SIZES
from .word_guess import WordGuessPuzzle, WORD_LENGTH, MAX_GUESSES
from .crossword import CrosswordPuzzle
from .word_ladder import WordLadderPuzzle
from .chess_mate import ChessMatePuzzle, board_from_fen, PIECE_GLYPHS
from .word_search import WordSearchPuzzle
from .registry import VARIANTS, VariantSpec, get_variant, resolve_tag, create_puzzle, restore_puzzle

__all__ = [
    # Models
    "PuzzleType",
    "Phase",
    "Tile",
    "Coordinate",
    "CrosswordClue",
    "CrosswordClues",
    "CrosswordData",
    "ChessPuzzleData",
    "WordSearchSolution",
    "WordSearchData",
    "WordLadderData",
    # Variants
    "SlidingTilePuzzle",
    "shuffle_tiles",
    "is_solvable",
    "GRID_SIZES",
    "WordGuessPuzzle",
    "WORD_LENGTH",
    "MAX_GUESSES",
    "CrosswordPuzzle",
    "WordLadderPuzzle",
    "ChessMatePuzzle",
    "board_from_fen",
    "PIECE_GLYPHS",
    "WordSearchPuzzle",
    # Dispatch
    "VARIANTS",
    "VariantSpec",
    "get_variant",
    "resolve_tag",
    "create_puzzle",
    "restore_puzzle",
]
