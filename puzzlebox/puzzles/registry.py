"""
Variant dispatch table.

One entry per PuzzleType bundles the state machine class with the pieces the
export pipeline needs. The table is checked for exhaustiveness at import
time, so a missing entry fails fast instead of at export.
"""

from typing import Dict, NamedTuple, Type, Union

from pydantic import BaseModel

from ..errors import UnknownVariant
from .chess_mate import ChessMatePuzzle
from .crossword import CrosswordPuzzle
from .models import (
    ChessState,
    CrosswordState,
    PayloadModel,
    PuzzleType,
    SlidingTileState,
    WordGuessState,
    WordLadderState,
    WordSearchState,
)
from .sliding_tile import SlidingTilePuzzle
from .word_guess import WordGuessPuzzle
from .word_ladder import WordLadderPuzzle
from .word_search import WordSearchPuzzle


class VariantSpec(NamedTuple):
    tag: PuzzleType
    title: str
    puzzle_cls: Type[BaseModel]
    state_cls: Type[PayloadModel]
    player_script: str  # asset under exporter/assets/players/
    player_name: str  # JS renderer registered by that script
    generated: bool  # content comes from a ContentProvider


VARIANTS: Dict[PuzzleType, VariantSpec] = {
    PuzzleType.SLIDING_TILE: VariantSpec(
        PuzzleType.SLIDING_TILE, "Sliding Tile", SlidingTilePuzzle, SlidingTileState,
        "sliding_tile.js", "SlidingTilePlayer", False,
    ),
    PuzzleType.WORD_GUESS: VariantSpec(
        PuzzleType.WORD_GUESS, "Word Guess", WordGuessPuzzle, WordGuessState,
        "word_guess.js", "WordGuessPlayer", False,
    ),
    PuzzleType.CROSSWORD: VariantSpec(
        PuzzleType.CROSSWORD, "Crossword", CrosswordPuzzle, CrosswordState,
        "crossword.js", "CrosswordPlayer", True,
    ),
    PuzzleType.WORD_LADDER: VariantSpec(
        PuzzleType.WORD_LADDER, "Word Ladder", WordLadderPuzzle, WordLadderState,
        "word_ladder.js", "WordLadderPlayer", True,
    ),
    PuzzleType.CHESS: VariantSpec(
        PuzzleType.CHESS, "Chess Puzzle", ChessMatePuzzle, ChessState,
        "chess_mate.js", "ChessMatePlayer", True,
    ),
    PuzzleType.WORD_SEARCH: VariantSpec(
        PuzzleType.WORD_SEARCH, "Word Search", WordSearchPuzzle, WordSearchState,
        "word_search.js", "WordSearchPlayer", True,
    ),
}

_missing = set(PuzzleType) - set(VARIANTS)
if _missing:
    raise RuntimeError(f"No variant entry for: {sorted(t.value for t in _missing)}")


def resolve_tag(tag: Union[PuzzleType, str]) -> PuzzleType:
    """
    Accept a PuzzleType or its string value (case-insensitive, '-' or '_').

    Raises:
        UnknownVariant: If the tag names no variant
    """
    if isinstance(tag, PuzzleType):
        return tag
    key = str(tag or "").strip().upper().replace("-", "_")
    try:
        return PuzzleType(key)
    except ValueError:
        raise UnknownVariant(f"Unknown puzzle type: {tag!r}") from None


def get_variant(tag: Union[PuzzleType, str]) -> VariantSpec:
    """
    Look up the dispatch entry for a tag.

    Raises:
        UnknownVariant: If the tag has no entry
    """
    puzzle_type = resolve_tag(tag)
    try:
        return VARIANTS[puzzle_type]
    except KeyError:
        raise UnknownVariant(f"Unknown puzzle type: {tag!r}") from None


def create_puzzle(tag: Union[PuzzleType, str], **kwargs) -> BaseModel:
    """Instantiate an unconfigured puzzle of the given variant."""
    return get_variant(tag).puzzle_cls(**kwargs)


def restore_puzzle(tag: Union[PuzzleType, str], payload: Dict) -> BaseModel:
    """Rebuild a playable puzzle from an exported payload."""
    return get_variant(tag).puzzle_cls.from_export(payload)
