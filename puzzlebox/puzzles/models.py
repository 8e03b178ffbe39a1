"""
Pydantic models for the puzzle variants.

Holds the variant tag, the shared phase enum, the generated content shapes
returned by the content provider, and the exported state payloads. Payload
models serialize with camelCase keys because the exported player scripts
read them that way.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..errors import ConfigurationIssue
from ..verifiers.models import Cell, Secret


class PuzzleType(str, Enum):
    """Variant tag. Values double as the export table keys."""
    SLIDING_TILE = "SLIDING_TILE"
    WORD_GUESS = "WORD_GUESS"
    CROSSWORD = "CROSSWORD"
    WORD_LADDER = "WORD_LADDER"
    CHESS = "CHESS"
    WORD_SEARCH = "WORD_SEARCH"


class Phase(str, Enum):
    CONFIGURING = "configuring"
    GENERATING = "generating"
    PLAYING = "playing"
    SOLVED = "solved"
    LOST = "lost"


class PayloadModel(BaseModel):
    """Base for models that cross the export boundary."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


def _check_rectangular(grid: List[list]) -> None:
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")


# --- Generated content ---------------------------------------------------


class Coordinate(PayloadModel):
    row: int
    col: int

    def as_cell(self) -> Cell:
        return Cell(self.row, self.col)


class CrosswordClue(PayloadModel):
    number: int
    clue: str
    answer: str = ""
    row: int = 0
    col: int = 0
    length: int = 0


class CrosswordClues(PayloadModel):
    across: List[CrosswordClue] = Field(default_factory=list)
    down: List[CrosswordClue] = Field(default_factory=list)


class CrosswordData(PayloadModel):
    """A generated crossword: None cells are black squares."""
    theme: str = ""
    grid: List[List[Optional[str]]]
    clues: CrosswordClues = Field(default_factory=CrosswordClues)

    @model_validator(mode="after")
    def _validate_grid(self) -> "CrosswordData":
        _check_rectangular(self.grid)
        if not any(cell for row in self.grid for cell in row):
            raise ValueError("crossword grid has no letter cells")
        return self


class ChessPuzzleData(PayloadModel):
    fen: str = Field(..., min_length=1)
    solution: str = Field(..., min_length=1)
    description: str = ""


class WordSearchSolution(PayloadModel):
    word: str = Field(..., min_length=1)
    start: Coordinate
    end: Coordinate

    @field_validator("word")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.strip().upper()


class WordSearchData(PayloadModel):
    grid: List[List[str]]
    solutions: List[WordSearchSolution]
    words: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_grid(self) -> "WordSearchData":
        _check_rectangular(self.grid)
        if not self.solutions:
            raise ValueError("word search has no solutions")
        if self.words:
            self.words = [word.strip().upper() for word in self.words]
        else:
            self.words = [solution.word for solution in self.solutions]
        solution_words = {solution.word for solution in self.solutions}
        if solution_words != set(self.words):
            raise ValueError(
                f"solutions {sorted(solution_words)} do not match word list {sorted(set(self.words))}"
            )
        return self


class WordLadderData(BaseModel):
    ladder: List[str] = Field(..., min_length=2)

    @field_validator("ladder")
    @classmethod
    def _non_empty_steps(cls, value: List[str]) -> List[str]:
        if any(not step.strip() for step in value):
            raise ValueError("ladder steps must be non-empty")
        return [step.strip() for step in value]


# --- Sliding tile --------------------------------------------------------


class Tile(PayloadModel):
    id: int
    original_index: int
    current_index: int


# --- Exported state ------------------------------------------------------


class SlidingTileState(PayloadModel):
    puzzle_image_src: str
    grid_size: int
    initial_tiles: List[Tile]
    secret: Secret


class WordGuessState(PayloadModel):
    solution: str
    secret: Secret


class CrosswordState(PayloadModel):
    puzzle_data: CrosswordData
    secret: Secret


class WordLadderState(PayloadModel):
    solution: List[str]
    secret: Secret


class ChessState(PayloadModel):
    puzzle_data: ChessPuzzleData
    secret: Secret


class WordSearchState(PayloadModel):
    puzzle_data: WordSearchData
    secret: Secret


def secret_issues(secret: Optional[Secret]) -> List[ConfigurationIssue]:
    """Issues preventing a secret from being attached to a puzzle."""
    if secret is None or not secret.is_set:
        return [ConfigurationIssue(
            code="MISSING_SECRET",
            message="Please set a secret reward.",
            field="secret",
        )]
    return []
