"""Data models for solution verification."""

from typing import Dict, List, Literal, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


SecretType = Literal["text", "url", "image", "video"]
LetterStatus = Literal["correct", "present", "absent"]


class Secret(BaseModel):
    """The reward revealed when a puzzle is solved."""
    model_config = ConfigDict(frozen=True)

    type: SecretType = "text"
    value: str = ""

    @property
    def is_set(self) -> bool:
        return bool(self.value.strip())


class Cell(NamedTuple):
    """A grid cell addressed by row and column."""
    row: int
    col: int

    @property
    def key(self) -> str:
        return f"{self.row}-{self.col}"


class Guess(BaseModel):
    """A scored Word-Guess attempt."""
    word: str
    statuses: List[LetterStatus]


class GuessOutcome(BaseModel):
    """Result of submitting a Word-Guess attempt."""
    accepted: bool
    error: Optional[str] = None  # INVALID_LENGTH, INVALID_LETTERS or GAME_OVER
    guess: Optional[Guess] = None
    message: Optional[str] = None
    solved: bool = False
    lost: bool = False
    attempts_left: int = 0


class CrosswordCheck(BaseModel):
    """Per-cell feedback from checking a crossword fill."""
    feedback: Dict[str, bool] = Field(default_factory=dict)  # keyed "row-col"
    correct: int = 0
    total: int = 0
    solved: bool = False

    @property
    def ratio(self) -> float:
        return self.correct / self.total if self.total else 0.0

    @property
    def message(self) -> str:
        if self.solved:
            return "Crossword complete!"
        return f"You have {self.correct} out of {self.total} correct letters. Keep trying!"


class SelectionOutcome(BaseModel):
    """Result of releasing a word-search drag gesture."""
    attempted: bool = False
    found_word: Optional[str] = None
    cells: List[Cell] = Field(default_factory=list)
    solved: bool = False
