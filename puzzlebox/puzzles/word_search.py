from typing import Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, Field

from ..errors import ConfigurationInvalid, ConfigurationIssue, PhaseError
from ..verifiers.geometry import line_cells, trusted_walk
from ..verifiers.models import Cell, Secret, SelectionOutcome
from .generation import run_generation
from .models import Phase, WordSearchData, WordSearchState, secret_issues


DEFAULT_GRID_SIZE = 12


def clean_word_list(words: List[str]) -> List[str]:
    """Trim, upper-case and drop blank entries, keeping order."""
    return [w.strip().upper() for w in words if w and w.strip()]


class WordSearchPuzzle(BaseModel):
    """
    Find hidden words by dragging across a letter grid.

    A drag is a press on one cell, moves over others and a release. On
    release the (start, end) pair is matched against the generated solution
    endpoints in both directions. The puzzle is solved when as many words
    have been found as the word list holds.
    """

    phase: Phase = Phase.CONFIGURING
    secret: Secret = Field(default_factory=Secret)
    secret_message: str = ""
    puzzle_data: Optional[WordSearchData] = None
    found_words: List[str] = Field(default_factory=list)
    selection: List[Cell] = Field(default_factory=list)

    def generate(
        self,
        provider,
        words: List[str],
        secret_message: str,
        secret: Secret,
        grid_size: int = DEFAULT_GRID_SIZE,
    ) -> WordSearchData:
        """
        Raises:
            ConfigurationInvalid: If fewer than two distinct words, no hidden
                message or no secret were given
            GenerationFailure: If the provider returned no usable grid
        """
        issues = []
        if isinstance(words, str):
            word_list = []
            issues.append(ConfigurationIssue(
                code="INVALID_WORDS",
                message="Words must be given as a list, not a single string.",
                field="words",
            ))
        else:
            word_list = clean_word_list(words or [])
        if not issues and len(word_list) < 2:
            issues.append(ConfigurationIssue(
                code="TOO_FEW_WORDS",
                message="Please provide at least two words.",
                field="words",
            ))
        duplicates = sorted({w for w in word_list if word_list.count(w) > 1})
        if duplicates:
            issues.append(ConfigurationIssue(
                code="DUPLICATE_WORDS",
                message=f"Each word may appear only once: {', '.join(duplicates)}.",
                field="words",
            ))
        if not (secret_message or "").strip():
            issues.append(ConfigurationIssue(
                code="MISSING_MESSAGE",
                message="Please provide a secret message.",
                field="secret_message",
            ))
        issues.extend(secret_issues(secret))
        if issues:
            raise ConfigurationInvalid(issues)

        def coerce(raw) -> WordSearchData:
            data = raw.model_dump() if isinstance(raw, BaseModel) else dict(raw)
            data["words"] = word_list
            return WordSearchData.model_validate(data)

        data = run_generation(
            self,
            "word search",
            lambda: provider.generate_word_search(word_list, secret_message.strip(), grid_size),
            coerce,
        )
        self.secret_message = secret_message.strip()
        self._begin(secret, data)
        return data

    def _begin(self, secret: Secret, data: WordSearchData) -> None:
        self.secret = secret
        self.puzzle_data = data
        self.found_words = []
        self.selection = []
        self.phase = Phase.PLAYING

    @property
    def words(self) -> List[str]:
        return self.puzzle_data.words if self.puzzle_data else []

    @property
    def is_solved(self) -> bool:
        return self.phase == Phase.SOLVED

    @property
    def revealed_secret(self) -> Optional[Secret]:
        return self.secret if self.is_solved else None

    # -- gesture ---------------------------------------------------------

    def press(self, row: int, col: int) -> None:
        """Start a new selection at a cell."""
        self._require_play()
        if self.phase != Phase.PLAYING:
            return
        self.selection = [Cell(row, col)]

    def move(self, row: int, col: int) -> None:
        """Extend the live selection; ignored without a prior press."""
        if self.phase != Phase.PLAYING or not self.selection:
            return
        cell = Cell(row, col)
        if cell != self.selection[-1]:
            self.selection = [self.selection[0], cell]

    def release(self) -> SelectionOutcome:
        """
        Finish the gesture and try to match it against a hidden word.

        Selections with fewer than two points are discarded. The selection
        is always cleared afterwards.
        """
        selection, self.selection = self.selection, []
        if self.phase != Phase.PLAYING or len(selection) < 2:
            return SelectionOutcome(solved=self.is_solved)

        start, end = selection[0], selection[-1]
        outcome = SelectionOutcome(attempted=True, cells=line_cells(start, end))
        outcome.found_word = self.match(start, end)
        outcome.solved = self.is_solved
        return outcome

    def select(self, start: Tuple[int, int], end: Tuple[int, int]) -> SelectionOutcome:
        """Convenience for a full press, move, release gesture."""
        self.press(*start)
        self.move(*end)
        return self.release()

    # -- matching --------------------------------------------------------

    def match(self, start: Cell, end: Cell) -> Optional[str]:
        """
        Mark the first unfound solution whose endpoints equal (start, end)
        in either order.

        Returns:
            The newly found word, or None
        """
        self._require_play()
        if self.phase != Phase.PLAYING:
            return None

        gesture = {(Cell(*start), Cell(*end)), (Cell(*end), Cell(*start))}
        for solution in self.puzzle_data.solutions:
            endpoints = (solution.start.as_cell(), solution.end.as_cell())
            if endpoints in gesture and solution.word not in self.found_words:
                self.found_words.append(solution.word)
                self._check_win()
                return solution.word
        return None

    def _check_win(self) -> None:
        if len(self.found_words) == len(self.words):
            self.phase = Phase.SOLVED

    def _require_play(self) -> None:
        if self.puzzle_data is None:
            raise PhaseError("Puzzle has not been generated")

    # -- display ---------------------------------------------------------

    def selected_cells(self) -> Set[Cell]:
        """Cells covered by the live gesture."""
        if not self.selection:
            return set()
        return set(line_cells(self.selection[0], self.selection[-1]))

    def found_cells(self) -> Set[Cell]:
        """Cells of every found word, walked from its stored endpoints."""
        cells: Set[Cell] = set()
        if self.puzzle_data is None:
            return cells
        for solution in self.puzzle_data.solutions:
            if solution.word in self.found_words:
                cells.update(trusted_walk(solution.start.as_cell(), solution.end.as_cell()))
        return cells

    def export_state(self) -> Dict:
        if self.puzzle_data is None:
            raise PhaseError("Nothing to export before the puzzle is generated")
        return WordSearchState(puzzle_data=self.puzzle_data, secret=self.secret).to_payload()

    @classmethod
    def from_export(cls, payload: Dict) -> "WordSearchPuzzle":
        state = WordSearchState.model_validate(payload)
        puzzle = cls()
        puzzle._begin(state.secret, state.puzzle_data)
        return puzzle
