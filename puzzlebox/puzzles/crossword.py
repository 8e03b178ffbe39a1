from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..errors import ConfigurationInvalid, ConfigurationIssue, PhaseError
from ..verifiers.models import Cell, CrosswordCheck, Secret
from ..verifiers.scoring import letters_match
from .generation import run_generation
from .models import CrosswordData, CrosswordState, Phase, secret_issues


class CrosswordPuzzle(BaseModel):
    """
    Fill-in crossword generated from a theme or a word list.

    Checking the grid reports per-cell feedback and a correct/total count
    every time. The puzzle is solved once every letter cell is correct.
    """

    phase: Phase = Phase.CONFIGURING
    secret: Secret = Field(default_factory=Secret)
    puzzle_data: Optional[CrosswordData] = None
    answers: Dict[str, str] = Field(default_factory=dict)  # keyed "row-col"
    last_check: Optional[CrosswordCheck] = None

    def generate(
        self,
        provider,
        secret: Secret,
        theme: Optional[str] = None,
        words: Optional[List[str]] = None,
    ) -> CrosswordData:
        """
        Generate the crossword from either a theme or a word list.

        Args:
            provider: ContentProvider used for generation
            secret: Reward revealed on completion
            theme: Theme for a themed crossword
            words: Explicit word list (at least two words); takes precedence over theme

        Raises:
            ConfigurationInvalid: If the inputs are incomplete
            GenerationFailure: If the provider returned nothing usable
        """
        issues = secret_issues(secret)
        word_list = None
        if isinstance(words, str):
            issues.append(ConfigurationIssue(
                code="INVALID_WORDS",
                message="Words must be given as a list, not a single string.",
                field="words",
            ))
        elif words is not None:
            word_list = [w.strip() for w in words if w and w.strip()]
            if len(word_list) < 2:
                issues.append(ConfigurationIssue(
                    code="TOO_FEW_WORDS",
                    message="Please provide at least two words.",
                    field="words",
                ))
        elif not (theme or "").strip():
            issues.append(ConfigurationIssue(
                code="MISSING_THEME",
                message="Please enter a theme.",
                field="theme",
            ))
        if issues:
            raise ConfigurationInvalid(issues)

        data = run_generation(
            self,
            "crossword",
            lambda: provider.generate_crossword((theme or "").strip(), word_list),
            CrosswordData.model_validate,
        )
        self._begin(secret, data)
        return data

    def _begin(self, secret: Secret, data: CrosswordData) -> None:
        self.secret = secret
        self.puzzle_data = data
        self.answers = {}
        self.last_check = None
        self.phase = Phase.PLAYING

    @property
    def is_solved(self) -> bool:
        return self.phase == Phase.SOLVED

    @property
    def revealed_secret(self) -> Optional[Secret]:
        return self.secret if self.is_solved else None

    def letter_cells(self) -> List[Cell]:
        """Every non-black cell in row-major order."""
        if self.puzzle_data is None:
            return []
        return [
            Cell(r, c)
            for r, row in enumerate(self.puzzle_data.grid)
            for c, value in enumerate(row)
            if value
        ]

    def enter_letter(self, row: int, col: int, value: str) -> bool:
        """
        Write a letter into a cell; an empty value clears it.

        Returns:
            False if the cell is black or outside the grid, or the puzzle is solved
        """
        if self.phase in (Phase.CONFIGURING, Phase.GENERATING):
            raise PhaseError("Puzzle has not been generated")
        if self.phase != Phase.PLAYING:
            return False
        if Cell(row, col) not in self.letter_cells():
            return False

        key = Cell(row, col).key
        letter = (value or "").strip()[:1].upper()
        if letter:
            self.answers[key] = letter
        else:
            self.answers.pop(key, None)
        return True

    def check_solution(self) -> CrosswordCheck:
        """
        Compare every letter cell with the answer grid.

        Feedback is recomputed on every call; only a full match changes the
        phase.
        """
        if self.puzzle_data is None:
            raise PhaseError("Puzzle has not been generated")

        result = CrosswordCheck()
        for cell in self.letter_cells():
            expected = self.puzzle_data.grid[cell.row][cell.col]
            is_correct = letters_match(self.answers.get(cell.key), expected)
            result.feedback[cell.key] = is_correct
            result.total += 1
            if is_correct:
                result.correct += 1
        result.solved = result.correct == result.total

        self.last_check = result
        if result.solved and self.phase == Phase.PLAYING:
            self.phase = Phase.SOLVED
        return result

    def export_state(self) -> Dict:
        if self.puzzle_data is None:
            raise PhaseError("Nothing to export before the puzzle is generated")
        return CrosswordState(puzzle_data=self.puzzle_data, secret=self.secret).to_payload()

    @classmethod
    def from_export(cls, payload: Dict) -> "CrosswordPuzzle":
        state = CrosswordState.model_validate(payload)
        puzzle = cls()
        puzzle._begin(state.secret, state.puzzle_data)
        return puzzle
