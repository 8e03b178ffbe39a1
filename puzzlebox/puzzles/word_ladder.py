from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..errors import ConfigurationInvalid, ConfigurationIssue, PhaseError
from ..verifiers.models import Secret
from ..verifiers.scoring import letters_match
from .generation import run_generation
from .models import Phase, WordLadderData, WordLadderState, secret_issues


class WordLadderPuzzle(BaseModel):
    """
    Climb from a start word to an end word one letter at a time.

    The generated ladder is authoritative. Only the interior steps are
    editable, and a check passes only when every step matches.
    """

    phase: Phase = Phase.CONFIGURING
    secret: Secret = Field(default_factory=Secret)
    ladder: List[str] = Field(default_factory=list)
    entries: List[str] = Field(default_factory=list)

    def generate(self, provider, start_word: str, end_word: str, secret: Secret) -> List[str]:
        """
        Raises:
            ConfigurationInvalid: If the words are missing or differ in length
            GenerationFailure: If the provider returned no ladder
        """
        start = (start_word or "").strip().upper()
        end = (end_word or "").strip().upper()
        issues = secret_issues(secret)
        if not start or not end or len(start) != len(end):
            issues.insert(0, ConfigurationIssue(
                code="INVALID_ENDPOINTS",
                message="Please provide a start and end word of the same length.",
                field="start_word",
            ))
        if issues:
            raise ConfigurationInvalid(issues)

        ladder = run_generation(
            self,
            "word ladder",
            lambda: provider.generate_word_ladder(start, end),
            lambda raw: WordLadderData(ladder=raw).ladder,
        )
        self._begin(secret, ladder)
        return self.ladder

    def _begin(self, secret: Secret, ladder: List[str]) -> None:
        self.secret = secret
        self.ladder = [step.upper() for step in ladder]
        self.entries = [""] * len(self.ladder)
        self.entries[0] = self.ladder[0]
        self.entries[-1] = self.ladder[-1]
        self.phase = Phase.PLAYING

    @property
    def is_solved(self) -> bool:
        return self.phase == Phase.SOLVED

    @property
    def revealed_secret(self) -> Optional[Secret]:
        return self.secret if self.is_solved else None

    @property
    def steps_to_solve(self) -> int:
        return max(len(self.ladder) - 2, 0)

    def is_fixed(self, index: int) -> bool:
        return index == 0 or index == len(self.ladder) - 1

    def set_step(self, index: int, value: str) -> bool:
        """
        Fill an interior step. The first and last steps are read-only.

        Returns:
            True if the entry was written
        """
        if self.phase in (Phase.CONFIGURING, Phase.GENERATING):
            raise PhaseError("Puzzle has not been generated")
        if self.phase != Phase.PLAYING:
            return False
        if not 0 <= index < len(self.ladder) or self.is_fixed(index):
            return False
        self.entries[index] = (value or "").strip().upper()
        return True

    def submit_ladder(self, entries: List[str]) -> bool:
        """Fill every editable step from `entries`, then check."""
        for index, value in enumerate(entries):
            self.set_step(index, value)
        return self.check_solution()

    def check_solution(self) -> bool:
        """All-or-nothing: every step must equal the generated ladder."""
        if not self.ladder:
            raise PhaseError("Puzzle has not been generated")
        solved = all(letters_match(entry, step) for entry, step in zip(self.entries, self.ladder))
        if solved and self.phase == Phase.PLAYING:
            self.phase = Phase.SOLVED
        return solved

    def export_state(self) -> Dict:
        if not self.ladder:
            raise PhaseError("Nothing to export before the puzzle is generated")
        return WordLadderState(solution=self.ladder, secret=self.secret).to_payload()

    @classmethod
    def from_export(cls, payload: Dict) -> "WordLadderPuzzle":
        state = WordLadderState.model_validate(payload)
        puzzle = cls()
        puzzle._begin(state.secret, state.solution)
        return puzzle
