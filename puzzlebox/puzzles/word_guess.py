from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..errors import ConfigurationInvalid, ConfigurationIssue, PhaseError
from ..verifiers.models import Guess, GuessOutcome, Secret
from ..verifiers.scoring import score_guess
from .models import Phase, WordGuessState, secret_issues


WORD_LENGTH = 5
MAX_GUESSES = 6


class WordGuessPuzzle(BaseModel):
    """
    Guess a hidden five letter word in six attempts.

    Each guess is scored with per-letter feedback. The game ends solved
    when a guess equals the solution, or lost once six guesses miss.
    """

    phase: Phase = Phase.CONFIGURING
    secret: Secret = Field(default_factory=Secret)
    solution: str = ""
    guesses: List[Guess] = Field(default_factory=list)
    current_guess: str = ""

    def start(self, solution_word: str, secret: Secret) -> None:
        """
        Raises:
            ConfigurationInvalid: If the word is not five letters or the secret is empty
        """
        word = (solution_word or "").strip()
        issues = secret_issues(secret)
        if len(word) != WORD_LENGTH or not (word.isascii() and word.isalpha()):
            issues.insert(0, ConfigurationIssue(
                code="INVALID_SOLUTION",
                message=f"Please enter a {WORD_LENGTH}-letter word.",
                field="solution_word",
            ))
        if issues:
            raise ConfigurationInvalid(issues)

        self.secret = secret
        self.solution = word.upper()
        self.guesses = []
        self.current_guess = ""
        self.phase = Phase.PLAYING

    @property
    def is_solved(self) -> bool:
        return self.phase == Phase.SOLVED

    @property
    def is_lost(self) -> bool:
        return self.phase == Phase.LOST

    @property
    def attempts_left(self) -> int:
        return MAX_GUESSES - len(self.guesses)

    @property
    def revealed_secret(self) -> Optional[Secret]:
        return self.secret if self.is_solved else None

    def type_key(self, key: str) -> Optional[GuessOutcome]:
        """
        Feed one key press into the current guess buffer.

        Letters are appended up to the word length, Backspace removes the
        last letter and Enter submits the buffer. Returns the outcome when a
        guess was submitted.
        """
        if self.phase != Phase.PLAYING:
            return None
        if key == "Enter":
            return self.submit_guess(self.current_guess)
        if key == "Backspace":
            self.current_guess = self.current_guess[:-1]
        elif len(key) == 1 and key.isascii() and key.isalpha() and len(self.current_guess) < WORD_LENGTH:
            self.current_guess += key.upper()
        return None

    def submit_guess(self, raw: str) -> GuessOutcome:
        """
        Score a guess and advance the game.

        A guess of the wrong length is rejected with a message and does not
        use up an attempt.
        """
        if self.phase == Phase.CONFIGURING:
            raise PhaseError("Puzzle has not been started")
        if self.phase != Phase.PLAYING:
            return GuessOutcome(
                accepted=False,
                error="GAME_OVER",
                message="The game is over.",
                solved=self.is_solved,
                lost=self.is_lost,
            )

        word = (raw or "").upper()
        if len(word) != WORD_LENGTH:
            return GuessOutcome(
                accepted=False,
                error="INVALID_LENGTH",
                message=f"Guess must be {WORD_LENGTH} letters long.",
                attempts_left=self.attempts_left,
            )
        if not (word.isascii() and word.isalpha()):
            return GuessOutcome(
                accepted=False,
                error="INVALID_LETTERS",
                message="Guess may only contain the letters A to Z.",
                attempts_left=self.attempts_left,
            )

        guess = Guess(word=word, statuses=score_guess(word, self.solution))
        self.guesses.append(guess)
        self.current_guess = ""

        if word == self.solution:
            self.phase = Phase.SOLVED
        elif len(self.guesses) >= MAX_GUESSES:
            self.phase = Phase.LOST

        return GuessOutcome(
            accepted=True,
            guess=guess,
            solved=self.is_solved,
            lost=self.is_lost,
            attempts_left=self.attempts_left,
            message=f"The word was: {self.solution}" if self.is_lost else None,
        )

    def export_state(self) -> Dict:
        if self.phase == Phase.CONFIGURING:
            raise PhaseError("Nothing to export before the puzzle is started")
        return WordGuessState(solution=self.solution, secret=self.secret).to_payload()

    @classmethod
    def from_export(cls, payload: Dict) -> "WordGuessPuzzle":
        state = WordGuessState.model_validate(payload)
        return cls(phase=Phase.PLAYING, secret=state.secret, solution=state.solution.upper())
