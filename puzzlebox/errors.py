"""Exception taxonomy for puzzle configuration, generation and export."""

from typing import List, Optional

from pydantic import BaseModel


class ConfigurationIssue(BaseModel):
    """A single problem with authored puzzle input."""
    code: str
    message: str
    field: Optional[str] = None


class PuzzleBoxError(Exception):
    """Base class for all puzzlebox errors."""


class ConfigurationInvalid(PuzzleBoxError, ValueError):
    """Authored input is missing or malformed; the puzzle stays in configuration."""

    def __init__(self, issues: List[ConfigurationIssue]):
        self.issues = list(issues)
        super().__init__("; ".join(issue.message for issue in self.issues))

    @property
    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]


class GenerationFailure(PuzzleBoxError):
    """The content provider returned nothing usable. Safe to retry."""


class GenerationInProgress(PuzzleBoxError):
    """A generation request is already outstanding for this puzzle."""


class PhaseError(PuzzleBoxError):
    """An operation was called in a phase that does not allow it."""


class UnknownVariant(PuzzleBoxError, KeyError):
    """No dispatch table entry for a variant tag."""

    def __str__(self) -> str:
        return Exception.__str__(self)
