from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..errors import ConfigurationInvalid, PhaseError
from ..verifiers.models import Secret
from ..verifiers.scoring import moves_match
from .generation import run_generation
from .models import ChessPuzzleData, ChessState, Phase, secret_issues


PIECE_GLYPHS: Dict[str, str] = {
    "r": "♜", "n": "♞", "b": "♝", "q": "♛", "k": "♚", "p": "♟",
    "R": "♖", "N": "♘", "B": "♗", "Q": "♕", "K": "♔", "P": "♙",
}


def board_from_fen(fen: str) -> List[List[Optional[str]]]:
    """
    Expand the piece-placement field of a FEN string into rows of glyphs.

    Ranks are listed from 8 down to 1. Digits become runs of empty squares
    (None). Unknown letters are kept as-is.
    """
    placement = (fen or "").split(" ")[0]
    board: List[List[Optional[str]]] = []
    for rank in placement.split("/"):
        row: List[Optional[str]] = []
        for char in rank:
            if char.isdigit():
                row.extend([None] * int(char))
            else:
                row.append(PIECE_GLYPHS.get(char, char))
        board.append(row)
    return board


class ChessMatePuzzle(BaseModel):
    """Find the mating move in a generated mate-in-one position."""

    phase: Phase = Phase.CONFIGURING
    secret: Secret = Field(default_factory=Secret)
    puzzle_data: Optional[ChessPuzzleData] = None
    attempt: str = ""

    def generate(self, provider, secret: Secret) -> ChessPuzzleData:
        """
        Raises:
            ConfigurationInvalid: If the secret is empty
            GenerationFailure: If the provider returned no position
        """
        issues = secret_issues(secret)
        if issues:
            raise ConfigurationInvalid(issues)

        data = run_generation(
            self,
            "chess puzzle",
            provider.generate_chess_mate,
            ChessPuzzleData.model_validate,
        )
        self._begin(secret, data)
        return data

    def _begin(self, secret: Secret, data: ChessPuzzleData) -> None:
        self.secret = secret
        self.puzzle_data = data
        self.attempt = ""
        self.phase = Phase.PLAYING

    @property
    def is_solved(self) -> bool:
        return self.phase == Phase.SOLVED

    @property
    def revealed_secret(self) -> Optional[Secret]:
        return self.secret if self.is_solved else None

    @property
    def description(self) -> str:
        return self.puzzle_data.description if self.puzzle_data else ""

    def board(self) -> List[List[Optional[str]]]:
        if self.puzzle_data is None:
            return []
        return board_from_fen(self.puzzle_data.fen)

    def check_solution(self, move: str) -> bool:
        """
        Compare a move with the solution, ignoring whitespace, case and +/# marks.

        No chess semantics are applied: "Qh7" and "Qxh7" are different answers.
        """
        if self.phase in (Phase.CONFIGURING, Phase.GENERATING):
            raise PhaseError("Puzzle has not been generated")
        if self.phase != Phase.PLAYING:
            return moves_match(move, self.puzzle_data.solution)

        self.attempt = move or ""
        if moves_match(self.attempt, self.puzzle_data.solution):
            self.phase = Phase.SOLVED
            return True
        return False

    def export_state(self) -> Dict:
        if self.puzzle_data is None:
            raise PhaseError("Nothing to export before the puzzle is generated")
        return ChessState(puzzle_data=self.puzzle_data, secret=self.secret).to_payload()

    @classmethod
    def from_export(cls, payload: Dict) -> "ChessMatePuzzle":
        state = ChessState.model_validate(payload)
        puzzle = cls()
        puzzle._begin(state.secret, state.puzzle_data)
        return puzzle
