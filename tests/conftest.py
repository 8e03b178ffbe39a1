"""Shared fixtures: canned generated content, a stub content provider and a tiny image."""

from unittest.mock import Mock

import pytest
from PIL import Image

from puzzlebox.verifiers import Secret


CROSSWORD = {
    "theme": "Pets",
    "grid": [
        ["C", "A", "T"],
        [None, None, "O"],
        [None, None, "Y"],
    ],
    "clues": {
        "across": [{"number": 1, "clue": "Feline friend", "answer": "CAT", "row": 0, "col": 0, "length": 3}],
        "down": [{"number": 2, "clue": "Plaything", "answer": "TOY", "row": 0, "col": 2, "length": 3}],
    },
}

LADDER = ["COLD", "CORD", "CARD", "WARD"]

CHESS = {
    "fen": "6k1/5ppp/8/8/8/8/5PPP/3Q2K1 w - - 0 1",
    "solution": "Qd8#",
    "description": "White to move and mate in one.",
}

WORD_SEARCH = {
    "grid": [
        ["D", "X", "Y", "Z"],
        ["O", "C", "A", "T"],
        ["G", "Q", "R", "S"],
        ["U", "V", "W", "E"],
    ],
    "solutions": [
        {"word": "CAT", "start": {"row": 1, "col": 1}, "end": {"row": 1, "col": 3}},
        {"word": "DOG", "start": {"row": 0, "col": 0}, "end": {"row": 2, "col": 0}},
    ],
}


class StubProvider:
    """ContentProvider returning canned content and recording every call."""

    def __init__(self, crossword=CROSSWORD, ladder=LADDER, chess=CHESS, word_search=WORD_SEARCH):
        self.crossword = crossword
        self.ladder = ladder
        self.chess = chess
        self.word_search = word_search
        self.calls = []

    def generate_crossword(self, theme, words=None):
        self.calls.append(("crossword", theme, words))
        return self.crossword

    def generate_word_ladder(self, start_word, end_word):
        self.calls.append(("word_ladder", start_word, end_word))
        return self.ladder

    def generate_chess_mate(self):
        self.calls.append(("chess",))
        return self.chess

    def generate_word_search(self, words, secret_message, grid_size=12):
        self.calls.append(("word_search", words, secret_message, grid_size))
        return self.word_search


def create_mock_response(content: str = "{}", model: str = "gpt-5-nano") -> Mock:
    """Mock shaped like litellm's ModelResponse."""
    return Mock(
        id="chatcmpl-test123",
        model=model,
        object="chat.completion",
        choices=[
            Mock(
                finish_reason="stop",
                index=0,
                message=Mock(content=content, role="assistant", tool_calls=None),
            )
        ],
        usage=Mock(completion_tokens=10, prompt_tokens=5, total_tokens=15),
    )


@pytest.fixture
def secret():
    return Secret(type="text", value="The treasure is under the stairs")


@pytest.fixture
def provider():
    return StubProvider()


@pytest.fixture
def failing_provider():
    return StubProvider(crossword=None, ladder=None, chess=None, word_search=None)


@pytest.fixture
def image():
    return Image.new("RGB", (60, 40), color=(200, 40, 40))


@pytest.fixture
def mock_response():
    return create_mock_response
