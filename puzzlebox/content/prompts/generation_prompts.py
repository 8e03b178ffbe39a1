from typing import List, Optional


def format_words(words: List[str]) -> str:
    """Format a word list as a comma separated string."""
    return ", ".join(word.strip().upper() for word in words if word.strip())


def build_crossword_prompt(theme: str, words: Optional[List[str]] = None) -> str:
    """Prompt for a crossword built from a theme or a fixed word list."""
    if words:
        task = (
            f"Generate a compact crossword puzzle using only these words: {format_words(words)}. "
            "Create appropriate, short clues for each word."
        )
    else:
        task = (
            f'Generate a small 5x7 crossword puzzle about "{theme}". '
            "The words should be common and not too long."
        )

    return f"""{task}

Return JSON of this shape:
{{
  "theme": "<theme>",
  "grid": [["C", "A", "T", null, null], ...],
  "clues": {{
    "across": [{{"number": 1, "clue": "...", "answer": "CAT", "row": 0, "col": 0, "length": 3}}],
    "down": [{{"number": 2, "clue": "...", "answer": "...", "row": 0, "col": 2, "length": 4}}]
  }}
}}

The grid has 7 rows of 5 columns. Use null for black squares and a letter for answer squares.
Every answer must appear in the grid at its row/col in its direction."""


def build_word_ladder_prompt(start_word: str, end_word: str) -> str:
    """Prompt for a word ladder between two equal-length words."""
    return f"""Generate a word ladder from "{start_word.upper()}" to "{end_word.upper()}".
Each step must be a valid English word that differs from the previous one in exactly one letter position.
The first step is "{start_word.upper()}" and the last step is "{end_word.upper()}".

Return JSON of this shape:
{{"ladder": ["{start_word.upper()}", "...", "{end_word.upper()}"]}}"""


def build_chess_mate_prompt() -> str:
    """Prompt for a mate-in-one position."""
    return """Generate a simple 'mate in 1' chess puzzle for White to move.
Provide the board position in FEN notation, a short description, and the solution in standard algebraic notation (e.g. "Qh7#").

Return JSON of this shape:
{"fen": "<FEN>", "solution": "<move>", "description": "White to move and mate in 1"}"""


def build_word_search_prompt(words: List[str], secret_message: str, grid_size: int = 12) -> str:
    """Prompt for a word search whose leftover letters spell a hidden message."""
    return f"""Create a {grid_size}x{grid_size} word search puzzle.
Hide the following words: {format_words(words)}. Words can be placed horizontally, vertically, or diagonally in any direction.
After placing the words, the remaining empty cells must be filled with letters that, when read from top-to-bottom and left-to-right, spell out this exact secret message: "{secret_message}".
Return the completed grid and the exact start and end coordinates for each placed word. Do not include the secret message in the response.

Return JSON of this shape:
{{
  "grid": [["A", "B", ...], ...],
  "solutions": [{{"word": "CAT", "start": {{"row": 0, "col": 0}}, "end": {{"row": 0, "col": 2}}}}]
}}"""
