"""Prompt templates for puzzle content generation."""

from .system_prompt import SYSTEM_PROMPT
from .generation_prompts import (
    build_crossword_prompt,
    build_word_ladder_prompt,
    build_chess_mate_prompt,
    build_word_search_prompt,
    format_words,
)

__all__ = [
    "SYSTEM_PROMPT",
    "build_crossword_prompt",
    "build_word_ladder_prompt",
    "build_chess_mate_prompt",
    "build_word_search_prompt",
    "format_words",
]
