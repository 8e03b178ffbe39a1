"""Drive a puzzle from authored configuration to a playable state."""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel

from .config import BuildConfig
from .content.provider import ContentProvider, LLMContentProvider
from .errors import ConfigurationInvalid, ConfigurationIssue
from .puzzles.models import PuzzleType
from .puzzles.registry import create_puzzle, get_variant

logger = logging.getLogger(__name__)


def split_words(value: Any) -> Optional[List[str]]:
    """Accept a list of words or a comma-separated string of them."""
    if value is None:
        return None
    if isinstance(value, str):
        return [word.strip() for word in value.split(",") if word.strip()]
    return [str(word) for word in value]


def parse_grid_size(value: Any) -> int:
    """
    Raises:
        ConfigurationInvalid: If the value is not a whole number
    """
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationInvalid([ConfigurationIssue(
            code="INVALID_GRID_SIZE",
            message=f"Grid size must be a whole number, got {value!r}.",
            field="grid_size",
        )]) from None


def build_puzzle(config: BuildConfig, provider: Optional[ContentProvider] = None) -> BaseModel:
    """
    Configure a puzzle and bring it into play.

    Generated variants use `provider`, or an LLMContentProvider built from
    config.provider when none is given.

    Raises:
        ConfigurationInvalid: If the authored params are unusable
        GenerationFailure: If the content provider returned nothing usable
    """
    spec = get_variant(config.puzzle_type)
    params = config.params

    if spec.generated and provider is None:
        provider = LLMContentProvider.create(config=config.provider)

    logger.info("Building %s puzzle", spec.tag.value)
    if spec.tag == PuzzleType.SLIDING_TILE:
        puzzle = create_puzzle(spec.tag, seed=config.seed)
        puzzle.start(params.get("image"), parse_grid_size(params.get("grid_size", 3)), config.secret)
    elif spec.tag == PuzzleType.WORD_GUESS:
        puzzle = create_puzzle(spec.tag)
        puzzle.start(params.get("word", ""), config.secret)
    elif spec.tag == PuzzleType.CROSSWORD:
        puzzle = create_puzzle(spec.tag)
        puzzle.generate(provider, config.secret, theme=params.get("theme"), words=split_words(params.get("words")))
    elif spec.tag == PuzzleType.WORD_LADDER:
        puzzle = create_puzzle(spec.tag)
        puzzle.generate(provider, params.get("start_word", ""), params.get("end_word", ""), config.secret)
    elif spec.tag == PuzzleType.CHESS:
        puzzle = create_puzzle(spec.tag)
        puzzle.generate(provider, config.secret)
    else:
        puzzle = create_puzzle(spec.tag)
        puzzle.generate(
            provider,
            split_words(params.get("words")) or [],
            params.get("secret_message", ""),
            config.secret,
            grid_size=parse_grid_size(params.get("grid_size", 12)),
        )
    return puzzle
