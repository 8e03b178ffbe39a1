"""Build configuration loaded from YAML."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .content.models import ProviderConfig
from .errors import UnknownVariant
from .puzzles.models import PuzzleType
from .puzzles.registry import resolve_tag
from .verifiers.models import Secret


class BuildConfig(BaseModel):
    """
    Everything needed to build and export one puzzle.

    Attributes:
        puzzle_type: Variant tag, e.g. WORD_SEARCH or word-search
        secret: Reward revealed when the puzzle is solved
        params: Variant-specific authored input (image, word, theme, words, ...)
        output_dir: Directory the artifact is written to
        seed: Seed for the sliding-tile shuffle
        provider: Settings for the LLM content provider
    """
    puzzle_type: PuzzleType
    secret: Secret
    params: Dict[str, Any] = Field(default_factory=dict)
    output_dir: str = "."
    seed: Optional[int] = None
    provider: ProviderConfig = Field(default_factory=ProviderConfig)

    @field_validator("puzzle_type", mode="before")
    @classmethod
    def _resolve_type(cls, value: Any) -> PuzzleType:
        try:
            return resolve_tag(value)
        except UnknownVariant as e:
            raise ValueError(str(e)) from None


def load_config(config_path: Union[str, Path]) -> BuildConfig:
    """
    Load a build configuration from a YAML file.

    A relative `params.image` path is resolved against the config file's
    directory.
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    config = BuildConfig(**data)
    image = config.params.get("image")
    if isinstance(image, str) and not image.startswith("data:") and not Path(image).is_absolute():
        config.params["image"] = str(path.parent / image)
    return config
