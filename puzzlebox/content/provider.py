"""
Content provider boundary.

The generated variants ask a ContentProvider for their puzzle content. A
provider never raises: any failure, including a malformed response, comes
back as None and the caller treats it as a retryable generation failure.
"""

import logging
from typing import Any, List, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from ..puzzles.models import ChessPuzzleData, CrosswordData, WordLadderData, WordSearchData
from .llm_client import LLMClient
from .models import ProviderConfig
from .parsing import parse_json_response
from .prompts import (
    SYSTEM_PROMPT,
    build_chess_mate_prompt,
    build_crossword_prompt,
    build_word_ladder_prompt,
    build_word_search_prompt,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ContentProvider(Protocol):
    """Capability that generates content for the procedurally built variants."""

    def generate_crossword(
        self, theme: str, words: Optional[List[str]] = None
    ) -> Optional[CrosswordData]:
        ...

    def generate_word_ladder(self, start_word: str, end_word: str) -> Optional[List[str]]:
        ...

    def generate_chess_mate(self) -> Optional[ChessPuzzleData]:
        ...

    def generate_word_search(
        self, words: List[str], secret_message: str, grid_size: int = 12
    ) -> Optional[WordSearchData]:
        ...


class LLMContentProvider(BaseModel):
    """
    ContentProvider backed by an LLM through LiteLLM.

    Attributes:
        client: LLM client used for every request
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    client: LLMClient

    @classmethod
    def create(cls, config: Optional[ProviderConfig] = None, **config_kwargs: Any) -> "LLMContentProvider":
        """
        Factory method to create a provider from a ProviderConfig.

        Args:
            config: Optional ProviderConfig instance
            **config_kwargs: Config parameters if config not provided
        """
        if config is None:
            config = ProviderConfig(**config_kwargs)

        llm_kwargs = {}
        if config.__pydantic_extra__:
            llm_kwargs.update(config.__pydantic_extra__)

        client = LLMClient(
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            timeout=config.timeout,
            **llm_kwargs,
        )
        return cls(client=client)

    def _request(self, kind: str, prompt: str, model_cls: Type[ModelT], **extra: Any) -> Optional[ModelT]:
        try:
            response = self.client.generate(
                SYSTEM_PROMPT,
                prompt,
                response_format={"type": "json_object"},
                drop_params=True,
            )
            data = parse_json_response(response)
            if isinstance(data, dict):
                data.update(extra)
            return model_cls.model_validate(data)
        except Exception as e:
            logger.warning("Error generating %s: %s", kind, e)
            return None

    def generate_crossword(
        self, theme: str, words: Optional[List[str]] = None
    ) -> Optional[CrosswordData]:
        return self._request("crossword", build_crossword_prompt(theme, words), CrosswordData)

    def generate_word_ladder(self, start_word: str, end_word: str) -> Optional[List[str]]:
        data = self._request(
            "word ladder", build_word_ladder_prompt(start_word, end_word), WordLadderData
        )
        return data.ladder if data else None

    def generate_chess_mate(self) -> Optional[ChessPuzzleData]:
        return self._request("chess puzzle", build_chess_mate_prompt(), ChessPuzzleData)

    def generate_word_search(
        self, words: List[str], secret_message: str, grid_size: int = 12
    ) -> Optional[WordSearchData]:
        # The authored list wins over whatever casing the model echoes back
        return self._request(
            "word search",
            build_word_search_prompt(words, secret_message, grid_size),
            WordSearchData,
            words=[word.strip().upper() for word in words],
        )
