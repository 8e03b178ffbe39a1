import json
from unittest.mock import patch

import pytest

from puzzlebox.content import LLMContentProvider, ProviderConfig, extract_json_content, parse_json_response
from puzzlebox.puzzles import ChessPuzzleData, CrosswordData, WordSearchData

from tests.conftest import CHESS, CROSSWORD, LADDER, WORD_SEARCH


def fenced(data) -> str:
    return "Here you go:\n```json\n" + json.dumps(data) + "\n```\nEnjoy!"


class TestParsing:
    """Test cases for pulling JSON out of model responses."""

    def test_fenced_block(self):
        assert extract_json_content('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_object_with_chatter(self):
        assert parse_json_response('Sure! {"a": {"b": 2}} Hope that helps.') == {"a": {"b": 2}}

    def test_empty_response(self):
        with pytest.raises(ValueError):
            parse_json_response("   ")


class TestProviderCreate:
    """Test cases for building a provider from config."""

    def test_create_from_config(self):
        provider = LLMContentProvider.create(ProviderConfig(model="gpt-5-nano", temperature=0.2, top_p=0.5))
        assert provider.client.model == "gpt-5-nano"
        assert provider.client.temperature == 0.2
        assert provider.client.timeout == 60.0
        assert provider.client.additional_params == {"top_p": 0.5}

    def test_create_from_kwargs(self):
        provider = LLMContentProvider.create(model="gpt-5-nano")
        assert provider.client.model == "gpt-5-nano"


class TestProviderRequests:
    """Test cases for the four generation requests."""

    @patch('litellm.completion')
    def test_crossword_from_fenced_json(self, mock_completion, mock_response):
        mock_completion.return_value = mock_response(content=fenced(CROSSWORD))

        provider = LLMContentProvider.create(model="gpt-5-nano")
        data = provider.generate_crossword("Pets")

        assert isinstance(data, CrosswordData)
        assert data.grid[0] == ["C", "A", "T"]
        call_kwargs = mock_completion.call_args[1]
        assert call_kwargs["response_format"] == {"type": "json_object"}
        assert call_kwargs["messages"][0]["role"] == "system"
        assert "Pets" in call_kwargs["messages"][1]["content"]

    @patch('litellm.completion')
    def test_crossword_from_word_list(self, mock_completion, mock_response):
        mock_completion.return_value = mock_response(content=json.dumps(CROSSWORD))

        provider = LLMContentProvider.create(model="gpt-5-nano")
        provider.generate_crossword("", ["cat", "toy"])

        prompt = mock_completion.call_args[1]["messages"][1]["content"]
        assert "CAT" in prompt.upper()
        assert "TOY" in prompt.upper()

    @patch('litellm.completion')
    def test_word_ladder(self, mock_completion, mock_response):
        mock_completion.return_value = mock_response(content=json.dumps({"ladder": LADDER}))

        provider = LLMContentProvider.create(model="gpt-5-nano")
        assert provider.generate_word_ladder("COLD", "WARD") == LADDER

    @patch('litellm.completion')
    def test_chess_mate(self, mock_completion, mock_response):
        mock_completion.return_value = mock_response(content=json.dumps(CHESS))

        provider = LLMContentProvider.create(model="gpt-5-nano")
        data = provider.generate_chess_mate()
        assert isinstance(data, ChessPuzzleData)
        assert data.solution == "Qd8#"

    @patch('litellm.completion')
    def test_word_search_keeps_authored_words(self, mock_completion, mock_response):
        echoed = dict(WORD_SEARCH, words=["Cat", "Dgo"])
        mock_completion.return_value = mock_response(content=json.dumps(echoed))

        provider = LLMContentProvider.create(model="gpt-5-nano")
        data = provider.generate_word_search(["cat", "dog"], "HELLO", 4)

        assert isinstance(data, WordSearchData)
        assert data.words == ["CAT", "DOG"]
        assert data.solutions[1].word == "DOG"

    @patch('litellm.completion')
    def test_malformed_response_returns_none(self, mock_completion, mock_response):
        mock_completion.return_value = mock_response(content="I cannot make that puzzle.")

        provider = LLMContentProvider.create(model="gpt-5-nano")
        assert provider.generate_chess_mate() is None

    @patch('litellm.completion')
    def test_wrong_shape_returns_none(self, mock_completion, mock_response):
        mock_completion.return_value = mock_response(content=json.dumps({"ladder": "COLD"}))

        provider = LLMContentProvider.create(model="gpt-5-nano")
        assert provider.generate_word_ladder("COLD", "WARD") is None

    @patch('litellm.completion')
    def test_api_error_returns_none(self, mock_completion):
        mock_completion.side_effect = RuntimeError("rate limited")

        provider = LLMContentProvider.create(model="gpt-5-nano")
        assert provider.generate_crossword("Pets") is None
