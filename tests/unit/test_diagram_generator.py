"""Tests for DiagramGenerator (prompt -> diagram fragment)."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from conceptmap.diagram.models import NO_VALID_DIAGRAM
from conceptmap.generation.client_base import BaseGenerationClient
from conceptmap.generation.exceptions import (
    GenerationNetworkError,
    GenerationResponseError,
)
from conceptmap.generation.generator import DiagramGenerator, extract_diagram


def _make_generator(raw: str | None = None, error: Exception | None = None) -> tuple[
    DiagramGenerator, MagicMock
]:
    client = MagicMock(spec=BaseGenerationClient)
    client.create_message = AsyncMock(return_value=raw, side_effect=error)
    return DiagramGenerator(client=client, model="test-model", max_tokens=321), client


def _generate(generator: DiagramGenerator, prompt: str = "prompt"):  # type: ignore[no-untyped-def]
    return asyncio.run(generator.generate(prompt))


class TestExtractDiagram:
    def test_returns_text_from_header(self) -> None:
        assert extract_diagram("graph TD\nA-->B") == "graph TD\nA-->B"

    def test_drops_leading_commentary_and_fence(self) -> None:
        raw = "Here is your diagram:\n```mermaid\ngraph LR\nA-->B\n```"
        assert extract_diagram(raw) == "graph LR\nA-->B"

    def test_header_match_is_case_insensitive(self) -> None:
        assert extract_diagram("GRAPH td\nA-->B") == "GRAPH td\nA-->B"

    def test_no_header_returns_none(self) -> None:
        assert extract_diagram("flowchart TD\nA-->B") is None
        assert extract_diagram("") is None


class TestGenerateSuccess:
    def test_returns_extracted_fragment(self) -> None:
        generator, _ = _make_generator("graph TD\nA-->B")
        fragment = _generate(generator)
        assert fragment.text == "graph TD\nA-->B"
        assert fragment.is_fallback is False

    def test_passes_prompt_model_and_token_bound(self) -> None:
        generator, client = _make_generator("graph TD\nA-->B")
        _generate(generator, "the prompt")
        client.create_message.assert_awaited_once_with(
            model="test-model",
            max_tokens=321,
            prompt="the prompt",
        )

    def test_logs_prompt_in_debug(self) -> None:
        generator, _ = _make_generator("graph TD\nA-->B")
        with patch("conceptmap.generation.generator.Log") as mock_log:
            _generate(generator, "secret prompt")
        assert "prompt" in mock_log.debug.call_args_list[0].args[0].lower()


class TestGenerateFallback:
    def test_missing_header_returns_fallback(self) -> None:
        generator, _ = _make_generator("I could not find any entities.")
        fragment = _generate(generator)
        assert fragment.text == NO_VALID_DIAGRAM
        assert fragment.is_fallback is True

    @pytest.mark.parametrize(
        "error",
        [
            GenerationNetworkError("AI provider network error"),
            GenerationResponseError("AI returned empty response"),
        ],
    )
    def test_provider_errors_return_fallback(self, error: Exception) -> None:
        generator, _ = _make_generator(error=error)
        fragment = _generate(generator)
        assert fragment.text == NO_VALID_DIAGRAM
        assert fragment.is_fallback is True
        assert str(error) in fragment.detail

    def test_programming_errors_propagate(self) -> None:
        generator, _ = _make_generator(error=TypeError("bad call"))
        with pytest.raises(TypeError):
            _generate(generator)
