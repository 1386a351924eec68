"""Turns a prompt into a diagram fragment, degrading to a placeholder."""

import re

from conceptmap.diagram.models import NO_VALID_DIAGRAM, DiagramFragment
from conceptmap.generation.client_base import BaseGenerationClient
from conceptmap.generation.exceptions import GenerationError
from conceptmap.logging.logger import Log

_DIAGRAM_RE = re.compile(r"graph\s+(?:TD|LR)[\s\S]*", re.IGNORECASE)
_TRAILING_FENCE_RE = re.compile(r"\n?\s*```\s*$")


def extract_diagram(raw: str) -> str | None:
    """Return the text from the first graph header to the end, or None."""
    match = _DIAGRAM_RE.search(raw)
    if match is None:
        return None
    return _TRAILING_FENCE_RE.sub("", match.group(0)).strip()


class DiagramGenerator:
    """Asks the configured provider for a diagram and extracts it.

    Provider failures are logged and answered with the fallback fragment;
    they never reach the caller.
    """

    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        model: str,
        max_tokens: int = 2000,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens

    async def generate(self, prompt: str) -> DiagramFragment:
        Log.debug(f"Generation prompt:\n{prompt}")
        try:
            raw = await self._client.create_message(
                model=self._model,
                max_tokens=self._max_tokens,
                prompt=prompt,
            )
        except GenerationError as exc:
            Log.warning(f"Diagram generation failed: {exc}")
            return self._fallback(str(exc))
        Log.debug(f"AI raw response:\n{raw}")

        diagram = extract_diagram(raw)
        if not diagram:
            Log.warning("AI response contained no graph header")
            return self._fallback("no graph header in response")
        Log.info(f"Diagram generated: {len(diagram.splitlines())} lines")
        return DiagramFragment(text=diagram)

    @staticmethod
    def _fallback(detail: str) -> DiagramFragment:
        return DiagramFragment(text=NO_VALID_DIAGRAM, is_fallback=True, detail=detail)
