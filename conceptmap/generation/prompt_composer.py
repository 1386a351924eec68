from pathlib import Path

from conceptmap.diagram.models import ENTITY_CLASSES
from conceptmap.extraction.models import CombinedCorpus, NormalizedSegment
from conceptmap.generation.prompt_loader import (
    load_per_file_instruction,
    load_prompt_template,
)


class PromptComposer:
    """Builds model prompts from the fixed instruction template.

    The instructions never depend on document content; only the appended
    document section changes between requests.
    """

    def __init__(
        self,
        *,
        template_path: Path | None = None,
        per_file_instruction_path: Path | None = None,
    ) -> None:
        self._instructions = load_prompt_template(template_path).replace(
            "{entity_classes}", "\n".join(ENTITY_CLASSES)
        ).rstrip()
        self._per_file_instruction = load_per_file_instruction(
            per_file_instruction_path
        ).strip()

    @property
    def instructions(self) -> str:
        return self._instructions

    def compose_combined(self, corpus: CombinedCorpus) -> str:
        return f"{self._instructions}\n\nDOCUMENTS:\n{corpus.render()}"

    def compose_for_file(self, segment: NormalizedSegment) -> str:
        instruction = self._per_file_instruction.replace("{file_name}", segment.file_name)
        return f"{self._instructions}\n\n{instruction}\n\nDOCUMENT:\n{segment.render()}"
