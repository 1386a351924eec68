from pathlib import Path

from conceptmap.generation.exceptions import GenerationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the diagram instruction template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled diagram_prompt.txt.

    Returns:
        The raw template string with an ``{entity_classes}`` placeholder.

    Raises:
        GenerationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "diagram_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Failed to load prompt template: {exc}") from exc


def load_per_file_instruction(path: Path | None = None) -> str:
    """Load the extra instruction used for isolated per-file requests.

    Raises:
        GenerationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "per_file_instruction.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Failed to load per-file instruction: {exc}") from exc
