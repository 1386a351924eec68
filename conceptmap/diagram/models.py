from dataclasses import dataclass, field

ENTITY_CLASSES: tuple[str, ...] = (
    "case",
    "person",
    "organisation",
    "legal_issue",
    "event",
    "document",
    "location",
)

GRAPH_HEADER = "graph TD"


def placeholder_diagram(message: str) -> str:
    """A one-node diagram carrying a diagnostic message."""
    return f'{GRAPH_HEADER}\nA["{message}"]'


NO_FILES_DIAGRAM = placeholder_diagram("No files uploaded")
NO_VALID_DIAGRAM = placeholder_diagram("No valid Mermaid diagram returned")
SERVER_ERROR_DIAGRAM = placeholder_diagram("Server error - see logs")
NO_ENTITIES_NODE = 'A["No extractable legal entities found"]'


@dataclass(frozen=True)
class DiagramFragment:
    """Diagram text returned for one prompt."""

    text: str
    is_fallback: bool = False
    detail: str = ""


@dataclass(frozen=True)
class MergedDiagram:
    header: str
    preamble: list[str] = field(default_factory=list)
    body: list[str] = field(default_factory=list)

    def render(self) -> str:
        lines = [self.header, *self.preamble]
        lines.extend(self.body or [NO_ENTITIES_NODE])
        return "\n".join(lines)
