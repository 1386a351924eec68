"""Merges per-file diagram fragments into one diagram."""

import re
from collections.abc import Iterable

from conceptmap.diagram.line_set import OrderedLineSet
from conceptmap.diagram.models import (
    ENTITY_CLASSES,
    GRAPH_HEADER,
    DiagramFragment,
    MergedDiagram,
)
from conceptmap.logging.logger import Log

_HEADER_RE = re.compile(r"^\s*graph\s+(?:TD|LR)\b[ \t]*;?[ \t]*\n?", re.IGNORECASE)

# Statement separator outside double-quoted labels.
_STATEMENT_SEP_RE = re.compile(r';(?=(?:[^"]*"[^"]*")*[^"]*$)')

STYLE_PREAMBLE: tuple[str, ...] = tuple(
    f"classDef {name} stroke-width:1px" for name in ENTITY_CLASSES
)


def strip_header(text: str) -> str:
    """Remove the leading graph header, keeping statements that share its line."""
    return _HEADER_RE.sub("", text, count=1)


def split_statements(text: str) -> list[str]:
    statements: list[str] = []
    for line in text.splitlines():
        statements.extend(_STATEMENT_SEP_RE.split(line))
    return statements


class DiagramMerger:
    """Concatenates fragment bodies, keeping each trimmed statement once.

    Deduplication is global across all fragments and purely textual: two
    nodes for the same entity with different labels both survive.
    """

    def merge(self, fragments: Iterable[DiagramFragment]) -> MergedDiagram:
        seen = OrderedLineSet(STYLE_PREAMBLE)
        body: list[str] = []
        count = 0
        for fragment in fragments:
            count += 1
            for statement in split_statements(strip_header(fragment.text)):
                if seen.add(statement):
                    body.append(statement.strip())

        Log.info(f"Merged {count} fragments into {len(body)} diagram lines")
        return MergedDiagram(
            header=GRAPH_HEADER,
            preamble=list(STYLE_PREAMBLE),
            body=body,
        )
