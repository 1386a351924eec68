from collections.abc import Iterable, Iterator


class OrderedLineSet:
    """Insertion-ordered set of trimmed, non-blank diagram lines."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: dict[str, None] = {}
        self.extend(lines)

    def add(self, line: str) -> bool:
        """Add a line; return False if it was blank or already present."""
        key = line.strip()
        if not key or key in self._lines:
            return False
        self._lines[key] = None
        return True

    def extend(self, lines: Iterable[str]) -> int:
        return sum(1 for line in lines if self.add(line))

    def __contains__(self, line: object) -> bool:
        return isinstance(line, str) and line.strip() in self._lines

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
