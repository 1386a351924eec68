_MIN_PRINTABLE = 32
_READABLE_RATIO = 0.8


def is_readable_text(data: str | bytes) -> bool:
    """Return True when more than 80% of the characters are printable.

    A character counts as printable when its code point (or byte value) is
    at least 32, so control characters including newlines count against the
    ratio. Empty input is never readable.
    """
    if not data:
        return False
    if isinstance(data, bytes):
        printable = sum(1 for byte in data if byte >= _MIN_PRINTABLE)
    else:
        printable = sum(1 for char in data if ord(char) >= _MIN_PRINTABLE)
    return printable / len(data) > _READABLE_RATIO
