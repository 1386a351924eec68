class GenerationError(Exception):
    """Raised when diagram generation fails."""


class GenerationResponseError(GenerationError):
    """Raised when the AI provider response has no usable text payload."""


class GenerationNetworkError(GenerationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
