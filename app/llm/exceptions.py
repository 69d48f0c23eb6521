class GenerationError(Exception):
    """Raised when the text-generation provider does not return usable text."""


class GenerationNetworkError(GenerationError):
    """Raised when the provider call fails due to network/auth/quota issues."""
