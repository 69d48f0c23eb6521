from abc import ABC, abstractmethod


class BaseGenerationClient(ABC):
    """Contract for provider-specific text-generation clients."""

    @abstractmethod
    def generate(self, *, model: str, prompt: str, temperature: float = 0.0) -> str:
        """Send a single prompt and return the provider's reply as plain text.

        Raises:
            GenerationError: if the provider returns no usable text.
            GenerationNetworkError: if the provider call itself fails.
        """
