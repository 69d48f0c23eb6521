from app.llm.client_base import BaseGenerationClient
from app.llm.factory import GenerationClientFactory

__all__ = ["BaseGenerationClient", "GenerationClientFactory"]
