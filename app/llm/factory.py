from typing import ClassVar

from app.config.settings import Settings
from app.llm.client_base import BaseGenerationClient
from app.llm.example_client_adapter import ExampleClientAdapter
from app.llm.openai_client_adapter import OpenAIClientAdapter
from app.logging.logger import Log


class GenerationClientFactory:
    """Creates the generation client for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"example", "ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseGenerationClient | None:
        """Create the configured client.

        Returns None when the provider needs an API key and none is set, so
        that every request can report the configuration error instead of the
        service failing to start.
        """
        provider = settings.llm_provider.lower()
        if provider == "example":
            Log.info("Using offline example generation client")
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        api_key = settings.llm_api_key.strip()
        if not api_key:
            if provider not in cls.KEYLESS_PROVIDERS:
                Log.error(
                    f"LLM_API_KEY is not set for provider '{provider}'. "
                    "Generation calls will fail."
                )
                return None
            api_key = provider
        Log.info(f"Generation client initialized for provider '{provider}'")
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.llm_timeout_seconds,
            base_url=base_url,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.llm_base_url.strip()
            if not url:
                raise ValueError(
                    "llm_base_url is required for llm_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.llm_base_url.strip() or default_base_url
        supported = ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")
