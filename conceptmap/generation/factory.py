from typing import ClassVar

from conceptmap.config.settings import Settings
from conceptmap.generation.anthropic_client_adapter import AnthropicClientAdapter
from conceptmap.generation.client_base import BaseGenerationClient
from conceptmap.generation.example_client_adapter import ExampleClientAdapter
from conceptmap.generation.generator import DiagramGenerator
from conceptmap.generation.openai_client_adapter import OpenAIClientAdapter


class GeneratorFactory:
    """Creates the diagram generator for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> DiagramGenerator:
        """Create a configured generator from application settings."""
        provider = settings.generation_provider.lower()
        return DiagramGenerator(
            client=cls._create_client(provider, settings),
            model=settings.generation_model_name,
            max_tokens=settings.generation_max_tokens,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseGenerationClient:
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "anthropic":
            return AnthropicClientAdapter(
                api_key=settings.generation_api_key,
                api_version=settings.anthropic_version,
                timeout_seconds=settings.generation_timeout_seconds,
                base_url=settings.generation_base_url or None,
            )
        return OpenAIClientAdapter(
            api_key=settings.generation_api_key,
            timeout_seconds=settings.generation_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        configured = settings.generation_base_url.strip()
        if provider == "openai":
            return configured or None
        if provider == "openai_compatible":
            if not configured:
                raise ValueError(
                    "generation_base_url is required for "
                    "generation_provider=openai_compatible"
                )
            return configured
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return configured or default_base_url
        supported = [
            "anthropic",
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {supported}"
        )
