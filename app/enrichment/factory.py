from typing import ClassVar

from app.config.settings import Settings
from app.enrichment.base import BaseEnricher
from app.enrichment.client_base import BaseGenerativeModel
from app.enrichment.enricher import Enricher
from app.enrichment.example_client_adapter import ExampleModelAdapter
from app.enrichment.keyword_enricher import KeywordEnricher
from app.enrichment.openai_client_adapter import OpenAIModelAdapter


class EnricherFactory:
    """Creates the configured enricher and its generative model adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseEnricher:
        """Create a configured enricher from application settings."""
        provider = settings.generative_provider.lower()
        if provider == "none":
            return KeywordEnricher()
        return Enricher(model=cls.create_model(settings))

    @classmethod
    def create_model(cls, settings: Settings) -> BaseGenerativeModel:
        provider = settings.generative_provider.lower()
        if provider == "example":
            return ExampleModelAdapter()
        return OpenAIModelAdapter(
            api_key=settings.generative_api_key,
            model=settings.generative_model_name,
            timeout_seconds=settings.generative_timeout_seconds,
            temperature=max(0.0, min(1.0, settings.generative_temperature)),
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.generative_base_url.strip() or None
        if provider == "openai_compatible":
            url = settings.generative_base_url.strip()
            if not url:
                raise ValueError(
                    "generative_base_url is required for generative_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "none",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown generative provider '{provider}'. Choose from: {supported}"
        )
