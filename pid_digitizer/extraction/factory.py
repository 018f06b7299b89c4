from typing import ClassVar

from pid_digitizer.config.settings import Settings
from pid_digitizer.extraction.client_base import BaseVisionClient
from pid_digitizer.extraction.example_client_adapter import ExampleVisionClientAdapter
from pid_digitizer.extraction.invoker import ModelInvoker
from pid_digitizer.extraction.openai_client_adapter import OpenAIVisionClientAdapter
from pid_digitizer.extraction.retry import RetryExecutor, RetryPolicy


class ModelInvokerFactory:
    """Creates the configured model invoker."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> ModelInvoker:
        """Create a ModelInvoker from application settings."""
        provider = settings.model_provider.lower()
        policy = RetryPolicy(
            max_attempts=settings.model_max_attempts,
            base_delay_seconds=settings.model_backoff_base_seconds,
            max_jitter_seconds=settings.model_backoff_jitter_seconds,
        )
        return ModelInvoker(
            client=cls._create_client(provider, settings),
            primary_model=settings.primary_model_name,
            fallback_model=settings.fallback_model_name or None,
            executor=RetryExecutor(policy),
            temperature=settings.model_temperature,
            seed=settings.model_seed,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseVisionClient:
        if provider == "example":
            return ExampleVisionClientAdapter()
        return OpenAIVisionClientAdapter(
            api_key=settings.model_api_key,
            timeout_seconds=settings.model_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        configured = settings.model_base_url.strip()
        if provider == "openai":
            return configured or None
        if provider == "openai_compatible":
            if not configured:
                raise ValueError(
                    "model_base_url is required for model_provider=openai_compatible"
                )
            return configured
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return configured or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown model provider '{provider}'. Choose from: {supported}")
