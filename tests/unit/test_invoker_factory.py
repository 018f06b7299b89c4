"""Tests for ModelInvokerFactory."""

from unittest.mock import patch

import pytest

from pid_digitizer.config.settings import Settings
from pid_digitizer.extraction.factory import ModelInvokerFactory
from pid_digitizer.extraction.invoker import ModelInvoker


class TestModelInvokerFactory:
    def test_example_provider_works_offline(self) -> None:
        invoker = ModelInvokerFactory.create(Settings(model_provider="example"))
        assert isinstance(invoker, ModelInvoker)
        assert '"P-101A"' in invoker.invoke(b"img", "image/png")

    def test_uses_primary_and_fallback_models(self) -> None:
        settings = Settings(
            model_provider="example",
            primary_model_name="big",
            fallback_model_name="small",
        )
        assert ModelInvokerFactory.create(settings).models == ["big", "small"]

    def test_empty_fallback_disables_fallback(self) -> None:
        settings = Settings(model_provider="example", fallback_model_name="")
        assert ModelInvokerFactory.create(settings).models == ["gemini-3-pro-preview"]

    def test_gemini_uses_default_base_url(self) -> None:
        settings = Settings(model_provider="gemini", model_api_key="g-key")
        with patch("pid_digitizer.extraction.factory.OpenAIVisionClientAdapter") as mock_adapter:
            ModelInvokerFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="g-key",
            timeout_seconds=120,
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        )

    def test_openai_uses_sdk_default_url(self) -> None:
        settings = Settings(model_provider="openai", model_api_key="o-key")
        with patch("pid_digitizer.extraction.factory.OpenAIVisionClientAdapter") as mock_adapter:
            ModelInvokerFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] is None

    def test_configured_base_url_overrides_default(self) -> None:
        settings = Settings(model_provider="ollama", model_base_url="http://gpu-box:11434/v1")
        with patch("pid_digitizer.extraction.factory.OpenAIVisionClientAdapter") as mock_adapter:
            ModelInvokerFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://gpu-box:11434/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(model_provider="openai_compatible", model_base_url="")
        with pytest.raises(ValueError, match="model_base_url is required"):
            ModelInvokerFactory.create(settings)

    def test_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown model provider"):
            ModelInvokerFactory.create(Settings(model_provider="carrier-pigeon"))
