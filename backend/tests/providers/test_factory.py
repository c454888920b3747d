"""Tests for provider and model config factories."""

import pytest

from providers.factory import build_model_config, get_api_key_for_provider, get_provider
from providers.openai_compatible import OpenAICompatibleProvider
from shared.config import Settings


@pytest.fixture
def keyed_settings() -> Settings:
    return Settings(
        _env_file=None,
        groq_api_key="groq-key",
        openai_api_key="openai-key",
        openrouter_api_key="openrouter-key",
        llm_request_timeout=15.0,
    )


class TestGetProvider:
    def test_known_provider(self):
        provider = get_provider("groq")
        assert isinstance(provider, OpenAICompatibleProvider)
        assert provider.provider_type == "groq"

    def test_unknown_provider(self):
        with pytest.raises(KeyError):
            get_provider("anthropic")


class TestApiKeys:
    @pytest.mark.parametrize("provider,expected", [
        ("groq", "groq-key"),
        ("openai", "openai-key"),
        ("openrouter", "openrouter-key"),
        ("ollama", ""),
        ("unknown", ""),
    ])
    def test_key_lookup(self, keyed_settings, provider, expected):
        assert get_api_key_for_provider(provider, keyed_settings) == expected


class TestBuildModelConfig:
    def test_uses_configured_provider(self, keyed_settings):
        config = build_model_config("gemma2-9b-it", keyed_settings)

        assert config.provider_type == "groq"
        assert config.model_id == "gemma2-9b-it"
        assert config.api_key == "groq-key"
        assert config.timeout == 15.0
        assert config.api_base == ""

    def test_other_provider(self):
        settings = Settings(
            _env_file=None,
            llm_provider="ollama",
            llm_api_base="http://gpu-box:11434/v1",
        )

        config = build_model_config("llama3", settings)

        assert config.provider_type == "ollama"
        assert config.api_key == ""
        assert config.api_base == "http://gpu-box:11434/v1"
