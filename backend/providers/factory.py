"""Factory functions for creating LLM providers and model configs."""

from typing import Optional

from shared.config import Settings, get_settings

from .base import LLMProvider, ModelConfig
from .openai_compatible import OpenAICompatibleProvider


def get_provider(provider_type: str) -> LLMProvider:
    """Get a provider instance for the given provider type.

    Raises:
        KeyError: If provider_type is not recognized
    """
    return OpenAICompatibleProvider(provider_type)


def get_api_key_for_provider(provider: str, settings: Settings) -> str:
    """Get the API key for a provider from settings."""
    api_key_map = {
        "groq": settings.groq_api_key,
        "openai": settings.openai_api_key,
        "openrouter": settings.openrouter_api_key,
        # Local providers don't need API keys
        "ollama": "",
    }
    return api_key_map.get(provider, "")


def build_model_config(model_id: str, settings: Optional[Settings] = None) -> ModelConfig:
    """Build a ModelConfig for a model ID on the configured provider.

    Args:
        model_id: Model identifier (e.g., "llama-3.1-8b-instant")
        settings: Settings to read provider and keys from (defaults to cached settings)

    Returns:
        ModelConfig ready to pass to LLMProvider.get_llm()
    """
    settings = settings or get_settings()
    return ModelConfig(
        provider_type=settings.llm_provider,
        model_id=model_id,
        api_base=settings.llm_api_base,
        api_key=get_api_key_for_provider(settings.llm_provider, settings),
        timeout=settings.llm_request_timeout,
    )
