"""Unified provider for all OpenAI-compatible APIs.

Groq, OpenAI, OpenRouter and a local Ollama server all accept the OpenAI
chat completions protocol, so a single LangChain ChatOpenAI client covers
them with minor configuration differences.
"""

from dataclasses import dataclass
from typing import Optional

from langchain_openai import ChatOpenAI

from .base import LLMProvider, ModelConfig


@dataclass
class ProviderConfig:
    """Configuration for an OpenAI-compatible provider.

    Attributes:
        default_base_url: Default API endpoint URL (None uses OpenAI's default)
        api_key_required: Whether an API key must be provided
        api_key_env_var: Environment variable name for the API key (for error messages)
        default_headers: Custom HTTP headers to include in requests
    """

    default_base_url: str | None = None
    api_key_required: bool = True
    api_key_env_var: str = ""
    default_headers: dict[str, str] | None = None


# Provider configurations registry
PROVIDER_CONFIGS: dict[str, ProviderConfig] = {
    "groq": ProviderConfig(
        default_base_url="https://api.groq.com/openai/v1",
        api_key_required=True,
        api_key_env_var="GROQ_API_KEY",
    ),
    "openai": ProviderConfig(
        api_key_required=True,
        api_key_env_var="OPENAI_API_KEY",
    ),
    "openrouter": ProviderConfig(
        default_base_url="https://openrouter.ai/api/v1",
        api_key_required=True,
        api_key_env_var="OPENROUTER_API_KEY",
        default_headers={"X-Title": "Argue Against the Machine"},
    ),
    "ollama": ProviderConfig(
        default_base_url="http://localhost:11434/v1",
        api_key_required=False,
    ),
}


class OpenAICompatibleProvider(LLMProvider):
    """Unified provider for all OpenAI-compatible APIs.

    Handles: groq, openai, openrouter, ollama

    - Cloud providers (groq, openai, openrouter): API key required
    - Local provider (ollama): No API key, local base URL
    - OpenRouter: Custom header for attribution
    """

    def __init__(self, provider_type: str):
        """Initialize the provider.

        Args:
            provider_type: One of: groq, openai, openrouter, ollama

        Raises:
            KeyError: If provider_type is not recognized
        """
        if provider_type not in PROVIDER_CONFIGS:
            raise KeyError(
                f"Unknown provider type: {provider_type}. "
                f"Valid types: {list(PROVIDER_CONFIGS.keys())}"
            )
        self.provider_type = provider_type
        self.provider_config = PROVIDER_CONFIGS[provider_type]

    def get_llm(
        self,
        config: ModelConfig,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> ChatOpenAI:
        """Return a ChatOpenAI client configured for this provider.

        Args:
            config: Model configuration with provider details
            temperature: Sampling temperature, provider default if None
            max_tokens: Generation cap, provider default if None

        Returns:
            A configured ChatOpenAI client

        Raises:
            ValueError: If api_key is required but not provided
        """
        if self.provider_config.api_key_required and not config.api_key:
            raise ValueError(
                f"{self.provider_type.title()} API key is required. "
                f"Set it via the {self.provider_config.api_key_env_var} environment variable."
            )

        kwargs: dict = {"model": config.model_id, "timeout": config.timeout}

        # Set base URL (from config or provider default)
        if base_url := (config.api_base or self.provider_config.default_base_url):
            kwargs["base_url"] = base_url

        # Set API key (use "not-needed" placeholder for local providers)
        kwargs["api_key"] = config.api_key or "not-needed"

        if self.provider_config.default_headers:
            kwargs["default_headers"] = self.provider_config.default_headers

        if temperature is not None:
            kwargs["temperature"] = temperature
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        return ChatOpenAI(**kwargs)
