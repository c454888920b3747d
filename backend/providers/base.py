"""Base classes and models for LLM providers."""

from abc import ABC, abstractmethod
from typing import Optional

from langchain_openai import ChatOpenAI
from pydantic import BaseModel


class ModelConfig(BaseModel):
    """Configuration for a chat model endpoint.

    Attributes:
        provider_type: Provider key (e.g., "groq", "openai")
        model_id: Model identifier (e.g., "llama-3.3-70b-versatile")
        api_base: Base URL override for the API endpoint
        api_key: API key (empty string for local servers)
        timeout: Request timeout in seconds
    """

    model_config = {"frozen": True}

    provider_type: str
    model_id: str
    api_base: str = ""
    api_key: str = ""
    timeout: float = 60.0


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Every supported backend speaks the OpenAI chat completions protocol,
    so implementations are thin wrappers around ChatOpenAI with
    provider-specific defaults.
    """

    @abstractmethod
    def get_llm(
        self,
        config: ModelConfig,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> ChatOpenAI:
        """Return a configured LLM client for the given model.

        Args:
            config: Model configuration with provider details
            temperature: Sampling temperature for this call site
            max_tokens: Upper bound on generated tokens

        Returns:
            A configured ChatOpenAI client
        """
        pass
