# lear/llm/llm_factory.py

import os
from typing import Optional
from .base_llm import BaseLLM, LLMConfig, LLMError, MockLLM
from .openai_adapter import OpenAIAdapter
from .anthropic_adapter import AnthropicAdapter
from .groq_adapter import GroqAdapter
from lear.config.config_manager import ProviderConfig

_ADAPTERS = {
    "openai": OpenAIAdapter,
    "anthropic": AnthropicAdapter,
    "groq": GroqAdapter,
    "mock": MockLLM,
}

def create_llm(provider_config: ProviderConfig) -> BaseLLM:
    """
    Create the LLM adapter named by the provider configuration.

    Raises:
        LLMError: Unknown provider or missing API key
    """
    adapter_cls = _ADAPTERS.get(provider_config.provider)
    if adapter_cls is None:
        raise LLMError(f"Unknown LLM provider: {provider_config.provider}")

    config = LLMConfig(
        model_name=provider_config.model,
        api_key=provider_config.api_key,
        base_url=provider_config.base_url,
        timeout=provider_config.timeout,
        max_tokens=provider_config.max_tokens
    )

    return adapter_cls(config)

def get_real_llm_from_env() -> Optional[BaseLLM]:
    """
    Build a real provider from the environment for opt-in integration tests.

    Environment Variables:
        TEST_REAL_LLMS: Must be set to enable real LLM loading
        REAL_LLM_PROVIDER: Provider to use (default: openai)
        REAL_LLM_MODEL: Model name (default: gpt-4o-mini)
    """
    if not os.getenv("TEST_REAL_LLMS"):
        return None

    provider = os.getenv("REAL_LLM_PROVIDER", "openai").lower()
    api_key = os.getenv(f"{provider.upper()}_API_KEY")
    if not api_key:
        return None

    return create_llm(ProviderConfig(
        provider=provider,
        model=os.getenv("REAL_LLM_MODEL", "gpt-4o-mini"),
        api_key=api_key,
        timeout=60
    ))
