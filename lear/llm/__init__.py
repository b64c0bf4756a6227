# lear/llm/__init__.py

from .base_llm import (
    BaseLLM,
    MockLLM,
    LLMConfig,
    LLMResponse,
    LLMError,
    LLMConnectionError,
    LLMTimeoutError,
    LLMRateLimitError,
    LLMInvalidRequestError
)
from .openai_adapter import OpenAIAdapter
from .anthropic_adapter import AnthropicAdapter
from .groq_adapter import GroqAdapter
from .llm_factory import create_llm, get_real_llm_from_env

__all__ = [
    "BaseLLM",
    "MockLLM",
    "LLMConfig",
    "LLMResponse",
    "LLMError",
    "LLMConnectionError",
    "LLMTimeoutError",
    "LLMRateLimitError",
    "LLMInvalidRequestError",
    "OpenAIAdapter",
    "AnthropicAdapter",
    "GroqAdapter",
    "create_llm",
    "get_real_llm_from_env"
]
