# lear/llm/base_llm.py

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List
from dataclasses import dataclass
import logging

@dataclass
class LLMConfig:
    """Configuration for LLM providers"""
    model_name: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None
    top_p: float = 1.0
    timeout: int = 120
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    extra_params: Dict[str, Any] = None

    def __post_init__(self):
        if self.extra_params is None:
            self.extra_params = {}

@dataclass
class LLMResponse:
    """Response from LLM provider"""
    content: str
    model: str
    usage: Optional[Dict[str, int]] = None
    finish_reason: Optional[str] = None
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        if self.metadata is None:
            self.metadata = {}

class LLMError(Exception):
    """Base exception for LLM-related errors"""
    pass

class LLMConnectionError(LLMError):
    """Raised when connection to LLM provider fails"""
    pass

class LLMTimeoutError(LLMError):
    """Raised when LLM request times out"""
    pass

class LLMRateLimitError(LLMError):
    """Raised when rate limit is exceeded"""
    pass

class LLMInvalidRequestError(LLMError):
    """Raised when request is invalid"""
    pass

class BaseLLM(ABC):
    """
    Abstract base class for LLM providers.

    Every provider speaks the chat-completion contract: an ordered list of
    role-tagged messages plus sampling parameters in, one completion out.
    """

    def __init__(self, config: LLMConfig):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self._validate_config()

    @abstractmethod
    def chat_with_metadata(self, messages: List[Dict[str, str]], **kwargs) -> LLMResponse:
        """
        Send a chat completion request and return content with metadata.

        Args:
            messages: Ordered list of {"role": ..., "content": ...} dicts
            **kwargs: Parameters overriding the config (temperature, max_tokens...)

        Returns:
            LLMResponse with trimmed content and metadata

        Raises:
            LLMError: If the provider call fails
        """
        pass

    def chat(self, messages: List[Dict[str, str]], **kwargs) -> str:
        """Send a chat completion request and return only the text."""
        return self.chat_with_metadata(messages, **kwargs).content

    def generate(self, prompt: str, **kwargs) -> str:
        """Generate a response for a single user prompt."""
        return self.chat([{"role": "user", "content": prompt}], **kwargs)

    @property
    def model_name(self) -> str:
        return self.config.model_name

    def _validate_config(self):
        """Validate the configuration"""
        if not self.config.model_name:
            raise ValueError("model_name is required")

        if not 0 <= self.config.temperature <= 2:
            raise ValueError("temperature must be between 0 and 2")

        if not 0 <= self.config.top_p <= 1:
            raise ValueError("top_p must be between 0 and 1")

        if self.config.max_tokens is not None and self.config.max_tokens <= 0:
            raise ValueError("max_tokens must be positive")

    def _merge_params(self, **kwargs) -> Dict[str, Any]:
        """
        Merge configuration with runtime parameters.

        Runtime kwargs win over config values; None values are dropped.
        """
        params = {
            'model': self.config.model_name,
            'temperature': self.config.temperature,
            'top_p': self.config.top_p,
        }

        if self.config.max_tokens:
            params['max_tokens'] = self.config.max_tokens

        params.update(self.config.extra_params)
        params.update(kwargs)

        return {k: v for k, v in params.items() if v is not None}

    @staticmethod
    def _clean_content(content: Optional[str]) -> str:
        """Providers may return None content; callers always get a trimmed string."""
        return str(content or "").strip()

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(model={self.config.model_name})"

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(model={self.config.model_name}, "
                f"temperature={self.config.temperature}, "
                f"max_tokens={self.config.max_tokens})")


class MockLLM(BaseLLM):
    """
    Mock LLM implementation for testing and offline runs.

    Returns predefined responses in order (cycling when exhausted) and
    records every call so tests can inspect messages and temperatures.
    """

    def __init__(self, config: LLMConfig, responses: Optional[List[str]] = None):
        super().__init__(config)
        self.responses = responses or []
        self.calls: List[Dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last_messages(self) -> Optional[List[Dict[str, str]]]:
        return self.calls[-1]["messages"] if self.calls else None

    def chat_with_metadata(self, messages: List[Dict[str, str]], **kwargs) -> LLMResponse:
        """Return the next canned response"""
        params = self._merge_params(**kwargs)
        self.calls.append({"messages": messages, "params": params})
        self.logger.debug(f"MockLLM call {self.call_count} at temperature {params.get('temperature')}")

        if self.responses:
            content = self.responses[(self.call_count - 1) % len(self.responses)]
        else:
            content = self._default_response(messages)

        content = self._clean_content(content)
        return LLMResponse(
            content=content,
            model=self.config.model_name,
            usage={
                'prompt_tokens': sum(len(m["content"].split()) for m in messages),
                'completion_tokens': len(content.split())
            },
            finish_reason='stop',
            metadata={'mock': True, 'call_count': self.call_count}
        )

    def _default_response(self, messages: List[Dict[str, str]]) -> str:
        """Echo-style placeholder when no canned responses are configured"""
        system = next((m["content"] for m in messages if m["role"] == "system"), "")
        if "repair" in system.lower() or "editor" in system.lower():
            # Hand the failing text back unchanged
            return messages[-1]["content"].split("------", 1)[-1]
        return (
            "1) A mason who built with a lintel\n"
            "Would polish each stone with a mintel;\n"
            "He carved a fine pier\n"
            "With a gargoyle's leer,\n"
            "Then retired to a house made of flintel."
        )

    def reset(self):
        """Reset mock state"""
        self.calls = []
