# lear/llm/anthropic_adapter.py

import time
from typing import Dict, Any, List

from .base_llm import BaseLLM, LLMConfig, LLMResponse, LLMError, LLMConnectionError, LLMTimeoutError, LLMRateLimitError, LLMInvalidRequestError

try:
    import anthropic
    ANTHROPIC_AVAILABLE = True
except ImportError:
    ANTHROPIC_AVAILABLE = False
    anthropic = None

DEFAULT_MAX_TOKENS = 2000

class AnthropicAdapter(BaseLLM):
    """Anthropic LLM adapter using the official Anthropic Python client."""

    def __init__(self, config: LLMConfig):
        super().__init__(config)

        if not ANTHROPIC_AVAILABLE:
            raise LLMError("Anthropic package not installed. Install with: pip install anthropic")

        if not config.api_key:
            raise LLMError("Anthropic API key is required")

        self.client = anthropic.Anthropic(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=0
        )

        self.logger.info(f"Initialized Anthropic adapter with model: {config.model_name}")

    def chat_with_metadata(self, messages: List[Dict[str, str]], **kwargs) -> LLMResponse:
        """Run a chat completion with full metadata using Anthropic API."""
        try:
            params = self._merge_params(**kwargs)

            # Anthropic takes the system prompt as a separate parameter
            system_parts = [m["content"] for m in messages if m["role"] == "system"]
            chat_messages = [m for m in messages if m["role"] != "system"]

            api_params: Dict[str, Any] = {
                "max_tokens": DEFAULT_MAX_TOKENS,
                "messages": chat_messages,
            }
            api_params.update(params)
            if system_parts:
                api_params["system"] = "\n\n".join(system_parts)

            self.logger.debug(f"Making Anthropic API call with model: {params['model']}")
            start_time = time.time()

            response = self.client.messages.create(**api_params)

            end_time = time.time()

            content = "".join(
                block.text for block in (response.content or []) if getattr(block, "type", "") == "text"
            )

            usage = None
            if response.usage:
                usage = {
                    "input_tokens": response.usage.input_tokens,
                    "output_tokens": response.usage.output_tokens,
                    "total_tokens": response.usage.input_tokens + response.usage.output_tokens
                }

            metadata = {
                "response_time": end_time - start_time,
                "model": response.model,
                "id": response.id,
                "stop_reason": response.stop_reason,
            }

            self.logger.debug(f"Anthropic API call completed in {metadata['response_time']:.2f}s")

            return LLMResponse(
                content=self._clean_content(content),
                model=response.model,
                usage=usage,
                finish_reason=response.stop_reason,
                metadata=metadata
            )

        except anthropic.AuthenticationError as e:
            self.logger.error(f"Anthropic authentication error: {e}")
            raise LLMConnectionError(f"Authentication failed: {e}") from e

        except anthropic.RateLimitError as e:
            self.logger.error(f"Anthropic rate limit error: {e}")
            raise LLMRateLimitError(f"Rate limit exceeded: {e}") from e

        except anthropic.APITimeoutError as e:
            self.logger.error(f"Anthropic timeout error: {e}")
            raise LLMTimeoutError(f"Request timed out: {e}") from e

        except anthropic.BadRequestError as e:
            self.logger.error(f"Anthropic bad request error: {e}")
            raise LLMInvalidRequestError(f"Invalid request: {e}") from e

        except anthropic.APIConnectionError as e:
            self.logger.error(f"Anthropic connection error: {e}")
            raise LLMConnectionError(f"Connection failed: {e}") from e

        except anthropic.APIError as e:
            self.logger.error(f"Anthropic API error: {e}")
            raise LLMError(getattr(e, "message", None) or str(e) or "Anthropic API error") from e

    def _merge_params(self, **kwargs) -> Dict[str, Any]:
        """
        Merge configuration with runtime parameters.

        top_p is only sent when asked for explicitly; newer Anthropic models
        reject requests that set both temperature and top_p.
        """
        params = super()._merge_params(**kwargs)
        if "top_p" not in kwargs:
            params.pop("top_p", None)
        return params
