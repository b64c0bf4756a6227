# lear/llm/openai_adapter.py

import time
from typing import Dict, Any, List

from .base_llm import BaseLLM, LLMConfig, LLMResponse, LLMError, LLMConnectionError, LLMTimeoutError, LLMRateLimitError, LLMInvalidRequestError

try:
    import openai
    OPENAI_AVAILABLE = True
except ImportError:
    OPENAI_AVAILABLE = False
    openai = None

class OpenAIAdapter(BaseLLM):
    """OpenAI LLM adapter using the official OpenAI Python client."""

    def __init__(self, config: LLMConfig):
        super().__init__(config)

        if not OPENAI_AVAILABLE:
            raise LLMError("OpenAI package not installed. Install with: pip install openai")

        if not config.api_key:
            raise LLMError("OpenAI API key is required")

        # Transport failures surface to the caller, the client must not retry
        self.client = openai.OpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=0
        )

        self.logger.info(f"Initialized OpenAI adapter with model: {config.model_name}")

    def chat_with_metadata(self, messages: List[Dict[str, str]], **kwargs) -> LLMResponse:
        """Run a chat completion with full metadata using OpenAI API."""
        try:
            params = self._merge_params(**kwargs)

            api_params: Dict[str, Any] = {"messages": messages}
            api_params.update(params)

            self.logger.debug(f"Making OpenAI API call with model: {params['model']}")
            start_time = time.time()

            response = self.client.chat.completions.create(**api_params)

            end_time = time.time()

            content = ""
            finish_reason = None
            if response.choices:
                choice = response.choices[0]
                content = choice.message.content if choice.message else ""
                finish_reason = choice.finish_reason

            usage = None
            if response.usage:
                usage = {
                    "prompt_tokens": response.usage.prompt_tokens,
                    "completion_tokens": response.usage.completion_tokens,
                    "total_tokens": response.usage.total_tokens
                }

            metadata = {
                "response_time": end_time - start_time,
                "model": response.model,
                "created": response.created,
                "id": response.id,
            }

            self.logger.debug(f"OpenAI API call completed in {metadata['response_time']:.2f}s")

            return LLMResponse(
                content=self._clean_content(content),
                model=response.model,
                usage=usage,
                finish_reason=finish_reason,
                metadata=metadata
            )

        except openai.AuthenticationError as e:
            self.logger.error(f"OpenAI authentication error: {e}")
            raise LLMConnectionError(f"Authentication failed: {e}") from e

        except openai.RateLimitError as e:
            self.logger.error(f"OpenAI rate limit error: {e}")
            raise LLMRateLimitError(f"Rate limit exceeded: {e}") from e

        except openai.APITimeoutError as e:
            self.logger.error(f"OpenAI timeout error: {e}")
            raise LLMTimeoutError(f"Request timed out: {e}") from e

        except openai.BadRequestError as e:
            self.logger.error(f"OpenAI bad request error: {e}")
            raise LLMInvalidRequestError(f"Invalid request: {e}") from e

        except openai.APIConnectionError as e:
            self.logger.error(f"OpenAI connection error: {e}")
            raise LLMConnectionError(f"Connection failed: {e}") from e

        except openai.APIError as e:
            self.logger.error(f"OpenAI API error: {e}")
            raise LLMError(getattr(e, "message", None) or str(e) or "OpenAI API error") from e
