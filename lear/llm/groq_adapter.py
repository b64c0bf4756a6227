# lear/llm/groq_adapter.py

import time
from typing import Dict, Any, List

from .base_llm import BaseLLM, LLMConfig, LLMResponse, LLMError, LLMConnectionError, LLMTimeoutError, LLMRateLimitError, LLMInvalidRequestError

try:
    import groq
    GROQ_AVAILABLE = True
except ImportError:
    GROQ_AVAILABLE = False
    groq = None

class GroqAdapter(BaseLLM):
    """Groq LLM adapter using the official Groq Python client."""

    def __init__(self, config: LLMConfig):
        super().__init__(config)

        if not GROQ_AVAILABLE:
            raise LLMError("Groq package not installed. Install with: pip install groq")

        if not config.api_key:
            raise LLMError("Groq API key is required")

        self.client = groq.Groq(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=0
        )

        self.logger.info(f"Initialized Groq adapter with model: {config.model_name}")

    def chat_with_metadata(self, messages: List[Dict[str, str]], **kwargs) -> LLMResponse:
        """Run a chat completion with full metadata using Groq API."""
        try:
            params = self._merge_params(**kwargs)

            api_params: Dict[str, Any] = {"messages": messages}
            api_params.update(params)

            self.logger.debug(f"Making Groq API call with model: {params['model']}")
            start_time = time.time()

            response = self.client.chat.completions.create(**api_params)

            end_time = time.time()

            choice = response.choices[0]
            content = choice.message.content

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
                "id": response.id,
                "created": getattr(response, 'created', None),
            }

            self.logger.debug(f"Groq API call completed in {metadata['response_time']:.2f}s")

            return LLMResponse(
                content=self._clean_content(content),
                model=response.model,
                usage=usage,
                finish_reason=choice.finish_reason,
                metadata=metadata
            )

        except groq.AuthenticationError as e:
            self.logger.error(f"Groq authentication error: {e}")
            raise LLMConnectionError(f"Authentication failed: {e}") from e

        except groq.RateLimitError as e:
            self.logger.error(f"Groq rate limit error: {e}")
            raise LLMRateLimitError(f"Rate limit exceeded: {e}") from e

        except groq.APITimeoutError as e:
            self.logger.error(f"Groq timeout error: {e}")
            raise LLMTimeoutError(f"Request timed out: {e}") from e

        except groq.BadRequestError as e:
            self.logger.error(f"Groq bad request error: {e}")
            raise LLMInvalidRequestError(f"Invalid request: {e}") from e

        except groq.APIConnectionError as e:
            self.logger.error(f"Groq connection error: {e}")
            raise LLMConnectionError(f"Connection failed: {e}") from e

        except groq.APIError as e:
            self.logger.error(f"Groq API error: {e}")
            raise LLMError(getattr(e, "message", None) or str(e) or "Groq API error") from e
