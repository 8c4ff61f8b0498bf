"""
Content Generation Service

Builds prompts for a generation request and delegates the completion to
LiteLLM, which speaks to any provider using "provider/model-name" ids.

Failure mapping (surfaced to clients as distinct conditions):
- backend 429 / litellm.RateLimitError → RateLimitError ("retry later")
- backend 402 (no credits)             → QuotaExceededError
- anything else                        → LLMError

Transient connection problems and timeouts are retried with exponential
backoff before giving up.

Usage:
    from app.services.generation import get_generation_service

    service = get_generation_service()
    content = await service.generate(request)
"""

import logging
import time
from typing import Optional

import litellm
from litellm import acompletion
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.config import settings
from app.middleware.error_handling import LLMError, QuotaExceededError, RateLimitError
from app.models.content import GenerateContentRequest
from app.services.generation.prompts import build_system_prompt, build_user_prompt

logger = logging.getLogger(__name__)

litellm.drop_params = True  # Drop unsupported params instead of erroring

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
QUOTA_MESSAGE = "Generation quota exhausted. Please add credits to your workspace."

_TRANSIENT_ERRORS = (litellm.APIConnectionError, litellm.Timeout)


def build_messages(system_prompt: str, prompt: str) -> list[dict[str, str]]:
    """Chat messages in OpenAI format."""
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": prompt},
    ]


class GenerationService:
    """
    Generates educational content for (topic, subject, difficulty, output type).

    Args:
        model: LiteLLM model id (defaults to settings.GENERATION_MODEL).
        temperature: Sampling temperature.
        max_tokens: Maximum tokens in the response.
    """

    def __init__(
        self,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self.model = model or settings.GENERATION_MODEL
        self.temperature = (
            settings.GENERATION_TEMPERATURE if temperature is None else temperature
        )
        self.max_tokens = max_tokens or settings.GENERATION_MAX_TOKENS

    @retry(
        retry=retry_if_exception_type(_TRANSIENT_ERRORS),
        stop=stop_after_attempt(settings.GENERATION_MAX_RETRIES),
        wait=wait_exponential(multiplier=1, min=2, max=30),
        reraise=True,
    )
    async def _complete(self, messages: list[dict[str, str]]) -> str:
        response = await acompletion(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        return response.choices[0].message.content or ""

    async def generate(self, request: GenerateContentRequest) -> str:
        """
        Generate content for a request.

        Args:
            request: Topic, subject, difficulty and output type.

        Returns:
            The generated markdown.

        Raises:
            RateLimitError: The backend is throttling requests.
            QuotaExceededError: The backend reports no remaining credits.
            LLMError: Any other generation failure.
        """
        messages = build_messages(
            build_system_prompt(request.output_type, request.difficulty),
            build_user_prompt(
                request.topic, request.subject, request.difficulty, request.output_type
            ),
        )

        logger.info(
            f"Generating {request.output_type.value} on '{request.topic}' "
            f"({request.subject.value}, {request.difficulty.value}) with {self.model}"
        )
        start_time = time.perf_counter()

        try:
            content = await self._complete(messages)
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            logger.error(
                f"Content generation failed: {type(e).__name__}: {e} "
                f"(model={self.model}, status={status_code})"
            )
            if isinstance(e, litellm.RateLimitError) or status_code == 429:
                raise RateLimitError(RATE_LIMIT_MESSAGE) from e
            if status_code == 402:
                raise QuotaExceededError(QUOTA_MESSAGE) from e
            raise LLMError("Content generation failed", details={"model": self.model}) from e

        latency_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(f"Content generated: {len(content)} chars in {latency_ms}ms")
        return content


_generation_service: Optional[GenerationService] = None


def get_generation_service() -> GenerationService:
    """Get the shared GenerationService instance."""
    global _generation_service
    if _generation_service is None:
        _generation_service = GenerationService()
    return _generation_service
