# /readme_service/services/llm_client.py
# This module defines a GeminiLLMClient class that sends the README prompt to Gemini through its OpenAI-compatible API.
from __future__ import annotations

from openai import AsyncOpenAI

from ..logging import get_logger
from ..settings import settings
from ..utils.errors import missing_credential, provider_error

logger = get_logger(__name__)

# Checked in order: "```markdown" also starts with "```md" and "```".
CODE_FENCE_OPENERS = ("```markdown", "```md", "```")
CODE_FENCE_CLOSER = "```"


def strip_code_fences(text: str) -> str:
    """Unwrap a README the model returned inside a single fenced block."""
    readme = text.strip()
    for opener in CODE_FENCE_OPENERS:
        if readme.startswith(opener):
            readme = readme[len(opener):]
            # only a wrapper's closing fence; a README may legitimately end with a code block
            if readme.endswith(CODE_FENCE_CLOSER):
                readme = readme[: -len(CODE_FENCE_CLOSER)]
            break
    return readme.strip()


class GeminiLLMClient:
    """
    Gemini exposes an OpenAI-compatible endpoint, so the OpenAI SDK is used with:
      base_url="https://generativelanguage.googleapis.com/v1beta/openai/"
      api_key=GEMINI_API_KEY
    One request per README, no retries.
    """
    def __init__(self) -> None:
        if not settings.gemini_api_key:
            # The API still starts; generate() reports the missing key per request.
            self._client = None
            return

        self._client = AsyncOpenAI(
            base_url=settings.gemini_base_url,
            api_key=settings.gemini_api_key,
            max_retries=0,
        )

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def generate(self, prompt: str) -> str:
        if not self._client:
            raise missing_credential("GEMINI_API_KEY environment variable is not set")

        try:
            resp = await self._client.chat.completions.create(
                model=settings.gemini_model,
                messages=[{"role": "user", "content": prompt}],
                temperature=settings.llm_temperature,
                max_tokens=settings.llm_max_tokens,
            )
            text = resp.choices[0].message.content or ""
        except Exception as e:
            raise provider_error(f"Gemini LLM call failed: {e}") from e

        logger.debug("Gemini returned %d characters", len(text))
        return strip_code_fences(text)
