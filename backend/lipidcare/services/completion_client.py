"""AI text-completion capability used by the schedule generator."""
from __future__ import annotations

import logging
from typing import Optional

import openai

from lipidcare.core.config import settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a clinical lifestyle coach who designs practical daily routines for people "
    "managing blood triglycerides. You always answer with a single JSON object."
)


class TextCompletionClient:
    """Base interface for providers that turn a prompt into raw text."""

    async def complete(self, prompt: str) -> str:
        raise NotImplementedError


class OpenAICompletionClient(TextCompletionClient):
    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        temperature: float,
        client: Optional[openai.AsyncOpenAI] = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self._client = client or openai.AsyncOpenAI(api_key=api_key)

    async def complete(self, prompt: str) -> str:
        completion = await self._client.chat.completions.create(
            model=self.model,
            response_format={"type": "json_object"},
            temperature=self.temperature,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        )
        content = completion.choices[0].message.content or ""
        logger.debug("Completion received (model=%s, chars=%d)", self.model, len(content))
        return content


def get_completion_client() -> Optional[TextCompletionClient]:
    """Return the configured provider, or None when no credential is set."""
    if not settings.openai_api_key:
        return None
    return OpenAICompletionClient(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        temperature=settings.openai_temperature,
    )
