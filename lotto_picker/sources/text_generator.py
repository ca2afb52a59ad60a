"""Generative-text client — asks a completion API for pick numbers.

The API takes {"prompt", "max_tokens", "temperature"} and answers with
{"choices": [{"text": "..."}]} (chat-style {"message": {"content"}} also
accepted). Any failure is reported as None so callers fall back.
"""

import asyncio

import aiohttp
from loguru import logger

from lotto_picker.analysis.candidates import PickContext, build_prompt, extract_integers
from lotto_picker.config import settings
from lotto_picker.exceptions import CollaboratorFailure
from lotto_picker.sources.base import BaseCandidateGenerator


def _response_text(data: dict) -> str:
    try:
        choice = data["choices"][0]
    except (KeyError, IndexError, TypeError) as e:
        raise CollaboratorFailure(f"Malformed response: {e}") from e

    text = choice.get("text")
    if text is None:
        text = (choice.get("message") or {}).get("content")
    if not isinstance(text, str):
        raise CollaboratorFailure("Response has no text")
    return text


class TextGeneratorClient(BaseCandidateGenerator):
    """aiohttp client for the text-generation endpoint."""

    def __init__(
        self,
        endpoint: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        self.endpoint = endpoint or settings.XAI_API_ENDPOINT
        self.api_key = api_key if api_key is not None else settings.XAI_API_KEY
        self.timeout = timeout or settings.AI_TIMEOUT_SECONDS

    async def _complete(self, prompt: str) -> str:
        payload = {
            "prompt": prompt,
            "max_tokens": settings.AI_MAX_TOKENS,
            "temperature": settings.AI_TEMPERATURE,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        async with aiohttp.ClientSession() as client:
            async with client.post(
                self.endpoint,
                json=payload,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as resp:
                if resp.status != 200:
                    raise CollaboratorFailure(f"Text API returned {resp.status}")
                data = await resp.json(content_type=None)
        return _response_text(data)

    async def request_candidates(self, context: PickContext) -> list[int] | None:
        try:
            text = await self._complete(build_prompt(context))
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, CollaboratorFailure) as e:
            logger.warning("Text generation failed for {}: {}", context.game.game_id, e)
            return None

        integers = extract_integers(text)
        logger.debug("Text generation returned {} integers", len(integers))
        return integers
