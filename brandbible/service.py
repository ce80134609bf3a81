"""
GeminiService — the only module that talks to Google's generative API.

Wraps the async surface of the google-genai SDK (``client.aio``) behind three
calls the rest of the package depends on:

  generate_structured(prompt, schema) -> raw JSON text
  generate_image(prompt)              -> list of PNG byte strings
  create_chat(history, instruction)   -> ChatHandle with async send(text)

SDK, network and timeout failures are re-raised as TransportError so callers only ever
see the brandbible error hierarchy.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

import aiohttp
import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from . import config
from .errors import TransportError
from .models import ChatMessage

logger = logging.getLogger(__name__)

# The SDK talks through httpx, or aiohttp when it is installed; socket-level
# failures and timeouts can escape either client unwrapped.
_TRANSPORT_ERRORS = (
    genai_errors.APIError,
    httpx.HTTPError,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
)


class ChatHandle:
    """An open conversational session. Context accumulates remotely."""

    def __init__(self, chat) -> None:
        self._chat = chat

    async def send(self, text: str) -> str:
        try:
            response = await self._chat.send_message(text)
        except _TRANSPORT_ERRORS as exc:
            raise TransportError(f"Chat request failed: {exc}") from exc
        return response.text or ""


class GeminiService:
    """Async adapter over ``genai.Client``."""

    def __init__(
        self,
        client: Optional[genai.Client] = None,
        text_model: str = config.TEXT_MODEL,
        image_model: str = config.IMAGE_MODEL,
    ) -> None:
        self.client = client or genai.Client(api_key=config.get_api_key())
        self.text_model = text_model
        self.image_model = image_model

    async def generate_structured(self, prompt: str, schema: types.Schema) -> str:
        logger.info("Requesting structured plan from %s", self.text_model)
        try:
            response = await self.client.aio.models.generate_content(
                model=self.text_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=schema,
                ),
            )
        except _TRANSPORT_ERRORS as exc:
            raise TransportError(f"Structured generation failed: {exc}") from exc
        return (response.text or "").strip()

    async def generate_image(self, prompt: str) -> List[bytes]:
        """Request one square PNG. Returns the bytes of every image received."""
        logger.info("Requesting image from %s", self.image_model)
        try:
            response = await self.client.aio.models.generate_images(
                model=self.image_model,
                prompt=prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=1,
                    output_mime_type="image/png",
                    aspect_ratio="1:1",
                ),
            )
        except _TRANSPORT_ERRORS as exc:
            raise TransportError(f"Image generation failed: {exc}") from exc

        images = []
        for generated in response.generated_images or []:
            if generated.image is not None and generated.image.image_bytes:
                images.append(generated.image.image_bytes)
        return images

    def create_chat(
        self,
        history: Sequence[ChatMessage],
        system_instruction: str,
    ) -> ChatHandle:
        logger.info("Opening chat session on %s (%d prior turns)", self.text_model, len(history))
        chat = self.client.aio.chats.create(
            model=self.text_model,
            config=types.GenerateContentConfig(system_instruction=system_instruction),
            history=[types.Content(**m.to_content()) for m in history],
        )
        return ChatHandle(chat)
