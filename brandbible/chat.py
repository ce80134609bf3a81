"""
Branding assistant chat.

ChatSession owns one remote conversational session. It is created lazily on
the first send and reused for every later send; the remote side accumulates
context from those sends. The ``history`` argument is therefore only used to
bootstrap the session: once it exists, history passed to ``send`` is ignored.
Call ``reset()`` to start over from a new history.

Conversation is the caller side: an append-only transcript that always
records a reply for every user turn, substituting an apology when the
service fails.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .errors import BrandBibleError, ValidationError
from .models import ChatMessage
from .service import ChatHandle

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a helpful and friendly branding assistant. "
    "Answer questions about branding, marketing, and design."
)

FALLBACK_REPLY = "Sorry, I'm having trouble connecting right now. Please try again later."


class ChatSession:
    def __init__(self, service, system_instruction: str = SYSTEM_INSTRUCTION) -> None:
        self.service = service
        self.system_instruction = system_instruction
        self._handle: Optional[ChatHandle] = None

    @property
    def started(self) -> bool:
        return self._handle is not None

    async def send(self, history: Sequence[ChatMessage], new_message_text: str) -> str:
        """Send one user turn and return the reply text verbatim."""
        if self._handle is None:
            self._handle = self.service.create_chat(list(history), self.system_instruction)
        elif history:
            logger.debug("Session already open; ignoring %d history turns", len(history))
        return await self._handle.send(new_message_text)

    def reset(self) -> None:
        self._handle = None


class Conversation:
    """Transcript plus the fallback policy for failed turns."""

    def __init__(self, session: ChatSession) -> None:
        self.session = session
        self._messages: List[ChatMessage] = []

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    async def ask(self, text: str) -> ChatMessage:
        if not (text or "").strip():
            raise ValidationError("Message must not be empty.")

        history = list(self._messages)
        self._messages.append(ChatMessage.user(text))
        try:
            reply_text = await self.session.send(history, text)
        except BrandBibleError as exc:
            logger.error("Chatbot error: %s", exc)
            reply_text = FALLBACK_REPLY
        except Exception:
            logger.exception("Chatbot error")
            reply_text = FALLBACK_REPLY

        reply = ChatMessage.reply(reply_text)
        self._messages.append(reply)
        return reply
