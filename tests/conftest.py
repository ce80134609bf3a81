import asyncio
import json

import pytest

from brandbible.errors import TransportError

COFFEE_PLAN = {
    "logoPrompt": (
        "A minimalist geometric logo of a coffee bean split by a single leaf, "
        "deep forest green and warm cream, flat vector art on a clean white background."
    ),
    "secondaryMarkPrompts": [
        "A simple leaf-in-a-cup icon, single green stroke, favicon friendly.",
        "A round monogram badge with a stylised bean, cream on green, app icon.",
    ],
    "colorPalette": [
        {"hex": "#2F5D3A", "name": "Forest Green", "usage": "Primary brand color"},
        {"hex": "#F4EBD9", "name": "Oat Cream", "usage": "Background"},
        {"hex": "#8B5A2B", "name": "Roast Brown", "usage": "Secondary accents"},
        {"hex": "#D98E32", "name": "Caramel", "usage": "Primary CTA"},
        {"hex": "#1E1E1E", "name": "Espresso", "usage": "Body text"},
    ],
    "fontPairing": {"headerFont": "Playfair Display", "bodyFont": "Source Sans 3"},
}


class FakeChatHandle:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    async def send(self, text):
        self.sent.append(text)
        if self.error is not None:
            raise self.error
        return f"reply #{len(self.sent)}: {text}"


class FakeService:
    """In-memory stand-in for GeminiService that records every call."""

    def __init__(self, plan_text=None, plan_delay=0.0, chat_error=None):
        self.plan_text = json.dumps(COFFEE_PLAN) if plan_text is None else plan_text
        self.plan_delay = plan_delay
        self.chat_error = chat_error
        self.structured_calls = []
        self.image_calls = []
        self.chat_sessions = []
        # prompt -> list of image bytes (or an exception to raise)
        self.image_results = {}
        # prompt -> seconds to wait before answering
        self.image_delays = {}

    @property
    def network_calls(self):
        return len(self.structured_calls) + len(self.image_calls) + len(self.chat_sessions)

    async def generate_structured(self, prompt, schema):
        self.structured_calls.append((prompt, schema))
        if self.plan_delay:
            await asyncio.sleep(self.plan_delay)
        return self.plan_text

    async def generate_image(self, prompt):
        self.image_calls.append(prompt)
        await asyncio.sleep(self.image_delays.get(prompt, 0))
        result = self.image_results.get(prompt, [f"PNG:{prompt}".encode()])
        if isinstance(result, Exception):
            raise result
        return result

    def create_chat(self, history, system_instruction):
        handle = FakeChatHandle(self.chat_error)
        self.chat_sessions.append((list(history), system_instruction, handle))
        return handle


@pytest.fixture
def coffee_plan():
    return json.loads(json.dumps(COFFEE_PLAN))


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def failing_chat_service():
    return FakeService(chat_error=TransportError("connection reset"))
