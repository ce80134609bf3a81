"""
Director — asks Gemini to turn a company mission into a brand identity plan.

The plan is requested as structured JSON (strict response schema) and holds:
  - one detailed prompt for the primary logo
  - two prompts for simpler secondary marks / icons
  - a 5-colour palette (hex, name, usage)
  - a Google Font pairing (header + body)
"""

from __future__ import annotations

import logging

from google.genai import types
from pydantic import ValidationError as PydanticValidationError

from .errors import SchemaError, ValidationError
from .models import PALETTE_SIZE, SECONDARY_MARK_COUNT, BrandIdentityPlan

logger = logging.getLogger(__name__)


# ── Response schema sent with the request ─────────────────────────────────────

_COLOR_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "hex": types.Schema(type=types.Type.STRING, description="The hex code of the color, e.g. '#1A2B3C'."),
        "name": types.Schema(type=types.Type.STRING, description="A common name for the color."),
        "usage": types.Schema(
            type=types.Type.STRING,
            description="Suggested usage for the color (e.g., 'Primary CTA', 'Background').",
        ),
    },
    required=["hex", "name", "usage"],
)

PLAN_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "logoPrompt": types.Schema(
            type=types.Type.STRING,
            description=(
                "A detailed, artistic prompt for a text-to-image model to create a primary logo. "
                "Must be in English."
            ),
        ),
        "secondaryMarkPrompts": types.Schema(
            type=types.Type.ARRAY,
            description="An array of 2 distinct prompts for generating secondary brand marks or icons.",
            items=types.Schema(type=types.Type.STRING),
            min_items=SECONDARY_MARK_COUNT,
            max_items=SECONDARY_MARK_COUNT,
        ),
        "colorPalette": types.Schema(
            type=types.Type.ARRAY,
            description="A 5-color palette.",
            items=_COLOR_SCHEMA,
            min_items=PALETTE_SIZE,
            max_items=PALETTE_SIZE,
        ),
        "fontPairing": types.Schema(
            type=types.Type.OBJECT,
            description="A Google Font pairing suggestion.",
            properties={
                "headerFont": types.Schema(type=types.Type.STRING, description="Google Font for headers."),
                "bodyFont": types.Schema(type=types.Type.STRING, description="Google Font for body text."),
            },
            required=["headerFont", "bodyFont"],
        ),
    },
    required=["logoPrompt", "secondaryMarkPrompts", "colorPalette", "fontPairing"],
    property_ordering=["logoPrompt", "secondaryMarkPrompts", "colorPalette", "fontPairing"],
)


# ── Prompt ────────────────────────────────────────────────────────────────────

PLAN_PROMPT_TEMPLATE = """\
You are a world-class branding expert. A user will provide their company mission. \
Your task is to generate a complete brand identity guide in a structured JSON format.

Company Mission: "{mission}"

Based on this mission, generate the following:
1.  A detailed, specific, and artistic prompt for a text-to-image model to create a primary company logo. \
The logo should be modern, memorable, and relevant to the company's mission. Describe the style \
(e.g., minimalist, geometric, abstract), color scheme, and key visual elements. Example: "A minimalist, \
geometric logo of a stylized phoenix rising, using shades of deep blue and vibrant orange, vector art, \
on a clean white background."
2.  An array of two (2) distinct prompts for generating secondary brand marks or icons. These should \
complement the primary logo but be simpler, suitable for favicons or app icons.
3.  A 5-color palette. For each color, provide its hex code (#RRGGBB), a common name, and a suggested \
usage. The colors should be harmonious and reflect the brand's mood.
4.  A Google Font pairing suggestion. Provide one font for headers and one for body text that are \
legible, professional, and complementary.
"""


def validate_mission(mission: str) -> str:
    """Return the trimmed mission, or raise ValidationError if it is blank."""
    cleaned = (mission or "").strip()
    if not cleaned:
        raise ValidationError("Please enter your company's mission.")
    return cleaned


def build_plan_prompt(mission: str) -> str:
    return PLAN_PROMPT_TEMPLATE.format(mission=mission)


def parse_plan(raw_text: str) -> BrandIdentityPlan:
    """Parse the raw structured response. Any malformed payload is a SchemaError."""
    try:
        return BrandIdentityPlan.model_validate_json(raw_text)
    except PydanticValidationError as exc:
        logger.error("Failed to parse brand identity plan: %s", exc)
        raise SchemaError(
            "Received invalid structured data from the API for the brand identity plan."
        ) from exc


async def generate_plan(service, mission: str) -> BrandIdentityPlan:
    """One structured-generation call → BrandIdentityPlan."""
    mission = validate_mission(mission)
    raw = await service.generate_structured(build_plan_prompt(mission), PLAN_SCHEMA)
    plan = parse_plan(raw)
    logger.info(
        "Plan ready: %d secondary marks, fonts %s / %s",
        len(plan.secondary_mark_prompts),
        plan.font_pairing.header_font,
        plan.font_pairing.body_font,
    )
    return plan
