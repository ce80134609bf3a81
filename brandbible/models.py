"""
Data model for brand plans, brand bibles and chat turns.

Field names are snake_case in Python and camelCase on the wire, matching the
JSON the structured-generation call returns (``logoPrompt``,
``secondaryMarkPrompts``, ``colorPalette``, ``fontPairing``).
"""

from __future__ import annotations

import re
from typing import Any, Dict, Literal, Tuple
from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")

SECONDARY_MARK_COUNT = 2
PALETTE_SIZE = 5


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ── Brand plan ────────────────────────────────────────────────────────────────

class ColorInfo(_WireModel):
    hex: str = Field(description="Hex code, e.g. '#1A2B3C'")
    name: str = Field(description="Common name for the colour, e.g. 'Midnight Slate'")
    usage: str = Field(description="Suggested usage, e.g. 'Primary CTA', 'Background'")

    @field_validator("hex")
    @classmethod
    def _normalise_hex(cls, value: str) -> str:
        value = value.strip().upper()
        if not value.startswith("#"):
            value = "#" + value
        if not HEX_RE.match(value):
            raise ValueError(f"expected a #RRGGBB colour, got {value!r}")
        return value


class FontPairing(_WireModel):
    header_font: str = Field(alias="headerFont", description="Google Font for headers")
    body_font: str = Field(alias="bodyFont", description="Google Font for body text")

    def google_fonts_url(self) -> str:
        """CSS URL loading the header font at 700 and the body font at 400."""
        header = quote_plus(self.header_font.strip())
        body = quote_plus(self.body_font.strip())
        return (
            "https://fonts.googleapis.com/css2"
            f"?family={header}:wght@700&family={body}:wght@400&display=swap"
        )


class BrandIdentityPlan(_WireModel):
    """Result of the structured-generation call. Immutable once parsed."""

    logo_prompt: str = Field(alias="logoPrompt", min_length=1)
    secondary_mark_prompts: Tuple[str, ...] = Field(
        alias="secondaryMarkPrompts",
        min_length=SECONDARY_MARK_COUNT,
        max_length=SECONDARY_MARK_COUNT,
    )
    color_palette: Tuple[ColorInfo, ...] = Field(
        alias="colorPalette",
        min_length=PALETTE_SIZE,
        max_length=PALETTE_SIZE,
    )
    font_pairing: FontPairing = Field(alias="fontPairing")

    @field_validator("secondary_mark_prompts")
    @classmethod
    def _no_blank_prompts(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not p.strip() for p in value):
            raise ValueError("secondary mark prompts must not be blank")
        return value


# ── Brand bible ───────────────────────────────────────────────────────────────

class BrandBible(BrandIdentityPlan):
    """A plan plus its resolved images (data URIs) and the originating mission."""

    primary_logo_url: str = Field(alias="primaryLogoUrl")
    secondary_mark_urls: Tuple[str, ...] = Field(alias="secondaryMarkUrls")
    mission: str

    @model_validator(mode="after")
    def _marks_match_prompts(self) -> "BrandBible":
        if len(self.secondary_mark_urls) != len(self.secondary_mark_prompts):
            raise ValueError(
                f"{len(self.secondary_mark_urls)} secondary mark images for "
                f"{len(self.secondary_mark_prompts)} prompts"
            )
        return self

    @classmethod
    def from_plan(
        cls,
        plan: BrandIdentityPlan,
        primary_logo_url: str,
        secondary_mark_urls: Tuple[str, ...],
        mission: str,
    ) -> "BrandBible":
        return cls(
            **dict(plan),
            primary_logo_url=primary_logo_url,
            secondary_mark_urls=tuple(secondary_mark_urls),
            mission=mission,
        )


# ── Chat ──────────────────────────────────────────────────────────────────────

class ChatMessage(_WireModel):
    role: Literal["user", "model"]
    text: str

    @classmethod
    def user(cls, text: str) -> "ChatMessage":
        return cls(role="user", text=text)

    @classmethod
    def reply(cls, text: str) -> "ChatMessage":
        return cls(role="model", text=text)

    def to_content(self) -> Dict[str, Any]:
        """SDK content shape: {"role": ..., "parts": [{"text": ...}]}."""
        return {"role": self.role, "parts": [{"text": self.text}]}
