import pytest
from pydantic import ValidationError as PydanticValidationError

from brandbible.models import HEX_RE, BrandBible, BrandIdentityPlan, ChatMessage, ColorInfo, FontPairing


def test_hex_is_normalised():
    assert ColorInfo(hex="2f5d3a", name="Forest", usage="Primary").hex == "#2F5D3A"
    assert ColorInfo(hex=" #abcdef ", name="Sky", usage="Accent").hex == "#ABCDEF"


@pytest.mark.parametrize("bad", ["#FFF", "#GGGGGG", "blue", "#1234567"])
def test_bad_hex_rejected(bad):
    with pytest.raises(PydanticValidationError):
        ColorInfo(hex=bad, name="x", usage="y")


def test_plan_parses_wire_names(coffee_plan):
    plan = BrandIdentityPlan.model_validate(coffee_plan)
    assert plan.logo_prompt.startswith("A minimalist")
    assert len(plan.secondary_mark_prompts) == 2
    assert len(plan.color_palette) == 5
    assert all(HEX_RE.match(c.hex) for c in plan.color_palette)
    assert plan.font_pairing.header_font == "Playfair Display"


def test_plan_is_immutable(coffee_plan):
    plan = BrandIdentityPlan.model_validate(coffee_plan)
    with pytest.raises(PydanticValidationError):
        plan.logo_prompt = "something else"


def test_plan_requires_two_secondary_marks(coffee_plan):
    coffee_plan["secondaryMarkPrompts"].append("a third mark")
    with pytest.raises(PydanticValidationError):
        BrandIdentityPlan.model_validate(coffee_plan)


def test_plan_requires_five_colours(coffee_plan):
    coffee_plan["colorPalette"].pop()
    with pytest.raises(PydanticValidationError):
        BrandIdentityPlan.model_validate(coffee_plan)


def test_brand_bible_from_plan(coffee_plan):
    plan = BrandIdentityPlan.model_validate(coffee_plan)
    bible = BrandBible.from_plan(plan, "data:image/png;base64,AA==", ["u1", "u2"], "Sell coffee.")
    assert bible.secondary_mark_urls == ("u1", "u2")
    assert bible.color_palette == plan.color_palette
    dumped = bible.model_dump(by_alias=True)
    assert dumped["primaryLogoUrl"] == "data:image/png;base64,AA=="
    assert dumped["mission"] == "Sell coffee."


def test_brand_bible_rejects_mismatched_marks(coffee_plan):
    plan = BrandIdentityPlan.model_validate(coffee_plan)
    with pytest.raises(PydanticValidationError):
        BrandBible.from_plan(plan, "logo", ["only one"], "Sell coffee.")


def test_google_fonts_url():
    fonts = FontPairing(header_font="Playfair Display", body_font="Inter")
    assert fonts.google_fonts_url() == (
        "https://fonts.googleapis.com/css2"
        "?family=Playfair+Display:wght@700&family=Inter:wght@400&display=swap"
    )


def test_chat_message_content_shape():
    assert ChatMessage.user("hi").to_content() == {"role": "user", "parts": [{"text": "hi"}]}
    assert ChatMessage.reply("hello").role == "model"
