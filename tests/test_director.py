import json

import pytest

from brandbible.director import PLAN_SCHEMA, build_plan_prompt, generate_plan, parse_plan, validate_mission
from brandbible.errors import SchemaError, ValidationError


def test_prompt_embeds_mission():
    prompt = build_plan_prompt("Sell eco-friendly coffee.")
    assert 'Company Mission: "Sell eco-friendly coffee."' in prompt
    assert "5-color palette" in prompt


def test_schema_requires_every_section():
    assert set(PLAN_SCHEMA.required) == {"logoPrompt", "secondaryMarkPrompts", "colorPalette", "fontPairing"}
    assert PLAN_SCHEMA.properties["secondaryMarkPrompts"].max_items == 2
    assert PLAN_SCHEMA.properties["colorPalette"].min_items == 5


@pytest.mark.parametrize("mission", ["", "   ", "\n\t"])
def test_validate_mission_rejects_blank(mission):
    with pytest.raises(ValidationError):
        validate_mission(mission)


def test_validate_mission_trims():
    assert validate_mission("  Sell coffee.  ") == "Sell coffee."


@pytest.mark.parametrize("raw", ["", "not json", '{"logoPrompt": "x"', "[]"])
def test_parse_plan_rejects_malformed(raw):
    with pytest.raises(SchemaError, match="invalid structured data"):
        parse_plan(raw)


def test_parse_plan_rejects_wrong_cardinality(coffee_plan):
    coffee_plan["colorPalette"] = coffee_plan["colorPalette"][:3]
    with pytest.raises(SchemaError):
        parse_plan(json.dumps(coffee_plan))


@pytest.mark.asyncio
async def test_generate_plan_sends_schema(service):
    plan = await generate_plan(service, "Sell eco-friendly coffee.")
    assert len(service.structured_calls) == 1
    prompt, schema = service.structured_calls[0]
    assert "Sell eco-friendly coffee." in prompt
    assert schema is PLAN_SCHEMA
    assert len(plan.secondary_mark_prompts) == 2
