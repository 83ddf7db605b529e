import pytest

from pieces_core import (
    DropdownOption,
    DropdownState,
    Property,
    PropertyType,
    ValidationError,
    check_props,
    validate_props,
)

PROPS = {
    "page": Property.number("Page", required=True, default_value=1),
    "name": Property.short_text("Name", required=True),
    "filters": Property.array("Filters", default_value=[]),
    "failsafe": Property.checkbox("No Error on Failure"),
    "method": Property.static_dropdown(
        "Method",
        options=[DropdownOption("GET", "GET"), DropdownOption("POST", "POST")],
    ),
}


def test_defaults_applied_and_types_coerced() -> None:
    values = validate_props(PROPS, {"page": "2", "name": "hook"})

    assert values == {
        "page": 2,
        "name": "hook",
        "filters": [],
        "failsafe": None,
        "method": None,
    }


def test_none_falls_back_to_default() -> None:
    values = validate_props(PROPS, {"page": None, "name": "hook"})
    assert values["page"] == 1


def test_unknown_values_are_dropped() -> None:
    values = validate_props(PROPS, {"name": "hook", "extra": 1})
    assert "extra" not in values


def test_missing_required_reported() -> None:
    _, result = check_props(PROPS, {})
    assert "name" in result.errors


def test_wrong_type_raises_validation_error() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_props(PROPS, {"name": "hook", "filters": "not a list"})
    assert "filters" in exc_info.value.errors


def test_static_dropdown_value_must_be_an_option() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_props(PROPS, {"name": "hook", "method": "TRACE"})
    assert list(exc_info.value.errors) == ["method"]


def test_override_skips_none() -> None:
    prop = Property.short_text("URL", required=True)
    changed = prop.override(display_name="Endpoint", description=None)

    assert changed.display_name == "Endpoint"
    assert changed.required is True
    assert prop.display_name == "URL"


def test_factories_set_types() -> None:
    assert Property.long_text("t").type == PropertyType.LONG_TEXT
    assert Property.secret_text("t").type == PropertyType.SECRET_TEXT
    assert Property.json("t").type == PropertyType.JSON
    assert Property.object("t").type == PropertyType.OBJECT
    nested = Property.array("t", properties={"v": Property.short_text("v")})
    assert nested.properties is not None and "v" in nested.properties


@pytest.mark.asyncio
async def test_static_dropdown_loads_declared_options() -> None:
    state = await PROPS["method"].load_options({})
    assert [o.value for o in state.options] == ["GET", "POST"]


@pytest.mark.asyncio
async def test_dynamic_dropdown_uses_loader() -> None:
    async def loader(inputs):
        if not inputs.get("auth"):
            return DropdownState(disabled=True, placeholder="Connect first")
        return DropdownState(options=[DropdownOption("One", 1)])

    prop = Property.dropdown("Message", options_loader=loader, refreshers=["auth"])

    assert (await prop.load_options({})).to_dict() == {
        "options": [],
        "disabled": True,
        "placeholder": "Connect first",
    }
    assert (await prop.load_options({"auth": "x"})).to_dict() == {
        "options": [{"label": "One", "value": 1}],
        "disabled": False,
    }
    assert prop.refreshers == ("auth",)
