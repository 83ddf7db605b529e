"""
Property declarations for action / trigger / auth inputs.

A piece declares its inputs as a ``dict[str, PropertyDefinition]``. The
host renders them and hands back raw values; :func:`validate_props`
turns those raw values into a typed ``dict`` using a pydantic model
built from the declarations.

Usage::

    props = {
        "page": Property.number("Page", required=True, default_value=1),
        "filters": Property.array("Filters", default_value=[]),
    }
    values = validate_props(props, {"page": "2"})
    assert values == {"page": 2, "filters": []}
"""

from __future__ import annotations

import dataclasses
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ConfigDict, create_model

from ..validation.pydantic import validate_model
from ..validation.result import ValidationResult


class PropertyType(str, Enum):
    """Supported property kinds."""

    SHORT_TEXT = "SHORT_TEXT"
    LONG_TEXT = "LONG_TEXT"
    SECRET_TEXT = "SECRET_TEXT"
    NUMBER = "NUMBER"
    CHECKBOX = "CHECKBOX"
    JSON = "JSON"
    OBJECT = "OBJECT"
    ARRAY = "ARRAY"
    STATIC_DROPDOWN = "STATIC_DROPDOWN"
    DROPDOWN = "DROPDOWN"
    DYNAMIC = "DYNAMIC"


@dataclass(frozen=True)
class DropdownOption:
    label: str
    value: Any


@dataclass(frozen=True)
class DropdownState:
    """What a dynamic dropdown shows after its options loader runs."""

    options: list[DropdownOption] = field(default_factory=list)
    disabled: bool = False
    placeholder: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "options": [{"label": o.label, "value": o.value} for o in self.options],
            "disabled": self.disabled,
        }
        if self.placeholder is not None:
            result["placeholder"] = self.placeholder
        return result


OptionsLoader = Callable[[Mapping[str, Any]], Awaitable[DropdownState]]
PropsLoader = Callable[[Mapping[str, Any]], Awaitable[dict[str, "PropertyDefinition"]]]


@dataclass(frozen=True)
class PropertyDefinition:
    """A single declared input."""

    type: PropertyType
    display_name: str
    required: bool = False
    description: str | None = None
    default_value: Any = None
    options: tuple[DropdownOption, ...] = ()
    options_loader: OptionsLoader | None = None
    props_loader: PropsLoader | None = None
    refreshers: tuple[str, ...] = ()
    refresh_on_search: bool = False
    properties: Mapping[str, PropertyDefinition] | None = None

    def override(self, **changes: Any) -> PropertyDefinition:
        """Return a copy with *changes* applied (``None`` values are skipped)."""
        return dataclasses.replace(
            self, **{k: v for k, v in changes.items() if v is not None}
        )

    def option_values(self) -> list[Any]:
        return [o.value for o in self.options]

    async def load_options(self, inputs: Mapping[str, Any]) -> DropdownState:
        """Resolve the options shown for a dropdown."""
        if self.options_loader is not None:
            return await self.options_loader(inputs)
        return DropdownState(options=list(self.options))


class Property:
    """Factory namespace for :class:`PropertyDefinition` instances."""

    @staticmethod
    def short_text(display_name: str, **kwargs: Any) -> PropertyDefinition:
        return PropertyDefinition(PropertyType.SHORT_TEXT, display_name, **kwargs)

    @staticmethod
    def long_text(display_name: str, **kwargs: Any) -> PropertyDefinition:
        return PropertyDefinition(PropertyType.LONG_TEXT, display_name, **kwargs)

    @staticmethod
    def secret_text(display_name: str, **kwargs: Any) -> PropertyDefinition:
        return PropertyDefinition(PropertyType.SECRET_TEXT, display_name, **kwargs)

    @staticmethod
    def number(display_name: str, **kwargs: Any) -> PropertyDefinition:
        return PropertyDefinition(PropertyType.NUMBER, display_name, **kwargs)

    @staticmethod
    def checkbox(display_name: str, **kwargs: Any) -> PropertyDefinition:
        return PropertyDefinition(PropertyType.CHECKBOX, display_name, **kwargs)

    @staticmethod
    def json(display_name: str, **kwargs: Any) -> PropertyDefinition:
        return PropertyDefinition(PropertyType.JSON, display_name, **kwargs)

    @staticmethod
    def object(display_name: str, **kwargs: Any) -> PropertyDefinition:
        return PropertyDefinition(PropertyType.OBJECT, display_name, **kwargs)

    @staticmethod
    def array(
        display_name: str,
        *,
        properties: Mapping[str, PropertyDefinition] | None = None,
        **kwargs: Any,
    ) -> PropertyDefinition:
        return PropertyDefinition(
            PropertyType.ARRAY, display_name, properties=properties, **kwargs
        )

    @staticmethod
    def static_dropdown(
        display_name: str,
        *,
        options: list[DropdownOption] | tuple[DropdownOption, ...],
        **kwargs: Any,
    ) -> PropertyDefinition:
        return PropertyDefinition(
            PropertyType.STATIC_DROPDOWN, display_name, options=tuple(options), **kwargs
        )

    @staticmethod
    def dropdown(
        display_name: str,
        *,
        options_loader: OptionsLoader,
        refreshers: tuple[str, ...] | list[str] = (),
        **kwargs: Any,
    ) -> PropertyDefinition:
        return PropertyDefinition(
            PropertyType.DROPDOWN,
            display_name,
            options_loader=options_loader,
            refreshers=tuple(refreshers),
            **kwargs,
        )

    @staticmethod
    def dynamic_properties(
        display_name: str,
        *,
        props_loader: PropsLoader,
        refreshers: tuple[str, ...] | list[str] = (),
        **kwargs: Any,
    ) -> PropertyDefinition:
        return PropertyDefinition(
            PropertyType.DYNAMIC,
            display_name,
            props_loader=props_loader,
            refreshers=tuple(refreshers),
            **kwargs,
        )


_PYTHON_TYPES: dict[PropertyType, Any] = {
    PropertyType.SHORT_TEXT: str,
    PropertyType.LONG_TEXT: str,
    PropertyType.SECRET_TEXT: str,
    PropertyType.NUMBER: int | float,
    PropertyType.CHECKBOX: bool,
    PropertyType.JSON: Any,
    PropertyType.OBJECT: dict[str, Any],
    PropertyType.ARRAY: list[Any],
    PropertyType.STATIC_DROPDOWN: Any,
    PropertyType.DROPDOWN: Any,
    PropertyType.DYNAMIC: dict[str, Any],
}


def _field_spec(prop: PropertyDefinition) -> tuple[Any, Any]:
    python_type = _PYTHON_TYPES[prop.type]
    if prop.required and prop.default_value is None:
        return python_type, ...
    return python_type | None, prop.default_value


def check_props(
    props: Mapping[str, PropertyDefinition], values: Mapping[str, Any] | None
) -> tuple[dict[str, Any], ValidationResult]:
    """Validate *values* against *props* without raising.

    Missing or ``None`` values fall back to the declared default.
    """
    raw = {
        name: value
        for name, value in (values or {}).items()
        if name in props and value is not None
    }
    model_cls = create_model(  # type: ignore[call-overload]
        "PropsValue",
        __config__=ConfigDict(extra="ignore"),
        **{name: _field_spec(prop) for name, prop in props.items()},
    )
    model, result = validate_model(model_cls, raw)
    if model is None:
        return {}, result

    validated: dict[str, Any] = model.model_dump()
    for name, prop in props.items():
        value = validated.get(name)
        if (
            prop.type == PropertyType.STATIC_DROPDOWN
            and value is not None
            and value not in prop.option_values()
        ):
            result.add_error(name, f"{value!r} is not one of the available options")
    return validated, result


def validate_props(
    props: Mapping[str, PropertyDefinition], values: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Validate *values* against *props*; raise ``ValidationError`` on failure."""
    validated, result = check_props(props, values)
    result.raise_if_invalid()
    return validated
