"""PageWindow — 1-based page numbers to offset/limit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pieces_core.primitives.exceptions import ValidationError


@dataclass(frozen=True)
class PageWindow:
    """``offset = (page - 1) * page_size``, ``limit = page_size``."""

    page: int = 1
    page_size: int = 100

    def __post_init__(self) -> None:
        errors: dict[str, list[str]] = {}
        if isinstance(self.page, bool) or not isinstance(self.page, int) or self.page < 1:
            errors["page"] = ["must be an integer >= 1"]
        if (
            isinstance(self.page_size, bool)
            or not isinstance(self.page_size, int)
            or self.page_size < 1
        ):
            errors["page_size"] = ["must be an integer >= 1"]
        if errors:
            raise ValidationError(errors)

    @classmethod
    def parse(cls, page: Any, page_size: Any, *, max_page_size: int | None = None) -> PageWindow:
        """Build a window from loosely typed input (``"2"``, ``2.0``)."""
        window = cls(page=_as_int(page, "page"), page_size=_as_int(page_size, "page_size"))
        if max_page_size is not None and window.page_size > max_page_size:
            raise ValidationError({"page_size": [f"must be <= {max_page_size}"]})
        return window

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def next_page(self) -> int:
        return self.page + 1


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError({name: ["must be an integer >= 1"]})
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValidationError({name: ["must be an integer >= 1"]})
