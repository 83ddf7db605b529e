"""
In-memory operator evaluation strategy.

Provides the MemoryOperator protocol and a registry that maps
FilterOperator → evaluation function. A record field holding ``None``
never satisfies a comparison or pattern operator, mirroring SQL
three-valued logic; only the null checks look at missing values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .operators import FilterOperator


class MemoryOperator(ABC):
    """
    Strategy interface for in-memory operator evaluation.

    Each operator is an isolated class with a single ``evaluate`` method.
    """

    @property
    @abstractmethod
    def name(self) -> FilterOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def evaluate(
        self,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Evaluate the operator against concrete values.

        Args:
            field_value: The actual value resolved from the record.
            condition_value: The (already coerced) condition value.

        Returns:
            True if the condition is satisfied.
        """
        ...


class MemoryOperatorRegistry:
    """
    Registry of MemoryOperator instances keyed by FilterOperator.

    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(EqualOperator())

        result = registry.evaluate(FilterOperator.EQ, actual, expected)
    """

    def __init__(self) -> None:
        self._operators: dict[FilterOperator, MemoryOperator] = {}

    # -- registration --------------------------------------------------------

    def register(self, operator: MemoryOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        for op in operators:
            self.register(op)

    # -- look-up -------------------------------------------------------------

    def get(self, name: FilterOperator) -> MemoryOperator | None:
        return self._operators.get(name)

    @property
    def supported_operators(self) -> set[FilterOperator]:
        return set(self._operators.keys())

    # -- evaluation shortcut -------------------------------------------------

    def evaluate(
        self,
        name: FilterOperator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Look up the operator and evaluate.

        Raises:
            ValueError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise ValueError(f"Unsupported operator for in-memory evaluation: {name}")
        return op.evaluate(field_value, condition_value)
