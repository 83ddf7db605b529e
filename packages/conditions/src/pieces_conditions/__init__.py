"""Filter conditions — validation, translation and pagination."""

from .condition import FilterCondition
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import (
    ConditionError,
    FieldNotFoundError,
    MalformedConditionError,
    OperatorNotFoundError,
    ValueTypeError,
)
from .operators import NULL_CHECK_OPERATORS, FilterOperator
from .operators_memory import build_default_registry
from .pagination import PageWindow
from .parser import ConditionParser
from .query_options import FilterPage, QueryOptions
from .schema import FieldKind, FieldRule, RecordSchema, ValueRejected
from .translator import ConditionPredicate, ConditionTranslator, resolve_field

__all__ = [
    # Core types
    "FilterOperator",
    "FilterCondition",
    "NULL_CHECK_OPERATORS",
    # Schema
    "FieldKind",
    "FieldRule",
    "RecordSchema",
    "ValueRejected",
    # Parsing / translation
    "ConditionParser",
    "ConditionPredicate",
    "ConditionTranslator",
    "resolve_field",
    # Query options
    "FilterPage",
    "PageWindow",
    "QueryOptions",
    # Evaluator / strategy
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    # Exceptions
    "ConditionError",
    "FieldNotFoundError",
    "MalformedConditionError",
    "OperatorNotFoundError",
    "ValueTypeError",
]
