from enum import Enum


class FilterOperator(str, Enum):
    """Closed set of operators a filter condition may use."""

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    # Substring pattern match
    LIKE = "like"
    ILIKE = "ilike"
    NOT_ILIKE = "notIlike"

    # Null checks
    IS_NULL = "isNull"
    IS_NOT_NULL = "isNotNull"

    @property
    def checks_null(self) -> bool:
        return self in NULL_CHECK_OPERATORS


NULL_CHECK_OPERATORS: frozenset[FilterOperator] = frozenset(
    {FilterOperator.IS_NULL, FilterOperator.IS_NOT_NULL}
)