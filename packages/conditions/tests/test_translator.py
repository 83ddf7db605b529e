"""Tests for ConditionTranslator and the in-memory predicate."""

from __future__ import annotations

import itertools

import pytest

from pieces_conditions import (
    ConditionTranslator,
    FieldNotFoundError,
    FilterOperator,
    PageWindow,
    QueryOptions,
    ValueTypeError,
    build_default_registry,
)


def test_registry_covers_every_operator() -> None:
    assert build_default_registry().supported_operators == set(FilterOperator)


def test_platform_eq_returns_only_matching_ordered_by_id(translator, records) -> None:
    options = translator.query(
        [{"field": "platform", "operator": "eq", "value": "ios"}], page=1, page_size=100
    )
    page = translator.select(records, options)
    assert [r["id"] for r in page.records] == [2, 3]
    assert page.count == 2
    assert page.next_page == 2


def test_case_insensitive_pattern_matches_substring(translator, records) -> None:
    predicate = translator.translate(
        [{"field": "name", "operator": "ilike", "value": "smith"}]
    )
    assert [r["id"] for r in predicate.filter(records)] == [3]


def test_like_is_case_sensitive(translator, records) -> None:
    predicate = translator.translate(
        [{"field": "name", "operator": "like", "value": "smith"}]
    )
    assert predicate.filter(records) == []
    predicate = translator.translate(
        [{"field": "name", "operator": "like", "value": "Smith"}]
    )
    assert [r["id"] for r in predicate.filter(records)] == [3]


def test_not_ilike_excludes_substring(translator, records) -> None:
    predicate = translator.translate(
        [{"field": "name", "operator": "notIlike", "value": "HOPPER"}]
    )
    assert sorted(r["id"] for r in predicate.filter(records)) == [1, 3]


def test_pattern_does_not_treat_regex_characters_specially(translator) -> None:
    predicate = translator.translate(
        [{"field": "name", "operator": "ilike", "value": "a.b"}]
    )
    assert predicate({"name": "xa.by"})
    assert not predicate({"name": "axb"})


def test_null_checks(translator, records) -> None:
    is_null = translator.translate([{"field": "last_ip", "operator": "isNull"}])
    not_null = translator.translate(
        [{"field": "lastIp", "operator": "isNotNull", "value": 42}]
    )
    assert [r["id"] for r in is_null.filter(records)] == [3]
    assert sorted(r["id"] for r in not_null.filter(records)) == [1, 2]


def test_comparisons_never_match_null_fields(translator, records) -> None:
    predicate = translator.translate(
        [{"field": "last_ip", "operator": "ne", "value": "10.0.0.1"}]
    )
    assert [r["id"] for r in predicate.filter(records)] == [2]


def test_date_comparison(translator, records) -> None:
    predicate = translator.translate(
        [{"field": "createdAt", "operator": "gte", "value": "2024-02-01T00:00:00Z"}]
    )
    assert sorted(r["id"] for r in predicate.filter(records)) == [2, 3]


def test_date_only_values_compare_against_aware_records(translator, records) -> None:
    before = translator.translate(
        [{"field": "created_at", "operator": "lt", "value": "2024-02-01"}]
    )
    assert [r["id"] for r in before.filter(records)] == [1]

    same_day = translator.translate(
        [{"field": "created_at", "operator": "eq", "value": "2024-01-01"}]
    )
    assert [r["id"] for r in same_day.filter(records)] == [1]


def test_conjunction_is_commutative(translator, records) -> None:
    batch = [
        {"field": "platform", "operator": "eq", "value": "ios"},
        {"field": "id", "operator": "lt", "value": 3},
        {"field": "last_ip", "operator": "isNotNull"},
    ]
    expected = None
    for permutation in itertools.permutations(batch):
        matched = [r["id"] for r in translator.translate(list(permutation)).filter(records)]
        if expected is None:
            expected = matched
        assert sorted(matched) == sorted(expected)
    assert expected == [2]


def test_empty_conditions_match_everything(translator, records) -> None:
    assert len(translator.translate([]).filter(records)) == 3


def test_unknown_field_rejects_whole_batch(translator, records) -> None:
    with pytest.raises(FieldNotFoundError):
        translator.query(
            [
                {"field": "platform", "operator": "eq", "value": "ios"},
                {"field": "doesNotExist", "operator": "eq", "value": "x"},
            ]
        )


def test_invalid_date_never_reaches_records(translator) -> None:
    class ExplodingRecords:
        def __iter__(self):
            raise AssertionError("record set must not be touched")

    with pytest.raises(ValueTypeError):
        options = translator.query(
            [{"field": "createdAt", "operator": "gt", "value": "not-a-date"}]
        )
        translator.select(ExplodingRecords(), options)


def test_pagination_window(translator, records) -> None:
    options = translator.query([], page=2, page_size=2)
    page = translator.select(records, options)
    assert [r["id"] for r in page.records] == [3]
    assert page.next_page == 3


def test_select_descending_order(translator, records) -> None:
    options = QueryOptions(order_by=("-id",))
    assert [r["id"] for r in translator.select(records, options).records] == [3, 2, 1]


def test_predicate_reads_attribute_objects(translator) -> None:
    class User:
        def __init__(self, platform: str) -> None:
            self.platform = platform

    predicate = translator.translate(
        [{"field": "platform", "operator": "eq", "value": "android"}]
    )
    assert predicate(User("android"))
    assert not predicate(User("ios"))


def test_query_options_for_page() -> None:
    options = QueryOptions.for_page([], PageWindow(page=3, page_size=50))
    assert options.offset == 100
    assert options.limit == 50
    assert options.order_by == ("id",)


def test_query_options_next_page() -> None:
    assert QueryOptions.for_page([], PageWindow(page=3, page_size=50)).next_page == 4
    assert QueryOptions(limit=10, offset=25).next_page == 4
    assert QueryOptions().next_page == 2
