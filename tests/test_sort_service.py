"""Tests for comparison, sorting and the sort toggle."""

import math
from datetime import date, datetime

import pytest

from record_table.models import Column
from record_table.services.sort_service import (
    NO_SORT,
    Ascending,
    Descending,
    NoSort,
    compare,
    sort_records,
    sort_state_from_fields,
    toggle_sort,
)
from tests.conftest import ids


class TestCompare:
    """Tests for compare()."""

    def test_numbers(self):
        assert compare(1, 2) == -1
        assert compare(2, 1) == 1
        assert compare(2, 2.0) == 0

    def test_strings(self):
        assert compare("apple", "banana") == -1
        assert compare("b", "B") == 1

    def test_booleans_as_numbers(self):
        assert compare(False, True) == -1
        assert compare(True, 1) == 0
        assert compare(True, 0.5) == 1

    def test_dates(self):
        assert compare(date(2020, 1, 1), date(2021, 1, 1)) == -1
        assert compare(datetime(2021, 1, 1, 12), datetime(2021, 1, 1, 9)) == 1

    def test_mixed_kinds_compare_as_text(self):
        # "10" < "9" lexically
        assert compare(10, "9") == -1
        assert compare("abc", 5) == 1

    def test_missing_sorts_last(self):
        assert compare(None, 1) == 1
        assert compare(1, None) == -1
        assert compare(None, None) == 0
        assert compare(math.nan, "z") == 1
        assert compare(math.nan, None) == 0

    def test_containers_compare_as_text(self):
        assert compare({"a": 1}, {"a": 1}) == 0
        assert compare([1], [2]) == -1


class TestSortRecords:
    """Tests for sort_records()."""

    def test_no_sort_is_identity(self, people):
        assert sort_records(people, NO_SORT) == people

    def test_ascending(self, people):
        assert ids(sort_records(people, Ascending("name"))) == [2, 1, 3]

    def test_descending(self, people):
        assert ids(sort_records(people, Descending("name"))) == [3, 1, 2]

    def test_stable_ties(self, people):
        assert ids(sort_records(people, Ascending("age"))) == [2, 3, 1]
        assert ids(sort_records(people, Descending("age"))) == [1, 2, 3]

    def test_missing_values_last_ascending(self):
        records = [{"a": 1}, {"a": None}, {"a": 2}]
        assert sort_records(records, Ascending("a")) == [{"a": 1}, {"a": 2}, {"a": None}]

    def test_missing_values_first_descending(self):
        """Descending is the negated ascending comparison, so missing values lead."""
        records = [{"a": 1}, {}, {"a": 2}]
        assert sort_records(records, Descending("a")) == [{}, {"a": 2}, {"a": 1}]

    def test_nested_key(self, nested_records):
        assert ids(sort_records(nested_records, Ascending("user.profile.name"))) == [1, 4, 2, 3, 5]

    def test_nested_numeric_key_with_ties(self, nested_records):
        assert ids(sort_records(nested_records, Ascending("score"))) == [5, 1, 2, 4, 3]
        assert ids(sort_records(nested_records, Descending("score"))) == [3, 2, 4, 1, 5]

    def test_mixed_types_do_not_raise(self):
        records = [{"id": 1, "v": "b"}, {"id": 2, "v": 3}, {"id": 3, "v": True}, {"id": 4, "v": "a"}]
        # True and 3 compare natively (1 < 3); strings vs numbers compare as text.
        assert ids(sort_records(records, Ascending("v"))) == [3, 2, 4, 1]

    def test_descending_of_ascending_equals_direct_descending(self, nested_records):
        for key in ("score", "user.profile.name", "tags.0"):
            twice = sort_records(sort_records(nested_records, Ascending(key)), Descending(key))
            assert twice == sort_records(nested_records, Descending(key))

    def test_input_not_mutated(self, people):
        snapshot = list(people)
        sort_records(people, Descending("age"))
        assert people == snapshot


class TestToggleSort:
    """Tests for the tri-state toggle."""

    def test_cycle_on_same_column(self):
        column = Column(key="name", sortable=True)
        state = toggle_sort(NO_SORT, column)
        assert state == Ascending("name")
        state = toggle_sort(state, column)
        assert state == Descending("name")
        state = toggle_sort(state, column)
        assert state == NO_SORT

    def test_other_column_resets_to_ascending(self):
        column = Column(key="age", sortable=True)
        assert toggle_sort(Ascending("name"), column) == Ascending("age")
        assert toggle_sort(Descending("name"), column) == Ascending("age")

    def test_unsortable_column_ignored(self):
        column = Column(key="age", sortable=False)
        assert toggle_sort(NO_SORT, column) == NO_SORT
        assert toggle_sort(Descending("name"), column) == Descending("name")

    def test_fields(self):
        assert (NO_SORT.key, NO_SORT.direction) == (None, None)
        assert (Ascending("a").key, Ascending("a").direction) == ("a", "asc")
        assert (Descending("a").key, Descending("a").direction) == ("a", "desc")


class TestSortStateFromFields:
    def test_round_trip_fields(self):
        assert isinstance(sort_state_from_fields(None, None), NoSort)
        assert sort_state_from_fields("age", "asc") == Ascending("age")
        assert sort_state_from_fields("age", "desc") == Descending("age")

    @pytest.mark.parametrize("key, direction", [("age", None), (None, "asc"), ("age", "up")])
    def test_invalid_combinations(self, key, direction):
        with pytest.raises(ValueError):
            sort_state_from_fields(key, direction)
