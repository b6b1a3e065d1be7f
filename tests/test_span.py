"""
Tests for IndexedSpan.

These tests verify:
- Construction rejects non-list values and out-of-range counts
- at() returns None outside physical bounds (no wraparound)
- swap() is a permutation and raises IndexError out of bounds
- count assignment ignores stray values
- Iteration yields only the first `count` values and is restartable
"""

import pytest

from tablepager.models.failure import ConstructionFailureKind, InvalidSpanError
from tablepager.models.span import IndexedSpan, in_range


class TestConstruction:
    def test_count_defaults_to_length(self) -> None:
        span = IndexedSpan([1, 2, 3])

        assert span.count == 3
        assert len(span) == 3

    def test_explicit_count(self) -> None:
        span = IndexedSpan([1, 2, 3], count=1)

        assert span.count == 1

    def test_zero_count_is_allowed(self) -> None:
        span = IndexedSpan([1, 2, 3], count=0)

        assert span.count == 0
        assert list(span) == []

    @pytest.mark.parametrize("values", [(1, 2), "abc", {1: 2}, None])
    def test_non_list_values_rejected(self, values: object) -> None:
        with pytest.raises(InvalidSpanError) as exc_info:
            IndexedSpan(values)  # type: ignore[arg-type]

        assert exc_info.value.kind == ConstructionFailureKind.INVALID_SPAN

    @pytest.mark.parametrize("count", [-1, 4, 2.5, True])
    def test_out_of_range_count_rejected(self, count: object) -> None:
        with pytest.raises(InvalidSpanError) as exc_info:
            IndexedSpan([1, 2, 3], count=count)  # type: ignore[arg-type]

        assert exc_info.value.kind == ConstructionFailureKind.INVALID_COUNT

    def test_construction_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            IndexedSpan("nope")  # type: ignore[arg-type]


class TestAt:
    def test_in_bounds(self) -> None:
        span = IndexedSpan(["a", "b"])

        assert span.at(0) == "a"
        assert span.at(1) == "b"

    @pytest.mark.parametrize("index", [-1, 2, 100, None, "0"])
    def test_out_of_bounds_is_absent(self, index: object) -> None:
        span = IndexedSpan(["a", "b"])

        assert span.at(index) is None  # type: ignore[arg-type]

    def test_reads_past_count_are_allowed(self) -> None:
        span = IndexedSpan(["a", "b", "c"], count=1)

        assert span.at(2) == "c"


class TestSwap:
    def test_exchanges_values(self) -> None:
        span = IndexedSpan(["a", "b", "c"])

        span.swap(0, 2)

        assert span.values == ["c", "b", "a"]

    def test_same_index_is_noop(self) -> None:
        span = IndexedSpan(["a", "b"])

        span.swap(1, 1)

        assert span.values == ["a", "b"]

    @pytest.mark.parametrize(("first", "second"), [(0, 3), (-1, 0), (3, 3)])
    def test_out_of_bounds_raises_and_leaves_span(self, first: int, second: int) -> None:
        span = IndexedSpan(["a", "b", "c"])

        with pytest.raises(IndexError):
            span.swap(first, second)

        assert span.values == ["a", "b", "c"]


class TestCount:
    def test_assignment_within_bounds(self) -> None:
        span = IndexedSpan([1, 2, 3])

        span.count = 0
        assert span.count == 0

        span.count = 3
        assert span.count == 3

    @pytest.mark.parametrize("bad", [None, -1, 4, 1.0, "2", True, float("nan")])
    def test_stray_assignment_ignored(self, bad: object) -> None:
        span = IndexedSpan([1, 2, 3], count=2)

        span.count = bad  # type: ignore[assignment]

        assert span.count == 2

    def test_push_appends_and_counts(self) -> None:
        span = IndexedSpan([1, 2], count=1)

        span.push(3)

        assert span.values == [1, 2, 3]
        assert span.count == 2


class TestIteration:
    def test_yields_only_survivors(self) -> None:
        span = IndexedSpan([1, 2, 3, 4], count=2)

        assert list(span) == [1, 2]

    def test_restartable(self) -> None:
        span = IndexedSpan([1, 2, 3])

        assert list(span) == list(span) == [1, 2, 3]

    def test_lazy(self) -> None:
        span = IndexedSpan([1, 2, 3])
        survivors = span.survivors()

        span.count = 1

        assert list(survivors) == [1]


class TestInRange:
    def test_bounds(self) -> None:
        assert in_range(0, 0, 1)
        assert not in_range(1, 0, 1)
        assert not in_range(-1, 0, 1)

    def test_rejects_non_integers(self) -> None:
        assert not in_range(True, 0, 2)
        assert not in_range(0.0, 0, 2)
        assert not in_range(None, 0, 2)
