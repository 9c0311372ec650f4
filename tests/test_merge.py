"""Tests for the compatibility / preference merge engine."""

import itertools

import pytest

from typeguess.core.exceptions import IncompatibleTypesError
from typeguess.core.models import DatabaseTypeRequest, TypeTag
from typeguess.deciders.registry import get_registry
from typeguess.merge import can_widen, combine_requests, fallback_size, is_mergeable, merge
from typeguess.sizing import Size


@pytest.fixture
def registry():
    return get_registry()


class TestLattice:
    """Tests for which types widen into which."""

    def test_integer_widens_to_decimal(self, registry):
        """Test the numeric widening."""
        integer = registry.by_tag(TypeTag.INTEGER)
        decimal = registry.by_tag(TypeTag.DECIMAL)
        assert can_widen(integer, decimal)
        assert not can_widen(decimal, integer)
        assert is_mergeable(decimal, integer)

    @pytest.mark.parametrize(
        ("first", "second"),
        [
            (TypeTag.BOOLEAN, TypeTag.INTEGER),
            (TypeTag.DATETIME, TypeTag.DURATION),
            (TypeTag.DECIMAL, TypeTag.DATETIME),
        ],
    )
    def test_not_mergeable(self, registry, first, second):
        """Test pairs that can only meet at STRING."""
        assert not is_mergeable(registry.by_tag(first), registry.by_tag(second))


class TestMerge:
    """Tests for merging a new value's decider into the estimate."""

    def test_adopts_first(self, registry):
        """Test that an empty estimate adopts the incoming decider."""
        integer = registry.by_tag(TypeTag.INTEGER)
        assert merge(None, integer, Size(2), registry.string) == (integer, Size(2))

    @pytest.mark.parametrize("order", [0, 1])
    def test_numeric_widening(self, registry, order):
        """Test that DECIMAL wins over INTEGER in either order."""
        pair = [registry.by_tag(TypeTag.INTEGER), registry.by_tag(TypeTag.DECIMAL)]
        if order:
            pair.reverse()
        decider, size = merge(pair[0], pair[1], Size(3, 1), registry.string)
        assert decider.type_tag is TypeTag.DECIMAL
        assert size == Size(3, 1)

    def test_cross_group_falls_back(self, registry):
        """Test that booleans and integers meet at STRING."""
        decider, size = merge(
            registry.by_tag(TypeTag.BOOLEAN),
            registry.by_tag(TypeTag.INTEGER),
            Size(1, 0, 4),
            registry.string,
        )
        assert decider.type_tag is TypeTag.STRING
        assert size.string_length == 5

    def test_temporal_mix_falls_back(self, registry):
        """Test that dates and durations cannot hold each other."""
        decider, size = merge(
            registry.by_tag(TypeTag.DATETIME),
            registry.by_tag(TypeTag.DURATION),
            Size(0, 0, 10),
            registry.string,
        )
        assert decider.type_tag is TypeTag.STRING
        assert size.string_length == 27

    def test_string_is_terminal(self, registry):
        """Test that nothing narrows STRING."""
        decider, _ = merge(registry.string, registry.by_tag(TypeTag.INTEGER), Size(1), registry.string)
        assert decider is registry.string

    def test_fallback_size_covers_numbers(self, registry):
        """Test that falling back keeps room for the widest number."""
        size = fallback_size(Size(6, 3, 2), registry.by_tag(TypeTag.DECIMAL))
        assert size == Size(6, 3, 10)


class TestCombineRequests:
    """Tests for combining two finished guesses."""

    def test_numeric(self):
        """Test widening two partitions of a numeric column."""
        first = DatabaseTypeRequest(type=TypeTag.INTEGER, size=Size(5, 0, 5))
        second = DatabaseTypeRequest(type=TypeTag.DECIMAL, size=Size(1, 2, 4))
        combined = combine_requests(first, second)
        assert combined.type is TypeTag.DECIMAL
        assert combined.size == Size(5, 2, 5)
        assert DatabaseTypeRequest.max(second, first) == combined

    def test_fallback_allowed(self):
        """Test that unrelated types meet at STRING by default."""
        first = DatabaseTypeRequest(type=TypeTag.BOOLEAN, size=Size(0, 0, 5))
        second = DatabaseTypeRequest(type=TypeTag.INTEGER, size=Size(3, 0, 3), unicode=True)
        combined = combine_requests(first, second)
        assert combined.type is TypeTag.STRING
        assert combined.size.string_length == 5
        assert combined.unicode

    def test_fallback_refused(self):
        """Test IncompatibleTypesError when STRING fallback is not allowed."""
        first = DatabaseTypeRequest(type=TypeTag.BOOLEAN)
        second = DatabaseTypeRequest(type=TypeTag.DATETIME)
        with pytest.raises(IncompatibleTypesError):
            DatabaseTypeRequest.max(first, second, allow_string_fallback=False)

    def test_string_side_never_refused(self):
        """Test that an existing STRING side is not a conflict."""
        first = DatabaseTypeRequest(type=TypeTag.STRING, size=Size(0, 0, 3))
        second = DatabaseTypeRequest(type=TypeTag.INTEGER, size=Size(4, 0, 4))
        combined = combine_requests(first, second, allow_string_fallback=False)
        assert combined.type is TypeTag.STRING
        assert combined.size.string_length == 4


_SAMPLE_SIZES = {
    TypeTag.BOOLEAN: Size(0, 0, 4),
    TypeTag.INTEGER: Size(3, 0, 3),
    TypeTag.DECIMAL: Size(2, 2, 5),
    TypeTag.DATETIME: Size(0, 0, 10),
    TypeTag.DURATION: Size(0, 0, 8),
    TypeTag.STRING: Size(0, 0, 3),
}


class TestCommutativity:
    """Tests that combining two guesses does not depend on their order."""

    @pytest.mark.parametrize(("first", "second"), list(itertools.product(TypeTag, repeat=2)))
    def test_max_is_symmetric(self, registry, first, second):
        """Test that max(a, b) == max(b, a) for every pair of types."""
        a = DatabaseTypeRequest(type=first, size=_SAMPLE_SIZES[first])
        b = DatabaseTypeRequest(type=second, size=_SAMPLE_SIZES[second])
        combined = DatabaseTypeRequest.max(a, b)
        assert combined == DatabaseTypeRequest.max(b, a)
        if combined.type is TypeTag.STRING:
            for side in (a, b):
                needed = registry.by_tag(side.type).string_length_for(side.size)
                assert combined.size.string_length >= needed

    @pytest.mark.parametrize(
        ("other", "length"),
        [
            (DatabaseTypeRequest(type=TypeTag.BOOLEAN, size=Size(0, 0, 4)), 5),
            (DatabaseTypeRequest(type=TypeTag.DATETIME, size=Size(0, 0, 10)), 27),
        ],
    )
    def test_string_side_widens_for_the_other(self, other, length):
        """Test that an existing STRING side still makes room for the other type's text."""
        text = DatabaseTypeRequest(type=TypeTag.STRING, size=Size(0, 0, 3))
        assert DatabaseTypeRequest.max(text, other).size.string_length == length
        assert DatabaseTypeRequest.max(other, text).size.string_length == length

    def test_merge_into_string_sizes_incoming(self, registry):
        """Test that merging into STRING applies the incoming type's text width."""
        _, size = merge(registry.string, registry.by_tag(TypeTag.BOOLEAN), Size(0, 0, 3), registry.string)
        assert size.string_length == 5
