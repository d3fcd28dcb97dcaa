"""Tests for the string array module."""

import pytest

from argsplit.core import array as array_module
from argsplit.core.array import DEFAULT_CAPACITY, MAX_CAPACITY, StringArray
from argsplit.core.errors import AllocationError, ArrayReleasedError, CapacityError


class TestInit:
    """Tests for array creation."""

    def test_defaults(self):
        """Test a new array is empty with the default capacity."""
        array = StringArray()

        assert array.capacity == DEFAULT_CAPACITY == 5
        assert array.length == 0
        assert len(array) == 0
        assert array.last is None
        assert array.max_capacity == MAX_CAPACITY

    def test_zero_capacity(self):
        """Test a zero-capacity array is allowed."""
        array = StringArray(0)

        assert array.capacity == 0
        assert array.to_list() == []

    def test_negative_capacity(self):
        """Test negative capacities are rejected."""
        with pytest.raises(ValueError):
            StringArray(-1)

    def test_unknown_growth(self):
        """Test unknown growth policies are rejected."""
        with pytest.raises(ValueError):
            StringArray(growth="triple")

    def test_allocation_failure(self, monkeypatch):
        """Test MemoryError surfaces as AllocationError."""

        def fail(count):
            raise MemoryError

        monkeypatch.setattr(array_module, "_allocate_slots", fail)

        with pytest.raises(AllocationError) as exc_info:
            StringArray(what="CLI arguments")

        assert exc_info.value.what == "CLI arguments"
        assert exc_info.value.message == "Unable to allocate memory for CLI arguments."


class TestAppend:
    """Tests for appending items."""

    def test_append_preserves_order(self):
        """Test items are stored in insertion order."""
        array = StringArray()
        for item in ("a", "b", "c"):
            array.append(item)

        assert array.to_list() == ["a", "b", "c"]
        assert array.length == 3
        assert array.last == "c"
        assert array[0] == "a"
        assert array[-1] == "c"

    def test_append_up_to_capacity_does_not_grow(self):
        """Test filling exactly to capacity keeps the capacity."""
        array = StringArray(3)
        for item in ("a", "b", "c"):
            array.append(item)

        assert array.capacity == 3
        assert array.length == 3

    def test_doubling_growth(self):
        """Test a full array doubles its capacity."""
        array = StringArray(2)
        capacities = []
        for i in range(9):
            array.append(str(i))
            capacities.append(array.capacity)

        assert capacities == [2, 2, 4, 4, 8, 8, 8, 8, 16]
        assert array.to_list() == [str(i) for i in range(9)]

    def test_growth_from_zero(self):
        """Test a zero-capacity array grows to one slot."""
        array = StringArray(0)
        array.append("a")

        assert array.capacity == 1
        assert array.to_list() == ["a"]

    def test_growth_clamped_to_max_capacity(self):
        """Test growth stops at max_capacity."""
        array = StringArray(4, max_capacity=6)
        for i in range(6):
            array.append(str(i))

        assert array.capacity == 6

        with pytest.raises(CapacityError) as exc_info:
            array.append("overflow")

        assert exc_info.value.capacity == 6
        assert array.length == 6

    def test_fixed_capacity_boundary(self):
        """Test exactly capacity appends succeed and one more fails."""
        array = StringArray(3, growth="fixed")
        for item in ("a", "b", "c"):
            array.append(item)

        with pytest.raises(CapacityError):
            array.append("d")

        assert array.to_list() == ["a", "b", "c"]
        assert array.length <= array.capacity

    def test_growth_allocation_failure(self, monkeypatch):
        """Test a failed growth raises AllocationError."""
        array = StringArray(1)
        array.append("a")

        def fail(count):
            raise MemoryError

        monkeypatch.setattr(array_module, "_allocate_slots", fail)

        with pytest.raises(AllocationError):
            array.append("b")

        assert array.to_list() == ["a"]


class TestAccess:
    """Tests for read access."""

    def test_index_out_of_range(self):
        """Test indexing past the populated slots fails."""
        array = StringArray()
        array.append("a")

        with pytest.raises(IndexError):
            array[1]
        with pytest.raises(IndexError):
            array[-2]

    def test_equality(self):
        """Test arrays compare equal to lists and other arrays."""
        first = StringArray(1)
        second = StringArray(4)
        for array in (first, second):
            array.append("x")
            array.append("y")

        assert first == second
        assert first == ["x", "y"]
        assert first != ["y", "x"]

    def test_strings_are_shared(self):
        """Test stored items are the caller's objects."""
        token = "".join(["--", "verbose"])
        array = StringArray()
        array.append(token)

        assert array[0] is token


class TestRelease:
    """Tests for releasing storage."""

    def test_use_after_release(self):
        """Test every access after release fails."""
        array = StringArray()
        array.append("a")
        array.release()

        assert array.released
        with pytest.raises(ArrayReleasedError):
            array.append("b")
        with pytest.raises(ArrayReleasedError):
            len(array)
        with pytest.raises(ArrayReleasedError):
            list(array)
        with pytest.raises(ArrayReleasedError):
            array[0]

    def test_double_release(self):
        """Test releasing twice is harmless."""
        array = StringArray()
        array.release()
        array.release()

        assert repr(array) == "StringArray(<released>)"
