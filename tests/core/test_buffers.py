"""Tests for histoline.core.buffers - bucket array preallocation."""

from __future__ import annotations

import copy

import pytest

from histoline.core.buffers import resize_to, with_size


class TestWithSize:
    """Tests for with_size()."""

    def test_fills_every_slot(self):
        assert with_size(5, 7) == [7, 7, 7, 7, 7]

    def test_zero_size_is_empty(self):
        assert with_size(0, 7) == []

    def test_negative_size_raises(self):
        with pytest.raises(ValueError, match="size must be non-negative"):
            with_size(-1, 0)

    def test_mutable_fill_values_are_independent(self):
        rows = with_size(3, [0, 0])
        rows[0][0] = 9
        assert rows == [[9, 0], [0, 0], [0, 0]]

    def test_last_slot_reuses_fill_value(self):
        fill = [0]
        rows = with_size(3, fill)
        assert rows[-1] is fill
        assert rows[0] is not fill


class TestResizeTo:
    """Tests for resize_to()."""

    def test_noop_when_already_long_enough(self):
        buffer = [1, 2, 3]
        resize_to(buffer, 3, 0)
        assert buffer == [1, 2, 3]
        resize_to(buffer, 1, 0)
        assert buffer == [1, 2, 3]

    def test_appends_fill_values_in_place(self):
        buffer = [1, 2, 3]
        resize_to(buffer, 6, 0)
        assert buffer == [1, 2, 3, 0, 0, 0]

    def test_idempotent(self):
        buffer = [1, 2, 3]
        resize_to(buffer, 6, 0)
        resize_to(buffer, 6, 5)
        assert buffer == [1, 2, 3, 0, 0, 0]

    def test_negative_min_len_raises(self):
        with pytest.raises(ValueError, match="min_len must be non-negative"):
            resize_to([], -2, 0)

    def test_failed_copy_keeps_only_initialized_slots(self):
        class Fragile:
            copies = 0

            def __deepcopy__(self, memo):
                Fragile.copies += 1
                if Fragile.copies == 3:
                    raise MemoryError("out of memory")
                return Fragile()

        buffer = ["a"]
        with pytest.raises(MemoryError):
            resize_to(buffer, 10, Fragile())

        assert len(buffer) == 3
        assert buffer[0] == "a"
        assert all(isinstance(slot, Fragile) for slot in buffer[1:])

    def test_single_new_slot_is_not_copied(self, monkeypatch: pytest.MonkeyPatch):
        def fail_deepcopy(value, memo=None):
            raise AssertionError("deepcopy should not be called")

        monkeypatch.setattr(copy, "deepcopy", fail_deepcopy)
        buffer = [1]
        resize_to(buffer, 2, 0)
        assert buffer == [1, 0]
