"""Tests for geometry value types."""

import pytest
from term_widgets import AUTO, Rect, Size, SizeUnit


class TestSize:
    """Tests for the Size value type."""

    def test_auto(self):
        """Test that auto() and AUTO are the same value."""
        assert Size.auto() == AUTO
        assert AUTO.unit is SizeUnit.AUTO
        assert AUTO.is_auto

    def test_chars(self):
        size = Size.chars(12)
        assert size.unit is SizeUnit.CHARS
        assert size.value == 12
        assert not size.is_auto

    def test_percents(self):
        size = Size.percents(50)
        assert size.unit is SizeUnit.PERCENTS
        assert size.value == 50

    def test_equality_by_value(self):
        """Test that sizes compare and hash by value."""
        assert Size.chars(3) == Size.chars(3)
        assert Size.chars(3) != Size.percents(3)
        assert len({Size.chars(3), Size.chars(3), AUTO}) == 2

    def test_immutable(self):
        """Test that a size cannot be changed after creation."""
        size = Size.chars(3)
        with pytest.raises(AttributeError):
            size.value = 4

    @pytest.mark.parametrize('value', [-1, 101, 250])
    def test_percents_out_of_range_rejected(self, value):
        with pytest.raises(ValueError):
            Size.percents(value)

    def test_percents_bounds_accepted(self):
        assert Size.percents(0).value == 0
        assert Size.percents(100).value == 100

    def test_negative_chars_rejected(self):
        with pytest.raises(ValueError):
            Size.chars(-1)

    def test_allocation(self):
        """Test cells requested against a resolved dimension."""
        assert AUTO.allocation(80) is None
        assert Size.chars(10).allocation(80) == 10
        assert Size.chars(100).allocation(80) == 80  # Clamped
        assert Size.percents(33).allocation(80) == 26  # floor(26.4)
        assert Size.percents(100).allocation(80) == 80
        assert Size.chars(5).allocation(-3) == 0

    def test_str(self):
        assert str(AUTO) == 'auto'
        assert str(Size.chars(4)) == '4ch'
        assert str(Size.percents(25)) == '25%'


class TestRect:
    """Tests for the Rect value type."""

    def test_defaults(self):
        rect = Rect()
        assert (rect.x, rect.y, rect.width, rect.height) == (0, 0, 0, 0)
        assert rect.is_empty

    def test_intersects(self):
        rect = Rect(0, 0, 10, 5)
        assert rect.intersects(Rect(9, 4, 3, 3))
        assert rect.intersects(Rect(2, 1, 2, 2))
        assert not rect.intersects(Rect(10, 0, 5, 5))  # Touching edges only
        assert not rect.intersects(Rect(0, 5, 10, 1))
        assert not rect.intersects(Rect(3, 3, 0, 4))  # Empty

    def test_area(self):
        assert Rect(1, 2, 10, 3).area == 30
        assert not Rect(1, 2, 10, 3).is_empty

    def test_inset(self):
        assert Rect(0, 0, 20, 10).inset(2, 1) == Rect(2, 1, 16, 8)

    def test_inset_floors_at_zero(self):
        rect = Rect(5, 5, 3, 1).inset(2, 2)
        assert rect.width == 0
        assert rect.height == 0
        assert rect.is_empty
