"""Tests for iterm2img.dimension."""

import pytest

from iterm2img.dimension import Auto, Cells, Percent, Pixels, render, to_dimension
from iterm2img.errors import ConfigurationError, InvalidDimensionError


class TestRender:
    def test_auto_is_omitted(self):
        assert render(Auto()) is None

    def test_cells(self):
        assert render(Cells(5)) == "5"

    def test_pixels(self):
        assert render(Pixels(100)) == "100px"

    def test_percent(self):
        assert render(Percent(50)) == "50%"

    def test_not_a_dimension(self):
        with pytest.raises(InvalidDimensionError):
            render(5)


class TestConstruction:
    @pytest.mark.parametrize("cls", [Cells, Pixels, Percent])
    def test_negative(self, cls):
        with pytest.raises(InvalidDimensionError):
            cls(-1)

    @pytest.mark.parametrize("cls", [Cells, Pixels, Percent])
    def test_bool_is_not_a_number(self, cls):
        with pytest.raises(InvalidDimensionError):
            cls(True)

    def test_zero_allowed(self):
        assert Pixels(0).value == 0

    def test_frozen_and_comparable(self):
        assert Cells(3) == Cells(3)
        assert Cells(3) != Pixels(3)
        with pytest.raises(AttributeError):
            Cells(3).value = 4

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Percent(-10)
        assert issubclass(InvalidDimensionError, ConfigurationError)


class TestToDimension:
    def test_int_means_cells(self):
        assert to_dimension(7) == Cells(7)

    def test_dimension_passthrough(self):
        dim = Percent(25)
        assert to_dimension(dim) is dim

    @pytest.mark.parametrize("bad", ["10", 1.0, None, False])
    def test_rejects_other_types(self, bad):
        with pytest.raises(InvalidDimensionError):
            to_dimension(bad)
