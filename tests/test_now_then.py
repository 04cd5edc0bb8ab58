import pytest

from v_utils.now_then import NowThen, format_number_compactly


def test_display_thousands():
    assert str(NowThen(69420.0, 67000.0)) == "69+2.42K"


def test_display_small_values():
    assert str(NowThen(0.517563, 0.498)) == "0.52+0.0196"
    assert str(NowThen(0.527563, 0.498)) == "0.53+0.0296"


def test_lower_exp():
    assert f"{NowThen(69420.0, 67000.0):e}" == "6.942e4+3.6%"


def test_width_is_honoured():
    assert f"{NowThen(69420.0, 67000.0):>10}" == "  69+2.42K"


def test_compact_thousands():
    assert format_number_compactly(69420.0, 0.03) == (69.0, "K")


def test_compact_millions():
    assert format_number_compactly(1234567.0, 0.005) == (1.23, "M")


def test_compact_rounding_rolls_over_suffix():
    assert format_number_compactly(999999.0, 0.03) == (1.0, "M")


def test_compact_negative_precision():
    with pytest.raises(ValueError):
        format_number_compactly(1.0, -0.1)


def test_compact_too_large():
    with pytest.raises(ValueError):
        format_number_compactly(1e18, 0.03)