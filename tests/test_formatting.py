import pytest

from v_utils.formatting import fmt_with_width, format_significant_digits


def test_documented_example():
    assert format_significant_digits(0.000123456789, 3) == "0.000123"


def test_zero():
    assert format_significant_digits(0.0, 2) == "0"
    assert format_significant_digits(-0.0, 5) == "0"


@pytest.mark.parametrize(
    "n, sig",
    [(123.456, 2), (-0.0456789, 2), (98765.4321, 2), (1.5, 3), (0.000123456789, 3)],
)
def test_result_is_n_rounded_to_its_decimals(n, sig):
    result = format_significant_digits(n, sig)
    decimals = len(result.split(".")[1]) if "." in result else 0
    assert float(result) == round(n, decimals)


def test_negative_keeps_sign():
    result = format_significant_digits(-0.0456789, 2)
    assert result.startswith("-")
    assert float(result) < 0


def test_width_left_by_default():
    out = fmt_with_width("ab", "5")
    assert len(out) == 5
    assert out.startswith("ab")
    assert out.rstrip() == "ab"


def test_width_right_and_center():
    right = fmt_with_width("ab", ">6")
    assert len(right) == 6 and right.endswith("ab") and right.lstrip() == "ab"
    center = fmt_with_width("ab", "^6")
    assert len(center) == 6 and center.strip() == "ab"
    assert center.index("a") == 2


def test_no_width_returns_unchanged():
    assert fmt_with_width("hello", "") == "hello"
    assert fmt_with_width("hello", ".3") == "hello"


def test_width_shorter_than_text():
    assert fmt_with_width("hello", "2") == "hello"


def test_fill_not_supported():
    with pytest.raises(NotImplementedError):
        fmt_with_width("ab", "*<10")


def test_space_fill_allowed():
    out = fmt_with_width("ab", " >4")
    assert len(out) == 4 and out.endswith("ab")


def test_invalid_spec():
    with pytest.raises(ValueError):
        fmt_with_width("ab", "not a spec")