from v_utils.jsonutils import filter_nulls, strip_nulls


def _has_null_in_mapping(value):
    if isinstance(value, dict):
        return any(v is None or _has_null_in_mapping(v) for v in value.values())
    if isinstance(value, list):
        return any(_has_null_in_mapping(v) for v in value)
    return False


def test_strip_nulls_in_place():
    value = {"a": None, "b": {"c": None, "d": 1}, "e": [{"f": None}, None]}
    strip_nulls(value)
    assert value == {"b": {"d": 1}, "e": [{}, None]}


def test_array_nulls_are_kept():
    value = [None, 1, None]
    strip_nulls(value)
    assert value == [None, 1, None]


def test_filter_nulls_leaves_input_untouched():
    original = {"a": None, "b": [{"c": None, "d": 2}]}
    result = filter_nulls(original)
    assert "a" in original
    assert "a" not in result
    assert not _has_null_in_mapping(result)
    assert result["b"][0]["d"] == 2


def test_filter_nulls_scalars():
    assert filter_nulls(5) == 5
    assert filter_nulls("x") == "x"
    assert filter_nulls(None) is None


def test_filter_nulls_idempotent():
    value = {"x": {"y": None, "z": [{"w": None}]}, "v": None}
    once = filter_nulls(value)
    assert filter_nulls(once) == once