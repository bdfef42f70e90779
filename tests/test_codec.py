import pytest

from core.codec import Decoded, Raw, decode, serialize


@pytest.mark.parametrize("value", [
    0,
    -12.5,
    "words",
    "",
    True,
    None,
    [],
    {"2024-01-05": [{"amount": 500, "time": "09:30 AM"}]},
    {"count": 3, "lastDate": None},
    ["Running", "Йога", {"nested": [1, [2, {"deep": False}]]}],
])
def test_serialize_round_trips(value):
    result = decode(serialize(value))
    assert isinstance(result, Decoded)
    assert result.value == value


def test_serialize_keeps_unicode_readable():
    assert serialize("Йога") == '"Йога"'


def test_decode_falls_back_to_raw_text():
    result = decode("not json {")
    assert isinstance(result, Raw)
    assert result.value == "not json {"
    assert result.error


def test_decode_non_string_is_raw():
    result = decode(None)
    assert isinstance(result, Raw)
    assert result.value is None


def test_serialize_rejects_unserializable_values():
    with pytest.raises(TypeError):
        serialize({"when": object()})
    with pytest.raises(ValueError):
        serialize(float("nan"))
