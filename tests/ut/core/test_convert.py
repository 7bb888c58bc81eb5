import pytest

from bencodec.core.convert import from_python, to_python
from bencodec.core.models.value import ByteString, Dictionary, Integer, List


@pytest.mark.ut
def test_from_python_builds_value_tree():
    value = from_python({
        "announce": "http://tracker/announce",
        b"info": {"length": 12, "pieces": b"\x00\x01"},
        "list": [1, (2, 3)],
    })

    assert value == Dictionary({
        b"announce": ByteString(b"http://tracker/announce"),
        b"info": Dictionary({b"length": Integer(12), b"pieces": ByteString(b"\x00\x01")}),
        b"list": List([Integer(1), List([Integer(2), Integer(3)])]),
    })


@pytest.mark.ut
def test_from_python_passes_values_through():
    value = List([Integer(1)])

    assert from_python(value) is value
    assert from_python([value, 2]) == List([List([Integer(1)]), Integer(2)])


@pytest.mark.ut
def test_from_python_encodes_text_as_utf8():
    assert from_python("żółw") == ByteString("żółw".encode("utf-8"))


@pytest.mark.ut
def test_from_python_rejects_unsupported_types():
    for obj in [True, None, 1.5, {1: 2}, {"k": object()}, {1, 2}]:
        with pytest.raises(TypeError):
            from_python(obj)


@pytest.mark.ut
def test_from_python_rejects_out_of_range_integer():
    with pytest.raises(ValueError):
        from_python(2 ** 63)


@pytest.mark.ut
def test_from_python_rejects_colliding_keys():
    with pytest.raises(ValueError):
        from_python({"a": 1, b"a": 2})


@pytest.mark.ut
def test_to_python_unwraps_value_tree():
    value = Dictionary({
        b"z": List([Integer(-1), ByteString(b"x")]),
        b"a": Dictionary({}),
    })

    result = to_python(value)

    assert result == {b"a": {}, b"z": [-1, b"x"]}
    assert list(result) == [b"a", b"z"]
