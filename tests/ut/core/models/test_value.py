import pytest

from bencodec.core.models.config import DecoderConfig, TrailingData
from bencodec.core.models.value import (
    INTEGER_MAX,
    INTEGER_MIN,
    ByteString,
    Dictionary,
    Integer,
    List,
    ValueKind,
)


@pytest.mark.ut
def test_integer_range_is_enforced_at_construction():
    assert Integer(INTEGER_MAX).value == 2 ** 63 - 1
    assert Integer(INTEGER_MIN).value == -2 ** 63

    with pytest.raises(ValueError):
        Integer(INTEGER_MAX + 1)

    with pytest.raises(ValueError):
        Integer(INTEGER_MIN - 1)


@pytest.mark.ut
def test_integer_refuses_bool_and_non_int():
    with pytest.raises(TypeError):
        Integer(True)

    with pytest.raises(TypeError):
        Integer("5")


@pytest.mark.ut
def test_byte_string_freezes_mutable_buffers():
    data = bytearray(b"abc")
    value = ByteString(data)
    data[0] = ord("z")

    assert value.value == b"abc"
    assert isinstance(value.value, bytes)
    assert len(value) == 3


@pytest.mark.ut
def test_byte_string_refuses_text():
    with pytest.raises(TypeError):
        ByteString("abc")


@pytest.mark.ut
def test_list_is_immutable_sequence():
    items = [Integer(1), ByteString(b"x")]
    value = List(items)
    items.append(Integer(2))

    assert value.items == (Integer(1), ByteString(b"x"))
    assert len(value) == 2
    assert value[1] == ByteString(b"x")
    assert list(value) == [Integer(1), ByteString(b"x")]


@pytest.mark.ut
def test_list_refuses_plain_python_items():
    with pytest.raises(TypeError):
        List([1, 2])


@pytest.mark.ut
def test_dictionary_iterates_in_canonical_order():
    value = Dictionary({b"zz": Integer(1), b"a": Integer(2), b"m": Integer(3)})

    assert list(value) == [b"a", b"m", b"zz"]
    assert value.sorted_items() == [(b"a", Integer(2)), (b"m", Integer(3)), (b"zz", Integer(1))]
    assert value[b"m"] == Integer(3)
    assert value.get(b"missing") is None
    assert b"a" in value
    assert len(value) == 3


@pytest.mark.ut
def test_dictionary_equality_ignores_insertion_order():
    left = Dictionary({b"a": Integer(1), b"b": Integer(2)})
    right = Dictionary({b"b": Integer(2), b"a": Integer(1)})

    assert left == right


@pytest.mark.ut
def test_dictionary_refuses_text_keys():
    with pytest.raises(TypeError):
        Dictionary({"a": Integer(1)})


@pytest.mark.ut
def test_dictionary_accepts_pairs():
    value = Dictionary([(b"b", Integer(2)), (bytearray(b"a"), Integer(1))])

    assert value == Dictionary({b"a": Integer(1), b"b": Integer(2)})


@pytest.mark.ut
def test_values_of_different_kinds_are_never_equal():
    assert Integer(0) != ByteString(b"0")
    assert List([]) != Dictionary({})
    assert ByteString(b"") != List([])
    assert List([Integer(1)]) != List([Integer(1), Integer(1)])


@pytest.mark.ut
def test_kind_tags():
    assert Integer(1).kind is ValueKind.integer
    assert ByteString(b"").kind is ValueKind.bytes
    assert List().kind is ValueKind.list
    assert Dictionary().kind is ValueKind.dict


@pytest.mark.ut
def test_scalars_are_hashable():
    assert len({Integer(1), Integer(1), ByteString(b"1")}) == 2


@pytest.mark.ut
def test_decoder_config_validation():
    assert DecoderConfig().trailing is TrailingData.reject
    assert DecoderConfig(trailing="ignore").trailing is TrailingData.ignore

    with pytest.raises(ValueError):
        DecoderConfig(max_depth=-1)

    with pytest.raises(ValueError):
        DecoderConfig(trailing="skip")


@pytest.mark.ut
def test_containers_are_hashable():
    first = Dictionary({b"b": Integer(2), b"a": List([Integer(1)])})
    second = Dictionary([(b"a", List([Integer(1)])), (b"b", Integer(2))])

    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert hash(List([Dictionary({b"a": Integer(1)})])) == hash(List([Dictionary({b"a": Integer(1)})]))
