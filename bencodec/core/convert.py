from collections.abc import Mapping
from typing import Any, assert_never

from bencodec.core.models.value import (
    VALUE_TYPES,
    ByteString,
    Dictionary,
    Integer,
    List,
    Value,
)


def from_python(obj: Any) -> Value:
    """
    Build a value tree from plain Python objects.

    - int -> Integer (bool is refused)
    - bytes, bytearray, memoryview -> ByteString
    - str -> ByteString holding its UTF-8 encoding
    - list, tuple -> List
    - Mapping with bytes or str keys -> Dictionary

    Values already in the model are returned unchanged.
    Raises TypeError for unsupported objects and ValueError for integers
    outside the 64-bit range or keys that collide once encoded.
    """
    if isinstance(obj, VALUE_TYPES):
        return obj

    if isinstance(obj, bool):
        raise TypeError("Cannot convert bool to a bencode value")

    if isinstance(obj, int):
        return Integer(obj)

    if isinstance(obj, (bytes, bytearray, memoryview)):
        return ByteString(bytes(obj))

    if isinstance(obj, str):
        return ByteString(obj.encode("utf-8"))

    if isinstance(obj, (list, tuple)):
        return List([from_python(item) for item in obj])

    if isinstance(obj, Mapping):
        entries: dict[bytes, Value] = {}
        for key, item in obj.items():
            raw = _key_bytes(key)
            if raw in entries:
                raise ValueError(f"Duplicate dictionary key after encoding: {raw!r}")
            entries[raw] = from_python(item)
        return Dictionary(entries)

    raise TypeError(f"Cannot convert {type(obj).__name__} to a bencode value")


def to_python(value: Value) -> Any:
    """Unwrap a value tree into int, bytes, list and dict[bytes, ...]."""
    match value:
        case Integer(number):
            return number
        case ByteString(data):
            return data
        case List(items):
            return [to_python(item) for item in items]
        case Dictionary():
            return {key: to_python(item) for key, item in value.sorted_items()}
        case _:
            assert_never(value)


def _key_bytes(key: Any) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"Dictionary keys must be bytes or str, got {type(key).__name__}")
