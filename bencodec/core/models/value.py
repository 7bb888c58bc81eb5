from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, TypeAlias

INTEGER_MIN: int = -(1 << 63)
INTEGER_MAX: int = (1 << 63) - 1


class ValueKind(StrEnum):
    integer = "integer"
    bytes = "bytes"
    list = "list"
    dict = "dict"


@dataclass(frozen=True)
class Integer:
    """
    A signed 64-bit integer.

    Building an Integer outside [INTEGER_MIN, INTEGER_MAX] is a caller
    error and fails immediately, so the encoder never sees such a value.
    """
    kind: ClassVar[ValueKind] = ValueKind.integer

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer expects an int, got {type(self.value).__name__}")

        if not INTEGER_MIN <= self.value <= INTEGER_MAX:
            raise ValueError(f"Integer {self.value} does not fit in 64 signed bits")


@dataclass(frozen=True)
class ByteString:
    """An arbitrary sequence of bytes. Not required to be text."""
    kind: ClassVar[ValueKind] = ValueKind.bytes

    value: bytes = b""

    def __post_init__(self) -> None:
        if isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, "value", bytes(self.value))
        elif not isinstance(self.value, bytes):
            raise TypeError(f"ByteString expects bytes, got {type(self.value).__name__}")

    def __len__(self) -> int:
        return len(self.value)


@dataclass(frozen=True)
class List:
    """An ordered sequence of values."""
    kind: ClassVar[ValueKind] = ValueKind.list

    items: tuple["Value", ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, VALUE_TYPES):
                raise TypeError(f"List items must be values, got {type(item).__name__}")
        object.__setattr__(self, "items", items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]


@dataclass(frozen=True)
class Dictionary:
    """
    A mapping from byte string keys to values.

    Entries are stored in canonical order (keys ascending by byte value)
    regardless of how the mapping was supplied, so iteration order always
    matches the encoding order. Equality ignores insertion order.
    """
    kind: ClassVar[ValueKind] = ValueKind.dict

    entries: Mapping[bytes, "Value"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        entries: dict[bytes, Value] = {}
        for key, value in _iter_entries(self.entries):
            if isinstance(key, (bytearray, memoryview)):
                key = bytes(key)
            if not isinstance(key, bytes):
                raise TypeError(f"Dictionary keys must be bytes, got {type(key).__name__}")
            if not isinstance(value, VALUE_TYPES):
                raise TypeError(f"Dictionary values must be values, got {type(value).__name__}")
            entries[key] = value

        object.__setattr__(self, "entries", dict(sorted(entries.items())))

    def __hash__(self) -> int:
        # entries are already in canonical order
        return hash(tuple(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: bytes) -> "Value":
        return self.entries[key]

    def get(self, key: bytes, default: "Value | None" = None) -> "Value | None":
        return self.entries.get(key, default)

    def sorted_items(self) -> list[tuple[bytes, "Value"]]:
        """Return the entries in canonical (strictly ascending key) order."""
        return list(self.entries.items())


def _iter_entries(
    entries: Mapping[bytes, "Value"] | Iterable[tuple[bytes, "Value"]]
) -> Iterable[tuple[bytes, "Value"]]:
    if isinstance(entries, Mapping):
        return entries.items()
    return entries


Value: TypeAlias = Integer | ByteString | List | Dictionary
"""
A bencode value: exactly one of the four variants.
Consumers match on the variant and treat anything else as unreachable.
"""

VALUE_TYPES = (Integer, ByteString, List, Dictionary)
