from collections.abc import Callable, Iterator
from typing import BinaryIO, assert_never

from bencodec.core.models.value import ByteString, Dictionary, Integer, List, Value

Write = Callable[[bytes], object]


class Encoder:
    """
    Canonical bencode encoder.

    Every value has exactly one encoding: integers without leading zeros or
    '-0', byte strings prefixed with their decimal length, and dictionary
    keys in strictly ascending byte order. Encoding never fails for a value
    that could be constructed.
    """

    def encode(self, value: Value) -> bytes:
        buffer = bytearray()
        self._emit(value, buffer.extend)
        return bytes(buffer)

    def dump(self, value: Value, sink: BinaryIO) -> None:
        self._emit(value, sink.write)

    def _emit(self, value: Value, write: Write) -> None:
        # Containers push their parent's iterator; no recursion, so any
        # depth the decoder accepts can be written back.
        pending: list[Iterator[Value]] = []
        current: Iterator[Value] = iter((value,))

        while True:
            item = next(current, None)
            if item is None:
                if not pending:
                    return
                write(b"e")
                current = pending.pop()
                continue

            match item:
                case Integer(number):
                    write(b"i%de" % number)
                case ByteString(data):
                    self._emit_bytes(data, write)
                case List(items):
                    write(b"l")
                    pending.append(current)
                    current = iter(items)
                case Dictionary():
                    write(b"d")
                    pending.append(current)
                    current = self._entries(item)
                case _:
                    assert_never(item)

    @staticmethod
    def _entries(value: Dictionary) -> Iterator[Value]:
        for key, item in value.sorted_items():
            yield ByteString(key)
            yield item

    @staticmethod
    def _emit_bytes(data: bytes, write: Write) -> None:
        write(b"%d:" % len(data))
        write(data)


def serialize(value: Value) -> bytes:
    return Encoder().encode(value)


def dump(value: Value, sink: BinaryIO) -> None:
    Encoder().dump(value, sink)
