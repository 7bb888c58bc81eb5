import logging
from collections.abc import Iterator

from bencodec.core.codec.errors import BencodeError, EndOfInput, InvalidGrammar
from bencodec.core.codec.source import ByteSource, Readable, open_source
from bencodec.core.models.config import DecoderConfig, TrailingData
from bencodec.core.models.value import (
    INTEGER_MAX,
    INTEGER_MIN,
    ByteString,
    Dictionary,
    Integer,
    List,
    Value,
)

INT_START = ord("i")
LIST_START = ord("l")
DICT_START = ord("d")
END = ord("e")
COLON = ord(":")
MINUS = ord("-")
ZERO = ord("0")
NINE = ord("9")


def is_digit(byte: int | None) -> bool:
    return byte is not None and ZERO <= byte <= NINE


class _ListFrame:
    expected = "list element or 'e'"

    def __init__(self) -> None:
        self.items: list[Value] = []

    def accepts_end(self) -> bool:
        return True

    def finish(self) -> List:
        return List(self.items)


class _DictFrame:
    expected = "dictionary key or 'e'"

    def __init__(self) -> None:
        self.entries: dict[bytes, Value] = {}
        self.previous: bytes | None = None
        self.key: bytes | None = None
        self.key_position = 0

    def accepts_end(self) -> bool:
        # between a key and its value, 'e' is not a terminator
        return self.key is None

    def finish(self) -> Dictionary:
        return Dictionary(self.entries)


class _Parser:
    """
    Descent parser over a single source.

    Open lists and dictionaries live on an explicit stack instead of the
    Python call stack, so nesting is bounded by max_depth alone.
    One instance per decode call: it owns the cursor and the current nesting
    depth, and is discarded as soon as the call returns or fails.
    """

    def __init__(self, source: ByteSource, config: DecoderConfig) -> None:
        self._source = source
        self._config = config
        self._depth = 0

    @property
    def source(self) -> ByteSource:
        return self._source

    def parse_value(self) -> Value:
        stack: list[_ListFrame | _DictFrame] = []

        while True:
            if stack and stack[-1].accepts_end():
                frame = stack[-1]
                byte = self._peek_required(frame.expected)

                if byte != END:
                    if isinstance(frame, _DictFrame):
                        self._parse_key(frame, byte)
                        continue
                else:
                    self._source.next()  # 'e'
                    self._leave()
                    stack.pop()
                    value = frame.finish()
                    if not stack:
                        return value
                    self._attach(stack[-1], value)
                    continue

            byte = self._peek_required("a value")

            if byte == LIST_START or byte == DICT_START:
                self._enter()
                self._source.next()
                stack.append(_ListFrame() if byte == LIST_START else _DictFrame())
                continue

            if byte == INT_START:
                value = self._parse_integer()
            elif is_digit(byte):
                value = self._parse_byte_string()
            else:
                raise InvalidGrammar(
                    f"unexpected byte {bytes([byte])!r} at start of value",
                    self._source.position
                )

            if not stack:
                return value
            self._attach(stack[-1], value)

    def _parse_key(self, frame: _DictFrame, byte: int) -> None:
        position = self._source.position
        if not is_digit(byte):
            raise InvalidGrammar(
                f"dictionary key must be a byte string, got {bytes([byte])!r}",
                position
            )

        frame.key = self._parse_byte_string().value
        frame.key_position = position

    def _attach(self, frame: _ListFrame | _DictFrame, value: Value) -> None:
        if isinstance(frame, _ListFrame):
            frame.items.append(value)
            return

        key = frame.key
        if frame.previous is not None:
            if key == frame.previous:
                raise InvalidGrammar(f"duplicate dictionary key {key!r}", frame.key_position)
            if key < frame.previous:
                raise InvalidGrammar(f"dictionary key {key!r} out of order", frame.key_position)

        frame.entries[key] = value
        frame.previous = key
        frame.key = None

    def _parse_integer(self) -> Integer:
        self._source.next()  # 'i'

        negative = False
        if self._peek_required("integer digits") == MINUS:
            self._source.next()
            negative = True

        position = self._source.position
        first = self._next_required("integer digits")
        if not is_digit(first):
            raise InvalidGrammar(f"expected a digit in integer, got {bytes([first])!r}", position)

        if first == ZERO:
            if negative:
                raise InvalidGrammar("negative zero is not canonical", position)

            position = self._source.position
            byte = self._next_required("integer terminator 'e'")
            if is_digit(byte):
                raise InvalidGrammar("leading zero in integer", position)
            if byte != END:
                raise InvalidGrammar(f"expected 'e' after integer, got {bytes([byte])!r}", position)
            return Integer(0)

        limit = -INTEGER_MIN if negative else INTEGER_MAX
        magnitude = first - ZERO

        while True:
            position = self._source.position
            byte = self._next_required("integer terminator 'e'")
            if byte == END:
                break
            if not is_digit(byte):
                raise InvalidGrammar(f"expected a digit or 'e' in integer, got {bytes([byte])!r}", position)

            magnitude = magnitude * 10 + (byte - ZERO)
            if magnitude > limit:
                raise InvalidGrammar("integer out of 64-bit signed range", position)

        return Integer(-magnitude if negative else magnitude)

    def _parse_length(self) -> int:
        position = self._source.position
        first = self._next_required("byte string length")
        if not is_digit(first):
            raise InvalidGrammar(f"expected byte string length, got {bytes([first])!r}", position)

        length = first - ZERO
        while True:
            position = self._source.position
            byte = self._next_required("byte string separator ':'")
            if byte == COLON:
                return length
            if not is_digit(byte):
                raise InvalidGrammar(f"expected a digit or ':' in length, got {bytes([byte])!r}", position)
            if length == 0:
                raise InvalidGrammar("leading zero in byte string length", position - 1)

            length = length * 10 + (byte - ZERO)
            if length > INTEGER_MAX:
                raise InvalidGrammar("byte string length out of range", position)

    def _parse_byte_string(self) -> ByteString:
        length = self._parse_length()
        payload = self._source.read(length)
        if len(payload) < length:
            raise EndOfInput(
                f"byte string declares {length} bytes but only {len(payload)} remain",
                self._source.position
            )
        return ByteString(payload)

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self._config.max_depth:
            raise InvalidGrammar(
                f"nesting too deep (max_depth={self._config.max_depth})",
                self._source.position
            )

    def _leave(self) -> None:
        self._depth -= 1

    def _peek_required(self, expected: str) -> int:
        byte = self._source.peek()
        if byte is None:
            raise EndOfInput(f"expected {expected}", self._source.position)
        return byte

    def _next_required(self, expected: str) -> int:
        byte = self._source.next()
        if byte is None:
            raise EndOfInput(f"expected {expected}", self._source.position)
        return byte


class Decoder:
    """
    Strict decoder for canonical bencode.

    A Decoder holds only its configuration, so one instance can be shared
    across threads as long as every call gets its own source.
    """

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self._config = config or DecoderConfig()
        self._logger = logging.getLogger("core.codec.decoder")

    @property
    def config(self) -> DecoderConfig:
        return self._config

    def decode(self, data: Readable) -> Value:
        parser = _Parser(open_source(data), self._config)

        try:
            value = parser.parse_value()
            if self._config.trailing is TrailingData.reject and parser.source.peek() is not None:
                raise InvalidGrammar("unexpected data after top-level value", parser.source.position)
        except BencodeError as exc:
            self._logger.debug(f"Rejected input ({type(exc).__name__}): {exc}")
            raise

        return value

    def iter_decode(self, data: Readable) -> Iterator[Value]:
        """
        Decode consecutive top-level values until the source is exhausted.

        Running out of input between two values ends the iteration; running
        out inside a value raises EndOfInput.
        """
        parser = _Parser(open_source(data), self._config)
        return self._iter_values(parser)

    def _iter_values(self, parser: _Parser) -> Iterator[Value]:
        while parser.source.peek() is not None:
            try:
                value = parser.parse_value()
            except BencodeError as exc:
                self._logger.debug(f"Rejected input ({type(exc).__name__}): {exc}")
                raise
            yield value


def parse(data: Readable, config: DecoderConfig | None = None) -> Value:
    return Decoder(config).decode(data)


def iter_parse(data: Readable, config: DecoderConfig | None = None) -> Iterator[Value]:
    return Decoder(config).iter_decode(data)
