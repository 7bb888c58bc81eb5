from typing import BinaryIO, Protocol, TypeAlias

Readable: TypeAlias = bytes | bytearray | memoryview | BinaryIO


class ByteSource(Protocol):
    """
    A sequential byte cursor with one byte of lookahead.

    The decoder only ever moves forward: it peeks at the next byte,
    consumes bytes one at a time, and reads byte string payloads in bulk.
    """

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""

    def peek(self) -> int | None:
        """Return the next byte without consuming it, or None at end of input."""

    def next(self) -> int | None:
        """Consume and return the next byte, or None at end of input."""

    def read(self, size: int) -> bytes:
        """Consume up to `size` bytes. Fewer are returned only at end of input."""


class BufferSource:
    """Cursor over an in-memory buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._view = memoryview(data).cast("B")
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def peek(self) -> int | None:
        if self._pos >= len(self._view):
            return None
        return self._view[self._pos]

    def next(self) -> int | None:
        byte = self.peek()
        if byte is not None:
            self._pos += 1
        return byte

    def read(self, size: int) -> bytes:
        end = min(self._pos + size, len(self._view))
        chunk = self._view[self._pos:end].tobytes()
        self._pos = end
        return chunk


class StreamSource:
    """
    Cursor over a readable binary stream.

    At most one byte is buffered for lookahead. Payloads are pulled in
    chunks of CHUNK_SIZE, so a declared length far beyond what the stream
    holds fails once the stream runs dry instead of allocating it up front.
    """
    CHUNK_SIZE: int = 64 * 1024

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._lookahead: int | None = None
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def peek(self) -> int | None:
        if self._lookahead is None:
            data = self._stream.read(1)
            if data:
                self._lookahead = data[0]
        return self._lookahead

    def next(self) -> int | None:
        byte = self.peek()
        if byte is not None:
            self._lookahead = None
            self._pos += 1
        return byte

    def read(self, size: int) -> bytes:
        buffer = bytearray()

        if size > 0 and self._lookahead is not None:
            buffer.append(self._lookahead)
            self._lookahead = None

        while len(buffer) < size:
            chunk = self._stream.read(min(size - len(buffer), self.CHUNK_SIZE))
            if not chunk:
                break
            buffer += chunk

        self._pos += len(buffer)
        return bytes(buffer)


def open_source(data: Readable) -> ByteSource:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return BufferSource(data)

    if hasattr(data, "read"):
        return StreamSource(data)

    raise TypeError(f"Cannot read bencode from {type(data).__name__}")
