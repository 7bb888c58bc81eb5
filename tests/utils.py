import pytest

from bencodec.core.codec.decoder import Decoder
from bencodec.core.codec.encoder import Encoder
from bencodec.core.models.value import Value


def raw(text: str) -> bytes:
    """Test vectors are written as str; every char maps to one byte."""
    return text.encode("latin-1")


def check_serialize(encoder: Encoder, expected: str, value: Value) -> None:
    assert encoder.encode(value) == raw(expected)


def check_parse(decoder: Decoder, expected: Value, text: str) -> None:
    assert decoder.decode(raw(text)) == expected


def parse_expecting(decoder: Decoder, cases: list[str], error: type[Exception]) -> None:
    for case in cases:
        with pytest.raises(error):
            decoder.decode(raw(case))
