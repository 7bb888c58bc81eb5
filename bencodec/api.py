"""
Public entry points of bencodec.

    >>> from bencodec.api import parse, serialize, List, Integer
    >>> serialize(List([Integer(1)]))
    b'li1ee'
    >>> parse(b"li1ee")
    List(items=(Integer(value=1),))
"""
from bencodec.core.codec.decoder import Decoder, iter_parse, parse
from bencodec.core.codec.encoder import Encoder, dump, serialize
from bencodec.core.codec.errors import BencodeError, EndOfInput, InvalidGrammar
from bencodec.core.convert import from_python, to_python
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

__all__ = [
    "BencodeError",
    "ByteString",
    "Decoder",
    "DecoderConfig",
    "Dictionary",
    "Encoder",
    "EndOfInput",
    "INTEGER_MAX",
    "INTEGER_MIN",
    "Integer",
    "InvalidGrammar",
    "List",
    "TrailingData",
    "Value",
    "dump",
    "from_python",
    "iter_parse",
    "parse",
    "serialize",
    "to_python",
]
