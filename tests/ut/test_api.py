import io

import pytest

import bencodec.api as api
from bencodec.api import (
    BencodeError,
    ByteString,
    Decoder,
    DecoderConfig,
    Dictionary,
    Encoder,
    EndOfInput,
    Integer,
    InvalidGrammar,
    List,
    TrailingData,
    dump,
    from_python,
    iter_parse,
    parse,
    serialize,
    to_python,
)


@pytest.mark.ut
def test_exported_names_resolve():
    for name in api.__all__:
        assert hasattr(api, name), name


@pytest.mark.ut
def test_round_trip_through_public_functions():
    obj = {"announce": "http://tracker/announce", "info": {"length": 12, "files": [b"a", b"b"]}}

    data = serialize(from_python(obj))

    assert data == b"d8:announce23:http://tracker/announce4:infod5:filesl1:a1:be6:lengthi12eee"
    assert to_python(parse(data)) == {
        b"announce": b"http://tracker/announce",
        b"info": {b"files": [b"a", b"b"], b"length": 12},
    }


@pytest.mark.ut
def test_iter_parse_and_dump_share_the_format():
    sink = io.BytesIO()
    dump(Integer(1), sink)
    dump(List([ByteString(b"x")]), sink)
    dump(Dictionary(), sink)

    values = list(iter_parse(sink.getvalue()))

    assert values == [Integer(1), List([ByteString(b"x")]), Dictionary()]


@pytest.mark.ut
def test_classes_and_errors_are_exposed():
    decoder = Decoder(DecoderConfig(max_depth=1, trailing=TrailingData.ignore))

    assert decoder.decode(Encoder().encode(List([]))) == List([])
    assert issubclass(EndOfInput, BencodeError)
    assert issubclass(InvalidGrammar, BencodeError)

    with pytest.raises(InvalidGrammar):
        decoder.decode(b"llee")
    with pytest.raises(EndOfInput):
        parse(b"i1")
