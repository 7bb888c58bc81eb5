from typing import Any, assert_never

from bencodec.core.models.value import ByteString, Dictionary, Integer, List, Value

HEX_PREFIX = "hex:"


def render_bytes(data: bytes) -> str:
    # UTF-8 text stays readable; anything else, or text that would be
    # mistaken for the hex form, is written as hex.
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return HEX_PREFIX + data.hex()

    if text.startswith(HEX_PREFIX):
        return HEX_PREFIX + data.hex()
    return text


def parse_bytes(text: str) -> str | bytes:
    if text.startswith(HEX_PREFIX):
        return bytes.fromhex(text[len(HEX_PREFIX):])
    return text


def to_document(value: Value) -> Any:
    """Turn a value tree into YAML/JSON friendly objects."""
    match value:
        case Integer(number):
            return number
        case ByteString(data):
            return render_bytes(data)
        case List(items):
            return [to_document(item) for item in items]
        case Dictionary():
            return {render_bytes(key): to_document(item) for key, item in value.sorted_items()}
        case _:
            assert_never(value)


def from_document(obj: Any) -> Any:
    """Inverse of to_document: restore 'hex:' strings to bytes."""
    if isinstance(obj, str):
        return parse_bytes(obj)

    if isinstance(obj, dict):
        return {
            parse_bytes(key) if isinstance(key, str) else key: from_document(item)
            for key, item in obj.items()
        }

    if isinstance(obj, list):
        return [from_document(item) for item in obj]

    return obj
