from typing import Any

from bencodec.core.codec.decoder import Decoder
from bencodec.core.codec.encoder import Encoder
from bencodec.core.convert import from_python, to_python
from bencodec.core.models.config import DecoderConfig
from bencodec.core.ports.serializer import Serializer


class BencodeSerializer(Serializer):
    """
    Bencode-based implementation of the Serializer interface.

    - canonical: equal objects always produce identical bytes
    - strict: non-canonical input is rejected, never repaired
    - works on plain Python objects (int, bytes, str, list, dict)
    """
    def __init__(self, config: DecoderConfig | None = None) -> None:
        self._encoder = Encoder()
        self._decoder = Decoder(config)

    def serialize(self, message: Any) -> bytes:
        return self._encoder.encode(from_python(message))

    def deserialize(self, data: bytes) -> Any:
        return to_python(self._decoder.decode(data))
