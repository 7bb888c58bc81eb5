import argparse
import contextlib
import sys
from collections.abc import Iterator
from typing import BinaryIO

import yaml

from bencodec.bootstrap.config.settings import BencodecConfig
from bencodec.core.codec.decoder import Decoder
from bencodec.core.codec.encoder import Encoder
from bencodec.core.codec.errors import BencodeError
from bencodec.core.convert import from_python
from bencodectl.bootstrap.deps import get_cli
from bencodectl.core.model import Outcome
from bencodectl.core.utils import from_document, to_document

cli = get_cli()


@contextlib.contextmanager
def open_input(path: str) -> Iterator[BinaryIO]:
    if path == "-":
        yield sys.stdin.buffer
        return

    with open(path, "rb") as f:
        yield f


@cli.command("decode")
def cmd_decode(config: BencodecConfig, namespace: argparse.Namespace) -> Outcome:
    decoder = Decoder(config.to_decoder_config())
    with open_input(namespace.file) as f:
        value = decoder.decode(f)

    return Outcome(status="ok", data=to_document(value))


@cli.command("encode")
def cmd_encode(config: BencodecConfig, namespace: argparse.Namespace) -> Outcome:
    _ = config
    with open_input(namespace.file) as f:
        document = yaml.safe_load(f)

    value = from_python(from_document(document))
    return Outcome(status="ok", payload=Encoder().encode(value))


@cli.command("validate")
def cmd_validate(config: BencodecConfig, namespace: argparse.Namespace) -> Outcome:
    decoder = Decoder(config.to_decoder_config())
    try:
        with open_input(namespace.file) as f:
            value = decoder.decode(f)
    except BencodeError as ex:
        return Outcome(
            status="error",
            data={
                "valid": False,
                "error": type(ex).__name__,
                "message": ex.message,
                "position": ex.position,
            },
            exit_code=1
        )

    return Outcome(
        status="ok",
        data={"valid": True, "kind": str(value.kind)}
    )
