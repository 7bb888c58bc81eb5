import os

import pytest
import yaml

from bencodec.core.codec.decoder import Decoder
from bencodec.core.codec.encoder import Encoder
from bencodec.bootstrap.config.loader import CONFIG_ENV
from bencodec.infra.bencode_serializer import BencodeSerializer


@pytest.fixture
def encoder() -> Encoder:
    return Encoder()


@pytest.fixture
def decoder() -> Decoder:
    return Decoder()


@pytest.fixture
def serializer() -> BencodeSerializer:
    return BencodeSerializer()


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """
    Run with no BENCODEC_* variables and an empty working directory,
    so no configuration leaks in from the developer machine.
    """
    for name in list(os.environ):
        if name.startswith("BENCODEC_") or name == CONFIG_ENV:
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config_file(isolated_env):
    file = isolated_env / "custom.yaml"

    data = {
        "decoder": {
            "max_depth": 4,
            "trailing": "ignore",
        },
        "output": {
            "format": "json",
            "indent": 4,
        },
    }

    file.write_text(yaml.dump(data))
    return file
