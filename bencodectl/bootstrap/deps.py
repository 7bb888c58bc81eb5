from functools import lru_cache

from bencodectl.core.cmd import BencodeCtl


@lru_cache
def get_cli() -> BencodeCtl:
    return BencodeCtl()
