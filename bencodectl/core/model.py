from dataclasses import dataclass
from typing import Any


@dataclass
class Outcome:
    """Result of a bencodectl command, rendered or written by BencodeCtl."""
    status: str
    """
    "ok" or "error".
    """

    data: Any = None
    """
    Document rendered with the configured Renderer, if any.
    """

    payload: bytes | None = None
    """
    Raw bytes written verbatim to the output, if any.
    """

    exit_code: int = 0
