from dataclasses import dataclass
from enum import StrEnum


class TrailingData(StrEnum):
    reject = "reject"
    ignore = "ignore"


@dataclass(frozen=True)
class DecoderConfig:
    """
    Options controlling how strictly the decoder treats its input.

    The defaults describe the canonical behavior: the whole input must be
    exactly one value, and nesting is bounded.
    """
    max_depth: int = 256
    """
    Maximum nesting depth of lists and dictionaries.
    A top-level list has depth 1. Deeper input is rejected as invalid grammar,
    which bounds work on inputs such as b"llll...eeee".
    """

    trailing: TrailingData = TrailingData.reject
    """
    What to do with bytes following a complete top-level value:
    - reject: the input is invalid.
    - ignore: stop right after the value and leave the rest unread.
    """

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        object.__setattr__(self, "trailing", TrailingData(self.trailing))
