class BencodeError(ValueError):
    """
    Base class of every decoding failure.

    Exactly two kinds are ever raised: EndOfInput and InvalidGrammar.
    `position` is the byte offset at which the failure was detected.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} (at byte {position})")
        self.message = message
        self.position = position


class EndOfInput(BencodeError):
    """At least one more byte was needed and none was available."""


class InvalidGrammar(BencodeError):
    """The bytes are present but do not form a canonical bencode value."""
