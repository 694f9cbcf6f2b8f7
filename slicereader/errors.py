"""End-of-sequence signal for strict reads."""


class EndOfSequence(Exception):
    """Raised when a strict read runs past the end of the sequence."""

    def __init__(self, position: int) -> None:
        super().__init__("EOS")
        self.position = position
