"""
Error types raised by the EAN-13 codec.
"""


class EANError(ValueError):
    """Base class for all codec errors."""


class InvalidPayload(EANError):
    """A check digit was requested for something that is not a 12-digit payload."""


class WrongLength(InvalidPayload):
    """Payload does not have exactly 12 characters."""

    def __init__(self, length: int, expected: int = 12):
        self.length = length
        self.expected = expected
        super().__init__(f"Payload must have exactly {expected} digits, got {length}")


class NonDigitCharacter(InvalidPayload):
    """Payload contains a character outside '0'-'9'."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid character in payload at position {position}: {character!r}")


class InvalidArgument(EANError):
    """Generation was asked for with arguments outside the supported domain."""
