"""
GS1 mod-10 check digit calculation for EAN-13 payloads.
"""

from eancodec.barcode.errors import InvalidPayload, NonDigitCharacter, WrongLength

PAYLOAD_LENGTH = 12
CODE_LENGTH = 13

ASCII_DIGITS = "0123456789"

# 1-indexed odd positions weigh 1, even positions weigh 3
EAN13_WEIGHTS = (1, 3) * (PAYLOAD_LENGTH // 2)


def payload_digits(payload: str) -> tuple[int, ...]:
    """
    Convert a 12-character payload into its digit values.

    Raises:
        InvalidPayload: If the payload is not a string
        WrongLength: If the payload does not have 12 characters
        NonDigitCharacter: If any character is not an ASCII digit
    """
    if not isinstance(payload, str):
        raise InvalidPayload(f"Payload must be a string, got {type(payload).__name__}")
    if len(payload) != PAYLOAD_LENGTH:
        raise WrongLength(len(payload), PAYLOAD_LENGTH)

    for position, character in enumerate(payload):
        if character not in ASCII_DIGITS:
            raise NonDigitCharacter(character, position)

    return tuple(ord(character) - ord("0") for character in payload)


def compute_check_digit(payload: str) -> int:
    """
    Calculate the EAN-13 check digit for a 12-digit payload.

    Algorithm:
    1. Multiply digits at odd positions (1, 3, 5, ...) by 1
    2. Multiply digits at even positions (2, 4, 6, ...) by 3
    3. Sum all results
    4. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        payload: Exactly 12 ASCII digits

    Returns:
        Check digit in the range 0-9
    """
    digits = payload_digits(payload)
    total = sum(digit * weight for digit, weight in zip(digits, EAN13_WEIGHTS))
    return (10 - (total % 10)) % 10
