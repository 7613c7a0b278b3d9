"""
EAN-13 identifier codec: check digits, validation and generation.
"""

from eancodec.barcode import (
    EANError,
    InvalidArgument,
    InvalidPayload,
    NonDigitCharacter,
    WrongLength,
    check_code,
    compute_check_digit,
    ean_field_error,
    generate_code,
    generate_record,
    is_valid_code,
)

__all__ = [
    "EANError",
    "InvalidArgument",
    "InvalidPayload",
    "NonDigitCharacter",
    "WrongLength",
    "check_code",
    "compute_check_digit",
    "ean_field_error",
    "generate_code",
    "generate_record",
    "is_valid_code",
]
