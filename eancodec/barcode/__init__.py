"""
EAN-13 check digit, validation and generation utilities.
"""

from eancodec.barcode.checksum import compute_check_digit
from eancodec.barcode.errors import (
    EANError,
    InvalidArgument,
    InvalidPayload,
    NonDigitCharacter,
    WrongLength,
)
from eancodec.barcode.generator import generate_code, generate_record
from eancodec.barcode.validator import check_code, ean_field_error, is_valid_code

__all__ = [
    "compute_check_digit",
    "check_code",
    "ean_field_error",
    "is_valid_code",
    "generate_code",
    "generate_record",
    "EANError",
    "InvalidArgument",
    "InvalidPayload",
    "NonDigitCharacter",
    "WrongLength",
]
