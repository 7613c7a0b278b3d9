"""
EAN-13 validation for untrusted input.

Nothing in here raises: malformed candidates are reported as invalid.
"""

import re

from eancodec.barcode.checksum import CODE_LENGTH, compute_check_digit
from eancodec.models.code import CodeCheck

# [0-9] rather than \d so Unicode digits such as "٤" are rejected
_CODE_PATTERN = re.compile(r"[0-9]{%d}" % CODE_LENGTH)

ERROR_NOT_STRING = "EAN must be a string"
ERROR_FORMAT = "EAN must be exactly 13 digits"
ERROR_CHECK_DIGIT = "Invalid EAN check digit"


def check_code(candidate: object) -> CodeCheck:
    """
    Validate an EAN-13 candidate and report why it was rejected.

    Only leading and trailing whitespace is removed; dashes or inner
    spaces make the candidate invalid.

    Args:
        candidate: Any value, typically a user-typed barcode

    Returns:
        CodeCheck with is_valid and, when invalid, the error message
    """
    if not isinstance(candidate, str):
        return CodeCheck(candidate=type(candidate).__name__, error=ERROR_NOT_STRING)

    normalized = candidate.strip()

    if not _CODE_PATTERN.fullmatch(normalized):
        return CodeCheck(candidate=candidate, normalized=normalized, error=ERROR_FORMAT)

    expected = compute_check_digit(normalized[:-1])
    if int(normalized[-1]) != expected:
        return CodeCheck(candidate=candidate, normalized=normalized, error=ERROR_CHECK_DIGIT)

    return CodeCheck(candidate=candidate, normalized=normalized, is_valid=True)


def is_valid_code(candidate: object) -> bool:
    """
    Check whether a candidate is a well-formed EAN-13 with a correct check digit.

    Args:
        candidate: Any value; non-strings and None are simply invalid

    Returns:
        True if valid
    """
    return check_code(candidate).is_valid


def ean_field_error(value: str | None) -> str | None:
    """
    Validate an optional EAN form field.

    Returns:
        None if the field is empty or holds a valid EAN-13,
        otherwise a message suitable for display next to the field
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None

    result = check_code(value)
    return None if result.is_valid else result.error
