"""
EAN-13 generation for internal, testing and sandbox use.

Real EANs must come from GS1 registration. The default prefix "200"
sits in the 200-299 range reserved for restricted in-store numbering.
"""

import random
from typing import Literal

from eancodec.barcode.checksum import ASCII_DIGITS, PAYLOAD_LENGTH, compute_check_digit
from eancodec.barcode.errors import InvalidArgument
from eancodec.models.code import GeneratedCode

DEFAULT_PREFIX = "200"
PREFIX_LENGTH = 3
PRODUCT_LENGTH = PAYLOAD_LENGTH - PREFIX_LENGTH
MAX_PRODUCT_ID = 10**PRODUCT_LENGTH - 1

OverflowMode = Literal["reject", "truncate"]
OVERFLOW_MODES = ("reject", "truncate")


def normalize_prefix(prefix: str) -> str:
    """
    Left-pad a prefix with zeros to 3 characters and keep the leftmost 3.

    Longer prefixes are truncated rather than rejected.
    """
    if not isinstance(prefix, str):
        raise InvalidArgument(f"Prefix must be a string, got {type(prefix).__name__}")

    normalized = prefix.rjust(PREFIX_LENGTH, "0")[:PREFIX_LENGTH]
    if any(character not in ASCII_DIGITS for character in normalized):
        raise InvalidArgument(f"Prefix must contain only digits: {prefix!r}")
    return normalized


def leading_digits(value: int, count: int) -> int:
    """
    Keep the leftmost `count` digits of a non-negative integer.

    Works without rendering the whole number, so ids beyond the
    int-to-str conversion limit are handled too.
    """
    # slightly below log10(2) so the estimate never overshoots
    magnitude = int((value.bit_length() - 1) * 0.30102999)
    excess = magnitude + 1 - count
    if excess > 0:
        value //= 10**excess
    while value >= 10**count:
        value //= 10
    return value


def product_segment(product_id: int, overflow: OverflowMode = "reject") -> str:
    """
    Render a product id as the 9-digit product segment.

    Args:
        product_id: Non-negative integer
        overflow: "reject" raises for ids above 999999999, "truncate"
            keeps the leftmost 9 digits

    Raises:
        InvalidArgument: For non-integer, negative or (when rejecting) oversized ids
    """
    if overflow not in OVERFLOW_MODES:
        raise InvalidArgument(f"Unknown overflow mode: {overflow!r}")
    if isinstance(product_id, bool) or not isinstance(product_id, int):
        raise InvalidArgument(f"Product id must be an integer, got {type(product_id).__name__}")
    if product_id < 0:
        raise InvalidArgument("Product id must be non-negative")
    if product_id > MAX_PRODUCT_ID:
        if overflow == "reject":
            raise InvalidArgument(f"Product id exceeds {MAX_PRODUCT_ID}")
        product_id = leading_digits(product_id, PRODUCT_LENGTH)

    return str(product_id).rjust(PRODUCT_LENGTH, "0")[:PRODUCT_LENGTH]


def random_segment(rng: random.Random | None = None) -> str:
    """Draw 9 uniformly distributed digits."""
    source = rng if rng is not None else random
    return "".join(str(source.randrange(10)) for _ in range(PRODUCT_LENGTH))


def generate_code(
    prefix: str = DEFAULT_PREFIX,
    product_id: int | None = None,
    *,
    rng: random.Random | None = None,
    overflow: OverflowMode = "reject",
) -> str:
    """
    Generate a valid EAN-13 code.

    Args:
        prefix: GS1 prefix, padded or truncated to 3 digits
        product_id: Optional product id for the remaining 9 digits;
            random digits are used when omitted
        rng: Random source for the random digits (module-level random if None)
        overflow: Policy for product ids with more than 9 digits

    Returns:
        13-digit code

    Raises:
        InvalidArgument: If the prefix or product id cannot be encoded
    """
    normalized_prefix = normalize_prefix(prefix)
    if product_id is not None:
        segment = product_segment(product_id, overflow)
    else:
        segment = random_segment(rng)

    payload = (normalized_prefix + segment).rjust(PAYLOAD_LENGTH, "0")[:PAYLOAD_LENGTH]
    code = payload + str(compute_check_digit(payload))
    return code


def generate_record(
    prefix: str = DEFAULT_PREFIX,
    product_id: int | None = None,
    *,
    rng: random.Random | None = None,
    overflow: OverflowMode = "reject",
) -> GeneratedCode:
    """Generate a code and return it with its parts."""
    code = generate_code(prefix, product_id, rng=rng, overflow=overflow)
    return GeneratedCode(
        code=code,
        prefix=code[:PREFIX_LENGTH],
        product_id=product_id,
        check_digit=int(code[-1]),
    )
