"""
Tests for EAN-13 generation.
"""

import random

import pytest

from eancodec.barcode.errors import InvalidArgument
from eancodec.barcode.generator import (
    MAX_PRODUCT_ID,
    generate_code,
    generate_record,
    leading_digits,
    normalize_prefix,
    product_segment,
    random_segment,
)
from eancodec.barcode.validator import is_valid_code


class TestPrefixNormalization:
    """Tests for prefix padding and truncation."""

    def test_three_digits_unchanged(self):
        """Test that a 3-digit prefix is kept."""
        assert normalize_prefix("590") == "590"

    def test_short_prefix_padded(self):
        """Test left-padding of short prefixes."""
        assert normalize_prefix("5") == "005"
        assert normalize_prefix("42") == "042"
        assert normalize_prefix("") == "000"

    def test_long_prefix_truncated(self):
        """Test that long prefixes keep their leftmost 3 digits."""
        assert normalize_prefix("12345") == "123"

    def test_non_digit_prefix_rejected(self):
        """Test that prefixes with non-digits are rejected."""
        with pytest.raises(InvalidArgument):
            normalize_prefix("ab")
        with pytest.raises(InvalidArgument):
            normalize_prefix("2-0")

    def test_non_string_prefix_rejected(self):
        """Test that non-string prefixes are rejected."""
        with pytest.raises(InvalidArgument):
            normalize_prefix(200)


class TestProductSegment:
    """Tests for product id rendering."""

    def test_padded_to_nine_digits(self):
        """Test zero-padding of small ids."""
        assert product_segment(42) == "000000042"
        assert product_segment(0) == "000000000"
        assert product_segment(MAX_PRODUCT_ID) == "999999999"

    def test_negative_rejected(self):
        """Test that negative ids are rejected."""
        with pytest.raises(InvalidArgument):
            product_segment(-1)

    def test_oversized_rejected_by_default(self):
        """Test that ids with 10+ digits are rejected by default."""
        with pytest.raises(InvalidArgument):
            product_segment(MAX_PRODUCT_ID + 1)

    def test_oversized_truncated_when_requested(self):
        """Test that truncation keeps the leftmost 9 digits."""
        assert product_segment(1234567890, overflow="truncate") == "123456789"

    def test_huge_id_rejected_with_typed_error(self):
        """Test that ids beyond the int-to-str limit raise InvalidArgument."""
        with pytest.raises(InvalidArgument):
            product_segment(10**5000)
        with pytest.raises(InvalidArgument):
            product_segment(-(10**5000))

    def test_huge_id_truncated(self):
        """Test that truncation works for ids beyond the int-to-str limit."""
        assert product_segment(10**5000, overflow="truncate") == "100000000"
        assert product_segment(7 * 10**5000 + 1, overflow="truncate") == "700000000"

    def test_non_integer_rejected(self):
        """Test that bools, floats and strings are rejected."""
        for value in [True, 4.2, "42"]:
            with pytest.raises(InvalidArgument):
                product_segment(value)

    def test_unknown_overflow_mode(self):
        """Test that unknown overflow modes are rejected."""
        with pytest.raises(InvalidArgument):
            product_segment(42, overflow="wrap")


class TestLeadingDigits:
    """Tests for taking the leftmost digits of large integers."""

    def test_leading_digits(self):
        """Test leading digits around powers of ten."""
        assert leading_digits(1234567890, 9) == 123456789
        assert leading_digits(10**9, 9) == 100000000
        assert leading_digits(10**10 - 1, 9) == 999999999
        assert leading_digits(int("98765432123456789" * 20), 9) == 987654321

    def test_matches_string_truncation(self):
        """Test agreement with slicing the decimal string."""
        rng = random.Random(5)
        for _ in range(300):
            value = rng.randrange(10**9, 10**rng.randrange(10, 60))
            assert leading_digits(value, 9) == int(str(value)[:9])


class TestRandomSegment:
    """Tests for random digit generation."""

    def test_nine_digits(self):
        """Test that random segments are 9 ASCII digits."""
        segment = random_segment()
        assert len(segment) == 9
        assert all(c in "0123456789" for c in segment)

    def test_seeded_source(self):
        """Test that a seeded source gives reproducible digits."""
        expected_rng = random.Random(7)
        expected = "".join(str(expected_rng.randrange(10)) for _ in range(9))
        assert random_segment(random.Random(7)) == expected


class TestGenerateCode:
    """Tests for full code generation."""

    def test_with_product_id(self):
        """Test generation from prefix and product id."""
        code = generate_code("200", 42)
        assert code == "2000000000428"
        assert code.startswith("200000000042")
        assert is_valid_code(code)

    def test_default_prefix(self):
        """Test that the default prefix is 200."""
        assert generate_code(product_id=0) == "2000000000008"

    def test_prefix_normalized(self):
        """Test that prefixes are padded and truncated."""
        assert generate_code("5", 1).startswith("005000000001")
        assert generate_code("12345", 1).startswith("123000000001")

    def test_random_code_valid(self):
        """Test that random codes are valid and keep the prefix."""
        for _ in range(50):
            code = generate_code("299")
            assert len(code) == 13
            assert code.startswith("299")
            assert is_valid_code(code)

    def test_seeded_generation_reproducible(self):
        """Test that equal seeds yield equal codes."""
        first = [generate_code(rng=random.Random(11)) for _ in range(3)]
        second = [generate_code(rng=random.Random(11)) for _ in range(3)]
        assert first == second

    def test_always_valid(self):
        """Generated codes validate for any digit prefix and in-range id."""
        rng = random.Random(2024)
        for _ in range(300):
            prefix = "".join(str(rng.randrange(10)) for _ in range(rng.randrange(0, 6)))
            product_id = rng.randrange(0, MAX_PRODUCT_ID + 1)
            assert is_valid_code(generate_code(prefix, product_id))

    def test_negative_product_id(self):
        """Test that negative ids are rejected."""
        with pytest.raises(InvalidArgument):
            generate_code("200", -1)

    def test_oversized_product_id(self):
        """Test reject and truncate policies for oversized ids."""
        with pytest.raises(InvalidArgument):
            generate_code("200", 1234567890)

        code = generate_code("200", 1234567890, overflow="truncate")
        assert code == "2001234567893"
        assert is_valid_code(code)

    def test_huge_product_id(self):
        """Test both overflow policies with an id beyond the int-to-str limit."""
        with pytest.raises(InvalidArgument):
            generate_code("200", 10**5000)
        assert generate_code("200", 10**5000, overflow="truncate").startswith("200100000000")

    def test_no_output(self, capsys):
        """Test that generating codes writes nothing to stdout or stderr."""
        generate_code("200", 42)
        generate_code("200")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_invalid_argument_is_value_error(self):
        """Test that InvalidArgument can be caught as ValueError."""
        with pytest.raises(ValueError):
            generate_code("200", -5)


class TestGenerateRecord:
    """Tests for structured generation results."""

    def test_record_fields(self):
        """Test that the record exposes the code parts."""
        record = generate_record("200", 42)
        assert record.code == "2000000000428"
        assert record.prefix == "200"
        assert record.product_id == 42
        assert record.check_digit == 8
        assert record.payload == "200000000042"
        assert record.generated_at.tzinfo is not None

    def test_random_record(self):
        """Test that random records have no product id."""
        record = generate_record("400", rng=random.Random(3))
        assert record.product_id is None
        assert record.prefix == "400"
        assert is_valid_code(record.code)
