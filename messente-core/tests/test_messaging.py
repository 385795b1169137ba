"""
Unit Tests for Message Segmentation
===================================
Tests for charset detection, billable length and part counting.
"""

import pytest

GSM_TEXT = "This SMS contains only characters that are present in GSM charset!"
GSM_EXTENDED_TEXT = (
    "This SMS contains some GSM charset characters that must be escaped like: €, [, ] etc."
)
UNICODE_TEXT = "This SMS contains a unicode character: Õ"
UNICODE_EXTENDED_TEXT = (
    "This SMS contains a unicode character Õ and GSM charset character € that needs to be escaped."
)


class TestEncodingDetection:
    """Tests for charset detection."""

    def test_detect_gsm7_encoding(self):
        """Should detect GSM-7 for basic characters."""
        from messente_core.messaging import detect_encoding, EncodingType

        assert detect_encoding(GSM_TEXT) == EncodingType.GSM7

    def test_extended_characters_stay_gsm7(self):
        """Extended characters do not force UCS-2."""
        from messente_core.messaging import detect_encoding, EncodingType

        assert detect_encoding(GSM_EXTENDED_TEXT) == EncodingType.GSM7

    def test_detect_ucs2_encoding(self):
        """Should detect UCS-2 for a character outside the GSM alphabet."""
        from messente_core.messaging import detect_encoding, EncodingType

        assert detect_encoding(UNICODE_TEXT) == EncodingType.UCS2
        assert detect_encoding("Hello 你好") == EncodingType.UCS2

    def test_empty_text_is_gsm7(self):
        from messente_core.messaging import detect_encoding, EncodingType

        assert detect_encoding("") == EncodingType.GSM7

    def test_escape_character_is_basic(self):
        """The escape character is part of the basic alphabet."""
        from messente_core.messaging import is_gsm7_character, GSM7_ESCAPE

        assert is_gsm7_character(GSM7_ESCAPE)


class TestCharacterCount:
    """Tests for billable character counting."""

    @pytest.mark.parametrize("text,expected", [
        (GSM_TEXT, 66),
        (GSM_EXTENDED_TEXT, 88),
        (UNICODE_TEXT, 40),
        (UNICODE_EXTENDED_TEXT, 93),
        ("", 0),
    ])
    def test_count_characters(self, text, expected):
        from messente_core.messaging import count_characters

        assert count_characters(text) == expected

    def test_extended_characters_count_twice(self):
        """Should count every extended character as 2."""
        from messente_core.messaging import count_characters

        assert count_characters("{}") == 4
        assert count_characters("€") == 2

    def test_ucs2_counts_utf16_units(self):
        """Characters outside the BMP take two UTF-16 units."""
        from messente_core.messaging import count_characters

        assert count_characters("😀") == 2
        assert count_characters("a😀") == 3

    def test_escape_gsm7(self):
        """Should insert the escape character before extended characters."""
        from messente_core.messaging import escape_gsm7

        assert escape_gsm7("a€b") == "a\x1b€b"


class TestSegmentation:
    """Tests for SMS part calculation."""

    @pytest.mark.parametrize("text,expected", [
        (GSM_TEXT, 1),
        (GSM_EXTENDED_TEXT, 1),
        (UNICODE_TEXT, 1),
        (UNICODE_EXTENDED_TEXT, 2),
    ])
    def test_reference_texts(self, text, expected):
        from messente_core.messaging import calculate_parts

        assert calculate_parts(text) == expected

    @pytest.mark.parametrize("length,expected", [
        (1, 1),
        (160, 1),
        (161, 2),
        (306, 2),
        (307, 3),
    ])
    def test_gsm7_boundaries(self, length, expected):
        from messente_core.messaging import calculate_parts

        assert calculate_parts("a" * length) == expected

    def test_empty_text_is_one_part(self):
        from messente_core.messaging import calculate_parts

        assert calculate_parts("") == 1

    def test_extended_characters_fill_single_part(self):
        """An extended character takes two of the 160 units."""
        from messente_core.messaging import calculate_parts

        assert calculate_parts("€" + "a" * 158) == 1
        assert calculate_parts("€" + "a" * 159) == 2

    def test_escape_at_part_boundary_shifts_split(self):
        """An escape at the last unit of a part moves to the next part."""
        from messente_core.messaging import calculate_parts

        # Escaped length 306 fits two parts, but the escape lands on unit 153
        assert calculate_parts("a" * 152 + "€" + "a" * 152) == 3

    def test_escape_past_boundary_keeps_split(self):
        from messente_core.messaging import calculate_parts

        assert calculate_parts("a" * 153 + "€" + "a" * 151) == 2

    @pytest.mark.parametrize("length,expected", [
        (70, 1),
        (71, 2),
        (134, 2),
        (135, 3),
    ])
    def test_ucs2_boundaries(self, length, expected):
        from messente_core.messaging import calculate_parts

        assert calculate_parts("Õ" * length) == expected

    def test_calculate_segments(self):
        """Should return parts, encoding and billable characters."""
        from messente_core.messaging import calculate_segments, EncodingType

        parts, encoding, chars = calculate_segments(UNICODE_EXTENDED_TEXT)

        assert parts == 2
        assert encoding == EncodingType.UCS2
        assert chars == 93

    def test_estimate_cost(self):
        from messente_core.messaging import estimate_cost

        assert estimate_cost("a" * 161, 0.05) == pytest.approx(0.10)


class TestPhoneUtils:
    """Tests for phone number normalization."""

    def test_normalize_phone(self):
        """Should keep only digits behind a single plus sign."""
        from messente_core.messaging import normalize_phone

        assert normalize_phone("+372 5123 456") == "+3725123456"
        assert normalize_phone("(372) 5123-456") == "+3725123456"

    def test_normalize_is_idempotent(self):
        from messente_core.messaging import normalize_phone

        once = normalize_phone("00 372 5123456")
        assert normalize_phone(once) == once

    def test_phone_digits(self):
        from messente_core.messaging import phone_digits

        assert phone_digits("abc") == ""
