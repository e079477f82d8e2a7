"""
Testy jednostkowe literałów czasu i rozmiaru pamięci.

Moduł testuje:
- parse_duration / format_with_highest_unit z config_commons.config.time_utils
- MemorySize.parse, formatowanie i arytmetykę z config_commons.config.memory_size
"""

from datetime import timedelta

import pytest

from config_commons.config.exceptions import ParseFormatError, RangeOverflowError
from config_commons.config.memory_size import MemorySize, MemoryUnit
from config_commons.config.time_utils import format_with_highest_unit, parse_duration


class TestParseDuration:
    """Testy parsowania literałów czasu."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1 d", timedelta(days=1)),
            ("2days", timedelta(days=2)),
            ("3 h", timedelta(hours=3)),
            ("5 min", timedelta(minutes=5)),
            ("5m", timedelta(minutes=5)),
            ("10 s", timedelta(seconds=10)),
            ("10 SECONDS", timedelta(seconds=10)),
            ("250 ms", timedelta(milliseconds=250)),
            ("7 us", timedelta(microseconds=7)),
            ("7 µs", timedelta(microseconds=7)),
            ("3000 ns", timedelta(microseconds=3)),
            ("42", timedelta(milliseconds=42)),
            ("  15 s  ", timedelta(seconds=15)),
            ("-1 h", timedelta(hours=-1)),
        ],
    )
    def test_valid_literals(self, text, expected):
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "s", "1.5 s", "10 weeks"])
    def test_invalid_literals(self, text):
        with pytest.raises(ParseFormatError):
            parse_duration(text)

    def test_sub_microsecond_nanos_rejected(self):
        with pytest.raises(ParseFormatError, match="microseconds"):
            parse_duration("1500 ns")

    def test_out_of_range(self):
        with pytest.raises(RangeOverflowError):
            parse_duration("9999999999 d")

    def test_literal_beyond_digit_limit(self):
        with pytest.raises(RangeOverflowError):
            parse_duration("9" * 5000 + " s")
        with pytest.raises(RangeOverflowError):
            parse_duration("-" + "9" * 5000)


class TestFormatWithHighestUnit:
    """Testy formatowania czasu."""

    @pytest.mark.parametrize(
        "duration, expected",
        [
            (timedelta(0), "0 ms"),
            (timedelta(days=2), "2 d"),
            (timedelta(hours=36), "36 h"),
            (timedelta(minutes=5), "5 min"),
            (timedelta(seconds=61), "61 s"),
            (timedelta(milliseconds=1500), "1500 ms"),
            (timedelta(microseconds=1), "1 us"),
            (timedelta(minutes=-10), "-10 min"),
        ],
    )
    def test_format(self, duration, expected):
        assert format_with_highest_unit(duration) == expected


class TestMemorySize:
    """Testy klasy MemorySize."""

    @pytest.mark.parametrize(
        "text, expected_bytes",
        [
            ("0", 0),
            ("512", 512),
            ("512 b", 512),
            ("512bytes", 512),
            ("1k", 1024),
            ("1 KB", 1024),
            ("2 kibibytes", 2048),
            ("64 mb", 64 << 20),
            ("1g", 1 << 30),
            ("1 gb", 1 << 30),
            ("2 tb", 2 << 40),
        ],
    )
    def test_parse(self, text, expected_bytes):
        assert MemorySize.parse(text).bytes == expected_bytes

    def test_parse_with_default_unit(self):
        assert MemorySize.parse("4", MemoryUnit.MEGA_BYTES) == MemorySize(4 << 20)
        assert MemorySize.parse("4 b", MemoryUnit.MEGA_BYTES) == MemorySize(4)

    @pytest.mark.parametrize("text", ["", "mb", "1.5 mb", "-1 kb", "10 pb"])
    def test_parse_invalid(self, text):
        with pytest.raises(ParseFormatError):
            MemorySize.parse(text)

    def test_parse_overflow(self):
        with pytest.raises(RangeOverflowError):
            MemorySize.parse("9223372036854775808")
        with pytest.raises(RangeOverflowError):
            MemorySize.parse("9000000 tb")

    def test_parse_beyond_digit_limit(self):
        with pytest.raises(RangeOverflowError):
            MemorySize.parse("9" * 5000)
        with pytest.raises(RangeOverflowError):
            MemorySize.parse("1" + "0" * 5000 + " kb")

    def test_constructor_overflow_beyond_digit_limit(self):
        with pytest.raises(RangeOverflowError):
            MemorySize(10**5000)

    @pytest.mark.parametrize(
        "num_bytes, expected",
        [
            (0, "0 bytes"),
            (100, "100 bytes"),
            (1024, "1 kb"),
            (1536, "1536 bytes"),
            (3 << 20, "3 mb"),
            (5 << 30, "5 gb"),
            (1 << 40, "1 tb"),
        ],
    )
    def test_canonical_string(self, num_bytes, expected):
        assert str(MemorySize(num_bytes)) == expected

    def test_human_readable_string(self):
        assert MemorySize(100).to_human_readable_string() == "100 bytes"
        assert MemorySize(1536).to_human_readable_string() == "1.500kb (1536 bytes)"
        assert MemorySize.MAX_VALUE.to_human_readable_string() == "infinite"

    def test_unit_accessors(self):
        size = MemorySize(3 << 30)
        assert size.gibi_bytes == 3
        assert size.mebi_bytes == 3 * 1024
        assert size.kibi_bytes == 3 * 1024 * 1024
        assert size.tebi_bytes == 0

    def test_arithmetic_and_ordering(self):
        one_mb = MemorySize.of_mebi_bytes(1)
        assert one_mb.add(one_mb) == MemorySize.of_mebi_bytes(2)
        assert one_mb.subtract(MemorySize(1024)).bytes == (1 << 20) - 1024
        assert one_mb.multiply(1.5).bytes == 3 << 19
        assert one_mb.divide(4).bytes == 1 << 18
        assert MemorySize.ZERO < one_mb
        assert sorted([one_mb, MemorySize.ZERO]) == [MemorySize.ZERO, one_mb]

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            MemorySize(-1)
        with pytest.raises(ValueError):
            MemorySize.ZERO.subtract(MemorySize(1))
