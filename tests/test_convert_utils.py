"""
Tests for ConvertUtils size conversions.
"""
import pytest

from dupfinder.utils.convert_utils import ConvertUtils


class TestBytify:

    @pytest.mark.parametrize("size, expected", [
        (0, (0.0, "B")),
        (1023, (1023.0, "B")),
        (1024, (1.0, "KiB")),
        (1536, (1.5, "KiB")),
        (1048575, (1.0, "MiB")),
        (13002342, (12.4, "MiB")),
        (5 * 1024 ** 3, (5.0, "GiB")),
        (2 * 1024 ** 6, (2.0, "EiB")),
    ])
    def test_bytify(self, size, expected):
        assert ConvertUtils.bytify(size) == expected

    def test_bytify_rejects_negative(self):
        with pytest.raises(ValueError):
            ConvertUtils.bytify(-1)


class TestBytesToHuman:

    @pytest.mark.parametrize("size, expected", [
        (0, "0 B"),
        (1, "1 B"),
        (1023, "1023 B"),
        (2048, "2.0 KiB"),
        (1048575, "1.0 MiB"),
        (13002342, "12.4 MiB"),
        (-5, "0 B"),
    ])
    def test_bytes_to_human(self, size, expected):
        assert ConvertUtils.bytes_to_human(size) == expected


class TestHumanToBytes:

    @pytest.mark.parametrize("text, expected", [
        ("1000", 1000),
        ("1K", 1024),
        ("1KB", 1024),
        ("1KiB", 1024),
        ("1.5MiB", 3 * 1024 * 1024 // 2),
        ("10mb", 10 * 1024 ** 2),
        (" 2 G ", 2 * 1024 ** 3),
        ("512B", 512),
    ])
    def test_valid_formats(self, text, expected):
        assert ConvertUtils.human_to_bytes(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "-1", "-2MB", "1.2.3K", "MB", "infK", "nanM", "1e400K", "inf"])
    def test_invalid_formats(self, text):
        with pytest.raises(ValueError):
            ConvertUtils.human_to_bytes(text)
        assert not ConvertUtils.is_valid_size_format(text)
