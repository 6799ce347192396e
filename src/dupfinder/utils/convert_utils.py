"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import math
from typing import Tuple


class ConvertUtils:
    BINARY_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]

    @staticmethod
    def bytify(size_bytes: int) -> Tuple[float, str]:
        """
        Split a byte count into (value, binary unit), value rounded to one decimal.
        bytify(13002342) -> (12.4, "MiB")
        """
        if size_bytes < 0:
            raise ValueError(f"Negative size not allowed: {size_bytes}")

        value = float(size_bytes)
        for unit in ConvertUtils.BINARY_UNITS[:-1]:
            if round(value, 1) < 1024:
                return round(value, 1), unit
            value /= 1024
        return round(value, 1), ConvertUtils.BINARY_UNITS[-1]

    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 512 B, 12.4 MiB).
        """
        if size_bytes < 0:
            return "0 B"

        value, unit = ConvertUtils.bytify(size_bytes)
        if unit == "B":
            return f"{int(value)} {unit}"
        return f"{value:.1f} {unit}"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert human-readable size string to bytes.
        Supports formats: '1.5GB', '2048KB', '1000', '1K', '1M', '1MiB', etc.
        All multiples are binary (1K == 1KB == 1KiB == 1024).
        Raises ValueError for negative sizes or invalid formats.
        """
        size_str = size_str.strip().upper()

        # Define units with full (KIB), short (KB) and single-letter (K) forms
        units = {}
        for power, letter in enumerate("KMGTPE", start=1):
            for suffix in (f"{letter}IB", f"{letter}B", letter):
                units[suffix] = 1024 ** power
        units['B'] = 1

        # Check for unit suffix (longest first to avoid 'KB' matching as 'K' + 'B')
        for unit in sorted(units.keys(), key=len, reverse=True):
            if size_str.endswith(unit):
                value_str = size_str[:-len(unit)].strip()
                try:
                    value = float(value_str)
                except ValueError:
                    raise ValueError(f"Invalid numeric value in size: '{value_str}'")

                if value < 0:
                    raise ValueError(f"Negative size not allowed: '{size_str}'")
                size = value * units[unit]
                if not math.isfinite(size):
                    raise ValueError(f"Size is not a finite number: '{size_str}'")
                return int(size)

        # No unit specified, treat as bytes
        try:
            value = int(size_str)
        except ValueError:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 1.5GB, 2048KB, 1000, 1K, 1MiB, etc."
            )

        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return value

    @staticmethod
    def is_valid_size_format(size_str: str) -> bool:
        """
        Check if the input string has a valid size format.
        """
        try:
            ConvertUtils.human_to_bytes(size_str)
            return True
        except ValueError:
            return False
