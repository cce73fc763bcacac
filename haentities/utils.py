"""Small string helpers."""

from __future__ import annotations

from . import dictionary as d


def ends_with(string: str | None, suffix: str | None) -> bool:
    """Return True if ``string`` ends with ``suffix``.

    Missing or empty arguments, and a suffix longer than the string, give False.
    """
    if string is None or suffix is None:
        return False
    if not string or not suffix or len(suffix) > len(string):
        return False
    return string.endswith(suffix)


def byte_array_to_str(data: bytes | bytearray | memoryview) -> str:
    """Return the lowercase hex representation of ``data``, two characters per byte."""
    return "".join(
        d.HEX_MAP[(byte & 0xF0) >> 4] + d.HEX_MAP[byte & 0x0F] for byte in bytes(data)
    )