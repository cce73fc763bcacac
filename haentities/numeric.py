"""Fixed-point numbers as exchanged with Home Assistant."""

from __future__ import annotations

import struct

MAX_DIGITS = 19

_INT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63


def _to_int64(value: int) -> int:
    value &= _INT64_MASK
    return value - (1 << 64) if value & _INT64_SIGN else value


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class Numeric:
    """A number stored as an integer base value and a count of decimal digits.

    A base value of ``1234`` with precision ``1`` represents ``123.4``.
    A numeric created without a base value is unset.
    """

    def __init__(self, base_value: int | None = None, precision: int = 0) -> None:
        if precision < 0:
            raise ValueError("precision must not be negative")
        self._is_set = base_value is not None
        self._value = int(base_value) if base_value is not None else 0
        self.precision = precision

    @classmethod
    def from_value(cls, value: int | float, precision: int) -> Numeric:
        """Build a numeric from a plain number, scaling it by the precision."""
        number = cls(0, precision)
        base = number.precision_base()
        if isinstance(value, float):
            scaled = _to_float32(_to_float32(value) * _to_float32(float(base)))
            number._value = int(scaled)
        elif isinstance(value, int):
            number._value = int(value) * base
        else:
            raise TypeError(f"unsupported value type: {type(value).__name__}")
        return number

    @classmethod
    def from_str(cls, data: bytes | bytearray | str) -> Numeric:
        """Parse a base value (an optionally signed run of digits) with precision 0.

        Anything that is not a valid number of at most 19 digits gives an unset numeric.
        """
        raw = data.encode() if isinstance(data, str) else bytes(data)
        if not raw:
            return cls()

        negative = raw[:1] == b"-"
        digits = raw[1:] if negative else raw
        if len(digits) > MAX_DIGITS:
            return cls()
        if any(not 0x30 <= byte <= 0x39 for byte in digits):
            return cls()

        out = _to_int64(int(digits)) if digits else 0
        return cls(_to_int64(-out) if negative else out, 0)

    @property
    def base_value(self) -> int:
        """The integer base value; assigning it marks the number as set."""
        return self._value

    @base_value.setter
    def base_value(self, value: int) -> None:
        self._is_set = True
        self._value = int(value)

    def precision_base(self) -> int:
        """Return the multiplier for the precision: 10, 100 or 1000, else 1."""
        return {1: 10, 2: 100, 3: 1000}.get(self.precision, 1)

    def calculate_size(self) -> int:
        """Return the length of the textual form, or 0 when unset."""
        if not self._is_set:
            return 0
        return len(self.to_str())

    def to_str(self) -> str:
        """Return the decimal text of the number; unset and zero give ``"0"``."""
        if not self._is_set or self._value == 0:
            return "0"

        sign = "-" if self._value < 0 else ""
        digits = str(abs(self._value))
        if self.precision > 0:
            digits = digits.rjust(self.precision + 1, "0")
            digits = f"{digits[:-self.precision]}.{digits[-self.precision:]}"
        return sign + digits

    def is_set(self) -> bool:
        return self._is_set

    def reset(self) -> None:
        """Return the number to the unset state."""
        self._is_set = False
        self._value = 0
        self.precision = 0

    def _is_integer_in(self, low: int, high: int) -> bool:
        return self._is_set and self.precision == 0 and low <= self._value <= high

    def is_uint8(self) -> bool:
        return self._is_integer_in(0, 0xFF)

    def is_uint16(self) -> bool:
        return self._is_integer_in(0, 0xFFFF)

    def is_uint32(self) -> bool:
        return self._is_integer_in(0, 0xFFFFFFFF)

    def is_int8(self) -> bool:
        return self._is_integer_in(-0x80, 0x7F)

    def is_int16(self) -> bool:
        return self._is_integer_in(-0x8000, 0x7FFF)

    def is_int32(self) -> bool:
        return self._is_integer_in(-0x80000000, 0x7FFFFFFF)

    def is_float(self) -> bool:
        return self._is_set and self.precision > 0

    def to_float(self) -> float:
        """Return the represented value as a float."""
        return self._value / float(self.precision_base())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Numeric):
            return NotImplemented
        return (
            self._is_set == other._is_set
            and self._value == other._value
            and self.precision == other.precision
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self._is_set:
            return "Numeric()"
        return f"Numeric({self._value}, precision={self.precision})"