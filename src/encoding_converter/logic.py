# encoding_converter/logic.py

from __future__ import annotations

import re
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Tuple

NIBBLE = 4
MIN_INFERRED_WIDTH = 4
HEX_DIGITS = "0123456789ABCDEF"

_BINARY_RE = re.compile(r"[01]+")
_HEX_RE = re.compile(r"[0-9A-Fa-f]+")
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


# ---------------- Errors ----------------
class ConversionError(ValueError):
    """Base class for every input/range problem reported to the user."""


class EmptyInputError(ConversionError):
    pass


class InvalidCharacterError(ConversionError):
    pass


class InvalidNumberError(ConversionError):
    pass


class UnsupportedModeError(ConversionError):
    pass


class RangeError(ConversionError):
    pass


class Encoding(Enum):
    SIGN_MAGNITUDE = "sign-magnitude"
    ONES_COMPLEMENT = "ones' complement"
    TWOS_COMPLEMENT = "twos' complement"


class EncodedBits(NamedTuple):
    sign_magnitude: str
    ones_complement: str
    twos_complement: str


# ---------------- Literal parsing ----------------
def require_text(text: str) -> str:
    """Trim ``text`` and reject empty/whitespace-only input."""
    s = (text or "").strip()
    if not s:
        raise EmptyInputError("Enter a value to convert.")
    return s

def parse_binary_literal(text: str) -> str:
    """Validate a binary literal and return it unchanged as a bit string."""
    if not text:
        raise EmptyInputError("Binary input is empty.")
    if not _BINARY_RE.fullmatch(text):
        raise InvalidCharacterError("Binary input may only contain 0 or 1.")
    return text

def hex_to_bits(text: str) -> str:
    """Expand every hex digit to exactly 4 bits, keeping leading zeros.

    "0F" -> "00001111", "f" -> "1111".
    """
    if not text:
        raise EmptyInputError("Hex input is empty.")
    if not _HEX_RE.fullmatch(text):
        raise InvalidCharacterError("Hex input may only contain 0-9 or A-F.")
    return "".join(f"{int(ch, 16):04b}" for ch in text)

def parse_decimal_literal(text: str) -> int:
    """Parse an optionally signed run of ASCII digits."""
    if not text:
        raise EmptyInputError("Decimal input is empty.")
    if not _DECIMAL_RE.fullmatch(text):
        raise InvalidNumberError("Invalid decimal input.")
    # Decimal has no int<->str digit limit
    return int(Decimal(text))

def int_to_decimal(value: int) -> str:
    """Base-10 text for ``value`` of any size."""
    return str(Decimal(value))


# ---------------- Bit helpers ----------------
def bit_length(value: int) -> int:
    """Bits needed for ``|value|`` in plain binary; 0 needs 0 bits."""
    return abs(value).bit_length()

def bits_to_int(bits: str) -> int:
    """Unsigned base-2 value of ``bits`` (MSB first). Empty string is 0."""
    value = 0
    for ch in bits:
        value = (value << 1) | (ch == "1")
    return value

def invert_bits(bits: str) -> str:
    return "".join("0" if ch == "1" else "1" for ch in bits)

def to_binary(value: int, width: int) -> str:
    """Render a non-negative ``value`` left-padded with zeros to ``width``."""
    return format(value, "b").zfill(width) if value else "0" * width

def twos_range_for(width: int) -> Tuple[int, int]:
    """
    Return the inclusive (lo, hi) twos' complement range for a bit width.

    2's complement:  [-(2^(w-1)), 2^(w-1) - 1]
    """
    _check_width(width)
    return -(1 << (width - 1)), (1 << (width - 1)) - 1

def in_twos_range(value: int, width: int) -> bool:
    lo, hi = twos_range_for(width)
    return lo <= value <= hi

def _check_width(width: int) -> None:
    if width < 1:
        raise RangeError("Bit width must be at least 1.")


# ---------------- Decoding (bits -> int) ----------------
def decode_sign_magnitude(bits: str) -> int:
    """First bit is the sign, the rest is the magnitude. "1000" is 0, not -0."""
    magnitude = bits_to_int(bits[1:])
    if bits[0] == "1" and magnitude:
        return -magnitude
    return magnitude

def decode_ones_complement(bits: str) -> int:
    if bits[0] == "0":
        return bits_to_int(bits)
    # all ones is negative zero, normalize to 0
    magnitude = bits_to_int(invert_bits(bits))
    return -magnitude if magnitude else 0

def decode_twos_complement(bits: str) -> int:
    if bits[0] == "0":
        return bits_to_int(bits)
    return -(bits_to_int(invert_bits(bits)) + 1)

_DECODERS = {
    Encoding.SIGN_MAGNITUDE: decode_sign_magnitude,
    Encoding.ONES_COMPLEMENT: decode_ones_complement,
    Encoding.TWOS_COMPLEMENT: decode_twos_complement,
}

def decode(bits: str, encoding: Encoding) -> int:
    """Interpret a validated bit string under ``encoding``."""
    try:
        decoder = _DECODERS[encoding]
    except KeyError:
        raise UnsupportedModeError(f"Unsupported encoding: {encoding!r}") from None
    return decoder(bits)


# ---------------- Encoding (int -> bits) ----------------
def encode_sign_magnitude(value: int, width: int) -> str:
    _check_width(width)
    if bit_length(value) > width - 1:
        raise RangeError(f"Value out of range for {width}-bit sign-magnitude")
    sign = "1" if value < 0 else "0"
    return sign + to_binary(abs(value), width - 1)

def encode_ones_complement(value: int, width: int) -> str:
    _check_width(width)
    if bit_length(value) > width - 1:
        raise RangeError(f"Value out of range for {width}-bit ones' complement")
    positive = "0" + to_binary(abs(value), width - 1)
    return invert_bits(positive) if value < 0 else positive

def encode_twos_complement(value: int, width: int) -> str:
    if not in_twos_range(value, width):
        raise RangeError(f"Value out of range for {width}-bit twos' complement")
    if value >= 0:
        return to_binary(value, width)
    return to_binary((1 << width) + value, width)

def encode(value: int, width: int) -> EncodedBits:
    """Encode ``value`` at ``width`` in all three encodings (all or nothing)."""
    return EncodedBits(
        sign_magnitude=encode_sign_magnitude(value, width),
        ones_complement=encode_ones_complement(value, width),
        twos_complement=encode_twos_complement(value, width),
    )


# ---------------- Width inference ----------------
def round_up_to_nibble(width: int) -> int:
    return ((width + NIBBLE - 1) // NIBBLE) * NIBBLE

def infer_width(value: int) -> int:
    """
    Pick a hex-aligned width that holds ``value`` in every encoding.

    Start at 1 + bit_length(|value|), round max(that, 4) up to a multiple
    of 4, then widen by 4 until the twos' complement range check passes.
    """
    width = round_up_to_nibble(max(1 + bit_length(value), MIN_INFERRED_WIDTH))
    while not in_twos_range(value, width):
        width += NIBBLE
    return width


# ---------------- Hex rendering ----------------
def sign_extend(bits: str, width: int) -> str:
    """Left-pad ``bits`` to ``width`` with copies of its leading bit."""
    if len(bits) >= width:
        return bits
    pad = "1" if bits.startswith("1") else "0"
    return pad * (width - len(bits)) + bits

def bits_to_hex(bits: str) -> str:
    """Uppercase hex, one digit per nibble, sign-extended to a whole nibble."""
    padded = sign_extend(bits, round_up_to_nibble(len(bits)))
    return "".join(
        HEX_DIGITS[bits_to_int(padded[i : i + NIBBLE])]
        for i in range(0, len(padded), NIBBLE)
    )
