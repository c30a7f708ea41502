# encoding_converter/converter.py

"""Text + input mode -> decimal value and all three fixed-width encodings.

``convert`` is the only entry point a front end needs: it is a pure function
with no state between calls, so it can be re-run on every keystroke.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .logic import (
    ConversionError,
    Encoding,
    UnsupportedModeError,
    bits_to_hex,
    decode,
    encode,
    hex_to_bits,
    infer_width,
    int_to_decimal,
    parse_binary_literal,
    parse_decimal_literal,
    require_text,
)

logger = logging.getLogger(__name__)


class Radix(Enum):
    BINARY = "bin"
    HEX = "hex"
    DECIMAL = "dec"


class InputMode(Enum):
    """The seven (encoding, radix) combinations a user can type in."""

    SIGN_MAGNITUDE_BINARY = "sm-bin"
    SIGN_MAGNITUDE_DECIMAL = "sm-dec"
    SIGN_MAGNITUDE_HEX = "sm-hex"
    ONES_BINARY = "ones-bin"
    ONES_HEX = "ones-hex"
    TWOS_BINARY = "twos-bin"
    TWOS_HEX = "twos-hex"

    @property
    def encoding(self) -> Encoding:
        return _MODE_TABLE[self][0]

    @property
    def radix(self) -> Radix:
        return _MODE_TABLE[self][1]

    @property
    def label(self) -> str:
        return _MODE_TABLE[self][2]


_MODE_TABLE: dict[InputMode, Tuple[Encoding, Radix, str]] = {
    InputMode.SIGN_MAGNITUDE_BINARY: (Encoding.SIGN_MAGNITUDE, Radix.BINARY, "Sign-magnitude (binary)"),
    InputMode.SIGN_MAGNITUDE_DECIMAL: (Encoding.SIGN_MAGNITUDE, Radix.DECIMAL, "Sign-magnitude (decimal)"),
    InputMode.SIGN_MAGNITUDE_HEX: (Encoding.SIGN_MAGNITUDE, Radix.HEX, "Sign-magnitude (hex)"),
    InputMode.ONES_BINARY: (Encoding.ONES_COMPLEMENT, Radix.BINARY, "Ones' complement (binary)"),
    InputMode.ONES_HEX: (Encoding.ONES_COMPLEMENT, Radix.HEX, "Ones' complement (hex)"),
    InputMode.TWOS_BINARY: (Encoding.TWOS_COMPLEMENT, Radix.BINARY, "Twos' complement (binary)"),
    InputMode.TWOS_HEX: (Encoding.TWOS_COMPLEMENT, Radix.HEX, "Twos' complement (hex)"),
}

# Decimal, not the form's first dropdown entry (binary): a typed number is
# the common command-line case.
DEFAULT_MODE = InputMode.SIGN_MAGNITUDE_DECIMAL


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one ``convert`` call.

    Either ``error`` is set and every other field is empty, or ``error`` is
    None and all three encodings are filled in at the same ``width``.
    """

    error: Optional[str] = None
    decimal: str = ""
    width: int = 0
    sign_magnitude_bits: str = ""
    sign_magnitude_hex: str = ""
    ones_bits: str = ""
    ones_hex: str = ""
    twos_bits: str = ""
    twos_hex: str = ""

    @classmethod
    def failure(cls, message: str) -> "ConversionResult":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def as_dict(self) -> dict:
        return asdict(self)


def coerce_mode(mode: Union[InputMode, str]) -> InputMode:
    """Accept an ``InputMode`` or its string value (e.g. "twos-bin")."""
    if isinstance(mode, InputMode):
        return mode
    try:
        return InputMode(mode)
    except ValueError:
        raise UnsupportedModeError(f"Unsupported input type: {mode!r}") from None

def parse_input(text: str, mode: InputMode) -> Tuple[int, int]:
    """Return (value, width) for already-trimmed ``text`` under ``mode``.

    Bit-string input fixes the width at its own length; decimal input has
    no width of its own so one is inferred.
    """
    if mode.radix is Radix.DECIMAL:
        value = parse_decimal_literal(text)
        return value, infer_width(value)

    if mode.radix is Radix.HEX:
        bits = hex_to_bits(text)
    else:
        bits = parse_binary_literal(text)
    return decode(bits, mode.encoding), len(bits)

def build_result(value: int, width: int) -> ConversionResult:
    encoded = encode(value, width)
    return ConversionResult(
        decimal=int_to_decimal(value),
        width=width,
        sign_magnitude_bits=encoded.sign_magnitude,
        sign_magnitude_hex=bits_to_hex(encoded.sign_magnitude),
        ones_bits=encoded.ones_complement,
        ones_hex=bits_to_hex(encoded.ones_complement),
        twos_bits=encoded.twos_complement,
        twos_hex=bits_to_hex(encoded.twos_complement),
    )

def convert(input_text: str, mode: Union[InputMode, str] = DEFAULT_MODE) -> ConversionResult:
    """Convert raw user text under ``mode``; errors come back as data."""
    try:
        text = require_text(input_text)
        mode = coerce_mode(mode)
        value, width = parse_input(text, mode)
        result = build_result(value, width)
    except ConversionError as exc:
        logger.debug("rejected %r (%s): %s", input_text, mode, exc)
        return ConversionResult.failure(str(exc))

    logger.debug("converted %r (%s) at width %d", input_text, mode, width)
    return result
