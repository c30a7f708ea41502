# encoding_converter/__init__.py

"""Encoding Converter package.

Re-exports the converter and the bit-level logic for convenient imports in
tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
)

from .logic import (
    ConversionError,
    EmptyInputError,
    InvalidCharacterError,
    InvalidNumberError,
    UnsupportedModeError,
    RangeError,
    Encoding,
    EncodedBits,
    bit_length,
    bits_to_hex,
    bits_to_int,
    decode,
    encode,
    hex_to_bits,
    infer_width,
    int_to_decimal,
    parse_binary_literal,
    parse_decimal_literal,
    twos_range_for,
)

from .converter import (
    DEFAULT_MODE,
    ConversionResult,
    InputMode,
    Radix,
    convert,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR",
    # Errors
    "ConversionError", "EmptyInputError", "InvalidCharacterError",
    "InvalidNumberError", "UnsupportedModeError", "RangeError",
    # Logic
    "Encoding", "EncodedBits",
    "bit_length", "bits_to_hex", "bits_to_int", "decode", "encode",
    "hex_to_bits", "infer_width", "int_to_decimal", "parse_binary_literal",
    "parse_decimal_literal", "twos_range_for",
    # Converter
    "DEFAULT_MODE", "ConversionResult", "InputMode", "Radix", "convert",
]
