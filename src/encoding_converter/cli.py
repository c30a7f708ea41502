# encoding_converter/cli.py
from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Iterable, Sequence

from .__about__ import APP_TITLE, __version__
from .converter import DEFAULT_MODE, ConversionResult, InputMode, convert
from .logic import (
    ConversionError,
    bits_to_hex,
    encode,
    int_to_decimal,
    parse_decimal_literal,
    require_text,
)

COMMANDS = ("convert", "encode", "modes")
TOP_LEVEL_FLAGS = ("-v", "--verbose")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1

def _print_result(result: ConversionResult) -> None:
    _print_kv("Decimal", result.decimal)
    _print_kv("Width", str(result.width))
    _print_kv("Sign-magnitude", [result.sign_magnitude_bits, f"0x{result.sign_magnitude_hex}"])
    _print_kv("Ones' complement", [result.ones_bits, f"0x{result.ones_hex}"])
    _print_kv("Twos' complement", [result.twos_bits, f"0x{result.twos_hex}"])


# ---------- subcommands ----------
def cmd_convert(args: argparse.Namespace) -> int:
    src = args.text if args.text is not None else sys.stdin.read()
    result = convert(src, args.mode)
    if result.has_error:
        return _fail(result.error)
    _print_result(result)
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    try:
        value = parse_decimal_literal(require_text(args.value))
        encoded = encode(value, args.width)
    except ConversionError as exc:
        logger.debug("encode %r at width %d failed: %s", args.value, args.width, exc)
        return _fail(str(exc))

    _print_kv("Decimal", int_to_decimal(value))
    _print_kv("Width", str(args.width))
    _print_kv("Sign-magnitude", [encoded.sign_magnitude, f"0x{bits_to_hex(encoded.sign_magnitude)}"])
    _print_kv("Ones' complement", [encoded.ones_complement, f"0x{bits_to_hex(encoded.ones_complement)}"])
    _print_kv("Twos' complement", [encoded.twos_complement, f"0x{bits_to_hex(encoded.twos_complement)}"])
    return 0


def cmd_modes(args: argparse.Namespace) -> int:
    for mode in InputMode:
        _print_kv(mode.value, mode.label)
    return 0


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="encoding-converter",
        description=f"{APP_TITLE} (CLI)"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")

    sp = p.add_subparsers(dest="cmd")

    # convert
    pc = sp.add_parser("convert", help="convert text in one input mode to all encodings")
    pc.add_argument("text", nargs="?", help="value like '-5', '1010' or 'F' (read from stdin if omitted)")
    pc.add_argument(
        "--mode",
        choices=[m.value for m in InputMode],
        default=DEFAULT_MODE.value,
        help=f"input mode (default: {DEFAULT_MODE.value}); see the 'modes' command",
    )
    pc.set_defaults(func=cmd_convert)

    # encode
    pe = sp.add_parser("encode", help="encode a decimal integer at an explicit bit width")
    pe.add_argument("value", help="decimal integer, optionally signed")
    pe.add_argument("--width", type=int, required=True, help="bit width (>= 1)")
    pe.set_defaults(func=cmd_encode)

    # modes
    pm = sp.add_parser("modes", help="list the accepted input modes")
    pm.set_defaults(func=cmd_modes)

    return p


def _looks_like_value(arg: str) -> bool:
    return arg not in COMMANDS and (not arg.startswith("-") or re.fullmatch(r"-[0-9]+", arg) is not None)


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Convenience: `encoding-converter [-v] 1234` behaves like `[-v] convert 1234`.
    i = 0
    while i < len(argv) and argv[i] in TOP_LEVEL_FLAGS:
        i += 1
    if i < len(argv) and _looks_like_value(argv[i]):
        argv = argv[:i] + ["convert"] + argv[i:]

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
