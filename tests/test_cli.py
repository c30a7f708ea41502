import io

import pytest

from encoding_converter import __version__
from encoding_converter.cli import main


def test_convert_decimal(capsys):
    assert main(["convert", "-5"]) == 0
    out = capsys.readouterr().out
    assert "Decimal: -5" in out
    assert "Width: 4" in out
    assert "Sign-magnitude: 1101 0xD" in out
    assert "Ones' complement: 1010 0xA" in out
    assert "Twos' complement: 1011 0xB" in out


def test_convert_with_mode(capsys):
    assert main(["convert", "1010", "--mode", "twos-bin"]) == 0
    assert "Decimal: -6" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["1234"], ["-5"], ["FF", "--mode", "twos-hex"]])
def test_bare_value_means_convert(capsys, argv):
    assert main(argv) == 0
    assert "Decimal:" in capsys.readouterr().out


def test_convert_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0F\n"))
    assert main(["convert", "--mode", "sm-hex"]) == 0
    assert "Decimal: 15" in capsys.readouterr().out


def test_convert_error(capsys):
    assert main(["convert", "102", "--mode", "sm-bin"]) == 1
    captured = capsys.readouterr()
    assert captured.err.strip() == "Error: Binary input may only contain 0 or 1."
    assert captured.out == ""


def test_encode_explicit_width(capsys):
    assert main(["encode", "5", "--width", "8"]) == 0
    out = capsys.readouterr().out
    assert "Width: 8" in out
    assert "Twos' complement: 00000101 0x05" in out


def test_encode_out_of_range(capsys):
    assert main(["encode", "8", "--width", "4"]) == 1
    assert "out of range" in capsys.readouterr().err


def test_modes(capsys):
    assert main(["modes"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 7
    assert lines[0].startswith("sm-bin: ")


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "usage:" in out
    assert "Complement Converter (CLI)" in out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv,decimal",
    [(["-v", "-5"], "-5"), (["--verbose", "1234"], "1234"), (["-v", "1010", "--mode", "twos-bin"], "-6")],
)
def test_bare_value_after_verbose_flag(capsys, argv, decimal):
    assert main(argv) == 0
    assert f"Decimal: {decimal}" in capsys.readouterr().out
