import pytest

@pytest.mark.parametrize(
    "bits,expected",
    [("0", 0), ("1", 1), ("", 0), ("1010", 10), ("00000101", 5), ("1" * 64, 2**64 - 1)],
)
def test_bits_to_int(logic, bits, expected):
    assert logic.bits_to_int(bits) == expected

@pytest.mark.parametrize(
    "bits,expected",
    [
        ("0101", 5),
        ("1101", -5),
        ("0111", 7),
        ("1111", -7),
        ("0", 0),
        ("1", 0),        # width 1: empty magnitude
        ("1000", 0),     # negative zero
        ("10000000", 0),
    ],
)
def test_decode_sign_magnitude(logic, bits, expected):
    assert logic.decode_sign_magnitude(bits) == expected

@pytest.mark.parametrize(
    "bits,expected",
    [
        ("0101", 5),
        ("1010", -5),
        ("0111", 7),
        ("1000", -7),
        ("1111", 0),     # negative zero
        ("1", 0),
        ("11111110", -1),
    ],
)
def test_decode_ones_complement(logic, bits, expected):
    assert logic.decode_ones_complement(bits) == expected

@pytest.mark.parametrize(
    "bits,expected",
    [
        ("0101", 5),
        ("1011", -5),
        ("1010", -6),
        ("0111", 7),
        ("1000", -8),
        ("1111", -1),
        ("1", -1),
        ("0", 0),
        ("1" + "0" * 127, -(2**127)),
    ],
)
def test_decode_twos_complement(logic, bits, expected):
    assert logic.decode_twos_complement(bits) == expected

@pytest.mark.parametrize("width", [1, 2, 4, 9, 33])
def test_decode_negative_zero_is_zero(logic, width):
    sign_only = "1" + "0" * (width - 1)
    all_ones = "1" * width
    assert logic.decode(sign_only, logic.Encoding.SIGN_MAGNITUDE) == 0
    assert logic.decode(all_ones, logic.Encoding.ONES_COMPLEMENT) == 0

def test_decode_dispatch(logic):
    assert logic.decode("1010", logic.Encoding.SIGN_MAGNITUDE) == -2
    assert logic.decode("1010", logic.Encoding.ONES_COMPLEMENT) == -5
    assert logic.decode("1010", logic.Encoding.TWOS_COMPLEMENT) == -6

def test_decode_unsupported_encoding(logic):
    with pytest.raises(logic.UnsupportedModeError):
        logic.decode("1010", "unsigned")
