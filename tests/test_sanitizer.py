import argparse

import pytest

from lumalab.shared.sanitizer import INPUT_HANDLERS, normalize_hex


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("#ff8800", "FF8800"),
        ("abc", "AABBCC"),
        ("f", "FFFFFF"),
        ("ab", "ABABAB"),
        ("abcd", "ABCD00"),
        ("1234567", "123456"),
        ("zz", ""),
        (None, ""),
    ],
)
def test_normalize_hex(raw, expected):
    assert normalize_hex(raw) == expected


def test_handle_hex_rejects_garbage():
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["hex"]("xyz")


def test_handle_rgb_clamps_channels():
    assert INPUT_HANDLERS["rgb"]("rgb(300, 136.4, -2)") == (255, 136, 0)


def test_handle_rgb_needs_three_values():
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["rgb"]("255, 0")


def test_handle_weights_preserves_sign():
    assert INPUT_HANDLERS["weights"]("-0.1, 0.5, .6") == (-0.1, 0.5, 0.6)


def test_handle_weights_needs_three_values():
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["weights"]("0.5 0.5")


def test_handle_preset():
    assert INPUT_HANDLERS["preset"]("BT.601") == "bt601"
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["preset"]("srgb")


def test_handle_tolerance():
    assert INPUT_HANDLERS["tolerance"]("1e-9") == 1e-9
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["tolerance"]("-1")
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["tolerance"]("none")


def test_handle_decimal_index_clamps():
    assert INPUT_HANDLERS["decimal_index"]("16711680") == "FF0000"
    assert INPUT_HANDLERS["decimal_index"]("99999999") == "FFFFFF"


def test_handle_weights_rejects_overflowing_values():
    with pytest.raises(argparse.ArgumentTypeError, match="finite"):
        INPUT_HANDLERS["weights"]("1e309 0 0")


def test_handle_tolerance_rejects_overflowing_values():
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["tolerance"]("1e400")


def test_handle_rgb_clamps_overflowing_values():
    assert INPUT_HANDLERS["rgb"]("1e400, 0, 0") == (255, 0, 0)


def test_handle_seed_clamps_to_max():
    assert INPUT_HANDLERS["seed"]("-42") == 42
    assert INPUT_HANDLERS["seed"]("9" * 30) == 999_999_999_999_999_999
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["seed"]("abc")
