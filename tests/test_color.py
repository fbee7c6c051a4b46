from lumalab.core.color import Color, hex_to_rgb, rgb_to_hex


def test_hex_to_rgb():
    assert hex_to_rgb("FF8800") == (255, 136, 0)
    assert hex_to_rgb("#fff") == (255, 255, 255)
    assert hex_to_rgb("") == (0, 0, 0)


def test_rgb_to_hex_rounds_and_clamps():
    assert rgb_to_hex(255, 136, 0) == "FF8800"
    assert rgb_to_hex(127.6, -4, 300) == "8000FF"


def test_color_from_hex():
    color = Color.from_hex("#00ff80")
    assert color == Color(0, 255, 128)
    assert (color.red, color.green, color.blue) == (0, 255, 128)
    assert color.to_hex() == "00FF80"


def test_color_from_index_clamps():
    assert Color.from_index(16711680) == Color(255, 0, 0)
    assert Color.from_index(-5) == Color(0, 0, 0)
    assert Color.from_index(10 ** 9) == Color(255, 255, 255)


def test_color_is_a_plain_triple():
    r, g, b = Color(1, 2, 3)
    assert (r, g, b) == (1, 2, 3)
