import pytest

from rasterpad.app import _parse_args, color_to_hex


def test_blue_formats_as_hex_rgb():
    assert color_to_hex((0, 0, 255)) == "#0000ff"


def test_alpha_is_ignored():
    assert color_to_hex((0, 0, 255, 10)) == color_to_hex((0, 0, 255))


@pytest.mark.parametrize("color", [(0, 0, 0), (255, 255, 255), (18, 52, 86), (171, 205, 239)])
def test_hex_round_trip(color):
    text = color_to_hex(color)
    assert len(text) == 7 and text.startswith("#")
    assert tuple(int(text[i:i + 2], 16) for i in (1, 3, 5)) == color


@pytest.mark.parametrize("color", [(0, 0), (1, 2, 3, 4, 5), (256, 0, 0), (0, -1, 0)])
def test_invalid_colour_rejected(color):
    with pytest.raises(ValueError):
        color_to_hex(color)


def test_default_canvas_size():
    args = _parse_args([])
    assert (args.width, args.height) == (500, 500)


def test_custom_canvas_size():
    args = _parse_args(["--width", "64", "--height", "32"])
    assert (args.width, args.height) == (64, 32)


def test_non_positive_size_rejected():
    with pytest.raises(SystemExit):
        _parse_args(["--width", "0"])