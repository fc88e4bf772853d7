import pytest

from cubemaze.image import Image

IM1_SX = 42
IM1_SY = 42


def _color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_layout():
    img = Image(IM1_SX, IM1_SY)
    assert img.bpp == 32
    assert img.size_line >= IM1_SX * 4
    assert len(img.data) == img.size_line * IM1_SY
    assert not any(img.data)


@pytest.mark.parametrize("endian", [0, 1])
def test_fill_with_color_map_round_trips(endian):
    img = Image(IM1_SX, IM1_SY, endian=endian)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            img.put_pixel(x, y, _color_map(x, y, IM1_SX, IM1_SY))
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            assert img.get_pixel(x, y) == _color_map(x, y, IM1_SX, IM1_SY)


def test_corner_of_color_map_is_red():
    img = Image(IM1_SX, IM1_SY)
    img.put_pixel(0, 0, _color_map(0, 0, IM1_SX, IM1_SY))
    assert img.get_pixel(0, 0) == 0xFF0000
    assert img.to_rgb_bytes()[:3] == b"\xff\x00\x00"


def test_little_endian_byte_order():
    img = Image(2, 1, endian=0)
    img.put_pixel(1, 0, 0x11223344)
    assert bytes(img.data[4:8]) == b"\x44\x33\x22\x11"


def test_big_endian_byte_order():
    img = Image(2, 1, endian=1)
    img.put_pixel(1, 0, 0x11223344)
    assert bytes(img.data[4:8]) == b"\x11\x22\x33\x44"


@pytest.mark.parametrize("endian", [0, 1])
def test_to_rgb_bytes_drops_alpha(endian):
    img = Image(2, 2, endian=endian)
    img.put_pixel(1, 1, 0xFF123456)
    rgb = img.to_rgb_bytes()
    assert len(rgb) == 2 * 2 * 3
    assert rgb[9:12] == b"\x12\x34\x56"
    assert rgb[:9] == bytes(9)


def test_negative_color_is_masked():
    img = Image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
def test_bad_size(size):
    with pytest.raises(ValueError):
        Image(*size)


def test_bad_endian():
    with pytest.raises(ValueError):
        Image(3, 3, endian=2)


@pytest.mark.parametrize("point", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_bounds(point):
    img = Image(3, 3)
    with pytest.raises(IndexError):
        img.put_pixel(*point, 0)
    with pytest.raises(IndexError):
        img.get_pixel(*point)