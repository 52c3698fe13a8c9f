import pytest
from PIL import Image

from raycube.textures import Texture, load_texture, pack_rgb


def test_pack_rgb_pure_channels():
    assert pack_rgb((255, 0, 0), 0) == 0xFF0000
    assert pack_rgb((0, 0, 255), 0) == 0x0000FF


@pytest.mark.parametrize("color", [(1, 2, 3), (220, 100, 0), (0, 0, 0), (255, 255, 255)])
def test_pack_rgb_channels_recoverable(color):
    packed = pack_rgb(color, 0)
    assert ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF) == color
    assert packed >> 24 == 0


def test_pack_rgb_alpha_in_top_byte():
    packed = pack_rgb((10, 20, 30), 7)
    assert packed >> 24 == 7
    assert packed & 0xFFFFFF == pack_rgb((10, 20, 30), 0)


def test_texture_pixel_in_bounds():
    texture = Texture(2, 2, (10, 11, 12, 13))
    assert texture.pixel(0, 0) == 10
    assert texture.pixel(1, 0) == 11
    assert texture.pixel(0, 1) == 12
    assert texture.pixel(1, 1) == 13


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2), (5, 5)])
def test_texture_pixel_out_of_bounds_is_zero(x, y):
    texture = Texture(2, 2, (10, 11, 12, 13))
    assert texture.pixel(x, y) == 0


def test_texture_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Texture(2, 2, (1, 2, 3))


def test_load_texture_reads_pixels(tmp_path):
    path = tmp_path / "wall.png"
    image = Image.new("RGB", (3, 2), (0, 0, 0))
    image.putpixel((2, 1), (12, 34, 56))
    image.putpixel((0, 0), (200, 100, 50))
    image.save(path)

    texture = load_texture(path)

    assert (texture.width, texture.height) == (3, 2)
    assert texture.pixel(2, 1) == pack_rgb((12, 34, 56), 0)
    assert texture.pixel(0, 0) == pack_rgb((200, 100, 50), 0)
    assert texture.pixel(1, 0) == pack_rgb((0, 0, 0), 0)
    assert len(texture.pixels) == 6


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_texture(tmp_path / "missing.xpm")


def test_load_texture_not_an_image(tmp_path):
    path = tmp_path / "bad.xpm"
    path.write_text("this is not an image")
    with pytest.raises(OSError):
        load_texture(path)