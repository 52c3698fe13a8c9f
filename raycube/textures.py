"""Wall textures and colour packing."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from PIL import Image


def pack_rgb(color: Sequence[int], alpha: int) -> int:
    """Pack an (r, g, b) triple and an alpha byte into one 0xAARRGGBB integer."""
    red, green, blue = color
    return alpha << 24 | red << 16 | green << 8 | blue


@dataclass(frozen=True)
class Texture:
    """A rectangular image stored as packed colours, row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("texture dimensions must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y), or 0 when outside the texture."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        return self.pixels[y * self.width + x]


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Load an image file into a Texture.

    Raises OSError when the file is missing or is not a readable image.
    """
    with Image.open(path) as image:
        rgb = image.convert("RGB")
        width, height = rgb.size
        pixels = tuple(pack_rgb(value, 0) for value in rgb.getdata())
    return Texture(width, height, pixels)