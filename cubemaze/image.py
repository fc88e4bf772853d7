"""In-memory 32-bit pixel images."""

from __future__ import annotations

from dataclasses import dataclass, field

_BITS_PER_PIXEL = 32


@dataclass
class Image:
    """A width x height image stored as 32-bit pixels, one row after another.

    ``endian`` 0 stores each pixel least significant byte first (B, G, R, A);
    ``endian`` 1 stores it most significant byte first (A, R, G, B).
    """

    width: int
    height: int
    endian: int = 0
    bpp: int = field(default=_BITS_PER_PIXEL, init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {self.endian}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def size_line(self):
        """Number of bytes in one row."""
        return self.width * self.bpp // 8

    @property
    def _byteorder(self):
        return "big" if self.endian else "little"

    def _offset(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.size_line + x * (self.bpp // 8)

    def put_pixel(self, x, y, color):
        """Store a 32-bit colour value at column x, row y."""
        offset = self._offset(x, y)
        opp = self.bpp // 8
        self.data[offset:offset + opp] = (color & 0xFFFFFFFF).to_bytes(
            opp, self._byteorder
        )

    def get_pixel(self, x, y):
        """Return the 32-bit colour value at column x, row y."""
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + self.bpp // 8], self._byteorder
        )

    def to_rgb_bytes(self):
        """Return the pixels as packed R, G, B bytes, row by row."""
        out = bytearray(self.width * self.height * 3)
        if self.endian:
            red, green, blue = self.data[1::4], self.data[2::4], self.data[3::4]
        else:
            red, green, blue = self.data[2::4], self.data[1::4], self.data[0::4]
        out[0::3] = red
        out[1::3] = green
        out[2::3] = blue
        return bytes(out)