import numpy as np

from PIL import Image

from .art import pixel_rows, pixel_size
from .errors import FormatError
from .stream import read_exact

PALETTE_SIZE = 256 * 3

def read_palette(fd):
    """256 RGB colours from a PALETTE.DAT style file, scaled from 6 to 8 bits."""
    vga = np.frombuffer(read_exact(fd, PALETTE_SIZE, "truncated palette"), dtype=np.uint8)
    return (vga * 4).reshape(256, 3)

def tile_image(tile, data, palette=None):
    if pixel_size(tile) == 0:
        raise FormatError("empty tile %d (%dx%d)" % (tile.number, tile.width, tile.height))
    rows = np.ascontiguousarray(pixel_rows(tile, data))
    if palette is None:
        return Image.frombytes('L', (tile.width, tile.height), rows.tobytes())
    img = Image.frombytes('P', (tile.width, tile.height), rows.tobytes())
    img.putpalette(palette.tobytes())
    return img
