"""Reader for .art tile files from the Build engine.

An .art file declares a contiguous range of tile numbers. After the range
come two parallel runs, every tile width followed by every tile height,
then one animation word per tile and finally the pixels of each tile.

See https://moddingwiki.shikadi.net/wiki/ART_Format_(Build)
"""

import logging

import numpy as np

from collections import namedtuple
from itertools import accumulate

from .artstructs import (SUPPORTED_VERSION, HEADER_SIZE, RANGE_SIZE,
                         PICANM_SIZE, ArtVersion, ArtRange, PicAnm)
from .errors import FormatError, VersionError
from .stream import seek, read_exact, parse

logger = logging.getLogger(__name__)

int16sl = np.dtype("<i2")

ArtTile = namedtuple("ArtTile", "number width height")
TileAnimation = namedtuple("TileAnimation", "frames kind xoffset yoffset speed")

ANIM_NONE, ANIM_OSCILLATE, ANIM_FORWARD, ANIM_BACKWARD = range(4)

def pixel_size(tile):
    if tile.width <= 0 or tile.height <= 0:
        return 0
    return tile.width * tile.height

def pixel_rows(tile, data):
    """Column-major tile pixels as a (height, width) array."""
    return np.frombuffer(data, dtype=np.uint8).reshape(tile.width, tile.height).transpose()

class ArtFileReader:
    __slots__ = "fd", "version"

    def __init__(self, fd):
        self.fd = fd
        self.version = parse(ArtVersion, fd, "truncated header")
        if self.version != SUPPORTED_VERSION:
            raise VersionError(self.version, SUPPORTED_VERSION)

    def _range(self):
        seek(self.fd, HEADER_SIZE, "truncated tile record")
        rng = parse(ArtRange, self.fd, "truncated tile record")
        if rng.last < rng.first:
            raise FormatError("invalid tile range %d..%d" % (rng.first, rng.last))
        return rng.first, rng.last - rng.first + 1

    def _run(self, count, what):
        data = read_exact(self.fd, count * int16sl.itemsize, what)
        return np.frombuffer(data, dtype=int16sl)

    def tiles(self):
        first, count = self._range()
        logger.debug("art tiles %d..%d", first, first + count - 1)
        widths = self._run(count, "truncated tile record")
        heights = self._run(count, "truncated tile record")
        return [ArtTile(first + k, int(w), int(h))
                for k, (w, h) in enumerate(zip(widths, heights))]

    def find_tile(self, number):
        for tile in self.tiles():
            if tile.number == number:
                return tile
        return None

    def animations(self):
        _, count = self._range()
        seek(self.fd, HEADER_SIZE + RANGE_SIZE + 4 * count, "truncated tile animation")
        data = read_exact(self.fd, count * PICANM_SIZE, "truncated tile animation")
        return [TileAnimation(a.frames, a.kind, a.xoffset, a.yoffset, a.speed)
                for a in PicAnm[count].parse(data)]

    def pixel_offsets(self, tiles):
        """Where each tile's pixels start, in tile order."""
        count = len(tiles)
        start = HEADER_SIZE + RANGE_SIZE + (4 + PICANM_SIZE) * count
        return list(accumulate(map(pixel_size, tiles), initial=start))[:-1]

    def read_pixels(self, tile):
        tiles = self.tiles()
        index = tile.number - tiles[0].number
        if not 0 <= index < len(tiles):
            raise FormatError("tile %d is outside %d..%d"
                              % (tile.number, tiles[0].number, tiles[-1].number))
        offset = self.pixel_offsets(tiles)[index]
        seek(self.fd, offset, "truncated tile pixels")
        return read_exact(self.fd, pixel_size(tiles[index]), "truncated tile pixels")
