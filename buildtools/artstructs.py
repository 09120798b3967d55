from construct import *

SUPPORTED_VERSION = 1

# version and the declared tile count, which nothing reads
HEADER_SIZE = 8

ArtVersion = Int32ul

ArtRange = Struct(
    "first" / Int32ul,
    "last"  / Int32ul,
)

# picanm, a little-endian bit field read from the top bit down
PicAnm = ByteSwapped(BitStruct(
    "unused"  / BitsInteger(4),
    "speed"   / BitsInteger(4),
    "yoffset" / BitsInteger(8, signed=True),
    "xoffset" / BitsInteger(8, signed=True),
    "kind"    / BitsInteger(2),
    "frames"  / BitsInteger(6),
))

RANGE_SIZE = ArtRange.sizeof()
PICANM_SIZE = 4

__all__ = [
    "SUPPORTED_VERSION", "HEADER_SIZE", "RANGE_SIZE", "PICANM_SIZE",
    "ArtVersion", "ArtRange", "PicAnm",
]
