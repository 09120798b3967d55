from .errors import BuildError, ReadError, FormatError, VersionError
from .grp import GrpFileReader, GrpEntry
from .art import ArtFileReader, ArtTile, TileAnimation

__all__ = [
    "BuildError", "ReadError", "FormatError", "VersionError",
    "GrpFileReader", "GrpEntry",
    "ArtFileReader", "ArtTile", "TileAnimation",
]
