"""Reader for .grp archives, the flat container used by the Build engine.

A .grp file is a 16 byte header (the "KenSilverman" magic and a member
count) followed by one 16 byte directory record per member and then the
member payloads, back to back in directory order. Payload offsets are not
stored anywhere; they are the running sum of the sizes before them.

See https://moddingwiki.shikadi.net/wiki/GRP_Format
"""

import logging

from collections import namedtuple
from itertools import accumulate

from .grpstructs import GrpHeader, GrpEntryStruct, HEADER_SIZE, ENTRY_SIZE
from .stream import seek, read_exact, parse

logger = logging.getLogger(__name__)

def decode_name(raw):
    # one byte per character, the name ends at the first NUL
    return raw.split(b"\x00", 1)[0].decode("latin-1")

class GrpEntry(namedtuple("GrpEntry", "rawname size offset")):
    __slots__ = ()

    @property
    def name(self):
        return decode_name(self.rawname)

    @property
    def end(self):
        return self.offset + self.size

def member_offsets(sizes, count):
    """Offset of each member given the directory sizes, in directory order."""
    start = HEADER_SIZE + count * ENTRY_SIZE
    return list(accumulate(sizes, initial=start))[:-1]

class GrpFileReader:
    __slots__ = "fd", "_count"

    def __init__(self, fd):
        self.fd = fd
        hdr = parse(GrpHeader, fd, "truncated header")
        self._count = hdr.count
        logger.debug("grp header: %d members", self._count)

    @property
    def count(self):
        return self._count

    def entries(self):
        seek(self.fd, HEADER_SIZE, "truncated directory entry")
        records = [parse(GrpEntryStruct, self.fd, "truncated directory entry")
                   for _ in range(self.count)]
        offsets = member_offsets([r.size for r in records], self.count)
        return [GrpEntry(r.name, r.size, offset)
                for r, offset in zip(records, offsets)]

    def find_entry(self, name):
        """First entry named *name* in directory order, or None."""
        for entry in self.entries():
            if entry.name == name:
                return entry
        return None

    def read(self, entry):
        seek(self.fd, entry.offset, "truncated member payload")
        return read_exact(self.fd, entry.size, "truncated member payload")

    def __iter__(self):
        return iter(self.entries())

    def __len__(self):
        return self.count
