from __future__ import annotations

import io
import struct
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest


def make_grp(members: list[tuple[bytes, bytes]], magic: bytes = b"KenSilverman") -> bytes:
    out = io.BytesIO()
    out.write(magic)
    out.write(struct.pack("<I", len(members)))
    for name, data in members:
        out.write(struct.pack("<12sI", name, len(data)))
    for _, data in members:
        out.write(data)
    return out.getvalue()


def make_art(
    first: int,
    last: int,
    widths: list[int],
    heights: list[int],
    picanm: list[int] | None = None,
    pixels: list[bytes] | None = None,
    version: int = 1,
) -> bytes:
    out = io.BytesIO()
    out.write(struct.pack("<4I", version, 0, first, last))
    out.write(struct.pack("<%dh" % len(widths), *widths))
    out.write(struct.pack("<%dh" % len(heights), *heights))
    if picanm is not None:
        out.write(struct.pack("<%dI" % len(picanm), *picanm))
    for data in pixels or ():
        out.write(data)
    return out.getvalue()


@pytest.fixture
def sample_grp() -> bytes:
    return make_grp([(b"A.TXT", b"xyz"), (b"B.TXT\x00\xff\xff", b"hi")])


@pytest.fixture
def sample_art() -> bytes:
    # tile 100 is 2 wide, 3 high; tile 101 is empty; tile 102 is 1x1
    return make_art(
        100,
        102,
        [2, 0, 1],
        [3, 0, 1],
        picanm=[0, 0x0F00FF83, 0],
        pixels=[bytes([1, 2, 3, 4, 5, 6]), bytes([9])],
    )
