from construct import ConstError, StreamError

from .errors import ReadError, FormatError

# bounds a single read, a corrupt size field can ask for gigabytes
CHUNK_SIZE = 1 << 20

def seek(fd, offset, what):
    try:
        fd.seek(offset)
    except (OSError, ValueError) as e:
        raise ReadError(what) from e

def read_exact(fd, size, what):
    chunks = []
    remaining = size
    try:
        while remaining:
            chunk = fd.read(min(remaining, CHUNK_SIZE))
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
    except OSError as e:
        raise ReadError(what) from e
    if remaining:
        raise ReadError("%s (wanted %d bytes, got %d)" % (what, size, size - remaining))
    return b"".join(chunks)

def parse(struct, fd, what, magic="bad magic"):
    # construct reports short reads as StreamError and Const mismatches
    # as ConstError
    try:
        return struct.parse_stream(fd)
    except ConstError as e:
        raise FormatError(magic) from e
    except (StreamError, OSError) as e:
        raise ReadError(what) from e
