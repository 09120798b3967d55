from construct import *

MAGIC = b"KenSilverman"

GrpHeader = Struct(
    Const(MAGIC),
    "count" / Int32ul,
)

GrpEntryStruct = Struct(
    "name" / Bytes(12),
    "size" / Int32ul,
)

HEADER_SIZE = GrpHeader.sizeof()
ENTRY_SIZE = GrpEntryStruct.sizeof()

__all__ = ["MAGIC", "GrpHeader", "GrpEntryStruct", "HEADER_SIZE", "ENTRY_SIZE"]
