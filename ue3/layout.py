"""
Fixed binary layouts of the UE3 package format.

All integers are little-endian. Only the variable-length name entries are
decoded by hand (see BinaryReader.read_name_entry).
"""

from construct import (
    Array,
    GreedyBytes,
    Int16ul,
    Int32sl,
    Int32ul,
    Padding,
    Prefixed,
    PrefixedArray,
    Struct,
)

# UE3 package signature
SIGNATURE = 0x9E2A83C1

# Offset of the 32-bit length of the variable-length folder name
PREFIX_SIZE_OFFSET = 0x0C

# Offsets measured from the end of the folder name block
NAME_COUNT_OFFSET = 0x04
IMPORT_COUNT_OFFSET = 0x14
GUID_OFFSET = 0x30

# =============================================================================
# PACKAGE SUMMARY
# =============================================================================

PackageSummary = Struct(
    "tag" / Int32ul,
    "file_version" / Int16ul,
    "licensee_version" / Int16ul,
    "header_size" / Int32ul,
    # 0x0C: length-prefixed folder name; only its size matters
    "folder_name" / Prefixed(Int32ul, GreedyBytes),
    # Offsets below are relative to the end of folder_name
    "package_flags" / Int32ul,      # +0x00
    "name_count" / Int32ul,         # +0x04
    "name_offset" / Int32ul,        # +0x08
    "export_count" / Int32ul,       # +0x0C
    "export_offset" / Int32ul,      # +0x10
    "import_count" / Int32ul,       # +0x14
    "import_offset" / Int32ul,      # +0x18
    "depends_offset" / Int32ul,     # +0x1C
    Padding(GUID_OFFSET - 0x20),
    "guid" / Array(4, Int32ul),     # +0x30
)

# Count/offset pair used to locate the name and import tables
TableLocation = Struct(
    "count" / Int32ul,
    "offset" / Int32ul,
)

# =============================================================================
# IMPORT TABLE
# =============================================================================

# Name references carry an extra 32-bit instance number that is not consumed
ImportEntry = Struct(
    "package_name_index" / Int32ul,
    Padding(4),
    "class_name_index" / Int32ul,
    Padding(4),
    "package_reference" / Int32sl,
    "object_name_index" / Int32ul,
    Padding(4),
)

# =============================================================================
# GUID LISTS
# =============================================================================

# Persisted baseline list and binary dependency list share this layout
GuidList = PrefixedArray(Int32ul, Array(4, Int32ul))
