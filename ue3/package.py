"""
UE3 Package Reader.

Parses UE3 package files (.upk, .udk, .u) and provides access to the
package summary, the name table, the import table and the package GUID.

Every table is located through the variable-length folder name at 0x0C:
its size is read, skipped, and the table's count/offset pair is read at a
fixed distance past it.
"""

from typing import List, Optional, Tuple

from .errors import PackageUnreadable, TruncatedInput
from .filesystem import open_file_for_read
from .layout import (
    GUID_OFFSET,
    IMPORT_COUNT_OFFSET,
    ImportEntry,
    NAME_COUNT_OFFSET,
    PackageSummary,
    PREFIX_SIZE_OFFSET,
    SIGNATURE,
    TableLocation,
)
from .names import NameTable, package_base_name
from .reader import BinaryReader
from .types import Guid, ImportRecord, PackageExtension


def seek_past_prefix(r: BinaryReader, relative_offset: int):
    """Seek to relative_offset bytes past the end of the header prefix."""
    r.seek(PREFIX_SIZE_OFFSET)
    prefix_size = r.read_uint32()
    r.skip(prefix_size + relative_offset)


def read_table_location(r: BinaryReader, relative_offset: int) -> Tuple[int, int]:
    """Read a (count, offset) pair located past the header prefix."""
    seek_past_prefix(r, relative_offset)
    location = r.read_struct(TableLocation)
    return location.count, location.offset


def read_name_table(r: BinaryReader) -> NameTable:
    """Decode the name table.

    A truncated table raises TruncatedInput; nothing partial is returned.
    """
    count, offset = read_table_location(r, NAME_COUNT_OFFSET)
    r.seek(offset)
    return NameTable(r.read_name_entry() for _ in range(count))


def read_import_table(r: BinaryReader) -> Tuple[List[ImportRecord], int]:
    """Decode the import table.

    Returns:
        (records in table order, number of root package records)
    """
    count, offset = read_table_location(r, IMPORT_COUNT_OFFSET)
    r.seek(offset)

    imports: List[ImportRecord] = []
    root_count = 0
    for _ in range(count):
        entry = r.read_struct(ImportEntry)
        record = ImportRecord(
            package_name_index=entry.package_name_index,
            class_name_index=entry.class_name_index,
            package_reference=entry.package_reference,
            object_name_index=entry.object_name_index,
        )
        if record.is_root_package:
            root_count += 1
        imports.append(record)
    return imports, root_count


def read_guid(r: BinaryReader) -> Guid:
    """Read the package GUID."""
    seek_past_prefix(r, GUID_OFFSET)
    return r.read_guid()


def read_summary(r: BinaryReader):
    """Parse the complete package summary up to and including the GUID."""
    seek_past_prefix(r, 0)
    if r.remaining() < GUID_OFFSET + 16:
        raise TruncatedInput(f"Package summary needs {GUID_OFFSET + 16} bytes past the prefix", r.tell())
    r.seek(0)
    return r.read_struct(PackageSummary)


def open_package_file(filepath: str):
    """Open a package for binary reading, raising PackageUnreadable on failure."""
    try:
        return open_file_for_read(filepath)
    except OSError as e:
        raise PackageUnreadable(filepath, e.strerror or str(e)) from e


def read_package_guid(filepath: str) -> Guid:
    """Open a package file and read only its GUID."""
    with open_package_file(filepath) as f:
        return read_guid(BinaryReader(f))


class UE3Package:
    """Parser for UE3 package files (.upk, .udk, .u).

    Parses the package header and provides access to:
    - guid: 128-bit package identifier
    - names: NameTable of all names in the package
    - imports: List of ImportRecord in table order
    - root_import_count: number of imports naming whole packages
    """

    def __init__(self, filepath: str):
        """Load and parse a UE3 package file.

        Args:
            filepath: Path to the package file

        Raises:
            PackageUnreadable: the file could not be opened
            TruncatedInput: a table ran past the end of the file
        """
        self.filepath = filepath
        self.extension = PackageExtension.from_filename(filepath)

        with open_package_file(filepath) as f:
            r = BinaryReader(f)
            self.summary = read_summary(r)
            self.guid = read_guid(r)
            self.names = read_name_table(r)
            self.imports, self.root_import_count = read_import_table(r)

    @property
    def version(self) -> int:
        return self.summary.file_version

    @property
    def licensee(self) -> int:
        return self.summary.licensee_version

    @property
    def has_valid_signature(self) -> bool:
        return self.summary.tag == SIGNATURE

    @property
    def name_index(self) -> Optional[int]:
        """Index of this package's own name, matched from its file name."""
        return self.names.find_for_filename(self.filepath)

    @property
    def name(self) -> str:
        """Package name from the name table, falling back to the file stem."""
        index = self.name_index
        if index is not None:
            return self.names[index]
        return package_base_name(self.filepath)

    def dump_info(self):
        """Print package summary information."""
        print(f"Package: {self.filepath}")
        print(f"  Version: {self.version}/{self.licensee}")
        print(f"  GUID: {self.guid}")
        print(f"  Names: {len(self.names)}")
        print(f"  Imports: {len(self.imports)} ({self.root_import_count} packages)")
        print(f"  Exports: {self.summary.export_count}")
