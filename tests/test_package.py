"""Tests for package header, name table, import table and GUID decoding."""

import pytest

from tests.conftest import GUID_A, build_package
from ue3.errors import PackageUnreadable, TruncatedInput
from ue3.package import (
    UE3Package,
    read_guid,
    read_import_table,
    read_name_table,
    read_package_guid,
)
from ue3.reader import BinaryReader
from ue3.types import Guid, ImportRecord, PackageExtension


def test_name_table_indices_are_stable(level_imports) -> None:
    """Verify that names decode in order with indices 0..count-1."""
    names, imports = level_imports
    table = read_name_table(BinaryReader.from_bytes(build_package(names, imports)))
    assert len(table) == len(names)
    assert [table[i] for i in range(len(names))] == list(names)


def test_name_table_decoding_is_deterministic(level_imports) -> None:
    """Verify that decoding the same bytes twice gives the same table."""
    data = build_package(*level_imports)
    first = read_name_table(BinaryReader.from_bytes(data))
    second = read_name_table(BinaryReader.from_bytes(data))
    assert first == second


def test_folder_name_length_shifts_tables() -> None:
    """Verify that tables are found past a prefix of any length."""
    data = build_package(("None", "Engine"), folder=b"A" * 37 + b"\x00", guid=GUID_A)
    r = BinaryReader.from_bytes(data)
    assert list(read_name_table(r)) == ["None", "Engine"]
    assert read_guid(r) == Guid(*GUID_A)


def test_import_table_records_and_root_count(level_imports) -> None:
    """Verify record order, field values and the root import count."""
    data = build_package(*level_imports)
    imports, root_count = read_import_table(BinaryReader.from_bytes(data))
    assert imports == [
        ImportRecord(1, 2, 0, 3),
        ImportRecord(1, 2, 0, 4),
        ImportRecord(1, 6, 5, 5),
    ]
    assert root_count == 2
    assert [i.is_root_package for i in imports] == [True, True, False]


def test_truncated_name_table_raises() -> None:
    """Verify that a name table cut short is rejected as a whole."""
    data = build_package(("None", "Core", "Engine"))
    with pytest.raises(TruncatedInput):
        read_name_table(BinaryReader.from_bytes(data[:-10]))


def test_truncated_import_table_raises(level_imports) -> None:
    """Verify that an import table cut short raises TruncatedInput."""
    data = build_package(*level_imports)
    with pytest.raises(TruncatedInput):
        read_import_table(BinaryReader.from_bytes(data[:-4]))


def test_truncated_header_raises() -> None:
    """Verify that a file too short to hold the prefix size is rejected."""
    with pytest.raises(TruncatedInput):
        read_guid(BinaryReader.from_bytes(b"\xC1\x83\x2A\x9E"))


def test_read_package_guid(write_package) -> None:
    """Verify reading only the GUID from a file on disk."""
    path = write_package("Maps/a.upk", guid=GUID_A)
    assert read_package_guid(path) == Guid(*GUID_A)


def test_read_package_guid_missing_file(tmp_path) -> None:
    """Verify that an unopenable file raises PackageUnreadable."""
    with pytest.raises(PackageUnreadable):
        read_package_guid(str(tmp_path / "nope.upk"))


def test_ue3_package(write_package, level_imports) -> None:
    """Verify the full package decode."""
    names, imports = level_imports
    path = write_package("CNC-Test.udk", names=names, imports=imports, guid=GUID_A)
    pkg = UE3Package(path)

    assert pkg.has_valid_signature
    assert pkg.version == 868
    assert pkg.guid == Guid(*GUID_A)
    assert list(pkg.names) == list(names)
    assert pkg.root_import_count == 2
    assert pkg.extension is PackageExtension.UDK
    assert pkg.summary.name_count == len(names)
    assert pkg.name_index == names.index("CNC-Test")
    assert pkg.name == "CNC-Test"


def test_ue3_package_name_falls_back_to_file_stem(write_package) -> None:
    """Verify that a package whose file name is not in its name table keeps the stem."""
    pkg = UE3Package(write_package("Renamed.upk", names=("None",)))
    assert pkg.name_index is None
    assert pkg.name == "Renamed"


def test_dump_info(write_package, level_imports, capsys) -> None:
    """Verify the printed summary."""
    names, imports = level_imports
    UE3Package(write_package("CNC-Test.udk", names=names, imports=imports)).dump_info()
    out = capsys.readouterr().out
    assert "Imports: 3 (2 packages)" in out
    assert "Names: 8" in out
