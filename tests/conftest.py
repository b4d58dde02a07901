"""Shared fixtures: synthetic UE3 package files."""

import os
import struct
from typing import Callable, Sequence, Tuple

import pytest

SIGNATURE = 0x9E2A83C1

GUID_A = (0x11111111, 0x11111111, 0x11111111, 0x11111111)
GUID_B = (0x22222222, 0x22222222, 0x22222222, 0x22222222)
GUID_C = (0x33333333, 0x33333333, 0x33333333, 0x33333333)

# (package name index, class name index, package reference, object name index)
Import = Tuple[int, int, int, int]


def encode_name(name: str) -> bytes:
    raw = name.encode("latin-1") + b"\x00"
    return struct.pack("<i", len(raw)) + raw + b"\x00" * 8


def encode_import(record: Import) -> bytes:
    package_idx, class_idx, reference, object_idx = record
    return struct.pack("<IIIIiII", package_idx, 0, class_idx, 0, reference, object_idx, 0)


def build_package(
    names: Sequence[str] = ("None",),
    imports: Sequence[Import] = (),
    guid: Tuple[int, int, int, int] = (0, 0, 0, 0),
    folder: bytes = b"None\x00",
) -> bytes:
    """Assemble a minimal UE3 package: summary, name table, import table."""
    header_size = 0x10 + len(folder) + 0x40
    name_data = b"".join(encode_name(n) for n in names)
    name_offset = header_size
    import_offset = name_offset + len(name_data)
    import_data = b"".join(encode_import(i) for i in imports)

    header = struct.pack("<IHHI", SIGNATURE, 868, 0, header_size)
    header += struct.pack("<I", len(folder)) + folder
    header += struct.pack("<I", 0)                            # package flags
    header += struct.pack("<II", len(names), name_offset)
    header += struct.pack("<II", 0, 0)                        # exports
    header += struct.pack("<II", len(imports), import_offset)
    header += struct.pack("<I", 0)                            # depends offset
    header += b"\x00" * 16
    header += struct.pack("<4I", *guid)
    assert len(header) == header_size
    return header + name_data + import_data


@pytest.fixture
def write_package(tmp_path) -> Callable[..., str]:
    """Factory writing a synthetic package below tmp_path; returns its path."""

    def _write(relpath: str, **kwargs) -> str:
        path = tmp_path / relpath
        os.makedirs(path.parent, exist_ok=True)
        path.write_bytes(build_package(**kwargs))
        return str(path)

    return _write


@pytest.fixture
def level_imports() -> Tuple[Tuple[str, ...], Tuple[Import, ...]]:
    """Names and imports of a level importing root packages A and B."""
    names = ("None", "Core", "Package", "A", "B", "C", "Texture2D", "CNC-Test")
    imports = (
        (1, 2, 0, 3),   # A, root package
        (1, 2, 0, 4),   # B, root package
        (1, 6, 5, 5),   # C, object inside another import
    )
    return names, imports
