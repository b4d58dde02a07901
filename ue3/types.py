"""
Shared data types for UE3 package inspection.

These are the records passed between the decoders, the resolver and the
dependency list builder.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class Guid:
    """128-bit package identifier stored as four little-endian words."""
    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0

    @classmethod
    def from_words(cls, words: Iterable[int]) -> "Guid":
        a, b, c, d = words
        return cls(a, b, c, d)

    @property
    def words(self) -> Tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)

    def __str__(self) -> str:
        return "".join(f"{w:08X}" for w in self.words)


ZERO_GUID = Guid()


class PackageExtension(Enum):
    """Recognized package file extensions."""
    UNKNOWN = ""
    UDK = "udk"
    UPK = "upk"
    U = "u"

    @classmethod
    def from_filename(cls, filename: str) -> "PackageExtension":
        """Classify a file name by its last extension (case-insensitive)."""
        base = filename.replace("\\", "/").rsplit("/", 1)[-1]
        if "." not in base:
            return cls.UNKNOWN
        suffix = base.rsplit(".", 1)[1].lower()
        for ext in SUFFIX_PRIORITY:
            if ext.value == suffix:
                return ext
        return cls.UNKNOWN


# Order in which file name suffixes are tested during directory walks
SUFFIX_PRIORITY = (PackageExtension.UPK, PackageExtension.UDK, PackageExtension.U)


@dataclass(frozen=True)
class ImportRecord:
    """One entry of a package's import table."""
    package_name_index: int
    class_name_index: int
    package_reference: int
    object_name_index: int

    @property
    def is_root_package(self) -> bool:
        """True when the record names a whole package rather than an object in one."""
        return self.package_reference == 0


@dataclass
class ResolvedPackage:
    """A root import and, once found on disk, the file backing it."""
    name_index: int
    name: str = ""
    guid: Guid = ZERO_GUID
    file_path: Optional[str] = None
    extension: PackageExtension = PackageExtension.UNKNOWN

    @property
    def resolved(self) -> bool:
        return self.file_path is not None

    def resolve(self, file_path: str, guid: Guid, extension: PackageExtension):
        """Record the on-disk match. Only the first match is kept."""
        if self.resolved:
            raise ValueError(f"Package {self.name!r} is already resolved to {self.file_path}")
        self.file_path = file_path
        self.guid = guid
        self.extension = extension


@dataclass
class GamePackage:
    """A package file found while building a baseline from a directory tree."""
    name: str
    guid: Guid
    file_path: str
    extension: PackageExtension = field(default=PackageExtension.UNKNOWN)
