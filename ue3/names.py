"""
Name table of a UE3 package.

All symbolic references in the package are indices into this table.
Duplicate names are legal; lookups resolve to the first match.
"""

from typing import Iterable, Iterator, Optional, Tuple


class NameTable:
    """Immutable, index-addressable list of package names."""

    def __init__(self, names: Iterable[str] = ()):
        self._names: Tuple[str, ...] = tuple(names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __getitem__(self, index: int) -> str:
        return self._names[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, NameTable):
            return self._names == other._names
        return NotImplemented

    def __repr__(self) -> str:
        return f"NameTable({len(self._names)} names)"

    def get(self, index: int) -> Optional[str]:
        """Return the name at index, or None when index is out of range."""
        if 0 <= index < len(self._names):
            return self._names[index]
        return None

    def display(self, index: int) -> str:
        """Name at index for reports; empty string when out of range."""
        name = self.get(index)
        return name if name is not None else ""

    def find(self, name: str, case_sensitive: bool = True) -> Optional[int]:
        """Return the index of the first entry equal to name."""
        if case_sensitive:
            for index, candidate in enumerate(self._names):
                if candidate == name:
                    return index
            return None

        wanted = name.lower()
        for index, candidate in enumerate(self._names):
            if candidate.lower() == wanted:
                return index
        return None

    def find_for_filename(self, filename: str) -> Optional[int]:
        """Find the name matching a file's base name.

        Directory components and the last extension are stripped; the
        comparison is case-insensitive like package file names on disk.
        """
        return self.find(package_base_name(filename), case_sensitive=False)


def package_base_name(filename: str) -> str:
    """'C:\\Maps\\CNC-Field.udk' -> 'CNC-Field'."""
    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if "." in base:
        base = base.rsplit(".", 1)[0]
    return base
