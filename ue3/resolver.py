"""
Package table construction and filesystem resolution.

The package table holds one ResolvedPackage per root import. The resolver
walks a directory tree and fills in the file, GUID and extension of each
entry whose name matches a package file on disk.
"""

import logging
from typing import List, Sequence

from .errors import PackageError
from .filesystem import PackageFile, walk_packages
from .names import NameTable
from .package import read_package_guid
from .types import ImportRecord, ResolvedPackage

logger = logging.getLogger(__name__)


def build_package_table(imports: Sequence[ImportRecord], names: NameTable) -> List[ResolvedPackage]:
    """Create an unresolved entry for every root import, in table order."""
    return [
        ResolvedPackage(
            name_index=record.object_name_index,
            name=names.display(record.object_name_index),
        )
        for record in imports
        if record.is_root_package
    ]


class PackageResolver:
    """Matches package files on disk against an unresolved package table.

    Names are compared case-insensitively. The first file matching an entry
    resolves it; later files with the same name are ignored.
    """

    def __init__(self, packages: List[ResolvedPackage]):
        self.packages = packages
        self.matched = 0
        self.failed = 0

    def _pending(self) -> List[ResolvedPackage]:
        return [p for p in self.packages if not p.resolved and p.name]

    def visit(self, package_file: PackageFile):
        wanted = package_file.name.lower()
        for package in self._pending():
            if package.name.lower() != wanted:
                continue
            try:
                guid = read_package_guid(package_file.path)
            except PackageError as e:
                # Slot stays unresolved; a later file may still match
                logger.warning(f"Skipping {package_file.path}: {e}")
                self.failed += 1
                return
            package.resolve(package_file.path, guid, package_file.extension)
            self.matched += 1
            logger.debug(f"Resolved {package.name} -> {package_file.path} ({guid})")
            return

    def resolve(self, root: str) -> int:
        """Walk root and resolve what can be found. Returns the number resolved."""
        walk_packages(root, self.visit)
        return self.matched


def resolve_packages(root: str, packages: List[ResolvedPackage]) -> int:
    """Resolve packages in place from the files under root."""
    return PackageResolver(packages).resolve(root)
