"""
Dependency list builder.

A dependency is a root import that is not part of the baseline. Entries
that were never found on disk are always dependencies: an unresolved
package has no GUID to compare, so it cannot be excluded by one.
"""

from typing import Iterable, List

from .baseline import BaselineSet
from .layout import GuidList
from .types import ResolvedPackage


def is_dependency(package: ResolvedPackage, baseline: BaselineSet) -> bool:
    if not package.resolved:
        return True
    return package.guid not in baseline


def build_dependency_list(packages: Iterable[ResolvedPackage], baseline: BaselineSet) -> List[ResolvedPackage]:
    """Packages absent from the baseline, in package table order."""
    return [p for p in packages if is_dependency(p, baseline)]


def write_dependency_guids(dependencies: List[ResolvedPackage], path: str):
    """Write the dependency GUIDs in the persisted baseline list format."""
    with open(path, "wb") as f:
        f.write(GuidList.build([list(p.guid.words) for p in dependencies]))
