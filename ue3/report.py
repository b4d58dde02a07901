"""
Text dumps of the decoded tables.

One record per line:
    names           "<index>: <name>"
    imports         "<index> | Package: x | Class: y | Object: z | Reference: n"
    packages        "<GUID> | <name>"
    dependencies    "<count> dependencies:" then "<GUID> | <name> | <path>"
    game packages   "<GUID> | <name>"
"""

from typing import Iterable, Iterator, List, Sequence

from .names import NameTable
from .types import GamePackage, ImportRecord, ResolvedPackage


def format_name_table(names: NameTable) -> Iterator[str]:
    for index, name in enumerate(names):
        yield f"{index}: {name}"


def format_import_table(imports: Sequence[ImportRecord], names: NameTable) -> Iterator[str]:
    for index, record in enumerate(imports):
        yield (
            f"{index} | Package: {names.display(record.package_name_index)}"
            f" | Class: {names.display(record.class_name_index)}"
            f" | Object: {names.display(record.object_name_index)}"
            f" | Reference: {record.package_reference}"
        )


def format_package_table(packages: Iterable[ResolvedPackage]) -> Iterator[str]:
    for package in packages:
        yield f"{package.guid} | {package.name}"


def format_dependency_list(dependencies: List[ResolvedPackage]) -> Iterator[str]:
    yield f"{len(dependencies)} dependencies:"
    for package in dependencies:
        yield f"{package.guid} | {package.name} | {package.file_path or ''}"


def format_game_packages(packages: Iterable[GamePackage]) -> Iterator[str]:
    for package in packages:
        yield f"{package.guid} | {package.name}"


def write_report(path: str, lines: Iterable[str]) -> int:
    """Write lines to path, one per line. Returns the number written."""
    count = 0
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")
            count += 1
    return count
