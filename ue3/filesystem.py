"""
Filesystem access used by the resolver, the baseline builder and the packager.

Directory walks are depth-first and visit entries in case-insensitive name
order, descending into a subdirectory as soon as it is reached. Entries whose
name starts with '.' are skipped. Symbolic links to directories are not
followed.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from typing import BinaryIO, Callable, Iterator, Optional, Tuple

from .types import PackageExtension, SUFFIX_PRIORITY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryEntry:
    path: str
    is_directory: bool
    file_name: str


@dataclass(frozen=True)
class PackageFile:
    """A file whose name ends with a recognized package suffix."""
    path: str
    name: str                   # file name with the suffix stripped
    extension: PackageExtension


def list_directory_recursive(root: str) -> Iterator[DirectoryEntry]:
    """Yield every entry under root, depth-first."""
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: (e.name.lower(), e.name))
    except OSError as e:
        logger.warning(f"Cannot list directory {root}: {e}")
        return

    for entry in entries:
        if entry.name.startswith("."):
            continue
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        yield DirectoryEntry(path=entry.path, is_directory=is_dir, file_name=entry.name)
        if is_dir:
            yield from list_directory_recursive(entry.path)


def classify_package_file(file_name: str) -> Optional[Tuple[str, PackageExtension]]:
    """Split a file name into (base name, extension) if it is a package.

    Suffixes are tested case-insensitively in the order .upk, .udk, .u;
    the first that matches wins.
    """
    lowered = file_name.lower()
    for ext in SUFFIX_PRIORITY:
        suffix = "." + ext.value
        if lowered.endswith(suffix):
            return file_name[: -len(suffix)], ext
    return None


def iter_package_files(root: str) -> Iterator[PackageFile]:
    """Yield every recognized package file under root, in walk order."""
    for entry in list_directory_recursive(root):
        if entry.is_directory:
            continue
        classified = classify_package_file(entry.file_name)
        if classified is None:
            continue
        name, extension = classified
        yield PackageFile(path=entry.path, name=name, extension=extension)


def walk_packages(root: str, visit: Callable[[PackageFile], None]) -> int:
    """Call visit for each package file under root. Returns the number visited."""
    count = 0
    for package_file in iter_package_files(root):
        visit(package_file)
        count += 1
    logger.debug(f"Walked {count} package files under {root}")
    return count


def open_file_for_read(path: str) -> BinaryIO:
    return open(path, "rb")


def create_directory(path: str):
    os.makedirs(path, exist_ok=True)


def copy_file(src: str, dst: str):
    shutil.copyfile(src, dst)
