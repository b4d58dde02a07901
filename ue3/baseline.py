"""
Baseline set of package GUIDs.

The baseline is the set of packages already shipped with the game. It is
either loaded from a persisted GUID list or built by walking a directory
tree and reading the GUID of every package file found.

Persisted format: uint32 count, then count x 4 uint32 words, little-endian.
"""

import logging
from typing import Iterable, Iterator, List

from construct import ConstructError

from .errors import PackageError, PackageUnreadable, TruncatedInput
from .filesystem import PackageFile, walk_packages
from .layout import GuidList
from .package import read_package_guid
from .types import GamePackage, Guid

logger = logging.getLogger(__name__)


class BaselineSet:
    """Set of known package GUIDs.

    Membership is exact 128-bit equality. Insertion order is kept so that
    persisted lists are written deterministically.
    """

    def __init__(self, guids: Iterable[Guid] = ()):
        self._guids = dict.fromkeys(guids)

    def __contains__(self, guid: Guid) -> bool:
        return guid in self._guids

    def __len__(self) -> int:
        return len(self._guids)

    def __iter__(self) -> Iterator[Guid]:
        return iter(self._guids)

    def __eq__(self, other) -> bool:
        if isinstance(other, BaselineSet):
            return self._guids.keys() == other._guids.keys()
        return NotImplemented

    def __repr__(self) -> str:
        return f"BaselineSet({len(self._guids)} guids)"

    def add(self, guid: Guid):
        self._guids[guid] = None

    # -- persistence ---------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: bytes) -> "BaselineSet":
        try:
            entries = GuidList.parse(data)
        except ConstructError as e:
            raise TruncatedInput(f"Truncated baseline list: {e}") from e
        return cls(Guid.from_words(words) for words in entries)

    def to_bytes(self) -> bytes:
        return GuidList.build([list(guid.words) for guid in self._guids])

    @classmethod
    def load(cls, path: str) -> "BaselineSet":
        """Load a persisted GUID list."""
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise PackageUnreadable(path, e.strerror or str(e)) from e
        baseline = cls.from_bytes(data)
        logger.debug(f"Loaded {len(baseline)} baseline GUIDs from {path}")
        return baseline

    def save(self, path: str):
        with open(path, "wb") as f:
            f.write(self.to_bytes())

    # -- construction from a directory tree ----------------------------------

    @classmethod
    def build(cls, root: str) -> "BaselineSet":
        return BaselineBuilder().build(root).baseline


class BaselineBuilder:
    """Records the GUID of every package file under a directory tree."""

    def __init__(self):
        self.baseline = BaselineSet()
        self.packages: List[GamePackage] = []

    def visit(self, package_file: PackageFile):
        try:
            guid = read_package_guid(package_file.path)
        except PackageError as e:
            logger.warning(f"Skipping {package_file.path}: {e}")
            return
        self.packages.append(GamePackage(
            name=package_file.name,
            guid=guid,
            file_path=package_file.path,
            extension=package_file.extension,
        ))
        self.baseline.add(guid)

    def build(self, root: str) -> "BaselineBuilder":
        walk_packages(root, self.visit)
        return self
