"""
Resolution session.

Holds every table built for one inspected package: the decoded package,
its package table, the baseline and the dependency list. Nothing is shared
between sessions.
"""

import logging
from typing import List, Optional

from .baseline import BaselineBuilder, BaselineSet
from .dependencies import build_dependency_list
from .errors import PackageError
from .names import NameTable
from .package import UE3Package
from .resolver import build_package_table, resolve_packages
from .types import GamePackage, ImportRecord, ResolvedPackage

logger = logging.getLogger(__name__)


class ResolutionSession:
    """Pipeline state for resolving one package's dependencies.

    Typical use:
        session = ResolutionSession()
        session.inspect("CNC-Field.udk")
        session.resolve("C:/Games/RenX/UDKGame")
        session.load_baseline("shipped.bin")
        deps = session.build_dependencies()
    """

    def __init__(self):
        self.package: Optional[UE3Package] = None
        self.names = NameTable()
        self.imports: List[ImportRecord] = []
        self.packages: List[ResolvedPackage] = []
        self.baseline: Optional[BaselineSet] = None
        self.game_packages: List[GamePackage] = []
        self.dependencies: List[ResolvedPackage] = []

    def inspect(self, filepath: str) -> bool:
        """Decode a package and create its unresolved package table.

        Returns False (leaving all tables empty) when the package cannot be
        decoded.
        """
        try:
            package = UE3Package(filepath)
        except PackageError as e:
            logger.error(f"Cannot decode {filepath}: {e}")
            return False

        if not package.has_valid_signature:
            logger.debug(f"{filepath}: unexpected signature {package.summary.tag:#010x}")

        self.package = package
        self.names = package.names
        self.imports = package.imports
        self.packages = build_package_table(package.imports, package.names)
        logger.debug(f"{filepath}: {len(self.names)} names, {len(self.imports)} imports, "
                     f"{len(self.packages)} packages")
        return True

    def resolve(self, root: str) -> int:
        """Locate the package table entries under root."""
        return resolve_packages(root, self.packages)

    def _check_baseline_unset(self):
        if self.baseline is not None:
            raise ValueError("Baseline already set for this session")

    def load_baseline(self, path: str) -> bool:
        """Load a persisted baseline. An unreadable list leaves it empty."""
        self._check_baseline_unset()
        try:
            self.baseline = BaselineSet.load(path)
        except PackageError as e:
            logger.error(f"Cannot load baseline: {e}")
            self.baseline = BaselineSet()
            return False
        return True

    def scan_game_packages(self, root: str) -> BaselineBuilder:
        """Record every package file under root without touching the baseline."""
        builder = BaselineBuilder().build(root)
        self.game_packages = builder.packages
        return builder

    def build_baseline(self, root: str) -> BaselineSet:
        """Build the baseline from every package file under root."""
        self._check_baseline_unset()
        self.baseline = self.scan_game_packages(root).baseline
        return self.baseline

    def build_dependencies(self) -> List[ResolvedPackage]:
        """Rebuild the dependency list from the package table and baseline."""
        baseline = self.baseline if self.baseline is not None else BaselineSet()
        self.dependencies = build_dependency_list(self.packages, baseline)
        return self.dependencies
