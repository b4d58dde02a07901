"""
Content packager.

Copies an inspected package and its dependencies into a directory tree
named after the package GUID:

    <output>/<GUID>/UDKGame/Config/<name>.ini
    <output>/<GUID>/UDKGame/CookedPC/Custom_Content/<name>.<ext>
"""

import logging
import os
from typing import List

from . import config
from .filesystem import copy_file, create_directory
from .package import UE3Package
from .types import ResolvedPackage

logger = logging.getLogger(__name__)


class ContentPackager:
    """Builds the content directory for one package."""

    def __init__(self, package: UE3Package, output_dir: str = config.OUTPUT_DIR):
        self.package = package
        self.root = os.path.join(output_dir, str(package.guid), config.GAME_DIR)
        self.content_dir = os.path.join(self.root, config.COOKED_DIR, config.CUSTOM_CONTENT_DIR)
        self.copied: List[str] = []
        self.skipped: List[str] = []

    def _copy(self, src: str, dst: str):
        try:
            copy_file(src, dst)
        except OSError as e:
            logger.warning(f"Failed to copy {src} -> {dst}: {e}")
            self.skipped.append(src)
            return
        self.copied.append(dst)

    def _package_extension(self) -> str:
        if self.package.extension.value:
            return self.package.extension.value
        return os.path.splitext(self.package.filepath)[1].lstrip(".")

    def copy_config(self, game_path: str):
        name = self.package.name
        config_dir = os.path.join(self.root, config.CONFIG_DIR)
        create_directory(config_dir)

        src = os.path.join(game_path, config.CONFIG_DIR, f"{name}.{config.CONFIG_EXTENSION}")
        if not os.path.isfile(src):
            logger.warning(f"No config file for {name} at {src}")
            self.skipped.append(src)
            return
        self._copy(src, os.path.join(config_dir, f"{name}.{config.CONFIG_EXTENSION}"))

    def copy_package(self):
        create_directory(self.content_dir)
        dst = os.path.join(self.content_dir, f"{self.package.name}.{self._package_extension()}")
        self._copy(self.package.filepath, dst)

    def copy_dependency(self, dependency: ResolvedPackage):
        if not dependency.resolved:
            logger.warning(f"Dependency {dependency.name} was not found; not packaged")
            self.skipped.append(dependency.name)
            return
        dst = os.path.join(self.content_dir, f"{dependency.name}.{dependency.extension.value}")
        self._copy(dependency.file_path, dst)

    def build(self, dependencies: List[ResolvedPackage], game_path: str = config.GAME_PATH) -> str:
        """Create the content tree. Returns its root directory."""
        self.copy_config(game_path)
        self.copy_package()
        for dependency in dependencies:
            self.copy_dependency(dependency)
        return self.root


def generate_package(package: UE3Package, dependencies: List[ResolvedPackage],
                     game_path: str = config.GAME_PATH,
                     output_dir: str = config.OUTPUT_DIR) -> ContentPackager:
    packager = ContentPackager(package, output_dir)
    packager.build(dependencies, game_path)
    return packager
