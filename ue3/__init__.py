"""
UE3 Package Utilities

Reads the name table, import table and GUID of Unreal Engine 3 packages
and resolves which imported packages are not already part of a game.
"""

from .baseline import BaselineSet
from .dependencies import build_dependency_list
from .errors import PackageError, PackageUnreadable, TruncatedInput
from .names import NameTable
from .package import UE3Package, read_package_guid
from .reader import BinaryReader
from .resolver import build_package_table, resolve_packages
from .session import ResolutionSession
from .types import GamePackage, Guid, ImportRecord, PackageExtension, ResolvedPackage

__all__ = [
    'BaselineSet',
    'BinaryReader',
    'GamePackage',
    'Guid',
    'ImportRecord',
    'NameTable',
    'PackageError',
    'PackageExtension',
    'PackageUnreadable',
    'ResolutionSession',
    'ResolvedPackage',
    'TruncatedInput',
    'UE3Package',
    'build_dependency_list',
    'build_package_table',
    'read_package_guid',
    'resolve_packages',
]
