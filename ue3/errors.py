"""
Error kinds raised while decoding UE3 packages.

Per-file errors are never fatal to a run: callers catch ``PackageError``,
report it and leave the affected slot in its default state.
"""


class PackageError(Exception):
    """Base class for all package decoding errors."""


class TruncatedInput(PackageError):
    """A read ran past the end of the package data."""

    def __init__(self, message: str, offset: int = -1):
        super().__init__(message)
        self.offset = offset


class PackageUnreadable(PackageError):
    """A package file could not be opened or read."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Unable to read {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.path = path
