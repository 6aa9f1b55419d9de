"""
Exceptions raised by the package inventory extractor
"""


class DtsxInventoryError(Exception):
    """Base class for extraction errors."""


class InvalidFilterError(DtsxInventoryError, ValueError):
    """Raised when a filter label is not part of the mode's vocabulary."""

    def __init__(self, label: str, allowed) -> None:
        self.label = label
        self.allowed = sorted(allowed)
        super().__init__(
            f"Invalid filter value '{label}'. Allowed values: {', '.join(self.allowed)}"
        )


class InputPathError(DtsxInventoryError):
    """Raised when an input path does not exist."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Input path does not exist: {path}")


class PackageParseError(DtsxInventoryError):
    """Raised when a package file cannot be read or is not well-formed XML."""

    def __init__(self, path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse package {path}: {cause}")
