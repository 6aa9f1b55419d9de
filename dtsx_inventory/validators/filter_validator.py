"""
Filter Validator - checks requested categories/types and input paths before extraction
"""

import logging
from pathlib import Path
from typing import Iterable, List, FrozenSet

from ..models import ALL, ContentCategory, SQLComponentType, ExtractionMode
from ..exceptions import InvalidFilterError, InputPathError


def filter_vocabulary(mode: ExtractionMode) -> List[str]:
    """Allowed filter labels for an extraction mode, wildcard first"""
    if mode is ExtractionMode.SQL:
        return [ALL] + [member.value for member in SQLComponentType]
    return [ALL] + [member.value for member in ContentCategory]


class CategoryFilter:
    """Pass/skip gate over categories or component types"""

    def __init__(self, labels: Iterable[str] = (ALL,), mode: ExtractionMode = ExtractionMode.CONTENT):
        self.mode = mode
        self.labels: FrozenSet[str] = self._validate(labels)

    def _validate(self, labels: Iterable[str]) -> FrozenSet[str]:
        allowed = filter_vocabulary(self.mode)
        requested = list(labels) or [ALL]

        for label in requested:
            if label not in allowed:
                raise InvalidFilterError(label, allowed)

        return frozenset(requested)

    def accepts(self, label: str) -> bool:
        return ALL in self.labels or label in self.labels

    def __repr__(self) -> str:
        return f"CategoryFilter({sorted(self.labels)!r}, mode={self.mode.value})"


class PathValidator:
    """Existence checks for every input path"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def validate_paths(self, paths: Iterable) -> List[Path]:
        """
        Check that every input path exists

        Args:
            paths: File or directory paths

        Returns:
            List of Path objects in input order

        Raises:
            InputPathError: for the first path that does not exist
        """
        validated = []
        for path in paths:
            path = Path(path)
            if not path.exists():
                raise InputPathError(path)
            validated.append(path)

        self.logger.debug(f"Validated {len(validated)} input paths")
        return validated
