"""
Package Document - parsed .dtsx tree with namespace and ancestor lookups
"""

import xml.etree.ElementTree as ET
import logging
from pathlib import Path
from typing import Dict, Optional

from ..models import NAMESPACES, DTS_NAMESPACE, PACKAGE_FORMAT_VERSIONS, PackageFormat


def dts(name: str) -> str:
    """Qualified name in the DTS namespace"""
    return f"{{{DTS_NAMESPACE}}}{name}"


class PackageDocument:
    """One parsed package file, alive for a single processing pass"""

    def __init__(self, path: Path, root: ET.Element):
        self.path = Path(path)
        self.root = root
        self.namespaces = dict(NAMESPACES)
        self._parents: Optional[Dict[ET.Element, ET.Element]] = None
        self.logger = logging.getLogger(__name__)

    @classmethod
    def load(cls, path) -> "PackageDocument":
        """
        Parse a package file

        Args:
            path: Path to .dtsx file

        Returns:
            PackageDocument bound to the parsed tree

        Raises:
            xml.etree.ElementTree.ParseError: if the file is not well-formed
            OSError: if the file cannot be read
        """
        tree = ET.parse(str(path))
        return cls(path, tree.getroot())

    @property
    def file_name(self) -> str:
        return self.path.name

    def format_version_marker(self) -> Optional[str]:
        """Text of the root-level PackageFormatVersion property"""
        for prop in self.root.findall('DTS:Property', self.namespaces):
            if prop.get(dts('Name')) == 'PackageFormatVersion':
                marker = (prop.text or '').strip()
                self.logger.debug(f"{self.file_name}: PackageFormatVersion {marker!r}")
                return marker
        self.logger.debug(f"{self.file_name}: no PackageFormatVersion property")
        return None

    def package_format(self) -> Optional[PackageFormat]:
        marker = self.format_version_marker()
        if marker is None:
            return None
        return PACKAGE_FORMAT_VERSIONS.get(marker)

    def parent(self, element: ET.Element) -> Optional[ET.Element]:
        if self._parents is None:
            self._parents = {child: parent for parent in self.root.iter() for child in parent}
        return self._parents.get(element)

    def ancestor(self, element: ET.Element, levels: int) -> Optional[ET.Element]:
        """Walk a fixed number of levels up the tree"""
        node = element
        for _ in range(levels):
            node = self.parent(node)
            if node is None:
                return None
        return node

    def enclosing(self, element: ET.Element, tag: str) -> Optional[ET.Element]:
        """Nearest ancestor with the given qualified tag"""
        node = self.parent(element)
        while node is not None and node.tag != tag:
            node = self.parent(node)
        return node
