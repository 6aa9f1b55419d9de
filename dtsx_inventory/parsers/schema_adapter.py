"""
Schema Adapter interface - locates logical entities for one package format
"""

import xml.etree.ElementTree as ET
import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterator, Optional

from ..models import (
    PackageFormat, TaskNode, VariableNode, ConnectionNode,
    ConfigurationNode, ComponentNode
)
from .package_document import PackageDocument, dts


# component -> components -> pipeline -> DTS:ObjectData -> DTS:Executable
COMPONENT_OWNER_DEPTH = 4


class SchemaAdapter(ABC):
    """Reads tasks, variables, connections, configurations and components off one schema shape"""

    package_format: PackageFormat

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    @abstractmethod
    def extract_tasks(self, document: PackageDocument,
                      description: Optional[str] = None) -> Iterator[TaskNode]:
        """
        Yield control-flow executables

        Args:
            document: Parsed package
            description: Only yield executables whose description equals this value

        Returns:
            Iterator of TaskNode objects in document order
        """

    @abstractmethod
    def extract_variables(self, document: PackageDocument) -> Iterator[VariableNode]:
        """Yield variables that carry an expression"""

    @abstractmethod
    def extract_connections(self, document: PackageDocument) -> Iterator[ConnectionNode]:
        """Yield package-level connection managers"""

    @abstractmethod
    def extract_configurations(self, document: PackageDocument) -> Iterator[ConfigurationNode]:
        """Yield package configurations"""

    @abstractmethod
    def executable_name(self, executable: ET.Element) -> str:
        """Object name of an executable element"""

    def extract_components(self, document: PackageDocument) -> Iterator[ComponentNode]:
        """Yield every data-flow component in the package"""
        for component in document.root.iter('component'):
            owner = document.ancestor(component, COMPONENT_OWNER_DEPTH)
            task_name = self.executable_name(owner) if owner is not None else ''
            if owner is None:
                self.logger.debug(
                    f"No owning task for component '{component.get('name', '')}' in {document.file_name}"
                )

            yield ComponentNode(
                name=component.get('name', ''),
                description=component.get('description', ''),
                contact_info=component.get('contactInfo', ''),
                task_name=task_name,
                properties=self._component_properties(component)
            )

    def variable_owner(self, document: PackageDocument, variable: ET.Element) -> str:
        """Name of the executable a variable is scoped to"""
        executable = document.enclosing(variable, dts('Executable'))
        if executable is None:
            return ''
        return self.executable_name(executable)

    @staticmethod
    def has_package_payload(executable: ET.Element, namespaces: Dict[str, str]) -> bool:
        object_data = executable.find('DTS:ObjectData', namespaces)
        if object_data is None:
            return False
        return object_data.find('ExecutePackageTask') is not None

    @staticmethod
    def sql_statement(executable: ET.Element, namespaces: Dict[str, str]) -> str:
        task_data = executable.find('DTS:ObjectData/SQLTask:SqlTaskData', namespaces)
        if task_data is None:
            return ''
        return task_data.get(f"{{{namespaces['SQLTask']}}}SqlStatementSource", '')

    @staticmethod
    def _component_properties(component: ET.Element) -> Dict[str, str]:
        properties = {}

        props_elem = component.find('properties')
        if props_elem is not None:
            for prop in props_elem.findall('property'):
                prop_name = prop.get('name', '')
                if prop_name:
                    properties[prop_name] = prop.text or ''

        return properties


_ADAPTERS: Dict[PackageFormat, type] = {}


def register_adapter(adapter_class: type) -> type:
    """Class decorator binding an adapter to its package format"""
    _ADAPTERS[adapter_class.package_format] = adapter_class
    return adapter_class


def adapter_for(package_format: PackageFormat) -> SchemaAdapter:
    try:
        adapter_class = _ADAPTERS[package_format]
    except KeyError:
        raise ValueError(f"No schema adapter registered for {package_format}")
    return adapter_class()
