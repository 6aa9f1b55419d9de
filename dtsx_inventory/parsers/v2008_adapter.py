"""
Schema adapter for PackageFormatVersion 3 (SQL Server 2008) packages.

In this format almost every field lives in a child element of the form
``<DTS:Property DTS:Name="ObjectName">value</DTS:Property>`` rather than in
an attribute on the owning element.
"""

import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from ..models import (
    PackageFormat, TaskNode, VariableNode, ConnectionNode, ConfigurationNode
)
from .package_document import PackageDocument, dts
from .schema_adapter import SchemaAdapter, register_adapter


def property_text(element: ET.Element, name: str) -> Optional[str]:
    """Text of the direct DTS:Property child with the given name, None if absent"""
    for prop in element.findall(dts('Property')):
        if prop.get(dts('Name')) == name:
            return prop.text or ''
    return None


@register_adapter
class V2008Adapter(SchemaAdapter):
    """Property-element package layout"""

    package_format = PackageFormat.V2008

    def _property(self, element: ET.Element, name: str) -> str:
        return property_text(element, name) or ''

    def executable_name(self, executable: ET.Element) -> str:
        return self._property(executable, 'ObjectName')

    def extract_tasks(self, document: PackageDocument,
                      description: Optional[str] = None) -> Iterator[TaskNode]:
        for executable in document.root.iter(dts('Executable')):
            if executable is document.root:
                continue

            task_description = self._property(executable, 'Description')
            if description is not None and task_description != description:
                continue

            yield TaskNode(
                name=self.executable_name(executable),
                description=task_description,
                contact=self._property(executable, 'TaskContact'),
                executable_type=executable.get(dts('ExecutableType'), ''),
                has_package_payload=self.has_package_payload(executable, document.namespaces),
                sql_text=self.sql_statement(executable, document.namespaces)
            )

    def extract_variables(self, document: PackageDocument) -> Iterator[VariableNode]:
        for variable in document.root.iter(dts('Variable')):
            expression = self._property(variable, 'Expression')
            if not expression.strip():
                continue

            yield VariableNode(
                name=self._property(variable, 'ObjectName'),
                namespace=self._property(variable, 'Namespace'),
                expression=expression,
                owner=self.variable_owner(document, variable)
            )

    def extract_connections(self, document: PackageDocument) -> Iterator[ConnectionNode]:
        for conn_mgr in document.root.findall('DTS:ConnectionManager', document.namespaces):
            yield ConnectionNode(
                name=self._property(conn_mgr, 'ObjectName'),
                creation_name=self._property(conn_mgr, 'CreationName')
            )

    def extract_configurations(self, document: PackageDocument) -> Iterator[ConfigurationNode]:
        for configuration in document.root.iter(dts('Configuration')):
            configuration_string = property_text(configuration, 'ConfigurationString')
            if configuration_string is None:
                continue

            yield ConfigurationNode(
                name=self._property(configuration, 'ObjectName'),
                configuration_type=self._property(configuration, 'ConfigurationType'),
                configuration_string=configuration_string
            )
