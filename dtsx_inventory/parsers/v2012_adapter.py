"""
Schema adapter for PackageFormatVersion 6 and 8 (SQL Server 2012 and later).

Fields that were DTS:Property children in the 2008 format are attributes
on the owning element here. Data-flow components are located with the
same fixed ancestor depth as the 2008 format; this has not been checked
against packages that nest pipelines differently.
"""

import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from ..models import (
    PackageFormat, TaskNode, VariableNode, ConnectionNode, ConfigurationNode
)
from .package_document import PackageDocument, dts
from .schema_adapter import SchemaAdapter, register_adapter
from .v2008_adapter import property_text


SYSTEM_NAMESPACE = "System"


@register_adapter
class V2012Adapter(SchemaAdapter):
    """Attribute-based package layout"""

    package_format = PackageFormat.V2012_PLUS

    def executable_name(self, executable: ET.Element) -> str:
        name = executable.get(dts('ObjectName'))
        if name is None:
            name = property_text(executable, 'ObjectName')
        return name or ''

    def extract_tasks(self, document: PackageDocument,
                      description: Optional[str] = None) -> Iterator[TaskNode]:
        for executable in document.root.iter(dts('Executable')):
            if executable is document.root:
                continue

            task_description = executable.get(dts('Description'), '')
            if description is not None and task_description != description:
                continue

            yield TaskNode(
                name=self.executable_name(executable),
                description=task_description,
                contact=executable.get(dts('TaskContact'), ''),
                executable_type=executable.get(dts('ExecutableType'), ''),
                has_package_payload=self.has_package_payload(executable, document.namespaces),
                sql_text=self.sql_statement(executable, document.namespaces)
            )

    def extract_variables(self, document: PackageDocument) -> Iterator[VariableNode]:
        for variable in document.root.iter(dts('Variable')):
            namespace = variable.get(dts('Namespace'), '')
            if namespace == SYSTEM_NAMESPACE:
                continue

            expression = variable.get(dts('Expression'), '')
            if not expression.strip():
                continue

            yield VariableNode(
                name=variable.get(dts('ObjectName'), ''),
                namespace=namespace,
                expression=expression,
                owner=self.variable_owner(document, variable)
            )

    def extract_connections(self, document: PackageDocument) -> Iterator[ConnectionNode]:
        conn_managers = document.root.find('DTS:ConnectionManagers', document.namespaces)
        if conn_managers is None:
            return

        for conn_mgr in conn_managers.findall('DTS:ConnectionManager', document.namespaces):
            yield ConnectionNode(
                name=conn_mgr.get(dts('ObjectName'), ''),
                creation_name=conn_mgr.get(dts('CreationName'), '')
            )

    def extract_configurations(self, document: PackageDocument) -> Iterator[ConfigurationNode]:
        for configuration in document.root.iter(dts('Configuration')):
            configuration_string = configuration.get(dts('ConfigurationString'))
            if configuration_string is None:
                continue

            yield ConfigurationNode(
                name=configuration.get(dts('ObjectName'), ''),
                configuration_type=configuration.get(dts('ConfigurationType'), ''),
                configuration_string=configuration_string
            )
