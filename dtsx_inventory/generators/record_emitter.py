"""
Record Emitter - normalizes raw matches into content and SQL records
"""

from ..models import (
    ContentCategory, SQLComponentType, ContentRecord, SQLRecord,
    TaskNode, VariableNode, ConnectionNode, ConfigurationNode, ComponentNode
)


class RecordEmitter:
    """Builds output records for one package file"""

    def __init__(self, file_name: str):
        self.file_name = file_name

    def task(self, node: TaskNode, component_type: str) -> ContentRecord:
        return ContentRecord(
            file_name=self.file_name,
            category=ContentCategory.TASK.value,
            task_name=node.name,
            component_type=component_type,
            component_name=node.name
        )

    def variable(self, node: VariableNode) -> ContentRecord:
        return ContentRecord(
            file_name=self.file_name,
            category=ContentCategory.VARIABLE.value,
            task_name=node.owner,
            component_type=ContentCategory.VARIABLE.value,
            component_name=node.qualified_name
        )

    def connection(self, node: ConnectionNode) -> ContentRecord:
        return ContentRecord(
            file_name=self.file_name,
            category=ContentCategory.CONNECTION.value,
            task_name='',
            component_type=node.creation_name or ContentCategory.CONNECTION.value,
            component_name=node.name
        )

    def configuration(self, node: ConfigurationNode, configuration_type: str) -> ContentRecord:
        return ContentRecord(
            file_name=self.file_name,
            category=ContentCategory.PACKAGE_CONFIGURATION.value,
            task_name='',
            component_type=configuration_type,
            component_name=node.name or node.configuration_string
        )

    def component(self, node: ComponentNode, component_type: str) -> ContentRecord:
        return ContentRecord(
            file_name=self.file_name,
            category=ContentCategory.DATA_FLOW_COMPONENT.value,
            task_name=node.task_name,
            component_type=component_type,
            component_name=node.name
        )

    def sql_task(self, node: TaskNode) -> SQLRecord:
        return SQLRecord(
            file_name=self.file_name,
            task_name=node.name,
            component_type=SQLComponentType.EXECUTE_SQL_TASK.value,
            component_name=node.name,
            sql=node.sql_text
        )

    def sql_component(self, node: ComponentNode, component_type: str, sql: str) -> SQLRecord:
        return SQLRecord(
            file_name=self.file_name,
            task_name=node.task_name,
            component_type=component_type,
            component_name=node.name,
            sql=sql
        )

    def sql_variable(self, node: VariableNode) -> SQLRecord:
        return SQLRecord(
            file_name=self.file_name,
            task_name=node.owner,
            component_type=SQLComponentType.VARIABLE.value,
            component_name=node.qualified_name,
            sql=node.expression
        )
