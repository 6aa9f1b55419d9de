"""
Data types and lookup tables for SSIS package inventory extraction.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any
from enum import Enum


DTS_NAMESPACE = "www.microsoft.com/SqlServer/Dts"
SQLTASK_NAMESPACE = "www.microsoft.com/sqlserver/dts/tasks/sqltask"

NAMESPACES = {
    'DTS': DTS_NAMESPACE,
    'SQLTask': SQLTASK_NAMESPACE,
}

PACKAGE_EXTENSION = ".dtsx"

# Wildcard filter label accepted by both extraction modes
ALL = "All"


class PackageFormat(Enum):
    """Supported package schema versions"""
    V2008 = "V2008"
    V2012_PLUS = "V2012+"


# PackageFormatVersion marker values
PACKAGE_FORMAT_VERSIONS: Dict[str, PackageFormat] = {
    "3": PackageFormat.V2008,
    "6": PackageFormat.V2012_PLUS,
    "8": PackageFormat.V2012_PLUS,
}


class ExtractionMode(Enum):
    """Which record shape an extraction run produces"""
    CONTENT = "content"
    SQL = "sql"


class ContentCategory(Enum):
    """Categories emitted by content extraction"""
    TASK = "Task"
    VARIABLE = "Variable"
    PACKAGE_CONFIGURATION = "Package configuration"
    CONNECTION = "Connection"
    DATA_FLOW_COMPONENT = "Data Flow Component"


class SQLComponentType(Enum):
    """Component types known to carry query text"""
    EXECUTE_SQL_TASK = "Execute SQL Task"
    OLEDB_SOURCE = "OLE DB Source"
    OLEDB_DESTINATION = "OLE DB Destination"
    OLEDB_COMMAND = "OLE DB Command"
    LOOKUP = "Lookup"
    VARIABLE = "Variable"


# Data-flow component type to the property holding its query text
SQL_COMPONENT_PROPERTIES: Dict[str, str] = {
    SQLComponentType.OLEDB_SOURCE.value: "SqlCommand",
    SQLComponentType.OLEDB_DESTINATION.value: "OpenRowset",
    SQLComponentType.OLEDB_COMMAND.value: "SqlCommand",
    SQLComponentType.LOOKUP.value: "SqlCommand",
}

CONFIGURATION_TYPES: Dict[int, str] = {
    0: "Parent package variable",
    2: "Environment variable",
    5: "Indirect XML configuration file",
}

SEQUENCE_CONTAINER_TYPE = "STOCK:SEQUENCE"
EXECUTE_PACKAGE_TASK = "Execute Package Task"
SEQUENCE_CONTAINER = "Sequence Container"

# Task descriptions used verbatim as the task type
VERBATIM_TASK_DESCRIPTIONS = frozenset([
    "Data Flow Task",
    "Script Task",
    "Foreach Loop Container",
])


@dataclass
class TaskNode:
    """Control-flow executable as read off the package"""
    name: str
    description: str
    contact: str
    executable_type: str
    has_package_payload: bool = False
    sql_text: str = ""


@dataclass
class VariableNode:
    """Variable carrying an expression"""
    name: str
    namespace: str
    expression: str
    owner: str

    @property
    def qualified_name(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}::{self.name}"


@dataclass
class ConnectionNode:
    """Connection manager representation"""
    name: str
    creation_name: str


@dataclass
class ConfigurationNode:
    """Package configuration representation"""
    name: str
    configuration_type: str
    configuration_string: str


@dataclass
class ComponentNode:
    """Data-flow pipeline component representation"""
    name: str
    description: str
    contact_info: str
    task_name: str
    properties: Dict[str, str]

    def property_value(self, property_name: str) -> str:
        return self.properties.get(property_name, "")


@dataclass(frozen=True)
class ContentRecord:
    """One row of content extraction output"""
    file_name: str
    category: str
    task_name: str
    component_type: str
    component_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'FileName': self.file_name,
            'Category': self.category,
            'TaskName': self.task_name,
            'ComponentType': self.component_type,
            'ComponentName': self.component_name,
        }


@dataclass(frozen=True)
class SQLRecord:
    """One row of SQL extraction output"""
    file_name: str
    task_name: str
    component_type: str
    component_name: str
    sql: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'FileName': self.file_name,
            'TaskName': self.task_name,
            'ComponentType': self.component_type,
            'ComponentName': self.component_name,
            'SQL': self.sql,
        }


@dataclass
class ExtractionSummary:
    """Per-run file accounting"""
    files_seen: int = 0
    files_processed: int = 0
    files_skipped: int = 0
    files_failed: int = 0
    records_emitted: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
