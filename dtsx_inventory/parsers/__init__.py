"""Parsers module for reading package documents in each schema format"""

from .package_document import PackageDocument
from .schema_adapter import SchemaAdapter, adapter_for
from .v2008_adapter import V2008Adapter
from .v2012_adapter import V2012Adapter
from .classifiers import classify_task, classify_component, configuration_type_label

__all__ = [
    "PackageDocument",
    "SchemaAdapter",
    "adapter_for",
    "V2008Adapter",
    "V2012Adapter",
    "classify_task",
    "classify_component",
    "configuration_type_label",
]
