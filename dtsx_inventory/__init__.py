"""
SSIS Package Inventory

Extracts tasks, variables, connections, configurations, data-flow
components and embedded SQL from SSIS .dtsx packages.
"""

__version__ = "1.0.0"
__author__ = "SSIS Migration Team"

from .core.extractor import PackageExtractor
from .parsers.package_document import PackageDocument
from .generators.output_writer import OutputWriter
from .generators.statistics_generator import StatisticsGenerator
from .models import ContentRecord, SQLRecord, ExtractionMode, PackageFormat

__all__ = [
    "PackageExtractor",
    "PackageDocument",
    "OutputWriter",
    "StatisticsGenerator",
    "ContentRecord",
    "SQLRecord",
    "ExtractionMode",
    "PackageFormat",
]
