"""
Package Extractor - orchestrates per-file version dispatch and record streaming
"""

import re
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from ..models import (
    ALL, PACKAGE_EXTENSION, SQL_COMPONENT_PROPERTIES, ContentCategory,
    SQLComponentType, ExtractionMode, ExtractionSummary, ContentRecord, SQLRecord
)
from ..exceptions import DtsxInventoryError, PackageParseError
from ..parsers.package_document import PackageDocument
from ..parsers.schema_adapter import SchemaAdapter, adapter_for
from ..parsers.classifiers import classify_task, classify_component, configuration_type_label
from ..generators.record_emitter import RecordEmitter
from ..validators.filter_validator import CategoryFilter, PathValidator


Record = Union[ContentRecord, SQLRecord]


class PackageExtractor:
    """
    Streams content or SQL records out of a batch of package files.

    Each file is parsed, its format version resolved to a schema adapter,
    and the requested extraction passes run in a fixed order. Records are
    yielded as soon as they are built; nothing is buffered across files.
    """

    def __init__(self, mode: ExtractionMode = ExtractionMode.CONTENT,
                 filters: Iterable[str] = (ALL,), strict: bool = False,
                 recurse: bool = False, search: Optional[str] = None,
                 literal: bool = False):
        """
        Initialize the extractor

        Args:
            mode: Content or SQL extraction
            filters: Category labels (content) or component type labels (SQL)
            strict: Raise on the first malformed package instead of skipping it
            recurse: Descend into subdirectories of directory arguments
            search: Keep only SQL records whose text matches this pattern
            literal: Treat search as a plain substring rather than a regex
        """
        self.logger = logging.getLogger(__name__)
        self.mode = mode
        self.category_filter = CategoryFilter(filters, mode)
        self.strict = strict
        self.recurse = recurse
        self.search_pattern = self._compile_search(search, literal)
        self.path_validator = PathValidator()
        self.summary = ExtractionSummary()

    def _compile_search(self, search: Optional[str], literal: bool) -> Optional[re.Pattern]:
        if not search:
            return None
        if self.mode is not ExtractionMode.SQL:
            raise DtsxInventoryError("SQL text search is only available in SQL extraction mode")
        try:
            return re.compile(re.escape(search) if literal else search, re.IGNORECASE)
        except re.error as e:
            raise DtsxInventoryError(f"Invalid search pattern '{search}': {e}")

    def extract(self, paths: Iterable) -> Iterator[Record]:
        """
        Extract records from packages

        Every path is checked for existence before the first file is read.

        Args:
            paths: Package files or directories containing them

        Returns:
            Lazy iterator of ContentRecord or SQLRecord objects
        """
        validated = self.path_validator.validate_paths(paths)
        self.summary = ExtractionSummary()
        return self._extract_files(validated)

    def _extract_files(self, paths: List[Path]) -> Iterator[Record]:
        for path in paths:
            for file_path in self._expand(path):
                for record in self.process_file(file_path):
                    self.summary.records_emitted += 1
                    yield record

        self.logger.info(
            f"Processed {self.summary.files_processed} of {self.summary.files_seen} files, "
            f"{self.summary.records_emitted} records"
        )

    def _expand(self, path: Path) -> Iterator[Path]:
        if not path.is_dir():
            yield path
            return

        pattern = '**/*' if self.recurse else '*'
        for child in sorted(path.glob(pattern)):
            if child.is_file():
                yield child

    def process_file(self, path: Path) -> Iterator[Record]:
        """Yield the records of a single package file"""
        path = Path(path)
        self.summary.files_seen += 1

        if path.suffix.lower() != PACKAGE_EXTENSION:
            self.logger.info(f"Skipping {path}: not a {PACKAGE_EXTENSION} file")
            self.summary.files_skipped += 1
            return

        try:
            document = PackageDocument.load(path)
        except (ET.ParseError, OSError) as e:
            self.summary.files_failed += 1
            if self.strict:
                raise PackageParseError(path, e) from e
            self.logger.error(f"Failed to parse package {path}: {e}")
            return

        package_format = document.package_format()
        if package_format is None:
            self.logger.info(
                f"Skipping {path}: unsupported package format version "
                f"{document.format_version_marker()!r}"
            )
            self.summary.files_skipped += 1
            return

        self.logger.debug(f"Extracting {path.name} as {package_format.value}")
        self.summary.files_processed += 1

        adapter = adapter_for(package_format)
        emitter = RecordEmitter(document.file_name)

        if self.mode is ExtractionMode.SQL:
            records = self._sql_records(document, adapter, emitter)
        else:
            records = self._content_records(document, adapter, emitter)

        yield from records

    def _content_records(self, document: PackageDocument, adapter: SchemaAdapter,
                         emitter: RecordEmitter) -> Iterator[ContentRecord]:
        accepts = self.category_filter.accepts

        if accepts(ContentCategory.TASK.value):
            for task in adapter.extract_tasks(document):
                task_type = classify_task(
                    task.name, task.contact, task.description,
                    task.executable_type, task.has_package_payload
                )
                yield emitter.task(task, task_type)

        if accepts(ContentCategory.VARIABLE.value):
            for variable in adapter.extract_variables(document):
                yield emitter.variable(variable)

        if accepts(ContentCategory.PACKAGE_CONFIGURATION.value):
            for configuration in adapter.extract_configurations(document):
                label = configuration_type_label(configuration.configuration_type)
                yield emitter.configuration(configuration, label)

        if accepts(ContentCategory.CONNECTION.value):
            for connection in adapter.extract_connections(document):
                yield emitter.connection(connection)

        if accepts(ContentCategory.DATA_FLOW_COMPONENT.value):
            for component in adapter.extract_components(document):
                component_type = classify_component(
                    component.contact_info, component.description, component.name
                )
                yield emitter.component(component, component_type)

    def _sql_records(self, document: PackageDocument, adapter: SchemaAdapter,
                     emitter: RecordEmitter) -> Iterator[SQLRecord]:
        for record in self._raw_sql_records(document, adapter, emitter):
            if self.search_pattern is None or self.search_pattern.search(record.sql):
                yield record

    def _raw_sql_records(self, document: PackageDocument, adapter: SchemaAdapter,
                         emitter: RecordEmitter) -> Iterator[SQLRecord]:
        accepts = self.category_filter.accepts

        if accepts(SQLComponentType.EXECUTE_SQL_TASK.value):
            for task in adapter.extract_tasks(document, description=SQLComponentType.EXECUTE_SQL_TASK.value):
                yield emitter.sql_task(task)

        if any(accepts(component_type) for component_type in SQL_COMPONENT_PROPERTIES):
            for component in adapter.extract_components(document):
                component_type = classify_component(
                    component.contact_info, component.description, component.name
                )
                property_name = SQL_COMPONENT_PROPERTIES.get(component_type)
                if property_name is None or not accepts(component_type):
                    continue
                yield emitter.sql_component(component, component_type,
                                            component.property_value(property_name))

        if accepts(SQLComponentType.VARIABLE.value):
            for variable in adapter.extract_variables(document):
                yield emitter.sql_variable(variable)
