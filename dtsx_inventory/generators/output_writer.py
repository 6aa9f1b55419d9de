"""
Output Writer - serializes extracted records as table, CSV, JSON or YAML
"""

import json
import logging
from typing import Iterable, List, Dict, Any, TextIO, Union

import pandas as pd
import yaml

from ..models import ContentRecord, SQLRecord, ExtractionMode


OUTPUT_FORMATS = ['table', 'csv', 'json', 'jsonl', 'yaml']

CONTENT_COLUMNS = ['FileName', 'Category', 'TaskName', 'ComponentType', 'ComponentName']
SQL_COLUMNS = ['FileName', 'TaskName', 'ComponentType', 'ComponentName', 'SQL']

Record = Union[ContentRecord, SQLRecord]


class OutputWriter:
    """Writes a record stream to a text stream in one of the supported formats"""

    def __init__(self, output_format: str = 'table', mode: ExtractionMode = ExtractionMode.CONTENT):
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {output_format}")
        self.output_format = output_format
        self.columns = SQL_COLUMNS if mode is ExtractionMode.SQL else CONTENT_COLUMNS
        self.logger = logging.getLogger(__name__)

    def write(self, records: Iterable[Record], stream: TextIO) -> int:
        """
        Serialize records to a stream

        Every format except table writes each record as soon as it is
        consumed. Table output buffers the whole stream to size its columns.

        Args:
            records: Content or SQL records
            stream: Writable text stream

        Returns:
            Number of records written
        """
        if self.output_format == 'table':
            count = self._write_table([record.to_dict() for record in records], stream)
        elif self.output_format == 'csv':
            count = self._write_csv(records, stream)
        elif self.output_format == 'json':
            count = self._write_json(records, stream)
        elif self.output_format == 'yaml':
            count = self._write_yaml(records, stream)
        else:
            count = self._write_jsonl(records, stream)

        self.logger.debug(f"Wrote {count} records as {self.output_format}")
        return count

    def to_dataframe(self, rows: List[Dict[str, Any]]) -> pd.DataFrame:
        return pd.DataFrame(rows, columns=self.columns)

    def _write_csv(self, records: Iterable[Record], stream: TextIO) -> int:
        count = 0
        for record in records:
            self.to_dataframe([record.to_dict()]).to_csv(stream, index=False, header=(count == 0))
            stream.flush()
            count += 1

        if count == 0:
            self.to_dataframe([]).to_csv(stream, index=False)
        return count

    def _write_json(self, records: Iterable[Record], stream: TextIO) -> int:
        count = 0
        for record in records:
            stream.write('[\n' if count == 0 else ',\n')
            stream.write(json.dumps(record.to_dict(), indent=2))
            stream.flush()
            count += 1

        stream.write('\n]\n' if count else '[]\n')
        return count

    def _write_yaml(self, records: Iterable[Record], stream: TextIO) -> int:
        count = 0
        for record in records:
            # Consecutive one-item sequences concatenate into a single list
            yaml.safe_dump([record.to_dict()], stream, default_flow_style=False,
                           sort_keys=False, allow_unicode=True)
            stream.flush()
            count += 1

        if count == 0:
            stream.write('[]\n')
        return count

    def _write_jsonl(self, records: Iterable[Record], stream: TextIO) -> int:
        count = 0
        for record in records:
            stream.write(json.dumps(record.to_dict()))
            stream.write('\n')
            stream.flush()
            count += 1
        return count

    def _write_table(self, rows: List[Dict[str, Any]], stream: TextIO) -> int:
        if not rows:
            return 0

        df = self.to_dataframe(rows)
        # Keep multi-line SQL on one table row
        df = df.apply(lambda col: col.str.replace(r'\s+', ' ', regex=True))
        stream.write(df.to_string(index=False, justify='left'))
        stream.write('\n')
        return len(rows)
