"""
Test suite for record serialization and statistics reports
"""

import io
import json

import pandas as pd
import pytest
import yaml

from dtsx_inventory.generators.output_writer import OutputWriter, CONTENT_COLUMNS, SQL_COLUMNS
from dtsx_inventory.generators.statistics_generator import StatisticsGenerator
from dtsx_inventory.models import ContentRecord, SQLRecord, ExtractionMode, ExtractionSummary


CONTENT_RECORDS = [
    ContentRecord("A.dtsx", "Task", "Load", "Data Flow Task", "Load"),
    ContentRecord("A.dtsx", "Data Flow Component", "Load", "OLE DB Source", "Src"),
    ContentRecord("B.dtsx", "Data Flow Component", "Copy", "OLE DB Source", "Src"),
    ContentRecord("B.dtsx", "Connection", "", "OLEDB", "Warehouse"),
]

SQL_RECORDS = [
    SQLRecord("A.dtsx", "Clear", "Execute SQL Task", "Clear", "DELETE FROM stg.Orders"),
    SQLRecord("A.dtsx", "Load", "OLE DB Source", "Src", "SELECT OrderID\nFROM dbo.Orders"),
]


class TestOutputWriter:
    """Test cases for the output formats"""

    def test_csv(self):
        stream = io.StringIO()
        count = OutputWriter('csv', ExtractionMode.SQL).write(SQL_RECORDS, stream)

        stream.seek(0)
        df = pd.read_csv(stream)
        assert count == 2
        assert list(df.columns) == SQL_COLUMNS
        assert df.loc[1, 'SQL'] == "SELECT OrderID\nFROM dbo.Orders"

    def test_json(self):
        stream = io.StringIO()
        OutputWriter('json').write(CONTENT_RECORDS, stream)

        rows = json.loads(stream.getvalue())
        assert rows[0] == {
            'FileName': 'A.dtsx', 'Category': 'Task', 'TaskName': 'Load',
            'ComponentType': 'Data Flow Task', 'ComponentName': 'Load'
        }
        assert len(rows) == 4

    def test_jsonl_consumes_lazily(self):
        stream = io.StringIO()
        count = OutputWriter('jsonl').write(iter(CONTENT_RECORDS), stream)

        lines = stream.getvalue().splitlines()
        assert count == 4
        assert json.loads(lines[-1])['ComponentName'] == 'Warehouse'

    def test_yaml(self):
        stream = io.StringIO()
        OutputWriter('yaml', ExtractionMode.SQL).write(SQL_RECORDS, stream)

        rows = yaml.safe_load(stream.getvalue())
        assert rows[0]['SQL'] == "DELETE FROM stg.Orders"
        assert list(rows[0].keys()) == SQL_COLUMNS

    def test_table_flattens_multiline_sql(self):
        stream = io.StringIO()
        OutputWriter('table', ExtractionMode.SQL).write(SQL_RECORDS, stream)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 3
        assert 'SELECT OrderID FROM dbo.Orders' in lines[2]

    def test_empty_csv_keeps_header(self):
        stream = io.StringIO()
        OutputWriter('csv').write([], stream)
        assert stream.getvalue().strip() == ','.join(CONTENT_COLUMNS)

    def test_empty_table_writes_nothing(self):
        stream = io.StringIO()
        assert OutputWriter('table').write([], stream) == 0
        assert stream.getvalue() == ''

    @pytest.mark.parametrize("output_format", ['csv', 'json', 'yaml', 'jsonl'])
    def test_records_written_before_stream_fails(self, output_format):
        """Records already produced reach the stream even if a later file aborts the run"""
        def failing_records():
            yield CONTENT_RECORDS[0]
            yield CONTENT_RECORDS[3]
            raise RuntimeError("late failure")

        stream = io.StringIO()
        with pytest.raises(RuntimeError):
            OutputWriter(output_format).write(failing_records(), stream)

        assert 'Load' in stream.getvalue()
        assert 'Warehouse' in stream.getvalue()

    def test_csv_header_written_once(self):
        stream = io.StringIO()
        OutputWriter('csv').write(CONTENT_RECORDS, stream)

        lines = stream.getvalue().splitlines()
        assert lines[0] == ','.join(CONTENT_COLUMNS)
        assert len(lines) == 5
        assert lines.count(lines[0]) == 1

    @pytest.mark.parametrize("output_format, loader", [('json', json.loads), ('yaml', yaml.safe_load)])
    def test_empty_json_and_yaml_are_empty_lists(self, output_format, loader):
        stream = io.StringIO()
        assert OutputWriter(output_format).write([], stream) == 0
        assert loader(stream.getvalue()) == []

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            OutputWriter('xml')


class TestStatisticsGenerator:
    """Test cases for corpus statistics"""

    def setup_method(self):
        self.generator = StatisticsGenerator()
        self.summary = ExtractionSummary(files_seen=3, files_processed=2, files_skipped=1,
                                         files_failed=0, records_emitted=4)

    def test_counts(self):
        stats = self.generator.generate_statistics(CONTENT_RECORDS, self.summary)

        assert stats['total_records'] == 4
        assert stats['by_category'][0] == {'Category': 'Data Flow Component', 'Count': 2}
        assert {'Category': 'Data Flow Component', 'ComponentType': 'OLE DB Source', 'Count': 2} \
            in stats['by_component_type']
        assert stats['by_file'] == [
            {'FileName': 'A.dtsx', 'Count': 2},
            {'FileName': 'B.dtsx', 'Count': 2},
        ]
        assert stats['summary']['files_skipped'] == 1

    def test_empty_input(self):
        stats = self.generator.generate_statistics([], ExtractionSummary())
        assert stats['total_records'] == 0
        assert stats['by_category'] == []

    def test_text_report(self):
        stats = self.generator.generate_statistics(CONTENT_RECORDS, self.summary)
        report = self.generator.render_report(stats, 'text')

        assert report.startswith("Package Inventory Statistics")
        assert "     2  Data Flow Component: OLE DB Source" in report
        assert "Files skipped:   1" in report

    def test_markdown_report(self):
        stats = self.generator.generate_statistics(CONTENT_RECORDS, self.summary)
        report = self.generator.render_report(stats, 'markdown')

        assert "| Data Flow Component | OLE DB Source | 2 |" in report
        assert "| B.dtsx | 2 |" in report

    def test_unknown_report_format(self):
        with pytest.raises(ValueError):
            self.generator.render_report({}, 'html')
