"""
Statistics Generator - component usage counts across a corpus of packages
"""

import logging
from typing import List, Dict, Any, Iterable

import pandas as pd
from jinja2 import Template

from ..models import ContentRecord, ExtractionSummary


REPORT_FORMATS = ['text', 'markdown']


class StatisticsGenerator:
    """Aggregates content records into per-category, per-type and per-file counts"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def generate_statistics(self, records: Iterable[ContentRecord],
                            summary: ExtractionSummary) -> Dict[str, Any]:
        """
        Compute usage statistics

        Args:
            records: Content records from one extraction run
            summary: File accounting from the same run

        Returns:
            Dictionary with count tables and run totals
        """
        df = pd.DataFrame(
            [record.to_dict() for record in records],
            columns=['FileName', 'Category', 'TaskName', 'ComponentType', 'ComponentName']
        )
        self.logger.info(f"Computing statistics over {len(df)} records")

        return {
            'summary': summary.as_dict(),
            'total_records': len(df),
            'by_category': self._count(df, ['Category']),
            'by_component_type': self._count(df, ['Category', 'ComponentType']),
            'by_file': self._count(df, ['FileName']),
        }

    def _count(self, df: pd.DataFrame, columns: List[str]) -> List[Dict[str, Any]]:
        if df.empty:
            return []

        counts = (
            df.groupby(columns)
            .size()
            .reset_index(name='Count')
            .sort_values(['Count'] + columns, ascending=[False] + [True] * len(columns))
        )
        return [
            {key: (int(value) if key == 'Count' else value) for key, value in row.items()}
            for row in counts.to_dict(orient='records')
        ]

    def render_report(self, statistics: Dict[str, Any], report_format: str = 'text') -> str:
        if report_format not in REPORT_FORMATS:
            raise ValueError(f"Unsupported report format: {report_format}")

        template = Template(
            self._get_markdown_template() if report_format == 'markdown' else self._get_text_template(),
            trim_blocks=True,
            lstrip_blocks=True
        )
        return template.render(stats=statistics)

    def _get_text_template(self) -> str:
        return """Package Inventory Statistics
============================
Files seen:      {{ stats.summary.files_seen }}
Files processed: {{ stats.summary.files_processed }}
Files skipped:   {{ stats.summary.files_skipped }}
Files failed:    {{ stats.summary.files_failed }}
Records:         {{ stats.total_records }}

By category
-----------
{% for row in stats.by_category %}
{{ "%6d"|format(row.Count) }}  {{ row.Category }}
{% endfor %}

By component type
-----------------
{% for row in stats.by_component_type %}
{{ "%6d"|format(row.Count) }}  {{ row.Category }}: {{ row.ComponentType }}
{% endfor %}

By file
-------
{% for row in stats.by_file %}
{{ "%6d"|format(row.Count) }}  {{ row.FileName }}
{% endfor %}
"""

    def _get_markdown_template(self) -> str:
        return """# Package Inventory Statistics

| Files seen | Processed | Skipped | Failed | Records |
|-----------:|----------:|--------:|-------:|--------:|
| {{ stats.summary.files_seen }} | {{ stats.summary.files_processed }} | {{ stats.summary.files_skipped }} | {{ stats.summary.files_failed }} | {{ stats.total_records }} |

## By category

| Category | Count |
|----------|------:|
{% for row in stats.by_category %}
| {{ row.Category }} | {{ row.Count }} |
{% endfor %}

## By component type

| Category | Component type | Count |
|----------|----------------|------:|
{% for row in stats.by_component_type %}
| {{ row.Category }} | {{ row.ComponentType }} | {{ row.Count }} |
{% endfor %}

## By file

| File | Count |
|------|------:|
{% for row in stats.by_file %}
| {{ row.FileName }} | {{ row.Count }} |
{% endfor %}
"""
