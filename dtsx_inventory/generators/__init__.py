"""Generators module for building records, output files and statistics reports"""

from .record_emitter import RecordEmitter
from .output_writer import OutputWriter
from .statistics_generator import StatisticsGenerator

__all__ = ["RecordEmitter", "OutputWriter", "StatisticsGenerator"]
