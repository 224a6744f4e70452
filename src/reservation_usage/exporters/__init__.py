"""Exporters package for file-based report outputs."""

from .base_exporter import BaseExporter
from .csv_exporter import CSVExporter
from .json_exporter import JSONExporter

EXPORTERS = {"csv": CSVExporter, "json": JSONExporter}

__all__ = ["BaseExporter", "CSVExporter", "JSONExporter", "EXPORTERS"]
