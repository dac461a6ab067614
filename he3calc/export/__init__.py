"""Export — measured polarization CSV import/export."""

from he3calc.export.csv_export import CsvExporter
from he3calc.export.csv_import import CsvImporter

__all__ = ["CsvExporter", "CsvImporter"]
