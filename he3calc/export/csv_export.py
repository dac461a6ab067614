"""CSV export — polarization vs time.

Two columns, ASCII, comma-separated:
    Time (min),Polarization (%)
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Iterable

from he3calc.constants import CSV_HEADER
from he3calc.models.results import MeasuredPoint

logger = logging.getLogger(__name__)


def _format_value(value: float) -> str:
    return f"{value:.10g}"


class CsvExporter:
    """CSV file export operations."""

    def format_rows(self, points: Iterable[MeasuredPoint]) -> str:
        """Render points as CSV text (header included).

        Args:
            points: (time [min], polarization [%]) samples.

        Returns:
            CSV document as a string.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for p in points:
            writer.writerow([_format_value(p.time), _format_value(p.polarization)])
        return buffer.getvalue()

    def export_polarization(
        self, points: Iterable[MeasuredPoint], output_path: str,
    ) -> int:
        """Write polarization samples to a CSV file.

        Args:
            points: (time [min], polarization [%]) samples, written in order.
            output_path: Destination file path (.csv).

        Returns:
            Number of data rows written.
        """
        rows = list(points)
        with open(output_path, "w", newline="", encoding="ascii") as f:
            f.write(self.format_rows(rows))
        logger.info("Exported %d polarization rows to %s", len(rows), output_path)
        return len(rows)
