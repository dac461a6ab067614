"""CSV import — measured polarization vs time.

Reads the format written by CsvExporter. The first line is always treated
as the header and skipped. Rows whose first two cells do not parse as
finite numbers are dropped, never fatal. Imported points are merged with
the existing data set and re-sorted by time.
"""

from __future__ import annotations

import csv
import logging
import math
from typing import Iterable

from he3calc.models.results import ImportResult, MeasuredPoint

logger = logging.getLogger(__name__)


def _parse_row(row: list[str]) -> MeasuredPoint | None:
    if len(row) < 2:
        return None
    try:
        time = float(row[0].strip())
        polarization = float(row[1].strip())
    except ValueError:
        return None
    if math.isnan(time) or math.isnan(polarization):
        return None
    return MeasuredPoint(time=time, polarization=polarization)


class CsvImporter:
    """Import measured (time, polarization) data from CSV."""

    def parse_lines(
        self,
        lines: Iterable[str],
        existing: Iterable[MeasuredPoint] = (),
    ) -> ImportResult:
        """Parse CSV lines and merge them with existing points.

        Args:
            lines: CSV text lines, header first.
            existing: Points already loaded.

        Returns:
            ImportResult with merged points sorted by time.
        """
        rows = iter(lines)
        next(rows, None)  # header

        accepted: list[MeasuredPoint] = []
        skipped = 0
        for line_no, line in enumerate(rows, start=2):
            try:
                row = next(csv.reader([line]), [])
            except csv.Error as e:
                skipped += 1
                logger.info("Skipping CSV line %d: %s", line_no, e)
                continue
            if not row or not "".join(row).strip():
                continue
            point = _parse_row(row)
            if point is None:
                skipped += 1
                logger.info("Skipping CSV line %d: %.80s", line_no, ",".join(row))
                continue
            accepted.append(point)

        merged = sorted([*existing, *accepted], key=lambda p: p.time)
        return ImportResult(
            points=tuple(merged), imported=len(accepted), skipped=skipped,
        )

    def import_file(
        self,
        path: str,
        existing: Iterable[MeasuredPoint] = (),
    ) -> ImportResult:
        """Read a polarization CSV file.

        Args:
            path: Source file path.
            existing: Points already loaded.

        Returns:
            ImportResult with merged points sorted by time.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not text.
        """
        with open(path, "r", newline="", encoding="utf-8-sig") as f:
            result = self.parse_lines(f, existing)
        logger.info(
            "Imported %d rows from %s (%d skipped)",
            result.imported, path, result.skipped,
        )
        return result
