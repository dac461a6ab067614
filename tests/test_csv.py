"""Tests for polarization CSV export and import."""

import pytest

from he3calc.export.csv_export import CsvExporter
from he3calc.export.csv_import import CsvImporter
from he3calc.models.results import MeasuredPoint


class TestCsvExport:
    def test_format_rows(self):
        text = CsvExporter().format_rows([
            MeasuredPoint(0.0, 0.0),
            MeasuredPoint(30.5, 41.25),
        ])
        assert text == "Time (min),Polarization (%)\n0,0\n30.5,41.25\n"

    def test_header_only(self):
        assert CsvExporter().format_rows([]) == "Time (min),Polarization (%)\n"

    def test_export_file(self, tmp_path):
        path = tmp_path / "buildup.csv"
        n = CsvExporter().export_polarization(
            [MeasuredPoint(1.0, 10.0), MeasuredPoint(2.0, 20.0)], str(path),
        )
        assert n == 2
        lines = path.read_text(encoding="ascii").splitlines()
        assert lines == ["Time (min),Polarization (%)", "1,10", "2,20"]

    def test_export_bad_path(self, tmp_path):
        with pytest.raises(OSError):
            CsvExporter().export_polarization([], str(tmp_path / "missing" / "x.csv"))


class TestCsvImport:
    def test_parse_lines(self):
        result = CsvImporter().parse_lines([
            "Time (min),Polarization (%)",
            "60,50.5",
            "0,0",
            "30,35",
        ])
        assert result.imported == 3
        assert result.skipped == 0
        assert [p.time for p in result.points] == [0.0, 30.0, 60.0]

    def test_header_always_skipped(self):
        result = CsvImporter().parse_lines(["1,2", "3,4"])
        assert result.imported == 1
        assert result.points == (MeasuredPoint(3.0, 4.0),)

    def test_bad_rows_skipped(self):
        result = CsvImporter().parse_lines([
            "header",
            "10,20",
            "abc,5",
            "15",
            "",
            "20,nan",
            "25,30,extra",
        ])
        assert result.imported == 2
        assert result.skipped == 3
        assert result.points == (MeasuredPoint(10.0, 20.0), MeasuredPoint(25.0, 30.0))

    def test_merge_with_existing(self):
        existing = (MeasuredPoint(5.0, 1.0), MeasuredPoint(50.0, 9.0))
        result = CsvImporter().parse_lines(["h", "20,4"], existing)
        assert [p.time for p in result.points] == [5.0, 20.0, 50.0]
        assert result.imported == 1

    def test_file_roundtrip(self, tmp_path):
        path = tmp_path / "measured.csv"
        points = [MeasuredPoint(0.0, 0.0), MeasuredPoint(12.5, 33.3)]
        CsvExporter().export_polarization(points, str(path))
        result = CsvImporter().import_file(str(path))
        assert result.points == tuple(points)

    def test_bom_tolerated(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes(b"\xef\xbb\xbfTime,Pol\n1,2\n")
        assert CsvImporter().import_file(str(path)).points == (MeasuredPoint(1.0, 2.0),)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            CsvImporter().import_file(str(tmp_path / "nope.csv"))

    def test_oversized_field_skipped(self):
        result = CsvImporter().parse_lines(["h", "1,2", "x" * 200000 + ",5", "3,4"])
        assert result.points == (MeasuredPoint(1.0, 2.0), MeasuredPoint(3.0, 4.0))
        assert result.skipped == 1

    def test_nul_byte_row_skipped(self):
        result = CsvImporter().parse_lines(["h", "1\x00,2", "3,4"])
        assert result.points == (MeasuredPoint(3.0, 4.0),)
        assert result.skipped == 1

    def test_oversized_field_in_file(self, tmp_path):
        path = tmp_path / "huge.csv"
        path.write_text("h\n" + "9" * 200000 + ",1\n5,6\n", encoding="utf-8")
        result = CsvImporter().import_file(str(path))
        assert result.points == (MeasuredPoint(5.0, 6.0),)
        assert result.skipped == 1
