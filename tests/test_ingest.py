"""Tests for reading personnel source files."""

import pytest

from roster.domains.personnel.ingest import ingest_lines, ingest_personnel_files


class TestIngestLines:

    def test_one_bad_line_among_valid(self):
        lines = [
            "Manager,1,Jane,5000,HR",
            "Employee,2,A,100,1",
            "Employee,3,B,oops,1",
            "Employee,4,C,300,1",
        ]
        result = ingest_lines(lines)

        assert result.record_count == 3
        assert result.error_lines == ["Employee,3,B,oops,1"]
        [summary] = result.sources
        assert summary.line_count == summary.records + summary.rejected == 4

    def test_rejected_line_is_stripped(self):
        result = ingest_lines(["   garbage line  "])
        assert result.error_lines == ["garbage line"]

    def test_blank_line_is_an_error(self):
        result = ingest_lines(["Manager,1,Jane,5000,HR", ""])
        assert result.error_lines == [""]


class TestIngestFiles:

    def test_reads_all_sources_in_name_order(self, write_sources):
        input_dir = write_sources({
            "b.sb": ["Employee,2,A,100,1", "broken"],
            "a.sb": ["Manager,1,Jane,5000,HR"],
            "notes.txt": ["Manager,9,Skip,1,Ignored"],
        })
        result = ingest_personnel_files(input_dir)

        assert [s.name for s in result.sources] == ["a.sb", "b.sb"]
        assert [m.id for m in result.managers] == [1]
        assert [e.id for e in result.employees] == [2]
        assert result.error_lines == ["broken"]
        for summary in result.sources:
            assert summary.line_count == summary.records + summary.rejected

    def test_legacy_encoding(self, tmp_path):
        input_dir = tmp_path / "input"
        input_dir.mkdir()
        (input_dir / "legacy.sb").write_bytes("Manager,1,Zoë,5000,R&D\n".encode("cp1252"))

        result = ingest_personnel_files(input_dir)

        assert result.managers[0].name == "Zoë"

    def test_empty_directory(self, tmp_path):
        assert ingest_personnel_files(tmp_path).record_count == 0

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ingest_personnel_files(tmp_path / "nope")
