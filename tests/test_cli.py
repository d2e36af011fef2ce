"""
Tests for the command-line interface.
"""

from __future__ import annotations

import json

from click.testing import CliRunner

from question_mapper.cli import cli


class TestAnalyzeCommand:

    def test_json_output(self, tmp_path, two_page_pdf):
        pdf = tmp_path / "exam.pdf"
        pdf.write_bytes(two_page_pdf)

        result = CliRunner().invoke(cli, ["analyze", "--json-output", str(pdf)])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["results"][0]["fileName"] == "exam.pdf"
        assert data["results"][0]["totalPages"] == 2

    def test_table_output_and_saved_json(self, tmp_path, two_page_pdf):
        pdf = tmp_path / "exam.pdf"
        pdf.write_bytes(two_page_pdf)
        out_file = tmp_path / "out" / "results.json"

        result = CliRunner().invoke(
            cli,
            ["analyze", "--log-level", "ERROR", "-o", str(out_file), str(pdf)],
        )

        assert result.exit_code == 0
        assert "Printed page sequence" in result.output
        saved = json.loads(out_file.read_text(encoding="utf-8"))
        assert saved["results"][0]["fileName"] == "exam.pdf"

    def test_failed_document_is_reported(self, tmp_path, two_page_pdf):
        good = tmp_path / "good.pdf"
        good.write_bytes(two_page_pdf)
        bad = tmp_path / "bad.pdf"
        bad.write_bytes(b"not a pdf")

        result = CliRunner().invoke(
            cli, ["analyze", "--json-output", str(good), str(bad)]
        )

        assert result.exit_code == 0
        results = json.loads(result.output)["results"]
        assert "error" not in results[0]
        assert results[1]["error"]
        assert results[1]["totalPages"] == 0

    def test_all_failed_exits_nonzero(self, tmp_path):
        bad = tmp_path / "bad.pdf"
        bad.write_bytes(b"not a pdf")

        result = CliRunner().invoke(cli, ["analyze", "--json-output", str(bad)])

        assert result.exit_code == 1

    def test_markup_in_file_name_is_printed_literally(self, tmp_path):
        bad = tmp_path / "[red]bad.pdf"
        bad.write_bytes(b"not a pdf")

        result = CliRunner().invoke(
            cli, ["analyze", "--log-level", "ERROR", str(bad)]
        )

        assert result.exit_code == 1
        assert "[red]bad.pdf" in result.output


class TestInfoCommand:

    def test_info(self, tmp_path, make_pdf):
        pdf = tmp_path / "three.pdf"
        pdf.write_bytes(make_pdf(["a", "b", "c"]))

        result = CliRunner().invoke(cli, ["info", str(pdf)])

        assert result.exit_code == 0
        assert "three.pdf" in result.output
        assert "3" in result.output

    def test_info_metadata(self, tmp_path, make_pdf):
        pdf = tmp_path / "mock.pdf"
        pdf.write_bytes(make_pdf(["a"], metadata={"title": "Mock Exam"}))

        result = CliRunner().invoke(cli, ["info", str(pdf)])

        assert result.exit_code == 0
        assert "Title" in result.output
        assert "Mock Exam" in result.output

    def test_info_corrupt(self, tmp_path):
        bad = tmp_path / "bad.pdf"
        bad.write_bytes(b"not a pdf")

        result = CliRunner().invoke(cli, ["info", str(bad)])

        assert result.exit_code == 1
        assert "Error" in result.output
