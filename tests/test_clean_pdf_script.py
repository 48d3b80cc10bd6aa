import importlib.util
import json
from pathlib import Path

import pandas as pd
import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "clean_pdf.py"


@pytest.fixture
def clean_pdf():
    module_spec = importlib.util.spec_from_file_location("clean_pdf", SCRIPT_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


class TestCleanPdfScript:
    def test_json_output(self, clean_pdf, make_pdf, tmp_path, capsys):
        pdf_path = make_pdf("plenary.pdf", [["Debate opened", "& /en 1"], ["Vote"]])
        output_dir = tmp_path / "out"

        clean_pdf.main(["--pdf", str(pdf_path), "--output-dir", str(output_dir), "--format", "json"])

        data = json.loads((output_dir / "plenary.json").read_text(encoding="utf-8"))
        assert data["pages"][0]["text"].strip() == "Debate opened"
        assert "plenary: 2 pages (0 empty)" in capsys.readouterr().out

    def test_csv_corpus(self, clean_pdf, make_pdf, tmp_path):
        pdfs = [make_pdf("a.pdf", [["one"]]), make_pdf("b.pdf", [["two"], ["three"]])]
        output_dir = tmp_path / "out"

        clean_pdf.main(
            ["--pdf", *map(str, pdfs), "--output-dir", str(output_dir), "--format", "csv"]
        )

        df = pd.read_csv(output_dir / "corpus.csv")
        assert df["doc_id"].tolist() == ["a", "b", "b"]
        assert df["page"].tolist() == [1, 1, 2]

    def test_missing_pdf(self, clean_pdf, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            clean_pdf.main(["--pdf", str(tmp_path / "missing.pdf")])

        assert exc_info.value.code == 1
        assert "PDF file not found" in capsys.readouterr().out

    def test_invalid_pdf(self, clean_pdf, tmp_path, capsys):
        broken = tmp_path / "broken.pdf"
        broken.write_bytes(b"not a pdf")

        with pytest.raises(SystemExit) as exc_info:
            clean_pdf.main(["--pdf", str(broken), "--output-dir", str(tmp_path / "out")])

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out
