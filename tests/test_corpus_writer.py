"""Tests for corpus output."""

import json

import pandas as pd
import pytest

from pdf_page_cleaner.io import (
    to_dataframe,
    write_corpus_csv,
    write_document,
    write_json,
    write_text,
)
from pdf_page_cleaner.models import CleanedDocument, CleanedPage


@pytest.fixture
def docs():
    return [
        CleanedDocument(
            doc_id="session_1",
            pages=[
                CleanedPage(page=1, text="Mr President, colleagues"),
                CleanedPage(page=2, text="we vote today"),
            ],
            metadata={"num_pages": 2},
        ),
        CleanedDocument(
            doc_id="session_2",
            pages=[CleanedPage(page=1, text="Zażółć gęślą jaźń")],
        ),
    ]


class TestWriters:
    def test_write_json(self, docs, tmp_path):
        path = write_json(docs[0], tmp_path / "nested" / "s1.json")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["doc_id"] == "session_1"
        assert data["metadata"] == {"num_pages": 2}
        assert [p["page"] for p in data["pages"]] == [1, 2]

    def test_write_json_keeps_unicode(self, docs, tmp_path):
        path = write_json(docs[1], tmp_path / "s2.json")
        assert "Zażółć" in path.read_text(encoding="utf-8")

    def test_write_text(self, docs, tmp_path):
        path = write_text(docs[0], tmp_path / "s1.txt")
        assert path.read_text(encoding="utf-8") == "Mr President, colleagues we vote today"

    def test_write_text_separator(self, docs, tmp_path):
        path = write_text(docs[0], tmp_path / "s1.txt", separator="\n")
        assert path.read_text(encoding="utf-8") == "Mr President, colleagues\nwe vote today"


class TestCorpusTable:
    def test_to_dataframe(self, docs):
        df = to_dataframe(docs)

        assert list(df.columns) == ["doc_id", "page", "text"]
        assert df["doc_id"].tolist() == ["session_1", "session_1", "session_2"]
        assert df["page"].tolist() == [1, 2, 1]

    def test_to_dataframe_empty(self):
        df = to_dataframe([])

        assert df.empty
        assert list(df.columns) == ["doc_id", "page", "text"]

    def test_write_corpus_csv(self, docs, tmp_path):
        path = write_corpus_csv(docs, tmp_path / "corpus.csv")

        df = pd.read_csv(path)
        assert len(df) == 3
        assert df.loc[2, "text"] == "Zażółć gęślą jaźń"


class TestWriteDocument:
    @pytest.mark.parametrize("fmt", ["json", "txt", "csv"])
    def test_formats(self, docs, tmp_path, fmt):
        path = write_document(docs[0], tmp_path / f"s1.{fmt}", fmt=fmt)
        assert path.exists()

    def test_unknown_format(self, docs, tmp_path):
        with pytest.raises(ValueError, match="Unknown output format"):
            write_document(docs[0], tmp_path / "s1.xml", fmt="xml")
