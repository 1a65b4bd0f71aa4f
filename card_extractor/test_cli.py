"""
Tests for the interactive command-line shell.
"""

import logging

import pytest

from . import cli, pdf_extract, pipeline
from .pdf_extract import ExtractionError, extract_document_text


DOCUMENT = "Mr. A\nAcme\n1 Road\nEmail: a@acme.com\n2\nMs. B\nBeta\n"


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    logger = logging.getLogger("card_extractor")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def answers(monkeypatch):
    """Feed prompt answers to input() in order."""
    def install(*values):
        it = iter(values)
        monkeypatch.setattr("builtins.input", lambda *args: next(it))
    return install


@pytest.fixture
def source(tmp_path, monkeypatch):
    path = tmp_path / "cards.pdf"
    path.write_bytes(b"%PDF-1.4")
    monkeypatch.setattr(pipeline, "extract_document_text", lambda p: DOCUMENT)
    return path


def test_all_options_given(source, tmp_path, capsys):
    code = cli.main([
        "-i", str(source), "-f", "csv", "-d", str(tmp_path), "-n", "out",
        "--no-pause", "--log-dir", str(tmp_path / "logs"),
    ])

    assert code == 0
    content = (tmp_path / "out.csv").read_text(encoding="utf-8")
    assert content.splitlines() == [
        "Name,Company,Title,Phone,Mobile,Email,Address",
        '"Mr. A","Acme","","","","a@acme.com","1 Road"',
        '"Ms. B","Beta","","","","",""',
    ]
    out = capsys.readouterr().out
    assert "Parsing Complete." in out
    assert cli.EXIT_MESSAGE in out
    assert (tmp_path / "logs" / "card_extractor.log").exists()


def test_prompts_retry_path_and_format(source, tmp_path, answers, capsys):
    answers(
        str(tmp_path / "missing.pdf"),
        str(source),
        "xlsx",
        "txt",
        str(tmp_path),
        "dump",
        "",
    )

    code = cli.main([])

    assert code == 0
    assert (tmp_path / "dump.txt").read_text(encoding="utf-8") == DOCUMENT
    out = capsys.readouterr().out
    assert "Invalid path, file not found in that location." in out
    assert "Unrecognized output type. Please select one of the following: csv, txt." in out


def test_fatal_extraction_error_exits_zero(source, tmp_path, monkeypatch, capsys):
    def failing(path):
        raise ExtractionError(3, RuntimeError("corrupt"))

    monkeypatch.setattr(pipeline, "extract_document_text", failing)

    code = cli.main([
        "-i", str(source), "-f", "csv", "-d", str(tmp_path), "-n", "out", "--no-pause",
    ])

    assert code == 0
    assert not (tmp_path / "out.csv").exists()
    out = capsys.readouterr().out
    assert "Unable to extract content from page #3: corrupt" in out
    assert "Parsing Complete." not in out


def test_fatal_write_error_exits_zero(source, tmp_path, capsys):
    code = cli.main([
        "-i", str(source), "-f", "txt", "-d", str(tmp_path / "nowhere"), "-n", "out", "--no-pause",
    ])

    assert code == 0
    assert "Unable to generate output file" in capsys.readouterr().out


def test_closed_input_stops_prompting(monkeypatch):
    def closed(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    code = cli.main(["--no-pause"])
    assert code == 130


def test_unreadable_page_tree_exits_zero(source, tmp_path, monkeypatch, capsys):
    class BrokenPdf:
        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

        @property
        def pages(self):
            raise ValueError("bad MediaBox")

    monkeypatch.setattr(pipeline, "extract_document_text", extract_document_text)
    monkeypatch.setattr(pdf_extract.pdfplumber, "open", lambda path: BrokenPdf())

    code = cli.main([
        "-i", str(source), "-f", "csv", "-d", str(tmp_path), "-n", "out", "--no-pause",
    ])

    assert code == 0
    assert not (tmp_path / "out.csv").exists()
    out = capsys.readouterr().out
    assert "Error opening the document: bad MediaBox" in out
    assert cli.EXIT_MESSAGE in out
