import pytest

from text_digest import ingest
from text_digest.errors import (
    ExtractionError,
    FileTooLargeError,
    InsufficientTextError,
    UnsupportedFileTypeError,
)
from text_digest.ingest import (
    IngestConfig,
    extract_markdown_text,
    extract_rtf_text,
    load_text_from_bytes,
)

PARAGRAPH = (
    "Le climat change rapidement et le climat inquiète les chercheurs. "
    "Comprendre le climat demande des mesures du climat sur plusieurs décennies. "
) * 3


class FakePage:
    def __init__(self, text):
        self.text = text

    def extract_text(self):
        return self.text


class FakePdf:
    def __init__(self, pages):
        self.pages = pages

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_plain_text_is_returned_as_is():
    assert load_text_from_bytes("notes.txt", PARAGRAPH.encode("utf-8")) == PARAGRAPH


def test_too_little_text():
    with pytest.raises(InsufficientTextError):
        load_text_from_bytes("notes.txt", "Une seule ligne.".encode("utf-8"))


def test_file_too_large():
    with pytest.raises(FileTooLargeError) as excinfo:
        load_text_from_bytes("notes.txt", PARAGRAPH.encode("utf-8"), IngestConfig(max_file_size=10))
    assert excinfo.value.limit == 10


def test_unsupported_extension():
    with pytest.raises(UnsupportedFileTypeError):
        load_text_from_bytes("rapport.docx", PARAGRAPH.encode("utf-8"))
    with pytest.raises(UnsupportedFileTypeError):
        load_text_from_bytes("README", PARAGRAPH.encode("utf-8"))


def test_markdown_is_flattened():
    md = "# Titre\n\nCeci est **important** et [un lien](http://exemple.fr).\n\n```\ncode()\n```\n"
    assert extract_markdown_text(md) == "Titre\n\nCeci est important et un lien."


def test_rtf_is_flattened():
    rtf = r"{\rtf1\ansi Bonjour \b tout\b0  le monde.}"
    assert extract_rtf_text(rtf) == "Bonjour tout le monde."


def test_pdf_pages_are_joined(monkeypatch):
    pages = [FakePage(PARAGRAPH), FakePage(None), FakePage("Dernière page du document.")]
    monkeypatch.setattr(ingest.pdfplumber, "open", lambda fp: FakePdf(pages))
    text = load_text_from_bytes("chapitre.PDF", b"%PDF-1.4")
    assert text == PARAGRAPH + "\nDernière page du document."


def test_unreadable_pdf(monkeypatch):
    def broken(fp):
        raise ValueError("not a pdf")

    monkeypatch.setattr(ingest.pdfplumber, "open", broken)
    with pytest.raises(ExtractionError):
        load_text_from_bytes("chapitre.pdf", b"garbage")
