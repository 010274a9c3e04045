import io

import pytest
from pypdf import PdfReader, PdfWriter

from cvexport.pdf.blank_pages import BlankPageRemover, remove_blank_pages
from cvexport.pdf.classify import ContentClassifier
from cvexport.pdf.filter import filter_blank_pages
from cvexport.pdf.types import RemovalOutcome
from tests.pdf_factory import Compressed, build_pdf, page_contents, page_count, text_page


def test_blank_middle_page_is_removed():
    pdf = build_pdf([text_page("Name"), b"", text_page("Skills")])

    out = remove_blank_pages(pdf)

    assert page_contents(out) == [text_page("Name"), text_page("Skills")]


def test_single_page_is_returned_untouched():
    pdf = build_pdf([b""])

    out, report = BlankPageRemover().run_with_report(pdf)

    assert out is pdf
    assert report.outcome is RemovalOutcome.SINGLE_PAGE
    assert report.page_count == 1


def test_all_blank_document_is_returned_untouched():
    pdf = build_pdf([b"", b""])

    out, report = BlankPageRemover().run_with_report(pdf)

    assert out == pdf
    assert report.outcome is RemovalOutcome.ALL_BLANK
    assert report.kept_pages == (0, 1)


@pytest.mark.parametrize(
    "garbage",
    [b"", b"definitely not a pdf", b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog", b"\x00" * 64],
)
def test_unparseable_input_is_returned_untouched(garbage):
    out, report = BlankPageRemover().run_with_report(garbage)

    assert out == garbage
    assert report.outcome is RemovalOutcome.ERROR
    assert report.page_count is None
    assert report.error_type


def test_short_no_op_page_is_removed():
    pages = [text_page("One"), text_page("Two"), b"q Q q Q  \n", text_page("Four")]
    pdf = build_pdf(pages)

    out, report = BlankPageRemover().run_with_report(pdf)

    assert report.outcome is RemovalOutcome.REMOVED
    assert report.removed_pages == (2,)
    assert report.kept_pages == (0, 1, 3)
    assert page_contents(out) == [pages[0], pages[1], pages[3]]


def test_nothing_blank_keeps_original_bytes():
    pdf = build_pdf([text_page("One"), text_page("Two")])

    out, report = BlankPageRemover().run_with_report(pdf)

    assert out is pdf
    assert report.outcome is RemovalOutcome.NO_BLANK_PAGES
    assert not report.changed


def test_page_without_contents_is_removed():
    pdf = build_pdf([None, text_page("Education")])

    out = remove_blank_pages(pdf)

    assert page_contents(out) == [text_page("Education")]


def test_kept_pages_keep_their_exact_content():
    graphics = b"q 0.2 0.4 0.8 rg 36 700 523 60 re f 36 600 523 60 re f Q"
    pages = [
        [b"BT /F1 12 Tf ", b"72 720 Td (Jane) Tj ET"],
        b"   ",
        Compressed(text_page("Projects")),
        graphics,
    ]
    pdf = build_pdf(pages)

    out = remove_blank_pages(pdf)

    assert page_contents(out) == [
        b"BT /F1 12 Tf 72 720 Td (Jane) Tj ET",
        text_page("Projects"),
        graphics,
    ]


def test_kept_pages_keep_their_resources():
    pdf = build_pdf([b"", text_page("Jane")])

    reader = PdfReader(io.BytesIO(remove_blank_pages(pdf)))
    font = reader.pages[0]["/Resources"]["/Font"]["/F1"].get_object()

    assert font["/BaseFont"] == "/Helvetica"


@pytest.mark.parametrize(
    "layout",
    ["CBC", "BCC", "CCB", "CBCBC", "BCBCB", "CCCCB"],
)
def test_output_is_ordered_subsequence(layout):
    pages = [text_page(f"page {i}") if kind == "C" else b"" for i, kind in enumerate(layout)]
    pdf = build_pdf(pages)

    out = remove_blank_pages(pdf)

    expected = [p for p, kind in zip(pages, layout) if kind == "C"]
    assert page_contents(out) == expected


def test_metadata_is_carried_over():
    pdf = build_pdf([text_page("Jane"), b""], title="Jane Doe CV")

    out = remove_blank_pages(pdf)

    assert page_count(out) == 1
    assert PdfReader(io.BytesIO(out)).metadata.title == "Jane Doe CV"


def test_serialization_failure_returns_original(monkeypatch):
    pdf = build_pdf([text_page("Jane"), b""])

    def boom(self, stream):
        raise OSError("disk full")

    monkeypatch.setattr(PdfWriter, "write", boom)

    out, report = BlankPageRemover().run_with_report(pdf)

    assert out is pdf
    assert report.outcome is RemovalOutcome.ERROR
    assert report.error_type == "OSError"


def test_custom_classifier_is_used():
    # A low threshold turns the short no-op page into "content"
    remover = BlankPageRemover(ContentClassifier(min_content_chars=2))
    pdf = build_pdf([text_page("Jane"), b"q Q q Q"])

    out, report = remover.run_with_report(pdf)

    assert out is pdf
    assert report.outcome is RemovalOutcome.NO_BLANK_PAGES


def test_filter_reports_each_page_and_leaves_source_alone():
    pdf = build_pdf([b"", text_page("A"), None, text_page("B")])
    reader = PdfReader(io.BytesIO(pdf))

    outcome = filter_blank_pages(reader, ContentClassifier())

    assert outcome.kept_pages == [1, 3]
    assert outcome.removed_pages == [0, 2]
    assert [r.page_index for r in outcome.results] == [0, 1, 2, 3]
    assert len(outcome.writer.pages) == 2
    assert len(reader.pages) == 4


def test_filter_with_every_page_blank_builds_empty_writer():
    reader = PdfReader(io.BytesIO(build_pdf([b"", None])))

    outcome = filter_blank_pages(reader, ContentClassifier())

    assert outcome.kept_pages == []
    assert len(outcome.writer.pages) == 0
