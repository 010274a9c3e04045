"""cvexport/pdf/blank_pages.py

Best-effort removal of blank pages from a freshly rendered PDF.

Flow: bytes -> parse -> (more than one page?) classify + copy kept pages -> bytes.
Whatever goes wrong, the caller gets the original bytes back: this step may
leave a blank page in a CV but must never break the export.
"""

import io
import logging
import time

from pypdf import PdfReader, PdfWriter

from cvexport.pdf.classify import ContentClassifier
from cvexport.pdf.filter import filter_blank_pages
from cvexport.pdf.types import RemovalOutcome, RemovalReport

logger = logging.getLogger("cvexport.pdf")


def _elapsed_ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)


def _copy_metadata(reader: PdfReader, writer: PdfWriter) -> None:
    # Best-effort; a broken /Info dictionary is skipped
    try:
        info = reader.metadata
        if not info:
            return
        writer.add_metadata({key: info[key] for key in info if isinstance(info[key], str)})
    except Exception as e:
        logger.debug("pdf.metadata_skipped", extra={"error_type": type(e).__name__})


class BlankPageRemover:
    def __init__(self, classifier: ContentClassifier | None = None):
        self.classifier = classifier or ContentClassifier.from_settings()

    def run(self, pdf_bytes: bytes) -> bytes:
        cleaned, _ = self.run_with_report(pdf_bytes)
        return cleaned

    def run_with_report(self, pdf_bytes: bytes) -> tuple[bytes, RemovalReport]:
        t0 = time.perf_counter()
        try:
            cleaned, report = self._remove(pdf_bytes, t0)
        except Exception as e:
            logger.warning(
                "pdf.blank_pages_failed",
                exc_info=True,
                extra={"input_bytes": len(pdf_bytes or b""), "error_type": type(e).__name__},
            )
            cleaned = pdf_bytes
            report = RemovalReport(
                outcome=RemovalOutcome.ERROR,
                page_count=None,
                kept_pages=(),
                removed_pages=(),
                duration_ms=_elapsed_ms(t0),
                error_type=type(e).__name__,
            )

        logger.info(
            "pdf.blank_pages",
            extra={
                "outcome": report.outcome.value,
                "page_count": report.page_count,
                "kept_pages": list(report.kept_pages),
                "removed_pages": list(report.removed_pages),
                "duration_ms": report.duration_ms,
            },
        )
        return cleaned, report

    def _remove(self, pdf_bytes: bytes, t0: float) -> tuple[bytes, RemovalReport]:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        page_count = len(reader.pages)

        if page_count <= 1:
            return pdf_bytes, RemovalReport(
                outcome=RemovalOutcome.SINGLE_PAGE,
                page_count=page_count,
                kept_pages=tuple(range(page_count)),
                removed_pages=(),
                duration_ms=_elapsed_ms(t0),
            )

        filtered = filter_blank_pages(reader, self.classifier)
        kept = tuple(filtered.kept_pages)
        removed = tuple(filtered.removed_pages)

        if not removed:
            # Nothing to drop: skip re-serialization so the bytes stay untouched
            return pdf_bytes, RemovalReport(
                outcome=RemovalOutcome.NO_BLANK_PAGES,
                page_count=page_count,
                kept_pages=kept,
                removed_pages=(),
                duration_ms=_elapsed_ms(t0),
            )

        if not kept:
            # Never emit a zero-page PDF
            return pdf_bytes, RemovalReport(
                outcome=RemovalOutcome.ALL_BLANK,
                page_count=page_count,
                kept_pages=tuple(range(page_count)),
                removed_pages=(),
                duration_ms=_elapsed_ms(t0),
            )

        _copy_metadata(reader, filtered.writer)

        buf = io.BytesIO()
        filtered.writer.write(buf)
        return buf.getvalue(), RemovalReport(
            outcome=RemovalOutcome.REMOVED,
            page_count=page_count,
            kept_pages=kept,
            removed_pages=removed,
            duration_ms=_elapsed_ms(t0),
        )


def remove_blank_pages(pdf_bytes: bytes) -> bytes:
    """Drop blank pages from *pdf_bytes*. Never raises; returns the input on any failure."""
    return BlankPageRemover().run(pdf_bytes)
