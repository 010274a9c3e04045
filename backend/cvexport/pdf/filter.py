"""cvexport/pdf/filter.py

Copy every non-blank page of a parsed document into a new one, in order.
"""

import logging
from dataclasses import dataclass, field

from pypdf import PdfReader, PdfWriter

from cvexport.pdf.classify import ContentClassifier
from cvexport.pdf.extract import extract_page_content
from cvexport.pdf.types import NO_CONTENT, ClassificationResult

logger = logging.getLogger("cvexport.pdf")


@dataclass
class FilterOutcome:
    writer: PdfWriter
    kept_pages: list[int] = field(default_factory=list)
    removed_pages: list[int] = field(default_factory=list)
    results: list[ClassificationResult] = field(default_factory=list)


def filter_blank_pages(reader: PdfReader, classifier: ContentClassifier) -> FilterOutcome:
    """
    Caller handles documents with a single page; this always builds a new writer.
    The source reader is never modified. If every page is blank the writer is empty.
    """
    outcome = FilterOutcome(writer=PdfWriter())

    for index in range(len(reader.pages)):
        content = extract_page_content(reader, index)
        result = classifier.classify(content, page_index=index)
        outcome.results.append(result)

        logger.debug(
            "pdf.page_classified",
            extra={
                "page_index": index,
                "verdict": result.verdict.value,
                "signals": list(result.signals),
                "content_bytes": None if content is NO_CONTENT else len(content),
            },
        )

        if result.is_blank:
            outcome.removed_pages.append(index)
            continue

        # add_page clones the page with its resources (fonts, images, gstate)
        outcome.writer.add_page(reader.pages[index])
        outcome.kept_pages.append(index)

    return outcome
