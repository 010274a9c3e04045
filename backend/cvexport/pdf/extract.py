"""cvexport/pdf/extract.py

Page -> raw content stream bytes.

A page's /Contents is either a single stream or an array of streams that
together form one operator sequence. Anything we cannot resolve or decode is
reported as NO_CONTENT instead of raising.
"""

import logging

from pypdf import PageObject, PdfReader
from pypdf.generic import ArrayObject, NameObject, StreamObject

from cvexport.pdf.types import NO_CONTENT, ContentRef, PageContent, SingleStream, StreamArray

logger = logging.getLogger("cvexport.pdf")

_CONTENTS = NameObject("/Contents")
_PDF_WHITESPACE = (b"\x00", b"\t", b"\n", b"\x0c", b"\r", b" ")


def resolve_content_ref(page: PageObject) -> ContentRef | None:
    contents = page.get(_CONTENTS)
    if contents is None:
        return None

    obj = contents.get_object()
    if isinstance(obj, StreamObject):
        return SingleStream(obj)

    if isinstance(obj, ArrayObject):
        streams: list[StreamObject] = []
        for item in obj:
            stream = item.get_object()
            if not isinstance(stream, StreamObject):
                return None
            streams.append(stream)
        return StreamArray(tuple(streams))

    return None


def _join_streams(parts: list[bytes]) -> bytes:
    # Parts split at token boundaries; keep the boundary when a part does not end in whitespace
    out = bytearray()
    for data in parts:
        if out and out[-1:] not in _PDF_WHITESPACE:
            out += b"\n"
        out += data
    return bytes(out)


def extract_page_content(reader: PdfReader, page_index: int) -> PageContent:
    """Decoded operator bytes for one page, or NO_CONTENT."""
    if not 0 <= page_index < len(reader.pages):
        raise IndexError(f"page index {page_index} out of range")
    try:
        ref = resolve_content_ref(reader.pages[page_index])
        if ref is None:
            return NO_CONTENT
        if isinstance(ref, SingleStream):
            return ref.stream.get_data()
        return _join_streams([stream.get_data() for stream in ref.streams])
    except Exception as e:
        logger.debug(
            "pdf.content_unreadable",
            extra={"page_index": page_index, "error_type": type(e).__name__},
        )
        return NO_CONTENT
