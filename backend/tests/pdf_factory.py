"""Hand-assembled PDFs so tests control every content stream byte.

Each page entry is one of:
- bytes          -> /Contents is a single stream
- list[bytes]    -> /Contents is an array of streams
- Compressed     -> single FlateDecode stream
- None           -> page has no /Contents at all
"""

import io
import zlib
from dataclasses import dataclass

from pypdf import PdfReader

from cvexport.pdf.extract import extract_page_content


@dataclass(frozen=True)
class Compressed:
    data: bytes


TEXT_PAGE = b"BT /F1 12 Tf 72 720 Td (%s) Tj ET"


def text_page(label: str) -> bytes:
    return TEXT_PAGE % label.encode("latin-1")


def _stream(entry) -> bytes:
    if isinstance(entry, Compressed):
        data = zlib.compress(entry.data)
        return b"<< /Length %d /Filter /FlateDecode >>\nstream\n" % len(data) + data + b"\nendstream"
    return b"<< /Length %d >>\nstream\n" % len(entry) + entry + b"\nendstream"


def build_pdf(pages: list, *, title: str | None = None) -> bytes:
    # 1 = catalog, 2 = page tree, 3 = font; filled in / appended below
    objects: list[bytes] = [b"", b"", b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>"]

    def add(body: bytes) -> int:
        objects.append(body)
        return len(objects)

    kids: list[int] = []
    for entry in pages:
        contents = b""
        if isinstance(entry, list):
            refs = [add(_stream(part)) for part in entry]
            contents = b" /Contents [" + b" ".join(b"%d 0 R" % r for r in refs) + b"]"
        elif entry is not None:
            contents = b" /Contents %d 0 R" % add(_stream(entry))
        kids.append(add(
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 595 842]"
            b" /Resources << /Font << /F1 3 0 R >> >>" + contents + b" >>"
        ))

    objects[0] = b"<< /Type /Catalog /Pages 2 0 R >>"
    objects[1] = (
        b"<< /Type /Pages /Kids [" + b" ".join(b"%d 0 R" % k for k in kids) + b"] /Count %d >>" % len(kids)
    )
    info_ref = add(b"<< /Title (" + title.encode("latin-1") + b") >>") if title else None

    out = bytearray(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset

    trailer = b"<< /Size %d /Root 1 0 R" % (len(objects) + 1)
    if info_ref:
        trailer += b" /Info %d 0 R" % info_ref
    trailer += b" >>"
    out += b"trailer\n" + trailer + b"\nstartxref\n%d\n%%%%EOF\n" % xref_at
    return bytes(out)


def page_contents(pdf_bytes: bytes) -> list:
    reader = PdfReader(io.BytesIO(pdf_bytes))
    return [extract_page_content(reader, i) for i in range(len(reader.pages))]


def page_count(pdf_bytes: bytes) -> int:
    return len(PdfReader(io.BytesIO(pdf_bytes)).pages)
