# cvexport/services/export_service.py
"""
export_service.py
- Purpose: Orchestrates a CV export: data -> HTML -> PDF -> blank page cleanup.
- Owns: format validation, rendering, post-processing, filename.
- Design: Thick service; the router only maps HTTP in and bytes out.
"""

import logging
import re
import time
from dataclasses import dataclass

from cvexport.auth.jwt import Identity
from cvexport.core.config import settings
from cvexport.pdf.blank_pages import BlankPageRemover
from cvexport.pdf.types import RemovalReport
from cvexport.render.html import build_cv_html
from cvexport.render.types import PageOptions, PdfRenderer
from cvexport.schemas.cv_export import CvExportRequest
from cvexport.validations.export_validators import validate_export_format

logger = logging.getLogger("cvexport.export_service")

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


def export_filename(cv_id: str) -> str:
    return f"CV-{_UNSAFE_FILENAME_CHARS.sub('_', cv_id)}.pdf"


@dataclass(frozen=True)
class ExportedPdf:
    content: bytes
    filename: str
    removal: RemovalReport | None = None


class CvExportService:
    def __init__(
        self,
        renderer: PdfRenderer,
        *,
        remover: BlankPageRemover | None = None,
        remove_blank_pages: bool | None = None,
        page_options: PageOptions | None = None,
    ):
        self.renderer = renderer
        self.remover = remover or BlankPageRemover()
        self.remove_blank_pages = (
            settings.BLANK_PAGE_REMOVAL_ENABLED if remove_blank_pages is None else remove_blank_pages
        )
        self.page_options = page_options or PageOptions()

    def export_pdf(self, cv_id: str, req: CvExportRequest, identity: Identity) -> ExportedPdf:
        validate_export_format(req.format)

        t0 = time.perf_counter()
        html = build_cv_html(req.data, req.template_id)
        pdf_bytes = self.renderer.render_to_pdf(html, self.page_options)

        logger.info(
            "cv.export.rendered",
            extra={
                "user_id": identity.user_id,
                "html_chars": len(html),
                "pdf_bytes": len(pdf_bytes),
            },
        )

        report = None
        if self.remove_blank_pages:
            pdf_bytes, report = self.remover.run_with_report(pdf_bytes)

        logger.info(
            "cv.export.done",
            extra={
                "pdf_bytes": len(pdf_bytes),
                "blank_pages_removed": len(report.removed_pages) if report else 0,
                "duration_ms": int((time.perf_counter() - t0) * 1000),
            },
        )
        return ExportedPdf(content=pdf_bytes, filename=export_filename(cv_id), removal=report)
