from fastapi import Depends

from cvexport.render.chromium import ChromiumRenderer
from cvexport.render.types import PdfRenderer
from cvexport.services.export_service import CvExportService


def get_renderer() -> PdfRenderer:
    """
    Provides the HTML -> PDF renderer.
    Using Depends(get_renderer) allows swapping Chromium out in tests.
    """
    return ChromiumRenderer()


def get_export_service(renderer: PdfRenderer = Depends(get_renderer)) -> CvExportService:
    """
    Service dependency for the export flow.
    """
    return CvExportService(renderer=renderer)
