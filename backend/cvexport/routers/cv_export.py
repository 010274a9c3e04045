"""
cv_export.py
- Purpose: API route for exporting a CV as PDF.
- Design: Keep router thin. Delegate rendering and cleanup to the service.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from cvexport.api.deps import get_export_service
from cvexport.auth.deps import require_identity
from cvexport.auth.jwt import Identity
from cvexport.core.request_context import set_context
from cvexport.schemas.cv_export import CvExportRequest
from cvexport.services.export_service import CvExportService

router = APIRouter(prefix="/api/cv", tags=["Export"])


@router.post("/export/{cv_id}")
def export_cv(
    cv_id: str,
    req: CvExportRequest,
    identity: Identity = Depends(require_identity),
    svc: CvExportService = Depends(get_export_service),
) -> Response:
    set_context(cv_id=cv_id, template_id=req.template_id, user_id=identity.user_id)

    exported = svc.export_pdf(cv_id, req, identity)
    return Response(
        content=exported.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{exported.filename}"',
            "Cache-Control": "no-cache",
        },
    )
