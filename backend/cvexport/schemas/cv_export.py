"""
cv_export.py (schemas)
- Purpose: Request DTO for the CV export endpoint.
- Design: Field names on the wire match the editor frontend (camelCase).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CvExportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    format: str = Field(min_length=1, max_length=16)
    template_id: str | None = Field(default=None, alias="templateId", max_length=64)
    data: dict[str, Any] = Field(default_factory=dict)
