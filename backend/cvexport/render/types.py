"""cvexport/render/types.py

Contract between the export service and whatever turns HTML into PDF bytes.
"""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class Margins:
    top: str = "0.5cm"
    right: str = "0.5cm"
    bottom: str = "0.5cm"
    left: str = "0.5cm"

    def as_dict(self) -> dict[str, str]:
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}


@dataclass(frozen=True)
class PageOptions:
    page_size: str = "A4"
    margins: Margins = field(default_factory=Margins)
    print_background: bool = True


class PdfRenderer(Protocol):
    def render_to_pdf(self, html: str, options: PageOptions) -> bytes:
        ...
