from cvexport.render.html import build_cv_html
from cvexport.render.types import Margins, PageOptions, PdfRenderer

__all__ = ["build_cv_html", "Margins", "PageOptions", "PdfRenderer"]
