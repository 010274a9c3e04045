from cvexport.pdf.blank_pages import BlankPageRemover, remove_blank_pages
from cvexport.pdf.classify import ContentClassifier
from cvexport.pdf.types import ClassificationResult, RemovalOutcome, RemovalReport, Verdict

__all__ = [
    "BlankPageRemover",
    "remove_blank_pages",
    "ContentClassifier",
    "ClassificationResult",
    "RemovalOutcome",
    "RemovalReport",
    "Verdict",
]
