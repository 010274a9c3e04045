"""cvexport/pdf/types.py

Lightweight types for blank page removal.
Design goals:
- the classifier only ever sees decoded operator bytes, never the object graph
- every verdict carries the signals that produced it (for logs)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pypdf.generic import StreamObject


# A page whose /Contents is absent or unreadable. Distinct from b"" (an empty stream).
NO_CONTENT = None

PageContent = Optional[bytes]


@dataclass(frozen=True)
class SingleStream:
    stream: StreamObject


@dataclass(frozen=True)
class StreamArray:
    streams: tuple[StreamObject, ...]  # drawing order


ContentRef = Union[SingleStream, StreamArray]


class Verdict(str, Enum):
    HAS_CONTENT = "HAS_CONTENT"
    BLANK = "BLANK"


@dataclass(frozen=True)
class ClassificationResult:
    verdict: Verdict
    signals: tuple[str, ...] = ()
    page_index: int | None = None

    @property
    def is_blank(self) -> bool:
        return self.verdict is Verdict.BLANK


class RemovalOutcome(str, Enum):
    SINGLE_PAGE = "single_page"
    NO_BLANK_PAGES = "no_blank_pages"
    REMOVED = "removed"
    ALL_BLANK = "all_blank"
    ERROR = "error"


@dataclass(frozen=True)
class RemovalReport:
    outcome: RemovalOutcome
    page_count: int | None  # None when the input could not be parsed
    kept_pages: tuple[int, ...]
    removed_pages: tuple[int, ...]
    duration_ms: int
    error_type: str | None = None

    @property
    def changed(self) -> bool:
        return self.outcome is RemovalOutcome.REMOVED
