"""cvexport/pdf/classify.py

Cheap, explainable heuristics to decide whether a page's content stream
paints anything worth keeping.

Rules run in a fixed order and the first one that fires wins. Any doubt,
including an error inside a rule, resolves to HAS_CONTENT.
"""

import logging
import re
from typing import Callable, Iterable

from cvexport.core.config import Settings, settings
from cvexport.pdf.types import NO_CONTENT, ClassificationResult, PageContent, Verdict

logger = logging.getLogger("cvexport.pdf")


DEFAULT_TEXT_OPERATORS: tuple[str, ...] = ("Tj", "TJ", "'", '"', "Td", "TD", "Tm")
DEFAULT_MIN_CONTENT_CHARS = 50

# PDF whitespace and delimiter characters
_WHITESPACE = "\x00\t\n\x0c\r "
_CLOSING = r")>\]}"
_DELIMITERS = r"()<>\[\]{}/%"

# (…) with at least one character inside; backslash escapes count as one.
# An unescaped "(" ends the candidate.
_LITERAL_STRING = re.compile(r"\((?:\\.|[^\\()])+\)", re.DOTALL)
# <…> with at least one hex digit, never part of << or >>
_HEX_STRING = re.compile(
    r"(?<!<)<(?!<)[0-9A-Fa-f" + _WHITESPACE + r"]*[0-9A-Fa-f][0-9A-Fa-f" + _WHITESPACE + r"]*>"
)


def _compile_operator_pattern(operators: Iterable[str]) -> re.Pattern:
    # Longest first so alternation never stops at a prefix
    alternatives = "|".join(re.escape(op) for op in sorted(operators, key=len, reverse=True))
    return re.compile(
        r"(?:^|(?<=[" + _WHITESPACE + _CLOSING + r"]))"
        r"(?:" + alternatives + r")"
        r"(?=$|[" + _WHITESPACE + _DELIMITERS + r"])"
    )


def _has_string_literal(text: str) -> bool:
    return bool(_LITERAL_STRING.search(text) or _HEX_STRING.search(text))


class ContentClassifier:
    def __init__(
        self,
        *,
        text_operators: Iterable[str] = DEFAULT_TEXT_OPERATORS,
        min_content_chars: int = DEFAULT_MIN_CONTENT_CHARS,
    ):
        self.text_operators = tuple(text_operators)
        if not self.text_operators:
            raise ValueError("text_operators must not be empty")
        self.min_content_chars = min_content_chars
        self._operator_re = _compile_operator_pattern(self.text_operators)

        self._rules: list[tuple[str, Callable[[str], bool]]] = [
            ("text_operator", self._has_text_operator),
            ("string_literal", _has_string_literal),
            ("substantial_content", self._is_substantial),
        ]

    @classmethod
    def from_settings(cls, s: Settings = settings) -> "ContentClassifier":
        return cls(
            text_operators=s.blank_page_text_operators or DEFAULT_TEXT_OPERATORS,
            min_content_chars=s.BLANK_PAGE_MIN_CONTENT_CHARS,
        )

    def _has_text_operator(self, text: str) -> bool:
        return self._operator_re.search(text) is not None

    def _is_substantial(self, text: str) -> bool:
        return len(text.strip()) > self.min_content_chars

    def classify(self, content: PageContent, *, page_index: int | None = None) -> ClassificationResult:
        if content is NO_CONTENT:
            return ClassificationResult(Verdict.BLANK, ("no_content",), page_index)

        try:
            if len(content) == 0:
                return ClassificationResult(Verdict.BLANK, ("empty_stream",), page_index)

            # latin-1 maps every byte to one char, so decoding cannot fail
            text = bytes(content).decode("latin-1")
            for name, rule in self._rules:
                if rule(text):
                    return ClassificationResult(Verdict.HAS_CONTENT, (name,), page_index)
        except Exception as e:
            logger.warning(
                "pdf.classify_failed",
                extra={"page_index": page_index, "error_type": type(e).__name__},
            )
            return ClassificationResult(Verdict.HAS_CONTENT, ("classifier_error",), page_index)

        return ClassificationResult(Verdict.BLANK, ("no_signal",), page_index)
