import json
import logging

from cvexport.core.logging_config import JsonFormatter
from cvexport.core.request_context import clear_context, get_context, set_context


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("cvexport.pdf", logging.INFO, __file__, 1, msg, None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_merges_context_and_extra():
    set_context(request_id="req-1", cv_id="cv-9")
    try:
        line = JsonFormatter().format(_record("pdf.blank_pages", removed_pages=[1], outcome="removed"))
    finally:
        clear_context()

    payload = json.loads(line)
    assert payload["msg"] == "pdf.blank_pages"
    assert payload["request_id"] == "req-1"
    assert payload["cv_id"] == "cv-9"
    assert payload["removed_pages"] == [1]
    assert payload["outcome"] == "removed"


def test_unserializable_extra_is_stringified():
    payload = json.loads(JsonFormatter().format(_record("x", blob=object())))

    assert payload["blob"].startswith("<object object")


def test_clear_context():
    set_context(template_id="basic", user_id="u1")
    clear_context()

    assert get_context() == {}
