"""
Request context helpers.

We keep a small context (request_id, cv_id, template_id, user_id) in ContextVars.
The HTTP middleware and the export router set these values so every log line
emitted while exporting one CV can be correlated.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_cv_id: ContextVar[Optional[str]] = ContextVar("cv_id", default=None)
_template_id: ContextVar[Optional[str]] = ContextVar("template_id", default=None)
_user_id: ContextVar[Optional[str]] = ContextVar("user_id", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    cv_id: Optional[str] = None,
    template_id: Optional[str] = None,
    user_id: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if cv_id is not None:
        _cv_id.set(cv_id)
    if template_id is not None:
        _template_id.set(template_id)
    if user_id is not None:
        _user_id.set(user_id)


def clear_context() -> None:
    _request_id.set(None)
    _cv_id.set(None)
    _template_id.set(None)
    _user_id.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    cid = _cv_id.get()
    tid = _template_id.get()
    uid = _user_id.get()

    if rid:
        ctx["request_id"] = rid
    if cid:
        ctx["cv_id"] = cid
    if tid:
        ctx["template_id"] = tid
    if uid:
        ctx["user_id"] = uid
    return ctx
