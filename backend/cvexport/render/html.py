# cvexport/render/html.py
"""
CV data -> standalone HTML page for the PDF renderer.

Layout is intentionally plain: one column, sections in a fixed order.
Every user supplied value goes through _esc(); rich-text summaries are
reduced to plain text first.
"""

import html
import re
from dataclasses import dataclass
from typing import Any, Mapping

PAGE_V1 = """
<!DOCTYPE html>
<html lang="{{lang}}">
<head>
<meta charset="utf-8">
<style>
  @page { size: A4; }
  body { font-family: 'Inter', Arial, sans-serif; font-size: 10px; line-height: 1.4; color: #374151; margin: 0; }
  .cv { max-width: 794px; margin: 0 auto; padding: 20px; }
  header { text-align: {{header_align}}; margin-bottom: 24px; padding-bottom: 12px; border-bottom: 2px solid {{accent}}; }
  h1 { font-size: 24px; margin: 0 0 8px 0; color: #111827; }
  .contact span { margin: 0 8px 0 0; }
  section { margin-bottom: 18px; break-inside: avoid-page; }
  h2 { font-size: 14px; color: {{accent}}; margin: 0 0 8px 0; border-bottom: 1px solid #e5e7eb; padding-bottom: 4px; }
  .item { margin-bottom: 10px; }
  .item-head { display: flex; justify-content: space-between; font-weight: bold; }
  .muted { color: #6b7280; }
  ul.tags { list-style: none; padding: 0; margin: 0; }
  ul.tags li { display: inline-block; margin: 0 6px 4px 0; padding: 2px 6px; background: #f3f4f6; border-radius: 4px; }
</style>
</head>
<body>
<div class="cv">
{{body}}
</div>
</body>
</html>
""".strip()


@dataclass(frozen=True)
class TemplateStyle:
    template_id: str
    accent: str
    header_align: str = "left"


TEMPLATES: dict[str, TemplateStyle] = {
    "basic": TemplateStyle("basic", "#1f2937"),
    "modern-centered": TemplateStyle("modern-centered", "#3b82f6", header_align="center"),
    "professional": TemplateStyle("professional", "#0f766e"),
    "minimalist": TemplateStyle("minimalist", "#6b7280"),
}
DEFAULT_TEMPLATE_ID = "basic"

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


def get_template(template_id: str | None) -> TemplateStyle:
    return TEMPLATES.get(template_id or "", TEMPLATES[DEFAULT_TEMPLATE_ID])


def strip_html_tags(value: str | None) -> str:
    if not value:
        return ""
    text = _TAG_RE.sub(" ", value)
    return _WS_RE.sub(" ", html.unescape(text)).strip()


def _esc(value: Any) -> str:
    if value is None:
        return ""
    return html.escape(str(value).strip())


def _date_range(item: Mapping[str, Any]) -> str:
    start = _esc(item.get("startDate"))
    end = "Present" if item.get("current") else _esc(item.get("endDate"))
    if start and end:
        return f"{start} – {end}"
    return start or end


def _item(title: str, subtitle: str = "", meta: str = "", description: str | None = None) -> str:
    parts = [f'<div class="item"><div class="item-head"><span>{title}</span><span class="muted">{meta}</span></div>']
    if subtitle:
        parts.append(f'<div class="muted">{subtitle}</div>')
    if description:
        parts.append(f"<p>{_esc(strip_html_tags(description))}</p>")
    parts.append("</div>")
    return "".join(parts)


def _section(title: str, items: list[str]) -> str:
    if not items:
        return ""
    return f"<section><h2>{title}</h2>{''.join(items)}</section>"


def _full_name(info: Mapping[str, Any]) -> str:
    name = info.get("fullName") or info.get("name")
    if not name:
        name = f"{info.get('firstName') or ''} {info.get('lastName') or ''}".strip()
    return _esc(name)


def _header(info: Mapping[str, Any]) -> str:
    contact = [
        f"<span>{_esc(info.get(key))}</span>"
        for key in ("email", "phone", "location", "linkedin", "github", "website")
        if info.get(key)
    ]
    field_line = f'<div class="muted">{_esc(info["field"])}</div>' if info.get("field") else ""
    return (
        f"<header><h1>{_full_name(info)}</h1>{field_line}"
        f'<div class="contact">{"".join(contact)}</div></header>'
    )


def _tags(values: list[str]) -> str:
    return '<ul class="tags">' + "".join(f"<li>{v}</li>" for v in values if v) + "</ul>"


def _list(data: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = data.get(key) or []
    return [v for v in value if isinstance(v, Mapping)]


def build_cv_html(data: Mapping[str, Any], template_id: str | None = None, *, lang: str = "en") -> str:
    style = get_template(template_id)
    info = data.get("personalInfo")
    if not isinstance(info, Mapping):
        info = {}

    blocks = [_header(info)]

    if info.get("summary"):
        blocks.append(f"<section><h2>Summary</h2><p>{_esc(strip_html_tags(info['summary']))}</p></section>")

    blocks.append(_section("Experience", [
        _item(_esc(e.get("position")), _esc(e.get("company")), _date_range(e), e.get("description"))
        for e in _list(data, "experience")
    ]))
    blocks.append(_section("Education", [
        _item(
            _esc(e.get("degree")),
            ", ".join(x for x in (_esc(e.get("institution")), _esc(e.get("field"))) if x),
            _date_range(e),
            e.get("description"),
        )
        for e in _list(data, "education")
    ]))

    skills = [_esc(s.get("name")) for s in _list(data, "skills")]
    if any(skills):
        blocks.append(f"<section><h2>Skills</h2>{_tags(skills)}</section>")

    languages = [
        " – ".join(x for x in (_esc(lang_.get("language")), _esc(lang_.get("level"))) if x)
        for lang_ in _list(data, "languages")
    ]
    if any(languages):
        blocks.append(f"<section><h2>Languages</h2>{_tags(languages)}</section>")

    blocks.append(_section("Projects", [
        _item(_esc(p.get("name")), ", ".join(_esc(t) for t in p.get("technologies") or []), _date_range(p), p.get("description"))
        for p in _list(data, "projects")
    ]))
    blocks.append(_section("Certifications", [
        _item(_esc(c.get("name")), _esc(c.get("issuer")), _esc(c.get("date")), c.get("description"))
        for c in _list(data, "certifications")
    ]))
    blocks.append(_section("Volunteer Experience", [
        _item(_esc(v.get("role")), _esc(v.get("organization")), _date_range(v), v.get("description"))
        for v in _list(data, "volunteerExperience")
    ]))

    body = "\n".join(b for b in blocks if b)
    return (
        PAGE_V1.replace("{{lang}}", _esc(lang))
        .replace("{{header_align}}", style.header_align)
        .replace("{{accent}}", style.accent)
        .replace("{{body}}", body)
    )
