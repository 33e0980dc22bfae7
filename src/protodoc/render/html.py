"""Standalone HTML page rendering for parsed specification documents."""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from protodoc.markup.annotate import annotate
from protodoc.markup.spans import Hyperlink, PlainText, SectionReference, TextSpan, section_anchor
from protodoc.markup.toc_tree import TOCNode, build_toc_tree
from protodoc.spec.models import Document, Section

_MAX_HEADING_LEVEL = 6

_STYLE = """
body { font-family: sans-serif; max-width: 60em; margin: 0 auto; padding: 1em; }
nav ul { list-style: none; padding-left: 1.5em; }
pre { white-space: pre-wrap; }
"""


def heading_level(section: Section) -> int:
    """HTML heading level for a section; the document title owns <h1>."""

    return min(section.depth + 1, _MAX_HEADING_LEVEL)


def _comment_text(text: str) -> str:
    # no "--" inside the comment, so "<!--", "-->" and "--!>" cannot occur either
    while "--" in text:
        text = text.replace("--", "- -")
    if text.endswith(("-", "<!")):
        text += "\n"
    return text


def render_spans(spans: Sequence[TextSpan]) -> str:
    parts: list[str] = []
    for span in spans:
        if isinstance(span, PlainText):
            parts.append(escape(span.text, quote=False))
        elif isinstance(span, (Hyperlink, SectionReference)):
            parts.append(f'<a href="{escape(span.href)}">{escape(span.text, quote=False)}</a>')
        else:
            raise TypeError(f"Unsupported span type: {type(span).__name__}")
    return "".join(parts)


def render_toc(nodes: Sequence[TOCNode]) -> str:
    if not nodes:
        return ""
    items: list[str] = []
    for node in nodes:
        entry = node.entry
        link = f'<a href="#{escape(section_anchor(entry.number))}">{escape(entry.number)} {escape(entry.title)}</a>'
        items.append(f"<li>{link}{render_toc(node.children)}</li>")
    return "<ul>" + "".join(items) + "</ul>"


def render_section(section: Section, *, known_sections: set[str] | None = None) -> str:
    is_known = known_sections.__contains__ if known_sections is not None else None
    body = render_spans(annotate(section.body, is_known))
    if not section.number:
        return f"<section><pre>{body}</pre></section>"

    level = heading_level(section)
    anchor = escape(section_anchor(section.number))
    heading = f"<h{level}>{escape(section.number)}. {escape(section.title)}</h{level}>"
    return f'<section id="{anchor}">{heading}<pre>{body}</pre></section>'


def render_document(document: Document, *, strict_references: bool = False) -> str:
    """Render a complete HTML page.

    With `strict_references`, references to section numbers that the
    document does not contain are rendered as plain text.
    """

    known_sections = document.section_numbers() if strict_references else None
    title = escape(document.title)
    lines = ["<!DOCTYPE html>"]
    if document.license:
        lines.append(f"<!--\n{_comment_text(document.license)}-->")
    lines.extend(
        [
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{title}</title>",
            f"<style>{_STYLE}</style>",
            "</head>",
            "<body>",
            f"<h1>{title}</h1>",
            f"<nav><h2>Table of Contents</h2>{render_toc(build_toc_tree(document.toc))}</nav>",
        ]
    )
    for section in document.sections:
        lines.append(render_section(section, known_sections=known_sections))
    lines.extend(["</body>", "</html>", ""])
    return "\n".join(lines)
