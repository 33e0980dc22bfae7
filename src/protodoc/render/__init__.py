"""HTML rendering of parsed specification documents."""

from .html import render_document, render_section, render_spans, render_toc

__all__ = ["render_document", "render_section", "render_spans", "render_toc"]
