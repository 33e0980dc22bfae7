"""Reference annotation and navigation helpers for parsed documents."""

from .annotate import annotate, demote_unknown_references
from .consistency import ConsistencyIssue, check_consistency
from .spans import Hyperlink, PlainText, SectionReference, TextSpan, section_anchor
from .toc_tree import TOCNode, build_toc_tree

__all__ = [
    "ConsistencyIssue",
    "Hyperlink",
    "PlainText",
    "SectionReference",
    "TOCNode",
    "TextSpan",
    "annotate",
    "build_toc_tree",
    "check_consistency",
    "demote_unknown_references",
    "section_anchor",
]
