"""Specification document model and parser."""

from .decoding import SpecReadError, decode_spec_bytes, read_spec
from .models import Document, Section, TOCEntry
from .parser import ParseError, ParseErrorKind, check_section_start, parse

__all__ = [
    "Document",
    "ParseError",
    "ParseErrorKind",
    "Section",
    "SpecReadError",
    "TOCEntry",
    "check_section_start",
    "decode_spec_bytes",
    "parse",
    "read_spec",
]
