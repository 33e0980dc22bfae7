"""Typed text spans emitted by the reference annotator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

SECTION_ANCHOR_PREFIX = "s"


def section_anchor(number: str) -> str:
    """Anchor id assigned to the section with the given number."""

    return f"{SECTION_ANCHOR_PREFIX}{number}"


@dataclass(frozen=True, slots=True)
class PlainText:
    text: str


@dataclass(frozen=True, slots=True)
class Hyperlink:
    text: str
    href: str


@dataclass(frozen=True, slots=True)
class SectionReference:
    """Link to another section of the same document."""

    text: str
    section_number: str

    @property
    def href(self) -> str:
        return "#" + section_anchor(self.section_number)


TextSpan = Union[PlainText, Hyperlink, SectionReference]
