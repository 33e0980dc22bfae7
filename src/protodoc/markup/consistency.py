"""Advisory cross-checks between TOC, sections and section references."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from protodoc.markup.annotate import annotate, iter_section_references
from protodoc.spec.models import Document


LOGGER = logging.getLogger(__name__)

TOC_WITHOUT_SECTION = "toc_without_section"
SECTION_WITHOUT_TOC = "section_without_toc"
DANGLING_REFERENCE = "dangling_reference"


@dataclass(frozen=True, slots=True)
class ConsistencyIssue:
    kind: str
    number: str
    source_section: str | None = None

    def describe(self) -> str:
        if self.kind == TOC_WITHOUT_SECTION:
            return f"TOC entry {self.number} has no matching section"
        if self.kind == SECTION_WITHOUT_TOC:
            return f"Section {self.number} is missing from the TOC"
        return f"Section {self.source_section or '-'} references unknown section {self.number}"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "kind": self.kind,
            "number": self.number,
            "source_section": self.source_section,
        }


def check_consistency(document: Document) -> list[ConsistencyIssue]:
    """Report mismatches without failing; every issue is logged as a warning."""

    section_numbers = document.section_numbers()
    toc_numbers = document.toc_numbers()
    issues: list[ConsistencyIssue] = []

    for entry in document.toc:
        if entry.number not in section_numbers:
            issues.append(ConsistencyIssue(kind=TOC_WITHOUT_SECTION, number=entry.number))

    for section in document.sections:
        if section.number and section.number not in toc_numbers:
            issues.append(ConsistencyIssue(kind=SECTION_WITHOUT_TOC, number=section.number))

    for section in document.sections:
        for reference in iter_section_references(annotate(section.body)):
            if reference.section_number not in section_numbers:
                issues.append(
                    ConsistencyIssue(
                        kind=DANGLING_REFERENCE,
                        number=reference.section_number,
                        source_section=section.number or None,
                    )
                )

    for issue in issues:
        LOGGER.warning(issue.describe())
    return issues
