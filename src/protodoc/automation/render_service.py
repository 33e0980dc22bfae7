"""Read, parse and render a specification file in one step."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from protodoc.markup.consistency import ConsistencyIssue, check_consistency
from protodoc.render.html import render_document
from protodoc.spec.decoding import SpecReadError, read_spec
from protodoc.spec.parser import ParseError, parse


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderResult:
    success: bool
    spec_path: Path
    output_path: Path
    title: str | None = None
    toc_entries: int = 0
    sections: int = 0
    issues: list[ConsistencyIssue] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "input": str(self.spec_path),
            "output": str(self.output_path),
            "title": self.title,
            "toc_entries": self.toc_entries,
            "sections": self.sections,
            "issues": [issue.to_dict() for issue in self.issues],
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload


def render_spec_file(
    spec_path: str | Path,
    output_path: str | Path,
    *,
    strict_references: bool = False,
    check: bool = False,
) -> RenderResult:
    """Render `spec_path` to `output_path`; read and parse failures are reported, not raised."""

    source = Path(spec_path)
    target = Path(output_path)

    try:
        document = parse(read_spec(source))
    except (SpecReadError, ParseError) as exc:
        LOGGER.error("Failed to parse %s: %s", source, exc)
        return RenderResult(success=False, spec_path=source, output_path=target, error=str(exc))

    issues = check_consistency(document) if check else []
    html = render_document(document, strict_references=strict_references)
    try:
        target.write_text(html, encoding="utf-8")
    except OSError as exc:
        LOGGER.error("Failed to write %s: %s", target, exc)
        return RenderResult(
            success=False,
            spec_path=source,
            output_path=target,
            title=document.title,
            error=f"Failed to write output: {exc}",
        )

    LOGGER.info("Rendered %s (%d sections) to %s", source.name, len(document.sections), target)
    return RenderResult(
        success=True,
        spec_path=source,
        output_path=target,
        title=document.title,
        toc_entries=len(document.toc),
        sections=len(document.sections),
        issues=issues,
    )
