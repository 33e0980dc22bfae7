"""Detect URLs and section cross-references inside section bodies."""

from __future__ import annotations

from collections.abc import Callable, Iterable
import re

from protodoc.markup.spans import Hyperlink, PlainText, SectionReference, TextSpan


# Absolute URL: either a scheme with an authority or one of the schemes used
# without "//". Parenthesised groups inside the path are kept whole; trailing
# sentence punctuation and unbalanced closing brackets stay outside the link.
_URL_CHARS = r"[^\s<>\"'`()]"
_URL_PATTERN = (
    r"(?<![\w+.\-])"
    r"(?:[A-Za-z][A-Za-z0-9+.\-]*://[A-Za-z0-9\[]"
    r"|(?:mailto|tel|xmpp|magnet|sms|file|bitcoin):[A-Za-z0-9+%/?])"
    rf"(?:\({_URL_CHARS}*\)|{_URL_CHARS})*"
    r"(?<![.,;:!?\]}])"
)
_NUMBER_PATTERN = r"[0-9]+(?:\.[0-9]+)*"
_LIST_SEPARATOR_PATTERN = r", (?:and )?| and "

_REFERENCE_RE = re.compile(
    rf"(?P<url>{_URL_PATTERN})"
    rf"|[Ss]ection (?P<section>{_NUMBER_PATTERN})"
    rf"|[Ss]ections (?P<sections>{_NUMBER_PATTERN}(?:(?:{_LIST_SEPARATOR_PATTERN}){_NUMBER_PATTERN})*)"
)
_LIST_SPLIT_RE = re.compile(rf"({_LIST_SEPARATOR_PATTERN})")


def _section_list_spans(prefix: str, numbers: str) -> list[TextSpan]:
    spans: list[TextSpan] = [PlainText(prefix)]
    for position, part in enumerate(_LIST_SPLIT_RE.split(numbers)):
        if position % 2:
            spans.append(PlainText(part))
        else:
            spans.append(SectionReference(text=part, section_number=part))
    return spans


def annotate(body: str, is_known_section: Callable[[str], bool] | None = None) -> list[TextSpan]:
    """Split `body` into plain text, hyperlink and section-reference spans.

    When `is_known_section` is given, references it rejects are returned as
    plain text instead.
    """

    spans: list[TextSpan] = []
    last = 0
    for match in _REFERENCE_RE.finditer(body):
        if match.start() > last:
            spans.append(PlainText(body[last : match.start()]))

        if match.group("url") is not None:
            url = match.group("url")
            spans.append(Hyperlink(text=url, href=url))
        elif match.group("section") is not None:
            spans.append(SectionReference(text=match.group(0), section_number=match.group("section")))
        else:
            prefix = body[match.start() : match.start("sections")]
            spans.extend(_section_list_spans(prefix, match.group("sections")))
        last = match.end()

    if last < len(body):
        spans.append(PlainText(body[last:]))

    if is_known_section is None:
        return spans
    return demote_unknown_references(spans, is_known_section)


def demote_unknown_references(
    spans: Iterable[TextSpan],
    is_known_section: Callable[[str], bool],
) -> list[TextSpan]:
    """Replace references to unknown sections with plain text."""

    result: list[TextSpan] = []
    for span in spans:
        if isinstance(span, SectionReference) and not is_known_section(span.section_number):
            result.append(PlainText(span.text))
        else:
            result.append(span)
    return result


def iter_section_references(spans: Iterable[TextSpan]) -> Iterable[SectionReference]:
    for span in spans:
        if isinstance(span, SectionReference):
            yield span
