"""Runtime configuration for the rendering CLIs."""

from __future__ import annotations

from dataclasses import dataclass
import math
import os
from typing import Mapping


DEFAULT_SPEC_FILENAME = "native_protocol_v5.spec"
DEFAULT_OUTPUT_FILENAME = "native_protocol_v5.html"
DEFAULT_WATCH_DEBOUNCE_SECONDS = 1.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(*, name: str, raw_value: str) -> bool:
    value = raw_value.casefold()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of: {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}")


def _parse_positive_float(*, name: str, raw_value: str, minimum: float = 0.001) -> float:
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _require_filename(*, name: str, raw_value: str) -> str:
    if not raw_value:
        raise ValueError(f"{name} cannot be empty")
    if "/" in raw_value or "\\" in raw_value:
        raise ValueError(f"{name} must be a file name, not a path")
    return raw_value


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """Validated settings shared by the render and watch commands."""

    spec_filename: str = DEFAULT_SPEC_FILENAME
    output_filename: str = DEFAULT_OUTPUT_FILENAME
    strict_references: bool = False
    watch_debounce_seconds: float = DEFAULT_WATCH_DEBOUNCE_SECONDS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RenderSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        spec_filename = _require_filename(
            name="PROTODOC_SPEC_FILENAME",
            raw_value=source.get("PROTODOC_SPEC_FILENAME", DEFAULT_SPEC_FILENAME).strip(),
        )
        output_filename = _require_filename(
            name="PROTODOC_OUTPUT_FILENAME",
            raw_value=source.get("PROTODOC_OUTPUT_FILENAME", DEFAULT_OUTPUT_FILENAME).strip(),
        )

        strict_raw = source.get("PROTODOC_STRICT_REFERENCES", "false").strip()
        debounce_raw = source.get("PROTODOC_WATCH_DEBOUNCE_SECONDS", str(DEFAULT_WATCH_DEBOUNCE_SECONDS)).strip()
        if not strict_raw:
            raise ValueError("PROTODOC_STRICT_REFERENCES cannot be empty")
        if not debounce_raw:
            raise ValueError("PROTODOC_WATCH_DEBOUNCE_SECONDS cannot be empty")

        return cls(
            spec_filename=spec_filename,
            output_filename=output_filename,
            strict_references=_parse_bool(name="PROTODOC_STRICT_REFERENCES", raw_value=strict_raw),
            watch_debounce_seconds=_parse_positive_float(
                name="PROTODOC_WATCH_DEBOUNCE_SECONDS",
                raw_value=debounce_raw,
                minimum=0.01,
            ),
        )
