from __future__ import annotations

from pathlib import Path

import pytest

from protodoc.spec.decoding import SpecReadError, decode_spec_bytes, read_spec


def test_decode_normalizes_crlf_and_lone_cr() -> None:
    assert decode_spec_bytes(b"Title\r\n\r\nTable of Contents\rend\n") == "Title\n\nTable of Contents\nend\n"


def test_decode_strips_utf8_byte_order_mark() -> None:
    raw = "\ufeffProtocole réseau\n\nTable of Contents\n".encode("utf-8")

    assert decode_spec_bytes(raw) == "Protocole réseau\n\nTable of Contents\n"


def test_decode_empty_payload() -> None:
    assert decode_spec_bytes(b"") == ""


def test_read_spec_reads_file(tmp_path: Path) -> None:
    sample = tmp_path / "native_protocol_v5.spec"
    sample.write_bytes("Título del protocolo\r\n".encode("utf-8"))

    assert read_spec(sample) == "Título del protocolo\n"


def test_read_spec_wraps_os_errors(tmp_path: Path) -> None:
    missing = tmp_path / "absent.spec"

    with pytest.raises(SpecReadError) as excinfo:
        read_spec(missing)

    assert excinfo.value.path == missing
    assert "Failed to read specification" in str(excinfo.value)
    assert str(missing) in str(excinfo.value)
