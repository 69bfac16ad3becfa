from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path

import typer

from kanjidic_records.config import DecoderConfig, DecoderConfigError, load_decoder_config
from kanjidic_records.corpus import DecodeReport, decode_document
from kanjidic_records.decomposition import (
    EMPTY_DECOMPOSITIONS,
    DecompositionTable,
    KradfileError,
    load_kradfile,
)
from kanjidic_records.diagnostics import DecodeDiagnostic, sort_diagnostics
from kanjidic_records.errors import Component, DecodeError
from kanjidic_records.logger import setup_logging
from kanjidic_records.models import Character
from kanjidic_records.serialize import header_payload, record_payload
from kanjidic_records.tree import load_document

app = typer.Typer(help="KANJIDIC2 character record decoder CLI")

_EXIT_OK = 0
_EXIT_RECORDS_SKIPPED = 1
_EXIT_LOAD_FAILED = 2
_CONFIG_OPTION = typer.Option(None, "--config", help="Decoder config YAML file")


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


_FORMAT_OPTION = typer.Option(
    OutputFormat.TEXT,
    "--format",
    help="Output format: text|json",
    show_default=True,
)


def _load_decompositions(config: DecoderConfig, kradfile: Path | None) -> DecompositionTable:
    selected = kradfile if kradfile is not None else config.kradfile
    if selected is None:
        return EMPTY_DECOMPOSITIONS
    return load_kradfile(selected, encoding=config.kradfile_encoding)


def _decode_report(
    document: Path,
    *,
    config_path: Path | None,
    kradfile: Path | None = None,
) -> DecodeReport:
    """Load everything a command needs; failures here exit with the load-failure code."""
    try:
        config = load_decoder_config(config_path)
        setup_logging(config.log_level)
        decompositions = _load_decompositions(config, kradfile)
        root = load_document(document)
        return decode_document(root, decompositions=decompositions, fail_fast=config.fail_fast)
    except DecodeError as exc:
        typer.echo(f"decode failed: {exc}", err=True)
        raise typer.Exit(code=_decode_failure_exit_code(exc)) from exc
    except (DecoderConfigError, KradfileError, OSError, ET.ParseError) as exc:
        typer.echo(f"load failed: {_exception_message(exc)}", err=True)
        raise typer.Exit(code=_EXIT_LOAD_FAILED) from exc


@app.command()
def decode(
    document: Path,
    literal: str | None = typer.Option(None, "--literal", help="Only print this character"),
    format: OutputFormat = _FORMAT_OPTION,
    config: Path | None = _CONFIG_OPTION,
    kradfile: Path | None = typer.Option(None, "--kradfile", help="KRADFILE decompositions"),
) -> None:
    """Decode a KANJIDIC2 document and print its records."""
    report = _decode_report(document, config_path=config, kradfile=kradfile)
    records = tuple(
        record for record in report.records if literal is None or record.literal == literal
    )
    diagnostics = tuple(sort_diagnostics(report.diagnostics))
    exit_code = _derive_exit_code(report)
    if format is OutputFormat.JSON:
        payload: dict[str, object] = {
            "document": str(document),
            "header": None if report.header is None else header_payload(report.header),
            "records": [record_payload(record) for record in records],
            "diagnostics": _diagnostic_payloads(diagnostics),
            "exit_code": exit_code,
        }
        typer.echo(json.dumps(payload, ensure_ascii=True, separators=(",", ":")))
    else:
        for record in records:
            typer.echo(_format_record_line(record))
        _print_diagnostics(diagnostics)
    raise typer.Exit(code=exit_code)


@app.command()
def check(
    document: Path,
    format: OutputFormat = _FORMAT_OPTION,
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Decode a document and report only the records that failed."""
    report = _decode_report(document, config_path=config)
    diagnostics = tuple(sort_diagnostics(report.diagnostics))
    exit_code = _derive_exit_code(report)
    if format is OutputFormat.JSON:
        payload: dict[str, object] = {
            "document": str(document),
            "status": "pass" if report.ok else "fail",
            "record_count": report.record_count,
            "skipped_count": report.skipped_count,
            "exit_code": exit_code,
            "diagnostics": _diagnostic_payloads(diagnostics),
        }
        typer.echo(json.dumps(payload, ensure_ascii=True, separators=(",", ":")))
    else:
        _print_diagnostics(diagnostics)
        typer.echo(
            f"SUMMARY records={report.record_count} decoded={len(report.records)}"
            f" skipped={report.skipped_count}"
        )
    raise typer.Exit(code=exit_code)


def _derive_exit_code(report: DecodeReport) -> int:
    return _EXIT_OK if report.ok else _EXIT_RECORDS_SKIPPED


def _decode_failure_exit_code(exc: DecodeError) -> int:
    # a malformed header fails the whole document; anything else is a fail-fast record
    if exc.components[:1] == (Component.HEADER,):
        return _EXIT_LOAD_FAILED
    return _EXIT_RECORDS_SKIPPED


def _diagnostic_payloads(diagnostics: Sequence[DecodeDiagnostic]) -> list[dict[str, object]]:
    return [diagnostic.model_dump(mode="json", exclude_none=True) for diagnostic in diagnostics]


def _print_diagnostics(diagnostics: Sequence[DecodeDiagnostic]) -> None:
    for diagnostic in diagnostics:
        typer.echo(
            "DIAG"
            f" record={diagnostic.record_index}"
            f" literal={diagnostic.literal or '?'}"
            f" code={diagnostic.code}"
            f" category={diagnostic.category}"
            f" components={'>'.join(diagnostic.components) or '-'}"
            f" position={diagnostic.position or '-'}"
            f" message={diagnostic.message}"
        )


def _format_record_line(record: Character) -> str:
    glosses = record.translations.get("en", ())
    return (
        "RECORD"
        f" literal={record.literal}"
        f" strokes={record.stroke_counts.accepted}"
        f" grade={record.grade.kind if record.grade is not None else '-'}"
        f" jlpt={record.jlpt if record.jlpt is not None else '-'}"
        f" frequency={record.frequency if record.frequency is not None else '-'}"
        f" readings={len(record.readings)}"
        f" decomposition={''.join(record.decomposition) or '-'}"
        f" meanings={'; '.join(glosses) or '-'}"
    )


def _exception_message(exc: Exception) -> str:
    message = str(exc).strip()
    if message:
        return message
    return type(exc).__name__


def main() -> None:
    app()
