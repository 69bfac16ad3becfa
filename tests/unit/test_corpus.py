from __future__ import annotations

import logging
from pathlib import Path

import pytest

from kanjidic_records.corpus import decode_document
from kanjidic_records.decomposition import load_kradfile
from kanjidic_records.errors import Component, DecodeError, DecodeErrorCode
from kanjidic_records.models import Header
from kanjidic_records.tree import load_document, parse_document

pytestmark = pytest.mark.unit

_FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"
_GOOD = (
    "<character><literal>{literal}</literal>"
    '<codepoint><cp_value cp_type="ucs">4e9c</cp_value></codepoint>'
    '<radical><rad_value rad_type="classical">7</rad_value></radical>'
    "<misc><stroke_count>7</stroke_count></misc>"
    '<query_code><q_code qc_type="skip">4-7-1</q_code></query_code>'
    "</character>"
)
_BAD = (
    "<character><literal>唖</literal>"
    '<codepoint><cp_value cp_type="ucs">5516</cp_value></codepoint>'
    '<radical><rad_value rad_type="classical">30</rad_value></radical>'
    "<misc><stroke_count>10</stroke_count></misc>"
    '<query_code><q_code qc_type="skip">1-3</q_code></query_code>'
    "</character>"
)


def _document() -> str:
    return "<kanjidic2>" + _GOOD.format(literal="亜") + _BAD + _GOOD.format(literal="亞") + "</kanjidic2>"


def test_fixture_document_decodes_with_header() -> None:
    report = decode_document(
        load_document(_FIXTURES / "kanjidic2_sample.xml"),
        decompositions=load_kradfile(_FIXTURES / "kradfile_sample.txt"),
    )

    assert report.ok
    assert report.record_count == 1
    assert report.header == Header(
        file_version=4, database_version="2021-160", date_of_creation="2021-06-09"
    )
    assert report.records[0].decomposition == ("｜", "一", "口")


def test_failing_record_is_skipped_and_reported(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="kanjidic_records"):
        report = decode_document(parse_document(_document()))

    assert [record.literal for record in report.records] == ["亜", "亞"]
    assert report.record_count == 3
    assert report.skipped_count == 1
    assert not report.ok
    diagnostic = report.diagnostics[0]
    assert diagnostic.record_index == 1
    assert diagnostic.literal == "唖"
    assert diagnostic.code is DecodeErrorCode.E_FORMAT_MALFORMED
    assert diagnostic.components == (Component.CHARACTER, Component.QUERY_CODE, Component.SKIP)
    assert diagnostic.position == "/kanjidic2[0]/character[1]/query_code[0]/q_code[0]"

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "skipping record 1" in warnings[0].getMessage()
    assert any(
        record.levelno == logging.INFO and "decoded 2 of 3 records" in record.getMessage()
        for record in caplog.records
    )
    assert any(record.levelno == logging.DEBUG for record in caplog.records)


def test_fail_fast_propagates_first_error() -> None:
    with pytest.raises(DecodeError) as exc_info:
        decode_document(parse_document(_document()), fail_fast=True)

    assert exc_info.value.components[0] is Component.CHARACTER


def test_empty_document() -> None:
    report = decode_document(parse_document("<kanjidic2/>"))

    assert report.ok
    assert report.header is None
    assert report.records == ()
    assert report.record_count == 0
