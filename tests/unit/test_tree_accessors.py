from __future__ import annotations

import gzip
from pathlib import Path

import pytest

from kanjidic_records.errors import DecodeError, DecodeErrorCode
from kanjidic_records.formats import parse_kuten
from kanjidic_records.models import Kuten
from kanjidic_records.tree import (
    ElementTreeNode,
    TreeNode,
    attribute_as_uint,
    decode_text,
    load_document,
    map_children,
    map_required_children,
    optional_child,
    parse_document,
    required_attribute,
    required_child,
    required_text,
    text_as_uint,
)

pytestmark = pytest.mark.unit

_MISC = """
<misc>
  <stroke_count>7</stroke_count>
  <stroke_count>8</stroke_count>
  <variant var_type="jis208">1-48-19</variant>
  <freq></freq>
  <jlpt>x1</jlpt>
  <grade m_vol="300">70000</grade>
</misc>
"""


def _misc() -> ElementTreeNode:
    return parse_document(_MISC)


def test_element_tree_node_satisfies_protocol_and_numbers_siblings() -> None:
    misc = _misc()
    counts = list(misc.children("stroke_count"))

    assert isinstance(misc, TreeNode)
    assert [str(node.position) for node in counts] == [
        "/misc[0]/stroke_count[0]",
        "/misc[0]/stroke_count[1]",
    ]
    assert [node.text for node in counts] == ["7", "8"]
    assert str(required_child(misc, "variant").position) == "/misc[0]/variant[0]"


def test_optional_and_required_child() -> None:
    misc = _misc()

    assert optional_child(misc, "rad_name") is None
    with pytest.raises(DecodeError) as exc_info:
        required_child(misc, "rad_name")

    assert exc_info.value.code == DecodeErrorCode.E_TREE_CHILD_MISSING
    assert str(exc_info.value.position) == "/misc[0]"


def test_required_attribute_and_text() -> None:
    misc = _misc()
    variant = required_child(misc, "variant")

    assert required_attribute(variant, "var_type") == "jis208"
    with pytest.raises(DecodeError) as missing_attribute:
        required_attribute(variant, "m_lang")
    with pytest.raises(DecodeError) as missing_text:
        required_text(required_child(misc, "freq"))

    assert missing_attribute.value.code == DecodeErrorCode.E_TREE_ATTRIBUTE_MISSING
    assert missing_text.value.code == DecodeErrorCode.E_TREE_TEXT_MISSING
    assert str(missing_text.value.position) == "/misc[0]/freq[0]"


def test_decode_text_locates_micro_format_failures_at_node() -> None:
    misc = _misc()
    variant = required_child(misc, "variant")

    assert decode_text(variant, parse_kuten) == Kuten(plane=1, ku=48, ten=19)
    with pytest.raises(DecodeError) as exc_info:
        decode_text(required_child(misc, "jlpt"), parse_kuten)

    assert exc_info.value.code == DecodeErrorCode.E_FORMAT_MALFORMED
    assert str(exc_info.value.position) == "/misc[0]/jlpt[0]"


def test_text_as_uint_bounds_and_scalar_errors() -> None:
    misc = _misc()

    assert text_as_uint(required_child(misc, "stroke_count")) == 7
    with pytest.raises(DecodeError) as not_a_number:
        text_as_uint(required_child(misc, "jlpt"))
    with pytest.raises(DecodeError) as out_of_range:
        text_as_uint(required_child(misc, "grade"), maximum=0xFFFF)

    assert not_a_number.value.code == DecodeErrorCode.E_SCALAR_NOT_A_NUMBER
    assert out_of_range.value.code == DecodeErrorCode.E_SCALAR_OUT_OF_RANGE
    assert out_of_range.value.detail.input_text == "70000"


def test_attribute_as_uint_is_optional() -> None:
    grade = required_child(_misc(), "grade")

    assert attribute_as_uint(grade, "m_page") is None
    assert attribute_as_uint(grade, "m_vol") == 300
    with pytest.raises(DecodeError) as exc_info:
        attribute_as_uint(grade, "m_vol", maximum=0xFF)

    assert exc_info.value.code == DecodeErrorCode.E_SCALAR_OUT_OF_RANGE
    assert exc_info.value.position == grade.position


def test_map_children_preserves_order_and_propagates_first_failure() -> None:
    misc = _misc()

    assert map_children(misc, "stroke_count", text_as_uint) == (7, 8)
    assert map_children(misc, "rad_name", required_text) == ()
    with pytest.raises(DecodeError) as exc_info:
        map_required_children(misc, "rad_name", required_text)

    assert exc_info.value.code == DecodeErrorCode.E_TREE_CHILD_MISSING


def test_load_document_reads_plain_and_gzip(tmp_path: Path) -> None:
    plain = tmp_path / "kanjidic2.xml"
    packed = tmp_path / "kanjidic2.xml.gz"
    plain.write_text(_MISC, encoding="utf-8")
    packed.write_bytes(gzip.compress(_MISC.encode("utf-8")))

    for path in (plain, packed):
        root = load_document(path)
        assert root.tag == "misc"
        assert map_children(root, "stroke_count", text_as_uint) == (7, 8)
