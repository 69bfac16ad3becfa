from .corpus import DecodeReport, decode_document
from .decomposition import (
    EMPTY_DECOMPOSITIONS,
    DecompositionTable,
    KradfileError,
    load_kradfile,
    parse_kradfile,
)
from .diagnostics import DecodeDiagnostic, build_decode_diagnostic, sort_diagnostics
from .errors import (
    ERROR_CATEGORY_BY_CODE,
    Component,
    DecodeError,
    DecodeErrorCode,
    DecodeErrorDetail,
    ErrorCategory,
)
from .models import Character, Header
from .position import NodePosition
from .record import CharacterBuilder, decode_character
from .serialize import canonical_record_json, hash_record, record_payload
from .tree import ElementTreeNode, TreeNode, load_document, parse_document

__all__ = [
    "Character",
    "CharacterBuilder",
    "Component",
    "DecodeDiagnostic",
    "DecodeError",
    "DecodeErrorCode",
    "DecodeErrorDetail",
    "DecodeReport",
    "DecompositionTable",
    "EMPTY_DECOMPOSITIONS",
    "ERROR_CATEGORY_BY_CODE",
    "ElementTreeNode",
    "ErrorCategory",
    "Header",
    "KradfileError",
    "NodePosition",
    "TreeNode",
    "build_decode_diagnostic",
    "canonical_record_json",
    "decode_character",
    "decode_document",
    "hash_record",
    "load_document",
    "load_kradfile",
    "parse_document",
    "parse_kradfile",
    "record_payload",
    "sort_diagnostics",
]
