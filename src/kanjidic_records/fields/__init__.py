from .codepoints import decode_codepoint, decode_codepoints
from .grade import decode_grade, decode_optional_grade
from .header import decode_header
from .misc import decode_frequency, decode_jlpt, decode_radical_names, decode_stroke_counts
from .query_codes import decode_query_code, decode_query_codes
from .radicals import decode_radical, decode_radicals
from .reading_meaning import (
    DEFAULT_LANGUAGE,
    ReadingMeaning,
    decode_reading,
    decode_reading_meaning,
    decode_translations,
)
from .references import decode_moro, decode_reference, decode_references
from .variants import decode_variant, decode_variants

__all__ = [
    "DEFAULT_LANGUAGE",
    "ReadingMeaning",
    "decode_codepoint",
    "decode_codepoints",
    "decode_frequency",
    "decode_grade",
    "decode_header",
    "decode_jlpt",
    "decode_moro",
    "decode_optional_grade",
    "decode_query_code",
    "decode_query_codes",
    "decode_radical",
    "decode_radical_names",
    "decode_radicals",
    "decode_reading",
    "decode_reading_meaning",
    "decode_reference",
    "decode_references",
    "decode_stroke_counts",
    "decode_translations",
    "decode_variant",
    "decode_variants",
]
