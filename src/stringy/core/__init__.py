"""Core utilities package.

Pure helper functions behind the Stringy value type: transliteration
tables, encoding-scoped regex helpers, padding, HTML entities, JSON and
serialized-format recognizers, and casefold comparisons.
"""

from stringy.core.entities import (
    ENT_COMPAT,
    ENT_NOQUOTES,
    ENT_QUOTES,
    decode_entities,
    encode_entities,
)
from stringy.core.json_utils import JsonParseResult, parse_json_safe
from stringy.core.padding import apply_padding, repeat_to_length, split_padding
from stringy.core.patterns import (
    DEFAULT_OPTIONS,
    WHITESPACE,
    compile_pattern,
    parse_options,
    regex_replace,
    regex_split,
)
from stringy.core.serialized import is_serialized
from stringy.core.string_utils import (
    compare_strings_ci,
    contains_ci,
    ends_with_ci,
    starts_with_ci,
)
from stringy.core.transliteration import (
    CHARS_TABLE,
    LANGUAGE_OVERRIDES,
    language_base,
    language_pairs,
    transliterate,
)

__all__ = [
    # Entities
    "ENT_COMPAT",
    "ENT_NOQUOTES",
    "ENT_QUOTES",
    "decode_entities",
    "encode_entities",
    # JSON
    "JsonParseResult",
    "parse_json_safe",
    # Padding
    "apply_padding",
    "repeat_to_length",
    "split_padding",
    # Patterns
    "DEFAULT_OPTIONS",
    "WHITESPACE",
    "compile_pattern",
    "parse_options",
    "regex_replace",
    "regex_split",
    # Serialized
    "is_serialized",
    # String utils
    "compare_strings_ci",
    "contains_ci",
    "ends_with_ci",
    "starts_with_ci",
    # Transliteration
    "CHARS_TABLE",
    "LANGUAGE_OVERRIDES",
    "language_base",
    "language_pairs",
    "transliterate",
]
