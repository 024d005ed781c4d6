"""Procedural facade over the Stringy value type.

Every registered operation can be called as a plain function taking the
subject string first and, optionally, an encoding last:

    >>> from stringy import static
    >>> static.camelize("foo bar")
    'fooBar'
    >>> static.pad_left("fòô", 5, "¬", "UTF-8")
    '¬¬fòô'

Results that would be Stringy objects are returned as plain str (lists
element-wise), so callers never see the wrapper type.

The operation table is maintained by hand in OPERATIONS. Each entry
records the method parameters, which give the accepted argument range
and the types the CLI coerces command-line arguments to.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import Field

from stringy.exceptions import InvalidArgumentError, MethodNotFoundError
from stringy.logging.context import operation_context
from stringy.stringy import Stringy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Parameter:
    """A parameter of a registered operation.

    Attributes:
        name: Parameter name as declared on the Stringy method.
        type: Annotation used to coerce textual arguments (CLI).
        required: Whether callers must supply it.
    """

    name: str
    type: Any = str
    required: bool = True


@dataclass(frozen=True)
class Operation:
    """A registered Stringy operation.

    Attributes:
        name: Operation name, identical to the Stringy method name.
        parameters: Method parameters, excluding self.
        summary: One-line description for listings.
    """

    name: str
    parameters: tuple[Parameter, ...] = ()
    summary: str = ""

    @property
    def min_args(self) -> int:
        """Number of required arguments, excluding the subject."""
        return sum(1 for parameter in self.parameters if parameter.required)

    @property
    def max_args(self) -> int:
        """Number of accepted arguments, excluding the subject and encoding."""
        return len(self.parameters)


def _req(name: str, type_: Any = str) -> Parameter:
    return Parameter(name, type_, required=True)


def _opt(name: str, type_: Any = str) -> Parameter:
    return Parameter(name, type_, required=False)


_CASE = _opt("case_sensitive", bool)

# Legacy numeric codes 0, 1 and 2 or a name; "0" coerces to the int code
_PAD_TYPE = Annotated[int | str, Field(union_mode="left_to_right")]

_OPERATIONS: tuple[Operation, ...] = (
    # Size and access
    Operation("count", (), "Length in codepoints"),
    Operation("length", (), "Length in codepoints"),
    Operation("get_encoding", (), "Encoding name"),
    Operation("chars", (), "List of codepoints"),
    Operation("index_exists", (_req("offset", int),), "Whether a codepoint exists at offset"),
    Operation("at", (_req("index", int),), "Codepoint at index"),
    Operation("first", (_req("n", int),), "First n codepoints"),
    Operation("last", (_req("n", int),), "Last n codepoints"),
    Operation(
        "substr",
        (_req("start", int), _opt("length", int | None)),
        "Substring by start and length",
    ),
    Operation(
        "slice",
        (_req("start", int), _opt("end", int | None)),
        "Substring by start and end",
    ),
    Operation(
        "between",
        (_req("start"), _req("end"), _opt("offset", int)),
        "Text between two delimiters",
    ),
    # Building
    Operation("append", (_req("suffix"),), "Append a string"),
    Operation("prepend", (_req("prefix"),), "Prepend a string"),
    Operation("surround", (_req("substring"),), "Wrap in a string"),
    Operation("insert", (_req("substring"), _req("index", int)), "Insert at index"),
    Operation("repeat", (_req("multiplier", int),), "Repeat n times"),
    Operation("reverse", (), "Reverse codepoint order"),
    Operation("shuffle", (), "Shuffle codepoints"),
    Operation("ensure_left", (_req("substring"),), "Ensure a prefix"),
    Operation("ensure_right", (_req("substring"),), "Ensure a suffix"),
    Operation("remove_left", (_req("substring"),), "Remove a prefix"),
    Operation("remove_right", (_req("substring"),), "Remove a suffix"),
    # Padding, trimming and truncation
    Operation(
        "pad",
        (_req("length", int), _opt("pad_str"), _opt("pad_type", _PAD_TYPE)),
        "Pad to a length",
    ),
    Operation("pad_left", (_req("length", int), _opt("pad_str")), "Pad on the left"),
    Operation("pad_right", (_req("length", int), _opt("pad_str")), "Pad on the right"),
    Operation("pad_both", (_req("length", int), _opt("pad_str")), "Pad on both sides"),
    Operation("trim", (_opt("chars", str | None),), "Strip both ends"),
    Operation("trim_left", (_opt("chars", str | None),), "Strip the start"),
    Operation("trim_right", (_opt("chars", str | None),), "Strip the end"),
    Operation("truncate", (_req("length", int), _opt("substring")), "Cut to a length"),
    Operation(
        "safe_truncate",
        (_req("length", int), _opt("substring")),
        "Cut to a length without splitting words",
    ),
    # Whitespace
    Operation("collapse_whitespace", (), "Collapse whitespace runs"),
    Operation("strip_whitespace", (), "Remove all whitespace"),
    Operation("to_spaces", (_opt("tab_length", int),), "Tabs to spaces"),
    Operation("to_tabs", (_opt("tab_length", int),), "Spaces to tabs"),
    Operation("lines", (), "Split on line breaks"),
    # Search
    Operation("contains", (_req("needle"), _CASE), "Contains a substring"),
    Operation(
        "contains_all", (_req("needles", list[str]), _CASE), "Contains every substring"
    ),
    Operation(
        "contains_any", (_req("needles", list[str]), _CASE), "Contains any substring"
    ),
    Operation("count_substr", (_req("substring"), _CASE), "Count occurrences"),
    Operation("starts_with", (_req("prefix"), _CASE), "Starts with a prefix"),
    Operation(
        "starts_with_any", (_req("prefixes", list[str]), _CASE), "Starts with any prefix"
    ),
    Operation("ends_with", (_req("suffix"), _CASE), "Ends with a suffix"),
    Operation(
        "ends_with_any", (_req("suffixes", list[str]), _CASE), "Ends with any suffix"
    ),
    Operation("index_of", (_req("needle"), _opt("offset", int)), "First index of"),
    Operation("index_of_last", (_req("needle"), _opt("offset", int)), "Last index of"),
    # Regular expressions and replacement
    Operation(
        "regex_replace",
        (_req("pattern"), _req("replacement"), _opt("options")),
        "Replace regex matches",
    ),
    Operation("replace", (_req("search"), _req("replacement")), "Replace literally"),
    Operation("split", (_req("pattern"), _opt("limit", int | None)), "Split on a regex"),
    # Case
    Operation("to_lower_case", (), "Lowercase"),
    Operation("to_upper_case", (), "Uppercase"),
    Operation("to_title_case", (), "Title case"),
    Operation("lower_case_first", (), "Lowercase the first codepoint"),
    Operation("upper_case_first", (), "Uppercase the first codepoint"),
    Operation("swap_case", (), "Invert case"),
    Operation("camelize", (), "lowerCamelCase"),
    Operation("upper_camelize", (), "UpperCamelCase"),
    Operation("delimit", (_req("delimiter"),), "Lowercase and delimit words"),
    Operation("dasherize", (), "Lowercase and join words with dashes"),
    Operation("underscored", (), "Lowercase and join words with underscores"),
    Operation(
        "titleize", (_opt("ignore", list[str] | None),), "Capitalize words"
    ),
    Operation("humanize", (), "Human-readable form of an identifier"),
    # Predicates
    Operation("is_alpha", (), "Only letters"),
    Operation("is_alphanumeric", (), "Only letters and digits"),
    Operation("is_blank", (), "Only whitespace"),
    Operation("is_hexadecimal", (), "Only hexadecimal digits"),
    Operation("is_lower_case", (), "Only lowercase letters"),
    Operation("is_upper_case", (), "Only uppercase letters"),
    Operation("has_lower_case", (), "Has a lowercase letter"),
    Operation("has_upper_case", (), "Has an uppercase letter"),
    Operation("is_json", (), "Valid JSON"),
    Operation("is_serialized", (), "Serialized value"),
    Operation("is_base64", (), "Canonical base64"),
    # Conversion
    Operation("to_boolean", (), "Interpret as a boolean"),
    Operation(
        "to_ascii",
        (_opt("language", str | None), _opt("remove_unsupported", bool)),
        "Transliterate to ASCII",
    ),
    Operation(
        "slugify",
        (_opt("replacement"), _opt("language", str | None)),
        "URL-friendly slug",
    ),
    Operation("tidy", (), "Replace smart punctuation"),
    Operation("html_encode", (_opt("flags", int),), "Encode HTML entities"),
    Operation("html_decode", (_opt("flags", int),), "Decode HTML entities"),
    # Comparison
    Operation("longest_common_prefix", (_req("other"),), "Longest common prefix"),
    Operation("longest_common_suffix", (_req("other"),), "Longest common suffix"),
    Operation(
        "longest_common_substring", (_req("other"),), "Longest common substring"
    ),
)

OPERATIONS: dict[str, Operation] = {operation.name: operation for operation in _OPERATIONS}


def get_operation(name: str) -> Operation:
    """Look up a registered operation.

    Raises:
        MethodNotFoundError: If name is not registered.
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise MethodNotFoundError(name) from None


def arity(name: str) -> tuple[int, int]:
    """Return the (min, max) argument count of an operation.

    Counts exclude the subject string and the trailing encoding.
    """
    operation = get_operation(name)
    return operation.min_args, operation.max_args


def _unwrap(value: Any) -> Any:
    if isinstance(value, Stringy):
        return value.text
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    return value


def call(name: str, subject: Any, *arguments: Any, encoding: str | None = None) -> Any:
    """Run an operation on subject with explicit arguments.

    Args:
        name: Registered operation name.
        subject: The string to operate on.
        *arguments: Operation arguments, in method order.
        encoding: Encoding for the subject; defaults to the configured one.

    Returns:
        The operation result, with Stringy values unwrapped to str.

    Raises:
        MethodNotFoundError: If name is not registered.
        InvalidArgumentError: If the argument count is out of range.
    """
    operation = get_operation(name)
    if not operation.min_args <= len(arguments) <= operation.max_args:
        raise InvalidArgumentError(
            f"{name}() takes {operation.min_args} to {operation.max_args} "
            f"argument(s) after the subject, got {len(arguments)}"
        )

    with operation_context(name, encoding):
        logger.debug("Dispatching %s with %d argument(s)", name, len(arguments))
        instance = Stringy(subject, encoding or "")
        result = getattr(instance, operation.name)(*arguments)
    return _unwrap(result)


def invoke(name: str, *arguments: Any) -> Any:
    """Run an operation from a flat argument list.

    The first argument is the subject. When one more argument than the
    operation accepts is given, the last one is the encoding.

    Raises:
        MethodNotFoundError: If name is not registered.
        InvalidArgumentError: If the argument count is out of range.
    """
    operation = get_operation(name)
    if not operation.min_args + 1 <= len(arguments) <= operation.max_args + 2:
        raise InvalidArgumentError(
            f"{name}() takes {operation.min_args + 1} to {operation.max_args + 2} "
            f"argument(s), got {len(arguments)}"
        )

    subject, *rest = arguments
    encoding = None
    if len(arguments) == operation.max_args + 2:
        encoding = rest.pop()
    return call(name, subject, *rest, encoding=encoding)


def __getattr__(name: str) -> Callable[..., Any]:
    if name.startswith("__"):
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    get_operation(name)
    return functools.partial(invoke, name)
