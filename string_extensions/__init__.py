"""Small pure string helpers: reverse, mask, chunk, validate and friends."""

from string_extensions.errors import InvalidArgumentError
from string_extensions.extensions import (
    add_char_at_position,
    capitalize,
    chars,
    chunk,
    decapitalize,
    is_palindrome,
    is_valid_email,
    replace_characters,
    replacing_occurrences,
    reversed_string,
    with_prefix,
    word_count,
)
from string_extensions.report import TextReport, inspect_lines, inspect_text

__all__ = [
    "InvalidArgumentError",
    "TextReport",
    "add_char_at_position",
    "capitalize",
    "chars",
    "chunk",
    "decapitalize",
    "inspect_lines",
    "inspect_text",
    "is_palindrome",
    "is_valid_email",
    "replace_characters",
    "replacing_occurrences",
    "reversed_string",
    "with_prefix",
    "word_count",
]
