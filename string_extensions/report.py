"""Report module – runs every helper over a piece of text at once."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable

from string_extensions.extensions import (
    capitalize,
    chars,
    decapitalize,
    is_palindrome,
    is_valid_email,
    replace_characters,
    reversed_string,
    word_count,
)


@dataclass
class TextReport:
    """Everything the helpers can say about a single string."""

    text: str
    length: int
    grapheme_count: int
    word_count: int
    is_palindrome: bool
    is_valid_email: bool
    reversed: str
    capitalized: str
    decapitalized: str
    masked: str | None

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable mapping of the report."""
        return asdict(self)


def inspect_text(text: str, replace_char: str = "*") -> TextReport:
    """Build a :class:`TextReport` for *text*, masking with *replace_char*."""
    return TextReport(
        text=text,
        length=len(text),
        grapheme_count=len(chars(text)),
        word_count=word_count(text),
        is_palindrome=is_palindrome(text),
        is_valid_email=is_valid_email(text),
        reversed=reversed_string(text),
        capitalized=capitalize(text),
        decapitalized=decapitalize(text),
        masked=replace_characters(text, replace_char=replace_char),
    )


def inspect_lines(lines: Iterable[str], replace_char: str = "*") -> list[TextReport]:
    """Report on each line, ignoring line terminators and blank lines."""
    reports: list[TextReport] = []
    for line in lines:
        stripped = line.rstrip("\r\n")
        if not stripped:
            continue
        reports.append(inspect_text(stripped, replace_char=replace_char))
    return reports
