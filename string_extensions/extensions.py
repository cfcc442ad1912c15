"""String helpers – small pure transformations over a single string.

Functions that work on user-perceived characters (``reversed_string``,
``chars``, ``capitalize``, ``decapitalize``) segment the text into extended
grapheme clusters.  The rest index the string directly, one code point per
position.
"""

from __future__ import annotations

import re

import regex

from string_extensions.errors import InvalidArgumentError

_GRAPHEME = regex.compile(r"\X")
_WORD = re.compile(r"(\w+)", re.ASCII)
_EMAIL = re.compile(
    r'^(([^<>()[\]\\.,;:\s@\"]+(\.[^<>()[\]\\.,;:\s@\"]+)*)|(\"[^\n\r\u2028\u2029]+\"))@'
    r"((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)


# ── Grapheme-aware helpers ───────────────────────────────────────────

def chars(text: str) -> list[str]:
    """Split *text* into its user-perceived characters.

    >>> chars("apple")
    ['a', 'p', 'p', 'l', 'e']
    """
    return _GRAPHEME.findall(text)


def reversed_string(text: str) -> str:
    """Reverse *text* cluster by cluster so combining marks stay attached."""
    return "".join(reversed(chars(text)))


def capitalize(text: str) -> str:
    """Upper-case the first character of *text*, leaving the rest untouched."""
    clusters = chars(text)
    if not clusters:
        return text
    if len(clusters) == 1:
        return text.upper()
    return clusters[0].upper() + text[len(clusters[0]):]


def decapitalize(text: str) -> str:
    """Lower-case the first character of *text*, leaving the rest untouched."""
    clusters = chars(text)
    if not clusters:
        return text
    if len(clusters) == 1:
        return text.lower()
    return clusters[0].lower() + text[len(clusters[0]):]


# ── Pattern-based helpers ────────────────────────────────────────────

def with_prefix(text: str, prefix: str) -> str:
    """Return *text* starting with *prefix*, adding it only when missing."""
    if text.startswith(prefix):
        return text
    return f"{prefix}{text}"


def word_count(text: str) -> int:
    """Count runs of ASCII word characters (letters, digits, underscore)."""
    return len(_WORD.findall(text))


def replacing_occurrences(text: str, search: str, replacement: str) -> str:
    """Replace every match of *search* in *text* with *replacement*.

    *search* is compiled as a regular expression, not escaped, so ``"."``
    matches any character.  *replacement* is inserted verbatim: backslashes
    and group references are not expanded.

    Raises :class:`InvalidArgumentError` when *search* is not a valid pattern.
    """
    try:
        pattern = re.compile(search)
    except re.error as exc:
        raise InvalidArgumentError("search", search, f"not a valid pattern ({exc})") from exc
    return pattern.sub(lambda _match: replacement, text)


def is_valid_email(text: str) -> bool:
    """Check whether *text* looks like an e-mail address.

    Deliberately loose: the pattern accepts dotted local parts or a quoted
    local part, then a bracketed IPv4 literal or a hostname whose last label
    has at least two letters.  It is not a full RFC 5322 validator.  A quoted
    local part may not contain line terminators (``\\n``, ``\\r``, U+2028,
    U+2029).
    """
    return _EMAIL.fullmatch(text) is not None


# ── Index-based helpers ──────────────────────────────────────────────

def is_palindrome(text: str) -> bool:
    """Case-sensitive palindrome check; whitespace and punctuation count."""
    length = len(text)
    for i in range((length + 1) // 2):
        if text[i] != text[length - 1 - i]:
            return False
    return True


def replace_characters(
    text: str,
    begin: int = 0,
    end: int | None = None,
    replace_char: str = "*",
) -> str | None:
    """Mask the characters of *text* in ``[begin, end)`` with *replace_char*.

    When *end* is omitted it defaults to half the length, rounded half up.
    An *end* past the string is clamped.  Returns ``None`` for strings of
    length 0 or 1.

    >>> replace_characters("1234567890", begin=3, end=8)
    '123*****90'
    """
    length = len(text)
    if length <= 1:
        return None
    if end is None:
        end = (length + 1) // 2
    elif end > length:
        end = length

    parts: list[str] = []
    for i, ch in enumerate(text):
        if i >= end:
            parts.append(ch)
        elif i >= begin:
            parts.append(replace_char)
        else:
            parts.append(ch)
    return "".join(parts)


def chunk(text: str, *, chunk_size: int) -> list[str]:
    """Split *text* into consecutive pieces of at most *chunk_size* characters.

    Raises :class:`InvalidArgumentError` when *chunk_size* is not positive.
    """
    if chunk_size <= 0:
        raise InvalidArgumentError("chunk_size", chunk_size, "must be a positive integer")
    return [text[i:i + chunk_size] for i in range(0, len(text), chunk_size)]


def add_char_at_position(text: str, char: str, position: int, repeat: bool = False) -> str:
    """Insert *char* into *text* at *position*.

    With *repeat* the character goes before every non-zero multiple of
    *position* instead.  A *position* past the end (or, with *repeat*, a
    *position* of 0) leaves *text* unchanged.
    """
    if not repeat:
        if position < 0 or position > len(text):
            return text
        return text[:position] + char + text[position:]

    if position == 0:
        return text
    parts: list[str] = []
    for i, ch in enumerate(text):
        if i != 0 and i % position == 0:
            parts.append(char)
        parts.append(ch)
    return "".join(parts)
