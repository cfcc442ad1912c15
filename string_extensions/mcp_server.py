"""MCP Server – exposes the string helpers as tools for Cursor, Claude Desktop, etc."""

from __future__ import annotations

import json
from typing import Any

from mcp.server.fastmcp import FastMCP

from string_extensions.config import load_settings
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
from string_extensions.report import inspect_text

mcp = FastMCP(
    name="StringExtensions",
    instructions=(
        "StringExtensions: pure string helpers for reversing, masking, chunking, "
        "counting words and validating e-mail addresses."
    ),
)


def _result(**payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _error(exc: InvalidArgumentError) -> str:
    return _result(error=str(exc), argument=exc.name)


@mcp.tool()
def reverse_text(text: str) -> str:
    """Reverse a string by user-perceived character.

    Args:
        text: The string to reverse.

    Returns:
        JSON string with the reversed text.
    """
    return _result(result=reversed_string(text))


@mcp.tool()
def prefix_text(text: str, prefix: str) -> str:
    """Prepend *prefix* unless the text already starts with it."""
    return _result(result=with_prefix(text, prefix))


@mcp.tool()
def count_words(text: str) -> str:
    """Count the words (runs of letters, digits and underscores) in a string."""
    return _result(result=word_count(text))


@mcp.tool()
def replace_text(text: str, search: str, replacement: str) -> str:
    """Replace every match of a regular expression with a literal replacement.

    Args:
        text: The string to search.
        search: A regular expression; metacharacters are not escaped.
        replacement: Inserted as-is for every match.

    Returns:
        JSON string with the result, or an ``error`` key for a bad pattern.
    """
    try:
        return _result(result=replacing_occurrences(text, search, replacement))
    except InvalidArgumentError as exc:
        return _error(exc)


@mcp.tool()
def split_chars(text: str) -> str:
    """Split a string into user-perceived characters."""
    return _result(result=chars(text))


@mcp.tool()
def capitalize_text(text: str) -> str:
    """Upper-case the first character of a string."""
    return _result(result=capitalize(text))


@mcp.tool()
def decapitalize_text(text: str) -> str:
    """Lower-case the first character of a string."""
    return _result(result=decapitalize(text))


@mcp.tool()
def check_email(text: str) -> str:
    """Check whether a string is formatted like an e-mail address."""
    return _result(result=is_valid_email(text))


@mcp.tool()
def check_palindrome(text: str) -> str:
    """Case-sensitive palindrome check."""
    return _result(result=is_palindrome(text))


@mcp.tool()
def mask_text(
    text: str,
    begin: int = 0,
    end: int | None = None,
    replace_char: str | None = None,
) -> str:
    """Mask characters in ``[begin, end)``.

    Args:
        text: The string to mask.
        begin: First index to mask.
        end: Index to stop masking at; defaults to half the length.
        replace_char: Mask character; defaults to the configured one.

    Returns:
        JSON string with the masked text, ``null`` for strings shorter than 2.
    """
    if replace_char is None:
        try:
            replace_char = load_settings().replace_char
        except InvalidArgumentError as exc:
            return _error(exc)
    return _result(result=replace_characters(text, begin=begin, end=end, replace_char=replace_char))


@mcp.tool()
def chunk_text(text: str, chunk_size: int | None = None) -> str:
    """Split a string into pieces of at most *chunk_size* characters."""
    try:
        if chunk_size is None:
            chunk_size = load_settings().chunk_size
        return _result(result=chunk(text, chunk_size=chunk_size))
    except InvalidArgumentError as exc:
        return _error(exc)


@mcp.tool()
def insert_char(text: str, char: str, position: int, repeat: bool = False) -> str:
    """Insert *char* at *position*, or before every multiple of it with *repeat*."""
    return _result(result=add_char_at_position(text, char, position, repeat=repeat))


@mcp.tool()
def inspect(text: str) -> str:
    """Run every helper over a string and return the combined report."""
    try:
        settings = load_settings()
    except InvalidArgumentError as exc:
        return _error(exc)
    report = inspect_text(text, replace_char=settings.replace_char)
    return _result(**report.as_dict())


def run_server() -> None:
    """Start the MCP server using stdio transport."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
