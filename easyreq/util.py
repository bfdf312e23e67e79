"""Helpers for parsing response headers and cookies and for percent-encoding."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from urllib.parse import quote, unquote

from easyreq.types import Header

_TRAILING_SPACE = "\t\n\r "
_LEADING_SPACE = "\t "


@dataclass
class ParsedHeader:
    """Result of :func:`parse_header`.

    ``header`` holds the fields of the last response in the block,
    ``status_line`` its trimmed status line and ``reason`` the reason phrase.
    """

    header: Header = field(default_factory=Header)
    status_line: str = ""
    reason: str = ""


def split(to_split: str, delimiter: str) -> list[str]:
    """Split ``to_split`` on ``delimiter``.

    Empty fields between delimiters are kept, but a single trailing empty
    field is dropped, so an empty string yields an empty list.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    tokens = to_split.split(delimiter)
    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_cookies(raw_cookies: Iterable[str]) -> dict[str, str]:
    """Build a name-to-value mapping from tab-separated cookie-jar lines.

    In each line the last field is the value and the one before it the name;
    later lines overwrite earlier cookies of the same name.
    """
    cookies: dict[str, str] = {}
    for line in raw_cookies:
        tokens = line.split("\t")
        if len(tokens) < 2:
            raise ValueError(f"malformed cookie line: {line!r}")
        cookies[tokens[-2]] = tokens[-1]
    return cookies


def _parse_status_line(line: str, result: ParsedHeader) -> None:
    line = line.rstrip(_TRAILING_SPACE)
    result.status_line = line
    first = next((i for i, ch in enumerate(line) if ch in _LEADING_SPACE), -1)
    if first < 0:
        return
    second = next((i for i in range(first + 1, len(line)) if line[i] in _LEADING_SPACE), -1)
    if second >= 0:
        result.reason = line[second + 1 :]


def parse_header(headers: str) -> ParsedHeader:
    """Parse a raw header block into fields, status line and reason phrase.

    Each line beginning with ``HTTP/`` starts a new response and discards the
    fields collected so far, so only those of the final response remain.
    """
    result = ParsedHeader()
    for line in split(headers, "\n"):
        if line.startswith("HTTP/"):
            _parse_status_line(line, result)
            result.header = Header()
            continue
        key, colon, value = line.partition(":")
        if not colon:
            continue
        result.header[key] = value.lstrip(_LEADING_SPACE).rstrip(_TRAILING_SPACE)
    return result


def url_encode(s: str) -> str:
    """Percent-encode every character except ASCII letters, digits and ``-._~``."""
    return quote(s, safe="", encoding="utf-8")


def url_decode(s: str) -> str:
    """Decode ``%XX`` escapes; ``+`` is left as it is."""
    return unquote(s, encoding="utf-8")