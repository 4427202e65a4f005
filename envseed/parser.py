"""
envseed/parser.py
Env-file grammar: raw text in, key → value mapping out.

  - lines starting with `#` (after optional whitespace) are comments
  - KEY=value, whitespace around `=` allowed, only the first `=` splits
  - "double quoted" values expand \\n into a newline, 'single quoted' don't
  - quoted values keep `#` and surrounding whitespace verbatim
  - unquoted values lose a trailing ` # comment` and outer whitespace
  - a quoted value whose closing quote is on a later line spans those lines

Parsing never raises. Lines it can't make sense of are skipped, quotes it
can't pair up are kept as raw text.
"""

from __future__ import annotations

import re

_COMMENT_LINE_RE = re.compile(r"^\s*#")
_ASSIGN_RE = re.compile(r"^\s*([\w.\-]+)\s*=[ \t]*(.*)$")
# Whole value wrapped in one pair of matching quotes, optionally followed
# by a whitespace-separated comment.
_QUOTED_RE = re.compile(r"""(["'])(.*)\1(?:\s+#.*)?""")
_INLINE_COMMENT_RE = re.compile(r"(?:^|\s)#.*")

_QUOTES = ("'", '"')


def parse(source: str | bytes) -> dict[str, str]:
    """Parse env-file content into a dict.

    Bytes are decoded as UTF-8 (BOM dropped, bad bytes replaced).
    Duplicate keys: the last assignment wins.
    """
    text = _as_text(source)
    result: dict[str, str] = {}

    pos, end = 0, len(text)
    while pos < end:
        eol = text.find("\n", pos)
        if eol == -1:
            eol = end
        line = text[pos:eol]
        next_pos = eol + 1

        if not _COMMENT_LINE_RE.match(line):
            m = _ASSIGN_RE.match(line)
            if m:
                value, next_pos = _resolve_value(
                    text, m.group(2), pos + m.start(2), next_pos)
                result[m.group(1)] = value

        pos = next_pos

    return result


def _as_text(source: str | bytes) -> str:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source).decode("utf-8-sig", errors="replace")
    return str(source).lstrip("\ufeff")


def _resolve_value(text: str, raw: str, start: int,
                   next_pos: int) -> tuple[str, int]:
    """Resolve the raw value found at text[start:].

    Returns (value, position where scanning resumes).
    """
    stripped = raw.rstrip()

    m = _QUOTED_RE.fullmatch(stripped)
    if m:
        return _unquote(m.group(1), m.group(2)), next_pos

    if stripped[:1] in _QUOTES and stripped[0] not in stripped[1:]:
        span = _multiline_value(text, stripped[0], start, next_pos)
        if span is not None:
            return span

    return _INLINE_COMMENT_RE.sub("", raw, count=1).strip(), next_pos


def _multiline_value(text: str, quote: str, start: int,
                     next_pos: int) -> tuple[str, int] | None:
    """Find the closing quote of a value opened at text[start] on a later line.

    The closing quote is the next `quote` character and must be the last
    non-whitespace character on its line; otherwise there is no multi-line
    value and None is returned.
    """
    close = text.find(quote, next_pos)
    if close == -1:
        return None

    eol = text.find("\n", close)
    if eol == -1:
        eol = len(text)
    if text[close + 1:eol].strip():
        return None

    body = text[start + 1:close].replace("\r\n", "\n")
    return _unquote(quote, body), eol + 1


def _unquote(quote: str, body: str) -> str:
    if quote == '"':
        return body.replace("\\n", "\n")
    return body
