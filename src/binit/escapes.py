"""Backslash escape decoding shared by separator flags and quoted INI values.

Recognised escapes::

    \\a \\b \\f \\n \\r \\t \\v \\\\ \\' \\"
    \\xHH  \\uHHHH  \\UHHHHHHHH  \\ooo (three octal digits, at most \\377)

``\\xHH`` and ``\\ooo`` produce the code point with that value. Any other
backslash sequence is an error.
"""

import re
from typing import Optional

_SIMPLE = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

_ESCAPE = re.compile(
    r"\\(?:x(?P<x>[0-9A-Fa-f]{2})"
    r"|u(?P<u>[0-9A-Fa-f]{4})"
    r"|U(?P<U>[0-9A-Fa-f]{8})"
    r"|(?P<oct>[0-7]{3})"
    r"|(?P<simple>[abfnrtv\\'\"]))"
)


def _decode_one(match: "re.Match[str]") -> str:
    if match.group("simple") is not None:
        return _SIMPLE[match.group("simple")]

    if match.group("oct") is not None:
        value = int(match.group("oct"), 8)
        if value > 0xFF:
            raise ValueError(f"octal escape out of range: \\{match.group('oct')}")
        return chr(value)

    digits = match.group("x") or match.group("u") or match.group("U")
    value = int(digits, 16)
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        raise ValueError(f"invalid code point in escape: {match.group(0)}")
    return chr(value)


def decode_escapes(text: str, quote: Optional[str] = None) -> str:
    """Decode backslash escapes in *text*.

    With *quote* set to ``"`` or ``'``, text is the body of a literal quoted
    that way and an escaped quote of the other kind is rejected.

    Raises:
        ValueError: On an unknown or truncated escape sequence.
    """
    out = []
    pos = 0
    while True:
        idx = text.find("\\", pos)
        if idx < 0:
            out.append(text[pos:])
            return "".join(out)

        out.append(text[pos:idx])
        match = _ESCAPE.match(text, idx)
        if match is None:
            snippet = text[idx:idx + 2]
            raise ValueError(f"invalid escape sequence {snippet!r} at offset {idx}")
        simple = match.group("simple")
        if quote and simple is not None and simple in "\"'" and simple != quote:
            raise ValueError(f"invalid escape sequence \\{simple} inside {quote}-quoted string")
        out.append(_decode_one(match))
        pos = match.end()


def unquote(text: str) -> str:
    """Decode a complete quoted literal.

    ``"..."`` and ``'...'`` decode escapes and may not contain an unescaped
    closing quote, a raw newline or an escaped quote of the other kind. A
    single-quoted literal holds exactly one character. A backtick-quoted
    literal is taken verbatim and may not contain another backtick.

    Raises:
        ValueError: If *text* is not a well-formed quoted literal.
    """
    if len(text) < 2 or text[0] != text[-1] or text[0] not in "\"'`":
        raise ValueError("not a quoted string")

    quote, body = text[0], text[1:-1]
    if quote == "`":
        if "`" in body:
            raise ValueError("unexpected backtick inside raw string")
        return body

    if "\n" in body:
        raise ValueError("newline inside quoted string")

    escaped = False
    for c in body:
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif c == quote:
            raise ValueError(f"unescaped {quote} inside quoted string")
    if escaped:
        raise ValueError("trailing backslash inside quoted string")

    decoded = decode_escapes(body, quote)
    if quote == "'" and len(decoded) != 1:
        raise ValueError("single-quoted literal must hold exactly one character")
    return decoded
