"""INI decoder producing flat, multi-valued environment keys.

Sections are flattened into key names: ``key`` inside ``[group]`` becomes
``group.key`` (the separator is configurable), and ``[group "sub"]`` nests
as ``group.sub.key``. A key that appears more than once keeps every value
in file order.

Example::

    ; comment
    top = 1
    [section]
    key = value            # trailing comment
    flag
    with-newlines = "value
    with
    newlines"
    raw = `C:\\path\\unescaped`

decodes to ``top=1``, ``section.key=value``, ``section.flag=1``,
``section.with-newlines=value\\nwith\\nnewlines`` and
``section.raw=C:\\path\\unescaped``.
"""

import re
from typing import Dict, List, Protocol, Union

from binit.escapes import decode_escapes
from binit.exceptions import IniSyntaxError
from binit.ini.casing import Casing

TRUE = "1"
COMMENT_CHARS = ";#"

_SECTION = re.compile(
    r'\[\s*(?P<name>[^\s\]"]*)\s*(?:"(?P<sub>(?:[^"\\]|\\.)*)")?\s*\]\s*(?:[;#].*)?\Z'
)
_TRAILING_COMMENT = re.compile(r"\s[;#]")
_SUB_ESCAPE = re.compile(r"\\(.)")


class ValueSink(Protocol):
    def append(self, key: str, value: str) -> None: ...


class _DictSink:
    def __init__(self) -> None:
        self.values: Dict[str, List[str]] = {}

    def append(self, key: str, value: str) -> None:
        self.values.setdefault(key, []).append(value)


def _strip_comment(text: str) -> str:
    match = _TRAILING_COMMENT.search(text)
    if match:
        text = text[:match.start()]
    return text.strip()


def _find_close(text: str, quote: str) -> int:
    """Return the index of the closing *quote* in *text*, or -1."""
    if quote == "`":
        return text.find("`")

    escaped = False
    for i, c in enumerate(text):
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif c == quote:
            return i
    return -1


class IniReader:
    """Decode INI documents into ``(key, value)`` appends on a sink.

    Attributes:
        separator: Inserted between section names and keys
        casing: Case transform applied to every composed key
        true_value: Value stored for a bare key with no ``=``
    """

    def __init__(
        self,
        separator: str = ".",
        casing: Casing = Casing.CASE_SENSITIVE,
        true_value: str = TRUE,
    ):
        self.separator = separator
        self.casing = casing
        self.true_value = true_value

    def decode(self, data: Union[bytes, str]) -> Dict[str, List[str]]:
        """Decode *data* into a new ``key -> values`` dict."""
        sink = _DictSink()
        self.read(data, sink)
        return sink.values

    def read(self, data: Union[bytes, str], dst: ValueSink) -> None:
        """Decode *data*, appending each value to *dst* as soon as it is parsed.

        Raises:
            IniSyntaxError: On malformed input. Values from lines before the
                error have already been appended.
        """
        lines = [line.rstrip("\r") for line in self._text(data).split("\n")]
        section = ""
        lineno = 0

        while lineno < len(lines):
            start = lineno + 1
            line = lines[lineno].strip()
            lineno += 1

            if not line or line[0] in COMMENT_CHARS:
                continue

            if line[0] == "[":
                section = self._parse_section(line, start)
                continue

            key, sep, rest = line.partition("=")
            key = key.strip() if sep else _strip_comment(key)
            if not key:
                raise IniSyntaxError(start, "missing key name")

            if sep:
                value, lineno = self._parse_value(rest.strip(), lines, lineno, start)
            else:
                value = self.true_value

            dst.append(self._compose(section, key), value)

    def _text(self, data: Union[bytes, str]) -> str:
        if isinstance(data, str):
            return data
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            line = data[:exc.start].count(b"\n") + 1
            raise IniSyntaxError(line, "input is not valid UTF-8") from exc

    def _parse_section(self, line: str, lineno: int) -> str:
        match = _SECTION.match(line)
        if match is None:
            raise IniSyntaxError(lineno, f"malformed section header {line!r}")

        parts = [match.group("name")]
        sub = match.group("sub")
        if sub is not None:
            parts.append(_SUB_ESCAPE.sub(r"\1", sub))
        return self.separator.join(p for p in parts if p)

    def _parse_value(self, value: str, lines: List[str], lineno: int, start: int) -> tuple[str, int]:
        """Parse the text after ``=``, reading further lines for open quotes.

        Returns the decoded value and the index of the next unread line.
        """
        if not value or value[0] not in "\"`":
            return _strip_comment(value), lineno

        quote = value[0]
        text = value[1:]
        body = []
        while True:
            end = _find_close(text, quote)
            if end >= 0:
                body.append(text[:end])
                trailer = text[end + 1:].strip()
                break
            body.append(text)
            if lineno >= len(lines):
                raise IniSyntaxError(start, f"unterminated {quote}-quoted value")
            body.append("\n")
            text = lines[lineno]
            lineno += 1

        if trailer and trailer[0] not in COMMENT_CHARS:
            raise IniSyntaxError(lineno, f"unexpected text after quoted value: {trailer!r}")

        raw = "".join(body)
        if quote == "`":
            return raw, lineno
        try:
            return decode_escapes(raw), lineno
        except ValueError as exc:
            raise IniSyntaxError(start, f"invalid quoted value: {exc}") from exc

    def _compose(self, section: str, key: str) -> str:
        name = f"{section}{self.separator}{key}" if section else key
        return self.casing.apply(name)
