"""Line-oriented EditorConfig property parser.

Only comments and ``key = value`` properties are understood here. Section
headers and anything else that does not look like a property are skipped, so
parsing never fails on user-authored input.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .config_model import EditorConfigFile, normalize_key, to_lower

# Keys defined by the EditorConfig property list. Values of these keys are
# always lower-cased. Entries may be added but never removed.
RESERVED_KEYS = frozenset(
    {
        "root",
        "indent_style",
        "indent_size",
        "tab_width",
        "end_of_line",
        "charset",
        "trim_trailing_whitespace",
        "insert_final_newline",
    }
)

# Lower-cased regardless of the key they are assigned to.
RESERVED_VALUES = frozenset({"unset"})

COMMENT_MARKERS = frozenset({"#", ";"})

_LINE_BREAK = re.compile(r"\r\n|[\r\n\x85\u2028\u2029]")
_BOM = "\ufeff"


@dataclass(frozen=True)
class Property:
    key: str
    value: str


class PropertyScanner:
    """Scans a single line shaped like ``key [=:] value [#; comment]``.

    A hand-written forward scan stands in for the equivalent regular
    expression ``^\\s*([\\w.\\-]+)\\s*[=:]\\s*(.*?)\\s*([#;].*)?$``: every
    character is visited at most once, so a line can never trigger
    backtracking blow-ups.
    """

    SEPARATORS = {"=", ":"}
    KEY_PUNCTUATION = {".", "-", "_"}
    # letters, non-spacing marks, decimal digits and connector punctuation
    WORD_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Mn", "Nd", "Pc"})

    def __init__(self, line: str) -> None:
        self.line = line
        self.length = len(line)
        self.index = 0

    def scan(self) -> Optional[Property]:
        # a line feed can only trail the property, never split it
        if "\n" in self.line.strip():
            return None
        self._skip_whitespace()
        key = self._consume_key()
        if not key:
            return None
        self._skip_whitespace()
        if self._eof or self._peek() not in self.SEPARATORS:
            return None
        self._advance()
        return Property(key, self._consume_value())

    def _consume_key(self) -> str:
        start = self.index
        while not self._eof and self._is_key_char(self._peek()):
            self._advance()
        return self.line[start:self.index]

    def _consume_value(self) -> str:
        start = self.index
        while not self._eof and self._peek() not in COMMENT_MARKERS:
            self._advance()
        # the rest of the line, if any, is an inline comment
        return self.line[start:self.index].strip()

    def _skip_whitespace(self) -> None:
        while not self._eof and self._peek().isspace():
            self._advance()

    def _is_key_char(self, char: str) -> bool:
        return char in self.KEY_PUNCTUATION or unicodedata.category(char) in self.WORD_CATEGORIES

    @property
    def _eof(self) -> bool:
        return self.index >= self.length

    def _peek(self) -> str:
        return self.line[self.index]

    def _advance(self) -> None:
        self.index += 1


def is_blank(line: Optional[str]) -> bool:
    return not line or line.isspace()


def is_comment(line: str) -> bool:
    for char in line:
        if not char.isspace():
            return char in COMMENT_MARKERS
    return False


def parse_property(line: Optional[str]) -> Optional[Property]:
    """Return the raw property on ``line``, or ``None`` for anything else."""
    if is_blank(line) or is_comment(line):
        return None
    return PropertyScanner(line).scan()


def normalize_property(prop: Property) -> tuple[str, str]:
    key = normalize_key(prop.key)
    value = prop.value or ""
    if key in RESERVED_KEYS or to_lower(value) in RESERVED_VALUES:
        value = to_lower(value)
    return key, value


def split_lines(text: str) -> List[str]:
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    return _LINE_BREAK.split(text)


def parse_lines(lines: Iterable[Optional[str]]) -> EditorConfigFile:
    if isinstance(lines, str):
        lines = split_lines(lines)
    options: dict[str, str] = {}
    for line in lines:
        prop = parse_property(line)
        if prop is None:
            continue
        key, value = normalize_property(prop)
        options[key] = value
    return EditorConfigFile(options)


def parse_text(text: str) -> EditorConfigFile:
    return parse_lines(split_lines(text))
