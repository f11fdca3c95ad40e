"""CSS data model and a parser for a simple subset of CSS."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass, field
from typing import Callable, Union

from benser.color import Color

_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-_")
_HEX_DIGITS = frozenset(string.hexdigits)
_DIGITS = frozenset(string.digits)
_FLOAT_CHARS = frozenset(string.digits + ".")


class CssParseError(ValueError):
    """Raised when a stylesheet cannot be parsed."""


class Unit(enum.Enum):
    PX = "px"


@dataclass(frozen=True)
class Keyword:
    name: str

    def to_px(self) -> float:
        """Keywords have no length; they count as zero."""
        return 0.0


@dataclass(frozen=True)
class Length:
    amount: float
    unit: Unit = Unit.PX

    def to_px(self) -> float:
        return self.amount


@dataclass(frozen=True)
class ColorValue:
    color: Color

    def to_px(self) -> float:
        """Colours have no length; they count as zero."""
        return 0.0


Value = Union[Keyword, Length, ColorValue]
Specificity = tuple[int, int, int]


@dataclass
class SimpleSelector:
    """A selector such as ``type#id.class1.class2``."""

    tag_name: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)

    def specificity(self) -> Specificity:
        """(id count, class count, tag count), compared lexicographically."""
        return (
            1 if self.id is not None else 0,
            len(self.classes),
            1 if self.tag_name is not None else 0,
        )


@dataclass
class Declaration:
    name: str
    value: Value


@dataclass
class Rule:
    selectors: list[SimpleSelector]
    declarations: list[Declaration]


@dataclass
class Stylesheet:
    rules: list[Rule] = field(default_factory=list)


def parse(source: str) -> Stylesheet:
    """Parse a whole stylesheet."""
    return Stylesheet(rules=_Parser(source).parse_rules())


def _is_identifier_char(c: str) -> bool:
    return c in _IDENTIFIER_CHARS


class _Parser:
    def __init__(self, source: str) -> None:
        self._input = source
        self._pos = 0

    def parse_rules(self) -> list[Rule]:
        rules = []
        while True:
            self._consume_whitespace()
            if self._eof():
                return rules
            rules.append(self._parse_rule())

    def _parse_rule(self) -> Rule:
        selectors = self._parse_selectors()
        return Rule(selectors=selectors, declarations=self._parse_declarations())

    def _parse_selectors(self) -> list[SimpleSelector]:
        selectors = []
        while True:
            selectors.append(self._parse_simple_selector())
            self._consume_whitespace()
            c = self._next_char()
            if c == ",":
                self._consume_char()
                self._consume_whitespace()
            elif c == "{":
                break
            else:
                raise CssParseError(f"Unexpected character {c} in selector list")
        # Highest specificity first, for use in matching.
        return sorted(selectors, key=SimpleSelector.specificity, reverse=True)

    def _parse_simple_selector(self) -> SimpleSelector:
        selector = SimpleSelector()
        while not self._eof():
            c = self._next_char()
            if c == "#":
                self._consume_char()
                selector.id = self._parse_identifier()
            elif c == ".":
                self._consume_char()
                selector.classes.append(self._parse_identifier())
            elif c == "*":
                self._consume_char()
            elif _is_identifier_char(c):
                selector.tag_name = self._parse_identifier()
            else:
                break
        return selector

    def _parse_declarations(self) -> list[Declaration]:
        self._expect("{")
        declarations = []
        while True:
            self._consume_whitespace()
            if self._next_char() == "}":
                self._consume_char()
                return declarations
            declarations.append(self._parse_declaration())

    def _parse_declaration(self) -> Declaration:
        name = self._parse_identifier()
        self._consume_whitespace()
        self._expect(":")
        self._consume_whitespace()
        value = self._parse_value()
        self._consume_whitespace()
        self._expect(";")
        return Declaration(name=name, value=value)

    def _parse_value(self) -> Value:
        c = self._next_char()
        if c in _DIGITS:
            return self._parse_length()
        if c == "#":
            return self._parse_color()
        return Keyword(self._parse_identifier())

    def _parse_length(self) -> Length:
        amount = self._parse_float()
        return Length(amount, self._parse_unit())

    def _parse_float(self) -> float:
        text = self._consume_while(lambda c: c in _FLOAT_CHARS)
        try:
            return float(text)
        except ValueError:
            raise CssParseError(f"invalid number {text!r}") from None

    def _parse_unit(self) -> Unit:
        unit = self._parse_identifier().lower()
        if unit == "px":
            return Unit.PX
        raise CssParseError(f"unrecognized unit {unit!r}")

    def _parse_color(self) -> ColorValue:
        self._expect("#")
        r = self._parse_hex_pair()
        g = self._parse_hex_pair()
        b = self._parse_hex_pair()
        return ColorValue(Color(r, g, b, 255))

    def _parse_hex_pair(self) -> int:
        pair = self._input[self._pos : self._pos + 2]
        if len(pair) != 2 or not all(c in _HEX_DIGITS for c in pair):
            raise CssParseError(f"invalid hexadecimal pair {pair!r}")
        self._pos += 2
        return int(pair, 16)

    def _parse_identifier(self) -> str:
        return self._consume_while(_is_identifier_char)

    def _consume_whitespace(self) -> None:
        self._consume_while(str.isspace)

    def _consume_while(self, test: Callable[[str], bool]) -> str:
        start = self._pos
        while not self._eof() and test(self._input[self._pos]):
            self._pos += 1
        return self._input[start : self._pos]

    def _expect(self, expected: str) -> None:
        found = self._consume_char()
        if found != expected:
            raise CssParseError(f"expected {expected!r}, found {found!r}")

    def _consume_char(self) -> str:
        c = self._next_char()
        self._pos += 1
        return c

    def _next_char(self) -> str:
        if self._eof():
            raise CssParseError("unexpected end of input")
        return self._input[self._pos]

    def _eof(self) -> bool:
        return self._pos >= len(self._input)