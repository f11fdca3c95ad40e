"""State kept by an HTML parser: encoding confidence and tree-construction state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class Confidence(enum.Enum):
    """How sure the parser is of the character encoding it decodes with."""

    CERTAIN = enum.auto()
    TENTATIVE = enum.auto()
    IRRELEVANT = enum.auto()


class Encoding(enum.Enum):
    UTF8 = "utf-8"
    UTF16 = "utf-16"


class InsertionMode(enum.Enum):
    """The state variable that drives tree construction."""

    INITIAL = enum.auto()
    BEFORE_HTML = enum.auto()
    BEFORE_HEAD = enum.auto()
    IN_HEAD = enum.auto()
    IN_HEAD_NOSCRIPT = enum.auto()
    AFTER_HEAD = enum.auto()
    IN_BODY = enum.auto()
    TEXT = enum.auto()
    IN_TABLE = enum.auto()
    IN_TABLE_TEXT = enum.auto()
    IN_CAPTION = enum.auto()
    IN_COLUMN_GROUP = enum.auto()
    IN_TABLE_BODY = enum.auto()
    IN_ROW = enum.auto()
    IN_CELL = enum.auto()
    IN_SELECT = enum.auto()
    IN_SELECT_IN_TABLE = enum.auto()
    IN_TEMPLATE = enum.auto()
    AFTER_BODY = enum.auto()
    IN_FRAMESET = enum.auto()
    AFTER_FRAMESET = enum.auto()
    AFTER_AFTER_BODY = enum.auto()
    AFTER_AFTER_FRAMESET = enum.auto()


class Scripting(enum.Enum):
    ENABLED = enum.auto()
    DISABLED = enum.auto()


class FramesetOk(enum.Enum):
    OK = enum.auto()
    NOT_OK = enum.auto()


@dataclass
class ParseState:
    """Tree-construction state, starting in the initial insertion mode."""

    insertion_mode: InsertionMode = InsertionMode.INITIAL
    open_elements: list[Any] = field(default_factory=list)
    active_formatting_elements: list[Any] = field(default_factory=list)
    head: Any | None = None
    form: Any | None = None
    scripting: Scripting = Scripting.DISABLED
    frameset_ok: FramesetOk = FramesetOk.OK