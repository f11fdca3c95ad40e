"""Attach CSS declarations to DOM nodes, producing a style tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from benser.css import Keyword, SimpleSelector, Stylesheet, Value
from benser.dom import ElementData, Node

PropertyMap = dict[str, Value]


class Display(enum.Enum):
    """The used value of the ``display`` property."""

    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


@dataclass
class StyledNode:
    """A DOM node together with the property values specified for it."""

    node: Node
    specified_values: PropertyMap = field(default_factory=dict)
    children: list[StyledNode] = field(default_factory=list)

    def value(self, name: str) -> Value | None:
        """The specified value of a property, or None."""
        return self.specified_values.get(name)

    def display(self) -> Display:
        """The value of ``display``; anything unknown counts as inline."""
        value = self.value("display")
        if isinstance(value, Keyword):
            if value.name == "block":
                return Display.BLOCK
            if value.name == "none":
                return Display.NONE
        return Display.INLINE

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """The value of ``name``, else of ``fallback_name``, else ``default``."""
        value = self.value(name)
        if value is not None:
            return value
        value = self.value(fallback_name)
        if value is not None:
            return value
        return default


def matches_simple_selector(elem: ElementData, selector: SimpleSelector) -> bool:
    """Whether every component of the selector matches the element."""
    if selector.tag_name is not None and elem.tag_name != selector.tag_name:
        return False
    if selector.id is not None and elem.id() != selector.id:
        return False
    elem_classes = elem.classes()
    return all(cls in elem_classes for cls in selector.classes)


def _matching_rules(elem: ElementData, stylesheet: Stylesheet):
    for rule in stylesheet.rules:
        # Selectors are stored highest specificity first.
        selector = next(
            (s for s in rule.selectors if matches_simple_selector(elem, s)), None
        )
        if selector is not None:
            yield selector.specificity(), rule


def specified_values(elem: ElementData, stylesheet: Stylesheet) -> PropertyMap:
    """The declarations that apply to an element, most specific winning."""
    values: PropertyMap = {}
    rules = sorted(_matching_rules(elem, stylesheet), key=lambda matched: matched[0])
    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value
    return values


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """Apply a stylesheet to a whole DOM tree."""
    element = root.element
    return StyledNode(
        node=root,
        specified_values=specified_values(element, stylesheet) if element is not None else {},
        children=[style_tree(child, stylesheet) for child in root.children],
    )