"""A minimal document object model: text and element nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

AttrMap = dict[str, str]


@dataclass
class ElementData:
    """The tag name and attributes of an element node."""

    tag_name: str
    attributes: AttrMap = field(default_factory=dict)

    def id(self) -> str | None:
        """The value of the ``id`` attribute, if any."""
        return self.attributes.get("id")

    def classes(self) -> set[str]:
        """The space-separated names in the ``class`` attribute."""
        classlist = self.attributes.get("class")
        if classlist is None:
            return set()
        return set(classlist.split(" "))


NodeType = Union[str, ElementData]


@dataclass
class Node:
    """A DOM node: ``node_type`` is the text of a text node or the element's data."""

    node_type: NodeType
    children: list[Node] = field(default_factory=list)

    @staticmethod
    def text(data: str) -> Node:
        """Create a text node."""
        return Node(node_type=data)

    @staticmethod
    def elem(name: str, attrs: AttrMap, children: list[Node]) -> Node:
        """Create an element node with the given attributes and children."""
        return Node(
            node_type=ElementData(tag_name=name, attributes=dict(attrs)),
            children=list(children),
        )

    @property
    def is_text(self) -> bool:
        return isinstance(self.node_type, str)

    @property
    def element(self) -> ElementData | None:
        """The element data, or None for a text node."""
        return self.node_type if isinstance(self.node_type, ElementData) else None