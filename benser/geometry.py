"""Rectangles, edge sizes and CSS box dimensions."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class EdgeSizes:
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def expanded_by(self, edge: EdgeSizes) -> Rect:
        """A new rectangle grown outward by the given edges."""
        return Rect(
            x=self.x - edge.left,
            y=self.y - edge.top,
            width=self.width + edge.left + edge.right,
            height=self.height + edge.top + edge.bottom,
        )


@dataclass
class Dimensions:
    """The content area of a box, positioned from the document origin, and its edges."""

    content: Rect = field(default_factory=Rect)
    padding: EdgeSizes = field(default_factory=EdgeSizes)
    border: EdgeSizes = field(default_factory=EdgeSizes)
    margin: EdgeSizes = field(default_factory=EdgeSizes)

    def padding_box(self) -> Rect:
        """The content area plus its padding."""
        return self.content.expanded_by(self.padding)

    def border_box(self) -> Rect:
        """The content area plus padding and borders."""
        return self.padding_box().expanded_by(self.border)

    def margin_box(self) -> Rect:
        """The content area plus padding, borders and margin."""
        return self.border_box().expanded_by(self.margin)