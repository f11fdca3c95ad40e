"""Block layout: turn a style tree into a tree of positioned boxes."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field

from benser.css import Keyword, Length, Unit
from benser.geometry import Dimensions
from benser.style import Display, StyledNode

_AUTO = Keyword("auto")
_ZERO = Length(0.0, Unit.PX)


class LayoutError(RuntimeError):
    """Raised when a tree cannot be laid out."""


class BoxKind(enum.Enum):
    BLOCK = "block"
    INLINE = "inline"
    ANONYMOUS = "anonymous"


@dataclass
class LayoutBox:
    """A box in the layout tree; anonymous boxes have no style node."""

    kind: BoxKind
    style_node: StyledNode | None = None
    dimensions: Dimensions = field(default_factory=Dimensions)
    children: list[LayoutBox] = field(default_factory=list)

    def _style(self) -> StyledNode:
        if self.style_node is None:
            raise LayoutError("Anonymous block box has no style node")
        return self.style_node

    def layout(self, containing_block: Dimensions) -> None:
        """Lay out this box and its descendants inside the containing block."""
        if self.kind is BoxKind.BLOCK:
            self._layout_block(copy.deepcopy(containing_block))
        elif self.kind is BoxKind.INLINE:
            raise LayoutError("inline boxes cannot be laid out")
        else:
            raise LayoutError("anonymous block boxes cannot be laid out")

    def _layout_block(self, containing_block: Dimensions) -> None:
        self._calculate_block_width(containing_block)
        self._calculate_block_position(containing_block)
        self._layout_block_children()
        self._calculate_block_height()

    def _calculate_block_width(self, containing_block: Dimensions) -> None:
        style = self._style()
        width = style.value("width") or _AUTO

        margin_left = style.lookup("margin-left", "margin", _ZERO)
        margin_right = style.lookup("margin-right", "margin", _ZERO)
        border_left = style.lookup("border-left-width", "border-width", _ZERO)
        border_right = style.lookup("border-right-width", "border-width", _ZERO)
        padding_left = style.lookup("padding-left", "padding", _ZERO)
        padding_right = style.lookup("padding-right", "padding", _ZERO)

        total = sum(
            v.to_px()
            for v in (
                margin_left,
                margin_right,
                border_left,
                border_right,
                padding_left,
                padding_right,
                width,
            )
        )

        container_width = containing_block.content.width
        if width != _AUTO and total > container_width:
            if margin_left == _AUTO:
                margin_left = _ZERO
            if margin_right == _AUTO:
                margin_right = _ZERO

        underflow = container_width - total
        width_auto = width == _AUTO
        left_auto = margin_left == _AUTO
        right_auto = margin_right == _AUTO

        if width_auto:
            if left_auto:
                margin_left = _ZERO
            if right_auto:
                margin_right = _ZERO
            if underflow >= 0.0:
                width = Length(underflow)
            else:
                width = _ZERO
                margin_right = Length(margin_right.to_px() + underflow)
        elif left_auto and right_auto:
            margin_left = Length(underflow / 2.0)
            margin_right = Length(underflow / 2.0)
        elif left_auto:
            margin_left = Length(underflow)
        elif right_auto:
            margin_right = Length(underflow)
        else:
            margin_right = Length(margin_right.to_px() + underflow)

        d = self.dimensions
        d.content.width = width.to_px()
        d.padding.left = padding_left.to_px()
        d.padding.right = padding_right.to_px()
        d.border.left = border_left.to_px()
        d.border.right = border_right.to_px()
        d.margin.left = margin_left.to_px()
        d.margin.right = margin_right.to_px()

    def _calculate_block_position(self, containing_block: Dimensions) -> None:
        style = self._style()
        d = self.dimensions

        d.margin.top = style.lookup("margin-top", "margin", _ZERO).to_px()
        d.margin.bottom = style.lookup("margin-bottom", "margin", _ZERO).to_px()
        d.border.top = style.lookup("border-top-width", "border-width", _ZERO).to_px()
        d.border.bottom = style.lookup("border-bottom-width", "border-width", _ZERO).to_px()
        d.padding.top = style.lookup("padding-top", "padding", _ZERO).to_px()
        d.padding.bottom = style.lookup("padding-bottom", "padding", _ZERO).to_px()

        d.content.x = containing_block.content.x + d.margin.left + d.border.left + d.padding.left
        # Below all the previous boxes in the container.
        d.content.y = (
            containing_block.content.height
            + containing_block.content.y
            + d.margin.top
            + d.border.top
            + d.padding.top
        )

    def _layout_block_children(self) -> None:
        d = self.dimensions
        for child in self.children:
            child.layout(d)
            d.content.height += child.dimensions.margin_box().height

    def _calculate_block_height(self) -> None:
        height = self._style().value("height")
        if isinstance(height, Length) and height.unit is Unit.PX:
            self.dimensions.content.height = height.amount

    def get_inline_container(self) -> LayoutBox:
        """The box a new inline child should be added to."""
        if self.kind is not BoxKind.BLOCK:
            return self
        if not self.children or self.children[-1].kind is not BoxKind.ANONYMOUS:
            self.children.append(LayoutBox(BoxKind.ANONYMOUS))
        return self.children[-1]


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """Build the box tree for a style tree without computing any sizes."""
    display = style_node.display()
    if display is Display.NONE:
        raise LayoutError("Root node has display: none.")
    kind = BoxKind.BLOCK if display is Display.BLOCK else BoxKind.INLINE
    root = LayoutBox(kind, style_node)

    for child in style_node.children:
        child_display = child.display()
        if child_display is Display.BLOCK:
            root.children.append(build_layout_tree(child))
        elif child_display is Display.INLINE:
            root.get_inline_container().children.append(build_layout_tree(child))
    return root


def layout_tree(node: StyledNode, containing_block: Dimensions) -> LayoutBox:
    """Build and lay out the box tree for a style tree."""
    containing_block = copy.deepcopy(containing_block)
    # Layout expects the container height to start at zero.
    containing_block.content.height = 0.0
    root = build_layout_tree(node)
    root.layout(containing_block)
    return root