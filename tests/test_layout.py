import pytest

from benser.css import parse
from benser.dom import Node
from benser.geometry import Dimensions, Rect
from benser.layout import BoxKind, LayoutBox, LayoutError, build_layout_tree, layout_tree
from benser.style import style_tree

VIEWPORT_WIDTH = 500.0


def _viewport(width=VIEWPORT_WIDTH, height=256.0):
    return Dimensions(content=Rect(width=width, height=height))


def _styled(dom, css):
    return style_tree(dom, parse(css))


def _single_block(declarations):
    dom = Node.elem("div", {"id": "box"}, [])
    return _styled(dom, "div { display: block; " + declarations + " }")


def test_auto_width_fills_container():
    root = layout_tree(_single_block("padding: 10px;"), _viewport())
    d = root.dimensions
    assert d.content.width == VIEWPORT_WIDTH - d.padding.left - d.padding.right
    assert d.padding.left == d.padding.right == 10.0
    assert d.margin_box().width == VIEWPORT_WIDTH


def test_auto_margins_center_box():
    root = layout_tree(_single_block("width: 100px; margin: auto;"), _viewport())
    d = root.dimensions
    assert d.content.width == 100.0
    assert d.margin.left == d.margin.right
    assert d.margin.left == (VIEWPORT_WIDTH - 100.0) / 2


def test_overconstrained_adjusts_right_margin():
    root = layout_tree(_single_block("width: 100px; margin-left: 10px;"), _viewport())
    d = root.dimensions
    assert d.margin.left == 10.0
    assert d.margin.right == VIEWPORT_WIDTH - 100.0 - 10.0


def test_single_auto_margin_takes_underflow():
    root = layout_tree(
        _single_block("width: 100px; margin-left: auto; margin-right: 20px;"), _viewport()
    )
    d = root.dimensions
    assert d.margin.right == 20.0
    assert d.margin.left == VIEWPORT_WIDTH - 100.0 - 20.0


def test_auto_width_never_negative():
    root = layout_tree(_single_block("padding-left: 300px; padding-right: 300px;"), _viewport())
    d = root.dimensions
    assert d.content.width == 0.0
    assert d.margin.right == VIEWPORT_WIDTH - 300.0 - 300.0


@pytest.mark.parametrize(
    "declarations",
    [
        "",
        "padding: 10px;",
        "width: 100px;",
        "width: 100px; margin: auto;",
        "border-width: 3px; margin: 7px;",
        "width: 900px; margin: auto;",
    ],
)
def test_margin_box_width_matches_container(declarations):
    root = layout_tree(_single_block(declarations), _viewport())
    assert root.dimensions.margin_box().width == pytest.approx(VIEWPORT_WIDTH)


def test_position_includes_edges_and_ignores_viewport_height():
    viewport = _viewport()
    root = layout_tree(_single_block("margin: 5px; border-width: 2px; padding: 3px;"), viewport)
    d = root.dimensions
    assert d.content.x == d.margin.left + d.border.left + d.padding.left
    assert d.content.y == d.margin.top + d.border.top + d.padding.top
    assert d.margin_box().x == 0.0
    assert d.margin_box().y == 0.0
    assert viewport.content.height == 256.0


def test_children_are_stacked():
    dom = Node.elem(
        "div",
        {"id": "outer"},
        [Node.elem("p", {"id": "a"}, []), Node.elem("p", {"id": "b"}, [])],
    )
    css = (
        "div, p { display: block; } p { margin: 5px; } "
        "#a { height: 20px; } #b { height: 30px; }"
    )
    root = layout_tree(_styled(dom, css), _viewport())
    first, second = root.children
    first_box = first.dimensions.margin_box()
    assert second.dimensions.margin_box().y == first_box.y + first_box.height
    assert root.dimensions.content.height == sum(
        child.dimensions.margin_box().height for child in root.children
    )
    assert first.dimensions.content.height == 20.0


def test_explicit_height_overrides_children():
    dom = Node.elem("div", {}, [Node.elem("p", {}, [])])
    css = "div { display: block; height: 42px; } p { display: block; height: 100px; }"
    root = layout_tree(_styled(dom, css), _viewport())
    assert root.dimensions.content.height == 42.0
    assert root.children[0].dimensions.content.height == 100.0


def test_display_none_root_raises():
    with pytest.raises(LayoutError):
        build_layout_tree(_styled(Node.elem("div", {}, []), "div { display: none; }"))


def test_display_none_children_are_skipped():
    dom = Node.elem("div", {}, [Node.elem("p", {}, []), Node.elem("span", {}, [])])
    css = "div, span { display: block; } p { display: none; }"
    root = build_layout_tree(_styled(dom, css))
    assert [child.kind for child in root.children] == [BoxKind.BLOCK]
    assert root.children[0].style_node.node is dom.children[1]


def test_inline_children_share_anonymous_block():
    dom = Node.elem(
        "div",
        {},
        [
            Node.elem("span", {}, []),
            Node.elem("em", {}, []),
            Node.elem("p", {}, []),
            Node.elem("b", {}, []),
        ],
    )
    root = build_layout_tree(_styled(dom, "div, p { display: block; }"))
    kinds = [child.kind for child in root.children]
    assert kinds == [BoxKind.ANONYMOUS, BoxKind.BLOCK, BoxKind.ANONYMOUS]
    assert len(root.children[0].children) == 2
    assert root.children[0].style_node is None
    assert all(child.kind is BoxKind.INLINE for child in root.children[0].children)


def test_get_inline_container_reuses_last_anonymous_block():
    block = LayoutBox(BoxKind.BLOCK)
    first = block.get_inline_container()
    assert first.kind is BoxKind.ANONYMOUS
    assert block.get_inline_container() is first
    assert len(block.children) == 1


def test_get_inline_container_of_inline_is_itself():
    inline = LayoutBox(BoxKind.INLINE)
    assert inline.get_inline_container() is inline
    assert inline.children == []


def test_inline_root_cannot_be_laid_out():
    with pytest.raises(LayoutError):
        layout_tree(_styled(Node.elem("span", {}, []), ""), _viewport())


def test_block_with_inline_child_cannot_be_laid_out():
    dom = Node.elem("div", {}, [Node.text("hello")])
    with pytest.raises(LayoutError):
        layout_tree(_styled(dom, "div { display: block; }"), _viewport())