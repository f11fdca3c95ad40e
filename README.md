# benser

A small browser engine as a plain Python library. It takes a DOM tree and a
CSS stylesheet, matches styles to elements, and computes a block layout with
the CSS box model. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Pipeline

1. **DOM** (`benser.dom`) – build a document tree with `Node.elem(name,
   attrs, children)` and `Node.text(data)`. An element node's `node_type` is
   an `ElementData` with a `tag_name` and `attributes`; a text node's
   `node_type` is its string. `ElementData.id()` returns the `id` attribute
   or `None`, and `ElementData.classes()` returns the set of space-separated
   names in the `class` attribute.
2. **CSS** (`benser.css`) – `parse(source)` turns stylesheet text into a
   `Stylesheet` of `Rule`s. Each rule has a list of `SimpleSelector`s, sorted
   highest specificity first, and a list of `Declaration`s whose values are
   `Keyword`, `Length` (with `Unit.PX`) or `ColorValue` (holding a
   `benser.color.Color`). `SimpleSelector.specificity()` gives
   `(ids, classes, tags)`. Malformed input raises `CssParseError`, a
   `ValueError`.
3. **Style** (`benser.style`) – `style_tree(root, stylesheet)` produces a
   tree of `StyledNode`s. `StyledNode.value(name)`,
   `StyledNode.lookup(name, fallback_name, default)` and
   `StyledNode.display()` (a `Display`: `BLOCK`, `INLINE` by default, or
   `NONE`) inspect the result. `specified_values(elem, stylesheet)` and
   `matches_simple_selector(elem, selector)` are available on their own.
4. **Layout** (`benser.layout`) – `layout_tree(styled_root, viewport)` builds
   a tree of `LayoutBox`es and lays them out inside the viewport, a
   `benser.geometry.Dimensions`. Each box has a `kind` (`BoxKind.BLOCK`,
   `INLINE` or `ANONYMOUS`) and `dimensions` with content, padding, border
   and margin; `Dimensions.padding_box()`, `border_box()` and `margin_box()`
   return the enclosing `Rect`s. `build_layout_tree(style_node)` builds the
   box tree without computing sizes; inline children of a block are grouped
   into anonymous boxes.

## Example

```python
from benser.css import parse
from benser.dom import Node
from benser.geometry import Dimensions, Rect
from benser.layout import layout_tree
from benser.style import style_tree

stylesheet = parse("""
    div { display: block; padding: 10px; }
    .note { height: 40px; margin: auto; width: 200px; }
""")

document = Node.elem("div", {}, [
    Node.elem("div", {"class": "note"}, []),
])

viewport = Dimensions(content=Rect(width=800.0, height=600.0))
root = layout_tree(style_tree(document, stylesheet), viewport)

note = root.children[0]
print(note.dimensions.margin)       # left and right margins of 280px centre the box
print(root.dimensions.margin_box()) # 800px wide, 80px high
```

## Supported CSS

- Simple selectors: type, `#id`, `.class` and `*`, comma separated.
- Values: keywords, lengths in `px`, and `#rrggbb` colours.
- Block layout with `width`, `height`, `margin`, `padding` and
  `border-width`, and their per-side forms such as `margin-left` or
  `border-top-width`.

## Rendering helpers

`benser.render` holds the arithmetic a renderer needs:
`round_up_to_multiple(number, multiple)` for row alignment,
`point(x, y, screen)` to map pixel coordinates to the -1..1 clip space, and
`native_color(c, texture_format)`, `hex_to_linear_rgba(c)` and
`hex_to_linear_bgra(c)` to turn a packed `0xRRGGBB` colour into float
channels for a `TextureFormat`.

## HTML parser state

`benser.html_state` describes the state of an HTML tree builder:
`ParseState` with its `InsertionMode`, `Scripting` and `FramesetOk` values,
plus the `Confidence` and `Encoding` enumerations used when decoding input.

## What it does not do

- It does not parse HTML text; documents are built with `Node.elem` and
  `Node.text`. `benser.html_state` only holds parser state.
- It does not draw anything: there is no window, no image output and no
  command-line program. `benser.render` provides helper calculations only.
- Only block boxes are laid out. Calling `LayoutBox.layout` on an inline or
  anonymous box, or laying out a root whose `display` is `none`, raises
  `LayoutError`.