"""Render a parsed document tree into an HTML fragment.

Each :class:`~pageforge.markdown_parser.NodeKind` has exactly one rule. Kinds
without a rule render their children with no wrapping tag, so content from
parser extensions is never dropped. Text and code literals are emitted
verbatim; no escaping is applied.

Example
-------
>>> from pageforge.markdown_parser import Node, NodeKind
>>> heading = Node(NodeKind.HEADING, level=2)
>>> _ = heading.append(Node(NodeKind.TEXT, literal="Hi"))
>>> render_node(heading)
'<h2>Hi</h2>'
"""

from __future__ import annotations

from pageforge.markdown_parser import Node, NodeKind

BLOCK_QUOTE_OPEN = '<div class="block-quote">'
STRONG_OPEN = '<span style="font-weight: bold;">'
EMPHASIS_OPEN = '<span style="font-style: italic;">'


def render_node(node: Node) -> str:
    """Return the HTML for ``node`` and its subtree.

    Parameters
    ----------
    node : Node
        Root of the (sub)tree to render. Ancestors are consulted read-only
        for context-dependent rules.

    Returns
    -------
    str
        HTML markup. Rendering never fails; unknown kinds pass through.
    """
    match node.kind:
        case NodeKind.TEXT:
            if _in_block_quote(node):
                return f"<p>{node.literal}</p>"
            return node.literal
        case NodeKind.HEADING:
            return _wrap_tag(node, f"h{node.level}")
        case NodeKind.CONTAINER:
            return _wrap_tag(node, "div")
        case NodeKind.LINK:
            return _wrap(node, f'<a href="{node.destination}">', "</a>")
        case NodeKind.LIST:
            if node.ordered is None:
                return _wrap(node, "", "")
            return _wrap_tag(node, "ol" if node.ordered else "ul")
        case NodeKind.LIST_ITEM:
            return _wrap_tag(node, "li")
        case NodeKind.CODE_BLOCK:
            return (
                f'<pre><code class="code-block language-{node.info}">'
                f"{node.literal}</code></pre>"
            )
        case NodeKind.INLINE_CODE:
            return f'<span class="inline-code">{node.literal}</span>'
        case NodeKind.BLOCK_QUOTE:
            return _wrap(node, BLOCK_QUOTE_OPEN, "</div>")
        case NodeKind.STRONG:
            return _wrap(node, STRONG_OPEN, "</span>")
        case NodeKind.EMPHASIS:
            return _wrap(node, EMPHASIS_OPEN, "</span>")
        case NodeKind.PARAGRAPH:
            return _wrap_tag(node, "p")
        case _:
            return _wrap(node, "", "")


def _in_block_quote(node: Node) -> bool:
    """Return True when the node's grandparent is a block quote."""
    grandparent = node.ancestor(2)
    return grandparent is not None and grandparent.kind is NodeKind.BLOCK_QUOTE


def _wrap(node: Node, opening: str, closing: str) -> str:
    """Render the node's children in order between ``opening`` and ``closing``."""
    inner = "".join(render_node(child) for child in node.children)
    return f"{opening}{inner}{closing}"


def _wrap_tag(node: Node, tag: str) -> str:
    return _wrap(node, f"<{tag}>", f"</{tag}>")


__all__ = ["render_node"]
