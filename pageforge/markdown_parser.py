r"""Parse Markdown into the document tree consumed by the HTML renderer.

Parsing is delegated to mistune in AST mode; this module translates the token
dictionaries it returns into :class:`Node` objects with parent
back-references. Tokens without a dedicated :class:`NodeKind` become ``OTHER``
nodes that keep their children.

Example
-------
>>> from pageforge.markdown_parser import parse_document
>>> root = parse_document("## Intro\nBody text")
>>> [child.kind.name for child in root.children]
['HEADING', 'PARAGRAPH']
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

import mistune

PARSER_PLUGINS = ("strikethrough", "table", "url", "def_list")


class NodeKind(enum.Enum):
    """Structural kinds the renderer knows how to emit."""

    TEXT = "text"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    CONTAINER = "container"
    LINK = "link"
    LIST = "list"
    LIST_ITEM = "list_item"
    CODE_BLOCK = "code_block"
    INLINE_CODE = "inline_code"
    BLOCK_QUOTE = "block_quote"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    OTHER = "other"


@dc.dataclass(slots=True, eq=False)
class Node:
    """One structural unit of a parsed Markdown document.

    A node owns its ``children`` in document order. ``parent`` is a
    non-owning back-reference used only for read-only ancestor lookups; it is
    set by :meth:`append` and is ``None`` for the root.

    Attributes
    ----------
    kind : NodeKind
        Structural kind selecting the render rule.
    children : list[Node]
        Child nodes in document order.
    parent : Node or None
        Enclosing node, or ``None`` for the root.
    literal : str
        Text for ``TEXT``, ``CODE_BLOCK`` and ``INLINE_CODE`` nodes.
    level : int
        Heading level (1-6) for ``HEADING`` nodes.
    destination : str
        Link target for ``LINK`` nodes.
    info : str
        Language tag for ``CODE_BLOCK`` nodes; empty when the fence has none.
    ordered : bool or None
        ``True`` for ordered lists, ``False`` for bullet lists, ``None`` when
        the list style is not known.
    """

    kind: NodeKind
    children: list[Node] = dc.field(default_factory=list)
    parent: Node | None = dc.field(default=None, repr=False)
    literal: str = ""
    level: int = 0
    destination: str = ""
    info: str = ""
    ordered: bool | None = None

    def append(self, child: Node) -> Node:
        """Attach ``child`` as the last child of this node and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def extend(self, children: list[Node]) -> Node:
        """Attach each of ``children`` in order and return this node."""
        for child in children:
            self.append(child)
        return self

    def ancestor(self, depth: int) -> Node | None:
        """Return the ancestor ``depth`` levels up, or ``None`` past the root."""
        node: Node | None = self
        for _ in range(depth):
            if node is None:
                return None
            node = node.parent
        return node

    def text_content(self) -> str:
        """Return the concatenated literal text of every ``TEXT`` leaf."""
        if self.kind is NodeKind.TEXT:
            return self.literal
        return "".join(child.text_content() for child in self.children)


TOKEN_KINDS: dict[str, NodeKind] = {
    "text": NodeKind.TEXT,
    "heading": NodeKind.HEADING,
    "paragraph": NodeKind.PARAGRAPH,
    "link": NodeKind.LINK,
    "list": NodeKind.LIST,
    "list_item": NodeKind.LIST_ITEM,
    "block_code": NodeKind.CODE_BLOCK,
    "codespan": NodeKind.INLINE_CODE,
    "block_quote": NodeKind.BLOCK_QUOTE,
    "strong": NodeKind.STRONG,
    "emphasis": NodeKind.EMPHASIS,
}

Token = dict[str, typ.Any]

_markdown = mistune.create_markdown(renderer="ast", plugins=list(PARSER_PLUGINS))


def parse_document(text: str) -> Node:
    """Parse Markdown ``text`` into a ``CONTAINER`` root node.

    Parameters
    ----------
    text : str
        Markdown source with any front matter already removed.

    Returns
    -------
    Node
        Document root whose children are the top-level blocks.
    """
    tokens = typ.cast("list[Token]", _markdown(text))
    return Node(NodeKind.CONTAINER).extend(_convert_tokens(tokens))


def _convert_tokens(tokens: list[Token]) -> list[Node]:
    """Convert sibling tokens, merging text runs split by line breaks."""
    nodes: list[Node] = []
    for token in tokens:
        kind = token.get("type")
        if kind in ("text", "softbreak", "linebreak"):
            literal = token.get("raw", "") if kind == "text" else "\n"
            previous = nodes[-1] if nodes else None
            if previous is not None and previous.kind is NodeKind.TEXT:
                previous.literal += literal
            else:
                nodes.append(Node(NodeKind.TEXT, literal=literal))
            continue
        nodes.append(_convert_token(token))
    return nodes


def _convert_token(token: Token) -> Node:
    """Build a single node (and its subtree) from a mistune token."""
    attrs: dict[str, typ.Any] = token.get("attrs") or {}
    node = Node(TOKEN_KINDS.get(token.get("type", ""), NodeKind.OTHER))
    match node.kind:
        case NodeKind.HEADING:
            node.level = int(attrs.get("level", 1))
        case NodeKind.LINK:
            node.destination = str(attrs.get("url", ""))
        case NodeKind.LIST:
            ordered = attrs.get("ordered")
            node.ordered = ordered if isinstance(ordered, bool) else None
        case NodeKind.CODE_BLOCK:
            node.literal = token.get("raw", "")
            node.info = str(attrs.get("info") or "")
        case NodeKind.INLINE_CODE:
            node.literal = token.get("raw", "")
    return node.extend(_convert_tokens(token.get("children") or []))


__all__ = ["PARSER_PLUGINS", "Node", "NodeKind", "parse_document"]
