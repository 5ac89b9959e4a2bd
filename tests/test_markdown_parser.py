"""Tests for translating mistune tokens into document tree nodes."""

from __future__ import annotations

from pageforge.markdown_parser import Node, NodeKind, parse_document


def _blocks(root: Node) -> list[Node]:
    """Return the root's children, ignoring spacing tokens."""
    return [child for child in root.children if child.kind is not NodeKind.OTHER]


def test_root_is_container_with_parent_links() -> None:
    root = parse_document("## Intro\n\nBody text\n")
    assert root.kind is NodeKind.CONTAINER
    assert root.parent is None
    heading, paragraph = _blocks(root)
    assert heading.kind is NodeKind.HEADING
    assert heading.level == 2
    assert heading.parent is root
    assert paragraph.kind is NodeKind.PARAGRAPH
    assert paragraph.children[0].parent is paragraph


def test_soft_line_breaks_merge_into_one_text_node() -> None:
    (paragraph,) = _blocks(parse_document("line one\nline two\n"))
    assert [child.kind for child in paragraph.children] == [NodeKind.TEXT]
    assert paragraph.children[0].literal == "line one\nline two"


def test_fenced_code_keeps_language_and_literal() -> None:
    (code,) = _blocks(parse_document("```go\nx:=1\n```\n"))
    assert code.kind is NodeKind.CODE_BLOCK
    assert code.info == "go"
    assert code.literal == "x:=1\n"
    assert code.children == []


def test_indented_code_has_no_language() -> None:
    (code,) = _blocks(parse_document("    print('hi')\n"))
    assert code.kind is NodeKind.CODE_BLOCK
    assert code.info == ""
    assert "print('hi')" in code.literal


def test_list_style_is_recorded() -> None:
    (bullets,) = _blocks(parse_document("- a\n- b\n"))
    (numbers,) = _blocks(parse_document("1. a\n2. b\n"))
    assert bullets.kind is NodeKind.LIST
    assert bullets.ordered is False
    assert numbers.ordered is True
    assert [item.kind for item in numbers.children] == [NodeKind.LIST_ITEM] * 2
    assert numbers.text_content() == "ab"


def test_inline_markup_kinds() -> None:
    (paragraph,) = _blocks(
        parse_document("**bold** and *it* with `code` and [docs](guide.html)\n")
    )
    kinds = [child.kind for child in paragraph.children]
    assert NodeKind.STRONG in kinds
    assert NodeKind.EMPHASIS in kinds
    code = next(c for c in paragraph.children if c.kind is NodeKind.INLINE_CODE)
    assert code.literal == "code"
    link = next(c for c in paragraph.children if c.kind is NodeKind.LINK)
    assert link.destination == "guide.html"
    assert link.text_content() == "docs"


def test_block_quote_text_sits_two_levels_below_quote() -> None:
    (quote,) = _blocks(parse_document("> quoted\n"))
    assert quote.kind is NodeKind.BLOCK_QUOTE
    text = quote.children[0].children[0]
    assert text.kind is NodeKind.TEXT
    assert text.ancestor(2) is quote


def test_unmapped_tokens_become_other_and_keep_children() -> None:
    (paragraph,) = _blocks(parse_document("~~gone~~\n"))
    (strike,) = paragraph.children
    assert strike.kind is NodeKind.OTHER
    assert strike.text_content() == "gone"


def test_hard_line_breaks_merge_into_one_text_node() -> None:
    (paragraph,) = _blocks(parse_document("line  \nhard\n"))
    assert [child.kind for child in paragraph.children] == [NodeKind.TEXT]
    assert paragraph.children[0].literal == "line\nhard"
