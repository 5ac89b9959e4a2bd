r"""Extract the ``---`` delimited metadata block from the top of a page.

A page may open with a front-matter block of ``key: value`` lines::

    ---
    title: Installing
    subtitle: From source or wheels
    ---

    Body text starts here.

:func:`extract_front_matter` returns the body with the block (and any blank
lines after it) removed, plus the entries in the order they appear.

Example
-------
>>> from pageforge.frontmatter import extract_front_matter
>>> body, entries = extract_front_matter("---\ntitle: A\n---\nBody")
>>> body
'Body'
>>> entries
[MetadataEntry(key='title', value='A')]
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from pageforge._constants import FRONT_MATTER_DELIMITER

if typ.TYPE_CHECKING:
    from collections.abc import Iterable


class FrontMatterError(ValueError):
    """Raised when a line inside a front-matter block is not ``key: value``."""


@dc.dataclass(slots=True, frozen=True)
class MetadataEntry:
    """Single ``key: value`` pair read from a front-matter block.

    Attributes
    ----------
    key : str
        Text before the first colon, trimmed.
    value : str
        Text after the first colon, trimmed; may contain further colons.
    """

    key: str
    value: str


def extract_front_matter(text: str) -> tuple[str, list[MetadataEntry]]:
    """Split ``text`` into its body and leading front-matter entries.

    Parameters
    ----------
    text : str
        Raw page source. Any string is accepted, including one shorter than
        the delimiter.

    Returns
    -------
    tuple[str, list[MetadataEntry]]
        The body with the metadata block and the blank lines following its
        closing delimiter removed, and the entries in source order. When the
        page does not open with ``---`` the text is returned unchanged with no
        entries.

    Raises
    ------
    FrontMatterError
        If a line between the delimiters contains no colon.
    """
    if text[: len(FRONT_MATTER_DELIMITER) + 1].strip() != FRONT_MATTER_DELIMITER:
        return text, []

    lines = text.split("\n")
    consumed = len(lines[0]) + 1
    closed = False
    entries: list[MetadataEntry] = []
    for lineno, line in enumerate(lines[1:], start=2):
        if closed:
            if line.strip():
                break
            consumed += len(line) + 1
            continue

        consumed += len(line) + 1
        if line.strip() == FRONT_MATTER_DELIMITER:
            closed = True
            continue

        key, sep, value = line.partition(":")
        if not sep:
            msg = f"Front-matter line {lineno} is not a 'key: value' pair: {line!r}"
            raise FrontMatterError(msg)
        entries.append(MetadataEntry(key=key.strip(), value=value.strip()))

    return text[min(consumed, len(text)) :], entries


def metadata_value(
    entries: Iterable[MetadataEntry], key: str, default: str | None = None
) -> str | None:
    """Return the value recorded for ``key``, or ``default`` when absent.

    Repeated keys are allowed; the last occurrence wins.
    """
    value = default
    for entry in entries:
        if entry.key == key:
            value = entry.value
    return value


__all__ = [
    "FrontMatterError",
    "MetadataEntry",
    "extract_front_matter",
    "metadata_value",
]
