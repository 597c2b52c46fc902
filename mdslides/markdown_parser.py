"""
Line-oriented markdown parser.

Only a small dialect is understood: ``#`` headings (levels above 3 collapse
into level 3), bulleted lists using ``- `` or ``* `` with nesting driven by
leading spaces, and ``---`` / ``***`` horizontal rules that split the
document into pages. Every other line is plain text, so parsing never fails.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from .cursor import LineCursor
from .models import (
    MAX_HEADING_LEVEL,
    BulletList,
    Component,
    Heading,
    Item,
    ItemList,
    Normal,
    Page,
    SplitLine,
    Text,
    TextLeaf,
)

logger = logging.getLogger(__name__)

LIST_MARKERS = ("- ", "* ")
SPLIT_LINES = ("---", "***")


def classify_text(line: str) -> TextLeaf:
    """
    Classify a single line as a heading or plain text.

    A run of ``#`` followed by a space is a heading whose level is the run
    length, capped at 3. The marker and that one space are stripped; the rest
    of the line is kept verbatim. Anything else is returned whole as
    ``Normal``.
    """
    hashes = len(line) - len(line.lstrip("#"))
    if hashes and line[hashes:hashes + 1] == " ":
        return Heading(min(hashes, MAX_HEADING_LEVEL), line[hashes + 1:])
    return Normal(line)


def is_blank(line: str) -> bool:
    return not line.strip()


def is_list_line(line: str) -> bool:
    return line.lstrip(" ")[:2] in LIST_MARKERS


def is_split_line(line: str) -> bool:
    return line.rstrip("\n") in SPLIT_LINES


def indent_of(line: str) -> int:
    """Number of leading spaces."""
    return len(line) - len(line.lstrip(" "))


def strip_marker(line: str) -> str:
    return line.lstrip(" ")[2:]


@dataclass
class _ListLevel:
    """One open nesting level: where its items go and its sibling indentation."""
    indent: int
    items: ItemList
    baseline: Optional[int] = None


def parse_list(cursor: LineCursor, indent: int = 0) -> ItemList:
    """
    Parse consecutive list lines into a forest of items.

    Lines indented exactly like the first item become siblings. A strictly
    deeper line is nested under the item before it. Parsing stops, without
    consuming the line, at a non-list line or at a list line shallower than
    *indent* / the first item. If the first list line is deeper than
    *indent*, its indentation becomes the sibling level. Blank lines are
    consumed and ignored.

    Open levels are kept on an explicit stack, so nesting depth is not
    limited by the interpreter's recursion limit.
    """
    items = ItemList()
    levels = [_ListLevel(indent, items)]

    while levels:
        line = cursor.peek()
        if line is None:
            break
        if is_blank(line):
            cursor.advance()
            continue
        if not is_list_line(line):
            break

        level = levels[-1]
        depth = indent_of(line)
        if level.baseline is None:
            if depth < level.indent:
                levels.pop()
                continue
            level.baseline = depth

        if depth == level.baseline:
            cursor.advance()
            item = Item(classify_text(strip_marker(line)))
            level.items.append(item)
            levels.append(_ListLevel(depth + 1, item.children))
        elif depth < level.baseline:
            levels.pop()
        else:
            # A deeper run that the previous item's children stopped short of
            # (e.g. shallower than its first child) still belongs to it.
            levels.append(_ListLevel(depth, level.items[-1].children))

    return items


def parse(text: str) -> List[Component]:
    """Parse *text* into its ordered list of components."""
    cursor = LineCursor(text)
    components: List[Component] = []

    while not cursor.exhausted:
        line = cursor.peek()
        if is_blank(line):
            cursor.advance()
            continue

        if is_split_line(line):
            cursor.advance()
            components.append(SplitLine())
            logger.debug(f"Line {cursor.position}: split line")
            continue

        if is_list_line(line):
            items = parse_list(cursor, 0)
            if items:
                components.append(BulletList(items))
                logger.debug(f"Line {cursor.position}: list with {len(items)} root items")
                continue
            # Nothing consumed: classify the line as text so the loop advances.

        cursor.advance()
        components.append(Text(classify_text(line)))
        logger.debug(f"Line {cursor.position}: text")

    return components


def split_pages(components: List[Component]) -> List[Page]:
    """
    Split components into pages at every ``SplitLine``.

    The split lines themselves are dropped. *k* split lines always give
    *k + 1* pages, any of which may be empty.
    """
    pages = [Page()]
    for component in components:
        if isinstance(component, SplitLine):
            pages.append(Page())
        else:
            pages[-1].components.append(component)
    return pages


class Markdown:
    """A parsed markdown document."""

    def __init__(self, components: List[Component]):
        self.components = components

    @classmethod
    def parse(cls, text: str) -> "Markdown":
        return cls(parse(text))

    def pages(self) -> List[Page]:
        pages = split_pages(self.components)
        logger.debug(f"Split {len(self.components)} components into {len(pages)} pages")
        return pages

    def __iter__(self):
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Markdown):
            return NotImplemented
        return self.components == other.components

    def __repr__(self) -> str:
        return f"<Markdown: {len(self.components)} components>"


class MarkdownParser:
    """
    Parser entry point used by the generator.
    """

    def parse(self, markdown_text: str) -> Markdown:
        """
        Parse markdown text.

        Args:
            markdown_text: Raw markdown content

        Returns:
            The parsed ``Markdown`` document
        """
        return Markdown.parse(markdown_text)

    def parse_with_page_breaks(self, markdown_text: str) -> List[Page]:
        """Parse markdown text and split it into pages."""
        return self.parse(markdown_text).pages()
