"""
Data models for the markdown slide converter.

Two families live here:

* the parsed document (``Heading``/``Normal`` leaves, ``Item``/``ItemList``
  forests, the ``Text``/``BulletList``/``SplitLine`` components and ``Page``)
* the render-ready deck (``Font``, ``Content``, ``Slide``, ``Deck``) whose
  ``to_dict`` output is the wire format consumed by the renderer service.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

MAX_HEADING_LEVEL = 3


@dataclass(frozen=True)
class Heading:
    """A heading line, ``level`` is 1, 2 or 3."""
    level: int
    content: str

    @property
    def value(self) -> str:
        return self.content


@dataclass(frozen=True)
class Normal:
    """A plain text line."""
    content: str

    @property
    def level(self) -> Optional[int]:
        return None

    @property
    def value(self) -> str:
        return self.content


TextLeaf = Union[Heading, Normal]


@dataclass
class Item:
    """
    One list entry.

    ``children`` holds the entries nested directly below this one. It is
    always an ``ItemList``, empty when the entry has no nested entries.
    """
    value: TextLeaf
    children: "ItemList" = field(default_factory=lambda: ItemList())

    @property
    def text(self) -> str:
        return self.value.value


@dataclass
class ItemList:
    """Sibling items sharing one indentation level."""
    items: List[Item] = field(default_factory=list)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Item:
        return self.items[index]

    def append(self, item: Item):
        self.items.append(item)

    def extend(self, other: "ItemList"):
        self.items.extend(other.items)


@dataclass(frozen=True)
class Text:
    """A single classified line outside of any list."""
    value: TextLeaf


@dataclass(frozen=True)
class BulletList:
    """A bulleted list block."""
    items: ItemList


@dataclass(frozen=True)
class SplitLine:
    """A horizontal rule (``---`` or ``***``) separating two pages."""


Component = Union[Text, BulletList, SplitLine]

# Every Component variant. Consumers that dispatch on component kind are
# tested against this tuple, so a new variant must be added here too.
COMPONENT_TYPES = (Text, BulletList, SplitLine)


@dataclass
class Page:
    """The components between two split lines (never a SplitLine itself)."""
    components: List[Component] = field(default_factory=list)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index: int) -> Component:
        return self.components[index]

    def is_empty(self) -> bool:
        return not self.components


@dataclass(frozen=True)
class Font:
    """Point size and weight of a piece of text."""
    size: int
    bold: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"size": self.size, "bold": self.bold}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Font":
        return cls(size=int(data["size"]), bold=bool(data.get("bold", False)))


DEFAULT_FONT = Font(size=18, bold=False)


@dataclass
class Content:
    """
    A styled, render-ready text node.

    ``children`` is ``None`` when the node has no nested nodes; this is
    serialized as ``null`` and is distinct from an explicit empty list.
    """
    text: str
    size: int = DEFAULT_FONT.size
    bold: bool = DEFAULT_FONT.bold
    children: Optional[List["Content"]] = None

    @classmethod
    def new(cls, text: str) -> "Content":
        """Create content with the default (normal text) font."""
        return cls.with_font(text, DEFAULT_FONT)

    @classmethod
    def with_font(cls, text: str, font: Font) -> "Content":
        return cls(text=text, size=font.size, bold=font.bold)

    @property
    def font(self) -> Font:
        return Font(size=self.size, bold=self.bold)

    def to_bold(self):
        self.bold = True

    def change_size(self, size: int):
        self.size = size

    def add_child(self, child: Union[str, "Content"]):
        """Append a nested node, creating the children list on first use."""
        if isinstance(child, str):
            child = Content.new(child)
        if self.children is None:
            self.children = []
        self.children.append(child)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "size": self.size,
            "bold": self.bold,
            "children": None if self.children is None else [c.to_dict() for c in self.children],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Content":
        children = data.get("children")
        return cls(
            text=data["text"],
            size=int(data["size"]),
            bold=bool(data["bold"]),
            children=None if children is None else [cls.from_dict(c) for c in children],
        )


@dataclass
class Slide:
    """
    A render-ready page.

    ``type`` names the slide layout the renderer should use.
    """
    TITLE_SLIDE = "title_slide"
    TITLE_AND_CONTENT = "title_and_content"
    TITLE_ONLY = "title_only"
    BLANK = "blank"

    type: str
    title: Optional[str] = None
    contents: List[Content] = field(default_factory=list)

    @classmethod
    def title_slide(cls, title: str) -> "Slide":
        return cls(type=cls.TITLE_SLIDE, title=title)

    @classmethod
    def title_and_content(cls, title: str) -> "Slide":
        return cls(type=cls.TITLE_AND_CONTENT, title=title)

    @classmethod
    def title_only(cls, title: str) -> "Slide":
        return cls(type=cls.TITLE_ONLY, title=title)

    @classmethod
    def blank(cls) -> "Slide":
        return cls(type=cls.BLANK)

    def add_content(self, content: Content):
        self.contents.append(content)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "contents": [c.to_dict() for c in self.contents],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Slide":
        return cls(
            type=data["type"],
            title=data.get("title"),
            contents=[Content.from_dict(c) for c in data.get("contents", [])],
        )


@dataclass
class Deck:
    """The document handed to a renderer: a file name and its slides."""
    filename: str
    slides: List[Slide] = field(default_factory=list)

    def add_slide(self, slide: Slide):
        self.slides.append(slide)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "slides": [s.to_dict() for s in self.slides],
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, **kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Deck":
        return cls(
            filename=data["filename"],
            slides=[Slide.from_dict(s) for s in data.get("slides", [])],
        )

    @classmethod
    def from_json(cls, payload: str) -> "Deck":
        return cls.from_dict(json.loads(payload))
