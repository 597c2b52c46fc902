#!/usr/bin/env python3
"""
Layout engine projecting parsed markdown pages into render-ready slides.

Slide layout rules for a page:

* no components                      -> ``blank``
* a single level-1 heading           -> ``title_slide``
* any other single component         -> ``blank`` carrying that component
* first component is a heading 1-3   -> ``title_and_content`` titled by it
* otherwise                          -> ``blank`` carrying every component
"""
import logging
from typing import List, Optional

from .config import FontConfig
from .markdown_parser import Markdown
from .models import (
    BulletList,
    Component,
    Content,
    Deck,
    Heading,
    ItemList,
    Page,
    Slide,
    SplitLine,
    Text,
)

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Converts components, pages and whole documents into slide content.
    """

    def __init__(self, config: Optional[FontConfig] = None, debug: bool = False):
        self.config = config if config is not None else FontConfig()
        self.debug = debug

    def contents_from_component(self, component: Component) -> List[Content]:
        """
        Convert one component into content nodes.

        Text gives a single node, a list gives one node per root item with
        nested items as children, a split line gives nothing.

        Raises:
            TypeError: for a component kind this engine does not know
        """
        if isinstance(component, Text):
            leaf = component.value
            return [Content.with_font(leaf.value, self.config.text_font(leaf))]
        if isinstance(component, BulletList):
            return self._contents_from_items(component.items, depth=0)
        if isinstance(component, SplitLine):
            return []
        raise TypeError(f"Unsupported component: {component!r}")

    def _contents_from_items(self, items: ItemList, depth: int) -> List[Content]:
        contents = []
        for item in items:
            content = Content.with_font(item.text, self.config.list_font(item.value, depth))
            if item.children:
                content.children = self._contents_from_items(item.children, depth + 1)
            contents.append(content)
        return contents

    def slide_from_page(self, page: Page) -> Slide:
        """Project one page into a slide."""
        components = list(page)

        if not components:
            return Slide.blank()

        first, rest = components[0], components[1:]

        if not rest:
            if isinstance(first, Text) and isinstance(first.value, Heading) and first.value.level == 1:
                return Slide.title_slide(first.value.content)
            slide = Slide.blank()
            slide.contents.extend(self.contents_from_component(first))
            return slide

        if isinstance(first, Text) and isinstance(first.value, Heading):
            slide = Slide.title_and_content(first.value.content)
        else:
            slide = Slide.blank()
            slide.contents.extend(self.contents_from_component(first))

        for component in rest:
            slide.contents.extend(self.contents_from_component(component))
        return slide

    def slides_from_markdown(self, markdown: Markdown) -> List[Slide]:
        slides = [self.slide_from_page(page) for page in markdown.pages()]
        if self.debug:
            for i, slide in enumerate(slides):
                logger.info(f"  Slide {i+1}: {slide.type} ({len(slide.contents)} contents)")
        return slides

    def build_deck(self, markdown: Markdown, filename: str) -> Deck:
        """Build the deck sent to a renderer."""
        deck = Deck(filename=filename, slides=self.slides_from_markdown(markdown))
        logger.debug(f"Built deck '{filename}' with {len(deck.slides)} slides")
        return deck
