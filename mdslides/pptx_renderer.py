#!/usr/bin/env python3
"""
PowerPoint renderer for writing a slide deck to a .pptx file.
"""
import logging
from typing import Iterator, List, Tuple

from pptx import Presentation
from pptx.util import Inches, Pt

from .models import Content, Deck, Slide

logger = logging.getLogger(__name__)

# Layout indices in python-pptx's default template
LAYOUTS = {
    Slide.TITLE_SLIDE: 0,
    Slide.TITLE_AND_CONTENT: 1,
    Slide.TITLE_ONLY: 5,
    Slide.BLANK: 6,
}

# PowerPoint supports paragraph levels 0-8
MAX_PARAGRAPH_LEVEL = 8


def iter_paragraphs(contents: List[Content], level: int = 0) -> Iterator[Tuple[Content, int]]:
    """Flatten nested content depth-first into (content, level) pairs."""
    for content in contents:
        yield content, level
        if content.children:
            yield from iter_paragraphs(content.children, level + 1)


class PPTXRenderer:
    """
    Renderer for converting a deck into a PowerPoint presentation.
    """

    def __init__(self, debug: bool = False):
        """Initialize the PowerPoint renderer."""
        self.debug = debug

    def render(self, deck: Deck, output_path: str) -> str:
        """
        Render a deck to a PowerPoint presentation.

        Args:
            deck: The deck to render
            output_path: Path where the PPTX file should be saved

        Returns:
            str: the output path

        Raises:
            ValueError: for a slide type with no known layout
        """
        prs = Presentation()

        for slide_idx, slide_model in enumerate(deck.slides):
            if slide_model.type not in LAYOUTS:
                raise ValueError(f"Unknown slide type '{slide_model.type}' (slide {slide_idx + 1})")
            slide = prs.slides.add_slide(prs.slide_layouts[LAYOUTS[slide_model.type]])

            if slide_model.title is not None and slide.shapes.title is not None:
                slide.shapes.title.text = slide_model.title

            if slide_model.contents:
                self._add_contents(prs, slide, slide_model)

            if self.debug:
                logger.info(f"Slide {slide_idx + 1}: {slide_model.type}, {len(slide_model.contents)} contents")

        prs.save(output_path)
        return str(output_path)

    def _body_frame(self, prs, slide):
        """Text frame of the layout's body placeholder, or of a new text box."""
        for placeholder in slide.placeholders:
            if placeholder.placeholder_format.idx != 0:
                return placeholder.text_frame

        top = Inches(1.5) if slide.shapes.title is not None else Inches(0.5)
        left = Inches(0.5)
        textbox = slide.shapes.add_textbox(
            left, top, prs.slide_width - 2 * left, prs.slide_height - top - left
        )
        textbox.text_frame.word_wrap = True
        return textbox.text_frame

    def _add_contents(self, prs, slide, slide_model: Slide):
        text_frame = self._body_frame(prs, slide)
        text_frame.clear()

        for i, (content, level) in enumerate(iter_paragraphs(slide_model.contents)):
            para = text_frame.paragraphs[0] if i == 0 else text_frame.add_paragraph()
            para.level = min(level, MAX_PARAGRAPH_LEVEL)

            run = para.add_run()
            run.text = content.text
            run.font.bold = content.bold
            if content.size > 0:
                run.font.size = Pt(content.size)
            else:
                logger.warning(f"⚠️ Non-positive font size {content.size} for '{content.text}', using layout default")
