"""
Markdown Slides

Converts a small markdown dialect into slide decks: headings, nested bullet
lists and horizontal rules separating slides.
"""

from .config import FontConfig, FontConfigBuilder
from .generator import SlideGenerator
from .layout_engine import LayoutEngine
from .markdown_parser import Markdown, MarkdownParser, classify_text, parse, parse_list, split_pages
from .models import (
    BulletList,
    Content,
    Deck,
    Font,
    Heading,
    Item,
    ItemList,
    Normal,
    Page,
    Slide,
    SplitLine,
    Text,
)
from .pptx_renderer import PPTXRenderer
from .renderer_client import RenderError, RendererClient

__version__ = "0.1.0"

__all__ = [
    'SlideGenerator', 'LayoutEngine', 'PPTXRenderer', 'RendererClient', 'RenderError',
    'Markdown', 'MarkdownParser', 'classify_text', 'parse', 'parse_list', 'split_pages',
    'FontConfig', 'FontConfigBuilder',
    'BulletList', 'Content', 'Deck', 'Font', 'Heading', 'Item', 'ItemList', 'Normal',
    'Page', 'Slide', 'SplitLine', 'Text',
]
