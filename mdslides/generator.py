#!/usr/bin/env python3
"""
Main slide generator module that ties together parser, layout engine and renderers.
"""

import logging
from pathlib import Path
from typing import Optional

import httpx

from .config import FontConfig
from .layout_engine import LayoutEngine
from .markdown_parser import MarkdownParser
from .models import Deck
from .paths import ensure_pptx_suffix, resolve_output_path
from .pptx_renderer import PPTXRenderer
from .renderer_client import RendererClient
from .theme_loader import get_theme

logger = logging.getLogger(__name__)


class SlideGenerator:
    """
    Main class for generating slide decks from markdown.
    """

    def __init__(
        self,
        *,
        config: Optional[FontConfig] = None,
        theme: Optional[str] = None,
        renderer_url: Optional[str] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
        debug: bool = False,
    ):
        """Create a new :class:`SlideGenerator`.

        Parameters
        ----------
        config
            Font configuration. Takes precedence over *theme*.
        theme
            Name of a bundled font theme (``default`` / ``compact`` / …).
        renderer_url
            Endpoint of the remote renderer service used by :meth:`publish`.
        timeout, transport
            Passed to :class:`RendererClient`.
        debug
            Enable verbose logging.
        """
        self.debug = debug
        if config is None:
            config = get_theme(theme) if theme else FontConfig()
        self.config = config

        self.parser = MarkdownParser()
        self.layout_engine = LayoutEngine(config=config, debug=debug)
        self.pptx_renderer = PPTXRenderer(debug=debug)
        self.renderer_client = (
            RendererClient(renderer_url, timeout=timeout, transport=transport) if renderer_url else None
        )

    def build_deck(self, markdown_text: str, filename: str = "presentation.pptx") -> Deck:
        """
        Parse markdown text and project it into a deck.

        Args:
            markdown_text: The markdown content to convert
            filename: Name of the file the renderer should produce

        Returns:
            Deck: the render-ready document
        """
        markdown = self.parser.parse(markdown_text)
        return self.layout_engine.build_deck(markdown, filename)

    def generate(self, markdown_text: str, output_path: str = "output/presentation.pptx") -> str:
        """
        Generate a PowerPoint presentation locally.

        Args:
            markdown_text: The markdown content to convert
            output_path: Path where the PPTX file should be saved

        Returns:
            str: Path to the generated PPTX file
        """
        path = resolve_output_path(output_path)
        deck = self.build_deck(markdown_text, path.name)
        self.pptx_renderer.render(deck, str(path))

        if self.debug:
            logger.info(f"Generated presentation saved to: {path}")
            logger.info(f"Total slides: {len(deck.slides)}")

        return str(path)

    def publish(self, markdown_text: str, filename: str = "presentation.pptx") -> httpx.Response:
        """
        Send the deck built from *markdown_text* to the renderer service.

        Raises:
            ValueError: if no renderer URL was configured
            RenderError: if the service answers with a non-success status
        """
        if self.renderer_client is None:
            raise ValueError("No renderer URL configured")
        deck = self.build_deck(markdown_text, filename)
        return self.renderer_client.render(deck)


def main(argv=None):
    """Command-line entry point for the slide generator."""
    import argparse

    from .config import FontConfigBuilder
    from .renderer_client import RenderError

    def _build_parser() -> argparse.ArgumentParser:
        p = argparse.ArgumentParser(prog="mdslides", description="Convert Markdown to a PPTX slide deck.")
        p.add_argument("markdown", type=Path, help="Markdown file to convert")
        p.add_argument("--output", "-o", type=Path, default=Path("output/presentation.pptx"), help="Destination PPTX path")
        p.add_argument("--theme", "-t", default="default", help="Font theme to use (default, compact, …)")
        p.add_argument("--per-level", type=int, help="Point size removed per list nesting level")
        p.add_argument("--renderer-url", help="Send the deck to this renderer service instead of rendering locally")
        p.add_argument("--json", action="store_true", help="Print the deck as JSON instead of rendering it")
        p.add_argument("--debug", action="store_true", help="Enable verbose logging")
        return p

    args = _build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format="%(levelname)s  %(message)s")

    md_path: Path = args.markdown
    if not md_path.exists():
        logger.error(f"Markdown file '{md_path}' not found")
        return 1

    try:
        config = get_theme(args.theme)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1
    if args.per_level is not None:
        config = FontConfigBuilder(config).per_level(args.per_level).build()

    markdown_text = md_path.read_text(encoding="utf-8")
    generator = SlideGenerator(config=config, renderer_url=args.renderer_url, debug=args.debug)

    if args.json:
        deck = generator.build_deck(markdown_text, ensure_pptx_suffix(args.output).name)
        print(deck.to_json(indent=2))
        return 0

    if args.renderer_url:
        try:
            generator.publish(markdown_text, ensure_pptx_suffix(args.output).name)
        except (RenderError, httpx.HTTPError) as e:
            logger.error(str(e))
            return 1
        logger.info("✅ Deck sent to %s", args.renderer_url)
        return 0

    output_path = generator.generate(markdown_text, args.output)
    logger.info("✅ Presentation written to %s", output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
