"""Test projecting pages into slides."""

import pytest
from mdslides.config import FontConfig
from mdslides.layout_engine import LayoutEngine
from mdslides.markdown_parser import Markdown
from mdslides.models import (
    COMPONENT_TYPES,
    BulletList,
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

SAMPLE_COMPONENTS = [
    Text(Normal("text")),
    BulletList(ItemList([Item(Normal("item"))])),
    SplitLine(),
]


@pytest.fixture
def engine():
    return LayoutEngine()


def test_empty_page_is_blank(engine):
    slide = engine.slide_from_page(Page([]))

    assert slide.type == Slide.BLANK
    assert slide.title is None
    assert slide.contents == []


def test_single_heading1_is_title_slide(engine):
    slide = engine.slide_from_page(Page([Text(Heading(1, "Rust is very good language!!"))]))

    assert slide.type == Slide.TITLE_SLIDE
    assert slide.title == "Rust is very good language!!"
    assert slide.contents == []


@pytest.mark.parametrize("leaf", [Heading(2, "Sub"), Heading(3, "Subsub"), Normal("Just text")])
def test_single_other_text_is_blank_with_content(engine, leaf):
    slide = engine.slide_from_page(Page([Text(leaf)]))

    assert slide.type == Slide.BLANK
    assert slide.title is None
    assert [c.text for c in slide.contents] == [leaf.value]
    assert slide.contents[0].font == engine.config.text_font(leaf)


def test_single_list_is_blank_with_content(engine):
    page = Page([BulletList(ItemList([Item(Normal("a")), Item(Normal("b"))]))])

    slide = engine.slide_from_page(page)

    assert slide.type == Slide.BLANK
    assert [c.text for c in slide.contents] == ["a", "b"]


def test_single_split_line_is_contentless_blank(engine):
    slide = engine.slide_from_page(Page([SplitLine()]))

    assert slide.type == Slide.BLANK
    assert slide.contents == []


@pytest.mark.parametrize("level", [1, 2, 3])
def test_leading_heading_titles_the_slide(engine, level):
    page = Page([Text(Heading(level, "Title")), Text(Heading(2, "Body"))])

    slide = engine.slide_from_page(page)

    assert slide.type == Slide.TITLE_AND_CONTENT
    assert slide.title == "Title"
    assert [c.text for c in slide.contents] == ["Body"]


def test_leading_non_heading_gives_blank_slide_with_all_content(engine):
    text = Text(Normal("Rust is very good language!!"))
    bullet_list = BulletList(ItemList([
        Item(Heading(1, "So fast"), ItemList([Item(Heading(1, "Because of no GC"))])),
        Item(Heading(1, "Nice type system")),
    ]))

    slide = engine.slide_from_page(Page([text, bullet_list]))

    assert slide.type == Slide.BLANK
    assert slide.title is None
    assert [c.text for c in slide.contents] == [
        "Rust is very good language!!",
        "So fast",
        "Nice type system",
    ]
    assert slide.contents[1].children[0].text == "Because of no GC"
    assert slide.contents[2].children is None


def test_config_applies_to_heading_content():
    config = FontConfig.builder().h1(Font(size=100, bold=False)).build()
    engine = LayoutEngine(config=config)
    page = Page([Text(Heading(1, "Dummy")), Text(Heading(1, "Rust is very good language!!"))])

    slide = engine.slide_from_page(page)

    assert slide.contents[0].size == 100
    assert not slide.contents[0].bold


def test_text_fonts_follow_heading_level():
    config = (
        FontConfig.builder()
        .h1(Font(size=32, bold=True))
        .h2(Font(size=100, bold=False))
        .h3(Font(size=110, bold=True))
        .normal(Font(size=180, bold=True))
        .build()
    )
    engine = LayoutEngine(config=config)

    for leaf, expected in [
        (Heading(1, "Title"), Font(32, True)),
        (Heading(2, "Hello World"), Font(100, False)),
        (Heading(3, "Hello World"), Font(110, True)),
        (Normal("Hello World"), Font(180, True)),
    ]:
        contents = engine.contents_from_component(Text(leaf))
        assert len(contents) == 1
        assert contents[0].font == expected
        assert contents[0].children is None


def _three_level_list():
    bottom = Item(Heading(1, "Because of no GC!!"))
    middle = Item(Normal("So fast!!"), ItemList([bottom]))
    top = Item(Normal("Rust is very good language!!"), ItemList([middle]))
    return BulletList(ItemList([top]))


def test_list_fonts_shrink_per_level():
    config = FontConfig()
    engine = LayoutEngine(config=config)

    top = engine.contents_from_component(_three_level_list())[0]
    middle = top.children[0]
    bottom = middle.children[0]

    assert top.size == config.normal.size
    assert middle.size == config.normal.size - 4
    assert bottom.size == config.h1.size - 8
    assert bottom.bold == config.h1.bold
    assert bottom.children is None


def test_per_level_decrement_is_configurable():
    config = FontConfig.builder().per_level(10).build()
    engine = LayoutEngine(config=config)

    top = engine.contents_from_component(_three_level_list())[0]

    assert top.size == config.normal.size
    assert top.children[0].size == config.normal.size - 10
    assert top.children[0].children[0].size == config.h1.size - 20
    assert top.children[0].children[0].bold == config.h1.bold


def test_list_font_sizes_are_not_clamped():
    config = FontConfig.builder().normal(Font(size=6)).per_level(5).build()
    engine = LayoutEngine(config=config)
    deep = BulletList(ItemList([
        Item(Normal("0"), ItemList([Item(Normal("1"), ItemList([Item(Normal("2"))]))]))
    ]))

    top = engine.contents_from_component(deep)[0]

    assert top.children[0].size == 1
    assert top.children[0].children[0].size == -4


def test_sample_components_cover_every_component_type():
    assert {type(c) for c in SAMPLE_COMPONENTS} == set(COMPONENT_TYPES)


@pytest.mark.parametrize("component", SAMPLE_COMPONENTS)
def test_every_component_type_is_handled(engine, component):
    engine.contents_from_component(component)
    engine.slide_from_page(Page([component]))
    engine.slide_from_page(Page([Text(Heading(1, "T")), component]))


def test_unknown_component_is_rejected(engine):
    with pytest.raises(TypeError):
        engine.contents_from_component(object())


def test_end_to_end_slides():
    markdown_text = """# Title
---
# Langs
- Rust
    - Fast
- Python
    - Popular
---
"""
    slides = LayoutEngine().slides_from_markdown(Markdown.parse(markdown_text))

    assert [s.type for s in slides] == [Slide.TITLE_SLIDE, Slide.TITLE_AND_CONTENT, Slide.BLANK]
    assert slides[0].title == "Title"
    assert slides[1].title == "Langs"
    assert [c.text for c in slides[1].contents] == ["Rust", "Python"]
    assert [c.text for c in slides[1].contents[0].children] == ["Fast"]
    assert [c.text for c in slides[1].contents[1].children] == ["Popular"]
    assert slides[2].title is None
    assert slides[2].contents == []


def test_list_heading_item_uses_heading_font():
    markdown_text = """# Title
---
# Rust is very good language!!
- # So fast
    - Because of no GC
- So safe
    - Because of borrow checker
---
"""
    config = FontConfig.builder().h1(Font(size=100, bold=False)).build()

    deck = LayoutEngine(config=config).build_deck(Markdown.parse(markdown_text), "test.pptx")

    assert deck.filename == "test.pptx"
    assert len(deck.slides) == 3
    assert deck.slides[1].contents[0].size == 100
    assert not deck.slides[1].contents[0].bold
    assert deck.slides[1].contents[0].children[0].size == 18 - 4
