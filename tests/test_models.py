"""
Tests for the deck content models.
"""

import pytest
from pydantic import ValidationError

from remarkdeck.models import (
    CodeSnippet,
    Deck,
    FragmentMarker,
    Prose,
    RemarkOptions,
    Slide,
)


def test_prose_validation():
    """Test Prose normalization and rejected text."""
    prose = Prose(text="\n\nUse `Option` instead of null.\n  \n")
    assert prose.text == "Use `Option` instead of null."
    assert prose.kind == "prose"

    with pytest.raises(ValueError):
        Prose(text="   \n")

    # Delimiter lines would split the slide
    with pytest.raises(ValueError):
        Prose(text="first\n---\nsecond")
    with pytest.raises(ValueError):
        Prose(text="first\n--\nsecond")
    with pytest.raises(ValueError):
        Prose(text="```scala")


def test_code_snippet_creation():
    """Test CodeSnippet creation."""
    code = CodeSnippet(language="scala", text="def f(x: Int) = x + 1\n---")
    assert code.language == "scala"
    assert code.text.endswith("---")

    assert CodeSnippet(language="", text="x").language is None

    with pytest.raises(ValueError):
        CodeSnippet(language="scala", text="val x = 1\n```")
    with pytest.raises(ValueError):
        CodeSnippet(language="not a tag", text="x")


def test_slide_is_immutable():
    """Test that slides cannot be mutated once authored."""
    slide = Slide(title="Immutable", body=(Prose(text="text"),))
    with pytest.raises(ValidationError):
        slide.title = "Changed"


def test_slide_coalesces_adjacent_prose():
    """Test that adjacent prose blocks merge into one."""
    slide = Slide(
        title="Merge",
        body=(Prose(text="one"), Prose(text="two"), FragmentMarker(), Prose(text="three")),
    )
    assert slide.body == (Prose(text="one\n\ntwo"), FragmentMarker(), Prose(text="three"))


def test_slide_rejects_ambiguous_leading_prose():
    """Test that untitled slides cannot start with a heading or property line."""
    with pytest.raises(ValueError):
        Slide(body=(Prose(text="# Looks like a title"),))
    with pytest.raises(ValueError):
        Slide(body=(Prose(text="class: center"),))

    # With a title, a heading in the body is ordinary prose
    slide = Slide(title="Real title", body=(Prose(text="## Subheading"),))
    assert slide.body[0].text == "## Subheading"


def test_slide_properties_validation():
    """Test remark slide properties."""
    slide = Slide(properties={"class": " center, middle ", "name": "intro"})
    assert slide.properties["class"] == "center, middle"

    with pytest.raises(ValueError):
        Slide(properties={"colour": "red"})


def test_slide_fragments():
    """Test fragment counting and incremental reveal."""
    first = Prose(text="Problem")
    second = CodeSnippet(language="scala", text="val fixed = true")
    slide = Slide(title="Fix", body=(first, FragmentMarker(), second))

    assert slide.fragment_count == 2
    assert slide.visible_blocks(0) == [first]
    assert slide.visible_blocks(1) == [first, second]
    assert slide.code_snippets == [second]

    assert Slide(title="Plain").fragment_count == 1


def test_slide_notes_normalization():
    """Test blank notes collapse to None."""
    assert Slide(notes="\n \n").notes is None
    assert Slide(notes="\nSay this\n").notes == "Say this"


def test_deck_requires_slides():
    """Test that a deck is never empty."""
    with pytest.raises(ValueError):
        Deck(slides=())


def test_deck_serialization(sample_deck):
    """Test Deck JSON serialization."""
    data = sample_deck.to_dict()
    assert "slides" in data
    assert len(data["slides"]) == 3
    assert data["slides"][1]["body"][1] == {"kind": "fragment"}

    deck2 = Deck.from_dict(data)
    assert deck2 == sample_deck
    assert deck2.title == "Scala Conventions"
    assert len(deck2) == 3
    assert Deck.number(0) == 1


def test_remark_options_aliases():
    """Test options are dumped with the runtime's option names."""
    options = RemarkOptions(highlight_style="monokai", ratio="16:9")
    runtime = options.to_runtime()
    assert runtime["highlightStyle"] == "monokai"
    assert runtime["ratio"] == "16:9"
    assert runtime["countIncrementalSlides"] is True
    assert "highlightLanguage" not in runtime


def test_line_breaks_cannot_hide_structure():
    """Test carriage returns are normalized and other line breaks rejected."""
    with pytest.raises(ValueError):
        Prose(text="before\r---\rafter")
    with pytest.raises(ValueError):
        CodeSnippet(text="val a = 1\r```\rval b = 2")
    with pytest.raises(ValueError):
        Slide(title="T\rU")
    with pytest.raises(ValueError):
        Slide(notes="say\r???\rmore")
    with pytest.raises(ValueError):
        Slide(properties={"name": "a\rb"})

    for separator in ["\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"]:
        with pytest.raises(ValueError):
            Prose(text=f"x{separator}y")
        with pytest.raises(ValueError):
            CodeSnippet(text=f"x{separator}y")
        with pytest.raises(ValueError):
            Slide(title=f"T{separator}U")

    assert Prose(text="x\r\ny").text == "x\ny"
    assert CodeSnippet(text="a\rb").text == "a\nb"
    assert Slide(title="Title\r\n").title == "Title"


def test_language_tag_is_one_word():
    with pytest.raises(ValueError):
        CodeSnippet(language="scala\n", text="val x = 1")
