"""
Tests for the HTML, PPTX and JSON renderers.
"""

import json

import pytest
from pptx import Presentation

from remarkdeck.config import DeckSettings
from remarkdeck.markup import load_deck, parse_deck
from remarkdeck.models import RemarkOptions
from remarkdeck.renderers import (
    BaseRenderer,
    HTMLRenderer,
    JSONRenderer,
    PPTXRenderer,
    get_renderer,
)
from remarkdeck.renderers.pptx_renderer import strip_markdown


def test_html_page_structure(tmp_path, sample_deck):
    """Test the page links the stylesheet, the runtime and its options."""
    renderer = HTMLRenderer(
        options=RemarkOptions(highlight_style="monokai"),
        script_url="js/remark.min.js",
        stylesheet="css/conventions.css",
    )
    output = renderer.render(sample_deck, tmp_path / "deck.html")
    html = output.read_text(encoding="utf-8")

    assert '<textarea id="source">' in html
    assert '<link rel="stylesheet" href="css/conventions.css">' in html
    assert '<script src="js/remark.min.js"></script>' in html
    assert "remark.create(" in html
    assert '"highlightStyle": "monokai"' in html
    assert "<title>Scala Conventions</title>" in html
    assert "\n---\n" in html
    assert "\n--\n" in html


def test_html_escapes_source():
    """Test deck text cannot close the textarea early."""
    deck = parse_deck('# Escaping\n\n```scala\nval html = "</textarea><b>"\n```\n')
    html = HTMLRenderer().render_string(deck)
    assert "</textarea><b>" not in html
    assert "&lt;/textarea&gt;&lt;b&gt;" in html


def test_pptx_one_page_per_slide(tmp_path, sample_deck):
    """Test the PowerPoint export."""
    output = PPTXRenderer().render(sample_deck, tmp_path / "deck.pptx")
    prs = Presentation(str(output))
    assert len(prs.slides) == 3

    texts = [shape.text_frame.text for shape in prs.slides[1].shapes if shape.has_text_frame]
    assert "Prefer val" in texts
    assert any("val total = items.map(_.price).sum" in text for text in texts)

    notes = prs.slides[1].notes_slide.notes_text_frame.text
    assert notes == "Mention immutability."


def test_pptx_expand_fragments(tmp_path, sample_deck):
    """Test one page per fragment step."""
    output = PPTXRenderer(ratio="16:9", expand_fragments=True).render(
        sample_deck, tmp_path / "deck.pptx"
    )
    prs = Presentation(str(output))
    assert len(prs.slides) == 4

    first_step = " ".join(
        shape.text_frame.text for shape in prs.slides[1].shapes if shape.has_text_frame
    )
    assert "Mutable locals hide intent." in first_step
    assert "items.map" not in first_step


def test_pptx_rejects_unknown_ratio():
    with pytest.raises(ValueError):
        PPTXRenderer(ratio="21:9")


def test_strip_markdown():
    assert strip_markdown("Use **`Option`** not _null_") == "Use Option not null"
    assert strip_markdown("See [docs](https://docs.scala-lang.org)") == "See docs"
    assert strip_markdown(".red[Avoid] return") == "Avoid return"


def test_json_renderer(tmp_path, sample_deck):
    """Test the JSON dump loads back into the same deck."""
    output = JSONRenderer().render(sample_deck, tmp_path / "deck.deck.json")
    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data["slides"]) == 3
    assert load_deck(output) == sample_deck


def test_get_renderer():
    """Test the renderer factory."""
    settings = DeckSettings(stylesheet="theme.css")
    html = get_renderer("html", settings)
    assert isinstance(html, HTMLRenderer)
    assert html.stylesheet == "theme.css"
    assert get_renderer("pptx", expand_fragments=True).expand_fragments
    assert get_renderer("json").extension == "deck.json"

    with pytest.raises(ValueError):
        get_renderer("pdf")


def test_base_renderer_needs_only_render(tmp_path, sample_deck):
    """Test a renderer subclass takes no base-class configuration."""

    class TitleRenderer(BaseRenderer):
        extension = "txt"

        def render(self, deck, output_path):
            output_path.write_text("\n".join(slide.title or "" for slide in deck), encoding="utf-8")
            return output_path

    renderer = TitleRenderer()
    output_path = renderer.output_path_for(tmp_path, "talk.v2")
    assert output_path == tmp_path / "talk.v2.txt"
    assert renderer.render(sample_deck, output_path).read_text(encoding="utf-8").startswith("Scala")

    with pytest.raises(TypeError):
        BaseRenderer()
