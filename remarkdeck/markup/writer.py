"""
Serialize the content model back to delimited deck source.

The output is canonical: ``parse_deck(write_deck(deck)) == deck``.
"""

from typing import List, Union

from remarkdeck.models import (
    FRAGMENT_SEPARATOR,
    NOTES_SEPARATOR,
    SLIDE_SEPARATOR,
    CodeSnippet,
    Deck,
    FragmentMarker,
    Prose,
    Slide,
)


def write_block(block: Union[Prose, CodeSnippet, FragmentMarker]) -> str:
    """Render a single content block."""
    if isinstance(block, FragmentMarker):
        return FRAGMENT_SEPARATOR
    if isinstance(block, CodeSnippet):
        fence = f"```{block.language or ''}"
        if not block.text:
            return f"{fence}\n```"
        return f"{fence}\n{block.text}\n```"
    return block.text


def write_slide(slide: Slide) -> str:
    """Render one slide: properties, title, body blocks, then notes."""
    head: List[str] = [f"{key}: {value}" for key, value in slide.properties.items()]
    if slide.title is not None:
        head.append(f"{'#' * slide.title_level} {slide.title}")

    sections: List[str] = []
    if head:
        sections.append("\n".join(head))
    sections.extend(write_block(block) for block in slide.body)

    text = "\n\n".join(sections)
    if slide.notes:
        text = f"{text}\n\n{NOTES_SEPARATOR}\n{slide.notes}" if text else f"{NOTES_SEPARATOR}\n{slide.notes}"
    return text


def write_deck(deck: Deck) -> str:
    """
    Render a deck as the text block the slideshow runtime consumes.

    Slides are joined by a line holding exactly ``---``.
    """
    separator = f"\n\n{SLIDE_SEPARATOR}\n\n"
    return separator.join(write_slide(slide) for slide in deck.slides) + "\n"
