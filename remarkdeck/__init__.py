"""
remarkdeck: markdown slide decks for the remark slideshow runtime.

Parses delimiter-separated deck source into an immutable content model,
steps through it with a two-level slide/fragment cursor and renders it as
a remark HTML page, a PowerPoint export or JSON.
"""

__version__ = "0.1.0"

from remarkdeck.models import Deck, Slide, Prose, CodeSnippet, FragmentMarker, RemarkOptions
from remarkdeck.markup import DeckFormatError, parse_deck, write_deck, load_deck
from remarkdeck.sequencer import SlideSequencer, OutOfRangeError, Cursor
from remarkdeck.pipeline import DeckBuilder

__all__ = [
    "Deck",
    "Slide",
    "Prose",
    "CodeSnippet",
    "FragmentMarker",
    "RemarkOptions",
    "DeckFormatError",
    "parse_deck",
    "write_deck",
    "load_deck",
    "SlideSequencer",
    "OutOfRangeError",
    "Cursor",
    "DeckBuilder",
]
