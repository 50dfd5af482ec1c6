"""
Delimited text format for decks.

Reads and writes the markdown source a remark page embeds:
``---`` between slides, ``--`` between fragments, ``???`` before notes.
"""

from remarkdeck.markup.parser import DeckFormatError, load_deck, parse_deck, parse_slide
from remarkdeck.markup.writer import write_block, write_deck, write_slide

__all__ = [
    "DeckFormatError",
    "load_deck",
    "parse_deck",
    "parse_slide",
    "write_block",
    "write_deck",
    "write_slide",
]
