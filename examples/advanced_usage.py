"""
Advanced usage examples for remarkdeck.

Shows how to:
- Customize the runtime options
- Export PowerPoint with one page per fragment
- Step through a deck programmatically
"""

from pathlib import Path
from remarkdeck import DeckBuilder, SlideSequencer, load_deck
from remarkdeck.config import load_settings


def example_with_options():
    """Dark highlight theme and a widescreen ratio."""
    print("\n[Example 1] Custom runtime options")

    settings = load_settings()
    settings.remark.highlight_style = "monokai"
    settings.remark.ratio = "16:9"

    builder = DeckBuilder(formats=["html"], settings=settings)
    result = builder.build(
        source_path=Path("examples/scala_conventions.md"),
        output_dir=Path("output/scala_conventions_dark"),
    )

    print(f"✓ HTML: {result['html']}")


def example_pptx_export():
    """Export every incremental reveal as its own PowerPoint page."""
    print("\n[Example 2] PowerPoint export")

    builder = DeckBuilder(formats=["pptx"], expand_fragments=True)
    result = builder.build(
        source_path=Path("examples/scala_conventions.md"),
        output_dir=Path("output/scala_conventions_pptx"),
    )

    print(f"✓ PPTX: {result['pptx']}")


def example_sequencer():
    """Walk the deck the way a presenter would."""
    print("\n[Example 3] Stepping through the deck")

    sequencer = SlideSequencer(load_deck(Path("examples/scala_conventions.md")))
    while True:
        cursor = sequencer.cursor
        slide = sequencer.current()
        print(f"  → Slide {cursor.slide_number}/{cursor.slide_count}: {slide.title} "
              f"({cursor.fragment_number}/{cursor.fragment_count})")
        if not sequencer.advance():
            break


if __name__ == "__main__":
    example_with_options()
    example_pptx_export()
    example_sequencer()
