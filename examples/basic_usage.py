"""
Basic usage example for remarkdeck.

This example shows how to build the slideshow page for a markdown deck
using the Python API.
"""

from pathlib import Path
from remarkdeck import DeckBuilder


def main():
    # Initialize pipeline with default settings (HTML only)
    builder = DeckBuilder(
        formats=["html", "json"],  # Slideshow page plus a deck JSON dump
    )

    # Build the deck
    source_path = Path("examples/scala_conventions.md")
    output_dir = Path("output/scala_conventions")

    result = builder.build(source_path=source_path, output_dir=output_dir)

    print("\n✓ Build complete!")
    print(f"  HTML: {result['html']}")
    print(f"  JSON: {result['json']}")


if __name__ == "__main__":
    main()
