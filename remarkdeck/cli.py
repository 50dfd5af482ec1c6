"""
Command-line interface for remarkdeck.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from remarkdeck import __version__
from remarkdeck.config import load_settings
from remarkdeck.markup import load_deck
from remarkdeck.pipeline import DeckBuilder
from remarkdeck.presenter import TerminalPresenter
from remarkdeck.renderers import RENDERER_NAMES
from remarkdeck.sequencer import SlideSequencer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="remarkdeck",
        description="remarkdeck: build and present remark slide decks from markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build the HTML slideshow
  remarkdeck slides.md

  # Build HTML, PowerPoint and JSON outputs
  remarkdeck slides.md --format html --format pptx --format json

  # One PowerPoint page per incremental reveal
  remarkdeck slides.md --format pptx --expand-fragments

  # Pick a highlight theme and a widescreen ratio
  remarkdeck slides.md --highlight-style monokai --ratio 16:9

  # Step through the deck in the terminal
  remarkdeck slides.md --present

Environment Variables:
  REMARK_SCRIPT_URL       URL of the remark runtime script
  REMARK_STYLESHEET       Stylesheet linked by the page
  REMARK_HIGHLIGHT_STYLE  Default highlight theme
  REMARK_RATIO            Default aspect ratio
  OUTPUT_DIR              Default output directory
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Deck source (markdown) or a saved .deck.json",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"remarkdeck {__version__}",
    )

    parser.add_argument(
        "--format",
        "-f",
        dest="formats",
        action="append",
        choices=RENDERER_NAMES,
        help="Output format, repeatable (default: html)",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output directory (default: ./output/<deck name>)",
    )

    parser.add_argument(
        "--highlight-style",
        help="Syntax-highlighting theme passed to the runtime",
    )

    parser.add_argument(
        "--ratio",
        choices=["4:3", "16:9", "16:10"],
        help="Slide aspect ratio",
    )

    parser.add_argument(
        "--expand-fragments",
        action="store_true",
        help="Export one PowerPoint page per fragment step",
    )

    parser.add_argument(
        "--present",
        action="store_true",
        help="Navigate the deck in the terminal instead of building",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print tracebacks on errors",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate input
    if not args.input:
        parser.print_help()
        return 1

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        settings = load_settings()
        if args.highlight_style:
            settings.remark.highlight_style = args.highlight_style
        if args.ratio:
            settings.remark.ratio = args.ratio

        if args.present:
            presenter = TerminalPresenter(SlideSequencer(load_deck(args.input)))
            presenter.run()
        else:
            builder = DeckBuilder(
                formats=args.formats or ["html"],
                settings=settings,
                expand_fragments=args.expand_fragments,
            )
            builder.build(source_path=args.input, output_dir=args.output)

        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
