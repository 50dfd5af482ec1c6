"""
Build pipeline for remarkdeck.

Coordinates loading a deck source and rendering it to every requested
output format.
"""

from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

from remarkdeck.config import DeckSettings
from remarkdeck.markup import load_deck
from remarkdeck.models import Deck
from remarkdeck.renderers import RENDERER_NAMES, BaseRenderer, get_renderer

SOURCE_SUFFIXES = (".deck.json", ".json", ".markdown", ".md")


def source_stem(source_path: Path) -> str:
    """
    Output file stem for a deck source: the file name without a known
    source suffix, e.g. ``talk.v2.md`` gives ``talk.v2``.
    """
    name = Path(source_path).name
    for suffix in SOURCE_SUFFIXES:
        if name.lower().endswith(suffix):
            name = name[: -len(suffix)]
            break
    return name.lstrip(".") or "deck"


class DeckBuilder:
    """
    End-to-end pipeline from deck source to rendered outputs.

    Pipeline stages:
    1. Loading: parse the markdown source (or a saved deck JSON)
    2. Rendering: one output file per requested format
    """

    def __init__(
        self,
        formats: Iterable[str] = ("html",),
        settings: Optional[DeckSettings] = None,
        expand_fragments: bool = False,
    ):
        """
        Initialize pipeline.

        Args:
            formats: Output formats, any of "html", "pptx", "json"
            settings: Build settings (defaults to DeckSettings())
            expand_fragments: Export one PowerPoint page per fragment step
        """
        self.formats = list(dict.fromkeys(formats))
        if not self.formats:
            raise ValueError("At least one output format is required")
        for name in self.formats:
            if name not in RENDERER_NAMES:
                raise ValueError(f"Unknown output format: {name}")

        self.settings = settings or DeckSettings()
        self.renderers: Dict[str, BaseRenderer] = {
            name: get_renderer(name, self.settings, expand_fragments=expand_fragments)
            for name in self.formats
        }

    def build(
        self,
        source_path: Path,
        output_dir: Optional[Path] = None,
        progress_callback: Optional[Callable[[float, str], None]] = None,
    ) -> Dict[str, Path]:
        """
        Build every configured output for a deck source.

        Args:
            source_path: Markdown deck source, or a ``.deck.json`` dump
            output_dir: Output directory (default: settings, then ./output/<stem>)

        Returns:
            Dictionary mapping each format to the generated file
        """
        source_path = Path(source_path)
        if not source_path.exists():
            raise FileNotFoundError(f"Deck source not found: {source_path}")

        stem = source_stem(source_path)
        if output_dir is None:
            output_dir = self.settings.output_dir or Path("output") / stem
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        print(f"\n{'='*60}")
        print(f"remarkdeck build")
        print(f"{'='*60}")
        print(f"Input: {source_path}")
        print(f"Output: {output_dir}")
        print(f"Formats: {', '.join(self.formats)}")
        print(f"{'='*60}\n")

        if progress_callback:
            progress_callback(0.0, "Loading deck")
        print(f"[Stage 1/2] Loading {source_path.name}")
        deck = load_deck(source_path)

        print(f"\n[Stage 2/2] Rendering {len(deck)} slides")
        results = self.render(deck, output_dir, stem, progress_callback)

        print(f"\n{'='*60}")
        print(f"✓ Build Complete")
        print(f"{'='*60}")
        for name, path in results.items():
            print(f"{name.upper()}: {path}")
        print(f"{'='*60}\n")

        return results

    def render(
        self,
        deck: Deck,
        output_dir: Path,
        stem: str,
        progress_callback: Optional[Callable[[float, str], None]] = None,
    ) -> Dict[str, Path]:
        """Render an already loaded deck to every configured format."""
        results: Dict[str, Path] = {}
        for i, (name, renderer) in enumerate(self.renderers.items()):
            if progress_callback:
                progress_callback(100.0 * i / len(self.renderers), f"Rendering {name}")
            output_path = renderer.output_path_for(output_dir, stem)
            results[name] = renderer.render(deck, output_path)

        if progress_callback:
            progress_callback(100.0, "Done")
        return results
