"""
Renderers: everything that turns a Deck into a file.

- HTML: the remark slideshow page
- PPTX: editable PowerPoint export via python-pptx
- JSON: dump of the content model
"""

from typing import Optional

from remarkdeck.config import DeckSettings
from remarkdeck.renderers.base import BaseRenderer
from remarkdeck.renderers.html_renderer import HTMLRenderer
from remarkdeck.renderers.json_renderer import JSONRenderer
from remarkdeck.renderers.pptx_renderer import PPTXRenderer

RENDERER_NAMES = ("html", "pptx", "json")


def get_renderer(
    name: str,
    settings: Optional[DeckSettings] = None,
    expand_fragments: bool = False,
) -> BaseRenderer:
    """Build the renderer for an output format."""
    settings = settings or DeckSettings()

    if name == "html":
        return HTMLRenderer(
            options=settings.remark,
            script_url=settings.script_url,
            stylesheet=settings.stylesheet,
        )
    elif name == "pptx":
        return PPTXRenderer(ratio=settings.remark.ratio, expand_fragments=expand_fragments)
    elif name == "json":
        return JSONRenderer()
    else:
        raise ValueError(f"Unknown output format: {name}")


__all__ = [
    "BaseRenderer",
    "HTMLRenderer",
    "JSONRenderer",
    "PPTXRenderer",
    "RENDERER_NAMES",
    "get_renderer",
]
