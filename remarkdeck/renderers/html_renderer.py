"""
Render a deck as a remark slideshow page.

The page embeds the deck source in a ``<textarea>`` and hands it to the
externally supplied remark runtime together with its options map.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Template

from remarkdeck.config import DEFAULT_SCRIPT_URL, DEFAULT_STYLESHEET
from remarkdeck.markup import write_deck
from remarkdeck.models import Deck, RemarkOptions
from remarkdeck.renderers.base import BaseRenderer


class HTMLRenderer(BaseRenderer):
    """
    Generate the single-file HTML deck.

    Features:
    - Deck source serialized with the ``---`` / ``--`` / ``???`` delimiters
    - Stylesheet linked by a relative path
    - Runtime script referenced by URL, configured via ``remark.create``
    """

    extension = "html"

    HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <link rel="stylesheet" href="{{ stylesheet }}">
</head>
<body>
    <textarea id="source">
{{ source }}</textarea>
    <script src="{{ script_url }}"></script>
    <script>
        var slideshow = remark.create({{ options|tojson }});
    </script>
</body>
</html>
"""

    def __init__(
        self,
        options: Optional[RemarkOptions] = None,
        script_url: str = DEFAULT_SCRIPT_URL,
        stylesheet: str = DEFAULT_STYLESHEET,
    ):
        """
        Initialize renderer.

        Args:
            options: Options map for the runtime (highlight style, ratio, ...)
            script_url: Location of the remark runtime script
            stylesheet: Stylesheet path, relative to the generated page
        """
        self.options = options or RemarkOptions()
        self.script_url = script_url
        self.stylesheet = stylesheet

    def render_string(self, deck: Deck) -> str:
        template = Template(self.HTML_TEMPLATE, autoescape=True)
        return template.render(
            title=deck.title or "Slides",
            stylesheet=self.stylesheet,
            script_url=self.script_url,
            source=write_deck(deck),
            options=self.options.to_runtime(),
        )

    def render(self, deck: Deck, output_path: Path) -> Path:
        print(f"[HTML] Rendering {len(deck)} slides (highlight style: {self.options.highlight_style})")
        html_content = self.render_string(deck)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(html_content)

        print(f"[HTML] Saved slideshow to {output_path}")
        return output_path
