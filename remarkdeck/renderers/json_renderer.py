"""
JSON dump of the content model.
"""

import json
from pathlib import Path

from remarkdeck.models import Deck
from remarkdeck.renderers.base import BaseRenderer


class JSONRenderer(BaseRenderer):
    """Write ``Deck.to_dict()``; ``load_deck`` reads it back."""

    extension = "deck.json"

    def render(self, deck: Deck, output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(deck.to_dict(), f, indent=2, ensure_ascii=False)

        print(f"[JSON] Saved deck to {output_path}")
        return output_path
