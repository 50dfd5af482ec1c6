"""
Base renderer interface.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from remarkdeck.models import Deck


class BaseRenderer(ABC):
    """Abstract base class for everything that renders a Deck."""

    extension: str = ""

    @abstractmethod
    def render(self, deck: Deck, output_path: Path) -> Path:
        """
        Render a deck to a file.

        Args:
            deck: Deck to render
            output_path: Path of the file to write

        Returns:
            Path to the generated file
        """
        pass

    def output_path_for(self, output_dir: Path, stem: str) -> Path:
        return Path(output_dir) / f"{stem}.{self.extension}"
