"""
Settings for building and serving decks.

Values come from the environment (optionally a ``.env`` file) and can be
overridden by CLI flags.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from remarkdeck.models import RemarkOptions

DEFAULT_SCRIPT_URL = "https://remarkjs.com/downloads/remark-latest.min.js"
DEFAULT_STYLESHEET = "style.css"


class DeckSettings(BaseModel):
    """Settings shared by the pipeline, the CLI and the server."""

    script_url: str = Field(default=DEFAULT_SCRIPT_URL, description="Slideshow runtime script")
    stylesheet: str = Field(default=DEFAULT_STYLESHEET, description="Stylesheet path, relative to the page")
    output_dir: Optional[Path] = Field(default=None, description="Default output directory")
    deck_path: Optional[Path] = Field(default=None, description="Deck served by the presenter server")
    remark: RemarkOptions = Field(default_factory=RemarkOptions)


def load_settings(env_file: Optional[Path] = None) -> DeckSettings:
    """
    Build settings from environment variables.

    Environment Variables:
        REMARK_SCRIPT_URL       URL of the remark runtime
        REMARK_STYLESHEET       Stylesheet linked by the page
        REMARK_HIGHLIGHT_STYLE  Syntax-highlighting theme
        REMARK_RATIO            Slide aspect ratio (4:3, 16:9, 16:10)
        OUTPUT_DIR              Default output directory
        DECK_PATH               Deck served by the presenter server
    """
    load_dotenv(env_file)

    remark = {}
    if os.getenv("REMARK_HIGHLIGHT_STYLE"):
        remark["highlight_style"] = os.getenv("REMARK_HIGHLIGHT_STYLE")
    if os.getenv("REMARK_RATIO"):
        remark["ratio"] = os.getenv("REMARK_RATIO")

    return DeckSettings(
        script_url=os.getenv("REMARK_SCRIPT_URL", DEFAULT_SCRIPT_URL),
        stylesheet=os.getenv("REMARK_STYLESHEET", DEFAULT_STYLESHEET),
        output_dir=os.getenv("OUTPUT_DIR") or None,
        deck_path=os.getenv("DECK_PATH") or None,
        remark=RemarkOptions(**remark),
    )
