"""
Pydantic models for API requests/responses.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from remarkdeck.sequencer import Cursor


class BlockView(BaseModel):
    """A revealed content block."""
    kind: str
    text: str
    language: Optional[str] = None


class CursorResponse(BaseModel):
    """Cursor position plus the revealed part of the current slide."""
    cursor: Cursor
    title: Optional[str] = None
    blocks: List[BlockView] = Field(default_factory=list)
    notes: Optional[str] = None
    moved: bool = True

    model_config = {
        "json_schema_extra": {
            "example": {
                "cursor": {
                    "slide_index": 1,
                    "slide_number": 2,
                    "slide_count": 3,
                    "revealed": 0,
                    "fragment_count": 2,
                    "is_first": False,
                    "is_terminal": False,
                },
                "title": "Prefer val over var",
                "blocks": [{"kind": "prose", "text": "Mutable locals hide intent."}],
                "notes": None,
                "moved": True,
            }
        }
    }
