"""
Slide Sequencer: a two-level (slide, fragment) cursor over a Deck.
"""

from typing import Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from remarkdeck.models import CodeSnippet, Deck, Prose, Slide


class OutOfRangeError(IndexError):
    """Raised when navigation targets a slide index outside the deck."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Slide index {index} out of range [0, {length - 1}]")


class Cursor(BaseModel):
    """Snapshot of the sequencer position."""

    slide_index: int = Field(ge=0)
    slide_number: int = Field(ge=1)
    slide_count: int = Field(ge=1)
    revealed: int = Field(ge=0, description="Fragment markers passed on this slide")
    fragment_count: int = Field(ge=1)
    is_first: bool
    is_terminal: bool

    @property
    def fragment_number(self) -> int:
        return self.revealed + 1


class SlideSequencer:
    """
    Present a Deck one slide at a time.

    The cursor starts at (slide 0, nothing revealed). ``advance`` reveals the
    next pending fragment of the current slide before moving on to the next
    slide; ``retreat`` is its exact inverse. Neither wraps around.
    """

    def __init__(self, deck: Deck):
        self.deck = deck
        self._index = 0
        self._revealed = 0

    def __len__(self) -> int:
        return len(self.deck)

    @property
    def index(self) -> int:
        return self._index

    @property
    def revealed(self) -> int:
        return self._revealed

    @property
    def is_terminal(self) -> bool:
        return (
            self._index == len(self.deck) - 1
            and self._revealed == self.current().fragment_count - 1
        )

    @property
    def cursor(self) -> Cursor:
        slide = self.current()
        return Cursor(
            slide_index=self._index,
            slide_number=self.deck.number(self._index),
            slide_count=len(self.deck),
            revealed=self._revealed,
            fragment_count=slide.fragment_count,
            is_first=self._index == 0 and self._revealed == 0,
            is_terminal=self.is_terminal,
        )

    def current(self) -> Slide:
        """Slide at the cursor."""
        return self.deck[self._index]

    def visible_blocks(self) -> List[Union[Prose, CodeSnippet]]:
        """Content of the current slide as revealed so far."""
        return self.current().visible_blocks(self._revealed)

    def advance(self) -> bool:
        """
        Reveal the next fragment, or move to the next slide.

        Returns:
            True if the cursor moved, False in the terminal state
        """
        if self._revealed < self.current().fragment_count - 1:
            self._revealed += 1
            return True
        if self._index < len(self.deck) - 1:
            self._index += 1
            self._revealed = 0
            return True
        return False

    def retreat(self) -> bool:
        """
        Hide the last revealed fragment, or move back to the previous slide
        with all of its fragments revealed.

        Returns:
            True if the cursor moved, False at the first slide
        """
        if self._revealed > 0:
            self._revealed -= 1
            return True
        if self._index > 0:
            self._index -= 1
            self._revealed = self.current().fragment_count - 1
            return True
        return False

    def jump_to(self, index: int) -> Slide:
        """
        Move directly to a slide, with none of its fragments revealed.

        Raises:
            OutOfRangeError: index outside [0, len(deck) - 1]; the cursor is
                left unchanged
        """
        if not 0 <= index < len(self.deck):
            raise OutOfRangeError(index, len(self.deck))
        self._index = index
        self._revealed = 0
        return self.current()

    def reset(self) -> None:
        self._index = 0
        self._revealed = 0

    def steps(self) -> Iterator[Tuple[Slide, int]]:
        """Every (slide, revealed) state in presentation order."""
        for slide in self.deck:
            for revealed in range(slide.fragment_count):
                yield slide, revealed

    def find(self, name: str) -> Optional[int]:
        """Index of the slide carrying the remark ``name`` property."""
        for i, slide in enumerate(self.deck):
            if slide.properties.get("name") == name:
                return i
        return None
