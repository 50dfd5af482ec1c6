"""
Terminal presenter: a minimal interactive navigation harness.

Handles one command at a time and prints the revealed part of the current
slide after every move.
"""

from typing import Callable, Optional

from remarkdeck.markup import write_block
from remarkdeck.sequencer import OutOfRangeError, SlideSequencer

HELP = "Commands: [Enter]/n next, p previous, <number> go to slide, #<name> go to named slide, f first, l last, q quit"


class TerminalPresenter:
    """Drive a SlideSequencer from line-based keyboard commands."""

    def __init__(
        self,
        sequencer: SlideSequencer,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.sequencer = sequencer
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def show(self) -> None:
        cursor = self.sequencer.cursor
        slide = self.sequencer.current()
        header = f"[Slide {cursor.slide_number}/{cursor.slide_count}]"
        if slide.title:
            header += f" {slide.title}"
        if cursor.fragment_count > 1:
            header += f" (fragment {cursor.fragment_number}/{cursor.fragment_count})"

        self.output_fn(f"\n{'='*60}")
        self.output_fn(header)
        self.output_fn(f"{'='*60}")
        for block in self.sequencer.visible_blocks():
            self.output_fn(write_block(block))
            self.output_fn("")
        if slide.notes:
            self.output_fn(f"Notes: {slide.notes}")

    def handle(self, command: str) -> bool:
        """
        Apply one command.

        Returns:
            False when the command asks to quit
        """
        command = command.strip()

        if command in ("q", "quit"):
            return False
        if command in ("", "n", "next"):
            if not self.sequencer.advance():
                self.output_fn("(end of deck)")
                return True
        elif command in ("p", "prev"):
            if not self.sequencer.retreat():
                self.output_fn("(start of deck)")
                return True
        elif command in ("f", "first"):
            self.sequencer.reset()
        elif command in ("l", "last"):
            self.sequencer.jump_to(len(self.sequencer) - 1)
        elif command.startswith("#"):
            index = self.sequencer.find(command[1:])
            if index is None:
                self.output_fn(f"No slide named {command[1:]!r}")
                return True
            self.sequencer.jump_to(index)
        elif command.isdigit():
            try:
                self.sequencer.jump_to(int(command) - 1)
            except OutOfRangeError:
                self.output_fn(f"No slide {command}: deck has {len(self.sequencer)} slides")
                return True
        else:
            self.output_fn(HELP)
            return True

        self.show()
        return True

    def run(self) -> None:
        """Loop until quit or end of input."""
        self.output_fn(HELP)
        self.show()
        while True:
            try:
                command = self.input_fn("> ")
            except EOFError:
                break
            if not self.handle(command):
                break
