"""
Parse delimited deck source into the content model.

The source is the text a remark page keeps in its ``<textarea>``:
slides separated by ``---`` lines, incremental reveals by ``--`` lines and
speaker notes introduced by a ``???`` line. Delimiter lines inside fenced
code blocks are literal code.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from remarkdeck.models import (
    FENCE_OPEN_RE,
    FRAGMENT_SEPARATOR,
    HEADING_RE,
    NOTES_SEPARATOR,
    PROPERTY_RE,
    SLIDE_SEPARATOR,
    CodeSnippet,
    Deck,
    FragmentMarker,
    Prose,
    Slide,
    is_property_line,
)


class DeckFormatError(ValueError):
    """Raised when deck source cannot be turned into a Deck."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


# A slide's raw lines, paired with their 1-based line numbers in the source
_Lines = List[Tuple[int, str]]


def _split(lines: _Lines, delimiter: str, limit: Optional[int] = None) -> List[_Lines]:
    """Split on a delimiter line, ignoring delimiters inside code fences."""
    parts: List[_Lines] = [[]]
    fence_start: Optional[int] = None

    for number, line in lines:
        if fence_start is None:
            if line == delimiter and (limit is None or len(parts) <= limit):
                parts.append([])
                continue
            if FENCE_OPEN_RE.match(line):
                fence_start = number
        elif line.rstrip() == "```":
            fence_start = None
        parts[-1].append((number, line))

    if fence_start is not None:
        raise DeckFormatError("unterminated code fence", line=fence_start)
    return parts


def _number_lines(text: str) -> _Lines:
    """Number the source lines, splitting on newlines only."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return list(enumerate(text.split("\n"), start=1))


def _trim(lines: _Lines) -> _Lines:
    start, end = 0, len(lines)
    while start < end and not lines[start][1].strip():
        start += 1
    while end > start and not lines[end - 1][1].strip():
        end -= 1
    return lines[start:end]


def _parse_blocks(lines: _Lines) -> List[Union[Prose, CodeSnippet, FragmentMarker]]:
    blocks: List[Union[Prose, CodeSnippet, FragmentMarker]] = []
    prose: List[str] = []
    code: Optional[List[str]] = None
    language: Optional[str] = None

    def flush_prose():
        text = "\n".join(prose).strip("\n")
        if text.strip():
            blocks.append(Prose(text=text))
        prose.clear()

    for _, line in lines:
        if code is not None:
            if line.rstrip() == "```":
                blocks.append(CodeSnippet(language=language, text="\n".join(code)))
                code = None
            else:
                code.append(line)
            continue

        fence = FENCE_OPEN_RE.match(line)
        if fence:
            flush_prose()
            code = []
            language = fence.group(1) or None
        elif line == FRAGMENT_SEPARATOR:
            flush_prose()
            blocks.append(FragmentMarker())
        else:
            prose.append(line)

    if code is not None:
        raise DeckFormatError("unterminated code fence", line=lines[-1][0])
    flush_prose()
    return blocks


def _parse_slide_lines(lines: _Lines) -> Slide:
    first_line = lines[0][0] if lines else None
    content_and_notes = _split(lines, NOTES_SEPARATOR, limit=1)
    content = _trim(content_and_notes[0])
    notes = None
    if len(content_and_notes) > 1:
        notes = "\n".join(line for _, line in _trim(content_and_notes[1])) or None

    properties: Dict[str, str] = {}
    while content and is_property_line(content[0][1]):
        key, value = PROPERTY_RE.match(content[0][1]).groups()
        properties[key] = value
        content = content[1:]
    content = _trim(content)

    title = None
    title_level = 1
    if content:
        heading = HEADING_RE.match(content[0][1])
        if heading:
            title_level = len(heading.group(1))
            title = heading.group(2)
            content = content[1:]

    try:
        return Slide(
            title=title,
            title_level=title_level,
            body=tuple(_parse_blocks(content)),
            notes=notes,
            properties=properties,
        )
    except ValidationError as e:
        raise DeckFormatError(f"invalid slide: {e}", line=first_line) from e


def parse_slide(text: str) -> Slide:
    """Parse the source of a single slide."""
    lines = _number_lines(text)
    parts = _split(lines, SLIDE_SEPARATOR)
    if len(parts) != 1:
        raise DeckFormatError("slide source contains a slide separator")
    return _parse_slide_lines(parts[0])


def parse_deck(text: str) -> Deck:
    """
    Parse delimited deck source into a Deck.

    Args:
        text: Deck source (markdown with remark delimiters)

    Returns:
        Deck with one Slide per ``---``-separated section

    Raises:
        DeckFormatError: blank source, unterminated fence or invalid slide
    """
    if not text.strip():
        raise DeckFormatError("deck source is empty")

    lines = _number_lines(text)
    slides = [_parse_slide_lines(part) for part in _split(lines, SLIDE_SEPARATOR)]
    print(f"[Parser] Parsed {len(slides)} slides")
    return Deck(slides=tuple(slides))


def load_deck(path: Path) -> Deck:
    """
    Load a deck from a markdown source or a JSON dump.

    Files ending in ``.json`` are read as ``Deck.to_dict()`` output,
    anything else as delimited deck source.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Deck source not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    if path.suffix.lower() == ".json":
        try:
            return Deck.from_dict(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as e:
            raise DeckFormatError(f"invalid deck JSON in {path}: {e}") from e

    return parse_deck(content)
