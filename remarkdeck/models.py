"""
Core data models for remarkdeck.

Defines the Deck / Slide / ContentBlock content model using Pydantic for
validation. Every model is frozen: a deck is authored once and never
mutated while it is being presented.
"""

import re
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# --- Delimiter grammar shared by the models and the markup package ---

SLIDE_SEPARATOR = "---"
FRAGMENT_SEPARATOR = "--"
NOTES_SEPARATOR = "???"
DELIMITER_LINES = (SLIDE_SEPARATOR, FRAGMENT_SEPARATOR, NOTES_SEPARATOR)

FENCE_OPEN_RE = re.compile(r"^```\s*([\w+#.-]*)\s*$")
FENCE_LINE_RE = re.compile(r"^```")
HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*$")
PROPERTY_RE = re.compile(r"^([a-z][\w-]*):\s*(.*?)\s*$")
LANGUAGE_RE = re.compile(r"[\w+#.-]*")

# Line boundaries str.splitlines() knows besides "\n"
OTHER_LINE_BREAKS_RE = re.compile("[\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029]")

# Slide properties recognised by the remark runtime
SLIDE_PROPERTIES = frozenset(
    {
        "name",
        "class",
        "layout",
        "template",
        "count",
        "exclude",
        "background-image",
        "background-position",
        "background-repeat",
        "background-size",
    }
)


def is_property_line(line: str) -> bool:
    match = PROPERTY_RE.match(line)
    return bool(match) and match.group(1) in SLIDE_PROPERTIES


def normalize_newlines(text: str) -> str:
    """
    Convert ``\\r\\n`` and ``\\r`` to ``\\n`` and reject every other line
    boundary, so that ``"\\n"`` is the only line separator in deck text.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    match = OTHER_LINE_BREAKS_RE.search(text)
    if match:
        raise ValueError(f"Unsupported line break character {match.group()!r}")
    return text


def strip_blank_lines(text: str) -> str:
    """Drop leading and trailing whitespace-only lines."""
    lines = text.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines)


def _check_free_text(text: str, what: str) -> None:
    """Reject lines that the text format would read as structure."""
    for line in text.split("\n"):
        if line in DELIMITER_LINES:
            raise ValueError(f"{what} may not contain the delimiter line {line!r}")
        if FENCE_LINE_RE.match(line):
            raise ValueError(f"{what} may not contain a code fence line")


class Prose(BaseModel):
    """A run of markdown text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["prose"] = "prose"
    text: str

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        v = strip_blank_lines(normalize_newlines(v))
        if not v.strip():
            raise ValueError("Prose text must not be blank")
        _check_free_text(v, "Prose")
        return v


class CodeSnippet(BaseModel):
    """A literal source fragment. Illustrative only, never executed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["code"] = "code"
    language: Optional[str] = Field(None, description="Highlighting tag, e.g. 'scala'")
    text: str = ""

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        if not LANGUAGE_RE.fullmatch(v):
            raise ValueError(f"Invalid language tag: {v!r}")
        return v

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        v = normalize_newlines(v)
        if any(FENCE_LINE_RE.match(line) for line in v.split("\n")):
            raise ValueError("Code text may not contain a code fence line")
        return v


class FragmentMarker(BaseModel):
    """Boundary of an incremental reveal inside a slide."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fragment"] = "fragment"


ContentBlock = Annotated[
    Union[Prose, CodeSnippet, FragmentMarker], Field(discriminator="kind")
]


class Slide(BaseModel):
    """
    One presentation unit: an optional title, a body of content blocks,
    optional speaker notes and remark slide properties.

    A slide's identity is its position in the deck.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    title_level: int = Field(default=1, ge=1, le=6)
    body: Tuple[ContentBlock, ...] = ()
    notes: Optional[str] = None
    properties: Dict[str, str] = Field(default_factory=dict)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = normalize_newlines(v).strip()
        if not v or "\n" in v:
            raise ValueError("Title must be a single non-blank line")
        return v

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = strip_blank_lines(normalize_newlines(v))
        if not v.strip():
            return None
        _check_free_text(v, "Speaker notes")
        return v

    @field_validator("properties")
    @classmethod
    def validate_properties(cls, v: Dict[str, str]) -> Dict[str, str]:
        for key, value in v.items():
            if key not in SLIDE_PROPERTIES:
                raise ValueError(f"Unknown slide property: {key!r}")
            if "\n" in normalize_newlines(value):
                raise ValueError(f"Slide property {key!r} must be a single line")
        return {key: value.strip() for key, value in v.items()}

    @model_validator(mode="after")
    def coalesce_prose(self) -> "Slide":
        merged: List[Any] = []
        for block in self.body:
            if merged and isinstance(block, Prose) and isinstance(merged[-1], Prose):
                merged[-1] = Prose(text=f"{merged[-1].text}\n\n{block.text}")
            else:
                merged.append(block)
        if len(merged) != len(self.body):
            object.__setattr__(self, "body", tuple(merged))
        if self.title is None and self.title_level != 1:
            object.__setattr__(self, "title_level", 1)

        # Without a title, the first prose line must not read as structure
        if self.title is None and self.body and isinstance(self.body[0], Prose):
            first_line = self.body[0].text.split("\n", 1)[0]
            if HEADING_RE.match(first_line):
                raise ValueError("A leading heading must be given as the slide title")
            if is_property_line(first_line):
                raise ValueError("A leading property line must be given in properties")
        return self

    @property
    def fragment_count(self) -> int:
        """Number of reveal steps: one more than the number of markers."""
        return 1 + sum(1 for block in self.body if isinstance(block, FragmentMarker))

    def visible_blocks(self, revealed: int = 0) -> List[Union[Prose, CodeSnippet]]:
        """Blocks shown once ``revealed`` fragment markers have been passed."""
        visible = []
        passed = 0
        for block in self.body:
            if isinstance(block, FragmentMarker):
                passed += 1
                if passed > revealed:
                    break
                continue
            visible.append(block)
        return visible

    @property
    def code_snippets(self) -> List[CodeSnippet]:
        return [block for block in self.body if isinstance(block, CodeSnippet)]


class Deck(BaseModel):
    """
    The full ordered collection of slides.

    Order is presentation order: the first slide is the title slide and the
    last one is the closing slide.
    """

    model_config = ConfigDict(frozen=True)

    slides: Tuple[Slide, ...] = Field(..., min_length=1)

    def __len__(self) -> int:
        return len(self.slides)

    def __getitem__(self, index: int) -> Slide:
        return self.slides[index]

    def __iter__(self):
        return iter(self.slides)

    @property
    def title(self) -> Optional[str]:
        return self.slides[0].title

    @staticmethod
    def number(index: int) -> int:
        """1-based slide number for a 0-based index."""
        return index + 1

    def to_dict(self) -> Dict[str, Any]:
        """Export to dict for JSON serialization."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Deck":
        """Load from dict."""
        return cls.model_validate(data)


# --- Runtime configuration ---


class RemarkOptions(BaseModel):
    """
    Options map handed to ``remark.create``.

    Dumped with camelCase aliases, the names the runtime recognises.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    highlight_style: str = Field(default="github", description="Syntax-highlighting colour theme")
    highlight_language: Optional[str] = None
    highlight_lines: bool = False
    ratio: Literal["4:3", "16:9", "16:10"] = "4:3"
    count_incremental_slides: bool = True
    slide_number_format: Optional[str] = None

    def to_runtime(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
