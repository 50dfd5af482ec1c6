"""
PPTX renderer using python-pptx.

Exports a deck as an editable PowerPoint file, for audiences that cannot
open the HTML slideshow.
"""

import re
from pathlib import Path
from typing import List, Tuple, Union

from pptx import Presentation
from pptx.enum.text import MSO_ANCHOR, PP_PARAGRAPH_ALIGNMENT
from pptx.util import Inches, Pt

from remarkdeck.models import CodeSnippet, Deck, Prose, Slide
from remarkdeck.sequencer import SlideSequencer
from remarkdeck.renderers.base import BaseRenderer

BULLET_RE = re.compile(r"^(\s*)[-*+]\s+(.*)$")


def strip_markdown(text: str) -> str:
    """Strip inline markdown markup, keeping the readable text."""
    if not text:
        return text
    # Links and images: keep the label
    text = re.sub(r"!?\[([^\]]*)\]\([^)]*\)", r"\1", text)
    # Inline code, bold, italic
    text = re.sub(r"`([^`]*)`", r"\1", text)
    text = re.sub(r"(\*\*|__)(.+?)\1", r"\2", text)
    text = re.sub(r"(?<![\w*])[*_](?!\s)(.+?)(?<!\s)[*_](?![\w*])", r"\1", text)
    # Leading heading marks inside prose
    text = re.sub(r"^#{1,6}\s+", "", text)
    # Remark content classes: .red[text]
    text = re.sub(r"\.[\w-]+\[([^\]]*)\]", r"\1", text)
    return text.rstrip()


# Default fallback fonts
BODY_FONT = "Calibri"
CODE_FONT = "Consolas"


class PPTXRenderer(BaseRenderer):
    """
    Render a Deck into a PowerPoint presentation using python-pptx.

    Features:
    - One PowerPoint slide per deck slide, or per fragment step
    - Bullet lists with nesting from markdown indentation
    - Code snippets in a monospace font
    - Speaker notes in the notes page
    """

    extension = "pptx"

    # Slide sizes in inches per aspect ratio
    RATIO_SIZES = {
        "4:3": (10.0, 7.5),
        "16:9": (13.333, 7.5),
        "16:10": (12.0, 7.5),
    }

    # Font sizes relative to slide height (in points)
    SIZE_MAP = {
        "title": 0.06,
        "body": 0.03,
        "code": 0.022,
    }

    def __init__(self, ratio: str = "4:3", expand_fragments: bool = False):
        """
        Initialize renderer.

        Args:
            ratio: Aspect ratio, one of RATIO_SIZES
            expand_fragments: Emit one PowerPoint slide per fragment step
                instead of one per deck slide
        """
        if ratio not in self.RATIO_SIZES:
            raise ValueError(f"Unknown ratio: {ratio}")
        self.ratio = ratio
        self.slide_width_inches, self.slide_height_inches = self.RATIO_SIZES[ratio]
        self.expand_fragments = expand_fragments

    def render(self, deck: Deck, output_path: Path) -> Path:
        """
        Render all slides to a PPTX file.

        Args:
            deck: Deck to export
            output_path: Path to save the PPTX file

        Returns:
            Path to the generated PPTX file
        """
        prs = Presentation()
        prs.slide_width = Inches(self.slide_width_inches)
        prs.slide_height = Inches(self.slide_height_inches)

        if self.expand_fragments:
            pages = list(SlideSequencer(deck).steps())
        else:
            pages = [(slide, slide.fragment_count - 1) for slide in deck]

        print(f"[PPTX] Rendering {len(deck)} slides as {len(pages)} pages")

        for slide_info, revealed in pages:
            layout = prs.slide_layouts[6]  # Blank layout
            page = prs.slides.add_slide(layout)
            self._render_slide(page, slide_info, slide_info.visible_blocks(revealed))

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        prs.save(str(output_path))

        print(f"[PPTX] Saved presentation to {output_path}")
        return output_path

    def _render_slide(
        self, page, slide_info: Slide, blocks: List[Union[Prose, CodeSnippet]]
    ) -> None:
        slide_height_pt = self.slide_height_inches * 72
        margin = 0.5
        width = self.slide_width_inches - 2 * margin
        top = margin
        centered = "center" in slide_info.properties.get("class", "")

        if slide_info.title:
            title_box = page.shapes.add_textbox(
                Inches(margin), Inches(top), Inches(width), Inches(1.0)
            )
            frame = title_box.text_frame
            frame.word_wrap = True
            frame.vertical_anchor = MSO_ANCHOR.MIDDLE
            p = frame.paragraphs[0]
            p.text = strip_markdown(slide_info.title)
            self._style_paragraph(p, int(self.SIZE_MAP["title"] * slide_height_pt), BODY_FONT, centered)
            for run in p.runs:
                run.font.bold = True
            top += 1.2

        if blocks:
            body_box = page.shapes.add_textbox(
                Inches(margin),
                Inches(top),
                Inches(width),
                Inches(self.slide_height_inches - top - margin),
            )
            frame = body_box.text_frame
            frame.word_wrap = True
            frame.vertical_anchor = MSO_ANCHOR.TOP
            self._add_blocks(frame, blocks, slide_height_pt, centered)

        if slide_info.notes:
            page.notes_slide.notes_text_frame.text = slide_info.notes

    def _add_blocks(
        self, text_frame, blocks: List[Union[Prose, CodeSnippet]], slide_height_pt: float, centered: bool
    ) -> None:
        """Add prose and code paragraphs to a text frame."""
        text_frame.clear()
        first = True

        for block in blocks:
            for text, level, is_code in self._block_lines(block):
                p = text_frame.paragraphs[0] if first else text_frame.add_paragraph()
                first = False
                p.text = text
                p.level = level
                if is_code:
                    self._style_paragraph(p, int(self.SIZE_MAP["code"] * slide_height_pt), CODE_FONT, False)
                else:
                    self._style_paragraph(p, int(self.SIZE_MAP["body"] * slide_height_pt), BODY_FONT, centered)

    def _block_lines(self, block: Union[Prose, CodeSnippet]) -> List[Tuple[str, int, bool]]:
        """Split a block into (text, level, is_code) paragraphs."""
        if isinstance(block, CodeSnippet):
            return [(line, 0, True) for line in block.text.split("\n")]

        lines = []
        for line in block.text.split("\n"):
            if not line.strip():
                continue
            bullet = BULLET_RE.match(line)
            if bullet:
                level = min(len(bullet.group(1).expandtabs(4)) // 2, 4)
                lines.append(("• " + strip_markdown(bullet.group(2)), level, False))
            else:
                lines.append((strip_markdown(line.strip()), 0, False))
        return lines

    @staticmethod
    def _style_paragraph(p, font_size: int, font_name: str, centered: bool) -> None:
        p.alignment = PP_PARAGRAPH_ALIGNMENT.CENTER if centered else PP_PARAGRAPH_ALIGNMENT.LEFT
        for run in p.runs:
            run.font.size = Pt(font_size)
            run.font.name = font_name
