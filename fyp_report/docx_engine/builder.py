"""
Builds the document tree for a report from generated chapters.
"""

from typing import Iterable, Optional

from ..models import ChapterContent
from .models import BlockType, ContentBlock, DocumentTree, Spacing, TextRun
from .styles import ReportStyle


class DocumentBuilder:
    """
    Turns a title and an ordered chapter sequence into a DocumentTree.

    Layout:
        Title
        For each chapter (input order):
            Heading 1: chapter title
            One paragraph block per paragraph string
    """

    def __init__(self, style: Optional[ReportStyle] = None):
        self.style = style or ReportStyle()

    def build(self, title: str, chapters: Iterable[ChapterContent]) -> DocumentTree:
        tree = DocumentTree(title=title)
        tree.blocks.append(self._title_block(title))

        for chapter in chapters:
            tree.blocks.append(self._heading_block(chapter.title))
            tree.blocks.extend(self._paragraph_block(text) for text in chapter.content)

        return tree

    def _title_block(self, title: str) -> ContentBlock:
        return ContentBlock(
            type=BlockType.TITLE,
            runs=[TextRun(text=title)],
            level=0,
            spacing=Spacing(after=self.style.title_space_after),
        )

    def _heading_block(self, text: str) -> ContentBlock:
        return ContentBlock(
            type=BlockType.HEADING,
            runs=[TextRun(text=text)],
            level=1,
            spacing=Spacing(
                before=self.style.heading_space_before,
                after=self.style.heading_space_after,
            ),
        )

    def _paragraph_block(self, text: str) -> ContentBlock:
        return ContentBlock(
            type=BlockType.PARAGRAPH,
            runs=[TextRun(text=text, size=self.style.paragraph_font_size)],
            spacing=Spacing(
                before=self.style.paragraph_space_before,
                after=self.style.paragraph_space_after,
            ),
        )
