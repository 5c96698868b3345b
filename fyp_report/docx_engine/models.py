"""
Data models for the report document tree.
All models use dataclasses for simplicity.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum

from docx.shared import Length


class BlockType(Enum):
    """Content block types"""
    TITLE = "title"
    HEADING = "heading"
    PARAGRAPH = "paragraph"


@dataclass
class TextRun:
    """A run of text with consistent styling"""
    text: str
    size: Optional[Length] = None  # None = inherit from paragraph style


@dataclass
class Spacing:
    """Paragraph spacing before and after"""
    before: Optional[Length] = None
    after: Optional[Length] = None


@dataclass
class ContentBlock:
    """A single block in the document body"""
    type: BlockType
    runs: List[TextRun] = field(default_factory=list)
    level: int = 1  # 0 = document title, 1+ = heading level
    spacing: Spacing = field(default_factory=Spacing)

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass
class DocumentTree:
    """The complete document, ready for encoding"""
    title: str
    blocks: List[ContentBlock] = field(default_factory=list)

    def blocks_of(self, block_type: BlockType) -> List[ContentBlock]:
        return [b for b in self.blocks if b.type == block_type]
