"""
Main DOCX Renderer - builds the report tree and hands it to an encoder.
"""

import asyncio
import logging
from typing import Iterable, Optional

from ..models import ChapterContent
from .builder import DocumentBuilder
from .encoder import DocumentEncoder, DocxEncoder
from .models import DocumentTree
from .styles import ReportStyle

logger = logging.getLogger(__name__)


class DocxRenderer:
    """
    Renders generated chapters to a DOCX byte buffer.

    Usage:
        renderer = DocxRenderer()
        data = await renderer.render("My Project", chapters)

        # Tests inspect the tree through a fake encoder
        renderer = DocxRenderer(encoder=FakeEncoder())
    """

    def __init__(
        self,
        style: Optional[ReportStyle] = None,
        encoder: Optional[DocumentEncoder] = None,
    ):
        self.builder = DocumentBuilder(style)
        self.encoder = encoder or DocxEncoder()

    def build_tree(self, title: str, chapters: Iterable[ChapterContent]) -> DocumentTree:
        return self.builder.build(title, chapters)

    async def render(self, title: str, chapters: Iterable[ChapterContent]) -> bytes:
        """
        Build and encode the report.

        Encoder errors are not caught.
        """
        tree = self.build_tree(title, chapters)
        logger.info(f"Rendering '{title}': {len(tree.blocks)} blocks")
        return await asyncio.to_thread(self.encoder.encode, tree)


async def create_word_document(
    title: str,
    chapters: Iterable[ChapterContent],
    style: Optional[ReportStyle] = None,
    encoder: Optional[DocumentEncoder] = None,
) -> bytes:
    """Render a report with a default DocxRenderer."""
    return await DocxRenderer(style=style, encoder=encoder).render(title, chapters)
