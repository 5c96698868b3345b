"""
Tree-to-bytes encoders.

DocumentEncoder is the contract; DocxEncoder writes Office Open XML
through python-docx.
"""

from __future__ import annotations

import io
from typing import Protocol, runtime_checkable

from docx import Document
from docx.text.paragraph import Paragraph

from .models import BlockType, ContentBlock, DocumentTree


@runtime_checkable
class DocumentEncoder(Protocol):
    """Encodes a DocumentTree into a binary document."""

    def encode(self, tree: DocumentTree) -> bytes: ...


class DocxEncoder:
    """Encode a DocumentTree as a .docx byte buffer."""

    def encode(self, tree: DocumentTree) -> bytes:
        docx = Document()
        docx.core_properties.title = tree.title

        for block in tree.blocks:
            para = self._render_block(docx, block)
            self._apply_spacing(para, block)

        buf = io.BytesIO()
        docx.save(buf)
        return buf.getvalue()

    def _render_block(self, docx, block: ContentBlock) -> Paragraph:
        if block.type == BlockType.TITLE:
            para = docx.add_heading(level=0)
        elif block.type == BlockType.HEADING:
            para = docx.add_heading(level=block.level)
        elif block.type == BlockType.PARAGRAPH:
            para = docx.add_paragraph()
        else:
            raise ValueError(f"Unsupported block type: {block.type}")

        for run_spec in block.runs:
            run = para.add_run(run_spec.text)
            if run_spec.size is not None:
                run.font.size = run_spec.size
        return para

    def _apply_spacing(self, para: Paragraph, block: ContentBlock):
        pf = para.paragraph_format
        if block.spacing.before is not None:
            pf.space_before = block.spacing.before
        if block.spacing.after is not None:
            pf.space_after = block.spacing.after
