"""
DOCX engine for FYP Report Writer

Document tree, builder and python-docx encoder.
"""

from .models import (
    BlockType,
    TextRun,
    Spacing,
    ContentBlock,
    DocumentTree,
)
from .styles import ReportStyle
from .builder import DocumentBuilder
from .encoder import DocumentEncoder, DocxEncoder
from .renderer import DocxRenderer, create_word_document

__all__ = [
    # Main classes
    'DocxRenderer',
    'DocumentBuilder',
    'DocxEncoder',
    'DocumentEncoder',
    'create_word_document',

    # Models
    'BlockType',
    'TextRun',
    'Spacing',
    'ContentBlock',
    'DocumentTree',

    # Styles
    'ReportStyle',
]
