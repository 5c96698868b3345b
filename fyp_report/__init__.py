"""
FYP Report Writer

Generates the opening chapters of a final year project report through a
remote text-generation endpoint and assembles them into a DOCX document.

Usage:
    from fyp_report import ReportPipeline

    pipeline = ReportPipeline()
    docx_bytes = await pipeline.build_report("Smart Irrigation with IoT")
"""

from .exceptions import ReportWriterError, InvalidChapterNumber, GenerationFailure
from .models import ChapterNumber, ChapterContent
from .prompts import build_prompt
from .generator import ChapterGenerator, generate_chapter_content
from .docx_engine import DocxRenderer, create_word_document
from .pipeline import ReportPipeline

__version__ = "1.0.0"

__all__ = [
    'ReportWriterError',
    'InvalidChapterNumber',
    'GenerationFailure',
    'ChapterNumber',
    'ChapterContent',
    'build_prompt',
    'ChapterGenerator',
    'generate_chapter_content',
    'DocxRenderer',
    'create_word_document',
    'ReportPipeline',
]
