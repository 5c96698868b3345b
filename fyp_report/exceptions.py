"""
FYP Report Writer Custom Exceptions
"""

from typing import Any, Optional


class ReportWriterError(Exception):
    """Base exception for FYP Report Writer"""
    pass


class InvalidChapterNumber(ReportWriterError, ValueError):
    """Chapter number outside the supported templates"""
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid chapter number: {value!r} (expected 1, 2 or 3)")


class GenerationFailure(ReportWriterError):
    """Generation endpoint failed to produce a chapter"""
    def __init__(self, chapter: int, detail: str, status_code: Optional[int] = None):
        self.chapter = int(chapter)
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"Failed to generate chapter {self.chapter}: {detail}")
