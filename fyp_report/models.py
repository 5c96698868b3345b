"""Chapter models and wire schemas for the generation endpoint"""
from enum import IntEnum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidChapterNumber


class ChapterNumber(IntEnum):
    """Chapters that have a generation template"""
    OBJECTIVES = 1
    LITERATURE_REVIEW = 2
    METHODOLOGY = 3

    @classmethod
    def parse(cls, value: Any) -> "ChapterNumber":
        """Validate a caller-supplied chapter number."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidChapterNumber(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidChapterNumber(value) from None

    @property
    def label(self) -> str:
        return f"Chapter {int(self)}"


ALL_CHAPTERS: Tuple[ChapterNumber, ...] = tuple(ChapterNumber)


class ChapterContent(BaseModel):
    """A generated chapter, split into paragraphs"""
    model_config = ConfigDict(frozen=True)

    title: str
    content: Tuple[str, ...] = ()


# ============ Wire Models ============

class GenerateRequest(BaseModel):
    """Payload sent to the generation endpoint"""
    prompt: str
    chapter: int = Field(..., description="Chapter number (1-3)")


class GenerateResponse(BaseModel):
    """Successful response from the generation endpoint"""
    model_config = ConfigDict(extra="ignore")

    content: str
