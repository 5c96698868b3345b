# ═══════════════════════════════════════════════════════════════════
# FILE: fyp_report/pipeline.py
# PURPOSE: Generate chapters in order, then assemble the DOCX report
# ═══════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence

from .docx_engine import DocxRenderer
from .generator import ChapterGenerator
from .models import ALL_CHAPTERS, ChapterContent, ChapterNumber

logger = logging.getLogger(__name__)


class ReportPipeline:
    """
    Chapter generation → document assembly.

    Flow:
    1. Validate all requested chapter numbers
    2. Generate each chapter, one request at a time, in the requested order
    3. Render the collected chapters to DOCX bytes

    The first failure stops the run and propagates to the caller.
    """

    def __init__(
        self,
        generator: Optional[ChapterGenerator] = None,
        renderer: Optional[DocxRenderer] = None,
        on_progress: Optional[Callable[[str, int], Any]] = None,
    ):
        self.generator = generator or ChapterGenerator()
        self.renderer = renderer or DocxRenderer()
        self.on_progress = on_progress or (lambda *a, **k: None)

    async def generate_chapters(
        self,
        title: str,
        chapters: Sequence[Any] = ALL_CHAPTERS,
    ) -> List[ChapterContent]:
        """Generate chapters sequentially, preserving the requested order."""
        numbers = [ChapterNumber.parse(c) for c in chapters]

        results: List[ChapterContent] = []
        for i, number in enumerate(numbers, start=1):
            logger.info(f"Generating {number.label} ({i}/{len(numbers)})")
            results.append(await self.generator.generate(title, number))
            self.on_progress(f"{number.label} generated", int(i / len(numbers) * 90))
        return results

    async def build_report(
        self,
        title: str,
        chapters: Sequence[Any] = ALL_CHAPTERS,
    ) -> bytes:
        """Generate the requested chapters and return the DOCX bytes."""
        contents = await self.generate_chapters(title, chapters)

        logger.info(f"Assembling report '{title}' with {len(contents)} chapters")
        data = await self.renderer.render(title, contents)
        self.on_progress("Report assembled", 100)
        return data
