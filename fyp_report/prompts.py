# ═══════════════════════════════════════════════════════════════════
# FILE: fyp_report/prompts.py
# PURPOSE: Instruction templates for the three report chapters
# ═══════════════════════════════════════════════════════════════════

"""
Chapter prompts for the final year project report.

The project title is interpolated verbatim. Nothing is escaped, so quotes
and braces in the title reach the endpoint unchanged.
"""

from typing import Any, Callable, Dict

from .models import ChapterNumber


# ─────────────────────────────────────────────────────────────────
# CHAPTER 1: Objectives, problem statement, scope
# ─────────────────────────────────────────────────────────────────

def get_objectives_prompt(title: str) -> str:
    """Prompt for Chapter 1."""
    return f"""Generate a detailed Chapter 1 for a final year project titled "{title}". Include the following sections:
1. Objective (clear, measurable objectives of the project)
2. Problem Statement (clear description of the problem being addressed)
3. Scope of Research (clear boundaries and limitations of the research)
Format the response in clear sections with detailed content for each section."""


# ─────────────────────────────────────────────────────────────────
# CHAPTER 2: Literature review
# ─────────────────────────────────────────────────────────────────

def get_literature_review_prompt(title: str) -> str:
    """Prompt for Chapter 2."""
    return f"""Generate a comprehensive literature review (Chapter 2) for a final year project titled "{title}".
Focus only on relevant papers and research directly related to the project topic.
Include:
1. Recent research papers (within last 5 years)
2. Critical analysis of methodologies used
3. Gaps in current research
Format as a coherent review with proper citations and subsections."""


# ─────────────────────────────────────────────────────────────────
# CHAPTER 3: Methodology
# ─────────────────────────────────────────────────────────────────

def get_methodology_prompt(title: str) -> str:
    """Prompt for Chapter 3."""
    return f"""Generate a detailed methodology chapter (Chapter 3) for a final year project titled "{title}".
Include:
1. Research approach and design
2. Methods and tools to be used
3. Data collection and analysis procedures
4. Project timeline and milestones
Format with clear sections and step-by-step procedures."""


CHAPTER_PROMPTS: Dict[ChapterNumber, Callable[[str], str]] = {
    ChapterNumber.OBJECTIVES: get_objectives_prompt,
    ChapterNumber.LITERATURE_REVIEW: get_literature_review_prompt,
    ChapterNumber.METHODOLOGY: get_methodology_prompt,
}


def build_prompt(title: str, chapter: Any) -> str:
    """
    Return the instruction string for a chapter.

    Raises:
        InvalidChapterNumber: chapter is not 1, 2 or 3
    """
    number = ChapterNumber.parse(chapter)
    return CHAPTER_PROMPTS[number](title)
