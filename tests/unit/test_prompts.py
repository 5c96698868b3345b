"""Tests for fyp_report/prompts.py — chapter instruction templates."""

import pytest

from fyp_report.exceptions import InvalidChapterNumber
from fyp_report.models import ChapterNumber
from fyp_report.prompts import (
    CHAPTER_PROMPTS,
    build_prompt,
    get_literature_review_prompt,
    get_methodology_prompt,
    get_objectives_prompt,
)


class TestBuildPrompt:
    """build_prompt dispatch and title substitution."""

    @pytest.mark.parametrize("chapter", [1, 2, 3])
    def test_title_is_contiguous_substring(self, chapter):
        title = "Smart Irrigation Using IoT Sensors"
        assert title in build_prompt(title, chapter)

    @pytest.mark.parametrize("chapter", [1, 2, 3])
    def test_title_inserted_verbatim(self, chapter):
        title = 'A "quoted" {braced} title\nwith a newline'
        assert title in build_prompt(title, chapter)

    def test_deterministic(self):
        assert build_prompt("X", 2) == build_prompt("X", 2)

    def test_accepts_enum_member(self):
        assert build_prompt("X", ChapterNumber.METHODOLOGY) == build_prompt("X", 3)

    def test_dispatches_to_chapter_templates(self):
        assert build_prompt("X", 1) == get_objectives_prompt("X")
        assert build_prompt("X", 2) == get_literature_review_prompt("X")
        assert build_prompt("X", 3) == get_methodology_prompt("X")

    @pytest.mark.parametrize("chapter", [0, 4, -1, "1", 1.0, None, True])
    def test_invalid_chapter_rejected(self, chapter):
        with pytest.raises(InvalidChapterNumber):
            build_prompt("X", chapter)


class TestTemplates:
    """Each template asks for its chapter's sections."""

    def test_every_chapter_has_template(self):
        assert set(CHAPTER_PROMPTS) == set(ChapterNumber)

    def test_objectives_sections(self):
        prompt = get_objectives_prompt("X")
        assert "Chapter 1" in prompt
        for section in ("Objective", "Problem Statement", "Scope of Research"):
            assert section in prompt

    def test_literature_review_sections(self):
        prompt = get_literature_review_prompt("X")
        assert "literature review (Chapter 2)" in prompt
        assert "Gaps in current research" in prompt

    def test_methodology_sections(self):
        prompt = get_methodology_prompt("X")
        assert "methodology chapter (Chapter 3)" in prompt
        assert "Project timeline and milestones" in prompt
