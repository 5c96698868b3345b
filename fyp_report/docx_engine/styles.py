"""
Fixed styling for the report layout.
"""

from dataclasses import dataclass, field

from docx.shared import Pt


@dataclass
class ReportStyle:
    """Spacing and font sizes used by DocumentBuilder"""
    title_space_after: Pt = field(default_factory=lambda: Pt(20))

    heading_space_before: Pt = field(default_factory=lambda: Pt(20))
    heading_space_after: Pt = field(default_factory=lambda: Pt(10))

    paragraph_font_size: Pt = field(default_factory=lambda: Pt(12))
    paragraph_space_before: Pt = field(default_factory=lambda: Pt(10))
    paragraph_space_after: Pt = field(default_factory=lambda: Pt(10))
