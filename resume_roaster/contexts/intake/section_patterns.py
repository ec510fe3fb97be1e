"""
Pattern matching for résumé section header identification.

This module provides the keyword table used to recognize section headers
(experience, education, skills, summary, projects) in free-text résumés,
plus the Markdown stripping helpers the classifier depends on.

Pattern classes follow the same convention as extraction_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Optional

# =============================================================================
# MARKDOWN DECORATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class MarkdownDecorationPatterns:
    """
    Regex patterns for inline Markdown decoration.

    Each pattern captures the wrapped text in group 1 so it can be
    collapsed to its inner text. Applied in declaration order: bold before
    italic, otherwise `**x**` would be eaten as two empty italics.
    """

    BOLD: re.Pattern = re.compile(r"\*\*(.*?)\*\*")
    ITALIC: re.Pattern = re.compile(r"\*(.*?)\*")
    # 【标题】 full-width bracket emphasis
    CJK_BRACKET: re.Pattern = re.compile(r"【(.*?)】")
    SQUARE_BRACKET: re.Pattern = re.compile(r"\[(.*?)\]")
    INLINE_CODE: re.Pattern = re.compile(r"`(.*?)`")

    # ATX heading markers: "#", "##", ... "######"
    HEADING: re.Pattern = re.compile(r"^#{1,6}\s*")


INLINE_DECORATION_PATTERNS = [
    MarkdownDecorationPatterns.BOLD,
    MarkdownDecorationPatterns.ITALIC,
    MarkdownDecorationPatterns.CJK_BRACKET,
    MarkdownDecorationPatterns.SQUARE_BRACKET,
    MarkdownDecorationPatterns.INLINE_CODE,
]


# =============================================================================
# SECTION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionPatterns:
    """
    Keyword patterns for each résumé section.

    Matched by containment against the decoration-stripped, lower-cased
    line, so "**工作经历**", "## Work Experience" and "【工作经验】" all hit
    EXPERIENCE. Chinese and English synonyms sit side by side.
    """

    EXPERIENCE: tuple = (
        r"工作经[历验]",
        r"experience",
        r"employment",
    )

    EDUCATION: tuple = (
        r"教育",
        r"education",
        r"学[历位]背景",
    )

    SKILLS: tuple = (
        r"技能",
        r"skills",
        r"专业技能",
        r"技术栈",
    )

    SUMMARY: tuple = (
        r"个人[简总]结",
        r"summary",
        r"自我评价",
        r"简介",
        r"about",
    )

    PROJECTS: tuple = (
        r"项目",
        r"project",
    )


# Priority order matters: first matching group wins
SECTION_PATTERNS = {
    "experience": SectionPatterns.EXPERIENCE,
    "education": SectionPatterns.EDUCATION,
    "skills": SectionPatterns.SKILLS,
    "summary": SectionPatterns.SUMMARY,
    "projects": SectionPatterns.PROJECTS,
}

SECTION_TAGS = tuple(SECTION_PATTERNS)

_COMPILED_SECTION_PATTERNS = {
    section: re.compile("|".join(patterns), re.IGNORECASE)
    for section, patterns in SECTION_PATTERNS.items()
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def strip_markdown(text: str) -> str:
    """
    Collapse inline Markdown decoration to its inner text.

    Handles **bold**, *italic*, 【emphasis】, [brackets] and `code`.
    Heading markers are left alone; see strip_heading_markers().

    Args:
        text: Raw line or fragment

    Returns:
        Text without inline decoration, trimmed
    """
    for pattern in INLINE_DECORATION_PATTERNS:
        text = pattern.sub(r"\1", text)
    return text.strip()


def strip_heading_markers(text: str) -> str:
    """Remove leading ATX heading markers ("## Title" -> "Title")."""
    return MarkdownDecorationPatterns.HEADING.sub("", text.strip())


def normalize_header_text(line: str) -> str:
    """
    Normalize a line for section matching.

    Args:
        line: Trimmed résumé line

    Returns:
        Decoration-free, lower-cased text
    """
    return strip_markdown(strip_heading_markers(line)).lower()


def detect_section(line: str) -> Optional[str]:
    """
    Classify a line as a section header.

    Stateless: the answer depends only on the line itself, never on where
    the line sits in the document.

    Args:
        line: Trimmed résumé line

    Returns:
        One of SECTION_TAGS, or None if the line is body content
    """
    normalized = normalize_header_text(line)
    if not normalized:
        return None

    for section, pattern in _COMPILED_SECTION_PATTERNS.items():
        if pattern.search(normalized):
            return section

    return None
