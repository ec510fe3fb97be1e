"""
Reusable patterns and constants for résumé field extraction.

This module provides the regex patterns and keyword vocabularies used by
field_extractor.py and the section accumulator in resume_parser.py.

Pattern classes follow the convention from section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# PARSER LIMITS
# =============================================================================


@dataclass(frozen=True)
class ParserLimits:
    """
    Length and position thresholds used by the accumulator.

    Values come from real résumés pasted into the tool: names are short,
    the header block is the first handful of lines, and skill lines longer
    than a short phrase are usually comma-separated lists.
    """

    # Raw line index (blank lines included) below which header parsing runs
    HEADER_LINE_WINDOW: int = 10
    NAME_MAX_LENGTH: int = 15
    TITLE_MAX_LENGTH: int = 30
    SKILL_SPLIT_THRESHOLD: int = 30
    SKILL_PIECE_MAX_LENGTH: int = 100


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for contact details.

    ASCII-only character classes: Python's \\w would otherwise swallow the
    Chinese text that usually surrounds an address on the same line.
    """

    EMAIL: re.Pattern = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.ASCII)

    # Mainland mobile numbers: 1, then 3-9, then nine more digits with optional hyphens
    PHONE: re.Pattern = re.compile(r"1[3-9]\d[\d-]{8,}", re.ASCII)


# =============================================================================
# LINK PATTERNS
# =============================================================================


@dataclass(frozen=True)
class LinkPatterns:
    """Regex patterns and label vocabulary for profile links."""

    # Stops at whitespace and closing Markdown link punctuation
    URL: re.Pattern = re.compile(r"https?://[^\s)\]>]+")

    # Substrings that make a line worth scanning for a profile link
    PROFILE_HOSTS: tuple = ("github.com", "linkedin.com")

    # (host keyword, label), checked in order
    HOST_LABELS: tuple = (
        ("github", "GitHub"),
        ("linkedin", "LinkedIn"),
    )

    GENERIC_LABEL: str = "Link"


# =============================================================================
# PERIOD PATTERNS
# =============================================================================

_DASH = r"[-–—~到至]"
_YEAR_MONTH = r"\d{4}[.\-/年]\d{1,2}[月]?"


@dataclass(frozen=True)
class PeriodPatterns:
    """
    Regex patterns for date ranges ("periods").

    Periods are kept verbatim, so these only locate the span; nothing is
    parsed into dates. YEAR_MONTH_RANGE is always tried before YEAR_RANGE.
    Digits are ASCII only: full-width or Arabic-Indic years are not periods.
    """

    # 2021.06 - 至今, 2019年7月~2021年6月, 2020/03 – present
    YEAR_MONTH_RANGE: re.Pattern = re.compile(
        rf"({_YEAR_MONTH}\s*{_DASH}\s*(?:{_YEAR_MONTH}|至今|present|now|current))",
        re.IGNORECASE | re.ASCII,
    )

    # 2018 - 2022, 2020 - present
    YEAR_RANGE: re.Pattern = re.compile(
        rf"(\d{{4}}\s*{_DASH}\s*(?:\d{{4}}|至今|present))",
        re.IGNORECASE | re.ASCII,
    )


PERIOD_PATTERNS = [
    PeriodPatterns.YEAR_MONTH_RANGE,
    PeriodPatterns.YEAR_RANGE,
]


# =============================================================================
# STRUCTURE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class StructurePatterns:
    """Regex patterns for line-level structure (bullets, delimiters)."""

    # "-", "•" or a single "*" bullet; "**bold**" openers are not bullets
    BULLET: re.Pattern = re.compile(r"^(?:[-•]|\*(?!\*))\s*")

    # Education fallback path only accepts these bullet markers
    EDUCATION_BULLET_PREFIXES: tuple = ("-", "•")

    # Pipe-like field delimiter, ASCII or full-width
    PIPE_SPLIT: re.Pattern = re.compile(r"\s*[|｜]\s*")
    EDGE_PIPES: re.Pattern = re.compile(r"^[|｜]|[|｜]$")

    # Heading-marked "Name - Title" line, e.g. "#### 张三 - Java 开发工程师"
    NAME_TITLE: re.Pattern = re.compile(r"^#{1,6}\s*(.+?)\s*[-–—]\s*(.+)$")

    # Value after a (half- or full-width) colon
    AFTER_COLON: re.Pattern = re.compile(r"[：:]\s*(.+)$")

    # "Name: description" where the colon is not part of a URL scheme
    NAME_DESCRIPTION: re.Pattern = re.compile(r"^(?P<name>[^：:]+?)\s*[：:](?!//)\s*(?P<rest>.+)$")


# =============================================================================
# SKILL DELIMITERS
# =============================================================================


@dataclass(frozen=True)
class SkillDelimiters:
    """Delimiters for splitting a skills line into individual skills."""

    # Long lines: enumeration comma, ASCII comma, full-width comma
    LONG_LINE_SPLIT: re.Pattern = re.compile(r"[、,，]")

    # Short lines additionally split on "/"
    SHORT_LINE_SPLIT: re.Pattern = re.compile(r"[、,，/]")

    # Presence of any of these marks a short line as a list
    LIST_MARKERS: tuple = ("、", ",", "，")


# =============================================================================
# KEYWORD VOCABULARIES
# =============================================================================


@dataclass(frozen=True)
class KeywordVocabulary:
    """Substring vocabularies that steer line handling."""

    SCHOOL: re.Pattern = re.compile(r"大学|学院|university|college|institute", re.IGNORECASE)

    CONTACT_LINE: tuple = ("联系方式", "Contact")
    OBJECTIVE_LINE: tuple = ("求职意向", "Objective")
    LOCATION_LINE: tuple = ("所在地", "现居", "城市", "Location")

    # Job-title words that make a short header line a title candidate
    ROLE_WORDS: tuple = ("工程师", "开发", "设计", "经理", "engineer", "developer")

    # Project section line that lists the stack of the previous project
    TECH_STACK_LINE: re.Pattern = re.compile(
        r"^(?:使用技术|tech(?:nology)?\s*stack|technologies)\s*[：:]\s*(.+)$",
        re.IGNORECASE,
    )

    # Degree used when the education fallback path finds no third field
    FALLBACK_DEGREE: str = "本科"


# =============================================================================
# GPA PATTERNS
# =============================================================================


@dataclass(frozen=True)
class GpaPatterns:
    """Regex pattern for grade point averages in education lines."""

    # GPA 3.8/4.0, GPA：3.6, gpa: 88/100
    GPA: re.Pattern = re.compile(r"GPA\s*[：:]?\s*(\d+(?:\.\d+)?(?:\s*/\s*\d+(?:\.\d+)?)?)", re.IGNORECASE)
