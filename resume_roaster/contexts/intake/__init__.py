"""
Intake Context

Responsibilities:
- Ingests résumé text (pasted or read from .md / .txt files)
- Classifies section headers and extracts contact fields, periods and links
- Accumulates experience, education, skills, summary and project entries
- Fills missing required fields with placeholders

Owns: Résumé text parsing logic and the ParsedResume document model
Never: Calls language models or makes layout decisions
"""

from resume_roaster.contexts.intake.exceptions import UnsupportedResumeFileError
from resume_roaster.contexts.intake.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    Link,
    ParsedResume,
    ProjectEntry,
)
from resume_roaster.contexts.intake.resume_parser import (
    ParserState,
    load_resume_text,
    parse_resume_file,
    parse_resume_text,
    step,
)
from resume_roaster.contexts.intake.section_patterns import detect_section, strip_markdown

__all__ = [
    # Parsing entry points
    "parse_resume_text",
    "parse_resume_file",
    "load_resume_text",
    # Reducer
    "ParserState",
    "step",
    # Line classification
    "detect_section",
    "strip_markdown",
    # Data structure classes
    "ParsedResume",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "Link",
    "UnsupportedResumeFileError",
]
