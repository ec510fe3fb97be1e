"""
Parsed résumé data structures for the Intake context.

Provides the ParsedResume record handed to template renderers, plus the
entry records it is made of. All records are frozen; sequences are tuples.
Callers that want to edit a result either derive a new record with
dataclasses.replace() or take a mutable copy with to_dict().
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Link:
    """
    Profile link discovered in the résumé text.

    Attributes:
        label: "GitHub", "LinkedIn" or the generic "Link"
        url: URL as written in the source
    """

    label: str
    url: str


@dataclass(frozen=True)
class ExperienceEntry:
    """
    One job in the work experience section.

    Attributes:
        company: Employer name (Markdown stripped)
        role: Job title (Markdown stripped), may be empty
        period: Verbatim date range, e.g. "2021.06 - 至今"
        location: Work location, empty when unknown
        highlights: Achievement lines in source order, Markdown preserved
    """

    company: str
    role: str
    period: str
    location: str = ""
    highlights: tuple[str, ...] = ()

    def with_highlight(self, highlight: str) -> "ExperienceEntry":
        """Return a copy with one more highlight appended."""
        return ExperienceEntry(
            company=self.company,
            role=self.role,
            period=self.period,
            location=self.location,
            highlights=self.highlights + (highlight,),
        )


@dataclass(frozen=True)
class EducationEntry:
    """
    One education record. Complete at the line that produced it.

    Attributes:
        school: School name, may be empty on the bullet fallback path
        degree: Degree, e.g. "本科" or "Master"
        major: Field of study, empty when unknown
        period: Verbatim date range
        gpa: Grade point average as written, empty when unknown
    """

    school: str
    degree: str
    period: str
    major: str = ""
    gpa: str = ""


@dataclass(frozen=True)
class ProjectEntry:
    """
    One project in the projects section.

    Attributes:
        name: Project name
        description: Newline-joined description lines
        tech: Technologies used, empty when none were listed
    """

    name: str
    description: str = ""
    tech: tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedResume:
    """
    Normalized résumé document.

    Returned fully populated by parse_resume_text(): name, title, email,
    phone, experience, education and skills always carry a value (real or
    placeholder). links, projects, location and summary may be empty.

    Factory methods:
        from_text(text) - Parse raw résumé text
        from_file(path) - Load and parse a .md / .markdown / .txt file
    """

    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    links: tuple[Link, ...] = ()
    summary: str = ""
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: tuple[str, ...] = ()
    projects: tuple[ProjectEntry, ...] = ()

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(cls, text: str) -> "ParsedResume":
        """
        Parse résumé text and create a ParsedResume.

        Args:
            text: Raw résumé text (Markdown or plain text)

        Returns:
            ParsedResume with defaults applied
        """
        from resume_roaster.contexts.intake.resume_parser import parse_resume_text

        return parse_resume_text(text)

    @classmethod
    def from_file(cls, file_path: Path) -> "ParsedResume":
        """
        Load a résumé file and create a ParsedResume.

        Args:
            file_path: Path to a .md, .markdown or .txt file

        Returns:
            ParsedResume with defaults applied

        Raises:
            UnsupportedResumeFileError: If the file extension is not accepted
            FileNotFoundError: If the file does not exist
        """
        from resume_roaster.contexts.intake.resume_parser import parse_resume_file

        return parse_resume_file(Path(file_path))

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to plain dicts and lists.

        The result is an independent, mutable copy suitable for JSON/YAML
        serialization or for renderers that edit the data in place.
        """
        data = asdict(self)
        return _tuples_to_lists(data)


def _tuples_to_lists(value: Any) -> Any:
    """Recursively turn tuples into lists inside an asdict() result."""
    if isinstance(value, dict):
        return {key: _tuples_to_lists(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_tuples_to_lists(item) for item in value]
    return value
