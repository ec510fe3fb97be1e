"""
Rule-based résumé parsing for the Intake context.

A single forward pass over the lines of a résumé. The pass is written as a
pure reducer: step(state, line) returns a new ParserState, so every line
can be tested in isolation. parse_resume_text() folds the reducer over the
whole document, closes whatever is still open, and applies the defaulting
policy.

Per-line dispatch order:
1. Blank line: skipped (still counts towards the header window)
2. Section header: closes the open job, flushes the summary, switches section
3. Header block (no section yet, first lines only): name / title / contact
4. Contact fields on any line: email, phone, profile links
5. Section-specific handling
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Optional, Union

from resume_roaster.contexts.intake.defaults import apply_defaults
from resume_roaster.contexts.intake.exceptions import UnsupportedResumeFileError
from resume_roaster.contexts.intake.extraction_patterns import (
    GpaPatterns,
    KeywordVocabulary,
    ParserLimits,
    SkillDelimiters,
    StructurePatterns,
)
from resume_roaster.contexts.intake.field_extractor import (
    extract_email,
    extract_gpa,
    extract_link,
    extract_period,
    extract_phone,
    has_profile_link,
    split_pipe_fields,
    strip_bullet,
)
from resume_roaster.contexts.intake.logger import log_parse_result, log_section_change
from resume_roaster.contexts.intake.normalizer import preprocess_resume_text
from resume_roaster.contexts.intake.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
)
from resume_roaster.contexts.intake.section_patterns import (
    detect_section,
    strip_heading_markers,
    strip_markdown,
)

ALLOWED_EXTENSIONS = (".md", ".markdown", ".txt")


# =============================================================================
# PARSER STATE
# =============================================================================


@dataclass(frozen=True)
class NoOpenRecord:
    """No experience entry is accumulating highlights."""


@dataclass(frozen=True)
class OpenRecord:
    """An experience entry that is still accumulating highlights."""

    entry: ExperienceEntry


OpenExperience = Union[NoOpenRecord, OpenRecord]

NO_OPEN_RECORD = NoOpenRecord()


@dataclass(frozen=True)
class ParserState:
    """
    Accumulator state threaded through the forward pass.

    Attributes:
        line_number: Raw index of the next line (blank lines included)
        current_section: Active section tag, None before the first header
        open_experience: The job currently collecting highlights, if any
        summary_buffer: Summary lines not yet flushed into resume.summary
        resume: Everything extracted so far (no defaults applied)
    """

    line_number: int = 0
    current_section: Optional[str] = None
    open_experience: OpenExperience = NO_OPEN_RECORD
    summary_buffer: tuple[str, ...] = ()
    resume: ParsedResume = ParsedResume()


def _update_resume(state: ParserState, **changes) -> ParserState:
    return replace(state, resume=replace(state.resume, **changes))


# =============================================================================
# BOUNDARIES
# =============================================================================


def close_open_experience(state: ParserState) -> ParserState:
    """
    Append the open experience entry (if any) to the résumé.

    Args:
        state: Current parser state

    Returns:
        State with no open record
    """
    if isinstance(state.open_experience, NoOpenRecord):
        return state

    if isinstance(state.open_experience, OpenRecord):
        state = _update_resume(
            state, experience=state.resume.experience + (state.open_experience.entry,)
        )
        return replace(state, open_experience=NO_OPEN_RECORD)

    raise TypeError(f"Unknown open experience state: {state.open_experience!r}")


def flush_summary(state: ParserState) -> ParserState:
    """Join buffered summary lines into resume.summary."""
    if not state.summary_buffer:
        return state

    summary = "\n".join(state.summary_buffer)
    if state.resume.summary:
        # A second summary section continues the first
        summary = f"{state.resume.summary}\n{summary}"

    state = _update_resume(state, summary=summary)
    return replace(state, summary_buffer=())


def enter_section(state: ParserState, section: str) -> ParserState:
    """Close the running records and switch to a new section."""
    log_section_change(state.line_number, state.current_section, section)
    state = close_open_experience(state)
    state = flush_summary(state)
    return replace(state, current_section=section)


def finish(state: ParserState) -> ParsedResume:
    """
    Close everything still open at end of input.

    Returns:
        ParsedResume as extracted, before the defaulting policy
    """
    state = close_open_experience(state)
    state = flush_summary(state)
    return state.resume


# =============================================================================
# LINE-SHAPE PARSERS
# =============================================================================


def parse_experience_header(line: str) -> Optional[ExperienceEntry]:
    """
    Parse a job header line: "Company | Role | 2021.06 - 至今".

    A header needs a period plus at least one other pipe-separated field.
    With a single field, that field is the company and the role is empty.

    Returns:
        New ExperienceEntry without highlights, or None if the line is not a header
    """
    period = extract_period(line)
    if not period:
        return None

    parts = split_pipe_fields(line.replace(period, "", 1))
    if not parts:
        return None

    return ExperienceEntry(
        company=strip_markdown(parts[0]),
        role=strip_markdown(parts[1]) if len(parts) > 1 else "",
        period=period,
    )


def _remove_gpa(text: str) -> tuple[str, str]:
    """Split a GPA token off an education line. Returns (text, gpa)."""
    gpa = extract_gpa(text) or ""
    if gpa:
        text = GpaPatterns.GPA.sub("", text)
    return text, gpa


def parse_education_line(line: str) -> Optional[EducationEntry]:
    """
    Parse an education line: "School | Major | Degree | 2017.09 - 2021.06".

    Requires both a period and a school keyword (大学, 学院, university,
    college, institute). Fields are positional: school, major, degree; with
    only two fields the second doubles as the degree.

    Returns:
        EducationEntry, or None if the line does not qualify
    """
    period = extract_period(line)
    if not period:
        return None

    if not KeywordVocabulary.SCHOOL.search(line):
        return None

    remaining = strip_bullet(line.replace(period, "", 1).strip())
    remaining, gpa = _remove_gpa(remaining)
    parts = split_pipe_fields(remaining)

    return EducationEntry(
        school=strip_markdown(parts[0]) if parts else "",
        major=strip_markdown(parts[1]) if len(parts) > 1 else "",
        degree=strip_markdown(_first_present(parts, 2, 1)),
        period=period,
        gpa=gpa,
    )


def parse_education_bullet(line: str) -> Optional[EducationEntry]:
    """
    Fallback for bulleted education lines without a school keyword.

    "- 某培训中心 | 前端开发 | 2020.03 - 2020.09" still yields an entry;
    the degree defaults to 本科 when no third field is given. The school
    may come out empty.
    """
    if not line.startswith(StructurePatterns.EDUCATION_BULLET_PREFIXES):
        return None

    clean = strip_bullet(line)
    period = extract_period(clean)
    if not period:
        return None

    remaining, gpa = _remove_gpa(clean.replace(period, "", 1))
    parts = split_pipe_fields(remaining)

    return EducationEntry(
        school=strip_markdown(parts[0]) if parts else "",
        major=strip_markdown(parts[1]) if len(parts) > 1 else "",
        degree=strip_markdown(parts[2]) if len(parts) > 2 else KeywordVocabulary.FALLBACK_DEGREE,
        period=period,
        gpa=gpa,
    )


def _first_present(parts: list[str], *indexes: int) -> str:
    for index in indexes:
        if index < len(parts) and parts[index]:
            return parts[index]
    return ""


def split_skills(line: str) -> list[str]:
    """
    Split a skills line into individual skills.

    Long lines (over 30 chars) are split on commas only when that yields
    several pieces; short lines are split whenever they contain a comma.
    Anything else is a single skill.

    Args:
        line: Skills line with the bullet marker already removed

    Returns:
        Skills in source order (possibly empty)
    """
    if len(line) > ParserLimits.SKILL_SPLIT_THRESHOLD:
        pieces = [piece.strip() for piece in SkillDelimiters.LONG_LINE_SPLIT.split(line)]
        pieces = [
            piece for piece in pieces if 0 < len(piece) < ParserLimits.SKILL_PIECE_MAX_LENGTH
        ]
        return pieces if len(pieces) > 1 else [line]

    if any(marker in line for marker in SkillDelimiters.LIST_MARKERS):
        return [piece.strip() for piece in SkillDelimiters.SHORT_LINE_SPLIT.split(line) if piece.strip()]

    return [line] if line else []


def parse_project_header(line: str) -> ProjectEntry:
    """
    Build a project from its title line.

    "电商平台 | 后端负责人 | 2021.03 - 2021.09" -> name "电商平台",
    description "后端负责人". "**电商平台**：微服务改造" -> name "电商平台",
    description "微服务改造".
    """
    period = extract_period(line)
    text = line.replace(period, "", 1) if period else line
    parts = split_pipe_fields(text)

    if len(parts) > 1:
        name, description = parts[0], " | ".join(parts[1:])
    else:
        match = StructurePatterns.NAME_DESCRIPTION.match(text.strip())
        if match:
            name, description = match.group("name"), match.group("rest")
        else:
            name, description = text, ""

    return ProjectEntry(
        name=strip_markdown(strip_heading_markers(name)),
        description=description.strip(),
    )


# =============================================================================
# HEADER BLOCK
# =============================================================================


def _contains_any(line: str, keywords: tuple) -> bool:
    return any(keyword in line for keyword in keywords)


def parse_header_line(state: ParserState, line: str) -> Optional[ParserState]:
    """
    Try to read a header-block line (name, title, contact, objective, location).

    Returns:
        Updated state if the line was consumed, None to let it fall through
    """
    resume = state.resume

    if not resume.name:
        # "#### 张三 - Java 开发工程师"
        match = StructurePatterns.NAME_TITLE.match(line)
        if match:
            return _update_resume(
                state,
                name=strip_markdown(match.group(1)),
                title=strip_markdown(match.group(2)),
            )

    if _contains_any(line, KeywordVocabulary.CONTACT_LINE):
        # The contact line is authoritative for email/phone
        changes = {}
        email = extract_email(line)
        if email:
            changes["email"] = email
        phone = extract_phone(line)
        if phone:
            changes["phone"] = phone
        if has_profile_link(line):
            link = extract_link(line)
            if link:
                changes["links"] = resume.links + (link,)
        return _update_resume(state, **changes)

    if _contains_any(line, KeywordVocabulary.OBJECTIVE_LINE):
        match = StructurePatterns.AFTER_COLON.search(line)
        if match and not resume.title:
            return _update_resume(state, title=strip_markdown(match.group(1)))
        return state

    if _contains_any(line, KeywordVocabulary.LOCATION_LINE):
        match = StructurePatterns.AFTER_COLON.search(line)
        if match:
            if not resume.location:
                return _update_resume(state, location=strip_markdown(match.group(1)))
            return state

    if (
        not resume.name
        and len(line) <= ParserLimits.NAME_MAX_LENGTH
        and "@" not in line
        and "http" not in line
    ):
        name = strip_markdown(strip_heading_markers(line))
        if name:
            return _update_resume(state, name=name)

    return None


def extract_contact_fields(state: ParserState, line: str) -> ParserState:
    """Pick up email, phone and profile links from any line."""
    resume = state.resume
    changes = {}

    if not resume.email:
        email = extract_email(line)
        if email:
            changes["email"] = email

    if not resume.phone:
        phone = extract_phone(line)
        if phone:
            changes["phone"] = phone

    if has_profile_link(line):
        link = extract_link(line)
        if link:
            changes["links"] = resume.links + (link,)

    if not changes:
        return state
    return _update_resume(state, **changes)


# =============================================================================
# SECTION HANDLERS
# =============================================================================


def handle_experience_line(state: ParserState, line: str, index: int) -> ParserState:
    """Open a new job on a header line, otherwise add a highlight to the open one."""
    header = parse_experience_header(line)
    if header:
        state = close_open_experience(state)
        return replace(state, open_experience=OpenRecord(header))

    if isinstance(state.open_experience, OpenRecord):
        highlight = strip_bullet(line)
        if highlight:
            entry = state.open_experience.entry.with_highlight(highlight)
            return replace(state, open_experience=OpenRecord(entry))

    return state


def handle_education_line(state: ParserState, line: str, index: int) -> ParserState:
    entry = parse_education_line(line) or parse_education_bullet(line)
    if entry is None:
        return state
    return _update_resume(state, education=state.resume.education + (entry,))


def handle_skills_line(state: ParserState, line: str, index: int) -> ParserState:
    skills = split_skills(strip_bullet(line))
    if not skills:
        return state
    return _update_resume(state, skills=state.resume.skills + tuple(skills))


def handle_summary_line(state: ParserState, line: str, index: int) -> ParserState:
    clean = strip_bullet(line)
    if not clean:
        return state
    return replace(state, summary_buffer=state.summary_buffer + (clean,))


def _looks_like_project_title(line: str) -> bool:
    return (
        len(split_pipe_fields(line)) > 1
        or line.startswith(("#", "**", "【"))
        or len(line) <= ParserLimits.TITLE_MAX_LENGTH
    )


def handle_projects_line(state: ParserState, line: str, index: int) -> ParserState:
    """
    Build project entries.

    A title-like, non-bulleted line opens a project; a tech stack line sets
    the latest project's technologies; other lines extend its description.
    """
    clean = strip_bullet(line)
    if not clean:
        return state

    projects = state.resume.projects

    tech_match = KeywordVocabulary.TECH_STACK_LINE.match(strip_markdown(clean))
    if tech_match and projects:
        tech = tuple(
            piece.strip()
            for piece in SkillDelimiters.SHORT_LINE_SPLIT.split(tech_match.group(1))
            if piece.strip()
        )
        projects = projects[:-1] + (replace(projects[-1], tech=tech),)
        return _update_resume(state, projects=projects)

    is_bullet = clean != line
    if not projects or (not is_bullet and _looks_like_project_title(clean)):
        return _update_resume(state, projects=projects + (parse_project_header(clean),))

    last = projects[-1]
    description = f"{last.description}\n{clean}" if last.description else clean
    projects = projects[:-1] + (replace(last, description=description),)
    return _update_resume(state, projects=projects)


def handle_preamble_line(state: ParserState, line: str, index: int) -> ParserState:
    """Lines before any section: a short line naming a role becomes the title."""
    if state.resume.title or index >= ParserLimits.HEADER_LINE_WINDOW:
        return state

    if len(line) > ParserLimits.TITLE_MAX_LENGTH:
        return state

    lowered = line.lower()
    if any(word in lowered for word in KeywordVocabulary.ROLE_WORDS):
        return _update_resume(state, title=strip_markdown(strip_heading_markers(line)))

    return state


SectionHandler = Callable[[ParserState, str, int], ParserState]

SECTION_HANDLERS: dict[Optional[str], SectionHandler] = {
    None: handle_preamble_line,
    "experience": handle_experience_line,
    "education": handle_education_line,
    "skills": handle_skills_line,
    "summary": handle_summary_line,
    "projects": handle_projects_line,
}


# =============================================================================
# REDUCER
# =============================================================================


def step(state: ParserState, line: str) -> ParserState:
    """
    Advance the parser by one raw line.

    Pure: the input state is never modified.

    Args:
        state: State after the previous line
        line: Next raw line (untrimmed)

    Returns:
        State after this line
    """
    index = state.line_number
    state = replace(state, line_number=index + 1)

    stripped = line.strip()
    if not stripped:
        return state

    section = detect_section(stripped)
    if section:
        return enter_section(state, section)

    if state.current_section is None and index < ParserLimits.HEADER_LINE_WINDOW:
        consumed = parse_header_line(state, stripped)
        if consumed is not None:
            return consumed

    state = extract_contact_fields(state, stripped)

    handler = SECTION_HANDLERS[state.current_section]
    return handler(state, stripped, index)


def parse_resume_text(text: str) -> ParsedResume:
    """
    Parse résumé text into a ParsedResume.

    This is the main parsing function. It never raises on malformed input:
    lines it cannot attribute are skipped, and the defaulting policy fills
    whatever is still missing.

    Args:
        text: Raw résumé text (Markdown or plain text)

    Returns:
        Fully populated ParsedResume
    """
    text = preprocess_resume_text(text or "")

    state = ParserState()
    for line in text.split("\n"):
        state = step(state, line)

    resume, defaulted_fields = apply_defaults(finish(state))
    log_parse_result(resume, defaulted_fields)
    return resume


def load_resume_text(file_path: Path) -> str:
    """
    Read a résumé file after checking its extension.

    Args:
        file_path: Path to a .md, .markdown or .txt file

    Returns:
        File content

    Raises:
        UnsupportedResumeFileError: If the extension is not accepted
        FileNotFoundError: If the file does not exist
    """
    file_path = Path(file_path)
    if file_path.suffix.lower() not in ALLOWED_EXTENSIONS:
        raise UnsupportedResumeFileError(file_path, ALLOWED_EXTENSIONS)

    return file_path.read_text(encoding="utf-8")


def parse_resume_file(file_path: Path) -> ParsedResume:
    """
    Parse a résumé file.

    Args:
        file_path: Path to a .md, .markdown or .txt file

    Returns:
        Fully populated ParsedResume
    """
    return parse_resume_text(load_resume_text(file_path))
