"""
Polished highlight override.

The AI polishing service returns a rewritten résumé as free text. Renderers
do not re-parse it; instead the achievement-like lines are lifted out and
replace the highlights of the most recent job (experience[0]).
"""

from dataclasses import replace

from resume_roaster.contexts.intake.field_extractor import strip_bullet
from resume_roaster.contexts.intake.resume_data_structure import ParsedResume
from resume_roaster.contexts.templating.logger import _log_debug

MIN_HIGHLIGHT_LENGTH = 10
MAX_HIGHLIGHT_LENGTH = 200
MAX_HIGHLIGHTS = 6

# Words that mark a line as an achievement: percent, improved, optimized, responsible, led
ACHIEVEMENT_MARKERS = ("%", "提升", "优化", "负责", "主导")
BULLET_PREFIXES = ("-", "•")


def _is_achievement_line(line: str) -> bool:
    if not MIN_HIGHLIGHT_LENGTH < len(line) < MAX_HIGHLIGHT_LENGTH:
        return False
    return line.startswith(BULLET_PREFIXES) or any(
        marker in line for marker in ACHIEVEMENT_MARKERS
    )


def extract_polished_highlights(polished_content: str) -> list[str]:
    """
    Pick achievement lines out of AI-polished text.

    Args:
        polished_content: Free text returned by the polishing service

    Returns:
        Up to six bullet-stripped highlight lines, in source order
    """
    if not polished_content:
        return []

    highlights = []
    for line in polished_content.split("\n"):
        trimmed = line.strip()
        if not _is_achievement_line(trimmed):
            continue
        highlights.append(strip_bullet(trimmed).strip())
        if len(highlights) == MAX_HIGHLIGHTS:
            break

    return highlights


def apply_polished_highlights(resume: ParsedResume, polished_content: str) -> ParsedResume:
    """
    Replace the first job's highlights with polished ones.

    The input record is left untouched. When the polished text has no
    achievement lines, or the résumé has no experience, the original record
    is returned as is.

    Args:
        resume: Parsed résumé
        polished_content: Free text returned by the polishing service

    Returns:
        ParsedResume with experience[0].highlights overridden
    """
    highlights = extract_polished_highlights(polished_content)
    if not highlights or not resume.experience:
        return resume

    first = replace(resume.experience[0], highlights=tuple(highlights))
    _log_debug(f"Overriding {first.company or 'first job'} highlights with {len(highlights)} polished lines")
    return replace(resume, experience=(first,) + resume.experience[1:])
