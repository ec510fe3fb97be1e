"""
Templating Context

Responsibilities:
- Prepares a ParsedResume for template renderers
- Lifts polished highlight lines into the most recent job
- Emphasizes technology keywords in highlight text

Owns: Post-parse transforms on the ParsedResume
Never: Parses raw résumé text or decides page layout
"""

from resume_roaster.contexts.templating.polish_override import (
    apply_polished_highlights,
    extract_polished_highlights,
)
from resume_roaster.contexts.templating.tech_keywords import (
    TECH_KEYWORDS,
    emphasize_highlights,
    emphasize_tech_keywords,
    find_tech_keywords,
)

__all__ = [
    "apply_polished_highlights",
    "extract_polished_highlights",
    "TECH_KEYWORDS",
    "emphasize_highlights",
    "emphasize_tech_keywords",
    "find_tech_keywords",
]
