"""
Technology keyword vocabulary for highlight rendering.

Templates emphasize well-known technology names inside highlights and
skills. Matching is case-insensitive (acronyms such as REST excepted) and
respects word edges, so "Go" does not light up inside "Google" and "Java"
does not match "JavaScript".
"""

import re
from dataclasses import replace

from resume_roaster.contexts.intake.resume_data_structure import ParsedResume

TECH_KEYWORDS = (
    "React", "Vue", "Angular", "TypeScript", "JavaScript", "Node.js",
    "Python", "Java", "Go", "Rust", "C++", "Swift", "Kotlin",
    "Redis", "MySQL", "PostgreSQL", "MongoDB", "Elasticsearch",
    "Kubernetes", "Docker", "AWS", "GCP", "Azure",
    "GraphQL", "REST", "gRPC", "Kafka", "RabbitMQ",
    "TensorFlow", "PyTorch", "Spark", "Hadoop",
    "Spring Boot", "MyBatis", "JVM", "HTML", "CSS",
)


def _keyword_pattern(keyword: str) -> str:
    # \b does not work next to "+" or "." and treats CJK as word chars,
    # so edges are ASCII-only lookarounds
    body = re.escape(keyword)
    if keyword.isupper():
        # Acronyms stay case-sensitive: "REST" but not "the rest"
        body = f"(?-i:{body})"
    return rf"(?<![A-Za-z0-9_.+#]){body}(?![A-Za-z0-9_+#]|\.[A-Za-z0-9])"


# Longest first so "Spring Boot" wins over shorter overlapping names
_ORDERED_KEYWORDS = sorted(TECH_KEYWORDS, key=len, reverse=True)

TECH_KEYWORD_PATTERN = re.compile(
    "|".join(_keyword_pattern(keyword) for keyword in _ORDERED_KEYWORDS),
    re.IGNORECASE,
)

_CANONICAL = {keyword.lower(): keyword for keyword in TECH_KEYWORDS}

# Existing **bold** spans are left alone
_BOLD_SPAN = re.compile(r"\*\*.*?\*\*")


def find_tech_keywords(text: str) -> list[str]:
    """
    List the technology keywords mentioned in a text.

    Args:
        text: Highlight, skill or any free text

    Returns:
        Canonical keyword spellings, each once, in vocabulary order
    """
    if not text:
        return []

    found = {_CANONICAL[match.group(0).lower()] for match in TECH_KEYWORD_PATTERN.finditer(text)}
    return [keyword for keyword in TECH_KEYWORDS if keyword in found]


def emphasize_tech_keywords(text: str) -> str:
    """
    Wrap technology keywords in Markdown bold.

    "用 redis 做缓存" -> "用 **redis** 做缓存". Text already inside **…**
    is not wrapped again.
    """
    if not text:
        return text

    pieces = []
    last_end = 0
    for bold in _BOLD_SPAN.finditer(text):
        pieces.append(TECH_KEYWORD_PATTERN.sub(r"**\g<0>**", text[last_end : bold.start()]))
        pieces.append(bold.group(0))
        last_end = bold.end()
    pieces.append(TECH_KEYWORD_PATTERN.sub(r"**\g<0>**", text[last_end:]))

    return "".join(pieces)


def emphasize_highlights(resume: ParsedResume) -> ParsedResume:
    """Return a copy of the résumé with keywords bolded in every job highlight."""
    experience = tuple(
        replace(entry, highlights=tuple(emphasize_tech_keywords(h) for h in entry.highlights))
        for entry in resume.experience
    )
    return replace(resume, experience=experience)
