"""
Heuristic field extraction from single résumé lines.

Every extractor here is total: it looks at one line, returns the value it
found or None, and never raises. Extractors share no state and can run in
any order.
"""

from typing import Optional
from urllib.parse import urlsplit

from resume_roaster.contexts.intake.extraction_patterns import (
    PERIOD_PATTERNS,
    ContactPatterns,
    GpaPatterns,
    LinkPatterns,
    StructurePatterns,
)
from resume_roaster.contexts.intake.resume_data_structure import Link


def extract_email(line: str) -> Optional[str]:
    """Extract the first email-shaped token."""
    match = ContactPatterns.EMAIL.search(line)
    if match:
        return match.group(0)
    return None


def extract_phone(line: str) -> Optional[str]:
    """
    Extract the first mainland mobile number, hyphens removed.

    "138-0013-8000" -> "13800138000"
    """
    match = ContactPatterns.PHONE.search(line)
    if match:
        return match.group(0).replace("-", "")
    return None


def extract_link(line: str) -> Optional[Link]:
    """
    Extract the first http(s) URL and label it by host.

    Args:
        line: Résumé line

    Returns:
        Link labeled "GitHub", "LinkedIn" or the generic label, or None
    """
    match = LinkPatterns.URL.search(line)
    if not match:
        return None

    url = match.group(0)
    return Link(label=label_for_url(url), url=url)


def label_for_url(url: str) -> str:
    """Infer a display label from the URL's host."""
    try:
        host = urlsplit(url).netloc.lower()
    except ValueError:
        # Malformed netloc (e.g. an unclosed IPv6 bracket)
        host = url.lower()

    for keyword, label in LinkPatterns.HOST_LABELS:
        if keyword in host:
            return label
    return LinkPatterns.GENERIC_LABEL


def has_profile_link(line: str) -> bool:
    """True if the line mentions a GitHub or LinkedIn address."""
    return any(host in line for host in LinkPatterns.PROFILE_HOSTS)


def extract_period(line: str) -> Optional[str]:
    """
    Extract the first date range ("period") from a line.

    Year-month ranges are tried before bare year ranges; whichever pattern
    matches first wins, even if the other would match earlier in the line.

    Args:
        line: Résumé line

    Returns:
        Period text exactly as written (trimmed), or None
    """
    for pattern in PERIOD_PATTERNS:
        match = pattern.search(line)
        if match:
            return match.group(1).strip()
    return None


def extract_gpa(line: str) -> Optional[str]:
    """Extract a GPA value such as "3.8/4.0"."""
    match = GpaPatterns.GPA.search(line)
    if match:
        return match.group(1).replace(" ", "")
    return None


def strip_bullet(line: str) -> str:
    """
    Remove a leading bullet marker ("-", "•" or a single "*").

    Bold openers survive: "**主导**重构" stays as it is.
    """
    return StructurePatterns.BULLET.sub("", line, count=1)


def split_pipe_fields(text: str) -> list[str]:
    """
    Split a line on pipe delimiters, dropping empty fields.

    Leading/trailing pipes are ignored: "| A | B |" -> ["A", "B"].
    """
    text = StructurePatterns.EDGE_PIPES.sub("", text.strip()).strip()
    return [part.strip() for part in StructurePatterns.PIPE_SPLIT.split(text) if part.strip()]
