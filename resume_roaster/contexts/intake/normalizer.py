"""
Résumé text normalizer for the Intake context.

Cleans invisible characters out of pasted or uploaded text before the
forward pass. Text that users can see (dashes, full-width punctuation,
quotes) is left untouched: periods and highlights are stored verbatim.
"""

import re

# Problematic char -> replacement
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\u3000": " ",  # ideographic space
    # Zero-width characters -> remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
}

LINE_BREAKS = re.compile(r"\r\n?|\u2028|\u2029")


def normalize_unicode(text: str) -> str:
    """
    Replace invisible unicode characters that break pattern matching.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with invisible characters removed or turned into plain spaces
    """
    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def normalize_line_breaks(text: str) -> str:
    """Turn CRLF, CR and unicode line/paragraph separators into "\\n"."""
    return LINE_BREAKS.sub("\n", text)


def preprocess_resume_text(text: str) -> str:
    """
    Preprocess résumé text before the forward pass.

    This is the main entry point for text normalization.

    Args:
        text: Raw résumé text

    Returns:
        Text ready to be split into lines
    """
    text = normalize_line_breaks(text)
    return normalize_unicode(text)
