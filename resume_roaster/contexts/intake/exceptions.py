"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional, Sequence


class UnsupportedResumeFileError(ValueError):
    """
    Exception raised when a résumé file is not a plain-text format.

    The parser only reads Markdown and plain text; anything else (PDF,
    Word, images) has to be converted before it reaches the intake context.

    Attributes:
        path: The rejected file
        allowed_extensions: Extensions that would have been accepted
    """

    def __init__(
        self,
        path: Path,
        allowed_extensions: Sequence[str],
        message: Optional[str] = None,
    ):
        self.path = Path(path)
        self.allowed_extensions = tuple(allowed_extensions)

        if message is None:
            message = (
                f"Unsupported résumé file: {self.path.name} "
                f"(expected one of {', '.join(self.allowed_extensions)})"
            )
        self.message = message

        super().__init__(message)
