"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resume_roaster.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path = None, source: str = "stdin") -> Path:
    """
    Setup logger for an intake (parsing) session.

    Args:
        log_dir: Directory for this session (defaults to LOGS_PATH)
        source: What is being parsed, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from resume_roaster.contexts.intake.logger import setup_intake_logger, _log_info

        log_file = setup_intake_logger(source="resume.md")
        _log_info("Starting parsing...")
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_section_change(line_number: int, previous: str, current: str) -> None:
    """Log a section transition in the forward pass."""
    _log_debug(f"line {line_number}: section {previous or 'none'} -> {current}")


def log_parse_result(resume, defaulted_fields: list[str]) -> None:
    """
    Log a parse summary.

    Args:
        resume: ParsedResume after defaulting
        defaulted_fields: Field names filled by the defaulting policy
    """
    _log_debug(
        f"Parsed {len(resume.experience)} experience, {len(resume.education)} education, "
        f"{len(resume.skills)} skills, {len(resume.projects)} projects, {len(resume.links)} links"
    )
    if defaulted_fields:
        _log_debug(f"Defaulted fields: {', '.join(defaulted_fields)}")
