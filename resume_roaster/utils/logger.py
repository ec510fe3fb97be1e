"""
Generic loguru setup for parsing sessions.

Context-specific wrappers (with their own message prefix) live in
contexts/{context}/logger.py and should be preferred inside a context.
Library code only emits messages; sinks are configured here, once per
session, by the entry point that owns the process (the CLI).
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from resume_roaster import __version__

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path = None,
    extra_provenance: dict = None,
    level_colors: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output to a session log file and stderr.

    Any previously installed sinks are dropped. The file receives everything
    from DEBUG up; stderr gets console_level and above so that YAML/JSON on
    stdout can still be piped.

    Args:
        context_name: Log file stem, e.g. "intake" -> intake.log
        log_dir: Session directory, created if missing (defaults to LOGS_PATH)
        extra_provenance: Extra key-value pairs for the session header
        level_colors: Per-level color overrides (e.g., {"INFO": "<cyan>"})
        console_level: Minimum level shown on stderr

    Returns:
        Path to log file
    """
    log_dir = LOGS_PATH if log_dir is None else Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write a session header: command line, working directory, versions."""
    header = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "resume_roaster": __version__,
        **(extra_context or {}),
    }

    logger.info("-" * 60)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("-" * 60)


def setup_console_logger(console_level: str = "INFO") -> None:
    """
    Replace loguru's default DEBUG sink with a quieter stderr sink.

    Used when no session log is requested, so per-line parser messages
    stay out of the terminal.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)
