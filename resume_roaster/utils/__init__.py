"""
Shared utilities for resume_roaster.

Common functionality used across contexts:
- Session logging setup
"""

from resume_roaster.utils.logger import LOGS_PATH, log_provenance, setup_console_logger, setup_logger

__all__ = ["LOGS_PATH", "log_provenance", "setup_console_logger", "setup_logger"]
