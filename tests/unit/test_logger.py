"""Unit tests for session logging setup."""

import sys

import pytest
from loguru import logger

from resume_roaster.contexts.intake.logger import _log_info, setup_intake_logger
from resume_roaster.utils.logger import setup_console_logger, setup_logger


@pytest.fixture
def restore_logger():
    """Put loguru back to a single stderr sink after the test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


def read_log(log_file):
    # Removing the sinks closes the file so everything is flushed
    logger.remove()
    return log_file.read_text(encoding="utf-8")


@pytest.mark.unit
def test_setup_logger_writes_provenance(tmp_path, restore_logger):
    log_file = setup_logger("intake", log_dir=tmp_path, extra_provenance={"Source": "resume.md"})

    assert log_file == tmp_path / "intake.log"
    content = read_log(log_file)
    assert "Working directory:" in content
    assert "Source: resume.md" in content


@pytest.mark.unit
def test_setup_logger_creates_missing_directory(tmp_path, restore_logger):
    log_dir = tmp_path / "nested" / "logs"
    log_file = setup_logger("intake", log_dir=log_dir)

    assert log_dir.is_dir()
    assert log_file.exists()


@pytest.mark.unit
def test_intake_messages_are_prefixed(tmp_path, restore_logger):
    log_file = setup_intake_logger(log_dir=tmp_path, source="cv.txt")
    _log_info("parsing started")

    content = read_log(log_file)
    assert "Source: cv.txt" in content
    assert "[intake] parsing started" in content


@pytest.mark.unit
def test_console_logger_drops_debug(capsys, restore_logger):
    setup_console_logger()
    logger.debug("[intake] line 3: section none -> skills")
    logger.info("visible")

    err = capsys.readouterr().err
    assert "section none" not in err
    assert "visible" in err
