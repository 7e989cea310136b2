"""
Pytest fixtures for the script generator tests.
"""

import logging
from pathlib import Path

import pytest

from script_generator.core import ClassTemplate


CONSTANTS_TEXT = """\
Generates a class holding one constant per tag.

#
namespace Game.Generated {
    public static class Tags : object {
        @TAGS@
    }
}
#end  trailing notes are ignored

Anything after the end mark is ignored too.
"""


@pytest.fixture
def constants_text() -> str:
    """Text embedding a namespaced class template."""
    return CONSTANTS_TEXT


@pytest.fixture
def constants_template(constants_text: str) -> ClassTemplate:
    """ClassTemplate built from the constants text."""
    return ClassTemplate(constants_text)


@pytest.fixture
def template_file(tmp_path: Path, constants_text: str) -> Path:
    """Constants text written to a file."""
    path = tmp_path / "Tags.txt"
    path.write_text(constants_text, encoding="utf-8")
    return path


@pytest.fixture
def package_logger():
    """The package logger, with its handlers closed and removed afterwards."""
    logger = logging.getLogger("script_generator")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
