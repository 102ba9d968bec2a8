"""Test utilities for the tidyconf test suite.

This module provides helpers for creating configuration files and temporary
directories, and for reading back what a configuration saves.
"""

import io
import shutil
import tempfile
from pathlib import Path
from typing import Union

from tidyconf import TidyConfig

SAMPLE_CONFIG = """\
// sample configuration
# comment lines start with '#' or '/'
indent: auto
indent-spaces: 4
wrap: 72
markup: yes
output-xhtml: yes
new-inline-tags: cfif, cfelse
new-blocklevel-tags: foo,
  bar, baz
doctype: strict
char-encoding: utf8
"""


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_config(directory: Path, text: str, name: str = "test.tidyrc", encoding: str = "ascii") -> Path:
    """Write ``text`` as a configuration file and return its path."""
    path = directory / name
    path.write_bytes(text.encode(encoding))
    return path


def config_from_text(text: str, directory: Union[Path, None] = None) -> TidyConfig:
    """Parse configuration text through a real file and return the result."""
    temp = directory or create_test_temp_dir()
    try:
        config = TidyConfig()
        config.parse_file(write_config(temp, text))
        return config
    finally:
        if directory is None:
            cleanup_test_dir(temp)


def saved_text(config: TidyConfig, encoding: str = "ascii") -> str:
    """Return what ``config`` writes when saved, decoded with ``encoding``."""
    sink = io.BytesIO()
    assert config.save_sink(sink) == 0
    return sink.getvalue().decode(encoding)
