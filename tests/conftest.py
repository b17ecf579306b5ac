"""Pytest configuration and fixtures."""

import os
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from countdown.core.timeutil import local_zone


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def base():
    """Fixed reference time: 2022-06-15 10:00:00 local."""
    return datetime(2022, 6, 15, 10, 0, 0, tzinfo=local_zone())


@pytest.fixture
def local():
    """Build local datetimes in the same zone as ``base``."""

    def make(*args: int) -> datetime:
        return datetime(*args, tzinfo=local_zone())

    return make


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample configuration file."""
    config_content = '''
color = "never"
notify = false

[notification]
command = "my-notify"
urgency = "low"
'''
    config_file = temp_dir / "countdown.toml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def in_dir():
    """Run the test with a different working directory."""
    old_cwd = os.getcwd()

    def chdir(path: Path) -> None:
        os.chdir(path)

    yield chdir
    os.chdir(old_cwd)


@pytest.fixture(autouse=True)
def reset_config_cache(monkeypatch):
    """Keep the global config cache from leaking between tests."""
    monkeypatch.setattr("countdown.core.config._cached_config", None)
