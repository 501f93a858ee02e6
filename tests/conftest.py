"""
Shared fixtures for the test suite.
"""

import pytest

from iplog_analyzer.core import config as config_module


SAMPLE_LOG = (
    "10.0.0.1: 01.01.2023 10:00:00\n"
    "10.0.0.2: 02.01.2023 11:00:00\n"
    "10.0.0.1: 05.01.2023 09:00:00\n"
)


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached global config so environment changes do not leak."""
    config_module._config = None
    yield
    config_module._config = None


@pytest.fixture
def sample_log(tmp_path):
    path = tmp_path / "access.log"
    path.write_text(SAMPLE_LOG, encoding="utf-8")
    return path
