"""
Pytest configuration and shared fixtures for the exec-munin test suite.

This module provides common fixtures for writing plugin scripts and
configuration files into temporary directories.
"""

import os
import shutil
import stat
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from execmunin.models import ShimConfig  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "e2e: mark test as an end-to-end test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def make_script(temp_dir):
    """
    Factory writing a shell script plugin into the temporary directory.

    Usage:
        path = make_script("sensors", 'echo "temp.value 23.5"')
    """

    def _make_script(name: str, body: str, executable: bool = True) -> str:
        path = temp_dir / name
        path.write_text("#!/bin/sh\n" + body + "\n")
        mode = stat.S_IRUSR | stat.S_IWUSR
        if executable:
            mode |= stat.S_IXUSR
        os.chmod(path, mode)
        return str(path)

    return _make_script


@pytest.fixture
def write_config(temp_dir):
    """Factory writing a configuration file and returning its path."""

    def _write_config(text: str, name: str = "exec-munin.conf") -> Path:
        path = temp_dir / name
        path.write_text(text)
        return path

    return _write_config


@pytest.fixture
def sample_shim_config():
    """A ShimConfig matching the documented sensors example."""
    return ShimConfig(
        interval=300,
        hostname="myhost",
        type_map={"temp": "temperature"},
        scripts=("/usr/lib/plugins/sensors",),
    )
