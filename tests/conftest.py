import tempfile
from pathlib import Path

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def registry():
    """Fixture for a registry seeded with the four demo flags."""
    return {"-a": False, "-b": False, "-c": False, "-d": False}


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """
    Fixture that hides any real config file from the test.

    HOME and XDG_CONFIG_HOME point into an empty temporary directory and
    FLAGSIFT_CONFIG / FLAGSIFT_DEBUG are cleared.
    """
    monkeypatch.delenv("FLAGSIFT_CONFIG", raising=False)
    monkeypatch.delenv("FLAGSIFT_DEBUG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    return tmp_path


@pytest.fixture
def temp_config_with_content():
    """Fixture for temporary config files with various content types."""
    temp_dirs = []

    def _create_config(content, encoding="utf-8"):
        temp_dir = tempfile.mkdtemp()
        temp_dirs.append(temp_dir)
        config_path = Path(temp_dir) / "flagsift.conf"
        with open(config_path, "w", encoding=encoding) as f:
            f.write(content)
        return config_path

    yield _create_config

    import shutil

    for temp_dir in temp_dirs:
        shutil.rmtree(temp_dir)
