import os
import sys
from pathlib import Path

import pytest

# Headless Qt for CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import tempconv
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """Path for a throwaway settings file."""
    return tmp_path / "test_settings.json"


@pytest.fixture(autouse=True)
def light_theme():
    """Every test starts in light mode; theme state is module-global."""
    from tempconv.gui.styles.theme import set_dark_mode
    set_dark_mode(False)
    yield
    set_dark_mode(False)
