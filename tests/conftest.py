import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def gedcom_lines():
    """Turn an indented triple-quoted GEDCOM snippet into a list of lines."""

    def _lines(text: str):
        return [line.strip() for line in text.strip().splitlines()]

    return _lines
