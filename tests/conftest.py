import sys
from datetime import date
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Donderdag
REFERENCE = date(2024, 3, 14)


@pytest.fixture
def reference() -> date:
    return REFERENCE
