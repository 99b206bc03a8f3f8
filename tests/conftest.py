import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from class2options.config import Settings
from class2options.transform import TransformContext


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def context(settings):
    return TransformContext(settings)
