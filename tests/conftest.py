import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from delve.rng import ScriptedSource  # noqa: E402

# (w, h, x, y) draws placing rooms centred on (5,5), (20,5) and (20,20).
THREE_ROOMS = [
    6, 6, 2, 2,
    6, 6, 17, 2,
    6, 6, 17, 17,
]


@pytest.fixture
def three_room_source():
    return ScriptedSource(THREE_ROOMS)
