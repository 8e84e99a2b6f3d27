import sys
from pathlib import Path

import pytest


REPO_ROOT = str(Path(__file__).resolve().parents[1])
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

import config  # noqa: E402


@pytest.fixture
def params(tmp_path):
    """Active parameters pointed at a temporary input/output pair."""
    p = config.get_active_params()
    p["INPUT_FOLDER"] = str(tmp_path / "input")
    p["OUTPUT_FOLDER"] = str(tmp_path / "output_greedy")
    p["SAVE_IMAGES"] = False
    return p


@pytest.fixture
def write_instance(params):
    """Writes instance<index>.txt into the temporary input folder."""
    folder = Path(params["INPUT_FOLDER"])

    def _write(index: int, body: str) -> Path:
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"instance{index:02d}.txt"
        path.write_text(body)
        return path

    return _write
