import sys
from pathlib import Path

import pytest

project_root = Path(__file__).resolve().parents[1]
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pgn_import.config import Settings  # noqa: E402
from pgn_import.variation_mode import VariationMode  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(
        log_level="WARNING",
        variation_mode=VariationMode.SINGLE,
        fen_en_passant="legal",
        batch_workers=2,
    )
