from __future__ import annotations

from pathlib import Path

import pytest

from testgen.orchestrator import GenerationEngine
from tests._fixtures.java_sources import SourceWriter


@pytest.fixture
def source_writer(tmp_path: Path) -> SourceWriter:
    """Provide a helper that writes Java sources under the pytest tmp_path."""
    return SourceWriter(tmp_path)


@pytest.fixture
def engine() -> GenerationEngine:
    return GenerationEngine()
