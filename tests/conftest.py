from __future__ import annotations

from pathlib import Path
from typing import Callable

import numpy as np
import pytest


@pytest.fixture
def write_bytes(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Создаёт файл с заданным содержимым во временной папке."""
    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def gray_matrix() -> np.ndarray:
    # 4x5, все значения различны
    return np.arange(20, dtype=np.int64).reshape(4, 5) * 12


@pytest.fixture
def color_planes():
    rng = np.random.default_rng(7)
    return tuple(rng.integers(0, 256, size=(3, 6)) for _ in range(3))
