from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

import numpy as np
import pytest
from PIL import Image


@pytest.fixture(autouse=True)
def restore_root_logger():
    # main.configure_logging() replaces root handlers
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Создаёт однотонное изображение в tmp_path; формат задаётся явно или по расширению."""

    def _make(
        name: str,
        size: Tuple[int, int] = (4, 4),
        color: Tuple[int, ...] = (255, 0, 0),
        fmt: Optional[str] = None,
    ) -> Path:
        path = tmp_path / name
        Image.new("RGB", size, color[:3]).save(path, format=fmt)
        return path

    return _make


@pytest.fixture
def random_pixels() -> Callable[[int, int], np.ndarray]:
    rng = np.random.default_rng(1234)

    def _pixels(width: int, height: int) -> np.ndarray:
        return rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)

    return _pixels
