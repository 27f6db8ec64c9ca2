"""Публичные функции pnmio.

Принципы:
- Фасад над сервисами: исключения `PnmError` сюда не проходят, вызывающий
  получает '0', None, False или пустую матрицу и обязан проверить результат.
- Каждый вызов открывает и закрывает свой файл, общего состояния нет.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import numpy as np

from pnmio.models.errors import PnmError
from pnmio.models.pnm_model import ColorImage, GrayImage, PnmHeader, Region
from pnmio.services.header_service import HeaderService
from pnmio.services.pnm_service import PIXEL_DTYPE, PnmService
from pnmio.services.scale_service import ScaleService

logger = logging.getLogger(__name__)

_header_service = HeaderService()
_pnm_service = PnmService(_header_service)
_scale_service = ScaleService()


def _empty() -> np.ndarray:
    return np.empty((0, 0), dtype=PIXEL_DTYPE)


def probe_type(file_path: str | Path) -> str:
    """Тип файла по magic: '1'..'6', либо '0' при любой ошибке."""
    return _header_service.probe_type(file_path)


def read_info(file_path: str | Path) -> Optional[PnmHeader]:
    """Заголовок файла без чтения пикселей; None при ошибке."""
    try:
        return _header_service.read_info(file_path)
    except PnmError as exc:
        logger.warning("read_info %s: %s", file_path, exc)
        return None


pnm_info = read_info


def read_gray(file_path: str | Path, region: Optional[Region] = None) -> Optional[GrayImage]:
    """PGM (P5) целиком или подобласть; None при ошибке."""
    try:
        return _pnm_service.read_gray(file_path, region)
    except PnmError as exc:
        logger.warning("read_gray %s: %s", file_path, exc)
        return None


def load_gray(file_path: str | Path, region: Optional[Region] = None) -> np.ndarray:
    """Как `read_gray`, но возвращает только матрицу; пустую (0x0) при ошибке."""
    image = read_gray(file_path, region)
    return image.pixels if image is not None else _empty()


def read_color(file_path: str | Path, region: Optional[Region] = None) -> Optional[ColorImage]:
    """PPM (P6) в три плоскости R, G, B; None при ошибке."""
    try:
        return _pnm_service.read_color(file_path, region)
    except PnmError as exc:
        logger.warning("read_color %s: %s", file_path, exc)
        return None


def load_color(
    file_path: str | Path, region: Optional[Region] = None
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Как `read_color`, но возвращает (r, g, b); три пустые матрицы при ошибке."""
    image = read_color(file_path, region)
    if image is None:
        return _empty(), _empty(), _empty()
    return image.planes


def write_gray(
    file_path: str | Path,
    pixels,
    comments: Optional[str] = None,
    max_val: Optional[int] = None,
) -> bool:
    """Записывает P5. `comments=None` — комментарий по умолчанию, "" — без комментария."""
    try:
        _pnm_service.write_gray(file_path, pixels, comments, max_val)
    except PnmError as exc:
        logger.warning("write_gray %s: %s", file_path, exc)
        return False
    return True


def write_color(
    file_path: str | Path,
    red,
    green,
    blue,
    comments: Optional[str] = None,
    max_val: Optional[int] = None,
) -> bool:
    """Записывает P6; False при ошибке ввода-вывода или разных размерах каналов."""
    try:
        _pnm_service.write_color(file_path, red, green, blue, comments, max_val)
    except PnmError as exc:
        logger.warning("write_color %s: %s", file_path, exc)
        return False
    return True


def scale_to_int(matrix, max_val: int = 255, double_min: float = 0.0, double_max: float = 1.0) -> np.ndarray:
    return _scale_service.to_int(matrix, max_val, double_min, double_max)


def scale_to_real(matrix, max_val: int = 255, double_min: float = 0.0, double_max: float = 1.0) -> np.ndarray:
    return _scale_service.to_real(matrix, max_val, double_min, double_max)
