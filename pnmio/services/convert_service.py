"""Обмен изображениями с Pillow.

Нужен, чтобы показать или сохранить матрицы PNM в любом формате,
который понимает PIL, и обратно загрузить такие файлы как матрицы.
"""
from __future__ import annotations

from typing import Optional, Union

import numpy as np
from PIL import Image

from pnmio.models.pnm_model import ColorImage, GrayImage

PnmImage = Union[GrayImage, ColorImage]

# режимы PIL с одним каналом яркости (альфа отбрасывается)
GRAY_MODES = ("1", "L", "LA", "I", "I;16", "I;16B", "I;16L", "F")


class ConvertService:
    def to_pil(self, image: PnmImage) -> Image.Image:
        """Возвращает `PIL.Image` в режиме "L" (gray) или "RGB" (color).

        Отсчёты насыщаются до [0, 255].
        """
        if isinstance(image, GrayImage):
            arr = np.clip(image.pixels, 0, 255).astype(np.uint8)
        else:
            arr = np.clip(np.stack(image.planes, axis=-1), 0, 255).astype(np.uint8)
        return Image.fromarray(arr)

    def from_pil(self, image: Image.Image, color: Optional[bool] = None) -> PnmImage:
        """Загружает `PIL.Image` как матрицы.

        Args:
            image: Исходное изображение.
            color: True — всегда три плоскости RGB, False — всегда полутон;
                None — по режиму: одноканальные режимы (`GRAY_MODES`) дают полутон.
        """
        if color is None:
            color = image.mode not in GRAY_MODES
        if not color:
            gray = image if image.mode == "L" else image.convert("L")
            return GrayImage(pixels=np.asarray(gray, dtype=np.int64))
        rgb = np.asarray(image.convert("RGB"), dtype=np.int64)
        return ColorImage(
            red=np.ascontiguousarray(rgb[:, :, 0]),
            green=np.ascontiguousarray(rgb[:, :, 1]),
            blue=np.ascontiguousarray(rgb[:, :, 2]),
        )
