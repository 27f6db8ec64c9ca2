"""Модели данных PNM: заголовок, область выборки, изображения.

Принципы:
- SRP: только структуры данных и простые проверки, без ввода-вывода.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from pnmio.models.errors import PnmRangeError


@dataclass(frozen=True)
class PnmHeader:
    """Заголовок PNM-файла.

    Fields:
        type: Символ типа, '4' (PBM), '5' (PGM) или '6' (PPM).
        width: Ширина, px.
        height: Высота, px.
        max_val: Максимальное значение отсчёта из заголовка.
        comments: Строки-комментарии (с ведущим '#'), объединённые через '\\n'.
    """
    type: str
    width: int
    height: int
    max_val: int
    comments: str = ""

    @property
    def channels(self) -> int:
        return 3 if self.type == "6" else 1

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width


@dataclass(frozen=True)
class Region:
    """Прямоугольная подобласть, границы включительно."""
    r1: int
    r2: int
    c1: int
    c2: int

    @property
    def shape(self) -> Tuple[int, int]:
        return self.r2 - self.r1 + 1, self.c2 - self.c1 + 1

    def validate(self, height: int, width: int) -> None:
        """Проверяет, что область лежит внутри изображения `height x width`.

        Raises:
            PnmRangeError: если нарушено 0 <= r1 <= r2 < height или 0 <= c1 <= c2 < width.
        """
        if not (0 <= self.r1 <= self.r2 < height):
            raise PnmRangeError(f"Строки {self.r1}..{self.r2} вне диапазона 0..{height - 1}")
        if not (0 <= self.c1 <= self.c2 < width):
            raise PnmRangeError(f"Столбцы {self.c1}..{self.c2} вне диапазона 0..{width - 1}")


@dataclass(frozen=True)
class GrayImage:
    """Полутоновое изображение (P5): одна целочисленная матрица."""
    pixels: np.ndarray
    comments: str = ""
    max_val: int = 255


@dataclass(frozen=True)
class ColorImage:
    """Цветное изображение (P6): три плоскости R, G, B одинакового размера."""
    red: np.ndarray
    green: np.ndarray
    blue: np.ndarray
    comments: str = ""
    max_val: int = 255

    @property
    def planes(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.red, self.green, self.blue
