from __future__ import annotations

import numpy as np


class ScaleService:
    def to_int(
        self,
        matrix,
        max_val: int = 255,
        double_min: float = 0.0,
        double_max: float = 1.0,
    ) -> np.ndarray:
        """
        Вещественная матрица -> целые отсчёты [0..max_val].
        Значения вне [double_min, double_max] насыщаются, округление к ближайшему (0.5 вверх).
        """
        arr = np.asarray(matrix, dtype=np.float64)
        clipped = np.clip(arr, double_min, double_max)
        # аргументы не проверяются: double_min == double_max даёт inf/nan, как есть
        with np.errstate(divide="ignore", invalid="ignore"):
            factor = np.float64(max_val) / (np.float64(double_max) - np.float64(double_min))
            scaled = (clipped - double_min) * factor
            return np.floor(scaled + 0.5).astype(np.int64)

    def to_real(
        self,
        matrix,
        max_val: int = 255,
        double_min: float = 0.0,
        double_max: float = 1.0,
    ) -> np.ndarray:
        """
        Обратное аффинное отображение: 0 -> double_min, max_val -> double_max.
        """
        arr = np.asarray(matrix, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            step = (np.float64(double_max) - np.float64(double_min)) / np.float64(max_val)
            return double_min + arr * step
