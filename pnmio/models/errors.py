"""Исключения чтения и записи PNM.

Сервисы бросают их наружу, фасад `pnmio.api` перехватывает и превращает
в значения-сигналы (`None`, `False`, `'0'`, пустая матрица).
"""
from __future__ import annotations


class PnmError(Exception):
    """Базовая ошибка модуля."""


class PnmIoError(PnmError):
    """Файл не найден, не читается или не создаётся."""


class PnmFormatError(PnmError):
    """Неверный magic, нечисловое поле заголовка, обрезанный файл."""


class PnmRangeError(PnmError):
    """Область вне изображения, разные размеры каналов, неверные аргументы."""
