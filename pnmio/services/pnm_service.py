"""Чтение и запись растровых PGM (P5) и PPM (P6).

Принципы:
- SRP: сервис переводит байты файла в матрицы numpy и обратно.
- Ошибки пробрасываются исключениями `PnmError`; сигнальные значения
  возвращает только фасад `pnmio.api`.

Один байт на отсчёт, независимо от max_val в заголовке.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence

import numpy as np

from pnmio.config import Config
from pnmio.models.errors import PnmFormatError, PnmIoError, PnmRangeError
from pnmio.models.pnm_model import ColorImage, GrayImage, PnmHeader, Region
from pnmio.services.header_service import HeaderService, open_pnm

logger = logging.getLogger(__name__)

PIXEL_DTYPE = np.int64


class PnmService:
    def __init__(self, header_service: Optional[HeaderService] = None) -> None:
        self._header_service = header_service or HeaderService()

    # ---------- Чтение ----------
    def read_gray(self, file_path: str | Path, region: Optional[Region] = None) -> GrayImage:
        """Читает PGM целиком или подобласть `region`.

        Args:
            file_path: Путь к файлу P5.
            region: Границы строк/столбцов включительно; None — всё изображение.

        Returns:
            `GrayImage` с матрицей `height x width` (или размера области) и комментариями.

        Raises:
            PnmIoError: файл не открывается.
            PnmFormatError: не P5, повреждённый заголовок или обрезанные данные.
            PnmRangeError: область выходит за пределы изображения.
        """
        with open_pnm(file_path) as stream:
            header = self._read_header(stream, expected_type="5")
            (pixels,) = self._decode(stream, header, region)
        logger.debug("read_gray %s: %dx%d", file_path, pixels.shape[1], pixels.shape[0])
        return GrayImage(pixels=pixels, comments=header.comments, max_val=header.max_val)

    def read_color(self, file_path: str | Path, region: Optional[Region] = None) -> ColorImage:
        """Читает PPM в три плоскости R, G, B. Семантика `region` как у `read_gray`."""
        with open_pnm(file_path) as stream:
            header = self._read_header(stream, expected_type="6")
            red, green, blue = self._decode(stream, header, region)
        logger.debug("read_color %s: %dx%d", file_path, red.shape[1], red.shape[0])
        return ColorImage(red=red, green=green, blue=blue, comments=header.comments, max_val=header.max_val)

    # ---------- Запись ----------
    def write_gray(
        self,
        file_path: str | Path,
        pixels,
        comments: Optional[str] = None,
        max_val: Optional[int] = None,
    ) -> None:
        """Записывает матрицу как P5. Значения вне [0, 255] насыщаются."""
        self._write(file_path, "5", [self._as_plane(pixels, "pixels")], comments, max_val)

    def write_color(
        self,
        file_path: str | Path,
        red,
        green,
        blue,
        comments: Optional[str] = None,
        max_val: Optional[int] = None,
    ) -> None:
        """Записывает три плоскости как P6.

        Raises:
            PnmRangeError: если размеры плоскостей различаются.
            PnmIoError: если файл не создаётся.
        """
        planes = [
            self._as_plane(red, "red"),
            self._as_plane(green, "green"),
            self._as_plane(blue, "blue"),
        ]
        if len({plane.shape for plane in planes}) != 1:
            raise PnmRangeError(
                "Размеры каналов различаются: " + ", ".join(str(p.shape) for p in planes)
            )
        self._write(file_path, "6", planes, comments, max_val)

    # ---------- Вспомогательные функции ----------
    def _read_header(self, stream: BinaryIO, expected_type: str) -> PnmHeader:
        header = self._header_service.parse_header(stream)
        if header.type != expected_type:
            raise PnmFormatError(f"Ожидался тип P{expected_type}, в файле P{header.type}")
        return header

    def _decode(self, stream: BinaryIO, header: PnmHeader, region: Optional[Region]) -> List[np.ndarray]:
        """Читает пиксели и раскладывает их по каналам.

        Для области читается построчно: строки и столбцы вне неё
        вычитываются и отбрасываются, из потока всегда уходит width*height*channels байт.
        """
        width, height, channels = header.width, header.height, header.channels
        row_bytes = width * channels
        expected = row_bytes * height
        # размеры из заголовка сверяются с остатком файла до любого чтения
        left = self._bytes_left(stream)
        if expected > left:
            raise PnmFormatError(f"Обрезанные данные: {left} из {expected} байт")

        if region is None:
            data = stream.read(expected)
            if len(data) < expected:
                raise PnmFormatError(f"Обрезанные данные: {len(data)} из {expected} байт")
            pixels = np.frombuffer(data, dtype=np.uint8).reshape(height, width, channels)
            out = pixels.astype(PIXEL_DTYPE)
        else:
            region.validate(height, width)
            out = np.empty(region.shape + (channels,), dtype=PIXEL_DTYPE)
            for row in range(height):
                data = stream.read(row_bytes)
                if len(data) < row_bytes:
                    raise PnmFormatError(f"Обрезанные данные в строке {row}")
                if region.r1 <= row <= region.r2:
                    line = np.frombuffer(data, dtype=np.uint8).reshape(width, channels)
                    out[row - region.r1] = line[region.c1:region.c2 + 1]

        return [np.ascontiguousarray(out[:, :, k]) for k in range(channels)]

    def _bytes_left(self, stream: BinaryIO) -> int:
        pos = stream.tell()
        end = stream.seek(0, io.SEEK_END)
        stream.seek(pos)
        return end - pos

    def _as_plane(self, matrix, name: str) -> np.ndarray:
        try:
            plane = np.asarray(matrix)
        except (TypeError, ValueError) as exc:
            raise PnmRangeError(f"{name}: не удалось привести к матрице: {exc}") from exc
        if plane.ndim != 2:
            raise PnmRangeError(f"{name}: ожидалась 2-D матрица, получено измерений: {plane.ndim}")
        if plane.dtype == np.bool_:
            return plane.astype(np.uint8)
        if not (np.issubdtype(plane.dtype, np.integer) or np.issubdtype(plane.dtype, np.floating)):
            raise PnmRangeError(f"{name}: нечисловой тип элементов {plane.dtype}")
        return plane

    def _format_header(self, magic: str, width: int, height: int, comments: str, max_val: int) -> bytes:
        lines = [f"P{magic}"]
        # строки без '#' получают префикс, чтобы парсер принял их за комментарий
        for line in comments.splitlines():
            lines.append(line if line.startswith("#") else f"# {line}")
        lines.append(f"{width} {height}")
        lines.append(str(max_val))
        return ("\n".join(lines) + "\n").encode("utf-8")

    def _write(
        self,
        file_path: str | Path,
        magic: str,
        planes: Sequence[np.ndarray],
        comments: Optional[str],
        max_val: Optional[int],
    ) -> None:
        if comments is None:
            comments = Config.DEFAULT_COMMENT
        if max_val is None:
            max_val = Config.DEFAULT_MAX_VAL
        try:
            max_val = int(max_val)
        except (TypeError, ValueError, OverflowError) as exc:
            raise PnmRangeError(f"max_val не является целым: {max_val!r}") from exc
        if max_val <= 0:
            raise PnmRangeError(f"max_val должен быть положительным: {max_val}")

        height, width = planes[0].shape
        # насыщение до одного байта, каналы чередуются R,G,B
        samples = np.clip(np.stack(planes, axis=-1), 0, 255).astype(np.uint8)
        header = self._format_header(magic, width, height, comments, max_val)

        try:
            with open(file_path, "wb") as stream:
                stream.write(header)
                stream.write(samples.tobytes())
        except OSError as exc:
            raise PnmIoError(f"Не удалось записать {file_path}: {exc}") from exc
        logger.debug("write P%s %s: %dx%d", magic, file_path, width, height)
