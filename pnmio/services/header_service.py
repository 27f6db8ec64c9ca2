"""Разбор заголовка PNM и определение типа файла.

Принципы:
- SRP: класс отвечает только за заголовок, пиксели читает `PnmService`.
- Поток после `parse_header` стоит ровно на первом байте пиксельных данных.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, List

from pnmio.models.errors import PnmFormatError, PnmIoError
from pnmio.models.pnm_model import PnmHeader

logger = logging.getLogger(__name__)

WHITESPACE = b" \t\n\r\v\f"
HEADER_TYPES = (b"4", b"5", b"6")
PROBE_TYPES = (b"1", b"2", b"3", b"4", b"5", b"6")
INVALID_TYPE = "0"


def open_pnm(file_path: str | Path, mode: str = "rb") -> BinaryIO:
    """Открывает файл в двоичном режиме, `OSError` превращается в `PnmIoError`."""
    try:
        return open(file_path, mode)
    except OSError as exc:
        raise PnmIoError(f"Не удалось открыть {file_path}: {exc}") from exc


class HeaderService:
    def probe_type(self, file_path: str | Path) -> str:
        """Определяет тип PNM-файла по magic-числу.

        Returns:
            Символ от '1' до '6' или '0', если файл не открылся или magic неверный.
        """
        try:
            with open(file_path, "rb") as stream:
                magic = stream.read(2)
        except OSError as exc:
            logger.debug("probe_type %s: %s", file_path, exc)
            return INVALID_TYPE

        if len(magic) == 2 and magic[:1] == b"P" and magic[1:] in PROBE_TYPES:
            return magic[1:].decode("ascii")
        return INVALID_TYPE

    def read_info(self, file_path: str | Path) -> PnmHeader:
        """Читает только заголовок файла, без пиксельных данных.

        Raises:
            PnmIoError: если файл не открывается.
            PnmFormatError: если заголовок повреждён.
        """
        with open_pnm(file_path) as stream:
            return self.parse_header(stream)

    def parse_header(self, stream: BinaryIO) -> PnmHeader:
        """Разбирает заголовок `P4`/`P5`/`P6` из двоичного потока.

        Комментарии (строки с '#') допускаются перед каждым из трёх чисел,
        сохраняются вместе с '#' и объединяются через перевод строки.
        После max_val поглощается ровно один пробельный байт.

        Raises:
            PnmFormatError: неверный magic, нечисловое поле, конец потока.
        """
        magic = stream.read(2)
        if len(magic) < 2 or magic[:1] != b"P" or magic[1:] not in HEADER_TYPES:
            raise PnmFormatError(f"Неверный magic: {magic!r}")

        comments: List[str] = []
        width = self._read_int(stream, comments, "width")
        height = self._read_int(stream, comments, "height")
        max_val = self._read_int(stream, comments, "max_val")
        if max_val <= 0:
            raise PnmFormatError(f"max_val должен быть положительным: {max_val}")

        return PnmHeader(
            type=magic[1:].decode("ascii"),
            width=width,
            height=height,
            max_val=max_val,
            comments="\n".join(comments),
        )

    # ---------- Вспомогательные функции ----------
    def _skip_to_token(self, stream: BinaryIO, comments: List[str]) -> bytes:
        """Пропускает пробелы и комментарии, возвращает первый байт токена."""
        while True:
            ch = stream.read(1)
            if not ch:
                raise PnmFormatError("Неожиданный конец заголовка")
            if ch in WHITESPACE:
                continue
            if ch == b"#":
                comments.append("#" + self._read_line(stream))
                continue
            return ch

    def _read_line(self, stream: BinaryIO) -> str:
        buf = bytearray()
        while True:
            ch = stream.read(1)
            if not ch or ch == b"\n":
                break
            buf += ch
        if buf.endswith(b"\r"):
            del buf[-1]
        return buf.decode("utf-8", errors="replace")

    def _read_int(self, stream: BinaryIO, comments: List[str], name: str) -> int:
        ch = self._skip_to_token(stream, comments)
        digits = b""
        while ch.isdigit():
            digits += ch
            ch = stream.read(1)
        if not digits:
            raise PnmFormatError(f"Поле {name}: ожидалось число, получено {ch!r}")
        # терминатор числа: ровно один пробельный байт
        if not ch:
            raise PnmFormatError(f"Поле {name}: неожиданный конец заголовка")
        if ch not in WHITESPACE:
            raise PnmFormatError(f"Поле {name}: недопустимый символ {ch!r}")
        return int(digits)
