"""Точка входа командной строки: pnmio probe|info|crop|convert."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from PIL import Image

from pnmio import api
from pnmio.config import Config
from pnmio.models.pnm_model import GrayImage, Region
from pnmio.services.convert_service import ConvertService, PnmImage

# суффикс назначения задаёт кодировщик; .pnm — по режиму исходного изображения
PNM_SUFFIXES = {".pgm": False, ".ppm": True, ".pnm": None}


def _fail(message: str) -> int:
    print(f"pnmio: {message}", file=sys.stderr)
    return 1


def _cmd_probe(args: argparse.Namespace) -> int:
    code = api.probe_type(args.path)
    print(code)
    return 0 if code != "0" else 1


def _cmd_info(args: argparse.Namespace) -> int:
    header = api.read_info(args.path)
    if header is None:
        return _fail(f"не удалось прочитать заголовок {args.path}")
    print(f"type     P{header.type}")
    print(f"size     {header.width}x{header.height}")
    print(f"max_val  {header.max_val}")
    if header.comments:
        print(header.comments)
    return 0


def _cmd_crop(args: argparse.Namespace) -> int:
    region = Region(args.r1, args.r2, args.c1, args.c2)
    code = api.probe_type(args.src)
    if code == "5":
        image = api.read_gray(args.src, region)
        ok = image is not None and api.write_gray(args.dst, image.pixels, image.comments, image.max_val)
    elif code == "6":
        image = api.read_color(args.src, region)
        ok = image is not None and api.write_color(args.dst, *image.planes, image.comments, image.max_val)
    else:
        return _fail(f"{args.src}: ожидался P5 или P6")
    if not ok:
        return _fail(f"не удалось вырезать {args.src} -> {args.dst}")
    print(f"готово {args.dst}")
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    converter = ConvertService()
    suffix = Path(args.dst).suffix.lower()
    if suffix in PNM_SUFFIXES:
        try:
            with Image.open(args.src) as pil_image:
                image = converter.from_pil(pil_image, color=PNM_SUFFIXES[suffix])
        except (OSError, ValueError) as exc:
            return _fail(f"{args.src}: {exc}")
        if isinstance(image, GrayImage):
            ok = api.write_gray(args.dst, image.pixels)
        else:
            ok = api.write_color(args.dst, *image.planes)
        if not ok:
            return _fail(f"не удалось записать {args.dst}")
    else:
        code = api.probe_type(args.src)
        source: Optional[PnmImage] = None
        if code == "5":
            source = api.read_gray(args.src)
        elif code == "6":
            source = api.read_color(args.src)
        if source is None:
            return _fail(f"{args.src}: ожидался читаемый P5 или P6")
        try:
            converter.to_pil(source).save(args.dst)
        except (OSError, ValueError) as exc:
            return _fail(f"{args.dst}: {exc}")
    print(f"готово {args.dst}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pnmio", description="Чтение и запись PGM/PPM (P5/P6).")
    ap.add_argument("-v", "--verbose", action="store_true", help="подробный лог (DEBUG)")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("probe", help="тип файла по magic (0 — не PNM)")
    p.add_argument("path")
    p.set_defaults(func=_cmd_probe)

    p = sub.add_parser("info", help="заголовок: тип, размер, max_val, комментарии")
    p.add_argument("path")
    p.set_defaults(func=_cmd_info)

    p = sub.add_parser("crop", help="вырезать область (границы включительно)")
    p.add_argument("src")
    p.add_argument("dst")
    for name in ("r1", "r2", "c1", "c2"):
        p.add_argument(name, type=int)
    p.set_defaults(func=_cmd_crop)

    p = sub.add_parser("convert", help="PNM <-> любой формат Pillow")
    p.add_argument("src")
    p.add_argument("dst")
    p.set_defaults(func=_cmd_convert)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, настраивает лог и выполняет команду."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else Config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
