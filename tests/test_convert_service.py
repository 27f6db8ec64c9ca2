import numpy as np
from numpy.testing import assert_array_equal
from PIL import Image

from pnmio.models.pnm_model import ColorImage, GrayImage
from pnmio.services.convert_service import ConvertService


def test_gray_to_pil_clamps():
    img = ConvertService().to_pil(GrayImage(pixels=np.array([[-1, 10, 400]])))
    assert img.mode == "L"
    assert img.size == (3, 1)
    assert_array_equal(np.asarray(img), [[0, 10, 255]])


def test_color_pil_round_trip(color_planes):
    service = ConvertService()
    img = service.to_pil(ColorImage(*color_planes))
    assert img.mode == "RGB"
    back = service.from_pil(img)
    assert isinstance(back, ColorImage)
    for got, expected in zip(back.planes, color_planes):
        assert_array_equal(got, expected)


def test_from_pil_gray(gray_matrix):
    img = Image.fromarray(gray_matrix.astype(np.uint8))
    back = ConvertService().from_pil(img)
    assert isinstance(back, GrayImage)
    assert_array_equal(back.pixels, gray_matrix)


def test_from_pil_rgba_becomes_color():
    img = Image.new("RGBA", (2, 2), (10, 20, 30, 40))
    back = ConvertService().from_pil(img)
    assert isinstance(back, ColorImage)
    assert_array_equal(back.red, [[10, 10], [10, 10]])
    assert_array_equal(back.blue, [[30, 30], [30, 30]])


def test_from_pil_gray_like_modes_stay_gray():
    service = ConvertService()
    la = Image.new("LA", (2, 1), (90, 10))
    bilevel = Image.new("1", (2, 1), 1)
    wide = Image.fromarray(np.array([[0, 100, 255]], dtype=np.int32))
    assert wide.mode == "I"

    for img, expected in ((la, [[90, 90]]), (bilevel, [[255, 255]]), (wide, [[0, 100, 255]])):
        back = service.from_pil(img)
        assert isinstance(back, GrayImage)
        assert_array_equal(back.pixels, expected)


def test_from_pil_forced_mode(color_planes, gray_matrix):
    service = ConvertService()
    gray = Image.fromarray(gray_matrix.astype(np.uint8))
    as_color = service.from_pil(gray, color=True)
    assert isinstance(as_color, ColorImage)
    assert_array_equal(as_color.green, gray_matrix)

    rgb = service.to_pil(ColorImage(*color_planes))
    assert isinstance(service.from_pil(rgb, color=False), GrayImage)
