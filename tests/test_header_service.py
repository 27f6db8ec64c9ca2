import io

import pytest

from pnmio import api
from pnmio.models.errors import PnmFormatError, PnmIoError
from pnmio.services.header_service import HeaderService


@pytest.fixture
def service():
    return HeaderService()


def test_parse_header_basic(service):
    stream = io.BytesIO(b"P5\n3 2\n255\n" + bytes(6))
    header = service.parse_header(stream)
    assert (header.type, header.width, header.height, header.max_val) == ("5", 3, 2, 255)
    assert header.comments == ""
    assert header.shape == (2, 3)
    assert header.channels == 1
    assert stream.tell() == len(b"P5\n3 2\n255\n")


def test_parse_header_consumes_single_terminator(service):
    # пиксели сами являются пробельными байтами
    stream = io.BytesIO(b"P5 2 1 255 " + bytes([32, 9]))
    header = service.parse_header(stream)
    assert header.width == 2
    assert stream.read() == bytes([32, 9])


def test_parse_header_collects_comments(service):
    stream = io.BytesIO(b"P6\n# first\n#second\r\n4\n# between\n3\n255\n")
    header = service.parse_header(stream)
    assert header.type == "6"
    assert header.channels == 3
    assert (header.width, header.height) == (4, 3)
    assert header.comments == "# first\n#second\n# between"


def test_parse_header_accepts_bitmap_magic(service):
    header = service.parse_header(io.BytesIO(b"P4 8 8 1\n"))
    assert header.type == "4"


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"P",
        b"XY 1 1 255\n",
        b"P3 1 1 255\n",
        b"P7 1 1 255\n",
        b"P5\n10 10\n",
        b"P5\nten 10 255\n",
        b"P5\n10 10 255",
        b"P5\n10 10 0\n",
        b"P5\n10x 10 255\n",
    ],
)
def test_parse_header_rejects_malformed(service, data):
    with pytest.raises(PnmFormatError):
        service.parse_header(io.BytesIO(data))


def test_read_info_missing_file_raises(service, tmp_path):
    with pytest.raises(PnmIoError):
        service.read_info(tmp_path / "missing.pgm")


def test_read_info_missing_max_val(write_bytes):
    path = write_bytes("bad.pgm", b"P5\n10 10\n")
    assert api.read_info(path) is None


def test_pnm_info_alias(write_bytes):
    path = write_bytes("ok.ppm", b"P6\n# c\n1 1\n200\n\x01\x02\x03")
    header = api.pnm_info(path)
    assert header is not None
    assert header.max_val == 200
    assert header.comments == "# c"


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"P5\n1 1\n255\n\x00", "5"),
        (b"P6", "6"),
        (b"P1\n", "1"),
        (b"P3 whatever", "3"),
        (b"XY", "0"),
        (b"P7", "0"),
        (b"P", "0"),
        (b"", "0"),
    ],
)
def test_probe_type(write_bytes, data, expected):
    assert api.probe_type(write_bytes("probe.bin", data)) == expected


def test_probe_type_missing_file(tmp_path):
    assert api.probe_type(tmp_path / "nope.pgm") == "0"


def test_probe_type_directory(tmp_path):
    assert api.probe_type(tmp_path) == "0"
