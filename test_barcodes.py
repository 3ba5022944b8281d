import os
import zlib

import pytest

from squares.barcode import main as barcode_main
from squares.image import PngQrImage, QrStyle, SvgQrImage, save
from squares.image.png import parse_color
from squares.qrcode import QRCode


def png_chunks(png):
    assert png[:8] == PngQrImage.HEADER
    position = 8
    while position < len(png):
        length = int.from_bytes(png[position:position + 4], "big")
        chunk_type = png[position + 4:position + 8]
        payload = png[position + 8:position + 8 + length]
        crc = int.from_bytes(png[position + 8 + length:position + 12 + length],
                             "big")
        assert crc == zlib.crc32(chunk_type + payload)
        yield chunk_type, payload
        position += 12 + length


def png_pixels(png):
    chunks = dict(png_chunks(png))
    width = int.from_bytes(chunks[b"IHDR"][:4], "big")
    height = int.from_bytes(chunks[b"IHDR"][4:8], "big")
    raw = zlib.decompress(chunks[b"IDAT"])
    stride = 1 + 4 * width
    assert len(raw) == stride * height
    lines = []
    for y in range(height):
        filter_type = raw[y * stride]
        line = raw[y * stride + 1:(y + 1) * stride]
        if filter_type == 2:
            assert line == bytes(len(line))
            line = lines[-1]
        else:
            assert filter_type == 0
        lines.append(line)
    return width, height, lines


def pixel(lines, x, y):
    return tuple(lines[y][4 * x:4 * x + 4])


def test_svg_image():
    code = QRCode("HELLO WORLD")
    svg = SvgQrImage(code).to_string()
    assert svg.startswith("<svg")
    assert 'viewBox="-2 -2 25 25"' in svg
    assert '<rect x="-2" y="-2" width="25" height="25" fill="#ffffff" />' \
        in svg
    assert '<path fill="#000000" d="M0,0h7v1h-7z' in svg
    assert svg.endswith("</svg>\n")


def test_svg_rectangles_cover_dark_modules():
    code = QRCode("Hello, rmqr!", kind="rmqr")
    image = SvgQrImage(code)
    covered = set()
    for x, y, w, h in image.rectangles():
        for dy in range(h):
            for dx in range(w):
                assert (x + dx, y + dy) not in covered
                covered.add((x + dx, y + dy))
    dark = set(
        (x, y)
        for y, row in enumerate(code.rows())
        for x, module in enumerate(row)
        if module
    )
    assert covered == dark


def test_svg_round_transparent():
    code = QRCode("1", kind="micro")
    style = QrStyle(background_color="none", shape="round", quiet_zone=2)
    svg = SvgQrImage(code, style).to_string()
    assert "<rect" not in svg
    assert 'viewBox="-2 -2 15 15"' in svg
    assert "a0.5,0.5 0 1,0 1,0" in svg


def test_svg_escapes_colors():
    code = QRCode("1", kind="micro")
    style = QrStyle(color='url("#g")', background_color="<none>")
    svg = SvgQrImage(code, style).to_string()
    assert '<path fill="url(&quot;#g&quot;)"' in svg
    assert 'fill="&lt;none&gt;"' in svg
    assert "<none>" not in svg


def test_png_image():
    code = QRCode("HELLO WORLD")
    png = PngQrImage(code).to_bytes()
    width, height, lines = png_pixels(png)
    assert (width, height) == (720, 720)
    white = (255, 255, 255, 255)
    black = (0, 0, 0, 255)
    assert pixel(lines, 0, 0) == white
    # 28.8 pixels per module, the finder pattern starts at 57.6
    assert pixel(lines, 60, 60) == black
    assert pixel(lines, 60, 600) == black
    assert pixel(lines, 719, 719) == white


def test_png_rmqr_height():
    code = QRCode("Hello, rmqr!", kind="rmqr")
    image = PngQrImage(code, QrStyle(width=470, quiet_zone=2))
    width, height, lines = png_pixels(image.to_bytes())
    # 47x15 modules at 10 pixels each
    assert (width, height) == (470, 150)
    assert pixel(lines, 25, 25) == (0, 0, 0, 255)


def test_png_colors():
    code = QRCode("1", kind="micro")
    style = QrStyle(color="#f00", background_color="transparent",
                    shape="round", width=150)
    width, height, lines = png_pixels(PngQrImage(code, style).to_bytes())
    assert pixel(lines, 0, 0) == (0, 0, 0, 0)
    # centre of the top left module
    assert pixel(lines, 25, 25) == (255, 0, 0, 255)


def test_parse_color():
    assert parse_color("#000") == (0, 0, 0, 255)
    assert parse_color("#12ab34") == (0x12, 0xab, 0x34, 255)
    assert parse_color("#12AB3480") == (0x12, 0xab, 0x34, 0x80)
    assert parse_color("none") == (0, 0, 0, 0)
    for color in ("red", "#12", "#gggggg"):
        with pytest.raises(ValueError):
            parse_color(color)


def test_style_validation():
    with pytest.raises(ValueError):
        QrStyle(shape="hexagon")
    with pytest.raises(ValueError):
        QrStyle(width=0)
    with pytest.raises(ValueError):
        QrStyle(quiet_zone=-1)


def test_save(tmp_path):
    code = QRCode("HELLO WORLD")
    svg_path = str(tmp_path / "code.svg")
    save(code, svg_path)
    with open(svg_path) as svg_file:
        assert svg_file.read().startswith("<svg")
    png_path = str(tmp_path / "code.bin")
    save(code, png_path, file_type="png")
    with open(png_path, "rb") as png_file:
        assert png_file.read(8) == PngQrImage.HEADER
    with pytest.raises(ValueError):
        save(code, str(tmp_path / "code.gif"))


def test_cmd(tmp_path):
    contents = ("hello world", "HELLO WORLD", "0123456789")
    symbols = ("qr", "micro", "rmqr")
    file_types = ("png", "svg")
    for content in contents:
        for symbol in symbols:
            for file_type in file_types:
                out = str(tmp_path / "{}_{}.{}".format(
                    content.replace(" ", "_"), symbol, file_type
                ))
                args = ["--symbol={}".format(symbol), content, out]
                assert barcode_main(args) == 0
                assert os.path.getsize(out) > 0


def test_cmd_options(tmp_path):
    out = str(tmp_path / "code.png")
    assert barcode_main([
        "--symbol=rmqr", "--strategy=height", "--ec-level=H",
        "--shape=round", "--width=300", "--verbose", "Hello, rmqr!", out
    ]) == 0
    out = str(tmp_path / "code.img")
    assert barcode_main([
        "--file-type=svg", "--version=M4", "--symbol=micro", "1234", out
    ]) == 0
    with open(out) as svg_file:
        assert "<svg" in svg_file.read()


def test_cmd_errors(tmp_path, capsys):
    out = str(tmp_path / "code.svg")
    assert barcode_main(["€", out]) == 1
    assert "error:" in capsys.readouterr().err
    assert barcode_main(["--symbol=micro", "x" * 100, out]) == 1
    assert "error:" in capsys.readouterr().err
    png_out = str(tmp_path / "a.png")
    assert barcode_main(["--color=red", "ok", png_out]) == 1
    assert not os.path.exists(out)
    assert not os.path.exists(png_out)
