import math
from abc import ABC, abstractmethod
from io import BytesIO
from zlib import compress, crc32

from .image import SymbolImage


def parse_color(color):
    """Return (red, green, blue, alpha) of a #rgb, #rrggbb or #rrggbbaa
    colour"""
    value = color.strip().lower()
    if value in ("none", "transparent"):
        return (0, 0, 0, 0)
    if not value.startswith("#"):
        raise ValueError("Unsupported PNG colour {!r}".format(color))
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        raise ValueError("Unsupported PNG colour {!r}".format(color))
    try:
        return tuple(bytes.fromhex(digits))
    except ValueError:
        raise ValueError(
            "Unsupported PNG colour {!r}".format(color)
        ) from None


class PngQrImage(SymbolImage):
    HEADER = b"\x89PNG\r\n\x1a\x0a"

    def __init__(self, code, style=None):
        super().__init__(code, style)
        self.foreground = bytes(parse_color(self.style.color))
        self.background = bytes(parse_color(self.style.background_color))

    class Chunk(ABC):
        def __init__(self, type_):
            self.type = type_

        @staticmethod
        def encode_int(i, size=4):
            return i.to_bytes(size, "big")

        @abstractmethod
        def payload(self):
            """Return iterable of bytes that make the content of chunk"""
            pass

        def to_bytes(self):
            payload_bytes = b"".join(self.payload())
            length = self.encode_int(len(payload_bytes))
            type_and_payload = self.type + payload_bytes
            crc = self.encode_int(crc32(type_and_payload))
            return length + type_and_payload + crc

    class IhdrChunk(Chunk):
        TRUECOLOUR_WITH_ALPHA = 6
        NO_INTERLACE = 0

        def __init__(self, width, height, bit_depth=8,
                     color_type=TRUECOLOUR_WITH_ALPHA):
            super().__init__(b"IHDR")
            self.width = width
            self.height = height
            self.bit_depth = bit_depth
            self.color_type = color_type
            self.compression_method = 0  # only deflate
            self.filter_method = 0  # only adaptive filtering with 5 basic types
            self.interlace_method = self.NO_INTERLACE

        def payload(self):
            yield self.encode_int(self.width)
            yield self.encode_int(self.height)
            yield self.encode_int(self.bit_depth, 1)
            yield self.encode_int(self.color_type, 1)
            yield self.encode_int(self.compression_method, 1)
            yield self.encode_int(self.filter_method, 1)
            yield self.encode_int(self.interlace_method, 1)

    class IdatChunk(Chunk):
        def __init__(self):
            super().__init__(b"IDAT")
            self._payload = bytearray()
            self._prev_line = None

        def add_line(self, raw_line):
            # "up" filter turns a repeated line into zeros
            if raw_line == self._prev_line:
                self._payload.append(2)
                self._payload.extend(bytes(len(raw_line)))
            else:
                self._payload.append(0)
                self._payload.extend(raw_line)
            self._prev_line = raw_line

        def payload(self):
            yield compress(bytes(self._payload))

    class IendChunk(Chunk):
        def __init__(self):
            super().__init__(b"IEND")

        def payload(self):
            yield b""

    def _module_coordinates(self, pixels):
        """Module coordinate of the centre of each pixel"""
        scale = self.scale
        quiet_zone = self.style.quiet_zone
        return [(p + 0.5) / scale - quiet_zone for p in range(pixels)]

    def _dark(self, mx, my):
        col = math.floor(mx)
        row = math.floor(my)
        if not (0 <= row < self.code.height and 0 <= col < self.code.width):
            return False
        if not self.modules[row][col]:
            return False
        if self.style.shape == "round":
            return (mx - col - 0.5) ** 2 + (my - row - 0.5) ** 2 <= 0.25
        return True

    def pixel_lines(self):
        """Yield raw RGBA bytes of every pixel line"""
        xs = self._module_coordinates(self.image_width)
        cache = {}
        for my in self._module_coordinates(self.image_height):
            # square modules only depend on the module row
            key = math.floor(my) if self.style.shape == "square" else my
            line = cache.get(key)
            if line is None:
                line = b"".join(
                    self.foreground if self._dark(mx, my) else self.background
                    for mx in xs
                )
                if self.style.shape == "square":
                    cache[key] = line
            yield line

    def _write_header(self, image_file):
        image_file.write(self.HEADER)
        ihdr = self.IhdrChunk(self.image_width, self.image_height)
        image_file.write(ihdr.to_bytes())

    def _write_squares(self, image_file):
        self.idat = self.IdatChunk()
        for line in self.pixel_lines():
            self.idat.add_line(line)

    def _write_finish(self, image_file):
        image_file.write(self.idat.to_bytes())
        image_file.write(self.IendChunk().to_bytes())

    def to_bytes(self):
        out = BytesIO()
        self.write(out)
        return out.getvalue()
