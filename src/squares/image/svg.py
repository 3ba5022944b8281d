from io import StringIO
from xml.sax.saxutils import escape

from .image import SymbolImage


TRANSPARENT = ("none", "transparent")


def attribute(value):
    return escape(value, {'"': "&quot;"})


def number(value):
    return "{:g}".format(value)


class SvgQrImage(SymbolImage):
    """Class for saving symbol image as .svg file"""
    file_open_mode = "w"

    SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg"\n'\
        '    version="1.1" width="{width}" height="{height}"\n'\
        '    viewBox="{x} {y} {view_width} {view_height}">\n'
    SVG_CLOSE = "</svg>\n"
    RECTANGLE = '    <rect x="{x}" y="{y}" width="{width}"'\
                ' height="{height}" fill="{fill}" />\n'
    PATH = '    <path fill="{fill}" d="{d}" />\n'

    def _write_header(self, image_file):
        quiet_zone = number(-self.style.quiet_zone)
        image_file.write(
            self.SVG_OPEN.format(
                width=self.image_width,
                height=self.image_height,
                x=quiet_zone,
                y=quiet_zone,
                view_width=number(self.view_width),
                view_height=number(self.view_height)
            )
        )
        if self.style.background_color.lower() not in TRANSPARENT:
            image_file.write(
                self.RECTANGLE.format(
                    x=quiet_zone,
                    y=quiet_zone,
                    width=number(self.view_width),
                    height=number(self.view_height),
                    fill=attribute(self.style.background_color)
                )
            )

    def rectangles(self):
        """Yield (x, y, width, height) covering all dark modules"""
        bits = [list(line) for line in self.modules]
        height = len(bits)
        width = len(bits[0]) if bits else 0
        for y in range(height):
            x = 0
            while x < width:
                if not bits[y][x]:
                    x = x + 1
                    continue
                next_x = x + 1
                while next_x < width and bits[y][next_x]:
                    bits[y][next_x] = False
                    next_x += 1
                rect_height = 1
                while y + rect_height < height and \
                        all(bits[y + rect_height][t] for t in range(x, next_x)):
                    for t in range(x, next_x):
                        bits[y + rect_height][t] = False
                    rect_height += 1
                yield (x, y, next_x - x, rect_height)
                x = next_x

    def square_path(self):
        return "".join(
            "M{},{}h{}v{}h-{}z".format(x, y, w, h, w)
            for x, y, w, h in self.rectangles()
        )

    def round_path(self):
        parts = []
        for y, line in enumerate(self.modules):
            for x, dark in enumerate(line):
                if dark:
                    parts.append(
                        "M{},{}a0.5,0.5 0 1,0 1,0a0.5,0.5 0 1,0 -1,0z"
                        .format(x, number(y + 0.5))
                    )
        return "".join(parts)

    def _write_squares(self, image_file):
        if self.style.shape == "round":
            d = self.round_path()
        else:
            d = self.square_path()
        image_file.write(self.PATH.format(fill=attribute(self.style.color),
                                         d=d))

    def _write_finish(self, image_file):
        image_file.write(self.SVG_CLOSE)

    def to_string(self):
        out = StringIO()
        self.write(out)
        return out.getvalue()
