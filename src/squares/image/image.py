from abc import ABC, abstractmethod


SHAPES = ("square", "round")


class QrStyle:
    """Look of a rendered symbol.

    color and background_color are passed to SVG verbatim, PNG output
    understands #rgb, #rrggbb, #rrggbbaa and "none"/"transparent".
    width is the image width in pixels, quiet_zone the light margin in
    modules around the symbol.
    """

    def __init__(self, color="#000000", background_color="#ffffff",
                 shape="square", width=720, quiet_zone=2.0):
        if shape not in SHAPES:
            raise ValueError(
                "Unknown module shape {!r}, expected one of {}".format(
                    shape, ", ".join(SHAPES)
                )
            )
        if int(width) <= 0:
            raise ValueError("Image width must be positive")
        if quiet_zone < 0:
            raise ValueError("Quiet zone can't be negative")
        self.color = color
        self.background_color = background_color
        self.shape = shape
        self.width = int(width)
        self.quiet_zone = quiet_zone

    def __repr__(self):
        return "QrStyle(color={!r}, background_color={!r}, shape={!r}, " \
            "width={}, quiet_zone={})".format(
                self.color, self.background_color, self.shape, self.width,
                self.quiet_zone
            )


class SymbolImage(ABC):
    """Abstract class representing image of a 2D symbol

    Coordinates in module units put the top left module of the symbol
    at (0, 0), the quiet zone lies at negative coordinates and beyond
    the symbol size.
    """
    file_open_mode = "wb"

    def __init__(self, code, style=None):
        self.code = code
        self.style = style or QrStyle()
        self.modules = [list(row) for row in code.rows()]

    @property
    def view_width(self):
        """Width in modules, quiet zone included"""
        return self.code.width + 2 * self.style.quiet_zone

    @property
    def view_height(self):
        return self.code.height + 2 * self.style.quiet_zone

    @property
    def scale(self):
        """Pixels per module"""
        return self.style.width / self.view_width

    @property
    def image_width(self):
        """Total image width in pixels"""
        return self.style.width

    @property
    def image_height(self):
        """Total image height in pixels"""
        return max(1, int(round(self.view_height * self.scale)))

    @abstractmethod
    def _write_header(self, image_file):
        pass

    @abstractmethod
    def _write_squares(self, image_file):
        pass

    @abstractmethod
    def _write_finish(self, image_file):
        pass

    def write(self, image_file):
        self._write_header(image_file)
        self._write_squares(image_file)
        self._write_finish(image_file)
