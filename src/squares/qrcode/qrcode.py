# module state:
# implemented:
#       - QR codes version 1 through 40
#       - Micro QR codes M1 through M4
#       - rMQR codes R7x43 through R17x139
#       - numeric, alphanumeric, byte and kanji modes with optimal
#         segmentation
# not implemented:
#       - ECI and FNC1 modes
#       - structured append

import logging
from itertools import chain

from . import bitwriter, masking, reedsolomon, segments, selector, versions
from .canvas import Canvas


logger = logging.getLogger(__name__)

# light modules around the symbol
quiet_zones = {
    "qr": 4,
    "micro": 2,
    "rmqr": 2
}


class QRCode:
    """Finished symbol: a grid of dark and light modules.

    kind is one of "qr", "micro" and "rmqr". When version is None the
    smallest version holding the data is selected, for rMQR codes in the
    order given by strategy ("width", "height" or "area"). Strings are
    encoded in byte mode with encoding, kanji enables Shift JIS kanji
    mode.
    """

    def __init__(self, data, ec_level=None, kind="qr", strategy=None,
                 version=None, encoding="iso-8859-1", kanji=False):
        versions.check_kind(kind)
        if ec_level is None:
            ec_level = versions.default_ec_levels[kind]
        versions.check_ec_level(kind, ec_level)
        if version is None:
            version, plan = selector.select(data, ec_level, kind, strategy,
                                            encoding, kanji)
        else:
            version = versions.parse_version(kind, version)
            plan = segments.analyze(data, version, encoding, kanji)
        encoded = bitwriter.write(plan, version, ec_level)
        data_cw, ec_cw = reedsolomon.codewords(encoded, version, ec_level)
        canvas = Canvas(version)
        canvas.draw_function_patterns()
        canvas.mark_codewords(data_cw, ec_cw,
                              versions.has_half_codeword(version, ec_level))
        mask = masking.select_mask(canvas)
        masking.mark_information(canvas, ec_level, mask)
        self._kind = kind
        self._version = version
        self._ec_level = ec_level
        self._mask = mask
        self._segments = tuple(plan)
        self._matrix = canvas.to_matrix()
        logger.debug("Encoded %d segments as %s code %s-%s with mask %d",
                     len(plan), kind, version, ec_level, mask)

    @property
    def kind(self):
        return self._kind

    @property
    def version(self):
        return self._version

    @property
    def ec_level(self):
        return self._ec_level

    @property
    def mask(self):
        return self._mask

    @property
    def segments(self):
        return self._segments

    @property
    def width(self):
        return self._version.width

    @property
    def height(self):
        return self._version.height

    @property
    def quiet_zone(self):
        return quiet_zones[self._kind]

    def is_dark(self, row, col):
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                "Module ({}, {}) is outside of {}x{} symbol".format(
                    row, col, self.height, self.width
                )
            )
        return self._matrix[row][col]

    def rows(self):
        return self._matrix

    def to_str(self, dark="#", light=" "):
        return "\n".join(
            "".join(dark if module else light for module in line)
            for line in self._matrix
        )

    def __str__(self):
        return self.to_str()

    def __repr__(self):
        return "QRCode(kind={!r}, version={!r}, ec_level={!r}, mask={})" \
            .format(self._kind, self._version.name, self._ec_level, self._mask)

    def _image_bits(self, margin=None):
        if margin is None:
            margin = self.quiet_zone
        blank = [0] * (self.width + 2 * margin)
        return [
            list(line)
            for line in chain(
                (blank for _ in range(margin)),
                (
                    [0] * margin + [int(m) for m in row] + [0] * margin
                    for row in self._matrix
                ),
                (blank for _ in range(margin))
            )
        ]

    @classmethod
    def image_bits(cls, data, ec_level=None, **options):
        """Rows of 0/1 pixels with the quiet zone included"""
        qr = cls(data, ec_level, **options)
        return qr._image_bits()


def encode_standard(data):
    return QRCode(data)


def encode_standard_with_options(data, ec_level, version=None, **options):
    return QRCode(data, ec_level, kind="qr", version=version, **options)


def encode_micro(data):
    return QRCode(data, kind="micro")


def encode_micro_with_options(data, ec_level, version=None, **options):
    return QRCode(data, ec_level, kind="micro", version=version, **options)


def encode_rmqr(data):
    return QRCode(data, kind="rmqr")


def encode_rmqr_with_options(data, ec_level, strategy=None, version=None,
                             **options):
    return QRCode(data, ec_level, kind="rmqr", strategy=strategy,
                  version=version, **options)
