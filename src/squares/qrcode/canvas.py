from itertools import chain, islice

from . import tables
from .bitarray import BitArray
from .errors import InternalInvariantViolation


EMPTY = None
DATA_LIGHT = 0
DATA_DARK = 1
FUNCTION_DARK = -1
FUNCTION_LIGHT = -2
# format and version information, written after masking
RESERVED = -3


def is_dark(state):
    return state == DATA_DARK or state == FUNCTION_DARK


def is_data(state):
    return state == DATA_DARK or state == DATA_LIGHT


def codeword_bits(data, ec, half_codeword=False):
    """Bits of data then correction codewords, the low nibble of the last
    data codeword skipped when it is a 4-bit codeword"""
    data_bits = BitArray(data)
    count = len(data_bits) - 4 if half_codeword else len(data_bits)
    return chain(islice(data_bits, count), BitArray(ec))


class Canvas:
    """Module grid of one symbol under construction.

    Cells are addressed as matrix[row][col] with (0, 0) the top left
    module. mark_* methods take x (column) before y (row).
    """

    def __init__(self, version):
        self.version = version
        self.width = version.width
        self.height = version.height
        self.matrix = [[EMPTY] * self.width for i in range(self.height)]

    def mark_rectangle(self, x, y, width, height, color_code):
        for row in range(y, y + height):
            for col in range(x, x + width):
                self.matrix[row][col] = color_code

    def mark_module(self, x, y, dark):
        self.matrix[y][x] = FUNCTION_DARK if dark else FUNCTION_LIGHT

    def mark_rings(self, x, y, size):
        """Concentric square rings alternating dark and light, dark outside"""
        for dy in range(size):
            for dx in range(size):
                ring = min((dx, dy, size - 1 - dx, size - 1 - dy))
                self.mark_module(x + dx, y + dy, ring % 2 == 0)

    def mark_finder_pattern(self, x, y):
        self.mark_rings(x, y, 7)
        # 3x3 centre instead of a single ring
        self.mark_rectangle(x + 2, y + 2, 3, 3, FUNCTION_DARK)

    def draw_function_patterns(self):
        kind = self.version.kind
        if kind == "qr":
            self.draw_qr_patterns()
        elif kind == "micro":
            self.draw_micro_patterns()
        elif kind == "rmqr":
            self.draw_rmqr_patterns()
        else:
            raise InternalInvariantViolation(
                "Unknown symbol kind {!r}".format(kind)
            )

    # QR codes

    def draw_qr_patterns(self):
        w = self.width
        self.mark_finder_pattern(0, 0)
        self.mark_finder_pattern(w - 7, 0)
        self.mark_finder_pattern(0, w - 7)
        self.mark_rectangle(7, 0, 1, 8, FUNCTION_LIGHT)
        self.mark_rectangle(0, 7, 8, 1, FUNCTION_LIGHT)
        self.mark_rectangle(w - 8, 7, 8, 1, FUNCTION_LIGHT)
        self.mark_rectangle(w - 8, 0, 1, 8, FUNCTION_LIGHT)
        self.mark_rectangle(0, w - 8, 8, 1, FUNCTION_LIGHT)
        self.mark_rectangle(7, w - 8, 1, 8, FUNCTION_LIGHT)
        for i in range(8, w - 8):
            self.mark_module(i, 6, i % 2 == 0)
            self.mark_module(6, i, i % 2 == 0)
        self.mark_alignment_patterns()
        # dark module
        self.mark_module(8, w - 8, True)
        self.reserve_qr_format_area()
        if self.version.number >= 7:
            self.mark_rectangle(0, w - 11, 6, 3, RESERVED)
            self.mark_rectangle(w - 11, 0, 3, 6, RESERVED)

    def mark_alignment_patterns(self):
        number = self.version.number
        if number < 2:
            return
        positions = tables.alignments[number - 2][1:]
        for y in positions:
            for x in positions:
                self.mark_rings(x - 2, y - 2, 5)
        for i in positions[:-1]:
            self.mark_rings(4, i - 2, 5)
            self.mark_rings(i - 2, 4, 5)

    def reserve_qr_format_area(self):
        w = self.width
        self.mark_rectangle(8, 0, 1, 6, RESERVED)
        self.mark_rectangle(0, 8, 6, 1, RESERVED)
        self.mark_rectangle(7, 8, 2, 1, RESERVED)
        self.mark_rectangle(8, 7, 1, 1, RESERVED)
        self.mark_rectangle(w - 8, 8, 8, 1, RESERVED)
        self.mark_rectangle(8, w - 7, 1, 7, RESERVED)

    # Micro QR codes

    def draw_micro_patterns(self):
        w = self.width
        self.mark_finder_pattern(0, 0)
        self.mark_rectangle(7, 0, 1, 8, FUNCTION_LIGHT)
        self.mark_rectangle(0, 7, 7, 1, FUNCTION_LIGHT)
        for i in range(8, w):
            self.mark_module(i, 0, i % 2 == 0)
            self.mark_module(0, i, i % 2 == 0)
        self.mark_rectangle(1, 8, 8, 1, RESERVED)
        self.mark_rectangle(8, 1, 1, 7, RESERVED)

    # rMQR codes

    def draw_rmqr_patterns(self):
        w = self.width
        h = self.height
        self.mark_finder_pattern(0, 0)
        self.mark_rectangle(7, 0, 1, min((8, h)), FUNCTION_LIGHT)
        if h >= 9:
            self.mark_rectangle(0, 7, 7, 1, FUNCTION_LIGHT)
        self.mark_rings(w - 5, h - 5, 5)
        # corner finder sub patterns
        self.mark_rectangle(0, h - 1, 3, 1, FUNCTION_DARK)
        if h >= 11:
            self.mark_module(0, h - 2, True)
            self.mark_module(1, h - 2, False)
        self.mark_module(w - 1, 0, True)
        self.mark_module(w - 2, 0, True)
        self.mark_module(w - 1, 1, True)
        self.mark_module(w - 2, 1, False)
        for x in tables.rmqr_alignments[w]:
            self.mark_rings(x - 1, 0, 3)
            self.mark_rings(x - 1, h - 3, 3)
        for x in range(w):
            for y in (0, h - 1):
                if self.matrix[y][x] is EMPTY:
                    self.mark_module(x, y, x % 2 == 0)
        for x in chain((0, w - 1), tables.rmqr_alignments[w]):
            for y in range(h):
                if self.matrix[y][x] is EMPTY:
                    self.mark_module(x, y, y % 2 == 0)
        self.mark_rectangle(8, 1, 3, 5, RESERVED)
        self.mark_rectangle(11, 1, 1, 3, RESERVED)
        self.mark_rectangle(w - 8, h - 6, 3, 5, RESERVED)
        self.mark_rectangle(w - 5, h - 6, 3, 1, RESERVED)

    def data_positions(self):
        """Yield free (x, y) positions in placement order.

        Column pairs are walked right to left, alternating upwards and
        downwards, the right column of a pair before the left one.
        """
        kind = self.version.kind
        right = self.width - 2 if kind == "rmqr" else self.width - 1
        upward = True
        while right >= 1:
            if kind == "qr" and right == 6:
                # vertical timing pattern
                right = 5
            if upward:
                rows = range(self.height - 1, -1, -1)
            else:
                rows = range(self.height)
            for y in rows:
                for x in (right, right - 1):
                    if self.matrix[y][x] is EMPTY:
                        yield (x, y)
            upward = not upward
            right -= 2

    def mark_bits(self, bits):
        """Place bits along data positions, leftover positions stay light"""
        positions = self.data_positions()
        for bit in bits:
            try:
                x, y = next(positions)
            except StopIteration:
                raise InternalInvariantViolation(
                    "More codeword bits than free modules in version {}"
                    .format(self.version)
                ) from None
            self.matrix[y][x] = DATA_DARK if bit else DATA_LIGHT
        for x, y in positions:
            self.matrix[y][x] = DATA_LIGHT

    def mark_codewords(self, data, ec, half_codeword=False):
        self.mark_bits(codeword_bits(data, ec, half_codeword))

    def write_reserved(self, x, y, bit):
        if self.matrix[y][x] != RESERVED:
            raise InternalInvariantViolation(
                "Module ({}, {}) is not reserved for format information"
                .format(x, y)
            )
        self.matrix[y][x] = FUNCTION_DARK if bit else FUNCTION_LIGHT

    def empty_count(self):
        return sum(row.count(EMPTY) for row in self.matrix)

    def to_matrix(self):
        """Final grid as tuple of rows of booleans, True being dark"""
        for y, row in enumerate(self.matrix):
            for x, state in enumerate(row):
                if state is EMPTY or state == RESERVED:
                    raise InternalInvariantViolation(
                        "Module ({}, {}) left unset".format(x, y)
                    )
        return tuple(
            tuple(is_dark(state) for state in row) for row in self.matrix
        )
