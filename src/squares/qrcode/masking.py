import logging

from .canvas import (
    DATA_DARK, DATA_LIGHT, is_dark, is_data
)
from .errors import InternalInvariantViolation
from .galoisfield import modulo_gf2


logger = logging.getLogger(__name__)

# a module is inverted where the function returns 0
mask_functions = [
    lambda row, col: (row ^ col) & 1,
    lambda row, col: row & 1,
    lambda row, col: col % 3,
    lambda row, col: (row + col) % 3,
    lambda row, col: (row // 2 ^ col // 3) & 1,
    lambda row, col: (row * col) % 6,
    lambda row, col: ((row * col) % 2 + (row * col) % 3) & 1,
    lambda row, col: (((row + col) & 1) + (row * col) % 3) & 1
]

# QR mask patterns usable by each symbology, in mask id order
kind_masks = {
    "qr": (0, 1, 2, 3, 4, 5, 6, 7),
    "micro": (1, 4, 6, 7),
    "rmqr": (4,)
}

ec_level_code = {
    "L": 0b01,
    "M": 0b00,
    "Q": 0b11,
    "H": 0b10
}

micro_symbol_numbers = {
    (1, "L"): 0,
    (2, "L"): 1,
    (2, "M"): 2,
    (3, "L"): 3,
    (3, "M"): 4,
    (4, "L"): 5,
    (4, "M"): 6,
    (4, "Q"): 7
}

FINDER_LIKE = (1, 0, 1, 1, 1, 0, 1)


def mask_candidates(kind):
    return [(i, mask_functions[pattern])
            for i, pattern in enumerate(kind_masks[kind])]


def apply_mask(matrix, fn):
    """Return a copy of matrix with data modules under the mask inverted"""
    masked = []
    for row, line in enumerate(matrix):
        new_line = list(line)
        for col, state in enumerate(line):
            if is_data(state) and fn(row, col) == 0:
                new_line[col] = DATA_LIGHT if state == DATA_DARK else DATA_DARK
        masked.append(new_line)
    return masked


def colors(matrix):
    return [[int(is_dark(state)) for state in line] for line in matrix]


def run_penalty(lines):
    penalty_score = 0
    for line in lines:
        last = None
        consecutive = 0
        for color in line:
            if color == last:
                consecutive += 1
            else:
                if consecutive >= 5:
                    penalty_score += consecutive - 2
                consecutive = 1
            last = color
        if consecutive >= 5:
            penalty_score += consecutive - 2
    return penalty_score


def block_penalty(grid):
    penalty_score = 0
    for y in range(len(grid) - 1):
        line, below = grid[y], grid[y + 1]
        for x in range(len(line) - 1):
            if line[x] == line[x + 1] == below[x] == below[x + 1]:
                penalty_score += 3
    return penalty_score


def finder_like_penalty(lines):
    penalty_score = 0
    for line in lines:
        # beyond the symbol everything is light
        padded = [0] * 4 + list(line) + [0] * 4
        for i in range(4, len(padded) - 10):
            if tuple(padded[i:i + 7]) != FINDER_LIKE:
                continue
            if not any(padded[i - 4:i]) or not any(padded[i + 7:i + 11]):
                penalty_score += 40
    return penalty_score


def balance_penalty(grid):
    total = len(grid) * len(grid[0])
    dark_modules = sum(sum(line) for line in grid)
    # floor(|dark% - 50| / 5) without floats
    deviation = abs(20 * dark_modules - 10 * total) // total
    return 10 * deviation


def penalty_scores(matrix):
    """Return the four penalty terms of a masked matrix"""
    grid = colors(matrix)
    columns = [list(column) for column in zip(*grid)]
    return (
        run_penalty(grid) + run_penalty(columns),
        block_penalty(grid),
        finder_like_penalty(grid) + finder_like_penalty(columns),
        balance_penalty(grid)
    )


def penalty(matrix):
    return sum(penalty_scores(matrix))


def micro_score(matrix):
    """Micro QR mask evaluation, higher is better"""
    sum1 = sum(is_dark(line[-1]) for line in matrix[1:])
    sum2 = sum(is_dark(state) for state in matrix[-1][1:])
    if sum1 <= sum2:
        return sum1 * 16 + sum2
    return sum2 * 16 + sum1


def evaluate(kind, matrix):
    if kind == "micro":
        return micro_score(matrix)
    return penalty(matrix)


def evaluate_masks(canvas):
    """Score every mask candidate of the canvas, in mask id order"""
    kind = canvas.version.kind
    return [
        evaluate(kind, apply_mask(canvas.matrix, fn))
        for i, fn in mask_candidates(kind)
    ]


def select_mask(canvas):
    """Apply the best mask to the canvas and return its id.

    Lowest penalty wins, highest score for Micro QR codes. The first
    candidate wins ties.
    """
    kind = canvas.version.kind
    best_matrix = None
    best_score = None
    best_mask_index = None
    for mask_index, fn in mask_candidates(kind):
        masked = apply_mask(canvas.matrix, fn)
        score = evaluate(kind, masked)
        logger.debug("Mask %d of version %s scored %d",
                     mask_index, canvas.version, score)
        if kind == "micro":
            better = best_score is None or score > best_score
        else:
            better = best_score is None or score < best_score
        if better:
            best_score = score
            best_matrix = masked
            best_mask_index = mask_index
    canvas.matrix = best_matrix
    return best_mask_index


def format_string(ec_level, mask):
    ec_code = ec_level_code[ec_level]
    format_bits = (ec_code << 13) | (mask << 10)
    format_ec_bits = modulo_gf2(format_bits, 0b10100110111)
    format_s = format_bits | format_ec_bits
    format_s ^= 0b101010000010010
    return format_s


def version_string(version):
    version_bits = version << 12
    version_ec_bits = modulo_gf2(version_bits, 0b1111100100101)
    version_s = version_bits | version_ec_bits
    return version_s


def micro_format_string(version, ec_level, mask):
    try:
        symbol_number = micro_symbol_numbers[(version, ec_level)]
    except KeyError:
        raise InternalInvariantViolation(
            "No Micro QR symbol number for M{}-{}".format(version, ec_level)
        ) from None
    format_bits = (symbol_number << 12) | (mask << 10)
    format_ec_bits = modulo_gf2(format_bits, 0b10100110111)
    format_s = format_bits | format_ec_bits
    format_s ^= 0b100010001000101
    return format_s


def rmqr_format_strings(version_index, ec_level):
    """Return format information next to the finder pattern and next to
    the finder sub pattern"""
    ec_bit = 1 if ec_level == "H" else 0
    format_bits = ((ec_bit << 5) | version_index) << 12
    format_ec_bits = modulo_gf2(format_bits, 0b1111100100101)
    format_s = format_bits | format_ec_bits
    return (format_s ^ 0b011111101010110010,
            format_s ^ 0b100000101001111011)


def mark_format_string(canvas, ec_level, mask):
    format_s = format_string(ec_level, mask)
    w = canvas.width
    for i in range(15):
        bit = (format_s >> i) & 1
        if i < 6:
            canvas.write_reserved(8, i, bit)
        elif i < 8:
            canvas.write_reserved(8, i + 1, bit)
        elif i == 8:
            canvas.write_reserved(7, 8, bit)
        else:
            canvas.write_reserved(14 - i, 8, bit)
        if i < 8:
            canvas.write_reserved(w - 1 - i, 8, bit)
        else:
            canvas.write_reserved(8, w - 15 + i, bit)


def mark_version_information(canvas):
    version = canvas.version.number
    if version < 7:
        return
    w = canvas.width
    version_s = version_string(version)
    for bit_index in range(18):
        bit = (version_s >> bit_index) & 1
        canvas.write_reserved(bit_index // 3, w - 11 + bit_index % 3, bit)
        canvas.write_reserved(w - 11 + bit_index % 3, bit_index // 3, bit)


def mark_micro_format_string(canvas, ec_level, mask):
    format_s = micro_format_string(canvas.version.number, ec_level, mask)
    for i in range(8):
        canvas.write_reserved(i + 1, 8, (format_s >> (14 - i)) & 1)
    for i in range(7):
        canvas.write_reserved(8, i + 1, (format_s >> i) & 1)


def mark_rmqr_format_strings(canvas, ec_level):
    w = canvas.width
    h = canvas.height
    finder_s, sub_finder_s = rmqr_format_strings(canvas.version.number,
                                                 ec_level)
    for i in range(18):
        canvas.write_reserved(8 + i // 5, 1 + i % 5, (finder_s >> i) & 1)
    for i in range(15):
        canvas.write_reserved(w - 8 + i // 5, h - 6 + i % 5,
                              (sub_finder_s >> i) & 1)
    for i in range(15, 18):
        canvas.write_reserved(w - 20 + i, h - 6, (sub_finder_s >> i) & 1)


def mark_information(canvas, ec_level, mask):
    """Write format (and version) information into the reserved areas"""
    kind = canvas.version.kind
    if kind == "qr":
        mark_format_string(canvas, ec_level, mask)
        mark_version_information(canvas)
    elif kind == "micro":
        mark_micro_format_string(canvas, ec_level, mask)
    else:
        mark_rmqr_format_strings(canvas, ec_level)
