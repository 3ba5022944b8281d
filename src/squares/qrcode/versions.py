import re
from collections import namedtuple

from . import tables
from .errors import UnsupportedConfiguration, InternalInvariantViolation


symbol_kinds = ("qr", "micro", "rmqr")

# ec levels each symbology offers at all
kind_ec_levels = {
    "qr": ("L", "M", "Q", "H"),
    "micro": ("L", "M", "Q"),
    "rmqr": ("M", "H")
}

default_ec_levels = {
    "qr": "M",
    "micro": "L",
    "rmqr": "M"
}

qr_mode_indicators = {
    "numeric": 0b0001,
    "alphanumeric": 0b0010,
    "byte": 0b0100,
    "kanji": 0b1000
}

micro_mode_indicators = {
    "numeric": 0b0,
    "alphanumeric": 0b1,
    "byte": 0b10,
    "kanji": 0b11
}

rmqr_mode_indicators = {
    "numeric": 0b001,
    "alphanumeric": 0b010,
    "byte": 0b011,
    "kanji": 0b100
}


class Version(namedtuple("Version", ("kind", "number", "width", "height"))):
    """Size variant of one symbology.

    number is 1..40 for QR codes, 1..4 for Micro QR codes and the version
    indicator 0..31 for rMQR codes.
    """
    __slots__ = ()

    @property
    def name(self):
        if self.kind == "micro":
            return "M{}".format(self.number)
        if self.kind == "rmqr":
            return "R{}x{}".format(self.height, self.width)
        return str(self.number)

    @property
    def area(self):
        return self.width * self.height

    def __str__(self):
        return self.name


def qr_version(number):
    if not 1 <= number <= 40:
        raise UnsupportedConfiguration(
            "QR code version must be between 1 and 40, got {!r}".format(number)
        )
    width = 4 * number + 17
    return Version("qr", number, width, width)


def micro_version(number):
    if not 1 <= number <= 4:
        raise UnsupportedConfiguration(
            "Micro QR code version must be between M1 and M4, "
            "got {!r}".format(number)
        )
    width = 2 * number + 9
    return Version("micro", number, width, width)


def rmqr_version(height, width):
    try:
        index = tables.rmqr_sizes.index((height, width))
    except ValueError:
        raise UnsupportedConfiguration(
            "R{}x{} is not an rMQR code size".format(height, width)
        ) from None
    return Version("rmqr", index, width, height)


def rmqr_versions():
    return [rmqr_version(h, w) for h, w in tables.rmqr_sizes]


def parse_version(kind, value):
    """Build a Version from a number, a name like "M3" or "R11x43" or
    a (height, width) pair for rMQR codes"""
    if isinstance(value, Version):
        if value.kind != kind:
            raise UnsupportedConfiguration(
                "Version {} is not a {} version".format(value, kind)
            )
        return value
    if kind == "rmqr":
        if isinstance(value, str):
            match = re.match(r"^R?(\d+)x(\d+)$", value.strip(), re.IGNORECASE)
            if match is None:
                raise UnsupportedConfiguration(
                    "Unknown rMQR version {!r}".format(value)
                )
            value = (int(match.group(1)), int(match.group(2)))
        height, width = value
        return rmqr_version(height, width)
    if isinstance(value, str):
        value = value.strip().upper()
        if kind == "micro" and value.startswith("M"):
            value = value[1:]
        if not value.isdigit():
            raise UnsupportedConfiguration(
                "Unknown {} version {!r}".format(kind, value)
            )
        value = int(value)
    if kind == "micro":
        return micro_version(value)
    if kind == "qr":
        return qr_version(value)
    raise UnsupportedConfiguration("Unknown symbol kind {!r}".format(kind))


def check_kind(kind):
    if kind not in symbol_kinds:
        raise UnsupportedConfiguration(
            "Unknown symbol kind {!r}, expected one of {}".format(
                kind, ", ".join(symbol_kinds)
            )
        )


def check_ec_level(kind, ec_level):
    if ec_level not in tables.ec_level_index:
        raise UnsupportedConfiguration(
            "Unknown error correction level {!r}".format(ec_level)
        )
    if ec_level not in kind_ec_levels[kind]:
        raise UnsupportedConfiguration(
            "Error correction level {} is not available for {} codes".format(
                ec_level, kind
            )
        )


def _row(version, qr_table, micro_table, rmqr_table):
    if version.kind == "qr":
        return qr_table[version.number - 1]
    if version.kind == "micro":
        return micro_table[version.number - 1]
    return rmqr_table[version.number]


def has_ec_level(version, ec_level):
    row = _row(version, tables.capacities, tables.micro_capacities,
               tables.rmqr_capacities)
    return row[tables.ec_level_index[ec_level]] > 0


def data_capacity(version, ec_level):
    """Number of data bits the version holds at the given level"""
    check_ec_level(version.kind, ec_level)
    row = _row(version, tables.capacities, tables.micro_capacities,
               tables.rmqr_capacities)
    capacity = row[tables.ec_level_index[ec_level]]
    if capacity == 0:
        raise UnsupportedConfiguration(
            "Error correction level {} is not available for version {}".format(
                ec_level, version
            )
        )
    return capacity


def block_format(version, ec_level):
    row = _row(version, tables.blocks, tables.micro_blocks,
               tables.rmqr_blocks)
    format_ = row[tables.ec_level_index[ec_level]]
    if format_ is None:
        raise UnsupportedConfiguration(
            "Error correction level {} is not available for version {}".format(
                ec_level, version
            )
        )
    if len(format_) not in (3, 5):
        raise InternalInvariantViolation(
            "Malformed block table entry {!r} for version {}".format(
                format_, version
            )
        )
    return format_


def block_groups(version, ec_level):
    """List of (block count, data codewords, ec codewords) per group"""
    format_ = block_format(version, ec_level)
    ec_len = format_[0]
    groups = (len(format_) - 1) // 2
    return [
        (format_[2 * group + 1], format_[2 * group + 2], ec_len)
        for group in range(groups)
    ]


def total_codewords(version, ec_level):
    return sum(
        count * (data_len + ec_len)
        for count, data_len, ec_len in block_groups(version, ec_level)
    )


def data_codewords(version, ec_level):
    # M1 and M3 end with a 4-bit codeword, counted as a whole one
    return (data_capacity(version, ec_level) + 7) // 8


def has_half_codeword(version, ec_level):
    return data_capacity(version, ec_level) % 8 != 0


def length_bits(mode, version):
    """Width of the character count field, None if the version lacks
    the mode"""
    index = tables.mode_index[mode]
    if version.kind == "qr":
        if version.number < 10:
            return tables.length_bits_v9[index]
        elif version.number < 27:
            return tables.length_bits_v26[index]
        return tables.length_bits_v40[index]
    if version.kind == "micro":
        return tables.micro_length_bits[version.number - 1][index]
    return tables.rmqr_length_bits[version.number][index]


def length_bits_class(version):
    return tuple(length_bits(mode, version) for mode in tables.modes)


def mode_bits(version):
    if version.kind == "qr":
        return 4
    if version.kind == "micro":
        return version.number - 1
    return 3


def mode_indicator(mode, version):
    if version.kind == "qr":
        return qr_mode_indicators[mode]
    if version.kind == "micro":
        return micro_mode_indicators[mode]
    return rmqr_mode_indicators[mode]


def terminator_length(version):
    if version.kind == "qr":
        return 4
    if version.kind == "micro":
        return 2 * version.number + 1
    return 3
