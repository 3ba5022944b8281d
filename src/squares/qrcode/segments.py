# Splitting data into mode segments.
#
# Every character (or Shift JIS byte pair) gets the set of modes able to
# encode it. A shortest path search over those sets then picks the mode
# of each character so that the whole bit stream is as short as possible
# for the given version, including the header of every segment.

import logging
from collections import namedtuple

from . import tables, versions
from .errors import InvalidCharacter


logger = logging.getLogger(__name__)

alphanumeric_special = " $%*+-./:"
alphanumeric_symbols = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
numeric_symbols = "0123456789"

# cost of one character in sixths of a bit
char_costs = {
    "numeric": 20,
    "alphanumeric": 33,
    "byte": 48,
    "kanji": 78
}


class Segment(namedtuple("Segment", ("mode", "data"))):
    """Run of characters encoded in a single mode.

    data is bytes: ASCII digits or symbols for numeric and alphanumeric
    segments, raw bytes for byte segments and Shift JIS byte pairs for
    kanji segments.
    """
    __slots__ = ()

    @property
    def char_count(self):
        if self.mode == "kanji":
            return len(self.data) // 2
        return len(self.data)

    @property
    def payload_bits(self):
        return encoding_length(self.mode, self.char_count)


def encode_alnum_char(c):
    o = ord(c)
    if o >= 48 and o <= 57:
        return o - 48
    if o >= 65 and o <= 90:
        return o - 55
    try:
        return 36 + alphanumeric_special.index(c)
    except ValueError:
        raise InvalidCharacter(
            "Symbol {!r} is not in QR code alphanumeric alphabet".format(c)
        ) from None


def encoding_length(encoding, data_length):
    if encoding == "numeric":
        remainder = data_length % 3
        data_bitlength = 10 * (data_length // 3)
        if remainder == 1:
            data_bitlength += 4
        elif remainder == 2:
            data_bitlength += 7
    elif encoding == "alphanumeric":
        remainder = data_length % 2
        data_bitlength = 11 * (data_length // 2)
        if remainder == 1:
            data_bitlength += 6
    elif encoding == "byte":
        data_bitlength = 8 * data_length
    elif encoding == "kanji":
        data_bitlength = 13 * data_length
    else:
        raise ValueError("Unknown encoding: " + repr(encoding))
    return data_bitlength


def is_kanji_pair(first, second):
    code = first << 8 | second
    if not (0x8140 <= code <= 0x9FFC or 0xE040 <= code <= 0xEBBF):
        return False
    return 0x40 <= second <= 0xFC and second != 0x7F


def kanji_value(pair):
    code = pair[0] << 8 | pair[1]
    if code < 0xE040:
        code -= 0x8140
    else:
        code -= 0xC140
    return (code >> 8) * 0xC0 + (code & 0xFF)


def _ascii_modes(symbol):
    """Modes besides byte mode able to encode one ASCII symbol"""
    if symbol in numeric_symbols:
        return ("numeric", "alphanumeric")
    if symbol in alphanumeric_symbols:
        return ("alphanumeric",)
    return ()


def classify(data, encoding="iso-8859-1", kanji=False):
    """Return a list of units, one per character.

    Each unit maps every mode able to encode the character to the bytes
    the character takes in a segment of that mode.
    """
    if isinstance(data, (bytes, bytearray)):
        return _classify_bytes(bytes(data), kanji)
    if not isinstance(data, str):
        raise TypeError("Data should be str or bytes, got {}".format(
            type(data).__name__
        ))
    units = []
    for position, char in enumerate(data):
        unit = {}
        if len(char.encode("utf-8")) == 1:
            for mode in _ascii_modes(char):
                unit[mode] = char.encode("ascii")
        try:
            unit["byte"] = char.encode(encoding)
        except UnicodeEncodeError:
            pass
        if kanji:
            try:
                pair = char.encode("shift_jis")
            except UnicodeEncodeError:
                pass
            else:
                if len(pair) == 2 and is_kanji_pair(pair[0], pair[1]):
                    unit["kanji"] = pair
        if not unit:
            raise InvalidCharacter(
                "Character {!r} at position {} can not be encoded in {}{}"
                .format(char, position, encoding,
                        " nor Shift JIS" if kanji else "")
            )
        units.append(unit)
    return units


def _classify_bytes(data, kanji):
    units = []
    i = 0
    while i < len(data):
        if kanji and i + 1 < len(data) and is_kanji_pair(data[i], data[i + 1]):
            pair = data[i:i + 2]
            units.append({"kanji": pair, "byte": pair})
            i += 2
            continue
        unit = {"byte": data[i:i + 1]}
        for mode in _ascii_modes(chr(data[i])):
            unit[mode] = data[i:i + 1]
        units.append(unit)
        i += 1
    return units


def _unit_cost(mode, unit):
    if mode == "byte":
        return char_costs["byte"] * len(unit["byte"])
    return char_costs[mode]


def available_modes(version):
    return [
        mode for mode in tables.modes
        if versions.length_bits(mode, version) is not None
    ]


def optimize(units, version):
    """Pick the cheapest segmentation of units for the version.

    Raises InvalidCharacter when a character needs a mode the version
    does not have.
    """
    if not units:
        return []
    modes = available_modes(version)
    mode_bits = versions.mode_bits(version)
    head_costs = {
        mode: (mode_bits + versions.length_bits(mode, version)) * 6
        for mode in modes
    }
    prev_costs = dict(head_costs)
    char_modes = []
    for position, unit in enumerate(units):
        cur_costs = {}
        for mode in modes:
            if mode in unit:
                cur_costs[mode] = prev_costs[mode] + _unit_cost(mode, unit)
        if not cur_costs:
            raise InvalidCharacter(
                "Character at position {} needs mode {} which version {} "
                "lacks".format(position, "/".join(sorted(unit)), version)
            )
        best_costs = dict(cur_costs)
        came_from = {mode: mode for mode in cur_costs}
        # start a new segment after this character
        for to_mode in modes:
            for from_mode in modes:
                if from_mode not in cur_costs:
                    continue
                cost = (cur_costs[from_mode] + 5) // 6 * 6
                cost += head_costs[to_mode]
                if to_mode not in best_costs or cost < best_costs[to_mode]:
                    best_costs[to_mode] = cost
                    came_from[to_mode] = from_mode
        char_modes.append(came_from)
        prev_costs = best_costs

    mode = min(modes, key=lambda m: prev_costs[m])
    unit_modes = []
    for came_from in reversed(char_modes):
        mode = came_from[mode]
        unit_modes.append(mode)
    unit_modes.reverse()

    segments = []
    for mode, unit in zip(unit_modes, units):
        if segments and segments[-1][0] == mode:
            segments[-1][1].extend(unit[mode])
        else:
            segments.append((mode, bytearray(unit[mode])))
    return [Segment(mode, bytes(data)) for mode, data in segments]


def analyze(data, version=None, encoding="iso-8859-1", kanji=False):
    """Split data into segments, optimal for version (QR 1 by default)"""
    if version is None:
        version = versions.qr_version(1)
    segments = optimize(classify(data, encoding, kanji), version)
    logger.debug(
        "Segments for version %s: %s", version,
        ", ".join("{}({})".format(s.mode, s.char_count) for s in segments)
    )
    return segments
