from . import versions
from .bitarray import BitArray
from .errors import DataTooLong, UnsupportedConfiguration
from .segments import encode_alnum_char, encoding_length, kanji_value


PAD_CODEWORDS = (0xEC, 0x11)


def segment_bit_length(segment, version):
    count_len = versions.length_bits(segment.mode, version)
    if count_len is None:
        raise UnsupportedConfiguration(
            "Version {} has no {} mode".format(version, segment.mode)
        )
    return (versions.mode_bits(version) + count_len +
            encoding_length(segment.mode, segment.char_count))


def bit_length(segments, version):
    """Bits taken by headers and payloads, terminator excluded"""
    return sum(segment_bit_length(s, version) for s in segments)


def write_segment(bits, segment, version):
    count_len = versions.length_bits(segment.mode, version)
    if count_len is None:
        raise UnsupportedConfiguration(
            "Version {} has no {} mode".format(version, segment.mode)
        )
    length = segment.char_count
    if length >= 1 << count_len:
        raise DataTooLong(
            "{} characters do not fit in the {} bit count field of "
            "version {}".format(length, count_len, version)
        )
    mode_len = versions.mode_bits(version)
    if mode_len:
        bits.extend(versions.mode_indicator(segment.mode, version), mode_len)
    bits.extend(length, count_len)
    data = segment.data
    if segment.mode == "numeric":
        for i in range(0, length - 2, 3):
            bits.extend(int(data[i:i + 3]), 10)
        remainder = length % 3
        if remainder == 1:
            bits.extend(int(data[-1:]), 4)
        elif remainder == 2:
            bits.extend(int(data[-2:]), 7)
    elif segment.mode == "alphanumeric":
        text = data.decode("ascii")
        even = length & 1 == 0
        ln = length if even else length - 1
        for i in range(0, ln, 2):
            encoded = 45 * encode_alnum_char(text[i])
            encoded += encode_alnum_char(text[i + 1])
            bits.extend(encoded, 11)
        if not even:
            bits.extend(encode_alnum_char(text[-1]), 6)
    elif segment.mode == "byte":
        bits.extend_bytes(data)
    elif segment.mode == "kanji":
        for i in range(0, len(data), 2):
            bits.extend(kanji_value(data[i:i + 2]), 13)
    else:
        raise ValueError("Unknown encoding {!r}".format(segment.mode))


def write(segments, version, ec_level):
    """Return the data codewords of segments padded to the capacity.

    When the capacity is not a whole number of bytes, the last codeword
    holds its 4 bits in the high nibble.
    """
    capacity = versions.data_capacity(version, ec_level)
    bits = BitArray()
    for segment in segments:
        write_segment(bits, segment, version)
    if len(bits) > capacity:
        raise DataTooLong(
            "Data takes {} bits, version {}-{} holds {}".format(
                len(bits), version, ec_level, capacity
            )
        )
    zeroes = min((versions.terminator_length(version), capacity - len(bits)))
    bits.extend(0, zeroes)
    encoded = bits.to_bytes()
    full_bytes = capacity // 8
    pad_bytes = full_bytes - len(encoded)
    if pad_bytes > 0:
        encoded += bytes(PAD_CODEWORDS[i & 1] for i in range(pad_bytes))
    if capacity % 8 and len(encoded) == full_bytes:
        encoded += b"\x00"
    return encoded
