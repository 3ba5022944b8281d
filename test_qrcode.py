import pytest

from squares.qrcode import (
    QRCode, DataTooLong, InvalidCharacter, UnsupportedConfiguration,
    encode_micro, encode_micro_with_options, encode_rmqr,
    encode_rmqr_with_options, encode_standard, encode_standard_with_options
)
from squares.qrcode import bitwriter, masking, reedsolomon, segments, versions
from squares.qrcode.canvas import Canvas
from squares.qrcode.galoisfield import modulo_gf2


samples = (
    "",
    "1",
    "HELLO WORLD",
    "Hello, rmqr!",
    "12345678901234567890",
    "https://example.com/path?query=1#fragment",
    "0" * 60 + "mixed TAIL",
)


def rebuild_canvas(code):
    """Unmasked canvas of an encoded symbol"""
    plan = list(code.segments)
    encoded = bitwriter.write(plan, code.version, code.ec_level)
    data_cw, ec_cw = reedsolomon.codewords(encoded, code.version,
                                           code.ec_level)
    canvas = Canvas(code.version)
    canvas.draw_function_patterns()
    canvas.mark_codewords(
        data_cw, ec_cw,
        versions.has_half_codeword(code.version, code.ec_level)
    )
    return canvas


def read_bits(code, positions):
    value = 0
    for i, (row, col) in enumerate(positions):
        value |= int(code.is_dark(row, col)) << i
    return value


def qr_format_positions():
    positions = []
    for i in range(15):
        if i < 6:
            positions.append((i, 8))
        elif i < 8:
            positions.append((i + 1, 8))
        elif i == 8:
            positions.append((8, 7))
        else:
            positions.append((8, 14 - i))
    return positions


def test_selected_version_holds_data():
    for kind, levels in (("qr", "LMQH"), ("rmqr", "MH")):
        for ec_level in levels:
            for data in samples:
                code = QRCode(data, ec_level, kind=kind)
                written = bitwriter.bit_length(list(code.segments),
                                               code.version)
                capacity = versions.data_capacity(code.version, ec_level)
                assert written <= capacity
                assert versions.data_codewords(code.version, ec_level) * 8 \
                    >= written


def test_deterministic():
    for data in samples:
        first = encode_standard(data)
        second = encode_standard(data)
        assert first.rows() == second.rows()
        assert first.mask == second.mask
    assert encode_rmqr("Hello, rmqr!").rows() == \
        encode_rmqr("Hello, rmqr!").rows()


def test_mask_optimality():
    for data in samples:
        code = encode_standard(data)
        scores = masking.evaluate_masks(rebuild_canvas(code))
        assert len(scores) == 8
        assert scores[code.mask] == min(scores)
        assert code.mask == scores.index(min(scores))


def test_micro_mask_optimality():
    for data in ("1", "01234567", "HELLO", "hello"):
        code = encode_micro(data)
        scores = masking.evaluate_masks(rebuild_canvas(code))
        assert len(scores) == 4
        assert code.mask == scores.index(max(scores))


def test_all_modules_set():
    for kind in ("qr", "micro", "rmqr"):
        code = QRCode("12345", kind=kind)
        rows = code.rows()
        assert len(rows) == code.height
        for row in rows:
            assert len(row) == code.width
            assert all(isinstance(module, bool) for module in row)


def test_hello_rmqr():
    code = encode_rmqr("Hello, rmqr!")
    assert code.kind == "rmqr"
    assert code.ec_level == "M"
    assert code.version.name == "R11x43"
    assert (code.height, code.width) == (11, 43)
    assert code.segments == (segments.Segment("byte", b"Hello, rmqr!"),)
    assert bitwriter.bit_length(list(code.segments), code.version) == 104
    units = segments.classify("Hello, rmqr!")
    for version in versions.rmqr_versions():
        if version.area < code.version.area:
            plan = segments.optimize(units, version)
            assert bitwriter.bit_length(plan, version) > \
                versions.data_capacity(version, "M")


def test_rmqr_strategies():
    assert encode_rmqr_with_options("Hello, rmqr!", "M", "width") \
        .version.name == "R11x43"
    assert encode_rmqr_with_options("Hello, rmqr!", "M", "height") \
        .version.name == "R7x77"
    assert encode_rmqr_with_options("Hello, rmqr!", "M", "area") \
        .version.name == "R11x43"
    with pytest.raises(UnsupportedConfiguration):
        encode_rmqr_with_options("Hello, rmqr!", "M", "diagonal")


def test_twenty_digits():
    code = encode_standard("12345678901234567890")
    assert code.segments == (
        segments.Segment("numeric", b"12345678901234567890"),
    )
    assert code.segments[0].payload_bits == 67
    assert code.version.number == 1


def test_empty_string():
    for code in (encode_standard(""), encode_micro(""), encode_rmqr("")):
        assert code.segments == ()
        assert 0 <= code.mask < 8
    code = encode_standard("")
    assert code.version.number == 1
    assert (code.width, code.height) == (21, 21)
    assert code.version.name == "1"
    assert encode_micro("").version.name == "M1"
    assert encode_rmqr("").version.name == "R11x27"


def test_data_too_long():
    with pytest.raises(DataTooLong):
        encode_standard_with_options("1" * 8000, "H")
    with pytest.raises(DataTooLong):
        encode_standard_with_options("1" * 8000, "L")
    with pytest.raises(DataTooLong):
        encode_micro("1" * 36)
    with pytest.raises(DataTooLong):
        encode_rmqr("1" * 400)
    with pytest.raises(DataTooLong):
        QRCode("1" * 100, version=1)
    # the largest numeric micro symbol
    assert encode_micro("1" * 35).version.name == "M4"


def test_invalid_character():
    with pytest.raises(InvalidCharacter):
        encode_standard("\U0001F600")
    with pytest.raises(InvalidCharacter):
        encode_rmqr("snowman ☃")
    with pytest.raises(ValueError):
        encode_micro("€")


def test_unsupported_configuration():
    with pytest.raises(UnsupportedConfiguration):
        encode_rmqr_with_options("abc", "L")
    with pytest.raises(UnsupportedConfiguration):
        encode_micro_with_options("abc", "H")
    with pytest.raises(UnsupportedConfiguration):
        encode_standard_with_options("abc", "X")
    with pytest.raises(UnsupportedConfiguration):
        QRCode("abc", kind="aztec")
    with pytest.raises(UnsupportedConfiguration):
        QRCode("abc", version=41)
    with pytest.raises(UnsupportedConfiguration):
        QRCode("abc", kind="rmqr", version="R10x43")
    with pytest.raises(UnsupportedConfiguration):
        QRCode("abc", strategy="area")


def test_micro_versions():
    assert encode_micro("01234567").version.name == "M2"
    assert encode_micro("12345").version.name == "M1"
    # alphanumeric data never lands in M1
    code = encode_micro("HELLO")
    assert code.version.name == "M2"
    assert (code.width, code.height) == (13, 13)
    assert encode_micro("hello").version.number >= 3
    assert encode_micro_with_options("1", "M").version.name == "M2"
    assert encode_micro_with_options("1", "Q").version.name == "M4"


def test_forced_version():
    code = QRCode("HELLO", version=5)
    assert code.version.number == 5
    assert code.width == 37
    code = encode_standard_with_options("HELLO", "H", version="7")
    assert code.version.number == 7
    assert QRCode("1", kind="micro", version="M3").version.name == "M3"
    code = QRCode("abc", kind="rmqr", version="R13x43")
    assert (code.height, code.width) == (13, 43)
    code = QRCode("abc", kind="rmqr", version=(9, 59))
    assert code.version.name == "R9x59"


def test_qr_function_patterns():
    code = encode_standard_with_options("HELLO WORLD", "Q")
    w = code.width
    for row, col in ((0, 0), (0, w - 7), (w - 7, 0)):
        assert code.is_dark(row, col)
        assert not code.is_dark(row + 1, col + 1)
        assert code.is_dark(row + 3, col + 3)
        assert code.is_dark(row + 6, col + 6)
    assert not code.is_dark(7, 7)
    assert code.is_dark(6, 8)
    assert not code.is_dark(6, 9)
    assert code.is_dark(8, 6)
    assert not code.is_dark(9, 6)
    # dark module
    assert code.is_dark(w - 8, 8)
    with pytest.raises(IndexError):
        code.is_dark(w, 0)
    with pytest.raises(IndexError):
        code.is_dark(-1, 0)


def test_qr_format_information():
    for data, ec_level in (("HELLO WORLD", "Q"), ("", "L"), ("abc", "H")):
        code = encode_standard_with_options(data, ec_level)
        w = code.width
        format_s = read_bits(code, qr_format_positions())
        assert format_s == masking.format_string(ec_level, code.mask)
        value = format_s ^ 0b101010000010010
        assert modulo_gf2(value, 0b10100110111) == 0
        assert value >> 10 == \
            (masking.ec_level_code[ec_level] << 3) | code.mask
        second_copy = [(8, w - 1 - i) for i in range(8)] + \
            [(w - 15 + i, 8) for i in range(8, 15)]
        assert read_bits(code, second_copy) == format_s


def test_qr_version_information():
    code = QRCode("HELLO", version=7)
    w = code.width
    assert masking.version_string(7) == 0b000111110010010100
    top_right = [(i // 3, w - 11 + i % 3) for i in range(18)]
    bottom_left = [(w - 11 + i % 3, i // 3) for i in range(18)]
    assert read_bits(code, top_right) == masking.version_string(7)
    assert read_bits(code, bottom_left) == masking.version_string(7)


def test_micro_format_information():
    for data, ec_level in (("1", "L"), ("HELLO", "M"), ("1", "Q")):
        code = encode_micro_with_options(data, ec_level)
        positions = [(i + 1, 8) for i in range(7)] + \
            [(8, 8 - i) for i in range(8)]
        format_s = read_bits(code, positions)
        value = format_s ^ 0b100010001000101
        assert modulo_gf2(value, 0b10100110111) == 0
        symbol_number = masking.micro_symbol_numbers[
            (code.version.number, ec_level)
        ]
        assert value >> 10 == (symbol_number << 2) | code.mask


def test_micro_function_patterns():
    code = encode_micro("01234567")
    assert code.is_dark(0, 0)
    assert not code.is_dark(1, 1)
    assert not code.is_dark(7, 7)
    assert code.is_dark(0, 8)
    assert not code.is_dark(0, 9)
    assert code.is_dark(8, 0)
    assert code.quiet_zone == 2


def test_rmqr_format_information():
    for data, ec_level in (("Hello, rmqr!", "M"), ("12345", "H")):
        code = encode_rmqr_with_options(data, ec_level)
        h, w = code.height, code.width
        expected = (1 if ec_level == "H" else 0) << 5 | code.version.number
        finder_side = read_bits(
            code, [(1 + i % 5, 8 + i // 5) for i in range(18)]
        )
        value = finder_side ^ 0b011111101010110010
        assert modulo_gf2(value, 0b1111100100101) == 0
        assert value >> 12 == expected
        sub_finder_side = read_bits(
            code,
            [(h - 6 + i % 5, w - 8 + i // 5) for i in range(15)] +
            [(h - 6, w - 20 + i) for i in range(15, 18)]
        )
        value = sub_finder_side ^ 0b100000101001111011
        assert modulo_gf2(value, 0b1111100100101) == 0
        assert value >> 12 == expected


def test_rmqr_function_patterns():
    code = encode_rmqr("Hello, rmqr!")
    h, w = code.height, code.width
    assert code.is_dark(0, 0)
    assert code.is_dark(3, 3)
    assert not code.is_dark(1, 1)
    # finder sub pattern
    assert code.is_dark(h - 1, w - 1)
    assert not code.is_dark(h - 2, w - 2)
    assert code.is_dark(h - 3, w - 3)
    # corner marks
    assert code.is_dark(0, w - 1)
    assert code.is_dark(0, w - 2)
    assert code.is_dark(1, w - 1)
    assert not code.is_dark(1, w - 2)
    assert code.is_dark(h - 1, 2)
    assert code.is_dark(h - 2, 0)
    assert not code.is_dark(h - 2, 1)
    # alignment pattern centred on column 21
    assert code.is_dark(0, 20)
    assert not code.is_dark(1, 21)
    assert code.is_dark(h - 1, 22)
    assert not code.is_dark(h - 2, 21)


def test_image_bits():
    bits = QRCode.image_bits("HELLO WORLD", "Q")
    assert len(bits) == 21 + 8
    assert all(len(line) == 21 + 8 for line in bits)
    assert not any(bits[0])
    assert bits[4][4] == 1
    micro_bits = QRCode.image_bits("1", kind="micro")
    assert len(micro_bits) == 11 + 4


def test_to_str():
    code = encode_micro("1")
    lines = code.to_str().split("\n")
    assert len(lines) == 11
    assert lines[0].startswith("#######")
    assert "M1" in repr(code)


def test_quiet_zones():
    assert encode_standard("1").quiet_zone == 4
    assert encode_micro("1").quiet_zone == 2
    rmqr_bits = QRCode.image_bits("1", kind="rmqr")
    assert len(rmqr_bits) == 7 + 4
    assert len(rmqr_bits[0]) == 43 + 4
