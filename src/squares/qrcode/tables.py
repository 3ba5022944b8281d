# Static version tables. Built once at import time, never mutated.
#
# Block structures use the layout
#   (ec codewords per block, block count, data codewords per block
#    [, block count, data codewords per block])
# the second pair being present when the version has two block groups.
# Every group of one version and level shares the same ec codeword count.

ec_levels = ("L", "M", "Q", "H")

ec_level_index = {
    "L": 0,
    "M": 1,
    "Q": 2,
    "H": 3
}

modes = ("numeric", "alphanumeric", "byte", "kanji")

mode_index = {
    "numeric": 0,
    "alphanumeric": 1,
    "byte": 2,
    "kanji": 3
}

# QR code, data bits per version and level (L, M, Q, H)
capacities = (
    (152, 128, 104, 72), (272, 224, 176, 128),          # 1, 2
    (440, 352, 272, 208), (640, 512, 384, 288),         # 3, 4
    (864, 688, 496, 368), (1088, 864, 608, 480),        # 5, 6
    (1248, 992, 704, 528), (1552, 1232, 880, 688),      # 7, 8
    (1856, 1456, 1056, 800), (2192, 1728, 1232, 976),   # 9, 10
    (2592, 2032, 1440, 1120), (2960, 2320, 1648, 1264), # 11, 12
    (3424, 2672, 1952, 1440), (3688, 2920, 2088, 1576), # 13, 14
    (4184, 3320, 2360, 1784), (4712, 3624, 2600, 2024), # 15, 16
    (5176, 4056, 2936, 2264), (5768, 4504, 3176, 2504), # 17, 18
    (6360, 5016, 3560, 2728), (6888, 5352, 3880, 3080), # 19, 20
    (7456, 5712, 4096, 3248), (8048, 6256, 4544, 3536), # 21, 22
    (8752, 6880, 4912, 3712), (9392, 7312, 5312, 4112), # 23, 24
    (10208, 8000, 5744, 4304), (10960, 8496, 6032, 4768),   # 25, 26
    (11744, 9024, 6464, 5024), (12248, 9544, 6968, 5288),   # 27, 28
    (13048, 10136, 7288, 5608), (13880, 10984, 7880, 5960), # 29, 30
    (14744, 11640, 8264, 6344), (15640, 12328, 8920, 6760), # 31, 32
    (16568, 13048, 9368, 7208), (17528, 13800, 9848, 7688), # 33, 34
    (18448, 14496, 10288, 7888), (19472, 15312, 10832, 8432), # 35, 36
    (20528, 15936, 11408, 8768), (21616, 16816, 12016, 9136), # 37, 38
    (22496, 17728, 12656, 9776), (23648, 18672, 13328, 10208) # 39, 40
)

alignments = (
    (6, 18),          # 2
    (6, 22),          # 3
    (6, 26),          # 4
    (6, 30),          # 5
    (6, 34),          # 6
    (6, 22, 38),      # 7
    (6, 24, 42),      # 8
    (6, 26, 46),      # 9
    (6, 28, 50),      # 10
    (6, 30, 54),      # 11
    (6, 32, 58),      # 12
    (6, 34, 62),      # 13
    (6, 26, 46, 66),  # 14
    (6, 26, 48, 70),  # 15
    (6, 26, 50, 74),  # 16
    (6, 30, 54, 78),  # 17
    (6, 30, 56, 82),  # 18
    (6, 30, 58, 86),  # 19
    (6, 34, 62, 90),  # 20
    (6, 28, 50, 72, 94),              # 21
    (6, 26, 50, 74, 98),              # 22
    (6, 30, 54, 78, 102),             # 23
    (6, 28, 54, 80, 106),             # 24
    (6, 32, 58, 84, 110),             # 25
    (6, 30, 58, 86, 114),             # 26
    (6, 34, 62, 90, 118),             # 27
    (6, 26, 50, 74, 98, 122),         # 28
    (6, 30, 54, 78, 102, 126),        # 29
    (6, 26, 52, 78, 104, 130),        # 30
    (6, 30, 56, 82, 108, 134),        # 31
    (6, 34, 60, 86, 112, 138),        # 32
    (6, 30, 58, 86, 114, 142),        # 33
    (6, 34, 62, 90, 118, 146),        # 34
    (6, 30, 54, 78, 102, 126, 150),   # 35
    (6, 24, 50, 76, 102, 128, 154),   # 36
    (6, 28, 54, 80, 106, 132, 158),   # 37
    (6, 32, 58, 84, 110, 136, 162),   # 38
    (6, 26, 54, 82, 110, 138, 166),   # 39
    (6, 30, 58, 86, 114, 142, 170)    # 40
)

blocks = (
    ((7, 1, 19), (10, 1, 16), (13, 1, 13), (17, 1, 9)),         # 1
    ((10, 1, 34), (16, 1, 28), (22, 1, 22), (28, 1, 16)),       # 2
    ((15, 1, 55), (26, 1, 44), (18, 2, 17), (22, 2, 13)),       # 3
    ((20, 1, 80), (18, 2, 32), (26, 2, 24), (16, 4, 9)),        # 4
    ((26, 1, 108), (24, 2, 43), (18, 2, 15, 2, 16), (22, 2, 11, 2, 12)), # 5
    ((18, 2, 68), (16, 4, 27), (24, 4, 19), (28, 4, 15)),                # 6
    ((20, 2, 78), (18, 4, 31), (18, 2, 14, 4, 15), (26, 4, 13, 1, 14)),  # 7
    ((24, 2, 97), (22, 2, 38, 2, 39),
     (22, 4, 18, 2, 19), (26, 4, 14, 2, 15)), # 8
    ((30, 2, 116), (22, 3, 36, 2, 37),
     (20, 4, 16, 4, 17), (24, 4, 12, 4, 13)), # 9
    ((18, 2, 68, 2, 69), (26, 4, 43, 1, 44),
     (24, 6, 19, 2, 20), (28, 6, 15, 2, 16)), # 10
    ((20, 4, 81), (30, 1, 50, 4, 51),
     (28, 4, 22, 4, 23), (24, 3, 12, 8, 13)), # 11
    ((24, 2, 92, 2, 93), (22, 6, 36, 2, 37),
     (26, 4, 20, 6, 21), (28, 7, 14, 4, 15)), # 12
    ((26, 4, 107), (22, 8, 37, 1, 38),
     (24, 8, 20, 4, 21), (22, 12, 11, 4, 12)),    # 13
    ((30, 3, 115, 1, 116), (24, 4, 40, 5, 41),
     (20, 11, 16, 5, 17), (24, 11, 12, 5, 13)),   # 14
    ((22, 5, 87, 1, 88), (24, 5, 41, 5, 42),
     (30, 5, 24, 7, 25), (24, 11, 12, 7, 13)),    # 15
    ((24, 5, 98, 1, 99), (28, 7, 45, 3, 46),
     (24, 15, 19, 2, 20), (30, 3, 15, 13, 16)),   # 16
    ((28, 1, 107, 5, 108), (28, 10, 46, 1, 47),
     (28, 1, 22, 15, 23), (28, 2, 14, 17, 15)),   # 17
    ((30, 5, 120, 1, 121), (26, 9, 43, 4, 44),
     (28, 17, 22, 1, 23), (28, 2, 14, 19, 15)),   # 18
    ((28, 3, 113, 4, 114), (26, 3, 44, 11, 45),
     (26, 17, 21, 4, 22), (26, 9, 13, 16, 14)),   # 19
    ((28, 3, 107, 5, 108), (26, 3, 41, 13, 42),
     (30, 15, 24, 5, 25), (28, 15, 15, 10, 16)),  # 20
    ((28, 4, 116, 4, 117), (26, 17, 42),
     (28, 17, 22, 6, 23), (30, 19, 16, 6, 17)),   # 21
    ((28, 2, 111, 7, 112), (28, 17, 46),
     (30, 7, 24, 16, 25), (24, 34, 13)),          # 22
    ((30, 4, 121, 5, 122), (28, 4, 47, 14, 48),
     (30, 11, 24, 14, 25), (30, 16, 15, 14, 16)), # 23
    ((30, 6, 117, 4, 118), (28, 6, 45, 14, 46),
     (30, 11, 24, 16, 25), (30, 30, 16, 2, 17)),  # 24
    ((26, 8, 106, 4, 107), (28, 8, 47, 13, 48),
     (30, 7, 24, 22, 25), (30, 22, 15, 13, 16)),  # 25
    ((28, 10, 114, 2, 115), (28, 19, 46, 4, 47),
     (28, 28, 22, 6, 23), (30, 33, 16, 4, 17)),   # 26
    ((30, 8, 122, 4, 123), (28, 22, 45, 3, 46),
     (30, 8, 23, 26, 24), (30, 12, 15, 28, 16)),  # 27
    ((30, 3, 117, 10, 118), (28, 3, 45, 23, 46),
     (30, 4, 24, 31, 25), (30, 11, 15, 31, 16)),  # 28
    ((30, 7, 116, 7, 117), (28, 21, 45, 7, 46),
     (30, 1, 23, 37, 24), (30, 19, 15, 26, 16)),  # 29
    ((30, 5, 115, 10, 116), (28, 19, 47, 10, 48),
     (30, 15, 24, 25, 25), (30, 23, 15, 25, 16)), # 30
    ((30, 13, 115, 3, 116), (28, 2, 46, 29, 47),
     (30, 42, 24, 1, 25), (30, 23, 15, 28, 16)),  # 31
    ((30, 17, 115), (28, 10, 46, 23, 47),
     (30, 10, 24, 35, 25), (30, 19, 15, 35, 16)), # 32
    ((30, 17, 115, 1, 116), (28, 14, 46, 21, 47),
     (30, 29, 24, 19, 25), (30, 11, 15, 46, 16)), # 33
    ((30, 13, 115, 6, 116), (28, 14, 46, 23, 47),
     (30, 44, 24, 7, 25), (30, 59, 16, 1, 17)),   # 34
    ((30, 12, 121, 7, 122), (28, 12, 47, 26, 48),
     (30, 39, 24, 14, 25), (30, 22, 15, 41, 16)), # 35
    ((30, 6, 121, 14, 122), (28, 6, 47, 34, 48),
     (30, 46, 24, 10, 25), (30, 2, 15, 64, 16)),  # 36
    ((30, 17, 122, 4, 123), (28, 29, 46, 14, 47),
     (30, 49, 24, 10, 25), (30, 24, 15, 46, 16)), # 37
    ((30, 4, 122, 18, 123), (28, 13, 46, 32, 47),
     (30, 48, 24, 14, 25), (30, 42, 15, 32, 16)), # 38
    ((30, 20, 117, 4, 118), (28, 40, 47, 7, 48),
     (30, 43, 24, 22, 25), (30, 10, 15, 67, 16)), # 39
    ((30, 19, 118, 6, 119), (28, 18, 47, 31, 48),
     (30, 34, 24, 34, 25), (30, 20, 15, 61, 16))  # 40
)

# Length field width per mode (numeric, alphanumeric, byte, kanji)
length_bits_v9 = (10, 9, 8, 8)
length_bits_v26 = (12, 11, 16, 10)
length_bits_v40 = (14, 13, 16, 12)

# Micro QR, M1 to M4. Zero capacity and None block entry mark levels the
# version does not offer. M1 only does error detection, listed as L.
micro_capacities = (
    (20, 0, 0, 0),      # M1
    (40, 32, 0, 0),     # M2
    (84, 68, 0, 0),     # M3
    (128, 112, 80, 0)   # M4
)

micro_blocks = (
    ((2, 1, 3), None, None, None),
    ((5, 1, 5), (6, 1, 4), None, None),
    ((6, 1, 11), (8, 1, 9), None, None),
    ((8, 1, 16), (10, 1, 14), (14, 1, 10), None)
)

# None: mode not available in that version
micro_length_bits = (
    (3, None, None, None),  # M1
    (4, 3, None, None),     # M2
    (5, 4, 4, 3),           # M3
    (6, 5, 5, 4)            # M4
)

# rMQR, (height, width) in version indicator order
rmqr_sizes = (
    (7, 43), (7, 59), (7, 77), (7, 99), (7, 139),
    (9, 43), (9, 59), (9, 77), (9, 99), (9, 139),
    (11, 27), (11, 43), (11, 59), (11, 77), (11, 99), (11, 139),
    (13, 27), (13, 43), (13, 59), (13, 77), (13, 99), (13, 139),
    (15, 43), (15, 59), (15, 77), (15, 99), (15, 139),
    (17, 43), (17, 59), (17, 77), (17, 99), (17, 139)
)

# rMQR only offers levels M and H
rmqr_capacities = (
    (0, 48, 0, 24), (0, 96, 0, 56),             # R7x43, R7x59
    (0, 160, 0, 80), (0, 224, 0, 112),          # R7x77, R7x99
    (0, 352, 0, 192),                           # R7x139
    (0, 96, 0, 56), (0, 168, 0, 88),            # R9x43, R9x59
    (0, 248, 0, 136), (0, 336, 0, 176),         # R9x77, R9x99
    (0, 504, 0, 264),                           # R9x139
    (0, 56, 0, 40), (0, 152, 0, 88),            # R11x27, R11x43
    (0, 248, 0, 120), (0, 344, 0, 184),         # R11x59, R11x77
    (0, 456, 0, 232), (0, 672, 0, 336),         # R11x99, R11x139
    (0, 96, 0, 56), (0, 216, 0, 104),           # R13x27, R13x43
    (0, 304, 0, 160), (0, 424, 0, 232),         # R13x59, R13x77
    (0, 584, 0, 280), (0, 848, 0, 432),         # R13x99, R13x139
    (0, 264, 0, 120), (0, 384, 0, 208),         # R15x43, R15x59
    (0, 536, 0, 248), (0, 704, 0, 384),         # R15x77, R15x99
    (0, 1016, 0, 552),                          # R15x139
    (0, 312, 0, 168), (0, 448, 0, 224),         # R17x43, R17x59
    (0, 624, 0, 304), (0, 800, 0, 448),         # R17x77, R17x99
    (0, 1216, 0, 608)                           # R17x139
)

rmqr_blocks = (
    (None, (7, 1, 6), None, (10, 1, 3)),                        # R7x43
    (None, (9, 1, 12), None, (14, 1, 7)),                       # R7x59
    (None, (12, 1, 20), None, (22, 1, 10)),                     # R7x77
    (None, (16, 1, 28), None, (30, 1, 14)),                     # R7x99
    (None, (24, 1, 44), None, (22, 2, 12)),                     # R7x139
    (None, (9, 1, 12), None, (14, 1, 7)),                       # R9x43
    (None, (12, 1, 21), None, (22, 1, 11)),                     # R9x59
    (None, (18, 1, 31), None, (16, 1, 8, 1, 9)),                # R9x77
    (None, (24, 1, 42), None, (22, 2, 11)),                     # R9x99
    (None, (18, 1, 31, 1, 32), None, (22, 3, 11)),              # R9x139
    (None, (8, 1, 7), None, (10, 1, 5)),                        # R11x27
    (None, (12, 1, 19), None, (20, 1, 11)),                     # R11x43
    (None, (16, 1, 31), None, (16, 1, 7, 1, 8)),                # R11x59
    (None, (24, 1, 43), None, (22, 1, 11, 1, 12)),              # R11x77
    (None, (16, 1, 28, 1, 29), None, (30, 1, 14, 1, 15)),       # R11x99
    (None, (24, 2, 42), None, (30, 3, 14)),                     # R11x139
    (None, (9, 1, 12), None, (14, 1, 7)),                       # R13x27
    (None, (14, 1, 27), None, (28, 1, 13)),                     # R13x43
    (None, (22, 1, 38), None, (20, 2, 10)),                     # R13x59
    (None, (16, 1, 26, 1, 27), None, (28, 1, 14, 1, 15)),       # R13x77
    (None, (20, 1, 36, 1, 37), None, (26, 1, 11, 2, 12)),       # R13x99
    (None, (20, 2, 35, 1, 36), None, (28, 2, 13, 2, 14)),       # R13x139
    (None, (18, 1, 33), None, (18, 1, 7, 1, 8)),                # R15x43
    (None, (26, 1, 48), None, (24, 2, 13)),                     # R15x59
    (None, (18, 1, 33, 1, 34), None, (24, 2, 10, 1, 11)),       # R15x77
    (None, (24, 2, 44), None, (22, 4, 12)),                     # R15x99
    (None, (24, 2, 42, 1, 43), None, (26, 1, 13, 4, 14)),       # R15x139
    (None, (22, 1, 39), None, (20, 1, 10, 1, 11)),              # R17x43
    (None, (16, 2, 28), None, (30, 2, 14)),                     # R17x59
    (None, (22, 2, 39), None, (28, 1, 12, 2, 13)),              # R17x77
    (None, (20, 2, 33, 1, 34), None, (26, 4, 14)),              # R17x99
    (None, (20, 4, 38), None, (26, 2, 12, 4, 13))               # R17x139
)

rmqr_length_bits = (
    (4, 3, 3, 2), (5, 5, 4, 3), (6, 5, 5, 4), (7, 6, 5, 5), (7, 6, 6, 5),
    (5, 5, 4, 3), (6, 5, 5, 4), (7, 6, 5, 5), (7, 6, 6, 5), (8, 7, 6, 6),
    (4, 4, 3, 2), (6, 5, 5, 4), (7, 6, 5, 5), (7, 6, 6, 5), (8, 7, 6, 6),
    (8, 7, 7, 6),
    (5, 5, 4, 3), (6, 6, 5, 5), (7, 6, 6, 5), (7, 7, 6, 6), (8, 7, 7, 6),
    (8, 8, 7, 7),
    (7, 6, 6, 5), (7, 7, 6, 5), (8, 7, 7, 6), (8, 7, 7, 6), (9, 8, 7, 7),
    (7, 6, 6, 5), (8, 7, 6, 6), (8, 7, 7, 6), (8, 8, 7, 6), (9, 8, 8, 7)
)

# Columns of the alignment pattern centres, keyed by rMQR width
rmqr_alignments = {
    27: (),
    43: (21,),
    59: (19, 39),
    77: (25, 51),
    99: (23, 49, 75),
    139: (27, 55, 83, 111)
}
