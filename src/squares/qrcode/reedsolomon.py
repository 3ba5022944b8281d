from itertools import zip_longest

from . import tables, versions
from .galoisfield import GF256
from .errors import InternalInvariantViolation


class ReedSolomonEncoder:
    """Computes error correction codewords of one block.

    Generator polynomial is the product of (x - a^i) for i in
    0..corrections_len-1 over GF(256) with primitive polynomial 285.
    """

    def __init__(self, corrections_len, gf=GF256):
        self.gf = gf
        self.corrections_len = corrections_len
        self.generator = self.compute_generator(corrections_len)

    def compute_generator(self, degree=None):
        if degree is None:
            degree = self.corrections_len
        g = [1]
        for i in range(degree):
            g = self.gf.poly_mul(g, (1, self.gf.exp(i)))
        return bytes(g)

    def encode_block(self, data):
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError("Data should be bytes type")
        correction_data = self.gf.poly_mod(data, self.generator)
        if len(correction_data) != self.corrections_len:
            raise InternalInvariantViolation(
                "Computed {} correction codewords instead of {}".format(
                    len(correction_data), self.corrections_len
                )
            )
        return bytes(correction_data)


def _table_ec_lengths():
    lengths = set()
    for table in (tables.blocks, tables.micro_blocks, tables.rmqr_blocks):
        for row in table:
            for format_ in row:
                if format_ is not None:
                    lengths.add(format_[0])
    return sorted(lengths)


# generators never change, build each one once
encoders = {n: ReedSolomonEncoder(n) for n in _table_ec_lengths()}


def encoder(corrections_len):
    try:
        return encoders[corrections_len]
    except KeyError:
        rse = ReedSolomonEncoder(corrections_len)
        encoders[corrections_len] = rse
        return rse


def split_blocks(data, version, ec_level):
    """Split data codewords into the blocks of the version"""
    blocks = []
    position = 0
    for count, data_len, ec_len in versions.block_groups(version, ec_level):
        for i in range(count):
            blocks.append(data[position:position + data_len])
            position += data_len
    if position != len(data):
        raise InternalInvariantViolation(
            "Version {}-{} holds {} data codewords, got {}".format(
                version, ec_level, position, len(data)
            )
        )
    return blocks


def correction_encode(data, version, ec_level):
    """Return data blocks and their correction blocks"""
    ec_len = versions.block_format(version, ec_level)[0]
    rse = encoder(ec_len)
    data_blocks = split_blocks(data, version, ec_level)
    ec_blocks = [rse.encode_block(block) for block in data_blocks]
    return data_blocks, ec_blocks


def groups_iterator(blocks):
    """Read blocks column by column, shorter blocks drop out first"""
    for column in zip_longest(*blocks):
        for codeword in column:
            if codeword is not None:
                yield codeword


def interleave_blocks(blocks):
    return bytes(groups_iterator(blocks))


def codewords(data, version, ec_level):
    """Return interleaved data codewords and interleaved correction
    codewords ready for placement"""
    data_blocks, ec_blocks = correction_encode(data, version, ec_level)
    data_codewords = interleave_blocks(data_blocks)
    ec_codewords = interleave_blocks(ec_blocks)
    expected = versions.total_codewords(version, ec_level)
    if len(data_codewords) + len(ec_codewords) != expected:
        raise InternalInvariantViolation(
            "Version {}-{} should have {} codewords, got {}".format(
                version, ec_level, expected,
                len(data_codewords) + len(ec_codewords)
            )
        )
    return data_codewords, ec_codewords
