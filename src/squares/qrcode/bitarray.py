class BitArray:
    """Growable big-endian sequence of bits.

    Whole bytes live in byte_array, the trailing partial byte in buffer.
    """

    def __init__(self, b=None):
        self.byte_array = bytearray(b) if b is not None else bytearray()
        self.buffer = 0
        self.buffer_len = 0

    def __bool__(self):
        return bool(self.buffer) or any(self.byte_array)

    def __len__(self):
        return 8 * len(self.byte_array) + self.buffer_len

    def __str__(self):
        bits = "".join(str(bit) for bit in self)
        return "BitArray({})".format(bits)

    def __getitem__(self, index):
        if not isinstance(index, int):
            raise TypeError("Unsupported type of index")
        byte_index, bit_index = self._index(index)
        if byte_index == len(self.byte_array):
            # buffer holds buffer_len bits, most significant first
            return (self.buffer >> (self.buffer_len - 1 - bit_index)) & 1
        return (self.byte_array[byte_index] >> (7 - bit_index)) & 1

    def __iter__(self):
        for byte in self.byte_array:
            for shift in range(7, -1, -1):
                yield (byte >> shift) & 1
        for shift in range(self.buffer_len - 1, -1, -1):
            yield (self.buffer >> shift) & 1

    def _index(self, index):
        length = len(self)
        if index < 0:
            index += length
        if index >= length or index < 0:
            raise IndexError("BitArray index out of range")
        return (index // 8, index % 8)

    def extend(self, number, encode_len=None):
        """Append the encode_len lowest bits of number"""
        if encode_len is None:
            encode_len = number.bit_length()
        if number < 0 or number.bit_length() > encode_len:
            raise ValueError(
                "{} does not fit in {} bits".format(number, encode_len)
            )
        number |= self.buffer << encode_len
        encode_len += self.buffer_len
        self.buffer_len = encode_len % 8
        self.buffer = number & (0xff >> (8 - self.buffer_len))
        number >>= self.buffer_len
        encode_len -= self.buffer_len
        encode_bytes = encode_len // 8
        if encode_bytes > 0:
            self.byte_array.extend(number.to_bytes(encode_bytes, "big"))

    def extend_bytes(self, data):
        if self.buffer_len == 0:
            self.byte_array.extend(data)
        else:
            self.extend(int.from_bytes(data, "big"), 8 * len(data))

    def to_bytes(self):
        """Bits padded with zeros up to a whole byte"""
        if self.buffer_len > 0:
            b = self.buffer << (8 - self.buffer_len)
            return bytes(self.byte_array) + bytes((b,))
        else:
            return bytes(self.byte_array)

    def to_int(self):
        n = int.from_bytes(self.byte_array, "big")
        n <<= self.buffer_len
        n |= self.buffer
        return n
