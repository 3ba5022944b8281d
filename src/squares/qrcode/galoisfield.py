def modulo_gf2(a, mod):
    mod_bitlen = mod.bit_length()
    a_bitlen = a.bit_length()
    if a_bitlen < mod_bitlen:
        return a
    m = mod << (a_bitlen - mod_bitlen)
    bit = 1 << (a_bitlen - 1)
    while m >= mod:
        if a & bit:
            a ^= m
        bit >>= 1
        m >>= 1
    return a


class GaloisField:
    def __init__(self, primitive_poly=285):
        self.primitive_poly = primitive_poly
        power = primitive_poly.bit_length()
        self.element_count = 2 ** (power - 1) - 1
        exp_table = [1] * (self.element_count + 1)
        log_table = [0] * (self.element_count + 1)
        for i in range(1, self.element_count):
            e = modulo_gf2(2 * exp_table[i - 1], primitive_poly)
            exp_table[i] = e
            log_table[e] = i
        log_table[0] = None
        # lookup tables never change after construction
        self.exp_table = tuple(exp_table)
        self.log_table = tuple(log_table)

    def mul(self, a, b):
        if a == 0 or b == 0:
            return 0
        power = self.log_table[a] + self.log_table[b]
        return self.exp_table[power % self.element_count]

    def add(self, a, b):
        return a ^ b

    def exp(self, a):
        return self.exp_table[a % self.element_count]

    def poly_mul(self, a, b):
        a_len = len(a)
        b_len = len(b)
        res = [0] * (b_len + a_len - 1)
        for i in range(a_len):
            ai = a[i]
            for j in range(b_len):
                m = self.mul(ai, b[j])
                res[i + j] = self.add(res[i + j], m)
        return res

    def poly_mod(self, a, b):
        # b must be monic, coefficients highest power first
        a_len = len(a)
        b_len = len(b)
        res = list(a) + [0] * (b_len - 1)
        for i in range(a_len):
            resi = res[i]
            if resi != 0:
                for j in range(b_len):
                    m = self.mul(resi, b[j])
                    res[i + j] = self.add(res[i + j], m)
        return res[a_len:]


GF256 = GaloisField(285)
