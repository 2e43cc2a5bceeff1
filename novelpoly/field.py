"""Binary extension fields in Cantor basis with log/exp tables."""

from functools import cached_property


class GaloisField:
    """A field GF(2^bits) whose additive form is expressed in a Cantor basis.

    Elements come in two forms: the additive form (XOR is addition) and the
    multiplier form (a logarithm, suited for multiplication).
    """

    def __init__(self, name, bits, generator, cantor_base):
        cantor_base = tuple(cantor_base)
        if len(cantor_base) != bits:
            raise ValueError(
                f"Cantor basis must have {bits} elements, got {len(cantor_base)}"
            )
        self.name = name
        self.bits = bits
        self.size = 1 << bits
        self.onemask = self.size - 1
        self.generator = generator
        self.base = cantor_base

    def __repr__(self):
        return f"GaloisField({self.name!r}, bits={self.bits})"

    @cached_property
    def _tables(self):
        bits, size, onemask = self.bits, self.size, self.onemask
        log_table = [0] * size
        exp_table = [0] * size

        mas = (1 << (bits - 1)) - 1
        state = 1
        for i in range(onemask):
            exp_table[state] = i
            if state >> (bits - 1):
                state &= mas
                state = (state << 1) ^ self.generator
            else:
                state <<= 1
        exp_table[0] = onemask

        for i, b in enumerate(self.base):
            step = 1 << i
            log_table[step:2 * step] = [v ^ b for v in log_table[:step]]
        log_table = [exp_table[v] for v in log_table]

        for i, v in enumerate(log_table):
            exp_table[v] = i
        exp_table[onemask] = exp_table[0]

        log_walsh = list(log_table)
        log_walsh[0] = 0
        self.walsh(log_walsh, size)
        return tuple(log_table), tuple(exp_table), tuple(log_walsh)

    @property
    def log_table(self):
        """Map from additive form to multiplier form."""
        return self._tables[0]

    @property
    def exp_table(self):
        """Map from multiplier form back to additive form."""
        return self._tables[1]

    @property
    def log_walsh(self):
        """Walsh transform of the log table, used for error locators."""
        return self._tables[2]

    def to_multiplier(self, a):
        """Return the multiplier form of the additive element ``a``."""
        return self.log_table[a]

    def mul(self, a, b):
        """Multiply additive element ``a`` by multiplier ``b``."""
        if a == 0:
            return 0
        log = self.log_table[a] + b
        offset = (log & self.onemask) + (log >> self.bits)
        return self.exp_table[offset]

    def mul_slice(self, values, b):
        """Multiply every additive element of ``values`` by multiplier ``b``."""
        return [self.mul(v, b) for v in values]

    def walsh(self, data, size):
        """Fast Walsh-Hadamard transform modulo ``onemask``, in place on ``data``."""
        mask, bits = self.onemask, self.bits
        depart = 1
        while depart < size:
            step = depart << 1
            for j in range(0, size, step):
                left = data[j:j + depart]
                right = data[j + depart:j + step]
                sums = [x + y for x, y in zip(left, right)]
                diffs = [x + mask - y for x, y in zip(left, right)]
                data[j:j + depart] = [(t & mask) + (t >> bits) for t in sums]
                data[j + depart:j + step] = [(t & mask) + (t >> bits) for t in diffs]
            depart = step

    def bitpoly_mul_reduced(self, a, b):
        """Multiply two elements in polynomial basis, reduced by the field polynomial."""
        bits = self.bits
        r = 0
        for i in range(bits):
            if (b >> i) & 1:
                r ^= a << i
        red = (1 << bits) + self.generator
        for i in range(2 * bits - 1, bits - 1, -1):
            if r & (1 << i):
                r ^= red << (i - bits)
        return r


F2E16 = GaloisField(
    "f2e16",
    16,
    0x2D,
    (
        1, 44234, 15374, 5694, 50562, 60718, 37196, 16402,
        27800, 4312, 27250, 47360, 64952, 64308, 65336, 39198,
    ),
)

F256 = GaloisField("f256", 8, 0x1D, (1, 214, 152, 146, 86, 200, 88, 230))