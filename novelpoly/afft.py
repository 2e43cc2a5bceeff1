"""Additive FFT and its inverse in the novel polynomial basis."""

from functools import cache

from .field import F2E16


class AdditiveFFT:
    """Additive FFT over a field, holding the precomputed skew factors.

    ``skews`` holds the twisted factors in multiplier form, one for every
    non-zero position of the field.
    """

    def __init__(self, field):
        self.field = field
        self.skews = tuple(self._compute_skews(field))

    def __repr__(self):
        return f"AdditiveFFT({self.field!r})"

    @staticmethod
    def _compute_skews(field):
        bits, onemask = field.bits, field.onemask
        base = [1 << i for i in range(1, bits)]
        skews = [0] * onemask

        for m in range(bits - 1):
            step = 1 << (m + 1)
            skews[(1 << m) - 1] = 0
            for i in range(m, bits - 1):
                s = 1 << (i + 1)
                for j in range((1 << m) - 1, s, step):
                    skews[j + s] = skews[j] ^ base[i]

            idx = field.mul(base[m], field.to_multiplier(base[m] ^ 1))
            base[m] = onemask - field.to_multiplier(idx)

            for i in range(m + 1, bits - 1):
                b = (field.to_multiplier(base[i] ^ 1) + base[m]) % onemask
                base[i] = field.mul(base[i], b)

        return [field.to_multiplier(x) for x in skews]

    def afft(self, data, size, index):
        """Forward transform of ``data[:size]`` in place at offset ``index``; returns ``data``."""
        mul, onemask, skews = self.field.mul, self.field.onemask, self.skews
        depart = size >> 1
        while depart > 0:
            for j in range(depart, size, depart << 1):
                lo = data[j - depart:j]
                hi = data[j:j + depart]
                skew = skews[j + index - 1]
                if skew != onemask:
                    lo = [a ^ mul(b, skew) for a, b in zip(lo, hi)]
                hi = [b ^ a for a, b in zip(lo, hi)]
                data[j - depart:j] = lo
                data[j:j + depart] = hi
            depart >>= 1
        return data

    def inverse_afft(self, data, size, index):
        """Inverse transform of ``data[:size]`` in place at offset ``index``; returns ``data``."""
        mul, onemask, skews = self.field.mul, self.field.onemask, self.skews
        depart = 1
        while depart < size:
            for j in range(depart, size, depart << 1):
                lo = data[j - depart:j]
                hi = [b ^ a for a, b in zip(lo, data[j:j + depart])]
                skew = skews[j + index - 1]
                if skew != onemask:
                    lo = [a ^ mul(b, skew) for a, b in zip(lo, hi)]
                data[j - depart:j] = lo
                data[j:j + depart] = hi
            depart <<= 1
        return data


@cache
def additive_fft_for(field):
    """Return the shared transform instance for ``field``."""
    return AdditiveFFT(field)


def formal_derivative(cos, size, field=F2E16):
    """Formal derivative of a polynomial in the novel basis, in place; returns ``cos``."""
    length_total = len(cos)
    for i in range(1, size):
        length = ((i ^ (i - 1)) + 1) >> 1
        for j in range(i - length, i):
            if j + length < length_total:
                cos[j] ^= cos[j + length]
    i = size
    while i < field.size and i < length_total:
        for j in range(size):
            if j + i < length_total:
                cos[j] ^= cos[j + i]
        i <<= 1
    return cos


def tweaked_formal_derivative(codeword, n, field=F2E16):
    """Formal derivative in the tweaked basis.

    The tweak factors of a correctly constructed field are all one, so this
    reduces to the plain formal derivative.
    """
    return formal_derivative(codeword, n, field)


def afft(data, size, index):
    """Additive FFT over GF(2^16) in place; returns ``data``."""
    return additive_fft_for(F2E16).afft(data, size, index)


def inverse_afft(data, size, index):
    """Inverse additive FFT over GF(2^16) in place; returns ``data``."""
    return additive_fft_for(F2E16).inverse_afft(data, size, index)