"""Encoding and erasure decoding of single runs of symbols over GF(2^16)."""

from .afft import afft, inverse_afft, tweaked_formal_derivative
from .field import F2E16
from .util import is_power_of_2

FIELD = F2E16


def _require(condition, message):
    if not condition:
        raise ValueError(message)


def encode_low(data, k, n):
    """Encode ``n`` symbols whose first ``k`` carry the message (rate k/n <= 1/2).

    Returns the codeword of ``n`` symbols; its first ``k`` are the message.
    """
    _require(k + k <= n, f"k (= {k}) must be at most half of n (= {n})")
    _require(len(data) == n, f"data must hold {n} symbols, got {len(data)}")
    _require(is_power_of_2(n), "Algorithm only works for 2^i sizes for N")
    _require(is_power_of_2(k), "Algorithm only works for 2^i sizes for K")

    codeword = list(data)
    basis = inverse_afft(codeword[:k], k, 0)
    for shift in range(k, n, k):
        codeword[shift:shift + k] = afft(list(basis), k, shift)
    codeword[:k] = data[:k]
    return codeword


def encode_high(data, k, n):
    """Compute the ``n - k`` parity symbols of a ``k``-symbol message (rate k/n > 1/2)."""
    t = n - k
    _require(t > 0, f"n (= {n}) must exceed k (= {k})")
    _require(len(data) == k, f"data must hold {k} symbols, got {len(data)}")
    _require(is_power_of_2(t), "Parity size must be a power of 2")

    parity = [0] * t
    for i in range(t, n, t):
        mem = inverse_afft(list(data[i - t:i]), t, i)
        parity = [p ^ m for p, m in zip(parity, mem)]
    return afft(parity, t, 0)


def encode_sub(data, n, k):
    """Encode up to ``2 * k`` payload bytes into ``n`` symbols."""
    _require(is_power_of_2(n), "Algorithm only works for 2^i sizes for N")
    _require(is_power_of_2(k), "Algorithm only works for 2^i sizes for K")
    _require(len(data) <= k << 1, f"payload of {len(data)} bytes exceeds {k << 1}")
    _require(k <= n // 2, f"k (= {k}) must be at most half of n (= {n})")

    padded = bytes(data) + bytes(n * 2 - len(data))
    symbols = [int.from_bytes(padded[i:i + 2], "big") for i in range(0, 2 * n, 2)]
    return encode_low(symbols, k, n)


def eval_error_polynomial(erasures, n):
    """Evaluate the error locator polynomial in multiplier form.

    Returns a list of ``FIELD.size`` entries; it only has to be computed once
    per set of erasures.
    """
    size, onemask = FIELD.size, FIELD.onemask
    z = min(n, len(erasures))
    poly = [int(bool(e)) for e in erasures[:z]] + [0] * (size - z)
    FIELD.walsh(poly, size)
    log_walsh = FIELD.log_walsh
    poly[:n] = [(p * w) % onemask for p, w in zip(poly[:n], log_walsh)]
    FIELD.walsh(poly, size)
    for i, erased in enumerate(erasures[:z]):
        if erased:
            poly[i] = onemask - poly[i]
    return poly


def decode_main(codeword, recover_up_to, erasures, error_poly, n):
    """Recover the first ``recover_up_to`` erased symbols of ``codeword`` in place.

    Returns ``codeword``.
    """
    _require(len(codeword) == n, f"codeword must hold {n} symbols, got {len(codeword)}")
    _require(n >= recover_up_to, f"cannot recover {recover_up_to} of {n} symbols")
    _require(len(erasures) == n, f"erasures must hold {n} flags, got {len(erasures)}")

    mul = FIELD.mul
    codeword[:] = [
        0 if erased else mul(c, p) for c, erased, p in zip(codeword, erasures, error_poly)
    ]

    inverse_afft(codeword, n, 0)
    tweaked_formal_derivative(codeword, n)
    afft(codeword, n, 0)

    codeword[:recover_up_to] = [
        mul(c, p) if erased else 0
        for c, erased, p in zip(codeword[:recover_up_to], erasures, error_poly)
    ]
    return codeword


def reconstruct_sub(codewords, erasures, n, k, error_poly):
    """Recover the ``2 * k`` payload bytes from one run of possibly missing symbols."""
    _require(is_power_of_2(n), "Algorithm only works for 2^i sizes for N")
    _require(is_power_of_2(k), "Algorithm only works for 2^i sizes for K")
    _require(len(codewords) == n, f"codewords must hold {n} symbols, got {len(codewords)}")
    _require(k <= n // 2, f"k (= {k}) must be at most half of n (= {n})")

    codeword = [0 if sym is None else sym for sym in codewords]
    recovered = codeword[:k]

    decode_main(codeword, k, erasures, error_poly, n)

    recovered = [
        codeword[idx] if erasures[idx] else sym for idx, sym in enumerate(recovered)
    ]
    return b"".join(sym.to_bytes(2, "big") for sym in recovered)