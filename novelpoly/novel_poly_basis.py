"""Reed-Solomon erasure coding in the novel polynomial basis over GF(2^16).

Encoding spreads a payload over a number of shards; any sufficiently large
subset of those shards recovers the payload.
"""

from dataclasses import dataclass

from .codec import encode_sub, eval_error_polynomial, reconstruct_sub
from .errors import (
    InconsistentShardLengths,
    NeedMoreShards,
    ParameterMustBePowerOf2,
    PayloadSizeIsZero,
    WantedPayloadShardCountTooLow,
    WantedShardCountTooHigh,
    WantedShardCountTooLow,
)
from .field import F2E16
from .shard import WrappedShard
from .util import (
    is_power_of_2,
    next_higher_power_of_2,
    next_lower_power_of_2,
    recoverability_subset_size,
)

FIELD_SIZE = F2E16.size


@dataclass(frozen=True)
class CodeParams:
    """Encoder and decoder parameters derived from a target shard count.

    ``n`` is the total number of symbols per run and ``k`` the number of
    information symbols; both are powers of two. ``wanted_n`` is the number
    of shards actually produced.
    """

    n: int
    k: int
    wanted_n: int

    @classmethod
    def derive_parameters(cls, n, k):
        """Derive power-of-two parameters with at most the coding rate ``k / n``."""
        if n < 2:
            raise WantedShardCountTooLow(n)
        if k < 1:
            raise WantedPayloadShardCountTooLow(k)
        k_po2 = next_lower_power_of_2(k)
        n_po2 = next_higher_power_of_2(n)
        # rounding k down and n up can only lower the coding rate
        assert n * k_po2 <= n_po2 * k
        if n_po2 > FIELD_SIZE:
            raise WantedShardCountTooHigh(n)
        return cls(n=n_po2, k=k_po2, wanted_n=n)

    def make_encoder(self):
        """Return a coder for these parameters."""
        return ReedSolomon(self.n, self.k, self.wanted_n)


class ReedSolomon:
    """Erasure coder producing ``wanted_n`` shards from runs of ``n`` symbols."""

    def __init__(self, n, k, wanted_n):
        if not is_power_of_2(n) and not is_power_of_2(k):
            raise ParameterMustBePowerOf2(n, k)
        self.n = n
        self.k = k
        self.wanted_n = wanted_n

    def __repr__(self):
        return f"ReedSolomon(n={self.n}, k={self.k}, wanted_n={self.wanted_n})"

    def shard_len(self, payload_size):
        """Return the size of each shard in bytes for a payload of ``payload_size`` bytes."""
        payload_symbols = (payload_size + 1) // 2
        shard_symbols = (payload_symbols + self.k - 1) // self.k
        return shard_symbols * 2

    def encode(self, data):
        """Encode ``data`` into a list of ``wanted_n`` shards."""
        data = bytes(data)
        if not data:
            raise PayloadSizeIsZero()
        k2 = self.k * 2
        runs = [
            encode_sub(data[start:start + k2], self.n, self.k)
            for start in range(0, len(data), k2)
        ]
        return [
            WrappedShard.from_symbols(run[validator] for run in runs)
            for validator in range(self.wanted_n)
        ]

    def reconstruct(self, received_shards):
        """Recover the payload from shards, where missing shards are ``None``.

        The result is the payload padded with zeros up to a whole number of runs.
        """
        received = list(received_shards)[:self.n]
        received += [None] * (self.n - len(received))

        erasures = [shard is None for shard in received]
        have = erasures.count(False)
        if have < self.k:
            raise NeedMoreShards(have, self.k, self.n)

        columns = [None if shard is None else _symbols_of(shard) for shard in received]
        present = [column for column in columns if column is not None]
        shard_len = len(present[0])
        for column in present[1:]:
            if len(column) != shard_len:
                raise InconsistentShardLengths(shard_len, len(column))

        error_poly = eval_error_polynomial(erasures, FIELD_SIZE)
        return b"".join(
            reconstruct_sub(
                [None if column is None else column[i] for column in columns],
                erasures,
                self.n,
                self.k,
                error_poly,
            )
            for i in range(shard_len)
        )


def _symbols_of(shard):
    if isinstance(shard, WrappedShard):
        return shard.symbols()
    return WrappedShard(shard).symbols()


def encode(data, validator_count):
    """Encode ``data`` into one shard per validator."""
    params = CodeParams.derive_parameters(
        validator_count, recoverability_subset_size(validator_count)
    )
    return params.make_encoder().encode(data)


def reconstruct(received_shards, validator_count):
    """Recover the payload from the shards received from ``validator_count`` validators."""
    params = CodeParams.derive_parameters(
        validator_count, recoverability_subset_size(validator_count)
    )
    return params.make_encoder().reconstruct(received_shards)