"""Helpers to exercise an encoder/reconstructor pair with dropped shards."""

import random
from functools import cache

SMALL_RNG_SEED = bytes([
    0, 6, 0xFA, 0, 0x37, 3, 19, 89, 32, 32, 0x37, 0x77, 77, 0b11, 112, 52, 12, 40, 82, 34,
    0, 0, 0, 1, 4, 4, 1, 4, 99, 127, 121, 107,
])

#: Size of the deterministic demo data block.
BYTES_LEN = 10_000_000

#: Shared target number of shards for quick roundtrip tests.
N_SHARDS = 123

#: Shared payload size for quick roundtrip tests.
TEST_DATA_CHUNK_SIZE = 1337


class RecoveryMismatch(AssertionError):
    """The reconstructed payload does not match the original."""


@cache
def _all_bytes():
    return random.Random(SMALL_RNG_SEED).randbytes(BYTES_LEN)


def test_bytes(size=BYTES_LEN):
    """Return the first ``size`` bytes of a fixed pseudo-random data block."""
    if not 0 <= size <= BYTES_LEN:
        raise ValueError(f"size must be between 0 and {BYTES_LEN}, got {size}")
    return _all_bytes()[:size]


# Keep pytest from collecting the helper above as a test.
test_bytes.__test__ = False


def assert_recovery(payload, reconstructed_payload, dropped_indices):
    """Check that the byte ranges of the dropped symbols were recovered."""
    if len(reconstructed_payload) < len(payload):
        raise RecoveryMismatch(
            f"Reconstructed payload of {len(reconstructed_payload)} bytes is shorter "
            f"than the original {len(payload)} bytes"
        )
    for dropped_idx in dropped_indices:
        start = dropped_idx * 2
        end = start + 2
        # dropped indices range over n, data indices only over the payload
        if len(payload) >= end and payload[start:end] != reconstructed_payload[start:end]:
            raise RecoveryMismatch(f"Data at bytes {start}..{end} must match")


def deterministic_drop_shards(codewords, n, k, rng=None):
    """Drop half of ``n - k`` shards at the start and half at the end, in place.

    Returns the dropped indices.
    """
    length = len(codewords)
    half = (n - k) >> 1
    dropped = []
    for i in range(half):
        codewords[i] = None
        dropped.append(i)
    # shards beyond the list's end count as already dropped
    for i in range(n - half, n):
        if i < length:
            codewords[i] = None
            dropped.append(i)
    return dropped


def deterministic_drop_shards_clone(codewords, n, k):
    """Return a copy of ``codewords`` with shards dropped, and the dropped indices."""
    received = list(codewords)
    dropped = deterministic_drop_shards(received, n, k, random.Random(SMALL_RNG_SEED))
    if len(dropped) > n - k:
        raise AssertionError(f"dropped {len(dropped)} shards, more than {n - k}")
    return received, dropped


def drop_random_max(shards, n, k, rng):
    """Drop ``n - k`` randomly chosen shards in place; return the dropped indices."""
    length = len(shards)
    already_dropped = max(n - length, 0)
    dropped = rng.sample(range(length), n - k - already_dropped)
    if len(dropped) != n - k:
        raise AssertionError(f"dropped {len(dropped)} shards, expected {n - k}")
    for idx in dropped:
        shards[idx] = None
    kept = sum(shard is not None for shard in shards)
    if kept < k:
        raise AssertionError(f"only {kept} shards kept, need {k}")
    return dropped


def roundtrip(encode, reconstruct, payload, target_shard_count):
    """Encode, drop shards at random, reconstruct and check the payload."""
    roundtrip_w_drop_closure(encode, reconstruct, payload, target_shard_count, drop_random_max)


def roundtrip_w_drop_closure(encode, reconstruct, payload, target_shard_count, drop_rand):
    """Encode, drop shards with ``drop_rand``, reconstruct and check the payload.

    Errors from ``encode`` and ``reconstruct`` propagate; a wrong result
    raises :class:`RecoveryMismatch`.
    """
    rng = random.Random(SMALL_RNG_SEED)
    shards = encode(payload, target_shard_count)
    received = list(shards)
    dropped = drop_rand(received, target_shard_count, target_shard_count // 3, rng)
    recovered = reconstruct(received, target_shard_count)
    assert_recovery(payload, recovered, dropped)