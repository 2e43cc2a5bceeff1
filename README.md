# novelpoly

Reed-Solomon erasure coding over the binary field GF(2^16), built on the
"novel polynomial basis" and an additive FFT. A payload is spread over a
chosen number of shards (one per validator, say); any subset of roughly a
third of them is enough to get the payload back.

The package is pure Python and has no dependencies outside the standard
library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Encoding and reconstructing

```python
from novelpoly.novel_poly_basis import encode, reconstruct

payload = b"some payload that must survive losing most of its shards"
shard_count = 10

shards = encode(payload, shard_count)          # list of WrappedShard

# Lose six of the ten shards: missing shards are given as None.
received = [shard if i in (1, 4, 7, 9) else None for i, shard in enumerate(shards)]

recovered = reconstruct(received, shard_count)
assert recovered[: len(payload)] == payload
```

The recovered bytes are zero-padded up to a whole number of encoding runs,
so trim them to the length of the original payload. Received shards may be
`WrappedShard` instances or plain bytes-like objects.

The number of shards needed for recovery is
`novelpoly.util.recoverability_subset_size(shard_count)`, rounded down to a
power of two internally. Shard counts run from 2 up to 65536.

### Lower-level access

- `novelpoly.novel_poly_basis.CodeParams.derive_parameters(n, k)` computes the
  power-of-two code parameters for a wanted shard count `n` and recovery
  threshold `k`; `make_encoder()` turns them into a `ReedSolomon` instance
  with `encode`, `reconstruct` and `shard_len`.
- `novelpoly.codec` holds the per-run building blocks over GF(2^16):
  `encode_sub`, `encode_low`, `encode_high`, `eval_error_polynomial`,
  `decode_main` and `reconstruct_sub`.
- `novelpoly.afft` provides the additive FFT (`afft`, `inverse_afft`, the
  `AdditiveFFT` class and `additive_fft_for`) and the formal derivative used
  while decoding (`formal_derivative`, `tweaked_formal_derivative`).
- `novelpoly.field.GaloisField` describes a binary field with its log, exp and
  Walsh tables; `F2E16` and `F256` are the two predefined fields.
- `novelpoly.shard.WrappedShard` wraps a shard's bytes, padding them to an
  even length so they split into big-endian 16-bit symbols.
- `novelpoly.util` has the power-of-two helpers (`log2`, `is_power_of_2`,
  `next_higher_power_of_2`, `next_lower_power_of_2`).

### Errors

Failures of the coder raise a subclass of `novelpoly.errors.NovelPolyError`:

- `WantedShardCountTooLow`, `WantedShardCountTooHigh`,
  `WantedPayloadShardCountTooLow` for unusable shard counts,
- `PayloadSizeIsZero` when encoding an empty payload,
- `NeedMoreShards` when too few shards arrive to reconstruct,
- `InconsistentShardLengths` when received shards differ in length,
- `ParameterMustBePowerOf2` for invalid raw code parameters.

The functions in `novelpoly.codec` raise `ValueError` when called with sizes
that break their preconditions.

## Round-trip check

`novelpoly.tester` contains helpers to drop shards deterministically or at
random and check that the payload comes back (`roundtrip`,
`roundtrip_w_drop_closure`, `deterministic_drop_shards`,
`deterministic_drop_shards_clone`, `drop_random_max`, `assert_recovery`).
A failed check raises `RecoveryMismatch`. `test_bytes(size)` returns a
fixed, seeded block of pseudo-random data of up to 10,000,000 bytes.

A quick end-to-end round trip can be run from the command line:

```
novelpoly-bench
novelpoly-bench --payload-size 4096 --shards 200
```

It encodes a block of test data (1337 bytes over 123 shards by default),
drops shards at random, reconstructs, and prints the time taken. On failure
it prints the error and exits with status 1.

## What it does not do

- The codec works over GF(2^16) only; `F256` offers field tables and
  arithmetic but no encoder or decoder.
- There is no command to encode or reconstruct files, and shards are not
  stored anywhere: `novelpoly-bench` is the only command, and it only runs a
  round-trip check.
- Being pure Python, it is slow on large payloads.