import random

import pytest

from novelpoly.codec import encode_sub, eval_error_polynomial, reconstruct_sub
from novelpoly.errors import (
    InconsistentShardLengths,
    NeedMoreShards,
    ParameterMustBePowerOf2,
    PayloadSizeIsZero,
    WantedPayloadShardCountTooLow,
    WantedShardCountTooHigh,
    WantedShardCountTooLow,
)
from novelpoly.field import F2E16
from novelpoly.novel_poly_basis import (
    CodeParams,
    ReedSolomon,
    encode,
    reconstruct,
)
from novelpoly.shard import WrappedShard
from novelpoly.tester import (
    N_SHARDS,
    SMALL_RNG_SEED,
    assert_recovery,
    deterministic_drop_shards,
    deterministic_drop_shards_clone,
    drop_random_max,
    roundtrip,
    roundtrip_w_drop_closure,
    test_bytes as make_bytes,
)
from novelpoly.util import recoverability_subset_size


def test_k_n_construction():
    for validator_count in range(3, 8201):
        params = CodeParams.derive_parameters(
            validator_count, recoverability_subset_size(validator_count)
        )
        assert params.wanted_n == validator_count
        assert validator_count <= params.n
        assert validator_count // 3 >= params.k - 1
        assert validator_count >= (params.k - 1) * 3


def test_code_params():
    with pytest.raises(WantedShardCountTooLow):
        CodeParams.derive_parameters(0, recoverability_subset_size(0))
    with pytest.raises(WantedShardCountTooLow):
        CodeParams.derive_parameters(1, recoverability_subset_size(1))
    assert CodeParams.derive_parameters(2, recoverability_subset_size(2)) == CodeParams(
        n=2, k=1, wanted_n=2
    )
    assert CodeParams.derive_parameters(3, recoverability_subset_size(3)) == CodeParams(
        n=4, k=1, wanted_n=3
    )
    assert CodeParams.derive_parameters(4, recoverability_subset_size(4)) == CodeParams(
        n=4, k=2, wanted_n=4
    )
    assert CodeParams.derive_parameters(
        100, recoverability_subset_size(100)
    ) == CodeParams(n=128, k=32, wanted_n=100)


def test_derive_parameters_errors():
    with pytest.raises(WantedPayloadShardCountTooLow) as info:
        CodeParams.derive_parameters(5, 0)
    assert info.value.count == 0
    with pytest.raises(WantedShardCountTooHigh) as info:
        CodeParams.derive_parameters(70000, 100)
    assert info.value.count == 70000
    assert CodeParams.derive_parameters(65536, 100).n == 65536


def test_reed_solomon_requires_power_of_2():
    with pytest.raises(ParameterMustBePowerOf2) as info:
        ReedSolomon(3, 3, 3)
    assert (info.value.n, info.value.k) == (3, 3)


def test_shard_len_is_reasonable():
    rs = CodeParams(n=16, k=4, wanted_n=5).make_encoder()
    assert rs.shard_len(100) == 26
    assert rs.shard_len(99) == 26
    assert rs.shard_len(95) == 24
    assert rs.shard_len(94) == 24
    assert rs.shard_len(90) == 24
    assert rs.shard_len(19) == 6


def test_encoded_shards_have_shard_len():
    data = make_bytes(100)
    shards = encode(data, 10)
    assert len(shards) == 10
    expected = CodeParams.derive_parameters(10, recoverability_subset_size(10)).make_encoder().shard_len(100)
    assert all(len(shard) == expected for shard in shards)


def test_sub_eq_big_for_small_messages():
    n, k = 128, 32
    params = CodeParams.derive_parameters(128, 128 // 3)
    assert params.n == n
    assert params.k == k

    data = random.Random(SMALL_RNG_SEED).randbytes(2 * k)

    shards = encode(data, params.n)
    symbols = encode_sub(data, n, k)
    assert [shard.symbols()[0] for shard in shards] == symbols

    received, _ = deterministic_drop_shards_clone(shards, n, k)
    received_sub, _ = deterministic_drop_shards_clone(symbols, n, k)
    assert [None if s is None else s.symbols()[0] for s in received] == received_sub

    erasures = [shard is None for shard in received]
    error_poly = eval_error_polynomial(erasures, F2E16.size)

    reconstructed_sub = reconstruct_sub(received_sub, erasures, n, k, error_poly)
    reconstructed = reconstruct(received, params.n)
    assert reconstructed[:2 * k] == reconstructed_sub[:2 * k]
    assert reconstructed[:2 * k] == data
    assert reconstructed_sub[:2 * k] == data


@pytest.fixture(scope="module")
def large_setup():
    n_wanted = 2000
    params = CodeParams.derive_parameters(n_wanted, (n_wanted - 1) // 3)
    payload = make_bytes(params.k * 2 * 23)
    return n_wanted, params, payload


def test_roundtrip_for_large_messages_deterministic_clone(large_setup):
    n_wanted, params, payload = large_setup
    assert params.n == 2048
    assert params.k == 512

    shards = encode(payload, n_wanted)
    received, dropped = deterministic_drop_shards_clone(shards, params.n, params.k)
    reconstructed = reconstruct(received, n_wanted)
    assert_recovery(payload, reconstructed, dropped)
    assert reconstructed[:len(payload)] == payload


def test_roundtrip_for_large_messages_deterministic_drop(large_setup):
    n_wanted, _, payload = large_setup
    result = roundtrip_w_drop_closure(
        encode, reconstruct, payload, n_wanted, deterministic_drop_shards
    )
    assert result is None


def test_roundtrip_for_large_messages_random_drop(large_setup):
    n_wanted, _, payload = large_setup
    result = roundtrip_w_drop_closure(
        encode, reconstruct, payload, n_wanted, drop_random_max
    )
    assert result is None


def test_case_0_empty_payload():
    with pytest.raises(PayloadSizeIsZero):
        roundtrip_w_drop_closure(
            encode, reconstruct, make_bytes(0), 2003, deterministic_drop_shards
        )


@pytest.mark.parametrize(
    "validators, payload_size",
    [(10, 16), (100, 1), (4, 100), (2003, 17)],
)
def test_simple_cases(validators, payload_size):
    payload = make_bytes(payload_size)
    shards = encode(payload, validators)
    received = list(shards)
    dropped = deterministic_drop_shards(received, validators, validators // 3, None)
    recovered = reconstruct(received, validators)
    assert recovered[:payload_size] == payload
    assert_recovery(payload, recovered, dropped)


def test_novel_poly_basis_roundtrip():
    assert roundtrip(encode, reconstruct, make_bytes(1337), N_SHARDS) is None


def test_reconstruct_with_all_shards():
    data = b"hello, erasure coded world"
    shards = encode(data, 7)
    recovered = reconstruct(shards, 7)
    assert recovered[:len(data)] == data
    assert set(recovered[len(data):]) <= {0}


def test_reconstruct_accepts_bytes_shards():
    data = make_bytes(40)
    shards = [bytes(shard) for shard in encode(data, 6)]
    shards[0] = None
    assert reconstruct(shards, 6)[:40] == data


def test_reconstruct_needs_more_shards():
    shards = encode(make_bytes(100), 10)
    received = [shard if i < 3 else None for i, shard in enumerate(shards)]
    with pytest.raises(NeedMoreShards) as info:
        reconstruct(received, 10)
    assert (info.value.have, info.value.min, info.value.all) == (3, 4, 16)


def test_reconstruct_inconsistent_shard_lengths():
    shards = encode(make_bytes(100), 10)
    shards[3] = WrappedShard(bytes(30))
    with pytest.raises(InconsistentShardLengths) as info:
        reconstruct(shards, 10)
    assert (info.value.first, info.value.other) == (13, 15)


def test_encode_empty_payload():
    with pytest.raises(PayloadSizeIsZero):
        encode(b"", 10)