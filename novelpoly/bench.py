"""Command that runs a timed encode/reconstruct roundtrip."""

import argparse
import sys
import time

from .errors import NovelPolyError
from .novel_poly_basis import encode, reconstruct
from .tester import (
    N_SHARDS,
    TEST_DATA_CHUNK_SIZE,
    RecoveryMismatch,
    roundtrip,
    test_bytes,
)


def run_roundtrip(payload_size, shard_count):
    """Roundtrip ``payload_size`` bytes over ``shard_count`` shards; return seconds taken."""
    payload = test_bytes(payload_size)
    start = time.perf_counter()
    roundtrip(encode, reconstruct, payload, shard_count)
    return time.perf_counter() - start


def _parser():
    parser = argparse.ArgumentParser(
        prog="novelpoly-bench",
        description="Encode a payload, drop shards at random and reconstruct it.",
    )
    parser.add_argument(
        "--payload-size",
        type=int,
        default=TEST_DATA_CHUNK_SIZE,
        help=f"payload size in bytes (default {TEST_DATA_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--shards",
        type=int,
        default=N_SHARDS,
        help=f"number of shards to produce (default {N_SHARDS})",
    )
    return parser


def main(argv=None):
    """Run the roundtrip command; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        elapsed = run_roundtrip(args.payload_size, args.shards)
    except (NovelPolyError, RecoveryMismatch, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(
        f"roundtrip of {args.payload_size} bytes over {args.shards} shards "
        f"succeeded in {elapsed:.3f}s"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())