"""Reed-Solomon erasure coding over GF(2^16) in the novel polynomial basis."""

__version__ = "0.1.0"

__all__ = [
    "afft",
    "bench",
    "codec",
    "errors",
    "field",
    "novel_poly_basis",
    "shard",
    "tester",
    "util",
]