"""Small integer helpers around powers of two and recovery thresholds."""


def log2(x):
    """Integer base-2 logarithm, rounded down; 0 for x <= 1."""
    o = 0
    while x > 1:
        x >>= 1
        o += 1
    return o


def is_power_of_2(x):
    """True if x is a power of 2. Zero is not a power of 2."""
    return x > 0 and x & (x - 1) == 0


def next_higher_power_of_2(k):
    """Return k if it is a power of 2, else the next higher power of 2."""
    if is_power_of_2(k):
        return k
    return 1 << (log2(k) + 1)


def next_lower_power_of_2(k):
    """Return k if it is a power of 2, else the next lower power of 2."""
    if is_power_of_2(k):
        return k
    return 1 << log2(k)


def recoverability_subset_size(n_wanted_shards):
    """Number of shards needed to recover, covering the one-third case."""
    return max(n_wanted_shards - 1, 0) // 3 + 1