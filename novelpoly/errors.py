"""Exceptions raised by the erasure coder."""


class NovelPolyError(Exception):
    """Base class of all errors raised by this package."""


class WantedShardCountTooHigh(NovelPolyError):
    """More shards were requested than the field can address."""

    def __init__(self, count):
        self.count = count
        super().__init__(f"Number of wanted shards {count} exceeds max of 2^16")


class WantedShardCountTooLow(NovelPolyError):
    """Fewer than two shards were requested."""

    def __init__(self, count):
        self.count = count
        super().__init__(f"Number of wanted shards must be at least 2, but is {count}")


class WantedPayloadShardCountTooLow(NovelPolyError):
    """No payload shard was requested."""

    def __init__(self, count):
        self.count = count
        super().__init__(
            f"Number of wanted payload shards must be at least 1, but is {count}"
        )


class PayloadSizeIsZero(NovelPolyError):
    """The payload to encode is empty."""

    def __init__(self):
        super().__init__("Size of the payload is zero")


class NeedMoreShards(NovelPolyError):
    """Too few shards were received to recover the payload."""

    def __init__(self, have, min, all):
        self.have = have
        self.min = min
        self.all = all
        super().__init__(f"Needs at least {min} shards of {all} to recover, have {have}")


class ParameterMustBePowerOf2(NovelPolyError):
    """The code parameters are not powers of two."""

    def __init__(self, n, k):
        self.n = n
        self.k = k
        super().__init__(
            f"Parameters: n (= {n}) and k (= {k}) both must be a power of 2"
        )


class InconsistentShardLengths(NovelPolyError):
    """Received shards differ in length."""

    def __init__(self, first, other):
        self.first = first
        self.other = other
        super().__init__(
            f"Shards do have inconsistent lengths: first = {first}, other = {other})"
        )