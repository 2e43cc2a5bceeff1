"""Shards: byte buffers of even length, viewed as big-endian 16-bit symbols."""


class WrappedShard:
    """A shard with an even number of bytes, sliceable into 2-byte symbols.

    An odd-length payload is padded with a single zero byte.
    """

    __slots__ = ("_inner",)

    def __init__(self, data=b""):
        inner = bytearray(data)
        if len(inner) & 0x01:
            inner.append(0)
        self._inner = inner

    @classmethod
    def from_symbols(cls, symbols):
        """Build a shard from an iterable of 16-bit symbols."""
        shard = cls()
        for symbol in symbols:
            shard._inner += _symbol_bytes(symbol)
        return shard

    def into_inner(self):
        """Return the shard's bytes."""
        return bytes(self._inner)

    def symbols(self):
        """Return the shard as a list of big-endian 16-bit symbols."""
        inner = self._inner
        return [int.from_bytes(inner[i:i + 2], "big") for i in range(0, len(inner), 2)]

    def set_symbol(self, index, symbol):
        """Overwrite the 16-bit symbol at ``index``."""
        count = len(self._inner) // 2
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError(f"symbol index {index} out of range for {count} symbols")
        self._inner[2 * index:2 * index + 2] = _symbol_bytes(symbol)

    def __len__(self):
        return len(self._inner)

    def __bytes__(self):
        return bytes(self._inner)

    def __eq__(self, other):
        if isinstance(other, WrappedShard):
            return self._inner == other._inner
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._inner == bytes(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"WrappedShard({bytes(self._inner)!r})"


def _symbol_bytes(symbol):
    if not 0 <= symbol <= 0xFFFF:
        raise ValueError(f"symbol {symbol} does not fit into 16 bits")
    return symbol.to_bytes(2, "big")