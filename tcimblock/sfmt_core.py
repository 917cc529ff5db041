"""Core state transitions of the SIMD-oriented Fast Mersenne Twister.

The generator state is a flat list of 32-bit words whose length is
``4 * block_count(mexp)``. Every 128-bit block is a tuple of four 32-bit
words in little-endian order, with word 0 the least significant.
"""

from __future__ import annotations

from collections.abc import Sequence

from tcimblock.sfmt_params import SFMTParams, get_params

_MASK32 = 0xFFFFFFFF
_MASK128 = (1 << 128) - 1

Block = tuple[int, int, int, int]


def block_count(mexp: int) -> int:
    """Return the number of 128-bit blocks in the state for ``mexp``."""
    params = get_params(mexp)
    return params.mexp // 128 + 1


def _words32(params: SFMTParams) -> int:
    return block_count(params.mexp) * 4


def _to_int(words: Sequence[int]) -> int:
    if len(words) != 4:
        raise ValueError(f"a 128-bit block has 4 words, got {len(words)}")
    value = 0
    for position, word in enumerate(words):
        value |= (word & _MASK32) << (32 * position)
    return value


def _to_block(value: int) -> Block:
    return tuple((value >> (32 * position)) & _MASK32 for position in range(4))  # type: ignore[return-value]


def _check_shift(shift: int) -> None:
    if not 0 <= shift < 16:
        raise ValueError(f"byte shift must be in 0..15, got {shift}")


def lshift128(words: Sequence[int], shift: int) -> Block:
    """Shift a 128-bit block left by ``shift`` bytes."""
    _check_shift(shift)
    return _to_block((_to_int(words) << (shift * 8)) & _MASK128)


def rshift128(words: Sequence[int], shift: int) -> Block:
    """Shift a 128-bit block right by ``shift`` bytes."""
    _check_shift(shift)
    return _to_block(_to_int(words) >> (shift * 8))


def do_recursion(
    a: Sequence[int],
    b: Sequence[int],
    c: Sequence[int],
    d: Sequence[int],
    params: SFMTParams,
) -> Block:
    """Apply the SFMT recursion formula to four blocks and return the result."""
    x = lshift128(a, params.sl2)
    y = rshift128(c, params.sr2)
    return tuple(  # type: ignore[return-value]
        (
            a[i]
            ^ x[i]
            ^ ((b[i] >> params.sr1) & params.msk[i])
            ^ y[i]
            ^ ((d[i] << params.sl1) & _MASK32)
        )
        & _MASK32
        for i in range(4)
    )


def _check_state(state: Sequence[int], params: SFMTParams) -> None:
    expected = _words32(params)
    if len(state) != expected:
        raise ValueError(
            f"state for MEXP {params.mexp} has {expected} words, got {len(state)}"
        )


def _blocks(words: Sequence[int]) -> list[Block]:
    return [tuple(words[i:i + 4]) for i in range(0, len(words), 4)]  # type: ignore[misc]


def _flatten(blocks: Sequence[Block]) -> list[int]:
    return [word for block in blocks for word in block]


def period_certification(state: Sequence[int], params: SFMTParams) -> list[int]:
    """Return a copy of ``state`` adjusted so the period is 2^MEXP - 1 times a factor."""
    _check_state(state, params)
    certified = list(state)
    inner = 0
    for word, parity in zip(certified[:4], params.parity):
        inner ^= word & parity
    if bin(inner).count("1") & 1:
        return certified
    for i, parity in enumerate(params.parity):
        for bit in range(32):
            work = 1 << bit
            if work & parity:
                certified[i] ^= work
                return certified
    return certified


def init_gen_rand(seed: int, params: SFMTParams) -> list[int]:
    """Return an initial state built from a 32-bit seed."""
    size = _words32(params)
    state = [seed & _MASK32]
    for i in range(1, size):
        prev = state[-1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
    return period_certification(state, params)


def _func1(x: int) -> int:
    return ((x ^ (x >> 27)) * 1664525) & _MASK32


def _func2(x: int) -> int:
    return ((x ^ (x >> 27)) * 1566083941) & _MASK32


def init_by_array(init_key: Sequence[int], params: SFMTParams) -> list[int]:
    """Return an initial state built from a sequence of 32-bit keys."""
    size = _words32(params)
    if size >= 623:
        lag = 11
    elif size >= 68:
        lag = 7
    elif size >= 39:
        lag = 5
    else:
        lag = 3
    mid = (size - lag) // 2
    key = [k & _MASK32 for k in init_key]
    key_length = len(key)

    state = [0x8B8B8B8B] * size
    count = max(key_length + 1, size)

    r = _func1(state[0] ^ state[mid] ^ state[size - 1])
    state[mid] = (state[mid] + r) & _MASK32
    r = (r + key_length) & _MASK32
    state[mid + lag] = (state[mid + lag] + r) & _MASK32
    state[0] = r
    count -= 1

    i = 1
    for j in range(count):
        r = _func1(state[i] ^ state[(i + mid) % size] ^ state[(i + size - 1) % size])
        state[(i + mid) % size] = (state[(i + mid) % size] + r) & _MASK32
        r = (r + (key[j] if j < key_length else 0) + i) & _MASK32
        state[(i + mid + lag) % size] = (state[(i + mid + lag) % size] + r) & _MASK32
        state[i] = r
        i = (i + 1) % size

    for _ in range(size):
        r = _func2(
            (state[i] + state[(i + mid) % size] + state[(i + size - 1) % size])
            & _MASK32
        )
        state[(i + mid) % size] ^= r
        r = (r - i) & _MASK32
        state[(i + mid + lag) % size] ^= r
        state[i] = r
        i = (i + 1) % size

    return period_certification(state, params)


def gen_rand_all(state: Sequence[int], params: SFMTParams) -> list[int]:
    """Return the next state, whose words are the next batch of outputs."""
    _check_state(state, params)
    blocks = _blocks(state)
    n = len(blocks)
    r1, r2 = blocks[n - 2], blocks[n - 1]
    for i in range(n):
        r = do_recursion(blocks[i], blocks[(i + params.pos1) % n], r1, r2, params)
        blocks[i] = r
        r1, r2 = r2, r
    return _flatten(blocks)


def gen_rand_array(
    state: Sequence[int], size: int, params: SFMTParams
) -> tuple[list[int], list[int]]:
    """Generate ``size`` 128-bit blocks of output from ``state``.

    Returns the generated words and the state that follows them.
    Raises ValueError when ``size`` is smaller than the state's block count.
    """
    _check_state(state, params)
    n = len(state) // 4
    if size < n:
        raise ValueError(f"size must be at least {n} blocks, got {size}")
    sequence = _blocks(state)
    for i in range(size):
        sequence.append(
            do_recursion(
                sequence[i],
                sequence[i + params.pos1],
                sequence[i + n - 2],
                sequence[i + n - 1],
                params,
            )
        )
    generated = sequence[n:]
    return _flatten(generated), _flatten(generated[-n:])