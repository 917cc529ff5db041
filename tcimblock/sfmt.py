"""SIMD-oriented Fast Mersenne Twister pseudorandom number generator."""

from __future__ import annotations

from collections.abc import Sequence

from tcimblock.sfmt_core import (
    block_count,
    gen_rand_all,
    gen_rand_array,
    init_by_array as _init_by_array,
    init_gen_rand as _init_gen_rand,
)
from tcimblock.sfmt_params import DEFAULT_MEXP, get_params

_MASK32 = 0xFFFFFFFF


def to_real1(v: int) -> float:
    """Map a 32-bit integer onto the closed interval [0, 1]."""
    return v * (1.0 / 4294967295.0)


def to_real2(v: int) -> float:
    """Map a 32-bit integer onto the half-open interval [0, 1)."""
    return v * (1.0 / 4294967296.0)


def to_real3(v: int) -> float:
    """Map a 32-bit integer onto the open interval (0, 1)."""
    return (float(v) + 0.5) * (1.0 / 4294967296.0)


def to_res53(v: int) -> float:
    """Map a 64-bit integer onto [0, 1) with 53-bit resolution."""
    return v * (1.0 / 18446744073709551616.0)


def to_res53_mix(x: int, y: int) -> float:
    """Combine two 32-bit integers into a float on [0, 1)."""
    return to_res53((x & _MASK32) | ((y & _MASK32) << 32))


class SFMT:
    """A seeded SFMT generator.

    ``seed`` is either a 32-bit integer or a sequence of 32-bit integers;
    the latter initialises the state by array.
    """

    def __init__(self, seed: int | Sequence[int], mexp: int = DEFAULT_MEXP) -> None:
        self.params = get_params(mexp)
        self._n32 = block_count(mexp) * 4
        self._state: list[int] = []
        self._idx = self._n32
        if isinstance(seed, int):
            self.init_gen_rand(seed)
        else:
            self.init_by_array(seed)

    def init_gen_rand(self, seed: int) -> None:
        """Reset the state from a 32-bit seed."""
        self._state = _init_gen_rand(seed, self.params)
        self._idx = self._n32

    def init_by_array(self, init_key: Sequence[int]) -> None:
        """Reset the state from a sequence of 32-bit keys."""
        self._state = _init_by_array(list(init_key), self.params)
        self._idx = self._n32

    def idstring(self) -> str:
        """Return the string that identifies this generator's parameters."""
        return self.params.idstr

    def min_array_size32(self) -> int:
        """Smallest number of words :meth:`fill_array32` accepts."""
        return self._n32

    def min_array_size64(self) -> int:
        """Smallest number of words :meth:`fill_array64` accepts."""
        return self._n32 // 2

    def genrand_uint32(self) -> int:
        """Return the next 32-bit pseudorandom integer."""
        if self._idx >= self._n32:
            self._state = gen_rand_all(self._state, self.params)
            self._idx = 0
        value = self._state[self._idx]
        self._idx += 1
        return value

    def genrand_uint64(self) -> int:
        """Return the next 64-bit pseudorandom integer.

        Raises RuntimeError when an odd number of 32-bit values has been
        drawn since the last refill.
        """
        if self._idx % 2:
            raise RuntimeError("64-bit output must start on an even 32-bit index")
        if self._idx >= self._n32:
            self._state = gen_rand_all(self._state, self.params)
            self._idx = 0
        low, high = self._state[self._idx], self._state[self._idx + 1]
        self._idx += 2
        return low | (high << 32)

    def _check_fill(self, size: int, multiple: int, minimum: int) -> None:
        if self._idx != self._n32:
            raise RuntimeError(
                "block generation needs a state that single draws have not touched"
            )
        if size % multiple:
            raise ValueError(f"size must be a multiple of {multiple}, got {size}")
        if size < minimum:
            raise ValueError(f"size must be at least {minimum}, got {size}")

    def fill_array32(self, size: int) -> list[int]:
        """Return ``size`` 32-bit pseudorandom integers generated in one block."""
        self._check_fill(size, 4, self._n32)
        words, self._state = gen_rand_array(self._state, size // 4, self.params)
        self._idx = self._n32
        return words

    def fill_array64(self, size: int) -> list[int]:
        """Return ``size`` 64-bit pseudorandom integers generated in one block."""
        self._check_fill(size, 2, self._n32 // 2)
        words, self._state = gen_rand_array(self._state, size // 2, self.params)
        self._idx = self._n32
        return [low | (high << 32) for low, high in zip(words[::2], words[1::2])]

    def genrand_real1(self) -> float:
        """Return a float on [0, 1]."""
        return to_real1(self.genrand_uint32())

    def genrand_real2(self) -> float:
        """Return a float on [0, 1)."""
        return to_real2(self.genrand_uint32())

    def genrand_real3(self) -> float:
        """Return a float on (0, 1)."""
        return to_real3(self.genrand_uint32())

    def genrand_res53(self) -> float:
        """Return a float on [0, 1) with 53-bit resolution from one 64-bit draw."""
        return to_res53(self.genrand_uint64())

    def genrand_res53_mix(self) -> float:
        """Return a float on [0, 1) with 53-bit resolution from two 32-bit draws."""
        x = self.genrand_uint32()
        y = self.genrand_uint32()
        return to_res53_mix(x, y)