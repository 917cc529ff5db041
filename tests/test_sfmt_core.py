import pytest

from tcimblock.sfmt_core import (
    block_count,
    do_recursion,
    gen_rand_all,
    gen_rand_array,
    init_by_array,
    init_gen_rand,
    lshift128,
    period_certification,
    rshift128,
)
from tcimblock.sfmt_params import SUPPORTED_MEXPS, get_params

P19937 = get_params(19937)
P607 = get_params(607)


def _certified(state, params):
    inner = 0
    for word, parity in zip(state[:4], params.parity):
        inner ^= word & parity
    return bin(inner).count("1") % 2 == 1


def test_block_count_default_exponent():
    assert block_count(19937) == 156


def test_block_count_small_exponent():
    assert block_count(607) == 5


def test_block_count_rejects_unknown_exponent():
    with pytest.raises(ValueError):
        block_count(1000)


def test_shift_by_zero_is_identity():
    words = (0x12345678, 0x9ABCDEF0, 0x0F0F0F0F, 0xF0F0F0F0)
    assert lshift128(words, 0) == words
    assert rshift128(words, 0) == words


def test_lshift_carries_across_words():
    assert lshift128((0xFF000000, 0, 0, 0), 1) == (0, 0xFF, 0, 0)


def test_lshift_drops_overflow():
    assert lshift128((0, 0, 0, 0xFF000000), 1) == (0, 0, 0, 0)


def test_rshift_then_lshift_restores_low_zero_bytes():
    words = (0, 0x11223344, 0x55667788, 0x99AABBCC)
    for shift in range(1, 5):
        assert lshift128(rshift128(words, shift), shift) == words


def test_shift_out_of_range_raises():
    with pytest.raises(ValueError):
        lshift128((0, 0, 0, 0), 16)
    with pytest.raises(ValueError):
        rshift128((0, 0, 0, 0), -1)


def test_shift_requires_four_words():
    with pytest.raises(ValueError):
        lshift128((1, 2, 3), 1)


def test_do_recursion_of_zeros_is_zero():
    zero = (0, 0, 0, 0)
    assert do_recursion(zero, zero, zero, zero, P19937) == zero


def test_do_recursion_is_linear_over_gf2():
    a1 = (0x12345678, 0xDEADBEEF, 0x0BADF00D, 0xCAFEBABE)
    b1 = (0x11111111, 0x22222222, 0x33333333, 0x44444444)
    c1 = (0xFFFFFFFF, 0x0, 0xAAAAAAAA, 0x55555555)
    d1 = (0x01020304, 0x05060708, 0x090A0B0C, 0x0D0E0F10)
    a2 = (0x87654321, 0x1, 0x2, 0x3)
    b2 = (0x4, 0x5, 0x6, 0x7)
    c2 = (0x8, 0x9, 0xA, 0xB)
    d2 = (0xC, 0xD, 0xE, 0xF)

    def xor(x, y):
        return tuple(p ^ q for p, q in zip(x, y))

    combined = do_recursion(xor(a1, a2), xor(b1, b2), xor(c1, c2), xor(d1, d2), P19937)
    separate = xor(
        do_recursion(a1, b1, c1, d1, P19937), do_recursion(a2, b2, c2, d2, P19937)
    )
    assert combined == separate


def test_do_recursion_stays_in_32_bits():
    full = (0xFFFFFFFF,) * 4
    result = do_recursion(full, full, full, full, P19937)
    assert all(0 <= w <= 0xFFFFFFFF for w in result)


def test_period_certification_fixes_parity_and_is_idempotent():
    state = [0] * (block_count(19937) * 4)
    fixed = period_certification(state, P19937)
    assert _certified(fixed, P19937)
    assert period_certification(fixed, P19937) == fixed
    assert state == [0] * len(state)


def test_period_certification_rejects_wrong_length():
    with pytest.raises(ValueError):
        period_certification([0] * 8, P19937)


def test_init_gen_rand_shape_and_seed():
    state = init_gen_rand(1234, P19937)
    assert len(state) == block_count(19937) * 4
    assert state[0] == 1234 or not _certified([1234] + state[1:], P19937)
    assert all(0 <= w <= 0xFFFFFFFF for w in state)
    assert _certified(state, P19937)


def test_init_gen_rand_deterministic_and_seed_sensitive():
    assert init_gen_rand(4321, P19937) == init_gen_rand(4321, P19937)
    assert init_gen_rand(4321, P19937)[1:] != init_gen_rand(4322, P19937)[1:]


def test_init_by_array_deterministic_and_certified():
    key = [0x1234, 0x5678, 0x9ABC, 0xDEF0]
    state = init_by_array(key, P19937)
    assert state == init_by_array(key, P19937)
    assert len(state) == block_count(19937) * 4
    assert _certified(state, P19937)
    assert state != init_by_array([5, 4, 3, 2, 1], P19937)


def test_init_by_array_long_key():
    key = list(range(1000))
    state = init_by_array(key, P607)
    assert len(state) == block_count(607) * 4
    assert _certified(state, P607)


def test_gen_rand_all_matches_array_of_one_state():
    state = init_gen_rand(1234, P19937)
    n = block_count(19937)
    array, new_state = gen_rand_array(state, n, P19937)
    assert array == gen_rand_all(state, P19937)
    assert new_state == array


def test_gen_rand_array_equals_repeated_gen_rand_all():
    state = init_by_array([0x1234, 0x5678, 0x9ABC, 0xDEF0], P607)
    n = block_count(607)
    array, new_state = gen_rand_array(state, 2 * n + 3, P607)
    first = gen_rand_all(state, P607)
    second = gen_rand_all(first, P607)
    assert array[: 8 * n] == first + second
    assert len(array) == (2 * n + 3) * 4
    assert new_state == array[-4 * n:]


def test_gen_rand_array_continues_from_returned_state():
    state = init_gen_rand(1234, P607)
    n = block_count(607)
    whole, _ = gen_rand_array(state, 3 * n, P607)
    part, mid_state = gen_rand_array(state, n + 2, P607)
    rest, _ = gen_rand_array(mid_state, 2 * n - 2, P607)
    assert part + rest == whole


def test_gen_rand_array_rejects_small_size():
    state = init_gen_rand(1, P607)
    with pytest.raises(ValueError):
        gen_rand_array(state, block_count(607) - 1, P607)


def test_gen_rand_all_rejects_wrong_length():
    with pytest.raises(ValueError):
        gen_rand_all([0] * 4, P607)


@pytest.mark.parametrize("mexp", SUPPORTED_MEXPS)
def test_every_parameter_set_generates(mexp):
    params = get_params(mexp)
    state = init_gen_rand(1234, params)
    nxt = gen_rand_all(state, params)
    assert len(nxt) == len(state) == block_count(mexp) * 4
    assert nxt != state
    assert all(0 <= w <= 0xFFFFFFFF for w in nxt)