"""Parameter sets for the SIMD-oriented Fast Mersenne Twister."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SFMTParams:
    """Constants that define one SFMT generator for a Mersenne exponent."""

    mexp: int
    pos1: int
    sl1: int
    sl2: int
    sr1: int
    sr2: int
    msk: tuple[int, int, int, int]
    parity: tuple[int, int, int, int]
    idstr: str


_PARAMS: dict[int, SFMTParams] = {
    p.mexp: p
    for p in (
        SFMTParams(
            mexp=607, pos1=2, sl1=15, sl2=3, sr1=13, sr2=3,
            msk=(0xFDFF37FF, 0xEF7F3F7D, 0xFF777B7D, 0x7FF7FB2F),
            parity=(0x00000001, 0x00000000, 0x00000000, 0x5986F054),
            idstr="SFMT-607:2-15-3-13-3:fdff37ff-ef7f3f7d-ff777b7d-7ff7fb2f",
        ),
        SFMTParams(
            mexp=1279, pos1=7, sl1=14, sl2=3, sr1=5, sr2=1,
            msk=(0xF7FEFFFD, 0x7FEFCFFF, 0xAFF3EF3F, 0xB5FFFF7F),
            parity=(0x00000001, 0x00000000, 0x00000000, 0x20000000),
            idstr="SFMT-1279:7-14-3-5-1:f7fefffd-7fefcfff-aff3ef3f-b5ffff7f",
        ),
        SFMTParams(
            mexp=2281, pos1=12, sl1=19, sl2=1, sr1=5, sr2=1,
            msk=(0xBFF7FFBF, 0xFDFFFFFE, 0xF7FFEF7F, 0xF2F7CBBF),
            parity=(0x00000001, 0x00000000, 0x00000000, 0x41DFA600),
            idstr="SFMT-2281:12-19-1-5-1:bff7ffbf-fdfffffe-f7ffef7f-f2f7cbbf",
        ),
        SFMTParams(
            mexp=4253, pos1=17, sl1=20, sl2=1, sr1=7, sr2=1,
            msk=(0x9F7BFFFF, 0x9FFFFF5F, 0x3EFFFFFB, 0xFFFFF7BB),
            parity=(0xA8000001, 0xAF5390A3, 0xB740B3F8, 0x6C11486D),
            idstr="SFMT-4253:17-20-1-7-1:9f7bffff-9fffff5f-3efffffb-fffff7bb",
        ),
        SFMTParams(
            mexp=11213, pos1=68, sl1=14, sl2=3, sr1=7, sr2=3,
            msk=(0xEFFFF7FB, 0xFFFFFFEF, 0xDFDFBFFF, 0x7FFFDBFD),
            parity=(0x00000001, 0x00000000, 0xE8148000, 0xD0C7AFA3),
            idstr="SFMT-11213:68-14-3-7-3:effff7fb-ffffffef-dfdfbfff-7fffdbfd",
        ),
        SFMTParams(
            mexp=19937, pos1=122, sl1=18, sl2=1, sr1=11, sr2=1,
            msk=(0xDFFFFFEF, 0xDDFECB7F, 0xBFFAFFFF, 0xBFFFFFF6),
            parity=(0x00000001, 0x00000000, 0x00000000, 0x13C9E684),
            idstr="SFMT-19937:122-18-1-11-1:dfffffef-ddfecb7f-bffaffff-bffffff6",
        ),
        SFMTParams(
            mexp=44497, pos1=330, sl1=5, sl2=3, sr1=9, sr2=3,
            msk=(0xEFFFFFFB, 0xDFBEBFFF, 0xBFBF7BEF, 0x9FFD7BFF),
            parity=(0x00000001, 0x00000000, 0xA3AC4000, 0xECC1327A),
            idstr="SFMT-44497:330-5-3-9-3:effffffb-dfbebfff-bfbf7bef-9ffd7bff",
        ),
        SFMTParams(
            mexp=86243, pos1=366, sl1=6, sl2=7, sr1=19, sr2=1,
            msk=(0xFDBFFBFF, 0xBFF7FF3F, 0xFD77EFFF, 0xBF9FF3FF),
            parity=(0x00000001, 0x00000000, 0x00000000, 0xE9528D85),
            idstr="SFMT-86243:366-6-7-19-1:fdbffbff-bff7ff3f-fd77efff-bf9ff3ff",
        ),
        SFMTParams(
            mexp=132049, pos1=110, sl1=19, sl2=1, sr1=21, sr2=1,
            msk=(0xFFFFBB5F, 0xFB6EBF95, 0xFFFEFFFA, 0xCFF77FFF),
            parity=(0x00000001, 0x00000000, 0xCB520000, 0xC7E91C7D),
            idstr="SFMT-132049:110-19-1-21-1:ffffbb5f-fb6ebf95-fffefffa-cff77fff",
        ),
        SFMTParams(
            mexp=216091, pos1=627, sl1=11, sl2=3, sr1=10, sr2=1,
            msk=(0xBFF7BFF7, 0xBFFFFFFF, 0xBFFFFA7F, 0xFFDDFBFB),
            parity=(0xF8000001, 0x89E80709, 0x3BD2B64B, 0x0C64B1E4),
            idstr="SFMT-216091:627-11-3-10-1:bff7bff7-bfffffff-bffffa7f-ffddfbfb",
        ),
    )
}

DEFAULT_MEXP = 19937
SUPPORTED_MEXPS: tuple[int, ...] = tuple(sorted(_PARAMS))


def get_params(mexp: int = DEFAULT_MEXP) -> SFMTParams:
    """Return the parameter set for a Mersenne exponent.

    Raises ValueError when no parameter set exists for ``mexp``.
    """
    try:
        return _PARAMS[mexp]
    except (KeyError, TypeError):
        raise ValueError(
            f"unsupported Mersenne exponent {mexp!r}; "
            f"expected one of {', '.join(map(str, SUPPORTED_MEXPS))}"
        ) from None