"""
Copyright (c) 2026, the ecdomain developers
See LICENSE for details
"""

import pytest

from ecdomain import CurveConstructionError, ECDomainError
from ecdomain.util import integer


def test_modulo():
    assert integer.modulo(10, 7) == 3
    assert integer.modulo(-10, 7) == 4
    assert integer.modulo(-7, 7) == 0
    assert integer.modulo(0, 7) == 0
    assert integer.modulo(6, 7) == 6

    P = 2 ** 255 - 19
    for x in (-(P ** 3) - 1, -P - 1, -1, P * 5 + 2):
        r = integer.modulo(x, P)
        assert 0 <= r < P
        assert (x - r) % P == 0

    for n in (0, -7):
        with pytest.raises(ECDomainError):
            integer.modulo(3, n)


def test_fromHex():
    assert integer.fromHex("0") == 0
    assert integer.fromHex("00ff") == 255
    assert integer.fromHex("FfFf") == 0xFFFF
    assert integer.fromHex("1" + "0" * 128) == 1 << 512

    for bad in ("", "0x10", "-1", "+1", " 1", "1 ", "1_0", "g", "12\n", "٣"):
        with pytest.raises(CurveConstructionError):
            integer.fromHex(bad)
    with pytest.raises(CurveConstructionError):
        integer.fromHex(None)
    with pytest.raises(CurveConstructionError):
        integer.fromHex(b"ff")


def test_hexLength():
    assert integer.hexLength(0) == 1
    assert integer.hexLength(0xF) == 1
    assert integer.hexLength(0x10) == 2
    assert integer.hexLength(2 ** 256 - 1) == 64
    assert integer.hexLength(2 ** 256) == 65
    with pytest.raises(ECDomainError):
        integer.hexLength(-1)
