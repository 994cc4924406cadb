"""
Copyright (c) 2019, the Decred developers
Copyright (c) 2026, the ecdomain developers
See LICENSE for details
"""

import pytest

from ecdomain.crypto.point import Point


def _affineAdd(curve, p1, p2):
    """
    Textbook affine addition, used only to produce known points on the
    supported curves. None stands in for the point at infinity.
    """
    if p1 is None:
        return p2
    if p2 is None:
        return p1
    P = curve.P
    if p1.x == p2.x:
        if (p1.y + p2.y) % P == 0:
            return None
        lam = (3 * p1.x * p1.x + curve.A) * pow(2 * p1.y, -1, P) % P
    else:
        lam = (p2.y - p1.y) * pow(p2.x - p1.x, -1, P) % P
    x = (lam * lam - p1.x - p2.x) % P
    y = (lam * (p1.x - x) - p1.y) % P
    return Point(x, y)


@pytest.fixture
def scalarMult():
    def _scalarMult(curve, k, pt=None):
        """
        k * pt by double-and-add, with pt defaulting to the generator.
        """
        acc = None
        addend = curve.G if pt is None else pt
        while k:
            if k & 1:
                acc = _affineAdd(curve, acc, addend)
            addend = _affineAdd(curve, addend, addend)
            k >>= 1
        return acc

    return _scalarMult
