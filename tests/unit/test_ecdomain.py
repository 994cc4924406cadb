"""
Copyright (c) 2026, the ecdomain developers
See LICENSE for details
"""

import pytest

from ecdomain import CurveConstructionError, ECDomainError, UnknownCurveError


def test_error_hierarchy():
    assert issubclass(UnknownCurveError, ECDomainError)
    assert issubclass(CurveConstructionError, ECDomainError)
    assert not issubclass(UnknownCurveError, CurveConstructionError)

    with pytest.raises(ECDomainError):
        raise UnknownCurveError("nope")
