"""
Copyright (c) 2019-2020, the Decred developers
Copyright (c) 2026, the ecdomain developers
See LICENSE for details
"""


class ECDomainError(Exception):
    pass


class UnknownCurveError(ECDomainError):
    """
    UnknownCurveError is raised when a curve is requested by an OID or name
    that is not in the registry. Callers must treat it as a rejection.
    """

    pass


class CurveConstructionError(ECDomainError):
    """
    CurveConstructionError is raised when a curve constant cannot be parsed.
    """

    pass
