"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
Copyright (c) 2026, the ecdomain developers
See LICENSE for details

Short Weierstrass curve domain parameters and the registry of supported
curves.

    y^2 = x^3 + A*x + B (mod P)

References:
  [SEC2]: Recommended Elliptic Curve Domain Parameters
    https://www.secg.org/sec2-v2.pdf

  [RFC5639]: Elliptic Curve Cryptography (ECC) Brainpool Standard Curves
    and Curve Generation
    https://tools.ietf.org/html/rfc5639

  [FIPS186-4]: Digital Signature Standard, Appendix D.1.2.3 (P-256)
"""

from types import MappingProxyType

from ecdomain import ECDomainError, UnknownCurveError
from ecdomain.util import helpers
from ecdomain.util.integer import fromHex, hexLength, modulo

from .point import Point


log = helpers.getLogger("CURVE")


class CurveFp:
    """
    CurveFp holds the domain parameters of a short Weierstrass curve over the
    prime field of order P. The parameters are trusted. Nothing here checks
    that P is prime, that the curve is nonsingular, or that N is the order
    of G.

    Instances are read-only once constructed.
    """

    def __init__(self, A, B, P, N, Gx, Gy, name, oid, nistName=None):
        self.A = A
        self.B = B
        self.P = P
        self.N = N
        self.G = Point(Gx, Gy)
        self.name = name
        self.nistName = nistName
        self._oid = tuple(oid)
        self._sealed = True

    def __setattr__(self, name, value):
        if getattr(self, "_sealed", False):
            raise AttributeError(f"{self!r} is read-only")
        object.__setattr__(self, name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self!r} is read-only")

    def contains(self, p):
        """
        contains checks whether the affine point p lies on the curve. The
        coordinates must be reduced, i.e. in [0, P-1]. An unreduced coordinate
        is rejected even if it is congruent to a valid one.

        Args:
            p (Point): The point to check.

        Returns:
            bool: True if p is on the curve.
        """
        if p.x < 0 or p.x > self.P - 1:
            return False
        if p.y < 0 or p.y > self.P - 1:
            return False
        return modulo(p.y ** 2 - (p.x ** 3 + self.A * p.x + self.B), self.P) == 0

    def length(self):
        """
        length is the number of bytes used for the fixed-length encoding of
        integers modulo N, computed from the hex digit count of N.
        """
        return (1 + hexLength(self.N)) // 2

    @property
    def oid(self):
        """
        oid is the object identifier arc. A new list is returned on every
        access.
        """
        return list(self._oid)

    @property
    def oidString(self):
        return oidToString(self._oid)

    def _fields(self):
        return (
            self.A,
            self.B,
            self.P,
            self.N,
            self.G,
            self.name,
            self._oid,
            self.nistName,
        )

    def __eq__(self, other):
        if not isinstance(other, CurveFp):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash(self._fields())

    def __repr__(self):
        return f"CurveFp({self.name})"


def oidToString(oid):
    """
    oidToString converts an OID arc to dotted notation.

    Args:
        oid (sequence(int)): The arc, e.g. [1, 3, 132, 0, 10].

    Returns:
        str: The dotted OID, e.g. "1.3.132.0.10".
    """
    return ".".join(str(c) for c in oid)


def parseOid(s):
    """
    parseOid parses a dotted OID string into a tuple of non-negative
    integers.

    Args:
        s (str): The dotted OID, e.g. "1.2.840.10045.3.1.7".

    Returns:
        tuple(int): The OID arc.
    """
    if not s:
        raise ECDomainError("empty OID")
    arc = []
    for component in s.split("."):
        # isdigit alone admits non-ASCII digits.
        if not (component.isascii() and component.isdigit()):
            raise ECDomainError(f"invalid OID component {component!r} in {s!r}")
        arc.append(int(component))
    return tuple(arc)


def _oidKey(oid):
    if isinstance(oid, str):
        return parseOid(oid)
    return tuple(oid)


secp256k1 = CurveFp(
    fromHex("0000000000000000000000000000000000000000000000000000000000000000"),
    fromHex("0000000000000000000000000000000000000000000000000000000000000007"),
    fromHex("fffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f"),
    fromHex("fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141"),
    fromHex("79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"),
    fromHex("483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"),
    "secp256k1",
    [1, 3, 132, 0, 10],
)

prime256v1 = CurveFp(
    fromHex("ffffffff00000001000000000000000000000000fffffffffffffffffffffffc"),
    fromHex("5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b"),
    fromHex("ffffffff00000001000000000000000000000000ffffffffffffffffffffffff"),
    fromHex("ffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551"),
    fromHex("6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"),
    fromHex("4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5"),
    "prime256v1",
    [1, 2, 840, 10045, 3, 1, 7],
    nistName="P-256",
)

# The brainpool constants below are ordered A, B, P, Q (the order N), x, y
# as in [RFC5639].
brainpoolP224r1 = CurveFp(
    fromHex("68A5E62CA9CE6C1C299803A6C1530B514E182AD8B0042A59CAD29F43"),
    fromHex("2580F63CCFE44138870713B1A92369E33E2135D266DBB372386C400B"),
    fromHex("D7C134AA264366862A18302575D1D787B09F075797DA89F57EC8C0FF"),
    fromHex("D7C134AA264366862A18302575D0FB98D116BC4B6DDEBCA3A5A7939F"),
    fromHex("0D9029AD2C7E5CF4340823B2A87DC68C9E4CE3174C1E6EFDEE12C07D"),
    fromHex("58AA56F772C0726F24C6B89E4ECDAC24354B9E99CAA3F6D3761402CD"),
    "brainpoolP224r1",
    [1, 3, 36, 3, 3, 2, 8, 1, 1, 5],
)

brainpoolP256r1 = CurveFp(
    fromHex("7D5A0975FC2C3057EEF67530417AFFE7FB8055C126DC5C6CE94A4B44F330B5D9"),
    fromHex("26DC5C6CE94A4B44F330B5D9BBD77CBF958416295CF7E1CE6BCCDC18FF8C07B6"),
    fromHex("A9FB57DBA1EEA9BC3E660A909D838D726E3BF623D52620282013481D1F6E5377"),
    fromHex("A9FB57DBA1EEA9BC3E660A909D838D718C397AA3B561A6F7901E0E82974856A7"),
    fromHex("8BD2AEB9CB7E57CB2C4B482FFC81B7AFB9DE27E1E3BD23C23A4453BD9ACE3262"),
    fromHex("547EF835C3DAC4FD97F8461A14611DC9C27745132DED8E545C1D54C72F046997"),
    "brainpoolP256r1",
    [1, 3, 36, 3, 3, 2, 8, 1, 1, 7],
)

brainpoolP320r1 = CurveFp(
    fromHex(
        "3EE30B568FBAB0F883CCEBD46D3F3BB8A2A73513F5EB79DA66190EB085FFA9F4"
        "92F375A97D860EB4"
    ),
    fromHex(
        "520883949DFDBC42D3AD198640688A6FE13F41349554B49ACC31DCCD88453981"
        "6F5EB4AC8FB1F1A6"
    ),
    fromHex(
        "D35E472036BC4FB7E13C785ED201E065F98FCFA6F6F40DEF4F92B9EC7893EC28"
        "FCD412B1F1B32E27"
    ),
    fromHex(
        "D35E472036BC4FB7E13C785ED201E065F98FCFA5B68F12A32D482EC7EE8658E9"
        "8691555B44C59311"
    ),
    fromHex(
        "43BD7E9AFB53D8B85289BCC48EE5BFE6F20137D10A087EB6E7871E2A10A599C7"
        "10AF8D0D39E20611"
    ),
    fromHex(
        "14FDD05545EC1CC8AB4093247F77275E0743FFED117182EAA9C77877AAAC6AC7"
        "D35245D1692E8EE1"
    ),
    "brainpoolP320r1",
    [1, 3, 36, 3, 3, 2, 8, 1, 1, 9],
)

brainpoolP384r1 = CurveFp(
    fromHex(
        "7BC382C63D8C150C3C72080ACE05AFA0C2BEA28E4FB22787139165EFBA91F90F"
        "8AA5814A503AD4EB04A8C7DD22CE2826"
    ),
    fromHex(
        "04A8C7DD22CE28268B39B55416F0447C2FB77DE107DCD2A62E880EA53EEB62D5"
        "7CB4390295DBC9943AB78696FA504C11"
    ),
    fromHex(
        "8CB91E82A3386D280F5D6F7E50E641DF152F7109ED5456B412B1DA197FB71123"
        "ACD3A729901D1A71874700133107EC53"
    ),
    fromHex(
        "8CB91E82A3386D280F5D6F7E50E641DF152F7109ED5456B31F166E6CAC0425A7"
        "CF3AB6AF6B7FC3103B883202E9046565"
    ),
    fromHex(
        "1D1C64F068CF45FFA2A63A81B7C13F6B8847A3E77EF14FE3DB7FCAFE0CBD10E8"
        "E826E03436D646AAEF87B2E247D4AF1E"
    ),
    fromHex(
        "8ABE1D7520F9C2A45CB1EB8E95CFD55262B70B29FEEC5864E19C054FF9912928"
        "0E4646217791811142820341263C5315"
    ),
    "brainpoolP384r1",
    [1, 3, 36, 3, 3, 2, 8, 1, 1, 11],
)

brainpoolP512r1 = CurveFp(
    fromHex(
        "7830A3318B603B89E2327145AC234CC594CBDD8D3DF91610A83441CAEA9863BC"
        "2DED5D5AA8253AA10A2EF1C98B9AC8B57F1117A72BF2C7B9E7C1AC4D77FC94CA"
    ),
    fromHex(
        "3DF91610A83441CAEA9863BC2DED5D5AA8253AA10A2EF1C98B9AC8B57F1117A7"
        "2BF2C7B9E7C1AC4D77FC94CADC083E67984050B75EBAE5DD2809BD638016F723"
    ),
    fromHex(
        "AADD9DB8DBE9C48B3FD4E6AE33C9FC07CB308DB3B3C9D20ED6639CCA70330871"
        "7D4D9B009BC66842AECDA12AE6A380E62881FF2F2D82C68528AA6056583A48F3"
    ),
    fromHex(
        "AADD9DB8DBE9C48B3FD4E6AE33C9FC07CB308DB3B3C9D20ED6639CCA70330870"
        "553E5C414CA92619418661197FAC10471DB1D381085DDADDB58796829CA90069"
    ),
    fromHex(
        "81AEE4BDD82ED9645A21322E9C4C6A9385ED9F70B5D916C1B43B62EEF4D0098E"
        "FF3B1F78E2D0D48D50D1687B93B97D5F7C6D5047406A5E688B352209BCB9F822"
    ),
    fromHex(
        "7DDE385D566332ECC0EABFA9CF7822FDF209F70024A57B1AA000C55B881F8111"
        "B2DCDE494A5F485E5BCA4BD88A2763AED1CA2B2FA8F0540678CD1E0F3AD80892"
    ),
    "brainpoolP512r1",
    [1, 3, 36, 3, 3, 2, 8, 1, 1, 13],
)

p256 = prime256v1

supportedCurves = (
    secp256k1,
    prime256v1,
    brainpoolP224r1,
    brainpoolP256r1,
    brainpoolP320r1,
    brainpoolP384r1,
    brainpoolP512r1,
)


def _buildRegistries():
    byOid = {}
    names = {}
    for curve in supportedCurves:
        key = tuple(curve.oid)
        if key in byOid:
            raise ECDomainError(f"duplicate curve OID {oidToString(key)}")
        byOid[key] = curve
        names[curve.name] = curve
        if curve.nistName:
            names[curve.nistName] = curve
    names["p256"] = p256
    log.debug(f"registered {len(byOid)} curves")
    return MappingProxyType(byOid), MappingProxyType(names)


curvesByOid, curvesByName = _buildRegistries()


def lookup(oid):
    """
    lookup finds a supported curve by its object identifier. There is no
    default curve. An unknown OID is an error the caller must handle.

    Args:
        oid (sequence(int) or str): The OID arc, or its dotted string form.

    Returns:
        CurveFp: The curve.
    """
    key = _oidKey(oid)
    try:
        return curvesByOid[key]
    except KeyError:
        log.debug(f"no curve registered for OID {oidToString(key)}")
        raise UnknownCurveError(f"unknown curve OID {oidToString(key)}") from None


def byName(name):
    """
    byName finds a supported curve by its name, NIST name, or alias.

    Args:
        name (str): The curve name, e.g. "secp256k1", "P-256" or "p256".

    Returns:
        CurveFp: The curve.
    """
    try:
        return curvesByName[name]
    except KeyError:
        raise UnknownCurveError(f"unknown curve name {name!r}") from None
