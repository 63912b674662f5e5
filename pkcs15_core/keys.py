"""
pkcs15_core.keys
----------------
Private key objects as stored on a PKCS#15 token.

The attribute layer only moves these around; the helpers converting to and
from `cryptography` key objects are here so callers holding real keys can
build token objects and vice versa.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Optional

from cryptography.hazmat.primitives.asymmetric import ec, rsa
from pyasn1.codec.der import encoder

from . import schema, tlv

_RSA_ATTRS = ("modulus", "public_exponent", "private_exponent", "prime1",
              "prime2", "exponent1", "exponent2", "coefficient")


# --------- RSA ----------
@dataclass(frozen=True)
class RSAPrivateKeyObject:
    """
    RSAPrivateKeyObject ::= SEQUENCE {
        modulus [0] INTEGER OPTIONAL, ... coefficient [7] INTEGER OPTIONAL }

    Tokens commonly omit the public or CRT parts, so every component is optional.
    """
    modulus: Optional[int] = None
    public_exponent: Optional[int] = None
    private_exponent: Optional[int] = None
    prime1: Optional[int] = None
    prime2: Optional[int] = None
    exponent1: Optional[int] = None
    exponent2: Optional[int] = None
    coefficient: Optional[int] = None

    asn1_spec = schema.RSAPrivateKeyObject()

    @classmethod
    def from_asn1(cls, seq) -> "RSAPrivateKeyObject":
        values = {}
        for attr, name in zip(_RSA_ATTRS, schema.RSA_COMPONENTS):
            component = tlv.optional_component(seq, name)
            values[attr] = int(component) if component is not None else None
        return cls(**values)

    def to_asn1(self, spec=None):
        seq = (spec if spec is not None else self.asn1_spec).clone()
        seq.clear()
        for attr, name in zip(_RSA_ATTRS, schema.RSA_COMPONENTS):
            value = getattr(self, attr)
            if value is not None:
                seq[name] = value
        return seq

    @classmethod
    def from_der(cls, data: bytes) -> "RSAPrivateKeyObject":
        return cls.from_asn1(tlv.decode_as(data, cls.asn1_spec, "RSAPrivateKeyObject"))

    def to_der(self) -> bytes:
        return encoder.encode(self.to_asn1())

    @property
    def is_complete(self) -> bool:
        return all(getattr(self, f.name) is not None for f in fields(self))

    @classmethod
    def from_private_key(cls, key: rsa.RSAPrivateKey) -> "RSAPrivateKeyObject":
        numbers = key.private_numbers()
        return cls(
            modulus=numbers.public_numbers.n,
            public_exponent=numbers.public_numbers.e,
            private_exponent=numbers.d,
            prime1=numbers.p,
            prime2=numbers.q,
            exponent1=numbers.dmp1,
            exponent2=numbers.dmq1,
            coefficient=numbers.iqmp,
        )

    def to_private_key(self) -> rsa.RSAPrivateKey:
        if not self.is_complete:
            raise ValueError("RSAPrivateKeyObject lacks CRT components; cannot build a private key")
        return rsa.RSAPrivateNumbers(
            p=self.prime1,
            q=self.prime2,
            d=self.private_exponent,
            dmp1=self.exponent1,
            dmq1=self.exponent2,
            iqmp=self.coefficient,
            public_numbers=rsa.RSAPublicNumbers(self.public_exponent, self.modulus),
        ).private_key()


# --------- EC ----------
@dataclass(frozen=True)
class ECPrivateKeyObject:
    """ECPrivateKey ::= INTEGER"""
    value: int

    asn1_spec = schema.ECPrivateKey()

    @classmethod
    def from_asn1(cls, value) -> "ECPrivateKeyObject":
        return cls(int(value))

    def to_asn1(self, spec=None):
        return (spec if spec is not None else self.asn1_spec).clone(self.value)

    @classmethod
    def from_der(cls, data: bytes) -> "ECPrivateKeyObject":
        return cls.from_asn1(tlv.decode_as(data, cls.asn1_spec, "ECPrivateKey"))

    def to_der(self) -> bytes:
        return encoder.encode(self.to_asn1())

    @classmethod
    def from_private_key(cls, key: ec.EllipticCurvePrivateKey) -> "ECPrivateKeyObject":
        return cls(key.private_numbers().private_value)

    def to_private_key(self, curve: ec.EllipticCurve) -> ec.EllipticCurvePrivateKey:
        return ec.derive_private_key(self.value, curve)
