"""
pkcs15_core.basic
-----------------
Basic PKCS#15 value types shared by the attribute records:

- Path: a file reference on the token, also the key of object directories
- Operations: the named-bit BIT STRING of supported key operations
- KeyInfo: parameters plus supported operations of a key
  (NullKeyInfo for RSA, ECKeyInfo for elliptic curve keys)
"""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from pyasn1.codec.der import encoder
from pyasn1.type import univ

from . import schema, tlv
from .utils import bits_to_int, hexs, int_to_bits, split_fids


@dataclass(frozen=True)
class Path:
    efid_or_path: bytes
    index: Optional[int] = None
    length: Optional[int] = None

    @classmethod
    def from_asn1(cls, seq) -> "Path":
        index = tlv.optional_component(seq, "index")
        length = tlv.optional_component(seq, "length")
        return cls(
            efid_or_path=seq["efidOrPath"].asOctets(),
            index=int(index) if index is not None else None,
            length=int(length) if length is not None else None,
        )

    def to_asn1(self) -> schema.Path:
        seq = schema.Path()
        seq["efidOrPath"] = self.efid_or_path
        if self.index is not None:
            seq["index"] = self.index
        if self.length is not None:
            seq["length"] = self.length
        return seq

    def to_der(self) -> bytes:
        return encoder.encode(self.to_asn1())

    def storage_key(self) -> str:
        """Stable text form used by container-backed directories."""
        key = hexs(self.efid_or_path)
        if self.index is not None or self.length is not None:
            key += f":{self.index if self.index is not None else ''}:{self.length if self.length is not None else ''}"
        return key

    def __str__(self) -> str:
        s = "/".join(split_fids(self.efid_or_path))
        if self.index is not None:
            s += f"[{self.index}:{self.length if self.length is not None else ''}]"
        return s


class Operations(enum.IntFlag):
    COMPUTE_CHECKSUM = 1 << 0
    COMPUTE_SIGNATURE = 1 << 1
    VERIFY_CHECKSUM = 1 << 2
    VERIFY_SIGNATURE = 1 << 3
    ENCIPHER = 1 << 4
    DECIPHER = 1 << 5
    HASH = 1 << 6
    GENERATE_KEY = 1 << 7

    @classmethod
    def from_asn1(cls, bits) -> "Operations":
        return cls(bits_to_int(bits.asBinary()))

    def to_asn1(self) -> schema.Operations:
        # trailing zero bits are dropped, as DER requires for named bit lists
        return schema.Operations(binValue=int_to_bits(int(self)))


@dataclass(frozen=True)
class KeyInfo:
    """
    Inline form of KeyInfo: algorithm parameters plus the supported operations.

    ``operations`` is None when the element carried no supportedOperations,
    and Operations(0) when it carried an empty BIT STRING.
    """
    parameters: Any = None
    operations: Optional[Operations] = None

    parameters_spec: ClassVar[Any] = None

    @classmethod
    def _parameters_from_asn1(cls, value) -> Any:
        return value

    @classmethod
    def _parameters_to_asn1(cls, parameters) -> Any:
        return parameters

    @classmethod
    def from_asn1(cls, seq) -> "KeyInfo":
        ops = tlv.optional_component(seq, "supportedOperations")
        return cls(
            parameters=cls._parameters_from_asn1(seq["parameters"]),
            operations=Operations.from_asn1(ops) if ops is not None else None,
        )

    def to_asn1(self):
        seq = schema.params_and_ops(self.parameters_spec).clone()
        seq["parameters"] = self._parameters_to_asn1(self.parameters)
        if self.operations is not None:
            seq["supportedOperations"] = Operations(self.operations).to_asn1()
        return seq


@dataclass(frozen=True)
class NullKeyInfo(KeyInfo):
    """KeyInfo {NULL, PublicKeyOperations}, used by RSA keys."""

    parameters_spec: ClassVar[Any] = univ.Null()

    @classmethod
    def _parameters_from_asn1(cls, value) -> Any:
        return None

    @classmethod
    def _parameters_to_asn1(cls, parameters) -> Any:
        return univ.Null("")


@dataclass(frozen=True)
class ECKeyInfo(KeyInfo):
    """KeyInfo {ECParameters, PublicKeyOperations}; parameters is the named curve OID."""

    parameters_spec: ClassVar[Any] = univ.ObjectIdentifier()

    @classmethod
    def _parameters_from_asn1(cls, value) -> Any:
        return str(value)

    @classmethod
    def _parameters_to_asn1(cls, parameters) -> Any:
        return univ.ObjectIdentifier(parameters)
