"""
pkcs15_core.attributes
----------------------
Algorithm-specific private key attribute records.

Each record is a SEQUENCE of mandatory leading members, optional trailing
members and an extension marker. Members are consumed strictly in order;
whatever follows the last known member is kept verbatim in ``extensions``
and written back after the known members on encode.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from pyasn1.codec.der import encoder
from pyasn1.type import univ

from . import tlv
from .basic import ECKeyInfo, NullKeyInfo
from .context import ResolutionContext, resolve_context
from .errors import MissingFieldError, StructuralError
from .keys import ECPrivateKeyObject, RSAPrivateKeyObject
from .logger import get_logger
from .private_key import KeyAlgorithm, SpecificPrivateKeyAttributes, register_private_key_attributes
from .reference import KeyInfoField, ObjectValueField, Resolved

log = get_logger("pkcs15.attributes")


def _keep_extensions(record: str, rest: List[bytes]) -> List[bytes]:
    if rest:
        log.debug(f"{record}: keeping {len(rest)} uninterpreted extension element(s)",
                  extra={"record": record, "count": len(rest)})
    return rest


def _check_extension_slot(record: str, key_info, extensions) -> None:
    # extension elements can only follow a keyInfo element
    if extensions and key_info is None:
        raise StructuralError(f"{record} cannot carry extension elements without keyInfo", record, "keyInfo")


@register_private_key_attributes(KeyAlgorithm.RSA)
@dataclass
class PrivateRSAKeyAttributes(SpecificPrivateKeyAttributes):
    """
    PrivateRSAKeyAttributes ::= SEQUENCE {
        value         ObjectValue {RSAPrivateKeyObject},
        modulusLength INTEGER, -- modulus length in bits, e.g. 1024
        keyInfo       KeyInfo {NULL, PublicKeyOperations} OPTIONAL,
        ... -- For future extensions
    }

    ``value`` and ``key_info`` are Resolved references: ``.value.value`` is the
    key object, ``.value.via`` the Path it was loaded from (None when inline).
    """
    value: Resolved
    modulus_length: int
    key_info: Optional[Resolved] = None
    extensions: List[bytes] = field(default_factory=list)

    value_field = ObjectValueField("value", RSAPrivateKeyObject)
    key_info_field = KeyInfoField("keyInfo", NullKeyInfo)

    @classmethod
    def decode(cls, node, context: Optional[ResolutionContext] = None) -> "PrivateRSAKeyAttributes":
        record = cls.__name__
        context = resolve_context(context)
        objs = iter(tlv.elements(node, record))

        raw = next(objs, None)
        if raw is None:
            raise MissingFieldError(record, "value")
        value = cls.value_field.decode(raw, context, record)

        raw = next(objs, None)
        if raw is None:
            raise MissingFieldError(record, "modulusLength")
        modulus_length = tlv.decode_unsigned(raw, "modulusLength", record)

        key_info = None
        raw = next(objs, None)
        if raw is not None:
            key_info = cls.key_info_field.decode(raw, context, record)

        return cls(value, modulus_length, key_info, _keep_extensions(record, list(objs)))

    @classmethod
    def from_der(cls, data: bytes, context: Optional[ResolutionContext] = None) -> "PrivateRSAKeyAttributes":
        return cls.decode(data, context)

    def encode(self) -> univ.SequenceOf:
        _check_extension_slot(type(self).__name__, self.key_info, self.extensions)
        v = [self.value_field.encode(self.value), tlv.encode_integer(self.modulus_length)]
        if self.key_info is not None:
            v.append(self.key_info_field.encode(self.key_info))
        v.extend(self.extensions)
        return tlv.sequence(v)

    def to_der(self) -> bytes:
        return encoder.encode(self.encode())

    @property
    def private_key_object(self) -> RSAPrivateKeyObject:
        return self.value.value

    @property
    def generic_key_info(self) -> Optional[NullKeyInfo]:
        return self.key_info.value if self.key_info is not None else None


@register_private_key_attributes(KeyAlgorithm.EC)
@dataclass
class PrivateECKeyAttributes(SpecificPrivateKeyAttributes):
    """
    PrivateECKeyAttributes ::= SEQUENCE {
        value   ObjectValue {ECPrivateKey},
        keyInfo KeyInfo {ECParameters, PublicKeyOperations} OPTIONAL,
        ... -- For future extensions
    }
    """
    value: Resolved
    key_info: Optional[Resolved] = None
    extensions: List[bytes] = field(default_factory=list)

    value_field = ObjectValueField("value", ECPrivateKeyObject)
    key_info_field = KeyInfoField("keyInfo", ECKeyInfo)

    @classmethod
    def decode(cls, node, context: Optional[ResolutionContext] = None) -> "PrivateECKeyAttributes":
        record = cls.__name__
        context = resolve_context(context)
        objs = iter(tlv.elements(node, record))

        raw = next(objs, None)
        if raw is None:
            raise MissingFieldError(record, "value")
        value = cls.value_field.decode(raw, context, record)

        key_info = None
        raw = next(objs, None)
        if raw is not None:
            key_info = cls.key_info_field.decode(raw, context, record)

        return cls(value, key_info, _keep_extensions(record, list(objs)))

    @classmethod
    def from_der(cls, data: bytes, context: Optional[ResolutionContext] = None) -> "PrivateECKeyAttributes":
        return cls.decode(data, context)

    def encode(self) -> univ.SequenceOf:
        _check_extension_slot(type(self).__name__, self.key_info, self.extensions)
        v = [self.value_field.encode(self.value)]
        if self.key_info is not None:
            v.append(self.key_info_field.encode(self.key_info))
        v.extend(self.extensions)
        return tlv.sequence(v)

    def to_der(self) -> bytes:
        return encoder.encode(self.encode())

    @property
    def private_key_object(self) -> ECPrivateKeyObject:
        return self.value.value

    @property
    def generic_key_info(self) -> Optional[ECKeyInfo]:
        return self.key_info.value if self.key_info is not None else None
