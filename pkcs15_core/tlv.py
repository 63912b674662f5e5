"""
pkcs15_core.tlv
---------------
Thin layer over the pyasn1 DER codec.

A record is consumed as a generic ``SEQUENCE OF ANY``: every element stays
an opaque TLV (its full DER encoding) until the record decoder decides which
schema applies to that position. Nodes may be handed in as DER bytes or as
any pyasn1 value; both are normalised through the codec.
"""

from __future__ import annotations
from typing import Iterable, List, Union

from pyasn1.codec.der import decoder, encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import base, univ

from .errors import StructuralError

TLVNode = Union[bytes, bytearray, base.Asn1Item]

GENERIC_SEQUENCE = univ.SequenceOf(componentType=univ.Any())


def to_der(node: TLVNode) -> bytes:
    if isinstance(node, (bytes, bytearray)):
        return bytes(node)
    try:
        return encoder.encode(node)
    except PyAsn1Error as exc:
        raise StructuralError(f"Cannot encode TLV node: {exc}") from exc


def decode_as(raw: TLVNode, spec, field: str = None, record: str = None):
    """Decode one complete TLV against ``spec``; trailing octets are an error."""
    data = to_der(raw)
    try:
        value, rest = decoder.decode(data, asn1Spec=spec)
    except PyAsn1Error as exc:
        raise StructuralError(f"Malformed {field or 'element'}: {exc}", record, field) from exc
    if rest:
        raise StructuralError(f"Trailing data after {field or 'element'}", record, field)
    return value


def load(node: TLVNode, record: str = None) -> univ.SequenceOf:
    try:
        return decode_as(node, GENERIC_SEQUENCE, record=record)
    except StructuralError as exc:
        raise StructuralError(
            f"{record or 'Record'} must be encoded as an ASN.1 SEQUENCE.", record
        ) from exc


def elements(node: TLVNode, record: str = None) -> List[bytes]:
    seq = load(node, record)
    return [seq[idx].asOctets() for idx in range(len(seq))]


def sequence(items: Iterable[TLVNode]) -> univ.SequenceOf:
    seq = GENERIC_SEQUENCE.clone()
    seq.clear()
    for idx, item in enumerate(items):
        seq.setComponentByPosition(idx, univ.Any(to_der(item)))
    return seq


def decode_unsigned(raw: TLVNode, field: str, record: str = None) -> int:
    value = int(decode_as(raw, univ.Integer(), field, record))
    if value < 0:
        raise StructuralError(f"{field} must not be negative, got {value}", record, field)
    return value


def encode_integer(value: int) -> bytes:
    return encoder.encode(univ.Integer(value))


def optional_component(seq, name: str):
    """Return the named component of a decoded SEQUENCE, or None when absent."""
    component = seq.getComponentByName(name, instantiate=False)
    if component is base.noValue or not component.isValue:
        return None
    return component
