import pytest

from pkcs15_core import (
    tlv, Path, ECKeyInfo, ECPrivateKeyObject, Operations,
    MemoryDirectory, ResolutionContext, Resolved,
    KeyAlgorithm, PrivateRSAKeyAttributes, PrivateECKeyAttributes,
    decode_private_key_attributes, private_key_attributes_class,
    UnsupportedAlgorithmError, UnresolvedReferenceError, StructuralError,
)

P256 = "1.2.840.10045.3.1.7"


def test_registry():
    assert private_key_attributes_class(KeyAlgorithm.RSA) is PrivateRSAKeyAttributes
    assert private_key_attributes_class("ec") is PrivateECKeyAttributes
    assert PrivateECKeyAttributes.algorithm is KeyAlgorithm.EC


def test_unknown_algorithm():
    with pytest.raises(UnsupportedAlgorithmError) as exc:
        private_key_attributes_class("dsa")
    assert exc.value.algorithm == "dsa"


def test_dispatch_rsa(context, key_path, rsa_object, null_key_info):
    node = tlv.sequence([key_path.to_der(), tlv.encode_integer(2048), tlv.encode_integer(7)])
    attrs = decode_private_key_attributes(KeyAlgorithm.RSA, node, context)
    assert isinstance(attrs, PrivateRSAKeyAttributes)
    assert attrs.private_key_object == rsa_object
    assert attrs.generic_key_info == null_key_info
    assert attrs.modulus_length == 2048


def test_dispatch_ec_uniform_view():
    key_info = ECKeyInfo(parameters=P256, operations=Operations.COMPUTE_SIGNATURE)
    rec = PrivateECKeyAttributes(value=Resolved(ECPrivateKeyObject(42)), key_info=Resolved(key_info))
    attrs = decode_private_key_attributes("ec", rec.to_der())
    assert attrs == rec
    assert attrs.private_key_object == ECPrivateKeyObject(42)
    assert attrs.generic_key_info.parameters == P256
    assert not hasattr(attrs, "modulus_length")


def test_ec_path_reference():
    path = Path(b"\x3f\x00\x50\x15\x45\x01")
    keys = MemoryDirectory(Path, ECPrivateKeyObject, {path: ECPrivateKeyObject(7)})
    node = tlv.sequence([path.to_der()])
    attrs = decode_private_key_attributes(KeyAlgorithm.EC, node, ResolutionContext([keys]))
    assert attrs.private_key_object == ECPrivateKeyObject(7)
    assert attrs.key_info is None

    with pytest.raises(UnresolvedReferenceError):
        decode_private_key_attributes(KeyAlgorithm.EC, node, ResolutionContext())


def test_same_bytes_different_variant(rsa_object):
    # the discriminant decides; an RSA record is not silently read as EC
    der = PrivateRSAKeyAttributes(Resolved(rsa_object), 1024).to_der()
    with pytest.raises(StructuralError):
        decode_private_key_attributes(KeyAlgorithm.EC, der)


def test_ec_extensions_without_key_info_cannot_be_encoded():
    rec = PrivateECKeyAttributes(Resolved(ECPrivateKeyObject(1)), None, [tlv.encode_integer(7)])
    with pytest.raises(StructuralError) as exc:
        rec.to_der()
    assert exc.value.field == "keyInfo"


def test_ec_extensions_roundtrip_behind_key_info():
    key_info = ECKeyInfo(parameters=P256)
    rec = PrivateECKeyAttributes(Resolved(ECPrivateKeyObject(1)), Resolved(key_info), [tlv.encode_integer(7)])
    restored = decode_private_key_attributes(KeyAlgorithm.EC, rec.to_der())
    assert restored == rec
    assert restored.extensions == [tlv.encode_integer(7)]
