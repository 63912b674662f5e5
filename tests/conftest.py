import pytest
from pkcs15_core import (
    Path, RSAPrivateKeyObject, NullKeyInfo, Operations,
    MemoryDirectory, ResolutionContext,
)


@pytest.fixture
def key_path():
    return Path(b"\x3f\x00\x50\x15\x44\x01")


@pytest.fixture
def rsa_object():
    return RSAPrivateKeyObject(modulus=0xC0FFEE1234567, public_exponent=65537)


@pytest.fixture
def null_key_info():
    return NullKeyInfo(operations=Operations.COMPUTE_SIGNATURE | Operations.DECIPHER)


@pytest.fixture
def context(key_path, rsa_object, null_key_info):
    keys = MemoryDirectory(Path, RSAPrivateKeyObject, {key_path: rsa_object})
    infos = MemoryDirectory(int, NullKeyInfo, {7: null_key_info})
    return ResolutionContext([keys, infos])
