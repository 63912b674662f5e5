"""
pkcs15_core.private_key
-----------------------
Record-family dispatch for private key attributes.

The enclosing PrivateKeyObject tells which algorithm-specific attribute
record follows (in PKCS#15 through the PrivateKeyType CHOICE); that
discriminant, not the shape of the SEQUENCE, selects the decoder. Every
variant exposes the same capability view: the key object and a generic
KeyInfo. Variant-specific members stay on the variant class.
"""

from __future__ import annotations
import enum
from typing import Any, Callable, Dict, Optional, Type

from .basic import KeyInfo
from .context import ResolutionContext
from .errors import UnsupportedAlgorithmError
from .tlv import TLVNode


class KeyAlgorithm(str, enum.Enum):
    RSA = "rsa"
    EC = "ec"


class SpecificPrivateKeyAttributes:
    """Capability shared by PrivateRSAKeyAttributes, PrivateECKeyAttributes, ..."""

    algorithm: KeyAlgorithm

    @property
    def private_key_object(self) -> Any:
        raise NotImplementedError

    @property
    def generic_key_info(self) -> Optional[KeyInfo]:
        raise NotImplementedError

    @classmethod
    def decode(cls, node: TLVNode, context: Optional[ResolutionContext] = None) -> "SpecificPrivateKeyAttributes":
        raise NotImplementedError


_REGISTRY: Dict[KeyAlgorithm, Type[SpecificPrivateKeyAttributes]] = {}


def register_private_key_attributes(algorithm: KeyAlgorithm) -> Callable[[type], type]:
    def wrap(cls):
        cls.algorithm = algorithm
        _REGISTRY[algorithm] = cls
        return cls
    return wrap


def private_key_attributes_class(algorithm) -> Type[SpecificPrivateKeyAttributes]:
    try:
        return _REGISTRY[KeyAlgorithm(algorithm)]
    except (ValueError, KeyError):
        raise UnsupportedAlgorithmError(algorithm) from None


def decode_private_key_attributes(algorithm, node: TLVNode,
                                  context: Optional[ResolutionContext] = None) -> SpecificPrivateKeyAttributes:
    return private_key_attributes_class(algorithm).decode(node, context)
