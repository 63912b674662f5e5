"""
pkcs15_core.reference
---------------------
Reference fields: record members that are either stored inline or point at
an object kept elsewhere on the token.

Decoding a reference field goes through two states:

- Unresolved(key): the wire carried an indirect key (a Path, a numeric
  KeyInfo reference) that still has to be looked up
- Resolved(value, via): a concrete value; ``via`` is the indirect key it was
  reached through, None when it was inline

Resolution is eager: ``decode`` only ever returns Resolved, or raises
UnresolvedReferenceError when the context has no directory for the field's
(key type, value type) pair or the directory does not know the key.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pyasn1.codec.der import encoder

from . import schema, tlv
from .basic import Path
from .context import ResolutionContext
from .errors import UnresolvedReferenceError
from .logger import get_logger

log = get_logger("pkcs15.reference")

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class Unresolved(Generic[K]):
    key: K


@dataclass(frozen=True)
class Resolved(Generic[V]):
    value: V
    via: Any = None

    @property
    def is_indirect(self) -> bool:
        return self.via is not None


State = Union[Unresolved, Resolved]


class ReferenceField(Generic[K, V]):
    key_type: type

    def __init__(self, name: str, value_type: type):
        self.name = name
        self.value_type = value_type

    # --------- wire ----------
    def classify(self, raw: bytes, record: str = None) -> State:
        raise NotImplementedError

    def encode_key(self, key: K) -> bytes:
        raise NotImplementedError

    def encode_value(self, value: V) -> bytes:
        raise NotImplementedError

    def encode(self, resolved: Resolved) -> bytes:
        if resolved.via is not None:
            return self.encode_key(resolved.via)
        return self.encode_value(resolved.value)

    # --------- resolution ----------
    def resolve(self, state: State, context: ResolutionContext) -> Resolved:
        if isinstance(state, Resolved):
            return state

        directory = context.get_directory(self.key_type, self.value_type)
        if directory is None:
            log.warning(f"no {self.key_type.__name__} -> {self.value_type.__name__} directory for {self.name} {state.key}",
                        extra={"field": self.name, "key": state.key})
            raise UnresolvedReferenceError(
                self.name, state.key,
                f"no {self.key_type.__name__} -> {self.value_type.__name__} directory in context")

        value = directory.lookup(state.key)
        if value is None:
            log.warning(f"{self.name} reference {state.key} not found in {directory!r}",
                        extra={"field": self.name, "key": state.key, "directory": repr(directory)})
            raise UnresolvedReferenceError(self.name, state.key)

        log.debug(f"resolved {self.name} reference {state.key}", extra={"field": self.name, "key": state.key})
        return Resolved(value, via=state.key)

    def decode(self, raw: bytes, context: ResolutionContext, record: str = None) -> Resolved:
        return self.resolve(self.classify(raw, record), context)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.value_type.__name__})"


class ObjectValueField(ReferenceField[Path, V]):
    """ObjectValue {Type}: an inline ``direct [0]`` value or an ``indirect`` Path."""

    key_type = Path

    def __init__(self, name: str, value_type: type):
        super().__init__(name, value_type)
        self.direct_spec = schema.direct(value_type.asn1_spec)
        self.spec = schema.object_value(value_type.asn1_spec)

    def classify(self, raw: bytes, record: str = None) -> State:
        choice = tlv.decode_as(raw, self.spec, self.name, record)
        component = choice.getComponent()
        if choice.getName() == "indirect":
            return Unresolved(Path.from_asn1(component))
        return Resolved(self.value_type.from_asn1(component))

    def encode_key(self, key: Path) -> bytes:
        return key.to_der()

    def encode_value(self, value) -> bytes:
        return encoder.encode(value.to_asn1(self.direct_spec))


class KeyInfoField(ReferenceField[int, V]):
    """KeyInfo: an inline ``paramsAndOps`` SEQUENCE or a numeric ``reference``."""

    key_type = int

    def __init__(self, name: str, value_type: type):
        super().__init__(name, value_type)
        self.spec = schema.key_info(value_type.parameters_spec)

    def classify(self, raw: bytes, record: str = None) -> State:
        choice = tlv.decode_as(raw, self.spec, self.name, record)
        component = choice.getComponent()
        if choice.getName() == "reference":
            return Unresolved(int(component))
        return Resolved(self.value_type.from_asn1(component))

    def encode_key(self, key: int) -> bytes:
        return tlv.encode_integer(key)

    def encode_value(self, value) -> bytes:
        return encoder.encode(value.to_asn1())
