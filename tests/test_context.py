import sys
import threading

import pytest

from pkcs15_core.basic import Path, NullKeyInfo
from pkcs15_core.keys import RSAPrivateKeyObject
from pkcs15_core.directory import MemoryDirectory
from pkcs15_core.context import ResolutionContext, use_context, current_context, resolve_context


def test_directories_keyed_by_type_pair(context):
    assert len(context) == 2
    assert (Path, RSAPrivateKeyObject) in context
    assert context.get_directory(int, NullKeyInfo) is not None
    assert context.get_directory(Path, NullKeyInfo) is None


def test_add_with_explicit_pair():
    d = MemoryDirectory(str, str, {"a": "b"})
    ctx = ResolutionContext().add(d, key_type=bytes, value_type=str)
    assert ctx.get_directory(bytes, str) is d
    assert ctx.get_directory(str, str) is None


def test_ambient_context_is_scoped(context):
    assert current_context() is None
    with use_context(context) as ctx:
        assert ctx is context
        assert current_context() is context
        assert resolve_context() is context
    assert current_context() is None


def test_explicit_context_wins_over_ambient(context):
    explicit = ResolutionContext()
    with use_context(context):
        assert resolve_context(explicit) is explicit


def test_no_context_resolves_to_empty():
    ctx = resolve_context()
    assert isinstance(ctx, ResolutionContext)
    assert len(ctx) == 0


def test_ambient_context_cleared_after_error(context):
    with pytest.raises(RuntimeError):
        with use_context(context):
            raise RuntimeError("decode failed")
    assert current_context() is None


@pytest.mark.skipif(getattr(sys.flags, "thread_inherit_context", 0),
                    reason="interpreter copies the caller's context into new threads")
def test_ambient_context_not_visible_in_other_threads(context):
    seen = []

    with use_context(context):
        t = threading.Thread(target=lambda: seen.append(current_context()))
        t.start()
        t.join()
        assert current_context() is context

    assert seen == [None]
