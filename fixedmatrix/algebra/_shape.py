"""
Fixed-dimension type factory.

Matrix[T, R, C] and Vector[T, N] produce concrete subclasses whose element
type and dimensions are class attributes. Types are created once per
parameter set and cached, so Matrix[float, 2, 2] is Matrix[float, 2, 2].
"""

from __future__ import annotations

import threading
from typing import Any

_TYPE_CACHE: dict[tuple[type, tuple[Any, ...]], type] = {}
_TYPE_CACHE_LOCK = threading.Lock()


def bind_type(
    family: type,
    key: tuple[Any, ...],
    name: str,
    attrs: dict[str, Any],
    bases: tuple[type, ...] | None = None,
) -> type:
    """
    Return the cached subclass of `family` for `key`, creating it if needed.

    Args:
        family: Unbound root class (Matrix or Vector); part of the cache key
        key: Binding parameters, e.g. (float, 2, 3)
        name: Class name shown in repr and error messages
        attrs: Class attributes of the bound type
        bases: Bases of the bound type; defaults to (family,)
    """
    cache_key = (family, key)
    with _TYPE_CACHE_LOCK:
        bound = _TYPE_CACHE.get(cache_key)
        if bound is None:
            namespace = dict(attrs)
            namespace['__module__'] = family.__module__
            namespace['__qualname__'] = name
            bound = type(name, bases or (family,), namespace)
            _TYPE_CACHE[cache_key] = bound
    return bound
