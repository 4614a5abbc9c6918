"""Human-readable rendering of a value together with its runtime type."""

from __future__ import annotations

from typing import Any

_HOMOGENEOUS = (list, set, frozenset)

# Containers nested deeper than this render with their bare class name.
_MAX_DEPTH = 32


def _union(names: set[str]) -> str:
    return " | ".join(sorted(names))


def type_name(value: Any, _seen: frozenset[int] = frozenset()) -> str:
    """Return the runtime type name of ``value``.

    Builtin containers spell out their element types the way an annotation
    would, e.g. ``list[int]`` or ``dict[str, int | None]``. Empty containers
    and self-referencing ones fall back to the bare class name, as do
    containers nested past a fixed depth.
    """
    cls = type(value)
    base = cls.__qualname__

    if id(value) in _seen or not isinstance(value, (*_HOMOGENEOUS, tuple, dict)):
        return base
    if not value or len(_seen) >= _MAX_DEPTH:
        return base

    seen = _seen | {id(value)}
    if isinstance(value, dict):
        keys = {type_name(k, seen) for k in value}
        values = {type_name(v, seen) for v in value.values()}
        return f"{base}[{_union(keys)}, {_union(values)}]"
    if isinstance(value, tuple):
        return f"{base}[{', '.join(type_name(item, seen) for item in value)}]"
    return f"{base}[{_union({type_name(item, seen) for item in value})}]"


def describe(value: Any) -> str:
    """Render ``value`` as ``"<TypeName>: <repr>"``.

    Never raises: a failing ``__repr__`` (or one that recurses too deep) is
    rendered as ``<repr failed: ...>``.
    """
    try:
        name = type_name(value)
    except Exception:
        name = type(value).__qualname__
    try:
        text = repr(value)
    except Exception as exc:
        text = f"<repr failed: {exc!r}>"
    return f"{name}: {text}"
