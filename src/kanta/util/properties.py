from __future__ import annotations

from typing import Any


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def accessor_names(name: str) -> tuple[str, str]:
    return (f"get_{name}", f"get{name[:1].upper()}{name[1:]}")


def resolve(obj: Any, name: str) -> Any:
    """Look up ``name`` on ``obj``, preferring an accessor over the attribute.

    ``get_code()`` and then ``getCode()`` are tried for ``name="code"``; the
    first callable one is called with no arguments. Without an accessor the
    plain attribute is read. Returns MISSING when neither exists.
    """
    for accessor_name in accessor_names(name):
        accessor = getattr(obj, accessor_name, None)
        if callable(accessor):
            return accessor()
    return getattr(obj, name, MISSING)
