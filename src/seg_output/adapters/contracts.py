from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class AdapterMeta:
    # Declarative description of a handler factory: the sink kind it builds and the handler type.
    name: str
    kind: str
    handler_type: type[Any] | None


def adapter(
    *,
    kind: str,
    name: str | None = None,
    handler_type: type[Any] | None = None,
) -> Callable[[T], T]:
    # Decorator attaches sink metadata to handler factories so registries can collect them.

    def _decorate(target: T) -> T:
        resolved_name = name
        if not isinstance(resolved_name, str) or not resolved_name:
            resolved_name = getattr(target, "__name__", "")
        meta = AdapterMeta(name=resolved_name, kind=kind, handler_type=handler_type)
        setattr(target, "__adapter_meta__", meta)
        return target

    return _decorate


def get_adapter_meta(target: object) -> AdapterMeta | None:
    # Read adapter metadata if present on a callable/class target.
    meta = getattr(target, "__adapter_meta__", None)
    if isinstance(meta, AdapterMeta):
        return meta
    return None
