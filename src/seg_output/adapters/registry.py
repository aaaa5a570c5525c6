from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from seg_output.adapters.contracts import AdapterMeta, get_adapter_meta

HandlerFactory = Callable[..., Any]


class AdapterRegistryError(ValueError):
    # Raised when handler factory lookup/registration fails.
    pass


class AdapterRegistry:
    # Registry of handler factories keyed by sink kind (stdout, file, string).
    def __init__(self) -> None:
        self._factories: dict[str, HandlerFactory] = {}
        self._meta: dict[str, AdapterMeta] = {}

    @classmethod
    def from_factories(cls, factories: Iterable[HandlerFactory]) -> AdapterRegistry:
        registry = cls()
        for factory in factories:
            registry.register_decorated(factory)
        return registry

    def register(self, kind: str, factory: HandlerFactory) -> None:
        if kind in self._factories:
            raise AdapterRegistryError(f"Duplicate handler registration: {kind}")
        self._factories[kind] = factory
        meta = get_adapter_meta(factory)
        if meta is not None:
            self._meta[kind] = meta

    def register_decorated(self, factory: HandlerFactory) -> None:
        # Kind comes from the @adapter declaration on the factory.
        meta = get_adapter_meta(factory)
        if meta is None:
            raise AdapterRegistryError(f"Factory {factory!r} is missing @adapter metadata")
        self.register(meta.kind, factory)

    def get(self, kind: str) -> HandlerFactory:
        if kind not in self._factories:
            raise AdapterRegistryError(f"Unknown output kind: {kind}")
        return self._factories[kind]

    def get_meta(self, kind: str) -> AdapterMeta | None:
        return self._meta.get(kind)

    def kinds(self) -> list[str]:
        return sorted(self._factories)
