"""Introspection of compiled modules.

The completion stage only needs three questions answered about compiled
code, captured by the ``Introspection`` protocol. ``ModuleRegistry`` is an
in-memory implementation backed by a mapping of module name to its compiled
types; language servers plug in their own.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Protocol

from specsense.suggestion.builtin_types import BUILTIN_TYPES
from specsense.suggestion.matcher import NamePredicate
from specsense.suggestion.models import IntrospectedTypeInfo, TypeKind


class Introspection(Protocol):
    """Read-only view of compiled modules."""

    def module_exists(self, module: str) -> bool: ...

    def list_types(self, module: str, predicate: NamePredicate) -> Sequence[IntrospectedTypeInfo]:
        """Public types of ``module`` whose name satisfies ``predicate``."""
        ...

    def list_builtin_types(self, predicate: NamePredicate) -> Sequence[IntrospectedTypeInfo]:
        """Builtin/basic types whose name satisfies ``predicate``."""
        ...


class ModuleRegistry:
    """In-memory compiled-module registry.

    Private types may be registered (a compiled module's debug info does
    carry them) but are never listed.

    Usage::

        registry = ModuleRegistry({"MyApp.Bar": [IntrospectedTypeInfo("t", 0)]})
        registry.list_types("MyApp.Bar", lambda name: name.startswith("t"))
    """

    def __init__(
        self,
        modules: Mapping[str, Iterable[IntrospectedTypeInfo]] | None = None,
        builtins: Iterable[IntrospectedTypeInfo] = BUILTIN_TYPES,
    ) -> None:
        self._modules: Mapping[str, tuple[IntrospectedTypeInfo, ...]] = MappingProxyType(
            {name: tuple(types) for name, types in (modules or {}).items()}
        )
        self._builtins = tuple(builtins)

    @property
    def modules(self) -> frozenset[str]:
        return frozenset(self._modules)

    def module_exists(self, module: str) -> bool:
        return module in self._modules

    def list_types(self, module: str, predicate: NamePredicate) -> list[IntrospectedTypeInfo]:
        return [
            info
            for info in self._modules.get(module, ())
            if info.kind is not TypeKind.TYPEP and predicate(info.name)
        ]

    def list_builtin_types(self, predicate: NamePredicate) -> list[IntrospectedTypeInfo]:
        return [info for info in self._builtins if predicate(info.name)]
