"""Shared fixtures for suggestion tests.

The workspace models an editor open on ``lib/my_app/foo.ex``:

- ``MyApp.Foo`` is being edited and not compiled yet; it declares a public
  ``t/0``, a private ``priv/0``, an opaque ``handle/1`` and a redefined
  ``pair/2``
- ``MyApp.Bar`` is compiled with public ``t/0``, ``t/1``, ``entry/2`` and a
  private ``secret/0``
- ``MyApp.Foo.Child`` is compiled; it is reachable as ``Child`` from inside
  ``MyApp.Foo``
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from specsense.suggestion.introspection import ModuleRegistry
from specsense.suggestion.models import (
    Binding,
    Environment,
    FileMetadata,
    FileTypeInfo,
    IntrospectedTypeInfo,
    Scope,
    TypeKind,
)
from specsense.suggestion.type_specs import TypeSpecSuggester


@pytest.fixture
def foo_metadata() -> FileMetadata:
    """File metadata for the uncompiled MyApp.Foo."""
    return FileMetadata.from_types(
        "MyApp.Foo",
        FileTypeInfo(name="t", specs=("@type t :: integer()",)),
        FileTypeInfo(name="priv", kind=TypeKind.TYPEP, specs=("@typep priv :: atom()",)),
        FileTypeInfo(
            name="handle",
            args=("resource",),
            kind=TypeKind.OPAQUE,
            specs=("@opaque handle(resource) :: {reference(), resource}",),
        ),
        FileTypeInfo(
            name="pair",
            args=("a", "b"),
            specs=("@type pair(a, b) :: {a, b}", "@type pair(a, b) :: [a | b]"),
            doc="A pair",
        ),
    )


@pytest.fixture
def registry() -> ModuleRegistry:
    """Compiled modules."""
    return ModuleRegistry(
        {
            "MyApp.Bar": [
                IntrospectedTypeInfo(
                    name="t", arity=0, signature="t()", spec="@type t :: term()", doc="Bar"
                ),
                IntrospectedTypeInfo(
                    name="t", arity=1, signature="t(value)", spec="@type t(value) :: [value]"
                ),
                IntrospectedTypeInfo(
                    name="entry",
                    arity=2,
                    signature="entry(key, value)",
                    spec="@type entry(key, value) :: {key, value}",
                ),
                IntrospectedTypeInfo(
                    name="secret",
                    arity=0,
                    kind=TypeKind.TYPEP,
                    signature="secret()",
                    spec="@typep secret :: binary()",
                ),
            ],
            "MyApp.Foo.Child": [
                IntrospectedTypeInfo(name="state", arity=0, signature="state()"),
            ],
            ":queue": [
                IntrospectedTypeInfo(name="queue", arity=1, signature="queue(item)"),
            ],
        }
    )


@pytest.fixture
def suggester(registry: ModuleRegistry) -> TypeSpecSuggester:
    return TypeSpecSuggester(registry)


@pytest.fixture
def make_env() -> Callable[..., Environment]:
    """Environment factory defaulting to a typespec scope inside MyApp.Foo."""

    def _make(
        module: str | None = "MyApp.Foo",
        aliases: dict[str, str] | None = None,
        scope: Scope | None = None,
        variables: dict[str, Binding] | None = None,
        attributes: dict[str, Binding] | None = None,
    ) -> Environment:
        return Environment(
            module=module,
            aliases=aliases or {},
            scope=scope or Scope.typespec("new_type", 0),
            variables=variables or {},
            attributes=attributes or {},
        )

    return _make

