"""Module alias expansion and lookup-target resolution."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from specsense.suggestion.introspection import Introspection
    from specsense.suggestion.models import FileMetadata


def is_erlang_module(module: str) -> bool:
    return module.startswith(":")


def expand_alias(module: str, aliases: Mapping[str, str]) -> str:
    """Expand the leading alias segment of ``module``.

    ``Bar.Baz`` with ``{"Bar": "MyApp.Bar"}`` becomes ``MyApp.Bar.Baz``.
    Unknown aliases and Erlang modules are returned unchanged.
    """
    if is_erlang_module(module):
        return module

    head, dot, rest = module.partition(".")
    expanded = aliases.get(head)
    if expanded is None:
        return module
    return f"{expanded}{dot}{rest}"


def _enclosing_modules(current_module: str) -> Iterator[str]:
    """``A.B.C`` -> ``A.B.C``, ``A.B``, ``A``."""
    parts = current_module.split(".")
    for end in range(len(parts), 0, -1):
        yield ".".join(parts[:end])


def module_known(
    module: str, file_metadata: FileMetadata, introspection: Introspection
) -> bool:
    """Whether ``module`` is compiled or defined in the file being edited."""
    return module in file_metadata.modules or introspection.module_exists(module)


def actual_module(
    module: str | None,
    aliases: Mapping[str, str],
    current_module: str | None,
    file_metadata: FileMetadata,
    introspection: Introspection,
) -> tuple[str | None, bool]:
    """Resolve the module a hint should be looked up in.

    Returns ``(module, True)`` for a known module, ``(None, False)`` when no
    module was given, and ``(expanded, False)`` when the module is unknown.

    A relative reference such as ``Child`` written inside ``MyApp.Parent``
    also resolves to ``MyApp.Parent.Child`` (or ``MyApp.Child``) when that
    module is known and the literal name is not.
    """
    if module is None:
        return None, False

    expanded = expand_alias(module, aliases)
    if module_known(expanded, file_metadata, introspection):
        return expanded, True

    if current_module and not is_erlang_module(module) and expanded == module:
        for enclosing in _enclosing_modules(current_module):
            nested = f"{enclosing}.{module}"
            if module_known(nested, file_metadata, introspection):
                return nested, True

    return expanded, False
