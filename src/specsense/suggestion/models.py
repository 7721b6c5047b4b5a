"""Data model for typespec suggestions.

Everything here is an immutable per-request snapshot:

- Environment: lexical context at the cursor (module, aliases, scope, bindings)
- FileMetadata: declarations found in the file being edited
- FileTypeInfo / IntrospectedTypeInfo: the two upstream type descriptor shapes
- Binding values: raw bindings as recorded by the scope tracker, and the
  expanded values returned by binding inference
- Candidate: the normalized suggestion handed back to the reducer chain

Module names are plain strings in their displayed form: Elixir aliases
(``MyApp.Foo``) or Erlang atoms with a leading colon (``:lists``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Literal, TypeAlias

# ============================================================================
# ENUMS
# ============================================================================


class ScopeKind(str, Enum):
    """Kind of lexical scope the cursor is in."""

    TYPESPEC = "typespec"  # inside @type/@typep/@opaque/@spec/@callback
    MODULE_BODY = "module_body"
    FUNCTION = "function"
    OTHER = "other"


class TypeKind(str, Enum):
    """Visibility kind of a type definition."""

    TYPE = "type"  # public
    TYPEP = "typep"  # private to the defining module
    OPAQUE = "opaque"  # public name, hidden structure


class QualifierKind(str, Enum):
    """What the text before the last dot of a hint refers to."""

    NONE = "none"
    ATTRIBUTE = "attribute"
    VARIABLE = "variable"
    MODULE = "module"


# ============================================================================
# BINDINGS
# ============================================================================


@dataclass(frozen=True, slots=True)
class AtomValue:
    """An atom; as a qualifier it names a module."""

    value: str


@dataclass(frozen=True, slots=True)
class OtherValue:
    """A non-atom value (map, list, tuple, call result...)."""

    shape: str


@dataclass(frozen=True, slots=True)
class VariableRef:
    """Binding that points at another variable."""

    name: str


@dataclass(frozen=True, slots=True)
class AttributeRef:
    """Binding that points at a module attribute."""

    name: str


@dataclass(frozen=True, slots=True)
class UnknownValue:
    """Inference could not determine a value."""


UNKNOWN = UnknownValue()

Binding: TypeAlias = AtomValue | OtherValue | VariableRef | AttributeRef | UnknownValue
InferredValue: TypeAlias = AtomValue | OtherValue | UnknownValue


def _frozen(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


# ============================================================================
# ENVIRONMENT
# ============================================================================


@dataclass(frozen=True, slots=True)
class Scope:
    """Scope tag. Typespec scopes carry the name/arity being defined."""

    kind: ScopeKind = ScopeKind.OTHER
    name: str | None = None
    arity: int | None = None

    @classmethod
    def typespec(cls, name: str, arity: int) -> Scope:
        return cls(kind=ScopeKind.TYPESPEC, name=name, arity=arity)

    @property
    def is_typespec(self) -> bool:
        return self.kind is ScopeKind.TYPESPEC


@dataclass(frozen=True, slots=True)
class Environment:
    """Lexical context at the cursor, as produced by the scope tracker.

    ``aliases`` maps the short alias (``Bar``) to the fully-qualified module
    (``MyApp.Bar``). ``variables`` and ``attributes`` hold raw bindings that
    binding inference expands.
    """

    module: str | None = None
    aliases: Mapping[str, str] = field(default_factory=dict)
    scope: Scope = field(default_factory=Scope)
    variables: Mapping[str, Binding] = field(default_factory=dict)
    attributes: Mapping[str, Binding] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "aliases", _frozen(self.aliases))
        object.__setattr__(self, "variables", _frozen(self.variables))
        object.__setattr__(self, "attributes", _frozen(self.attributes))


# ============================================================================
# TYPE DESCRIPTORS
# ============================================================================


@dataclass(frozen=True, slots=True)
class FileTypeInfo:
    """Type declared in the file being edited (not necessarily compiled).

    ``specs`` holds every declaration clause in source order; a later
    redefinition shadows earlier ones.
    """

    name: str
    args: tuple[str, ...] = ()
    kind: TypeKind = TypeKind.TYPE
    specs: tuple[str, ...] = ()
    doc: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _frozen(self.metadata))

    @property
    def arity(self) -> int:
        return len(self.args)


@dataclass(frozen=True, slots=True)
class IntrospectedTypeInfo:
    """Type read from a compiled module or from the builtin catalog."""

    name: str
    arity: int
    kind: TypeKind = TypeKind.TYPE
    signature: str | None = None
    spec: str = ""
    doc: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _frozen(self.metadata))


TypeDescriptor: TypeAlias = FileTypeInfo | IntrospectedTypeInfo

TypeKey: TypeAlias = tuple[str, str, int]  # (module, type name, arity)


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """Index of declarations in the file being edited.

    ``modules`` lists the modules the file defines; ``types`` maps
    (module, name, arity) to the parsed declaration.
    """

    modules: frozenset[str] = frozenset()
    types: Mapping[TypeKey, FileTypeInfo] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "modules", frozenset(self.modules))
        object.__setattr__(self, "types", _frozen(self.types))  # type: ignore[arg-type]

    @classmethod
    def from_types(cls, module: str, *types: FileTypeInfo) -> FileMetadata:
        """Metadata for a file defining a single module."""
        return cls(
            modules=frozenset({module}),
            types={(module, t.name, t.arity): t for t in types},
        )


# ============================================================================
# HINTS & CANDIDATES
# ============================================================================


@dataclass(frozen=True, slots=True)
class SplitHint:
    """Hint split into a classified qualifier and the bare name."""

    kind: QualifierKind
    payload: str | None
    hint: str


@dataclass(frozen=True, slots=True)
class ResolvedHint:
    """Hint after qualifier resolution and alias expansion.

    ``qualified`` records that the user wrote a qualifier. A qualified hint
    with ``module=None`` could not be resolved and yields nothing.
    """

    module: str | None
    hint: str
    qualified: bool

    @property
    def unresolved(self) -> bool:
        return self.qualified and self.module is None


@dataclass(frozen=True, slots=True)
class Candidate:
    """A typespec suggestion."""

    name: str
    arity: int
    origin: str | None
    args_list: tuple[str, ...]
    spec: str
    doc: str
    signature: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    type: Literal["type_spec"] = "type_spec"

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _frozen(self.metadata))

    @property
    def key(self) -> tuple[str, int]:
        """Uniqueness and sort key."""
        return (self.name, self.arity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "arity": self.arity,
            "origin": self.origin,
            "args_list": list(self.args_list),
            "spec": self.spec,
            "doc": self.doc,
            "signature": self.signature,
            "metadata": dict(self.metadata),
        }
