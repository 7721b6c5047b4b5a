"""Workspace snapshots: Environment, FileMetadata and compiled modules from YAML.

A snapshot freezes what the scope tracker and the compiler would report at a
cursor position, so completions can be reproduced outside an editor::

    environment:
      module: MyApp.Foo
      aliases: {Bar: MyApp.Bar}
      scope: {kind: typespec, name: t, arity: 0}
      variables:
        repo: {atom: MyApp.Bar}
      attributes:
        target: {variable: repo}
        opts: {other: map}
    file_metadata:
      modules: [MyApp.Foo]
      types:
        - {module: MyApp.Foo, name: t, specs: ["@type t :: integer()"]}
        - {module: MyApp.Foo, name: priv, kind: typep, specs: ["@typep priv :: atom()"]}
    compiled:
      MyApp.Bar:
        - {name: t, arity: 0, signature: "t()", spec: "@type t :: term()"}
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from specsense.core.errors import SnapshotError
from specsense.suggestion.introspection import ModuleRegistry
from specsense.suggestion.models import (
    UNKNOWN,
    AtomValue,
    AttributeRef,
    Binding,
    Environment,
    FileMetadata,
    FileTypeInfo,
    IntrospectedTypeInfo,
    OtherValue,
    Scope,
    ScopeKind,
    TypeKind,
    VariableRef,
)


class BindingModel(BaseModel):
    """Exactly one of the fields set; none set means unknown."""

    atom: str | None = None
    variable: str | None = None
    attribute: str | None = None
    other: str | None = None

    @model_validator(mode="after")
    def check_single_value(self) -> BindingModel:
        given = [k for k, v in self.model_dump().items() if v is not None]
        if len(given) > 1:
            raise ValueError(f"binding must have a single key, got {given}")
        return self

    def to_binding(self) -> Binding:
        if self.atom is not None:
            return AtomValue(self.atom)
        if self.variable is not None:
            return VariableRef(self.variable)
        if self.attribute is not None:
            return AttributeRef(self.attribute)
        if self.other is not None:
            return OtherValue(self.other)
        return UNKNOWN


class ScopeModel(BaseModel):
    kind: ScopeKind = ScopeKind.OTHER
    name: str | None = None
    arity: int | None = Field(default=None, ge=0)


class EnvironmentModel(BaseModel):
    module: str | None = None
    aliases: dict[str, str] = Field(default_factory=dict)
    scope: ScopeModel = Field(default_factory=ScopeModel)
    variables: dict[str, BindingModel] = Field(default_factory=dict)
    attributes: dict[str, BindingModel] = Field(default_factory=dict)

    def to_environment(self) -> Environment:
        return Environment(
            module=self.module,
            aliases=self.aliases,
            scope=Scope(kind=self.scope.kind, name=self.scope.name, arity=self.scope.arity),
            variables={k: v.to_binding() for k, v in self.variables.items()},
            attributes={k: v.to_binding() for k, v in self.attributes.items()},
        )


class FileTypeModel(BaseModel):
    module: str
    name: str
    args: list[str] = Field(default_factory=list)
    kind: TypeKind = TypeKind.TYPE
    specs: list[str] = Field(default_factory=list)
    doc: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_info(self) -> FileTypeInfo:
        return FileTypeInfo(
            name=self.name,
            args=tuple(self.args),
            kind=self.kind,
            specs=tuple(self.specs),
            doc=self.doc,
            metadata=self.metadata,
        )


class FileMetadataModel(BaseModel):
    modules: list[str] = Field(default_factory=list)
    types: list[FileTypeModel] = Field(default_factory=list)

    def to_metadata(self) -> FileMetadata:
        types = {}
        for entry in self.types:
            info = entry.to_info()
            types[(entry.module, info.name, info.arity)] = info
        # a module declaring types is defined in the file
        modules = set(self.modules) | {entry.module for entry in self.types}
        return FileMetadata(modules=frozenset(modules), types=types)


class CompiledTypeModel(BaseModel):
    name: str
    arity: int = Field(ge=0)
    kind: TypeKind = TypeKind.TYPE
    signature: str | None = None
    spec: str = ""
    doc: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_info(self) -> IntrospectedTypeInfo:
        return IntrospectedTypeInfo(**self.model_dump())


class SnapshotModel(BaseModel):
    environment: EnvironmentModel = Field(default_factory=EnvironmentModel)
    file_metadata: FileMetadataModel = Field(default_factory=FileMetadataModel)
    compiled: dict[str, list[CompiledTypeModel]] = Field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class WorkspaceSnapshot:
    """Loaded snapshot, ready to feed a TypeSpecSuggester."""

    environment: Environment
    file_metadata: FileMetadata
    registry: ModuleRegistry


def parse_snapshot(data: dict[str, Any], source: str = "<memory>") -> WorkspaceSnapshot:
    """Validate a decoded snapshot document.

    Raises:
        SnapshotError: When the document does not match the snapshot schema.
    """
    try:
        model = SnapshotModel.model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        location = ".".join(str(loc) for loc in err["loc"])
        raise SnapshotError.invalid(source, location, err["msg"]) from e

    return WorkspaceSnapshot(
        environment=model.environment.to_environment(),
        file_metadata=model.file_metadata.to_metadata(),
        registry=ModuleRegistry(
            {name: [t.to_info() for t in types] for name, types in model.compiled.items()}
        ),
    )


def load_snapshot(path: Path) -> WorkspaceSnapshot:
    """Read and validate a YAML snapshot file.

    Raises:
        SnapshotError: Missing file, bad YAML, or schema mismatch.
    """
    if not path.exists():
        raise SnapshotError.file_not_found(str(path))
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SnapshotError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise SnapshotError.parse_error(str(path), "top-level value must be a mapping")
    return parse_snapshot(data, source=str(path))
