"""Binding inference and qualifier resolution.

A hint such as ``@repo.t`` or ``mod.t`` names its module indirectly. The
qualifier is expanded through the bindings visible at the cursor; only an
atom result can name a module. Everything else fails closed: the hint is
marked unresolved and produces no candidates at all.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

import structlog

from specsense.suggestion.models import (
    UNKNOWN,
    AtomValue,
    AttributeRef,
    Binding,
    Environment,
    InferredValue,
    OtherValue,
    QualifierKind,
    ResolvedHint,
    SplitHint,
    VariableRef,
)

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class BindingEnv:
    """Bindings visible to inference at the cursor."""

    current_module: str | None = None
    variables: Mapping[str, Binding] = field(default_factory=dict)
    attributes: Mapping[str, Binding] = field(default_factory=dict)

    @classmethod
    def from_env(cls, env: Environment) -> BindingEnv:
        return cls(
            current_module=env.module,
            variables=env.variables,
            attributes=env.attributes,
        )


class BindingInference(Protocol):
    """Expands a binding to a concrete value, or UNKNOWN."""

    def expand(self, env: BindingEnv, binding: Binding) -> InferredValue: ...


class SnapshotBindingInference:
    """Follows variable/attribute reference chains through a BindingEnv.

    Inference is best-effort: a missing binding or a reference cycle yields
    UNKNOWN instead of an error.
    """

    def __init__(self, max_depth: int = 32) -> None:
        self._max_depth = max_depth

    def expand(self, env: BindingEnv, binding: Binding) -> InferredValue:
        seen: set[Binding] = set()
        current = binding
        while len(seen) < self._max_depth:
            match current:
                case AtomValue() | OtherValue():
                    return current
                case VariableRef(name=name):
                    nxt = env.variables.get(name, UNKNOWN)
                case AttributeRef(name=name):
                    nxt = env.attributes.get(name, UNKNOWN)
                case _:
                    return UNKNOWN
            if current in seen:
                return UNKNOWN
            seen.add(current)
            current = nxt
        return UNKNOWN


def resolve_qualifier(
    split: SplitHint,
    env: BindingEnv,
    inference: BindingInference,
) -> ResolvedHint:
    """Turn a split hint into a module path, still subject to alias expansion.

    Literal module qualifiers pass through untouched. Variable and attribute
    qualifiers are inferred; an atom result becomes the module path.
    """
    match split.kind:
        case QualifierKind.NONE:
            return ResolvedHint(module=None, hint=split.hint, qualified=False)
        case QualifierKind.MODULE:
            return ResolvedHint(module=split.payload, hint=split.hint, qualified=True)
        case QualifierKind.VARIABLE:
            reference: Binding = VariableRef(split.payload or "")
        case QualifierKind.ATTRIBUTE:
            reference = AttributeRef(split.payload or "")

    value = inference.expand(env, reference)
    if isinstance(value, AtomValue):
        return ResolvedHint(module=value.value, hint=split.hint, qualified=True)

    log.debug(
        "type_specs.qualifier_unresolved",
        qualifier=split.payload,
        kind=split.kind.value,
        inferred=type(value).__name__,
    )
    return ResolvedHint(module=None, hint="", qualified=True)
