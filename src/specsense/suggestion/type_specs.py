"""Typespec suggestions (reducer stage).

Produces completion candidates for type references written inside a
typespec. Three sources are merged:

- FileMetadata: types declared in the file being edited, compiled or not
- Introspection: public types of compiled modules
- Builtin catalog: basic and built-in types, for unqualified hints only

Resolution Algorithm:
1. Split the hint into qualifier and bare name
2. Resolve variable/attribute qualifiers through binding inference
   (non-atom or unknown values -> no candidates at all)
3. Expand aliases and find the actual lookup module
4. Unqualified hint -> current module (private types visible) + builtins
   Known module    -> that module's public types
   Unknown module  -> nothing
5. Deduplicate by (name, arity), file metadata first; sort by (name, arity)

Usage::

    suggester = TypeSpecSuggester(ModuleRegistry(compiled))
    candidates = suggester.suggest("Bar.t", env, file_metadata)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Literal

import structlog

from specsense.suggestion.binding import (
    BindingEnv,
    BindingInference,
    SnapshotBindingInference,
    resolve_qualifier,
)
from specsense.suggestion.hints import split_hint
from specsense.suggestion.introspection import Introspection
from specsense.suggestion.matcher import Matcher, fuzzy_match
from specsense.suggestion.models import (
    Candidate,
    Environment,
    FileMetadata,
    FileTypeInfo,
    ResolvedHint,
    TypeDescriptor,
    TypeKind,
)
from specsense.suggestion.modules import actual_module
from specsense.suggestion.shaping import to_candidate

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class SuggestionContext:
    """Cursor context shared by the reducer chain.

    ``at_module_body`` is None when the request carries no module-body
    information; type suggestions are skipped for such requests.
    """

    at_module_body: bool | None = None


@dataclass(frozen=True, slots=True)
class Accumulator:
    """Suggestions collected so far by the reducer chain."""

    result: tuple[Candidate, ...] = ()
    context: SuggestionContext = field(default_factory=SuggestionContext)


ReducerStep = tuple[Literal["cont", "halt"], Accumulator]


def _sort_key(candidate: Candidate) -> tuple[str, int]:
    return candidate.key


def unique_sorted(candidates: Iterable[Candidate]) -> list[Candidate]:
    """Keep the first candidate per (name, arity), then sort by it."""
    unique: dict[tuple[str, int], Candidate] = {}
    for candidate in candidates:
        unique.setdefault(candidate.key, candidate)
    return sorted(unique.values(), key=_sort_key)


class TypeSpecSuggester:
    """Suggests types visible from a typespec.

    Collaborators are read-only, so one instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        introspection: Introspection,
        inference: BindingInference | None = None,
        matcher: Matcher = fuzzy_match,
    ) -> None:
        self._introspection = introspection
        self._inference = inference or SnapshotBindingInference()
        self._matcher = matcher

    # ------------------------------------------------------------------
    # Reducer entry points
    # ------------------------------------------------------------------

    def add_types(
        self,
        hint: str,
        env: Environment,
        file_metadata: FileMetadata,
        context: SuggestionContext,
        acc: Accumulator,
    ) -> ReducerStep:
        """Append type suggestions to ``acc`` when inside a typespec."""
        scope_guard = context.at_module_body is not None
        if not (scope_guard and env.scope.is_typespec):
            return "cont", acc

        candidates = self.suggest(hint, env, file_metadata)
        return "cont", replace(acc, result=(*acc.result, *candidates))

    def suggest(
        self,
        hint: str,
        env: Environment,
        file_metadata: FileMetadata,
        scope_guard: bool = True,
    ) -> list[Candidate]:
        """Every visible type matching ``hint``, sorted by (name, arity)."""
        if not (scope_guard and env.scope.is_typespec):
            return []

        split = split_hint(hint, env.module)
        resolved = resolve_qualifier(split, BindingEnv.from_env(env), self._inference)
        if resolved.unresolved:
            return []

        target, candidates = self._module_types(resolved, env, file_metadata)
        if not resolved.qualified:
            # module types shadow a builtin of the same name and arity
            candidates = unique_sorted([*candidates, *self._builtin_types(resolved.hint)])

        log.debug(
            "type_specs.resolved",
            hint=hint,
            qualifier=resolved.module,
            module=target,
            qualified=resolved.qualified,
            count=len(candidates),
        )
        return candidates

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _module_types(
        self, resolved: ResolvedHint, env: Environment, file_metadata: FileMetadata
    ) -> tuple[str | None, list[Candidate]]:
        """Lookup target and its matching types; target is None when there is none."""
        target, exists = actual_module(
            resolved.module, env.aliases, env.module, file_metadata, self._introspection
        )
        if not exists:
            if target is not None:
                log.debug("type_specs.module_unknown", module=target)
                return target, []
            # unqualified: look in the module being edited
            target = env.module
        if target is None:
            return None, []

        include_private = not resolved.qualified and target == env.module
        return target, self._merge_sources(target, resolved.hint, file_metadata, include_private)

    def _merge_sources(
        self,
        module: str,
        hint: str,
        file_metadata: FileMetadata,
        include_private: bool,
    ) -> list[Candidate]:
        descriptors: list[TypeDescriptor] = []
        descriptors += self._metadata_types(module, hint, file_metadata, include_private)
        descriptors += self._introspection.list_types(
            module, lambda name: self._matcher(name, hint)
        )
        return unique_sorted(to_candidate(info, module) for info in descriptors)

    def _metadata_types(
        self,
        module: str,
        hint: str,
        file_metadata: FileMetadata,
        include_private: bool,
    ) -> list[FileTypeInfo]:
        # local types are hoisted, so declaration position is irrelevant
        return [
            info
            for (type_module, name, _arity), info in file_metadata.types.items()
            if type_module == module
            and self._matcher(name, hint)
            and (include_private or info.kind is not TypeKind.TYPEP)
        ]

    def _builtin_types(self, hint: str) -> list[Candidate]:
        builtins = self._introspection.list_builtin_types(
            lambda name: self._matcher(name, hint)
        )
        return sorted((to_candidate(info, None) for info in builtins), key=_sort_key)


def resolve_type_candidates(
    hint: str,
    environment: Environment,
    file_metadata: FileMetadata,
    scope_guard: bool = True,
    *,
    introspection: Introspection,
    inference: BindingInference | None = None,
    matcher: Matcher = fuzzy_match,
) -> list[Candidate]:
    """Convenience function for a single request.

    Args:
        hint: Text typed so far, e.g. ``"Str"`` or ``"MyApp.Bar.t"``
        environment: Lexical context at the cursor
        file_metadata: Declarations of the file being edited
        scope_guard: False short-circuits to an empty result
        introspection: Compiled-module view
        inference: Binding inference (defaults to SnapshotBindingInference)
        matcher: Name predicate (defaults to fuzzy_match)

    Returns:
        Candidates sorted by (name, arity)
    """
    suggester = TypeSpecSuggester(introspection, inference, matcher)
    return suggester.suggest(hint, environment, file_metadata, scope_guard)

