"""Suggestion module - typespec completion candidates.

Public API:
- TypeSpecSuggester: Reducer stage (add_types) and direct lookup (suggest)
- resolve_type_candidates: One-shot convenience function
- ModuleRegistry: In-memory Introspection implementation
- load_snapshot: Build Environment/FileMetadata/registry from YAML
"""

from specsense.suggestion.binding import BindingEnv, BindingInference, SnapshotBindingInference
from specsense.suggestion.builtin_types import BUILTIN_TYPES
from specsense.suggestion.introspection import Introspection, ModuleRegistry
from specsense.suggestion.matcher import fuzzy_match, get_matcher, prefix_match
from specsense.suggestion.models import (
    UNKNOWN,
    AtomValue,
    AttributeRef,
    Candidate,
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
from specsense.suggestion.snapshot import WorkspaceSnapshot, load_snapshot, parse_snapshot
from specsense.suggestion.type_specs import (
    Accumulator,
    SuggestionContext,
    TypeSpecSuggester,
    resolve_type_candidates,
)

__all__ = [
    # Stage
    "Accumulator",
    "SuggestionContext",
    "TypeSpecSuggester",
    "resolve_type_candidates",
    # Collaborators
    "BindingEnv",
    "BindingInference",
    "BUILTIN_TYPES",
    "Introspection",
    "ModuleRegistry",
    "SnapshotBindingInference",
    "fuzzy_match",
    "get_matcher",
    "prefix_match",
    # Models
    "UNKNOWN",
    "AtomValue",
    "AttributeRef",
    "Candidate",
    "Environment",
    "FileMetadata",
    "FileTypeInfo",
    "IntrospectedTypeInfo",
    "OtherValue",
    "Scope",
    "ScopeKind",
    "TypeKind",
    "VariableRef",
    # Snapshots
    "WorkspaceSnapshot",
    "load_snapshot",
    "parse_snapshot",
]
