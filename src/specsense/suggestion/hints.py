"""Hint splitting and qualifier classification.

Examples (current module ``MyApp.Foo``)::

    "t"                 -> NONE,      None,            "t"
    "MyApp.Bar.t"       -> MODULE,    "MyApp.Bar",     "t"
    "Bar."              -> MODULE,    "Bar",           ""
    ":lists.f"          -> MODULE,    ":lists",        "f"
    "__MODULE__.Sub.t"  -> MODULE,    "MyApp.Foo.Sub", "t"
    "@target.t"         -> ATTRIBUTE, "target",        "t"
    "mod.t"             -> VARIABLE,  "mod",           "t"
    "1x.t"              -> NONE,      None,            "t"
"""

from __future__ import annotations

import re

from specsense.suggestion.models import QualifierKind, SplitHint

_IDENTIFIER = r"[a-z_][a-zA-Z0-9_]*[?!]?"
_ALIAS_SEGMENT = r"[A-Z][a-zA-Z0-9_]*"

_VARIABLE_RE = re.compile(rf"^{_IDENTIFIER}$")
_ATTRIBUTE_RE = re.compile(rf"^@({_IDENTIFIER})$")
_ALIAS_PATH_RE = re.compile(rf"^{_ALIAS_SEGMENT}(\.{_ALIAS_SEGMENT})*$")
_ERLANG_MODULE_RE = re.compile(r"^:[a-z_][a-zA-Z0-9_@]*$")
_CURRENT_MODULE_RE = re.compile(rf"^__MODULE__((\.{_ALIAS_SEGMENT})*)$")


def split_hint(hint: str, current_module: str | None = None) -> SplitHint:
    """Split a raw hint at its last dot and classify the qualifier.

    Never raises: a qualifier that cannot be classified becomes NONE and
    the bare name is kept.
    """
    qualifier, dot, name = hint.rpartition(".")
    if not dot:
        return SplitHint(QualifierKind.NONE, None, hint)

    kind, payload = classify_qualifier(qualifier, current_module)
    return SplitHint(kind, payload, name)


def classify_qualifier(
    qualifier: str, current_module: str | None = None
) -> tuple[QualifierKind, str | None]:
    """Classify the qualifier text preceding the bare type name."""
    if match := _CURRENT_MODULE_RE.match(qualifier):
        # __MODULE__ is nil outside of a module
        if current_module is None:
            return QualifierKind.NONE, None
        return QualifierKind.MODULE, current_module + match.group(1)

    if match := _ATTRIBUTE_RE.match(qualifier):
        return QualifierKind.ATTRIBUTE, match.group(1)

    if _VARIABLE_RE.match(qualifier):
        return QualifierKind.VARIABLE, qualifier

    if _ERLANG_MODULE_RE.match(qualifier) or _ALIAS_PATH_RE.match(qualifier):
        return QualifierKind.MODULE, qualifier

    return QualifierKind.NONE, None
