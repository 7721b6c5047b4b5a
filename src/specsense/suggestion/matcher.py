"""Name matching predicates shared by every lookup path.

A matcher is a plain ``(name, hint) -> bool`` callable.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

Matcher: TypeAlias = Callable[[str, str], bool]
NamePredicate: TypeAlias = Callable[[str], bool]


def fuzzy_match(name: str, hint: str) -> bool:
    """Anchored, case-insensitive subsequence match.

    The first character of the hint must match the first character of the
    name; the remaining hint characters must appear in the name in order.

    >>> fuzzy_match("non_neg_integer", "nni")
    True
    >>> fuzzy_match("integer", "nt")
    False
    """
    if not hint:
        return True
    if len(name) < len(hint):
        return False

    name = name.casefold()
    hint = hint.casefold()
    if name[0] != hint[0]:
        return False

    pos = 1
    for char in hint[1:]:
        pos = name.find(char, pos)
        if pos < 0:
            return False
        pos += 1
    return True


def prefix_match(name: str, hint: str) -> bool:
    """Plain case-sensitive prefix match."""
    return name.startswith(hint)


_MATCHERS: dict[str, Matcher] = {
    "fuzzy": fuzzy_match,
    "prefix": prefix_match,
}


def get_matcher(mode: str = "fuzzy") -> Matcher:
    """Look up a matcher by config name (``fuzzy`` or ``prefix``)."""
    try:
        return _MATCHERS[mode]
    except KeyError:
        raise ValueError(f"Unknown match mode: {mode!r}") from None
