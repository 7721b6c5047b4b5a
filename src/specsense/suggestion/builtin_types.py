"""Catalog of basic and built-in types available in every typespec.

Basic types are primitives with no definition in terms of other types.
Built-in types are shorthands that expand to basic types; their spec text
shows the expansion.
"""

from __future__ import annotations

from specsense.suggestion.models import IntrospectedTypeInfo

# (name, params, expansion or None for basic types, doc)
_BASIC: list[tuple[str, tuple[str, ...], str | None, str]] = [
    ("any", (), None, "The top type, the set of all terms"),
    ("none", (), None, "The bottom type, contains no terms"),
    ("atom", (), None, "An atom is a constant whose name is its own value"),
    ("map", (), None, "Any map"),
    ("pid", (), None, "A process identifier"),
    ("port", (), None, "A port identifier"),
    ("reference", (), None, "A unique reference"),
    ("tuple", (), None, "Tuple of any size"),
    ("float", (), None, "A floating-point number"),
    ("integer", (), None, "An integer number"),
    ("neg_integer", (), None, "A negative integer"),
    ("non_neg_integer", (), None, "A non-negative integer"),
    ("pos_integer", (), None, "A positive integer"),
    ("list", ("t",), None, "Proper list with elements of type t"),
    ("nonempty_list", ("t",), None, "Non-empty proper list with elements of type t"),
    (
        "maybe_improper_list",
        ("content_type", "termination_type"),
        None,
        "Proper or improper list",
    ),
    (
        "nonempty_improper_list",
        ("content_type", "termination_type"),
        None,
        "Improper list (non-empty by definition)",
    ),
    (
        "nonempty_maybe_improper_list",
        ("content_type", "termination_type"),
        None,
        "Non-empty proper or improper list",
    ),
]

_BUILT_IN: list[tuple[str, tuple[str, ...], str | None, str]] = [
    ("term", (), "any()", "Same as any"),
    ("arity", (), "0..255", "Arity of a function"),
    ("as_boolean", ("t",), "t", "A type t whose value will be used as a truthy value"),
    ("binary", (), "<<_::_*8>>", "A blob of binary data"),
    ("bitstring", (), "<<_::_*1>>", "A bunch of bits"),
    ("boolean", (), "true | false", "Boolean true or false"),
    ("byte", (), "0..255", "A valid byte"),
    ("char", (), "0..0x10FFFF", "A valid char (Unicode code point)"),
    ("charlist", (), "[char()]", "A list of chars"),
    ("nonempty_charlist", (), "[char(), ...]", "A non-empty list of chars"),
    ("fun", (), "(... -> any)", "A function"),
    ("function", (), "fun()", "A function"),
    ("identifier", (), "pid() | port() | reference()", "A pid, port or reference"),
    ("iodata", (), "iolist() | binary()", "An iolist or a binary"),
    (
        "iolist",
        (),
        "maybe_improper_list(byte() | binary() | iolist(), binary() | [])",
        "A list whose elements are either bytes, binaries or other iolists",
    ),
    ("keyword", (), "[{atom(), any()}]", "A keyword list"),
    ("keyword", ("t",), "[{atom(), t}]", "A keyword list with values of type t"),
    ("list", (), "[any()]", "A list"),
    ("nonempty_list", (), "nonempty_list(any())", "A non-empty list"),
    (
        "maybe_improper_list",
        (),
        "maybe_improper_list(any(), any())",
        "An alias for maybe_improper_list(any(), any())",
    ),
    (
        "nonempty_maybe_improper_list",
        (),
        "nonempty_maybe_improper_list(any(), any())",
        "An alias for nonempty_maybe_improper_list(any(), any())",
    ),
    ("mfa", (), "{module(), atom(), arity()}", "A tuple of module, function and arity"),
    ("module", (), "atom()", "A module name. An alias for atom()"),
    ("no_return", (), "none()", "A return type indicating that a function never returns"),
    ("node", (), "atom()", "An atom representing a node name"),
    ("number", (), "integer() | float()", "Either an integer or a float"),
    (
        "struct",
        (),
        "%{:__struct__ => atom(), optional(atom()) => any()}",
        "Any struct",
    ),
    ("timeout", (), ":infinity | non_neg_integer()", "A non-negative integer or :infinity"),
]


def _build(
    rows: list[tuple[str, tuple[str, ...], str | None, str]], category: str
) -> list[IntrospectedTypeInfo]:
    types = []
    for name, params, expansion, doc in rows:
        signature = f"{name}({', '.join(params)})"
        spec = f"@type {signature} :: {expansion}" if expansion else f"@type {signature}"
        types.append(
            IntrospectedTypeInfo(
                name=name,
                arity=len(params),
                signature=signature,
                spec=spec,
                doc=doc,
                metadata={"builtin": True, "category": category},
            )
        )
    return types


BUILTIN_TYPES: tuple[IntrospectedTypeInfo, ...] = tuple(
    _build(_BASIC, "basic") + _build(_BUILT_IN, "built-in")
)
"""Every basic and built-in type, unordered."""
