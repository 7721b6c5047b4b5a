"""Normalize type descriptors into candidates."""

from __future__ import annotations

from specsense.core.errors import InternalError
from specsense.suggestion.models import (
    Candidate,
    FileTypeInfo,
    IntrospectedTypeInfo,
    TypeDescriptor,
    TypeKind,
)


def parse_signature_args(signature: str | None) -> tuple[str, ...]:
    """Argument names from the first parenthesized segment of a signature.

    ``"t(key, value)"`` -> ``("key", "value")``. Missing signature, missing
    parenthesis or an empty segment give ``()``.
    """
    if not signature:
        return ()
    _, paren, rest = signature.partition("(")
    if not paren:
        return ()
    segment = rest.partition(")")[0]
    return tuple(arg.strip() for arg in segment.split(",") if arg.strip())


def to_candidate(info: TypeDescriptor, origin: str | None) -> Candidate:
    """Shape either descriptor variant into a Candidate."""
    match info:
        case FileTypeInfo():
            args = ", ".join(info.args)
            if info.kind is TypeKind.OPAQUE:
                spec = f"@opaque {info.name}({args})"
            else:
                # later clauses shadow earlier ones
                spec = info.specs[-1] if info.specs else ""
            return Candidate(
                name=info.name,
                arity=info.arity,
                origin=origin,
                args_list=info.args,
                spec=spec,
                doc=info.doc or "",
                signature=f"{info.name}({args})",
                metadata=info.metadata,
            )
        case IntrospectedTypeInfo():
            return Candidate(
                name=info.name,
                arity=info.arity,
                origin=origin,
                args_list=parse_signature_args(info.signature),
                spec=info.spec,
                doc=info.doc,
                signature=info.signature or f"{info.name}/{info.arity}",
                metadata=info.metadata,
            )
        case _:
            raise InternalError.unexpected(
                "unsupported type descriptor", descriptor=type(info).__name__
            )
