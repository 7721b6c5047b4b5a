"""specsense - typespec completion candidates for editors and language servers.

Public API is in `specsense.suggestion`:
- TypeSpecSuggester: Reducer-chain stage producing type candidates
- resolve_type_candidates: One-shot convenience wrapper
"""

__version__ = "0.1.0"
