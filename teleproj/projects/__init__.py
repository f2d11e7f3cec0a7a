# teleproj/projects/__init__.py
"""
The saved project list and query resolution against it.
"""
from .registry import (
    AddResult,
    StoredEntry,
    add_path,
    canonicalize,
    existing_paths,
    project_name,
    prune_missing,
    remove_path,
    stored_entries,
)
from .resolver import (
    MatchCandidate,
    ResolutionKind,
    ResolveResult,
    calculate_match_score,
    rank_candidates,
    resolve,
)

__all__ = [
    'AddResult', 'StoredEntry', 'add_path', 'canonicalize', 'existing_paths',
    'project_name', 'prune_missing', 'remove_path', 'stored_entries',
    'MatchCandidate', 'ResolutionKind', 'ResolveResult', 'calculate_match_score',
    'rank_candidates', 'resolve',
]
