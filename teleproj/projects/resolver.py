# teleproj/projects/resolver.py
"""
Resolution of a free-text or numeric query against the saved project list.

Everything here is pure: the caller supplies the live path list and decides
what to print or how to exit.
"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from teleproj.constants import (
    EXACT_MATCH_SCORE,
    PREFIX_BASE_SCORE,
    PREFIX_PER_CHAR,
    PREFIX_MAX_SCORE,
    CONTAINS_BASE_SCORE,
    CONTAINS_PER_CHAR,
    CONTAINS_MAX_SCORE,
    FUZZY_MAX_SCORE,
    MAX_CANDIDATES,
)
from teleproj.errors import EmptyQueryError
from teleproj.projects.registry import parse_index, project_name
from teleproj.utils.logging import get_logger

logger = get_logger(__name__)


class ResolutionKind(Enum):
    """How a query was resolved."""
    DIRECT_INDEX = "direct_index"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class MatchCandidate:
    """A saved path that matched a query."""
    index: int
    path: str
    score: int

    @property
    def name(self) -> str:
        return project_name(self.path)


@dataclass
class ResolveResult:
    """Outcome of resolving one query."""
    kind: ResolutionKind
    path: Optional[str] = None
    index: Optional[int] = None
    candidates: List[MatchCandidate] = field(default_factory=list)


def calculate_match_score(name: str, query: str) -> int:
    """
    Score how well a project name matches a query, case-insensitively.

    Tiers, highest first: exact name, prefix, substring, in-order
    subsequence. A subsequence that leaves query characters unconsumed
    scores 0.

    Args:
        name: The project name.
        query: The user's query.

    Returns:
        The match score; 0 means no match.
    """
    name_lower = name.lower()
    query_lower = query.lower()
    query_len = len(query_lower)

    if name_lower == query_lower:
        return EXACT_MATCH_SCORE

    if name_lower.startswith(query_lower):
        return min(PREFIX_BASE_SCORE + PREFIX_PER_CHAR * query_len, PREFIX_MAX_SCORE)

    if query_lower in name_lower:
        return min(CONTAINS_BASE_SCORE + CONTAINS_PER_CHAR * query_len, CONTAINS_MAX_SCORE)

    score = 0
    cursor = 0
    for char in name_lower:
        if cursor < query_len and char == query_lower[cursor]:
            score += 1
            cursor += 1

    if cursor < query_len:
        return 0
    return min(score, FUZZY_MAX_SCORE)


def rank_candidates(paths: Sequence[str], query: str) -> List[MatchCandidate]:
    """
    Score every path's project name and return the matches, best first.

    Equal scores keep their original order.
    """
    candidates = []
    for index, path in enumerate(paths):
        score = calculate_match_score(project_name(path), query)
        if score > 0:
            candidates.append(MatchCandidate(index=index, path=path, score=score))

    candidates.sort(key=lambda candidate: candidate.score, reverse=True)
    return candidates


def resolve(paths: Sequence[str], query: str) -> ResolveResult:
    """
    Resolve a query against the live list of saved paths.

    A numeric query addresses a slot directly and is never matched as text.
    Any other query is scored against every project name; the single best
    match wins, otherwise the top candidates are returned for the user to
    choose from.

    Args:
        paths: Saved paths that currently exist, in stored order.
        query: Index or (partial) project name.

    Returns:
        A ResolveResult describing the outcome.

    Raises:
        EmptyQueryError: If the query is empty.
    """
    if query == "":
        raise EmptyQueryError()

    index = parse_index(query)
    if index is not None:
        if index < len(paths):
            logger.debug(f"Query '{query}' resolved by index to {paths[index]}")
            return ResolveResult(ResolutionKind.DIRECT_INDEX, path=paths[index], index=index)
        logger.debug(f"Query '{query}' is an index outside 0..{len(paths) - 1}")
        return ResolveResult(ResolutionKind.INDEX_OUT_OF_RANGE, index=index)

    candidates = rank_candidates(paths, query)
    logger.debug(f"Query '{query}' matched {len(candidates)} of {len(paths)} projects")

    if not candidates:
        return ResolveResult(ResolutionKind.NOT_FOUND)

    best = candidates[0]
    if len(candidates) == 1 or candidates[1].score < best.score:
        return ResolveResult(ResolutionKind.UNIQUE, path=best.path, index=best.index, candidates=[best])

    return ResolveResult(ResolutionKind.AMBIGUOUS, candidates=candidates[:MAX_CANDIDATES])
