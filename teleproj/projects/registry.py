# teleproj/projects/registry.py
"""
Operations on the saved project list.

These functions mutate a ProjectsConfig in memory; persisting the result is
up to the caller.
"""
import os
import re
from pathlib import Path
from typing import List, NamedTuple, Optional, Union

from teleproj.config import ProjectsConfig
from teleproj.constants import UNKNOWN_PROJECT_NAME
from teleproj.errors import IndexOutOfRangeError, InvalidIndexFormatError, InvalidPathError
from teleproj.utils.logging import get_logger

logger = get_logger(__name__)

# ASCII digits only; str.isdigit() also accepts characters int() rejects
_INDEX_PATTERN = re.compile(r"\+?[0-9]+")


class AddResult(NamedTuple):
    """Outcome of adding a path."""
    path: str
    added: bool


class StoredEntry(NamedTuple):
    """A stored path with its stored index."""
    index: int
    path: str
    exists: bool


def _exists(path: Union[str, Path]) -> bool:
    """Whether a path exists; paths that cannot be checked count as missing."""
    try:
        return Path(path).exists()
    except OSError:
        return False


def project_name(path: Union[str, Path]) -> str:
    """Return the final component of a path, or "unknown" if it has none."""
    return Path(path).name or UNKNOWN_PROJECT_NAME


def canonicalize(path: Union[str, Path]) -> str:
    """
    Return the canonical absolute form of an existing path.

    Raises:
        InvalidPathError: If the path does not exist.
    """
    expanded = Path(os.path.expanduser(str(path)))
    if not _exists(expanded):
        raise InvalidPathError(str(path))
    try:
        return str(expanded.resolve(strict=True))
    except OSError as e:
        raise InvalidPathError(str(path)) from e


def existing_paths(config: ProjectsConfig) -> List[str]:
    """Saved paths that still exist on disk, in stored order."""
    return [path for path in config.paths if _exists(path)]


def stored_entries(config: ProjectsConfig) -> List[StoredEntry]:
    """Every saved path with its stored index, whether or not it still exists."""
    return [
        StoredEntry(index=index, path=path, exists=_exists(path))
        for index, path in enumerate(config.paths)
    ]


def add_path(config: ProjectsConfig, path: Union[str, Path]) -> AddResult:
    """
    Append a path to the saved list unless it is already there.

    Args:
        config: The configuration to modify.
        path: Path to add; stored in canonical absolute form.

    Returns:
        AddResult with the canonical path and whether it was appended.

    Raises:
        InvalidPathError: If the path does not exist.
    """
    canonical = canonicalize(path)

    if canonical in config.paths:
        logger.debug(f"Path already saved: {canonical}")
        return AddResult(path=canonical, added=False)

    config.paths.append(canonical)
    logger.info(f"Added path: {canonical}")
    return AddResult(path=canonical, added=True)


def parse_index(text: str) -> Optional[int]:
    """Return the text as a non-negative index, or None if it is not numeric."""
    if _INDEX_PATTERN.fullmatch(text):
        return int(text)
    return None


def parse_remove_index(index_text: str) -> int:
    """
    Parse a remove argument as a non-negative index.

    Raises:
        InvalidIndexFormatError: If the argument is not a non-negative integer.
    """
    index = parse_index(index_text)
    if index is None:
        raise InvalidIndexFormatError(index_text)
    return index


def remove_path(config: ProjectsConfig, index_text: Union[str, int]) -> str:
    """
    Remove the saved path at a stored index.

    Later entries shift down by one, leaving no gaps.

    Args:
        config: The configuration to modify.
        index_text: The index, as typed by the user or as an int.

    Returns:
        The removed path.

    Raises:
        InvalidIndexFormatError: If the index is not a number.
        IndexOutOfRangeError: If no entry has that index.
    """
    if isinstance(index_text, int):
        index = index_text
    else:
        index = parse_remove_index(index_text)

    if not 0 <= index < len(config.paths):
        raise IndexOutOfRangeError(index, len(config.paths))

    removed = config.paths.pop(index)
    logger.info(f"Removed path: {removed}")
    return removed


def prune_missing(config: ProjectsConfig) -> List[str]:
    """
    Drop saved paths that no longer exist.

    Returns:
        The removed paths, in stored order.
    """
    missing = [path for path in config.paths if not _exists(path)]
    if missing:
        missing_set = set(missing)
        config.paths[:] = [path for path in config.paths if path not in missing_set]
        logger.info(f"Pruned {len(missing)} missing path(s)")
    return missing
