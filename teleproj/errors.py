# teleproj/errors.py
"""
Exceptions raised by teleproj operations.

The CLI layer turns these into an error message and a nonzero exit code;
everything below it just raises.
"""
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from teleproj.projects.resolver import MatchCandidate


class TeleprojError(Exception):
    """Base class for all teleproj errors."""
    pass


class InvalidPathError(TeleprojError):
    """Exception raised when a path to add does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The path '{path}' does not exist.")


class InvalidIndexFormatError(TeleprojError):
    """Exception raised when an index argument is not a number."""

    def __init__(self, value: str):
        self.value = value
        super().__init__("Remove argument must be a valid number")


class IndexOutOfRangeError(TeleprojError):
    """Exception raised when an index does not address a saved path."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is out of range")


class EmptyQueryError(TeleprojError, ValueError):
    """Exception raised when a query is empty."""

    def __init__(self):
        super().__init__("Project query must not be empty")


class NoMatchError(TeleprojError):
    """Exception raised when no saved project matches a query."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No project found matching '{query}'")


class AmbiguousMatchError(TeleprojError):
    """Exception raised when several saved projects match a query equally well."""

    def __init__(self, query: str, candidates: List["MatchCandidate"]):
        self.query = query
        self.candidates = candidates
        super().__init__(f"Multiple projects match '{query}'")


class UnsupportedShellError(TeleprojError):
    """Exception raised for a shell without an integration snippet."""

    def __init__(self, shell: str, supported: List[str]):
        self.shell = shell
        self.supported = supported
        super().__init__(
            f"Unsupported shell '{shell}'. Choose one of: {', '.join(supported)}"
        )


class ConfigSaveError(TeleprojError):
    """Exception raised when the config file cannot be written."""
    pass
