"""Exception hierarchy for mvn-search.

All exceptions inherit from MvnSearchError (single catch point).
Repository errors never cross the public client methods; they are logged
and collapsed into an empty result.
"""

from __future__ import annotations


class MvnSearchError(Exception):
    """Base exception for all mvn-search errors."""


class RepositoryError(MvnSearchError):
    """Error communicating with the Maven Central search index."""


class SelectionError(MvnSearchError):
    """Interactive selection could not be parsed as a result number."""
