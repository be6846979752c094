# jugsearch/core/errors.py
from __future__ import annotations


class SearchError(Exception):
    """Base class for errors raised by jugsearch."""


class EngineReusedError(SearchError):
    """A search engine instance was asked to search twice."""


class InvalidProblemError(SearchError):
    """A problem domain was misconfigured or broke the domain contract."""
