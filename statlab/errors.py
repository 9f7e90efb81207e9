"""Exception types raised by the statistical engine.

All engine failures derive from :class:`StatlabError`, which is itself a
``ValueError`` so callers that only guard against bad numeric input keep
working.
"""

from __future__ import annotations


class StatlabError(ValueError):
    """Base class for every structured failure reported by ``statlab``."""


class InvalidInput(StatlabError):
    """Missing data, too few observations, or an unknown test/distribution."""


class DegenerateInput(StatlabError):
    """Input that makes the result mathematically undefined (zero variance)."""


class DomainViolation(StatlabError):
    """A distribution parameter outside its valid domain."""
