"""Exceptions raised by the CCP catalog.

Lookups that fail because of a bad argument raise subclasses of both
:class:`CCPError` and :class:`ValueError`, so callers may catch either.
"""

from __future__ import annotations

from typing import Any, Optional


class CCPError(Exception):
    """Base exception for CCP catalog operations."""
    pass


class UnknownCCPError(CCPError, ValueError):
    """Name does not match any CCP in the registry."""

    def __init__(self, ccp_name: Optional[str]):
        super().__init__(f"Unknown CCP: {ccp_name!r}")
        self.ccp_name = ccp_name


class CCPNotAvailableToUserError(CCPError, ValueError):
    """CCP is missing from the names the service returned for the user."""

    def __init__(self, ccp: Any):
        super().__init__(f"CCP is not available to user: {ccp}")
        self.ccp = ccp


class CCPNotAvailableError(CCPError, ValueError):
    """CCP passed the availability check but no stored name matches it exactly."""

    def __init__(self, ccp: Any):
        super().__init__(f"CCP is not available: {ccp}")
        self.ccp = ccp


__all__ = [
    "CCPError",
    "UnknownCCPError",
    "CCPNotAvailableToUserError",
    "CCPNotAvailableError",
]
