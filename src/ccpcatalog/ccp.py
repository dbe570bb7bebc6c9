"""Registry of the central counterparties known to the margin service."""

from __future__ import annotations

from enum import Enum

from .errors import UnknownCCPError


class Ccp(str, Enum):
    """Central counterparty supported for margin calculation.

    The canonical name of a CCP is the member ``name``, which is also its value.
    """
    LCH = "LCH"
    CME = "CME"
    EUREX = "EUREX"
    JSCC = "JSCC"
    SGX = "SGX"
    ICE = "ICE"
    OCC = "OCC"
    KDPW = "KDPW"
    CCIL = "CCIL"
    HKEX = "HKEX"

    @classmethod
    def of(cls, name: str) -> "Ccp":
        """Resolve a CCP from its name.

        Args:
            name: CCP name, matched ignoring case

        Returns:
            The registry entry

        Raises:
            UnknownCCPError: If the name is not a known CCP
        """
        if not isinstance(name, str) or not name:
            raise UnknownCCPError(name)
        try:
            return cls[name.upper()]
        except KeyError:
            raise UnknownCCPError(name) from None

    def __str__(self) -> str:
        return self.name


def resolve(name: str) -> Ccp:
    """Resolve ``name`` against the registry, see :meth:`Ccp.of`."""
    return Ccp.of(name)


__all__ = ["Ccp", "resolve"]
