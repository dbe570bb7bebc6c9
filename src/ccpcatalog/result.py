"""CCP information returned by the margin service.

The service reports the CCPs a user may calculate margin against as a plain
list of names. :class:`CcpsResult` keeps that list as received and answers
availability and lookup questions against it.

Two kinds of matching are used and they are deliberately not unified:

- availability checks compare names ignoring case;
- retrieval of the stored entry (:meth:`CcpsResult.get_ccp`,
  :meth:`CcpsResult.find_ccp`) requires an exact, case-sensitive match.

A name stored with a casing that differs from the registry's canonical name is
therefore available, yet cannot be retrieved.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictStr, field_validator

from .ccp import Ccp
from .errors import CCPNotAvailableError, CCPNotAvailableToUserError

logger = logging.getLogger(__name__)


class CcpsResult(BaseModel):
    """CCP information from the service."""
    model_config = ConfigDict(frozen=True)

    ccp_names: Tuple[StrictStr, ...] = Field(
        ...,
        validation_alias=AliasChoices("ccp_names", "ccpNames", "ccps"),
        description="The list of available CCPs, may be empty",
    )

    @field_validator("ccp_names", mode="before")
    @classmethod
    def validate_ordered(cls, v):
        if isinstance(v, (str, bytes, AbstractSet, Mapping)):
            raise ValueError(f"ccp_names must be an ordered sequence, not {type(v).__name__}")
        return v

    def model_post_init(self, __context: Any) -> None:
        logger.debug("CCP result created with %d names", len(self.ccp_names))

    @classmethod
    def of(cls, ccp_names: Iterable[str]) -> "CcpsResult":
        """Obtain an instance from the list of CCP names.

        Args:
            ccp_names: CCP names as reported by the service, not None

        Returns:
            The result

        Raises:
            ValueError: If ``ccp_names`` is None, unordered, or holds a non-string
        """
        return cls(ccp_names=ccp_names)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "CcpsResult":
        """Build from a decoded service response such as ``{"ccps": [...]}``."""
        return cls.model_validate(payload)

    def to_dict(self) -> Dict[str, List[str]]:
        """Convert to the service's response shape."""
        return {"ccps": list(self.ccp_names)}

    # ------------------------------------------------------------------
    def is_ccp_available(self, ccp_name: Union[str, Ccp]) -> bool:
        """Check if the CCP is available, ignoring case.

        Args:
            ccp_name: CCP name or registry entry to check

        Returns:
            True if available to the user
        """
        if isinstance(ccp_name, Ccp):
            return self.is_ccp_available_by_ref(ccp_name)
        return self._contains_ignoring_case(ccp_name)

    def is_ccp_available_by_ref(self, ccp: Ccp) -> bool:
        """Check if the registry entry is available, ignoring case."""
        return self._contains_ignoring_case(ccp.name)

    def get_ccp_by_name(self, ccp_name: str) -> Ccp:
        """Get the CCP registry entry by name.

        The names held by this result are not consulted.

        Raises:
            UnknownCCPError: If the name is not valid
        """
        return Ccp.of(ccp_name)

    # ------------------------------------------------------------------
    def get_ccp(self, ccp: Ccp) -> str:
        """Get information about a particular CCP, raising if not found.

        Args:
            ccp: CCP to get information about

        Returns:
            The CCP name exactly as stored

        Raises:
            CCPNotAvailableToUserError: If no stored name matches ignoring case
            CCPNotAvailableError: If no stored name matches exactly
        """
        if not self.is_ccp_available_by_ref(ccp):
            raise CCPNotAvailableToUserError(ccp)

        found = self.find_ccp(ccp)
        if found is None:
            logger.warning(
                "CCP %s is available but the service reported it with different casing: %s",
                ccp,
                self.ccp_names,
            )
            raise CCPNotAvailableError(ccp)
        return found

    def find_ccp(self, ccp: Ccp) -> Optional[str]:
        """Find information about a particular CCP, None if not found."""
        return next((name for name in self.ccp_names if name == ccp.name), None)

    def _contains_ignoring_case(self, ccp_name: str) -> bool:
        return any(_equals_ignore_case(name, ccp_name) for name in self.ccp_names)


def _equals_ignore_case(left: str, right: str) -> bool:
    # Character by character, so one character never matches an expansion like "ß" -> "SS".
    if len(left) != len(right):
        return False
    return all(
        a == b or a.upper() == b.upper() or a.upper().lower() == b.upper().lower()
        for a, b in zip(left, right)
    )


__all__ = ["CcpsResult"]
