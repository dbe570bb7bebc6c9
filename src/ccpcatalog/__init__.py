"""CCP availability results from the margin service."""

from __future__ import annotations

from .ccp import Ccp, resolve
from .config import get_config, get_default_config, init_environment
from .errors import (
    CCPError,
    CCPNotAvailableError,
    CCPNotAvailableToUserError,
    UnknownCCPError,
)
from .result import CcpsResult

__version__ = "0.1.0"

__all__ = [
    "Ccp",
    "CcpsResult",
    "CCPError",
    "CCPNotAvailableError",
    "CCPNotAvailableToUserError",
    "UnknownCCPError",
    "get_config",
    "get_default_config",
    "init_environment",
    "resolve",
]
