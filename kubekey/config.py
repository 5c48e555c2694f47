"""
Centralized configuration management for kubekey.

Provides a unified interface for accessing environment variables with
defaults and validation.
"""

import os
from typing import Optional

from kubekey.output import Verbosity

_VERBOSITY_NAMES = {
    "quiet": Verbosity.QUIET,
    "normal": Verbosity.NORMAL,
    "verbose": Verbosity.VERBOSE,
}


class Config:
    """
    Centralized configuration management.

    Provides access to environment variables with sensible defaults.
    """

    @staticmethod
    def get(key: str, default: Optional[str] = None, required: bool = False) -> str:
        """
        Get an environment variable with optional default and validation.

        Args:
            key: Environment variable name
            default: Default value if not set
            required: If True, raise ValueError if not set

        Returns:
            Environment variable value or default

        Raises:
            ValueError: If required=True and variable is not set
        """
        value = os.getenv(key, default)
        if required and value is None:
            raise ValueError(f"Required environment variable {key} is not set")
        return value or ""

    @staticmethod
    def verbosity() -> Verbosity:
        """
        Get the default CLI verbosity from KUBEKEY_VERBOSITY.

        Accepts "quiet", "normal" or "verbose" (case-insensitive). Anything
        else falls back to normal.
        """
        value = Config.get("KUBEKEY_VERBOSITY", "normal").strip().lower()
        return _VERBOSITY_NAMES.get(value, Verbosity.NORMAL)
