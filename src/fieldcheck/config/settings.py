"""
Runtime settings for the validator.

Defaults are safe for arbitrarily nested payloads; override through the
environment when a deployment needs a tighter or looser bound.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Validator settings with conservative defaults."""

    # Recursion guard: walks deeper than this are truncated and logged
    max_depth: int = 64

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        max_depth = int(os.environ.get("FIELDCHECK_MAX_DEPTH", cls.max_depth))
        log_level = os.environ.get("FIELDCHECK_LOG_LEVEL", cls.log_level).upper()

        if max_depth < 1:
            raise ValueError("FIELDCHECK_MAX_DEPTH must be a positive integer")

        return cls(max_depth=max_depth, log_level=log_level)
