"""Configuration for the validator."""

from fieldcheck.config.settings import Settings  # noqa: F401
