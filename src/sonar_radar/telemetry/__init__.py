"""Logging setup for command-line use."""

from .logging import configure_logging

__all__ = ["configure_logging"]
