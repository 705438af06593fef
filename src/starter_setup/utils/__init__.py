"""Support utilities for the setup wizard.

Modules:
    config: Optional setup configuration loading
    logger: Component logger built on Rich
"""

from . import config, logger

__all__ = ["config", "logger"]
