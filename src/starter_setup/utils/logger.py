"""
Component Logger

Provides colored logging for the setup wizard components with:
- Unified API for all components (wizard, resolution, manifest, pipeline)
- Rich terminal output with component-specific colors
- A single RichHandler installed on the root logger

Usage:
    logger = get_logger("manifest")
    logger.info("Removing 4 devDependencies")
    logger.debug("Detailed trace")
    logger.success("Manifest written")
    logger.warning("Something to note")
    logger.error("Something went wrong")

    # Custom loggers with explicit parameters
    logger = get_logger(name="custom_component", color="blue")
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

DEBUG_ENV_VAR = "STARTER_SETUP_DEBUG"

COMPONENT_COLORS = {
    "wizard": "magenta",
    "resolution": "cyan",
    "cleanup": "cyan",
    "manifest": "blue",
    "files": "yellow",
    "readme": "green",
    "pipeline": "white",
}


class ComponentLogger:
    """
    Rich-formatted logger for setup components with color coding.

    Message Types:
    - key_info: Important operational information
    - info: Normal operational messages
    - debug: Detailed tracing information
    - warning: Warning messages
    - error: Error messages
    - success: Success messages
    """

    def __init__(self, base_logger: logging.Logger, component_name: str, color: str = "white"):
        """
        Initialize component logger.

        Args:
            base_logger: Underlying Python logger
            component_name: Name of the component (e.g., 'manifest', 'cleanup')
            color: Rich color name for this component
        """
        self.base_logger = base_logger
        self.component_name = component_name
        self.color = color

    def _format_message(self, message: str, style: str, emoji: str = "") -> str:
        prefix = f"{emoji}{self.component_name.title()}: "
        if style:
            return f"[{style}]{prefix}{message}[/{style}]"
        return f"{prefix}{message}"

    def key_info(self, message: str) -> None:
        style = f"bold {self.color}"
        self.base_logger.info(self._format_message(message, style))

    def info(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, self.color))

    def debug(self, message: str) -> None:
        style = f"dim {self.color}"
        self.base_logger.debug(self._format_message(message, style, "🔍 "))

    def warning(self, message: str) -> None:
        self.base_logger.warning(self._format_message(message, "bold yellow", "⚠️  "))

    def error(self, message: str, exc_info: bool = False) -> None:
        formatted = self._format_message(message, "bold red", "❌ ")
        self.base_logger.error(formatted, exc_info=exc_info)

    def success(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, "bold green", "✅ "))

    def exception(self, message: str, *args, **kwargs) -> None:
        formatted = self._format_message(message, "bold red", "❌ ")
        self.base_logger.exception(formatted, *args, **kwargs)

    @property
    def level(self) -> int:
        return self.base_logger.level

    @property
    def name(self) -> str:
        return self.base_logger.name

    def isEnabledFor(self, level: int) -> bool:
        return self.base_logger.isEnabledFor(level)


def _setup_rich_logging() -> None:
    """Configure Rich logging for the root logger (called once)."""
    root_logger = logging.getLogger()

    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            return

    # Log records go to stderr so they never interleave with the wizard UI on stdout
    console = Console(stderr=True)

    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        markup=True,
        show_path=False,
        show_time=False,
        show_level=True,
        tracebacks_show_locals=False,
    )

    root_logger.addHandler(handler)


def configure_logging(level: str | int = "WARNING") -> int:
    """Apply the configured log level to the root logger.

    ``STARTER_SETUP_DEBUG`` in the environment forces DEBUG.

    Returns:
        The numeric level that was applied
    """
    _setup_rich_logging()

    if os.getenv(DEBUG_ENV_VAR):
        level = logging.DEBUG
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.getLogger().setLevel(level)
    return level


def get_logger(
    component_name: str | None = None,
    *,
    name: str | None = None,
    color: str | None = None,
) -> ComponentLogger:
    """
    Get a component logger.

    Args:
        component_name: Component name (e.g., 'manifest', 'cleanup')
        name: Direct logger name for custom loggers (keyword-only)
        color: Direct color specification (keyword-only)

    Returns:
        ComponentLogger instance

    Raises:
        ValueError: If neither component_name nor name is given

    Examples:
        logger = get_logger("pipeline")
        logger.info("Applying changes")

        logger = get_logger(name="test_logger", color="blue")
    """
    _setup_rich_logging()

    if name is not None:
        return ComponentLogger(logging.getLogger(name), name, color or "white")

    if component_name is None:
        raise ValueError(
            "Component name is required. Usage: get_logger('component_name') or "
            "get_logger(name='custom_name', color='blue')"
        )

    base_logger = logging.getLogger(f"starter_setup.{component_name}")
    return ComponentLogger(base_logger, component_name, COMPONENT_COLORS.get(component_name, "white"))
