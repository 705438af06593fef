"""Centralized color and style management for the setup wizard.

Provides one color theme for all CLI output so the wizard, summaries and
error messages look consistent:
- Semantic color names (success, error, warning) rather than direct colors
- Rich console markup helpers for inline styling
- Questionary style integration for interactive prompts
"""

from dataclasses import dataclass

from questionary import Style as QuestionaryStyle
from rich.console import Console
from rich.theme import Theme


@dataclass(frozen=True)
class ColorTheme:
    """Colors used by the wizard.

    Error, warning and success follow UI conventions; the rest give the
    wizard its look.
    """

    error: str = "#ff5f5f"
    warning: str = "#ffaa00"
    success: str = "#5fd787"

    primary: str = "#fbf0df"  # Bun cream
    accent: str = "#f472b6"
    command: str = "#87afd7"
    path: str = "#a2ae9d"
    info: str = "#87afd7"

    text_primary: str = "#ffffff"
    text_secondary: str = "#888888"
    text_dim: str = "#666666"
    border_default: str = "#555555"


DEFAULT_THEME = ColorTheme()


def _build_rich_theme(theme: ColorTheme) -> Theme:
    """Build a Rich Theme from a ColorTheme."""
    return Theme(
        {
            "success": f"bold {theme.success}",
            "error": f"bold {theme.error}",
            "warning": f"bold {theme.warning}",
            "info": f"bold {theme.info}",
            "primary": f"bold {theme.primary}",
            "secondary": theme.text_secondary,
            "dim": theme.text_dim,
            "header": f"bold {theme.primary}",
            "label": "bold",
            "value": theme.success,
            "path": theme.path,
            "command": theme.command,
            "accent": theme.accent,
            "border": theme.border_default,
        }
    )


def _build_questionary_style(theme: ColorTheme) -> QuestionaryStyle:
    """Build a Questionary style from a ColorTheme."""
    return QuestionaryStyle(
        [
            ("qmark", f"fg:{theme.accent} bold"),
            ("question", "bold"),
            ("answer", f"fg:{theme.primary} bold"),
            ("pointer", f"fg:{theme.accent} bold"),
            ("highlighted", f"fg:{theme.accent} bold"),
            ("selected", f"fg:{theme.primary}"),
            ("separator", f"fg:{theme.text_dim}"),
            ("instruction", f"fg:{theme.text_dim} italic"),
            ("text", f"fg:{theme.text_secondary}"),
            ("disabled", f"fg:{theme.text_dim}"),
        ]
    )


console = Console(theme=_build_rich_theme(DEFAULT_THEME))
custom_style = _build_questionary_style(DEFAULT_THEME)


def get_questionary_style() -> QuestionaryStyle:
    return custom_style


class Styles:
    """Style names defined in the Rich theme."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DIM = "dim"
    HEADER = "header"
    VALUE = "value"
    PATH = "path"
    COMMAND = "command"
    ACCENT = "accent"
    BORDER = "border"


class Messages:
    """Pre-formatted message helpers for common patterns."""

    @staticmethod
    def success(text: str) -> str:
        return f"[success]✓ {text}[/success]"

    @staticmethod
    def warning(text: str) -> str:
        return f"[warning]⚠️  {text}[/warning]"

    @staticmethod
    def info(text: str) -> str:
        return f"[info]ℹ️  {text}[/info]"

    @staticmethod
    def header(text: str) -> str:
        return f"[header]{text}[/header]"

    @staticmethod
    def command(text: str) -> str:
        return f"[command]{text}[/command]"


__all__ = [
    "ColorTheme",
    "DEFAULT_THEME",
    "console",
    "custom_style",
    "get_questionary_style",
    "Styles",
    "Messages",
]
