"""Interactive prompt sequence for the setup wizard.

Asks, in order: description, version, author, license, privacy flag,
entrypoint and the features to keep. Every questionary prompt returns None
when the user cancels (Ctrl+C), and the first cancellation aborts the whole
sequence by raising SetupCancelled.
"""

import questionary
from questionary import Choice

from starter_setup.cli.styles import Messages, console, get_questionary_style
from starter_setup.features.registry import DEFAULT_REGISTRY, FeatureRegistry
from starter_setup.models import AnswerSet, License, is_valid_version
from starter_setup.utils.config import SetupConfig
from starter_setup.utils.logger import get_logger

logger = get_logger("wizard")

custom_style = get_questionary_style()

LICENSE_OPTIONS = (
    (License.MIT, "MIT", "permissive"),
    (License.APACHE_2, "Apache 2.0", "permissive with patent grant"),
    (License.ISC, "ISC", "simplified MIT"),
    (License.GPL_3, "GPL 3.0", "copyleft"),
    (License.UNLICENSED, "Unlicensed", "proprietary"),
)


class SetupCancelled(Exception):
    """Raised when the user cancels a prompt."""


def ensure_answered(value):
    """Return a prompt answer, or abort the wizard if it was cancelled."""
    if value is None:
        raise SetupCancelled()
    return value


def ask_metadata(config: SetupConfig) -> dict:
    description = ensure_answered(
        questionary.text("Project description:", default="", style=custom_style).ask()
    )

    version = ensure_answered(
        questionary.text(
            "Initial version:",
            default=config.default_version,
            validate=is_valid_version,
            style=custom_style,
        ).ask()
    )

    author = ensure_answered(
        questionary.text(
            "Author (Your Name <email@example.com>):", default="", style=custom_style
        ).ask()
    )

    return {
        "description": description.strip(),
        "version": version.strip(),
        "author": author.strip(),
    }


def ask_license() -> License:
    choices = [
        Choice(f"{label:<12} - {hint}", value=license_id)
        for license_id, label, hint in LICENSE_OPTIONS
    ]
    return ensure_answered(
        questionary.select(
            "License:",
            choices=choices,
            default=choices[0],
            style=custom_style,
        ).ask()
    )


def ask_features(config: SetupConfig, registry: FeatureRegistry) -> list[str]:
    defaults = set(config.default_features)
    choices = []
    for feature in registry:
        title = f"{feature.label} - {feature.hint}" if feature.hint else feature.label
        choices.append(Choice(title, value=feature.key, checked=feature.key in defaults))

    # An empty list is a valid answer (keep nothing); only None means cancel
    return ensure_answered(
        questionary.checkbox(
            "Which features would you like to keep?",
            choices=choices,
            style=custom_style,
        ).ask()
    )


def collect_answers(
    project_name: str,
    config: SetupConfig | None = None,
    registry: FeatureRegistry = DEFAULT_REGISTRY,
) -> AnswerSet:
    """Run the full prompt sequence.

    Args:
        project_name: Name shown in the intro
        config: Setup configuration providing defaults
        registry: Features offered for selection

    Returns:
        Validated AnswerSet

    Raises:
        SetupCancelled: On the first cancelled prompt
    """
    config = config or SetupConfig()

    console.print(f"\n{Messages.header(f'Setting up {project_name}')}\n")

    console.print("[bold]Package metadata[/bold]\n")
    answers = ask_metadata(config)
    answers["license"] = ask_license()

    answers["is_private"] = ensure_answered(
        questionary.confirm(
            "Private package? (prevents accidental npm publish)",
            default=True,
            style=custom_style,
        ).ask()
    )

    entrypoint = ensure_answered(
        questionary.text(
            "Entrypoint:", default=config.default_entrypoint, style=custom_style
        ).ask()
    )
    answers["entrypoint"] = entrypoint.strip() or config.default_entrypoint

    console.print("\n[bold]Feature selection[/bold]\n")
    answers["selected_features"] = frozenset(ask_features(config, registry))

    logger.debug(f"Selected features: {sorted(answers['selected_features'])}")
    return AnswerSet.model_validate(answers, context={"registry": registry})
