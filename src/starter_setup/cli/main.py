"""Main CLI entry point for the setup wizard.

Provides the ``starter-setup`` command. It takes no options: the project is
the current working directory and everything else is asked interactively.

Exit codes:
    0: Project configured, or the user cancelled (a prompt or Ctrl+C)
    1: Any error while configuring the project
"""

import logging
from pathlib import Path

import click
from rich.panel import Panel

from starter_setup.cli.styles import Messages, Styles, console
from starter_setup.cli.wizard import SetupCancelled, collect_answers
from starter_setup.features.registry import FeatureRegistry, build_registry
from starter_setup.pipeline import SetupReport, run_setup
from starter_setup.utils.config import SetupConfig, load_setup_config
from starter_setup.utils.logger import configure_logging, get_logger

logger = get_logger("pipeline")

CANCEL_MESSAGE = "Setup cancelled. Re-run with: starter-setup"
FAILURE_PREFIX = "Setup failed:"


def show_summary(report: SetupReport, registry: FeatureRegistry, config: SetupConfig):
    """Print the kept/removed feature summary and follow-up notes."""
    if report.license_advisory:
        console.print(Messages.info(report.license_advisory))

    if report.install is not None and not report.install.ok:
        console.print(Messages.warning(report.install.error))
        console.print(f"  Run {Messages.command(' '.join(report.install.command))} manually.")

    kept = [
        f"[success]+[/success] {feature.label}"
        for feature in registry
        if feature.key in report.resolution.selected
    ]
    removed = [
        f"[dim]- {registry.lookup(key).label}[/dim]" for key in report.resolution.deselected
    ]
    console.print(
        Panel(
            "\n".join(kept + removed) or "[dim]No optional features[/dim]",
            title="Features",
            title_align="left",
            border_style=Styles.BORDER,
            expand=False,
        )
    )

    console.print(f"\nDone! Run {Messages.command(f'{config.runtime} start')} to begin.\n")


@click.command()
@click.pass_context
def cli(ctx):
    """Customize this starter template.

    Asks for project metadata, a license and the optional features to keep,
    then updates package.json, removes unused feature files, regenerates
    README.md and deletes the setup directory.

    Run it once from the root of a freshly cloned template:

    \b
      $ starter-setup
    """
    project_dir = Path.cwd()

    try:
        config = load_setup_config(project_dir)
        configure_logging(config.log.level)
        registry = build_registry(config.features)

        answers = collect_answers(project_dir.name, config, registry)

        console.print()
        with console.status("Configuring project...", spinner="dots") as status:
            report = run_setup(project_dir, answers, config, registry, progress=status.update)
        console.print(Messages.success("Project configured!"))

        show_summary(report, registry, config)

    except (SetupCancelled, KeyboardInterrupt):
        # Ctrl+C between prompts or during the run is a cancellation too
        console.print(f"\n{Messages.warning(CANCEL_MESSAGE)}")
        ctx.exit(0)
    except Exception as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.exception("Unhandled error while configuring the project")
        click.echo(f"{FAILURE_PREFIX} {e}", err=True)
        ctx.exit(1)


def main():
    """Entry point for the starter-setup console script."""
    cli(prog_name="starter-setup")


if __name__ == "__main__":
    main()
