"""Apply a completed wizard run to the template project.

The steps run in a fixed order and each one only consumes what earlier steps
produced:

1. Load ``package.json`` and apply metadata, dependency and script edits
2. Patch shared files for cross-feature cleanups
3. Delete files of deselected features
4. Write ``package.json`` and remove the setup directory
5. Reinstall dependencies if any were removed
6. Regenerate the README and handle the LICENSE file

Nothing is rolled back when a step fails; the error propagates to the caller.
"""

import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from starter_setup.features.cleanup_rules import apply_cleanup_edits
from starter_setup.features.registry import DEFAULT_REGISTRY, FeatureRegistry
from starter_setup.features.resolution import ResolutionResult, resolve
from starter_setup.file_remover import remove_many
from starter_setup.manifest import load_manifest, update_manifest, write_manifest
from starter_setup.models import AnswerSet, License
from starter_setup.readme import generate_readme, write_readme
from starter_setup.utils.config import SETUP_DIR, SetupConfig
from starter_setup.utils.logger import get_logger

logger = get_logger("pipeline")

LICENSE_FILENAME = "LICENSE"


@dataclass(frozen=True)
class InstallOutcome:
    """Result of the dependency reinstall subprocess."""

    command: tuple[str, ...]
    returncode: int | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class SetupReport:
    project_name: str
    resolution: ResolutionResult
    removed_paths: tuple[str, ...]
    edited: tuple[str, ...]
    install: InstallOutcome | None
    license_removed: bool
    license_advisory: str | None


def reinstall_dependencies(project_dir: Path, command: list[str]) -> InstallOutcome:
    """Run the package manager to refresh the lockfile.

    A failing or missing package manager is reported, not raised: the project
    is already configured at this point and the user can rerun the install.
    """
    try:
        result = subprocess.run(
            command,
            cwd=project_dir,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        message = f"'{command[0]}' not found, skipping dependency reinstall"
        logger.warning(message)
        return InstallOutcome(command=tuple(command), returncode=None, error=message)

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        message = f"'{' '.join(command)}' exited with code {result.returncode}"
        if stderr:
            message = f"{message}: {stderr.splitlines()[-1]}"
        logger.warning(message)
        return InstallOutcome(command=tuple(command), returncode=result.returncode, error=message)

    logger.debug(f"'{' '.join(command)}' completed")
    return InstallOutcome(command=tuple(command), returncode=0)


def handle_license(
    project_dir: Path, chosen: License, shipped_license: str
) -> tuple[bool, str | None]:
    """Reconcile the LICENSE file with the chosen license.

    Returns:
        Tuple of (license file removed, advisory message or None)
    """
    if chosen.value == shipped_license:
        return False, None

    if chosen is License.UNLICENSED:
        removed = remove_many(project_dir, [LICENSE_FILENAME])
        return bool(removed), None

    return False, (
        f"License set to {chosen.value}. Remember to replace the LICENSE file contents."
    )


def run_setup(
    project_dir: Path,
    answers: AnswerSet,
    config: SetupConfig | None = None,
    registry: FeatureRegistry = DEFAULT_REGISTRY,
    progress: Callable[[str], None] | None = None,
) -> SetupReport:
    """Apply the answers to the project in ``project_dir``.

    Args:
        project_dir: Template project root; its basename is the project name
        answers: Validated wizard answers
        config: Setup configuration (defaults when None)
        registry: Feature registry used for resolution
        progress: Optional callback receiving short status messages

    Returns:
        SetupReport describing what changed

    Raises:
        OSError: On filesystem failures
        json.JSONDecodeError: If package.json or a shared JSON file is malformed
    """
    config = config or SetupConfig()
    notify = progress or (lambda message: None)
    project_name = project_dir.resolve().name

    notify("Configuring project...")
    manifest = load_manifest(project_dir)
    resolution = resolve(answers.selected_features, registry)
    logger.key_info(
        f"Keeping {len(resolution.selected)} feature(s), removing {len(resolution.deselected)}"
    )
    update_manifest(manifest, answers, resolution, config)

    edited = apply_cleanup_edits(project_dir, resolution.edits, indent=config.json_indent)
    removed = remove_many(project_dir, resolution.files_to_remove)

    write_manifest(project_dir, manifest, indent=config.json_indent)
    removed += remove_many(project_dir, [SETUP_DIR])

    install = None
    if resolution.needs_reinstall:
        notify("Cleaning up dependencies...")
        install = reinstall_dependencies(project_dir, config.install_command)

    notify("Generating README...")
    write_readme(project_dir, generate_readme(project_name, answers.description, resolution.selected))

    license_removed, license_advisory = handle_license(
        project_dir, answers.license, config.shipped_license
    )
    if license_removed:
        removed.append(LICENSE_FILENAME)

    logger.success(f"Configured {project_name}")
    return SetupReport(
        project_name=project_name,
        resolution=resolution,
        removed_paths=tuple(removed),
        edited=tuple(edited),
        install=install,
        license_removed=license_removed,
        license_advisory=license_advisory,
    )
