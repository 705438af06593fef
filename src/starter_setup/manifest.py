"""package.json manipulation.

Provides utilities for updating the template's manifest programmatically:
- Reading and writing JSON documents with key order preserved
- Overwriting project metadata from the wizard answers
- Dropping devDependencies and scripts of removed features
- Removing setup-only dependencies and the template marker key
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starter_setup.utils.logger import get_logger

if TYPE_CHECKING:
    from starter_setup.features.resolution import ResolutionResult
    from starter_setup.models import AnswerSet
    from starter_setup.utils.config import SetupConfig

logger = get_logger("manifest")

MANIFEST_FILENAME = "package.json"
DEPENDENCY_SECTIONS = ("devDependencies", "dependencies")


def read_json(path: Path) -> dict[str, Any]:
    """Load a JSON object from disk.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the document is not a JSON object
    """
    document = json.loads(path.read_text())
    if not isinstance(document, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return document


def dump_json(document: dict[str, Any], indent: str | int = "\t") -> str:
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"


def write_json(path: Path, document: dict[str, Any], indent: str | int = "\t") -> None:
    path.write_text(dump_json(document, indent=indent))


def load_manifest(project_dir: Path) -> dict[str, Any]:
    return read_json(project_dir / MANIFEST_FILENAME)


def write_manifest(project_dir: Path, manifest: dict[str, Any], indent: str | int = "\t") -> Path:
    path = project_dir / MANIFEST_FILENAME
    write_json(path, manifest, indent=indent)
    logger.debug(f"Wrote {path}")
    return path


def apply_metadata(manifest: dict[str, Any], answers: AnswerSet, config: SetupConfig) -> None:
    """Overwrite the project metadata fields.

    The start script is only rewritten when a non-default entrypoint was
    chosen and the manifest already has a ``scripts`` section.
    """
    manifest["description"] = answers.description
    manifest["version"] = answers.version
    manifest["author"] = answers.author
    manifest["license"] = answers.license.value
    manifest["private"] = answers.is_private
    manifest["main"] = answers.entrypoint
    manifest["keywords"] = []

    scripts = manifest.get("scripts")
    if answers.entrypoint != config.default_entrypoint and isinstance(scripts, dict):
        scripts["start"] = f"{config.runtime} {answers.entrypoint}"
        logger.info(f"Start script now runs {answers.entrypoint}")


def remove_dependencies(manifest: dict[str, Any], names) -> list[str]:
    """Delete dependency names from every dependency section.

    Returns:
        Names that were actually present and removed
    """
    removed = []
    for section in DEPENDENCY_SECTIONS:
        deps = manifest.get(section)
        if not isinstance(deps, dict):
            continue
        for name in sorted(names):
            if deps.pop(name, None) is not None:
                removed.append(name)
    return removed


def remove_scripts(manifest: dict[str, Any], names) -> list[str]:
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        return []
    return [name for name in sorted(names) if scripts.pop(name, None) is not None]


def strip_setup_artifacts(manifest: dict[str, Any], config: SetupConfig) -> None:
    """Remove what only the setup wizard itself needed."""
    remove_dependencies(manifest, config.setup_only_dependencies)
    manifest.pop(config.template_marker_key, None)


def update_manifest(
    manifest: dict[str, Any],
    answers: AnswerSet,
    resolution: ResolutionResult,
    config: SetupConfig,
) -> dict[str, Any]:
    """Apply all wizard edits to a loaded manifest, in place.

    Args:
        manifest: Parsed package.json
        answers: Collected wizard answers
        resolution: Resolved feature removals
        config: Setup configuration

    Returns:
        The same manifest object, for chaining
    """
    apply_metadata(manifest, answers, config)

    removed_deps = remove_dependencies(manifest, resolution.deps_to_remove)
    if removed_deps:
        logger.info(f"Removed dependencies: {', '.join(removed_deps)}")

    removed_scripts = remove_scripts(manifest, resolution.scripts_to_remove)
    if removed_scripts:
        logger.info(f"Removed scripts: {', '.join(removed_scripts)}")

    strip_setup_artifacts(manifest, config)
    return manifest
