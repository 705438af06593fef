"""Feature resolution.

Turns a feature selection into the concrete set of changes to make: the
files to delete, the devDependencies and scripts to drop from
``package.json``, and the cross-feature cleanup edits to run. Resolution is
a pure computation over the registry; nothing here touches the filesystem.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from starter_setup.features.cleanup_rules import CLEANUP_RULES, CleanupRule
from starter_setup.features.registry import DEFAULT_REGISTRY, FeatureRegistry
from starter_setup.utils.logger import get_logger

logger = get_logger("resolution")


def _covers(path: str, kept_paths) -> bool:
    """True if deleting ``path`` would also delete one of ``kept_paths``."""
    prefix = path.rstrip("/") + "/"
    return any(kept == path or kept.startswith(prefix) for kept in kept_paths)


@dataclass(frozen=True)
class ResolutionResult:
    """Everything a selection implies for the project.

    ``files_to_remove`` may contain duplicates or nested paths; removal is
    idempotent so they are harmless.
    """

    selected: frozenset[str]
    deselected: tuple[str, ...]
    files_to_remove: tuple[str, ...]
    deps_to_remove: frozenset[str]
    scripts_to_remove: frozenset[str]
    edits: tuple[CleanupRule, ...] = ()

    @property
    def needs_reinstall(self) -> bool:
        return bool(self.deps_to_remove)


def resolve(
    selected: Iterable[str],
    registry: FeatureRegistry = DEFAULT_REGISTRY,
    rules: Iterable[CleanupRule] = CLEANUP_RULES,
) -> ResolutionResult:
    """Resolve a feature selection against the registry.

    Args:
        selected: Keys of the features to keep
        registry: Feature registry to resolve against
        rules: Ordered cross-feature cleanup rules

    Returns:
        ResolutionResult for the selection

    Examples:
        >>> result = resolve({"githubCI"})
        >>> ".husky" in result.files_to_remove
        True
        >>> ".github" in result.files_to_remove
        False
    """
    selection = frozenset(selected)
    deselected = tuple(key for key in registry.keys() if key not in selection)

    files: list[str] = []
    deps: set[str] = set()
    scripts: set[str] = set()

    for key in deselected:
        feature = registry.lookup(key)
        files.extend(feature.files)
        deps.update(feature.dev_dependencies)
        if feature.scripts:
            scripts.update(feature.scripts)

    kept_paths = [
        path for feature in registry if feature.key in selection for path in feature.files
    ]

    edits = []
    for rule in rules:
        if not rule.applies(selection):
            continue
        logger.debug(f"Cleanup rule '{rule.name}' applies")
        files.extend(rule.remove)
        if rule.edit is not None:
            edits.append(rule)

    # Shared directories stay while a selected feature still owns something inside them
    protected = [path for path in files if _covers(path, kept_paths)]
    if protected:
        logger.debug(f"Keeping paths of selected features: {', '.join(protected)}")
        files = [path for path in files if path not in protected]

    return ResolutionResult(
        selected=selection,
        deselected=deselected,
        files_to_remove=tuple(files),
        deps_to_remove=frozenset(deps),
        scripts_to_remove=frozenset(scripts),
        edits=tuple(edits),
    )
