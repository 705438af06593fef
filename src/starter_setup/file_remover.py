"""Removal of feature files from the project.

Deletes files and directories belonging to deselected features. Removal is
idempotent: paths that no longer exist are skipped silently, so a repeated
run over the same list leaves the tree unchanged.
"""

import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from starter_setup.utils.logger import get_logger

logger = get_logger("files")


def _resolve_inside(project_dir: Path, relative_path: str) -> Path:
    root = project_dir.resolve()
    target = Path(os.path.normpath(root / relative_path))
    # Only the parent is resolved, so a symlink itself is removed rather than its target
    if (
        target == root
        or not target.is_relative_to(root)
        or not target.parent.resolve().is_relative_to(root)
    ):
        raise ValueError(f"Refusing to remove path outside the project: {relative_path}")
    return target


def remove_path(project_dir: Path, relative_path: str) -> bool:
    """Delete one project-relative path if present.

    Returns:
        True if something was deleted

    Raises:
        ValueError: If the path points outside the project root
        OSError: If deletion fails
    """
    target = _resolve_inside(project_dir, relative_path)

    if target.is_symlink() or target.is_file():
        target.unlink()
    elif target.is_dir():
        shutil.rmtree(target)
    elif target.exists():
        target.unlink()
    else:
        return False

    logger.debug(f"Deleted {relative_path}")
    return True


def remove_many(project_dir: Path, paths: Iterable[str]) -> list[str]:
    """Delete each path that exists, in order.

    The first failure aborts the remaining deletions; nothing is restored.

    Args:
        project_dir: Project root
        paths: Project-relative paths; duplicates and nested entries are fine

    Returns:
        The paths that were actually deleted
    """
    removed = []
    for relative_path in paths:
        if remove_path(project_dir, relative_path):
            removed.append(relative_path)
    if removed:
        logger.info(f"Removed {len(removed)} path(s): {', '.join(removed)}")
    return removed
