"""Cross-feature cleanup rules.

Some template artifacts are shared between features: ``.lintstagedrc`` is
owned by the git hooks feature but lints markdown for markdownlint, the
editor settings carry one section per feature, and the CI workflow runs
commitlint. Removing one feature therefore has to patch files owned by
another.

The rules below form an ordered table. Each rule pairs a predicate over the
final feature selection with either extra paths to delete or an in-place
edit of a shared file. Edits are no-ops when their target file is missing.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from starter_setup.features.registry import GIT_HOOKS, GITHUB_CI, GITHUB_TEMPLATES, MARKDOWNLINT
from starter_setup.manifest import read_json, write_json
from starter_setup.utils.logger import get_logger

logger = get_logger("cleanup")

LINT_STAGED_CONFIG = ".lintstagedrc"
EDITOR_SETTINGS = ".vscode/settings.json"
CI_WORKFLOW = ".github/workflows/ci.yml"
GITHUB_DIR = ".github"

# Steps in the CI workflow that only make sense with commitlint installed
COMMITLINT_STEP_PATTERNS = (
    re.compile(
        r"\n\s*- name: Validate current commit.*?run: bunx commitlint --last --verbose\n",
        re.DOTALL,
    ),
    re.compile(r"\n\s*- name: Validate PR commits.*?--verbose\n", re.DOTALL),
)

EditFunc = Callable[[Path, str | int], bool]


@dataclass(frozen=True)
class CleanupRule:
    """A guarded action reacting to a combination of selected features.

    Attributes:
        name: Short identifier used in logs and reports
        applies: Predicate over the final selection
        edit: In-place edit of a shared file; returns True when it changed the file
        remove: Extra project-relative paths to delete
    """

    name: str
    applies: Callable[[frozenset[str]], bool]
    edit: EditFunc | None = None
    remove: tuple[str, ...] = ()


def drop_json_key(relative_path: str, key: str) -> EditFunc:
    """Build an edit that deletes a top-level key from a JSON file."""

    def edit(project_dir: Path, indent: str | int = "\t") -> bool:
        path = project_dir / relative_path
        if not path.exists():
            logger.debug(f"{relative_path} not present, skipping '{key}' removal")
            return False

        document = read_json(path)
        if key not in document:
            return False

        del document[key]
        write_json(path, document, indent=indent)
        logger.info(f"Removed '{key}' from {relative_path}")
        return True

    return edit


def strip_commitlint_steps(project_dir: Path, indent: str | int = "\t") -> bool:
    """Excise the commit message validation steps from the CI workflow.

    The workflow is edited as text so comments and formatting survive.
    """
    path = project_dir / CI_WORKFLOW
    if not path.exists():
        logger.debug(f"{CI_WORKFLOW} not present, nothing to strip")
        return False

    original = path.read_text()
    workflow = original
    for pattern in COMMITLINT_STEP_PATTERNS:
        workflow = pattern.sub("\n", workflow, count=1)

    if workflow == original:
        return False

    path.write_text(workflow)
    logger.info(f"Removed commitlint steps from {CI_WORKFLOW}")
    return True


CLEANUP_RULES: tuple[CleanupRule, ...] = (
    CleanupRule(
        name="strip-markdown-from-lint-staged",
        applies=lambda s: MARKDOWNLINT not in s and GIT_HOOKS in s,
        edit=drop_json_key(LINT_STAGED_CONFIG, "*.md"),
    ),
    CleanupRule(
        name="strip-markdown-editor-settings",
        applies=lambda s: MARKDOWNLINT not in s,
        edit=drop_json_key(EDITOR_SETTINGS, "[markdown]"),
    ),
    CleanupRule(
        name="strip-commitlint-ci-steps",
        applies=lambda s: GIT_HOOKS not in s and GITHUB_CI in s,
        edit=strip_commitlint_steps,
    ),
    CleanupRule(
        name="strip-workflow-editor-settings",
        applies=lambda s: GITHUB_CI not in s,
        edit=drop_json_key(EDITOR_SETTINGS, "[github-actions-workflow]"),
    ),
    CleanupRule(
        name="remove-github-directory",
        applies=lambda s: GITHUB_TEMPLATES not in s and GITHUB_CI not in s,
        remove=(GITHUB_DIR,),
    ),
)


def apply_cleanup_edits(
    project_dir: Path, rules: Iterable[CleanupRule], indent: str | int = "\t"
) -> list[str]:
    """Run the edits of the given rules in order.

    Args:
        project_dir: Project root
        rules: Rules already known to apply (``ResolutionResult.edits``)
        indent: JSON indentation for rewritten files

    Returns:
        Names of the rules that changed a file

    Raises:
        json.JSONDecodeError: If a shared JSON file is malformed
    """
    changed = []
    for rule in rules:
        if rule.edit is None:
            continue
        if rule.edit(project_dir, indent):
            changed.append(rule.name)
    return changed
