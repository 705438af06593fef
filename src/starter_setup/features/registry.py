"""Feature registry for the starter template.

Each optional feature of the template is described by a FeatureDescriptor:
the files it owns, the devDependencies it pulls in, and the package.json
scripts it adds. The registry is static for the duration of a run; extra
entries may be declared in the setup configuration file.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureDescriptor:
    """An optional, independently removable bundle of template files."""

    key: str
    label: str
    files: tuple[str, ...]
    dev_dependencies: tuple[str, ...] = ()
    scripts: tuple[str, ...] | None = None
    hint: str | None = None

    def __post_init__(self):
        if not self.key:
            raise ValueError("Feature key cannot be empty")
        if not self.files:
            raise ValueError(f"Feature '{self.key}' must own at least one path")


class FeatureRegistry:
    """Ordered, read-only mapping of feature keys to descriptors."""

    def __init__(self, features: Iterable[FeatureDescriptor]):
        self._features: dict[str, FeatureDescriptor] = {}
        for feature in features:
            self._features[feature.key] = feature

    def lookup(self, key: str) -> FeatureDescriptor | None:
        return self._features.get(key)

    def keys(self) -> tuple[str, ...]:
        return tuple(self._features)

    def __iter__(self) -> Iterator[FeatureDescriptor]:
        return iter(self._features.values())

    def __contains__(self, key: object) -> bool:
        return key in self._features

    def __len__(self) -> int:
        return len(self._features)

    def __repr__(self) -> str:
        return f"FeatureRegistry({list(self._features)})"


GIT_HOOKS = "gitHooks"
GITHUB_TEMPLATES = "githubTemplates"
GITHUB_CI = "githubCI"
MARKDOWNLINT = "markdownlint"
CODE_OF_CONDUCT = "codeOfConduct"
CLAUDE_CODE = "claudeCode"

DEFAULT_FEATURES = (
    FeatureDescriptor(
        key=GIT_HOOKS,
        label="Git hooks (Husky + commitlint + lint-staged)",
        hint="pre-commit testing, commit message linting",
        files=(".husky", "commitlint.config.js", ".lintstagedrc"),
        dev_dependencies=(
            "@commitlint/cli",
            "@commitlint/config-conventional",
            "husky",
            "lint-staged",
        ),
        scripts=("prepare",),
    ),
    FeatureDescriptor(
        key=GITHUB_TEMPLATES,
        label="GitHub issue & PR templates",
        hint="bug report, feature request, PR template",
        files=(".github/ISSUE_TEMPLATE", ".github/PULL_REQUEST_TEMPLATE.md"),
    ),
    FeatureDescriptor(
        key=GITHUB_CI,
        label="GitHub Actions CI workflow",
        hint="automated testing on push/PR",
        files=(".github/workflows",),
    ),
    FeatureDescriptor(
        key=MARKDOWNLINT,
        label="Markdownlint",
        hint="markdown file linting",
        files=(".markdownlint.json", ".markdownlintignore"),
        dev_dependencies=("markdownlint-cli",),
    ),
    FeatureDescriptor(
        key=CODE_OF_CONDUCT,
        label="Code of Conduct",
        hint="Contributor Covenant",
        files=("CODE_OF_CONDUCT.md",),
    ),
    FeatureDescriptor(
        key=CLAUDE_CODE,
        label="Claude Code configuration",
        hint="CLAUDE.md with Bun API guidelines",
        files=("CLAUDE.md",),
    ),
)

DEFAULT_REGISTRY = FeatureRegistry(DEFAULT_FEATURES)


def build_registry(extra=()) -> FeatureRegistry:
    """Build a registry from the defaults plus configured entries.

    Args:
        extra: Objects with ``key``, ``label``, ``hint``, ``files``,
            ``dev_dependencies`` and ``scripts`` attributes (normally
            ``FeatureEntry`` models from the setup configuration). An entry
            reusing a default key replaces that default in place.

    Returns:
        FeatureRegistry with the defaults first, then new keys in order

    Raises:
        ValueError: If an entry has an empty key or no files
    """
    features = {feature.key: feature for feature in DEFAULT_FEATURES}
    for entry in extra:
        features[entry.key] = FeatureDescriptor(
            key=entry.key,
            label=entry.label,
            hint=entry.hint,
            files=tuple(entry.files),
            dev_dependencies=tuple(entry.dev_dependencies),
            scripts=tuple(entry.scripts) if entry.scripts is not None else None,
        )
    return FeatureRegistry(features.values())
