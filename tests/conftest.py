"""
Pytest configuration and shared test utilities.

Provides a miniature copy of the Bun starter template so every test can
run the wizard's file operations against a realistic tree.
"""

import json
from pathlib import Path

import pytest

CI_WORKFLOW = """name: CI

on:
  push:
    branches: [main]
  pull_request:

jobs:
  check:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
        with:
          fetch-depth: 0

      - uses: oven-sh/setup-bun@v2

      - name: Install dependencies
        run: bun install --frozen-lockfile

      - name: Validate current commit (last commit) with commitlint
        if: github.event_name == 'push'
        run: bunx commitlint --last --verbose

      - name: Validate PR commits with commitlint
        if: github.event_name == 'pull_request'
        run: bunx commitlint --from ${{ github.event.pull_request.base.sha }} --to ${{ github.event.pull_request.head.sha }} --verbose

      - name: Lint
        run: bun run lint

      - name: Test
        run: bun test
"""

PACKAGE_JSON = {
    "name": "bun-starter",
    "version": "0.0.0",
    "description": "Opinionated Bun + TypeScript starter",
    "main": "src/index.ts",
    "type": "module",
    "keywords": ["bun", "typescript", "template"],
    "license": "Apache-2.0",
    "private": True,
    "author": "",
    "scripts": {
        "start": "bun src/index.ts",
        "test": "bun test",
        "lint": "biome check .",
        "format": "biome check --write .",
        "prepare": "husky",
    },
    "devDependencies": {
        "@biomejs/biome": "^1.9.4",
        "@clack/prompts": "^0.9.1",
        "@commitlint/cli": "^19.6.1",
        "@commitlint/config-conventional": "^19.6.0",
        "@types/bun": "latest",
        "husky": "^9.1.7",
        "lint-staged": "^15.3.0",
        "markdownlint-cli": "^0.43.0",
    },
    "peerDependencies": {"typescript": "^5"},
    "bun-create": {"postinstall": "bun setup/setup.ts"},
}

LINT_STAGED = {
    "*.{ts,js,json}": "biome check --write --no-errors-on-unmatched",
    "*.md": "markdownlint --fix",
}

EDITOR_SETTINGS = {
    "editor.formatOnSave": True,
    "editor.defaultFormatter": "biomejs.biome",
    "[markdown]": {"editor.defaultFormatter": "DavidAnson.vscode-markdownlint"},
    "[github-actions-workflow]": {"editor.defaultFormatter": "redhat.vscode-yaml"},
}

TEMPLATE_FILES = {
    ".husky/pre-commit": "bunx lint-staged\nbun test\n",
    ".husky/commit-msg": "bunx --no -- commitlint --edit $1\n",
    "commitlint.config.js": 'export default { extends: ["@commitlint/config-conventional"] };\n',
    ".github/ISSUE_TEMPLATE/bug_report.md": "---\nname: Bug report\n---\n",
    ".github/ISSUE_TEMPLATE/feature_request.md": "---\nname: Feature request\n---\n",
    ".github/PULL_REQUEST_TEMPLATE.md": "## Summary\n",
    ".github/workflows/ci.yml": CI_WORKFLOW,
    ".markdownlint.json": '{\n\t"default": true\n}\n',
    ".markdownlintignore": "node_modules\n",
    "CODE_OF_CONDUCT.md": "# Contributor Covenant Code of Conduct\n",
    "CLAUDE.md": "Default to using Bun instead of Node.js.\n",
    "LICENSE": "Apache License\nVersion 2.0, January 2004\n",
    "README.md": "# bun-starter\n\nTemplate README\n",
    "src/index.ts": 'console.log("Hello via Bun!");\n',
    "setup/config.yml": "runtime: bun\n",
}


def write_json_file(path: Path, document: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent="\t") + "\n")


def make_template_project(root: Path) -> Path:
    """Create a miniature starter template under ``root``.

    Returns:
        The project root
    """
    root.mkdir(parents=True, exist_ok=True)
    write_json_file(root / "package.json", PACKAGE_JSON)
    write_json_file(root / ".lintstagedrc", LINT_STAGED)
    write_json_file(root / ".vscode/settings.json", EDITOR_SETTINGS)

    for relative_path, content in TEMPLATE_FILES.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)

    return root


def read_json_file(path: Path) -> dict:
    return json.loads(path.read_text())


@pytest.fixture
def template_project(tmp_path):
    """A fresh template clone named ``my-app``."""
    return make_template_project(tmp_path / "my-app")


@pytest.fixture
def all_features():
    from starter_setup.features.registry import DEFAULT_REGISTRY

    return frozenset(DEFAULT_REGISTRY.keys())
