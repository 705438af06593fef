"""Tests for setup configuration loading."""

import pytest

from starter_setup.utils.config import (
    SetupConfig,
    SetupConfigError,
    _resolve_env_vars,
    find_config_file,
    load_setup_config,
)


def write_config(project_dir, text):
    path = project_dir / "setup" / "config.yml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestDefaults:
    """Test the built-in defaults."""

    def test_default_values(self):
        config = SetupConfig()

        assert config.runtime == "bun"
        assert config.install_command == ["bun", "install"]
        assert config.default_entrypoint == "src/index.ts"
        assert config.default_version == "0.1.0"
        assert config.default_features == [
            "gitHooks",
            "githubTemplates",
            "githubCI",
            "markdownlint",
            "codeOfConduct",
        ]
        assert config.setup_only_dependencies == ["@clack/prompts"]
        assert config.template_marker_key == "bun-create"
        assert config.shipped_license == "Apache-2.0"
        assert config.json_indent == "\t"
        assert config.features == []
        assert config.log.level == "WARNING"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_setup_config(tmp_path) == SetupConfig()


class TestLoadSetupConfig:
    """Test reading setup/config.yml."""

    def test_overrides(self, tmp_path):
        write_config(
            tmp_path,
            "default_version: 1.0.0\ninstall_command: [npm, install]\nlogging:\n  level: debug\n",
        )

        config = load_setup_config(tmp_path)

        assert config.default_version == "1.0.0"
        assert config.install_command == ["npm", "install"]
        assert config.log.level == "DEBUG"

    def test_extra_features(self, tmp_path):
        write_config(
            tmp_path,
            "features:\n"
            "  - key: docker\n"
            "    label: Docker\n"
            "    files: [Dockerfile, .dockerignore]\n",
        )

        config = load_setup_config(tmp_path)

        assert config.features[0].key == "docker"
        assert config.features[0].files == ["Dockerfile", ".dockerignore"]
        assert config.features[0].dev_dependencies == []

    def test_feature_without_files_is_rejected(self, tmp_path):
        write_config(tmp_path, "features:\n  - key: docker\n    label: Docker\n    files: []\n")

        with pytest.raises(SetupConfigError, match="Invalid setup configuration"):
            load_setup_config(tmp_path)

    def test_unknown_key_is_rejected(self, tmp_path):
        write_config(tmp_path, "runtiem: node\n")

        with pytest.raises(SetupConfigError):
            load_setup_config(tmp_path)

    def test_unknown_log_level_is_rejected(self, tmp_path):
        write_config(tmp_path, "logging:\n  level: chatty\n")

        with pytest.raises(SetupConfigError):
            load_setup_config(tmp_path)

    def test_invalid_yaml(self, tmp_path):
        write_config(tmp_path, "runtime: [bun\n")

        with pytest.raises(SetupConfigError, match="Error parsing YAML"):
            load_setup_config(tmp_path)

    def test_non_mapping(self, tmp_path):
        write_config(tmp_path, "- bun\n")

        with pytest.raises(SetupConfigError, match="must contain a mapping"):
            load_setup_config(tmp_path)

    def test_empty_file_gives_defaults(self, tmp_path):
        write_config(tmp_path, "")

        assert load_setup_config(tmp_path).runtime == "bun"

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yml"
        path.write_text("runtime: node\n")

        assert load_setup_config(tmp_path, path).runtime == "node"

    def test_env_var_resolution(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEMPLATE_AUTHOR_RUNTIME", "deno")
        write_config(tmp_path, "runtime: ${TEMPLATE_AUTHOR_RUNTIME}\n")

        assert load_setup_config(tmp_path).runtime == "deno"

    def test_setup_dir_is_not_configurable(self, tmp_path):
        write_config(tmp_path, "setup_dir: tooling\n")

        with pytest.raises(SetupConfigError, match="setup_dir"):
            load_setup_config(tmp_path)


class TestHelpers:
    """Test lookup and substitution helpers."""

    def test_find_config_file(self, template_project):
        assert find_config_file(template_project) == template_project / "setup" / "config.yml"

    def test_find_config_file_missing(self, tmp_path):
        assert find_config_file(tmp_path) is None

    def test_env_default(self, monkeypatch):
        monkeypatch.delenv("STARTER_SETUP_UNSET", raising=False)

        assert _resolve_env_vars("${STARTER_SETUP_UNSET:-fallback}") == "fallback"

    def test_unset_env_var_left_untouched(self, monkeypatch):
        monkeypatch.delenv("STARTER_SETUP_UNSET", raising=False)

        assert _resolve_env_vars({"a": ["$STARTER_SETUP_UNSET"]}) == {"a": ["$STARTER_SETUP_UNSET"]}

    def test_non_strings_pass_through(self):
        assert _resolve_env_vars({"n": 2, "flag": True}) == {"n": 2, "flag": True}
