"""Tests for the starter-setup command."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner
from conftest import read_json_file

from starter_setup.cli.main import CANCEL_MESSAGE, cli, main
from starter_setup.cli.wizard import SetupCancelled
from starter_setup.models import AnswerSet, License


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def in_project(template_project, monkeypatch):
    monkeypatch.chdir(template_project)
    return template_project


@pytest.fixture
def mock_install():
    with patch("starter_setup.pipeline.subprocess.run") as mock:
        mock.return_value.returncode = 0
        mock.return_value.stderr = ""
        yield mock


class TestCli:
    """Test the command end to end with canned answers."""

    def test_successful_run(self, runner, in_project, mock_install):
        answers = AnswerSet(description="Demo", selected_features={"githubCI"})
        with patch("starter_setup.cli.main.collect_answers", return_value=answers) as mock_collect:
            result = runner.invoke(cli)

        assert result.exit_code == 0, result.output
        assert mock_collect.call_args.args[0] == "my-app"
        assert "Project configured!" in result.output
        assert "GitHub Actions CI workflow" in result.output
        assert "bun start" in result.output
        assert not (in_project / "setup").exists()
        assert read_json_file(in_project / "package.json")["description"] == "Demo"

    def test_license_advisory_shown(self, runner, in_project, mock_install):
        answers = AnswerSet(license=License.GPL_3)
        with patch("starter_setup.cli.main.collect_answers", return_value=answers):
            result = runner.invoke(cli)

        assert result.exit_code == 0
        assert "License set to GPL-3.0-only" in result.output

    def test_failed_install_is_a_warning(self, runner, in_project, mock_install):
        mock_install.return_value.returncode = 1
        with patch("starter_setup.cli.main.collect_answers", return_value=AnswerSet()):
            result = runner.invoke(cli)

        assert result.exit_code == 0
        assert "exited with code 1" in result.output
        assert "manually" in result.output

    def test_cancel_exits_cleanly(self, runner, in_project):
        with patch("starter_setup.cli.main.collect_answers", side_effect=SetupCancelled()):
            result = runner.invoke(cli)

        assert result.exit_code == 0
        assert CANCEL_MESSAGE in result.output
        assert (in_project / "setup").exists()
        assert (in_project / ".husky").exists()

    def test_failure_exits_with_error(self, runner, in_project):
        with (
            patch("starter_setup.cli.main.collect_answers", return_value=AnswerSet()),
            patch("starter_setup.cli.main.run_setup", side_effect=OSError("disk full")),
        ):
            result = runner.invoke(cli)

        assert result.exit_code == 1
        assert "Setup failed: disk full" in result.output

    def test_missing_manifest_fails(self, runner, in_project):
        (in_project / "package.json").unlink()
        with patch("starter_setup.cli.main.collect_answers", return_value=AnswerSet()):
            result = runner.invoke(cli)

        assert result.exit_code == 1
        assert "Setup failed:" in result.output

    def test_invalid_config_fails_before_prompting(self, runner, in_project):
        (in_project / "setup/config.yml").write_text("unknown_option: 1\n")
        with patch("starter_setup.cli.main.collect_answers") as mock_collect:
            result = runner.invoke(cli)

        assert result.exit_code == 1
        assert "Invalid setup configuration" in result.output
        mock_collect.assert_not_called()

    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Customize this starter template" in result.output


class TestMain:
    """Test the console script entry point."""

    @pytest.fixture
    def no_args(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["starter-setup"])

    def test_keyboard_interrupt_during_run_is_a_cancel(self, in_project, no_args, capsys):
        with (
            patch("starter_setup.cli.main.collect_answers", return_value=AnswerSet()),
            patch("starter_setup.cli.main.run_setup", side_effect=KeyboardInterrupt),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert CANCEL_MESSAGE in captured.out
        assert "Aborted!" not in captured.out + captured.err

    def test_keyboard_interrupt_while_prompting(self, in_project, no_args, capsys):
        with patch("starter_setup.cli.main.collect_answers", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0
        assert CANCEL_MESSAGE in capsys.readouterr().out
        assert (in_project / "setup").exists()

    def test_unexpected_error_exits_1(self, in_project, no_args, capsys):
        with (
            patch("starter_setup.cli.main.collect_answers", return_value=AnswerSet()),
            patch("starter_setup.cli.main.run_setup", side_effect=RuntimeError("boom")),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "Setup failed: boom" in capsys.readouterr().err
