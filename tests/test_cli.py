"""Tests for the click command."""

import json
import os
import pytest
from unittest.mock import patch
from click.testing import CliRunner

from wpr.cli import main
from wpr.core.models import DONE, DEFAULT_BLACKLIST


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(temp_workspace, monkeypatch):
    root = temp_workspace / "project"
    root.mkdir()
    (root / "a.txt").write_text("alpha content\n")
    (root / "b.txt").write_text("beta content\n")
    monkeypatch.chdir(root)
    return root


class TestConfigFlag:
    def test_creates_default_config(self, runner, project):
        result = runner.invoke(main, ["--config"])

        assert result.exit_code == 0
        assert "Created default wpr.conf" in result.output
        data = json.loads((project / "wpr.conf").read_text())
        assert data == {"whitelist": [], "blacklist": DEFAULT_BLACKLIST}

    def test_existing_config_is_kept(self, runner, project):
        (project / "wpr.conf").write_text('{"whitelist": ["src"]}')

        result = runner.invoke(main, ["--config"])

        assert result.exit_code == 0
        assert "already exists" in result.output
        assert json.loads((project / "wpr.conf").read_text()) == {"whitelist": ["src"]}


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
class TestUninstallFlag:
    def test_removes_symlink(self, runner, project, temp_workspace, monkeypatch):
        link = temp_workspace / "wpr-link"
        os.symlink(project / "a.txt", link)
        monkeypatch.setenv("WPR_LINK_PATH", str(link))

        result = runner.invoke(main, ["--uninstall"])

        assert result.exit_code == 0
        assert "Successfully removed symlink" in result.output
        assert not os.path.lexists(link)

    def test_no_symlink(self, runner, project, temp_workspace, monkeypatch):
        monkeypatch.setenv("WPR_LINK_PATH", str(temp_workspace / "missing-link"))

        result = runner.invoke(main, ["--uninstall"])

        assert result.exit_code == 0
        assert "No symlink found" in result.output


class TestInteractiveRun:
    def test_writes_document(self, runner, project, scripted, pick):
        responder = scripted(answers=["", "", "Test Run"], choices=[pick("a.txt"), pick(DONE)])

        with patch("wpr.cli.TerminalResponder", return_value=responder):
            result = runner.invoke(main, ["--no-install-check", "--no-tokens"])

        assert result.exit_code == 0, result.output
        assert "DOCUMENT WRITTEN" in result.output
        assert "TOTAL TOKENS" not in result.output
        content = (project / "wpr" / "test-run.md").read_text()
        assert "## a.txt" in content
        assert "## b.txt" not in content

    def test_read_error_exits_nonzero(self, runner, project, scripted, pick):
        def delete_then_finish(options):
            (project / "a.txt").unlink()
            return DONE

        responder = scripted(answers=["", "", "Test Run"], choices=[pick("a.txt"), delete_then_finish])

        with patch("wpr.cli.TerminalResponder", return_value=responder):
            result = runner.invoke(main, ["--no-install-check", "--no-tokens"])

        assert result.exit_code == 1
        assert "Cannot read file: a.txt" in result.output
        assert not (project / "wpr").exists()

    def test_bad_config_exits_nonzero(self, runner, project, scripted):
        (project / "wpr.conf").write_text("{")

        with patch("wpr.cli.TerminalResponder", return_value=scripted()):
            result = runner.invoke(main, ["--no-install-check", "--no-tokens"])

        assert result.exit_code == 1
        assert "Invalid configuration file" in result.output

    def test_install_failure_is_only_a_warning(self, runner, project, scripted, pick, temp_workspace, monkeypatch):
        blocker = temp_workspace / "taken"
        blocker.write_text("not a link")
        monkeypatch.setenv("WPR_LINK_PATH", str(blocker))
        responder = scripted(answers=["", "Go"], choices=[pick(DONE)], confirm_answer=True)

        with patch("wpr.cli.TerminalResponder", return_value=responder), \
                patch("wpr.cli.resolve_script", return_value=str(project / "a.txt")), \
                patch("wpr.installer.shutil.which", return_value=None):
            result = runner.invoke(main, ["--no-tokens"])

        assert result.exit_code == 0, result.output
        assert "Failed to create symlink" in result.output
        assert (project / "wpr" / "go.md").exists()

    def test_keyboard_interrupt(self, runner, project):
        with patch("wpr.cli.WprRunner") as mock_runner:
            mock_runner.return_value.run.side_effect = KeyboardInterrupt
            result = runner.invoke(main, ["--no-install-check"])

        assert result.exit_code == 1
        assert "TERMINATED BY USER" in result.output

    def test_module_run_skips_install_offer(self, runner, project, scripted, pick, monkeypatch):
        monkeypatch.setattr("sys.argv", [str(project / "cli.py")])
        responder = scripted(answers=["", "Go"], choices=[pick(DONE)], confirm_answer=True)

        with patch("wpr.cli.TerminalResponder", return_value=responder), \
                patch("wpr.cli.ensure_installed") as mock_ensure:
            result = runner.invoke(main, ["--no-tokens"])

        assert result.exit_code == 0, result.output
        mock_ensure.assert_not_called()
        assert (project / "wpr" / "go.md").exists()
