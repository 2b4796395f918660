"""Tests for the main application orchestrator in flagsift."""

import pytest

from flagsift.application import Application, main, render_report
from flagsift.classification_result import ClassificationResult
from flagsift.exceptions import ConfigNotFoundError, InvalidConfigError


class TestRenderReport:
    """Tests for report rendering."""

    def test_render_report(self):
        argv = ["myexe", "-b", "--", "-a", "2"]
        result = ClassificationResult(
            ["myexe", "-a", "2"], {"-a": False, "-b": True}, 1, True
        )
        assert render_report(argv, result) == [
            "argc: 5",
            "arg: myexe",
            "arg: -b",
            "arg: --",
            "arg: -a",
            "arg: 2",
            "positional: myexe",
            "positional: -a",
            "positional: 2",
            "flag: -a=false",
            "flag: -b=true",
        ]

    def test_render_report_empty(self):
        assert render_report([], ClassificationResult([], {})) == ["argc: 0"]


class TestApplicationUnit:
    """Unit tests for the Application class."""

    def test_application_initialization_with_defaults(self):
        app = Application()
        assert app.config_manager is not None
        assert app.classifier is not None

    def test_application_initialization_with_custom_components(self, mocker):
        mock_config_manager = mocker.Mock()
        mock_classifier = mocker.Mock()
        app = Application(
            config_manager=mock_config_manager, classifier=mock_classifier
        )
        assert app.config_manager == mock_config_manager
        assert app.classifier == mock_classifier

    def test_run_classifies_with_loaded_registry(self, mocker, capsys):
        mock_config_manager = mocker.Mock()
        mock_config_manager.load_registry.return_value = {"-a": False, "-b": False}
        app = Application(config_manager=mock_config_manager)

        exit_code = app.run(["myexe", "-b", "--", "-a", "2"])

        assert exit_code == 0
        output = capsys.readouterr().out.splitlines()
        assert output[0] == "argc: 5"
        assert "positional: myexe" in output
        assert "positional: -a" in output
        assert "positional: 2" in output
        assert "flag: -a=false" in output
        assert "flag: -b=true" in output

    def test_run_self_check(self, mocker, capsys):
        mock_config_manager = mocker.Mock()
        app = Application(config_manager=mock_config_manager)

        assert app.run(["myexe", "-test"]) == 0
        mock_config_manager.load_registry.assert_not_called()
        assert capsys.readouterr().out == ""

    def test_run_self_check_failure(self, mocker):
        failing = mocker.Mock(exit_code=1, checks=3, failures=["x"])
        mocker.patch("flagsift.application.run_self_checks", return_value=failing)
        assert Application().run(["myexe", "-test"]) == 1

    def test_run_propagates_config_errors(self, mocker):
        mock_config_manager = mocker.Mock()
        mock_config_manager.load_registry.side_effect = InvalidConfigError("f", 1)
        app = Application(config_manager=mock_config_manager)
        with pytest.raises(InvalidConfigError):
            app.run(["myexe"])


class TestMain:
    """Tests for exit status mapping in main()."""

    def test_main_success(self, mocker, isolated_env, capsys):
        mocker.patch("sys.argv", ["myexe", "-a=1", "file"])
        assert main() == 0
        output = capsys.readouterr().out
        assert "positional: file" in output
        assert "flag: -a=true" in output

    def test_main_flagsift_error(self, mocker, caplog):
        mocker.patch("sys.argv", ["myexe"])
        mocker.patch(
            "flagsift.application.ConfigManager.load_registry",
            side_effect=ConfigNotFoundError("/missing.conf"),
        )
        assert main() == 1
        assert "Config file not found: /missing.conf" in caplog.text

    def test_main_unexpected_error(self, mocker, caplog):
        mocker.patch("sys.argv", ["myexe"])
        mocker.patch(
            "flagsift.application.ArgumentClassifier.parse",
            side_effect=RuntimeError("boom"),
        )
        mocker.patch(
            "flagsift.application.ConfigManager.load_registry", return_value={}
        )
        assert main() == 2
        assert "Unexpected error: boom" in caplog.text

    def test_main_unreadable_config(
        self, mocker, isolated_env, monkeypatch, caplog
    ):
        config_path = isolated_env / "flags.conf"
        config_path.write_text("-a=true\n")
        monkeypatch.setenv("FLAGSIFT_CONFIG", str(config_path))
        mocker.patch("sys.argv", ["myexe"])
        mocker.patch("builtins.open", side_effect=PermissionError("denied"))

        assert main() == 1
        assert "Failed to read config: denied" in caplog.text
        assert "Unexpected error" not in caplog.text
