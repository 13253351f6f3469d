"""Unit tests for main CLI entry point (main.py).

Tests the Typer CLI application using CliRunner.
"""

import logging
from unittest.mock import MagicMock, Mock, patch

import pytest
from typer.testing import CliRunner

from src.cli.main import GETTING_STARTED_MESSAGE, VERSION, _configure_logging, app
from src.cli.models import ExitCode


runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every CLI test in an empty directory (no .xml2html.yaml)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestConfigureLogging:
    """Test cases for _configure_logging function."""

    def test_verbosity_0_sets_warning_level(self):
        """Verbosity 0 sets logging to WARNING level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(0)

            mock_app_logger.setLevel.assert_called_with(logging.WARNING)

    def test_verbosity_1_sets_info_level(self):
        """Verbosity 1 sets logging to INFO level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(1)

            mock_app_logger.setLevel.assert_called_with(logging.INFO)

    def test_verbosity_2_sets_debug_level(self):
        """Verbosity 2+ sets logging to DEBUG level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(2)

            mock_app_logger.setLevel.assert_called_with(logging.DEBUG)

    def test_configures_src_logger_only(self):
        """Only the 'src' namespace logger gets handlers."""
        root_handlers = list(logging.getLogger().handlers)

        _configure_logging(1)

        assert logging.getLogger("src").level == logging.INFO
        assert logging.getLogger("src").handlers
        assert logging.getLogger().handlers == root_handlers

    def test_logdir_creates_timestamped_file(self, tmp_path):
        """--logdir writes a timestamped log file."""
        logdir = tmp_path / "logs"

        _configure_logging(1, str(logdir))

        log_files = list(logdir.glob("xml2html_*.log"))
        assert len(log_files) == 1

    def test_repeated_calls_do_not_stack_handlers(self):
        """Configuring twice leaves a single stderr handler on the src logger."""
        _configure_logging(1)
        _configure_logging(2)

        handlers = logging.getLogger("src").handlers
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG


class TestMainCommand:
    """Test cases for the main command options."""

    def test_no_arguments_shows_getting_started(self):
        """Without inputs the getting-started text is shown."""
        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.SUCCESS
        assert GETTING_STARTED_MESSAGE in result.output

    def test_version_flag(self):
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == ExitCode.SUCCESS
        assert f"xml2html version {VERSION}" in result.output

    @patch('src.cli.main.ConvertCommand')
    @patch('src.cli.main.OutputHandler')
    def test_default_options(self, mock_output, mock_convert_cmd):
        """Inputs are passed through with config-driven defaults."""
        mock_instance = Mock()
        mock_instance.run.return_value = ExitCode.SUCCESS
        mock_convert_cmd.return_value = mock_instance

        result = runner.invoke(app, ["feed.xml", "table.xml"])

        assert result.exit_code == ExitCode.SUCCESS
        mock_instance.run.assert_called_once_with(
            ["feed.xml", "table.xml"],
            to_stdout=False,
            bundle=None,
            pretty=None,
            preview=False,
        )

    @patch('src.cli.main.ConvertCommand')
    @patch('src.cli.main.OutputHandler')
    def test_all_flags(self, mock_output, mock_convert_cmd):
        """Flags map onto ConvertCommand.run arguments."""
        mock_instance = Mock()
        mock_instance.run.return_value = ExitCode.SUCCESS
        mock_convert_cmd.return_value = mock_instance

        result = runner.invoke(app, ["-", "--stdout", "--bundle", "--raw", "--preview"])

        assert result.exit_code == ExitCode.SUCCESS
        mock_instance.run.assert_called_once_with(
            ["-"],
            to_stdout=True,
            bundle=True,
            pretty=False,
            preview=True,
        )

    @patch('src.cli.main.ConvertCommand')
    @patch('src.cli.main.OutputHandler')
    def test_stdout_sends_messages_to_stderr(self, mock_output_cls, mock_convert_cmd):
        """--stdout keeps stdout free for HTML."""
        mock_convert_cmd.return_value.run.return_value = ExitCode.SUCCESS

        runner.invoke(app, ["doc.xml", "--stdout", "-v", "2", "--no-color"])

        mock_output_cls.assert_called_once_with(verbosity=2, no_color=True, stderr=True)

    @patch('src.cli.main.ConvertCommand')
    @patch('src.cli.main.OutputHandler')
    def test_output_dir_overrides_config(self, mock_output, mock_convert_cmd, isolated_cwd):
        """--output replaces the configured output directory."""
        (isolated_cwd / ".xml2html.yaml").write_text("output_dir: from-config\n")
        mock_convert_cmd.return_value.run.return_value = ExitCode.SUCCESS

        result = runner.invoke(app, ["doc.xml", "-o", "html"])

        assert result.exit_code == ExitCode.SUCCESS
        config = mock_convert_cmd.call_args.kwargs['config']
        assert config.output_dir == "html"

    @patch('src.cli.main.ConvertCommand')
    @patch('src.cli.main.OutputHandler')
    def test_explicit_config_file(self, mock_output, mock_convert_cmd, isolated_cwd):
        """--config loads the given YAML file."""
        config_file = isolated_cwd / "custom.yaml"
        config_file.write_text("bundle: true\npretty_output: false\n")
        mock_convert_cmd.return_value.run.return_value = ExitCode.SUCCESS

        runner.invoke(app, ["doc.xml", "--config", str(config_file)])

        config = mock_convert_cmd.call_args.kwargs['config']
        assert config.bundle is True
        assert config.pretty_output is False

    @patch('src.cli.main.ConvertCommand')
    def test_missing_config_file_is_general_error(self, mock_convert_cmd):
        """An explicit config path that does not exist fails before converting."""
        result = runner.invoke(app, ["doc.xml", "--config", "missing.yaml", "--no-color"])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert "Configuration file not found" in result.output
        mock_convert_cmd.assert_not_called()

    @patch('src.cli.main.ConvertCommand')
    @patch('src.cli.main.OutputHandler')
    def test_exit_code_propagates(self, mock_output, mock_convert_cmd):
        """The command's exit code becomes the process exit code."""
        mock_convert_cmd.return_value.run.return_value = ExitCode.CONVERSION_ERROR

        result = runner.invoke(app, ["bad.xml"])

        assert result.exit_code == ExitCode.CONVERSION_ERROR

    @patch('src.cli.main.ConvertCommand')
    @patch('src.cli.main.OutputHandler')
    def test_unexpected_error_is_general_error(self, mock_output, mock_convert_cmd):
        """Unexpected exceptions are reported and exit with GENERAL_ERROR."""
        mock_convert_cmd.return_value.run.side_effect = RuntimeError("disk on fire")

        result = runner.invoke(app, ["doc.xml"])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        mock_output.return_value.error.assert_called_once()
        assert "disk on fire" in mock_output.return_value.error.call_args[0][0]


class TestMainCommandEndToEnd:
    """Test cases running real conversions through the CLI."""

    def test_converts_file_next_to_input(self, isolated_cwd):
        """A converted file is written beside its input."""
        (isolated_cwd / "list.xml").write_text("<list><item>One</item><item>Two</item></list>")

        result = runner.invoke(app, ["list.xml", "--no-color"])

        assert result.exit_code == ExitCode.SUCCESS
        html = (isolated_cwd / "list.html").read_text()
        assert '<ul class="xml-list">' in html
        assert "Conversion completed successfully" in result.output

    def test_stdout_prints_html_only(self, isolated_cwd):
        """--stdout prints the HTML and writes no file."""
        (isolated_cwd / "list.xml").write_text("<list><item>One</item><item>Two</item></list>")

        result = runner.invoke(app, ["list.xml", "--stdout", "--raw", "--no-color"])

        assert result.exit_code == ExitCode.SUCCESS
        assert '<ul class="xml-list"><li class="xml-item">One</li>' in result.stdout
        assert "Conversion Summary" not in result.stdout
        assert not (isolated_cwd / "list.html").exists()

    def test_malformed_input_exit_code(self, isolated_cwd):
        """Malformed XML exits with CONVERSION_ERROR."""
        (isolated_cwd / "bad.xml").write_text("<a><b></a>")

        result = runner.invoke(app, ["bad.xml", "--no-color"])

        assert result.exit_code == ExitCode.CONVERSION_ERROR
        assert "Invalid XML" in result.output
        assert not (isolated_cwd / "bad.html").exists()

    def test_rejected_input_exit_code(self, isolated_cwd):
        """Non-XML files exit with INPUT_ERROR."""
        (isolated_cwd / "notes.txt").write_text("<a/>")

        result = runner.invoke(app, ["notes.txt", "--no-color"])

        assert result.exit_code == ExitCode.INPUT_ERROR
        assert "Please select an XML file" in result.output

    def test_stdin_input(self):
        """'-' reads the document from standard input."""
        result = runner.invoke(
            app, ["-", "--stdout", "--raw", "--no-color"],
            input="<rss><channel><title>News</title></channel></rss>",
        )

        assert result.exit_code == ExitCode.SUCCESS
        assert "<h1>News</h1>" in result.stdout
