"""
Tests for the interactive shell loop and the command-line entry point.
"""

import io
import os
from unittest.mock import MagicMock, patch

import pytest

from fileshell.cli import Shell, main, make_console
from fileshell.exceptions import OperationFailedError
from fileshell.ports.shell.commands_port import CommandsHandlerPort
from fileshell.use_cases.shell.commands_handler import COMMANDS


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def shell(session, dependency_container, output, mock_logger):
    console = make_console(color=False, file=output, width=200)
    return Shell(
        session,
        dependency_container.get_commands_handler(),
        console=console,
        logger=mock_logger,
    )


def _mock_handler() -> MagicMock:
    handler = MagicMock(spec=CommandsHandlerPort)
    handler.available_commands.return_value = list(COMMANDS)
    return handler


class TestShell:
    """Test cases for the Shell loop."""

    def test_banner(self, shell, output, temp_directory):
        shell.banner()
        assert output.getvalue().splitlines() == [
            "File Manager",
            f"Current directory: {temp_directory}",
            "Type 'help' for list of commands",
        ]

    def test_empty_line(self, shell, output):
        assert shell.execute("   ") is True
        assert output.getvalue() == ""

    def test_unknown_command(self, shell, output):
        assert shell.execute("pwd") is True
        assert output.getvalue().strip() == "Unknown command: pwd"

    def test_command_output(self, shell, output, temp_directory):
        assert shell.execute("cd subdir") is True
        assert output.getvalue().strip() == (
            f"Current directory: {os.path.join(temp_directory, 'subdir')}"
        )
        assert shell.session.current_directory == os.path.join(temp_directory, "subdir")

    def test_extra_whitespace_between_tokens(self, shell, temp_directory):
        shell.execute("  mkdir    spaced  ")
        assert os.path.isdir(os.path.join(temp_directory, "spaced"))

    def test_reported_error_keeps_running(self, shell, output):
        assert shell.execute("cd") is True
        assert output.getvalue().strip() == "Usage: cd [path]"

    def test_already_exists_message(self, shell, output):
        shell.execute("mkdir x")
        shell.execute("mkdir x")
        assert output.getvalue().splitlines()[-1].startswith("Directory already exists: ")

    def test_operation_failed_uses_error_prefix(self, session, output, mock_logger):
        handler = _mock_handler()
        handler.dispatch.side_effect = OperationFailedError("Permission denied")
        shell = Shell(session, handler, console=make_console(False, file=output))

        assert shell.execute("rm locked") is True
        assert output.getvalue().strip() == "Error: Permission denied"

    def test_unexpected_error_is_caught(self, session, output, mock_logger):
        handler = _mock_handler()
        handler.dispatch.side_effect = RuntimeError("boom")
        shell = Shell(
            session, handler, console=make_console(False, file=output), logger=mock_logger
        )

        assert shell.execute("ls") is True
        assert output.getvalue().strip() == "Error: boom"
        mock_logger.error.assert_called_once()

    def test_markup_in_names_is_printed_verbatim(self, shell, output, temp_directory):
        os.mkdir(os.path.join(temp_directory, "[bold]x"))
        shell.execute("ls")
        assert "[bold]x/" in output.getvalue().splitlines()

    def test_exit_stops_loop(self, shell, output):
        assert shell.execute("exit") is False
        assert output.getvalue().strip() == "Exiting..."

    def test_run_until_exit(self, shell, output):
        with patch.object(shell._console, "input", side_effect=["help", "exit"]):
            assert shell.run() == 0
        assert "Available commands:" in output.getvalue()
        assert output.getvalue().splitlines()[-1] == "Exiting..."

    def test_run_until_end_of_input(self, shell, output):
        with patch.object(shell._console, "input", side_effect=EOFError):
            assert shell.run() == 0
        assert output.getvalue().splitlines()[-1] == "Exiting..."

    def test_run_survives_keyboard_interrupt(self, shell):
        with patch.object(
            shell._console, "input", side_effect=[KeyboardInterrupt, "exit"]
        ) as mock_input:
            assert shell.run() == 0
        assert mock_input.call_count == 2


class TestMain:
    """Test cases for the fileshell entry point."""

    def test_single_commands(self, temp_directory, capsys):
        code = main(
            ["--start-dir", temp_directory, "--no-color", "-c", "mkdir made", "-c", "ls"]
        )

        assert code == 0
        assert os.path.isdir(os.path.join(temp_directory, "made"))
        assert "made/" in capsys.readouterr().out.splitlines()

    def test_exit_stops_remaining_commands(self, temp_directory):
        code = main(
            ["--start-dir", temp_directory, "-c", "exit", "-c", "mkdir never"]
        )

        assert code == 0
        assert not os.path.exists(os.path.join(temp_directory, "never"))

    def test_invalid_start_directory(self, temp_directory, capsys):
        code = main(["--start-dir", os.path.join(temp_directory, "missing")])

        assert code == 2
        assert "Invalid start directory" in capsys.readouterr().err
