import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from fileshell.config.settings import settings
from fileshell.container import container
from fileshell.entities.Session import Session
from fileshell.exceptions import FileRepositoryError, OperationFailedError
from fileshell.ports.shell.commands_port import CommandResult, CommandsHandlerPort

THEME = Theme({"directory": "bold blue", "error": "red"})


def make_console(color: bool = True, **kwargs) -> Console:
    return Console(
        theme=THEME, no_color=not color, highlight=False, soft_wrap=True, **kwargs
    )


class Shell:
    """Read-eval loop: one command line at a time, each run to completion."""

    def __init__(
        self,
        session: Session,
        commands: CommandsHandlerPort,
        console: Optional[Console] = None,
        prompt: str = "> ",
        logger: Optional[logging.Logger] = None,
    ):
        self._session = session
        self._commands = commands
        self._console = console or make_console()
        self._prompt = prompt
        self._logger = logger or logging.getLogger(__name__)
        self._known = {spec["name"] for spec in commands.available_commands()}

    @property
    def session(self) -> Session:
        return self._session

    def _print(self, text: str, style: Optional[str] = None) -> None:
        # Text keeps user supplied names from being parsed as console markup
        self._console.print(Text(text, style=style or ""))

    def _render(self, result: CommandResult) -> None:
        for line in result.lines:
            self._print(line.text, line.style)

    def banner(self) -> None:
        self._print("File Manager")
        self._print(f"Current directory: {self._session.current_directory}")
        self._print("Type 'help' for list of commands")

    def execute(self, line: str) -> bool:
        """
        Run one command line and print its output.

        Failures are printed, never raised, so the loop always survives a command.

        Returns:
            False once the loop should stop (after 'exit'), True otherwise
        """
        tokens = line.split()
        if not tokens:
            return True
        name, arguments = tokens[0], tokens[1:]
        if name not in self._known:
            self._print(f"Unknown command: {name}", "error")
            return True

        with self._session.lock:
            try:
                result = self._commands.dispatch(self._session, name, arguments)
            except OperationFailedError as e:
                self._print(f"Error: {e}", "error")
                return True
            except FileRepositoryError as e:
                self._print(str(e), "error")
                return True
            except Exception as e:
                self._logger.error(f"Unexpected error running '{name}': {e}", exc_info=True)
                self._print(f"Error: {e}", "error")
                return True

        self._render(result)
        return result.keep_running

    def run(self) -> int:
        """Interactive loop until 'exit' or end of input."""
        self.banner()
        while True:
            try:
                line = self._console.input(f"\n{self._prompt}")
            except EOFError:
                self._print("Exiting...")
                return 0
            except KeyboardInterrupt:
                # Drop the current line, keep the session
                self._console.print()
                continue
            if not self.execute(line):
                return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fileshell",
        description="Interactive shell for navigating and manipulating the local filesystem.",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        help="Initial current directory (default: FILESHELL_START_DIR or the launch directory)",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        help="Run a command line and exit instead of starting the prompt (repeatable)",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="Disable colored output",
    )
    parser.set_defaults(color=settings.color)
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging threshold for diagnostics written to stderr",
    )

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    console = make_console(color=args.color)
    try:
        session = container.create_session(args.start_dir)
    except FileRepositoryError as e:
        print(f"Invalid start directory: {e}", file=sys.stderr)
        return 2

    shell = Shell(
        session,
        container.get_commands_handler(),
        console=console,
        prompt=settings.prompt,
        logger=logger,
    )
    if args.command:
        for line in args.command:
            if not shell.execute(line):
                break
        return 0
    return shell.run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
