"""
Port and types for shell commands, independent of how output is rendered.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, TypedDict

from fileshell.entities.Session import Session


class CommandSpec(TypedDict):
    """Specification of a shell command, used for help text and dispatch."""

    name: str
    usage: str
    description: str


class OutputLine(NamedTuple):
    text: str
    style: Optional[str] = None  # theme style name, e.g. "directory"


@dataclass
class CommandResult:
    """Lines printed by one command and whether the shell loop should continue."""

    lines: list[OutputLine] = field(default_factory=list)
    keep_running: bool = True

    def add(self, text: str, style: Optional[str] = None) -> None:
        self.lines.append(OutputLine(text, style))

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)


class CommandsHandlerPort(ABC):
    """
    Port interface for shell command handlers.

    Exposes the available commands and dispatches an already split command line to them.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get a list of available commands.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def dispatch(
        self, session: Session, name: str, arguments: list[str]
    ) -> CommandResult:
        """
        Run one command against a session.

        Args:
            session: Session the command runs in
            name: Command name
            arguments: Remaining tokens of the command line

        Returns:
            Result of the command

        Raises:
            ValueError: If the command name is unknown
            FileRepositoryError: If the command fails
        """
        pass
