"""
Shell commands mapped to the Files use cases.
"""

import logging
from typing import Callable, Optional

from typing_extensions import override

from fileshell.entities.DirectoryEntry import DirectoryEntry
from fileshell.entities.Session import Session
from fileshell.exceptions import UsageError
from fileshell.ports.shell.commands_port import (
    CommandResult,
    CommandsHandlerPort,
    CommandSpec,
    OutputLine,
)
from fileshell.use_cases.files.change_directory import ChangeDirectoryUseCase
from fileshell.use_cases.files.copy_file import CopyFileUseCase
from fileshell.use_cases.files.file_info import FileInfoUseCase
from fileshell.use_cases.files.find_entries import FindEntriesUseCase
from fileshell.use_cases.files.list_directory import ListDirectoryUseCase
from fileshell.use_cases.files.make_directory import MakeDirectoryUseCase
from fileshell.use_cases.files.move_entry import MoveEntryUseCase
from fileshell.use_cases.files.remove_entry import RemoveEntryUseCase

DETAILS_FLAG = "-i"
FORCE_FLAG = "-f"

COMMANDS: list[CommandSpec] = [
    {
        "name": "ls",
        "usage": "ls [-i]",
        "description": "list files in current directory (-i for details)",
    },
    {"name": "cd", "usage": "cd [path]", "description": "change directory"},
    {"name": "mkdir", "usage": "mkdir [name]", "description": "create new directory"},
    {"name": "rm", "usage": "rm [name]", "description": "remove file or directory"},
    {
        "name": "mv",
        "usage": "mv [src] [dest] [-f]",
        "description": "move/rename file (-f to force)",
    },
    {
        "name": "cp",
        "usage": "cp [src] [dest] [-f]",
        "description": "copy file (-f to force)",
    },
    {"name": "finfo", "usage": "finfo [name]", "description": "show file info"},
    {
        "name": "find",
        "usage": "find [name]",
        "description": "search for file in current directory and subdirectories",
    },
    {"name": "help", "usage": "help", "description": "show this help"},
    {"name": "exit", "usage": "exit", "description": "exit file manager"},
]


class ShellCommandsHandler(CommandsHandlerPort):
    """Handler turning command lines into use case calls and output lines."""

    def __init__(
        self,
        list_directory_uc: ListDirectoryUseCase,
        change_directory_uc: ChangeDirectoryUseCase,
        make_directory_uc: MakeDirectoryUseCase,
        remove_entry_uc: RemoveEntryUseCase,
        move_entry_uc: MoveEntryUseCase,
        copy_file_uc: CopyFileUseCase,
        file_info_uc: FileInfoUseCase,
        find_entries_uc: FindEntriesUseCase,
        date_format: str = "%Y-%m-%d %H:%M:%S",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the shell commands handler.

        Args:
            list_directory_uc: Use case behind ls
            change_directory_uc: Use case behind cd
            make_directory_uc: Use case behind mkdir
            remove_entry_uc: Use case behind rm
            move_entry_uc: Use case behind mv
            copy_file_uc: Use case behind cp
            file_info_uc: Use case behind finfo
            find_entries_uc: Use case behind find
            date_format: strftime format for timestamps
            logger: Logger instance to use for logging
        """
        self._list_directory_uc = list_directory_uc
        self._change_directory_uc = change_directory_uc
        self._make_directory_uc = make_directory_uc
        self._remove_entry_uc = remove_entry_uc
        self._move_entry_uc = move_entry_uc
        self._copy_file_uc = copy_file_uc
        self._file_info_uc = file_info_uc
        self._find_entries_uc = find_entries_uc
        self._date_format = date_format
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[
            str, Callable[[Session, list[str]], CommandResult]
        ] = {
            "ls": self._handle_ls,
            "cd": self._handle_cd,
            "mkdir": self._handle_mkdir,
            "rm": self._handle_rm,
            "mv": self._handle_mv,
            "cp": self._handle_cp,
            "finfo": self._handle_finfo,
            "find": self._handle_find,
            "help": self._handle_help,
            "exit": self._handle_exit,
        }
        self._usages = {spec["name"]: spec["usage"] for spec in COMMANDS}

    # ------------------------- internal helpers -------------------------
    def _require(self, name: str, arguments: list[str], count: int) -> None:
        if len(arguments) < count:
            raise UsageError(f"Usage: {self._usages[name]}")

    def _parse_force(self, name: str, arguments: list[str]) -> bool:
        """Validate '<src> <dst> [-f]' and return whether -f was given."""
        self._require(name, arguments, 2)
        extra = arguments[2:]
        if not extra:
            return False
        if extra == [FORCE_FLAG]:
            return True
        raise UsageError(f"Usage: {self._usages[name]}")

    def _format_time(self, entry: DirectoryEntry) -> str:
        return entry.modified.strftime(self._date_format)

    def _format_detailed(self, entry: DirectoryEntry) -> str:
        marker = "[DIR]" if entry.is_dir else ""
        line = f"{entry.name:<30} {entry.size:>10} bytes {self._format_time(entry):>20} {marker}"
        return line.rstrip()

    # ------------------------- command handlers -------------------------
    def _handle_ls(self, session: Session, arguments: list[str]) -> CommandResult:
        if arguments and arguments != [DETAILS_FLAG]:
            raise UsageError(f"Usage: {self._usages['ls']}")
        detailed = arguments == [DETAILS_FLAG]
        result = CommandResult()
        for entry in self._list_directory_uc.execute(session):
            style = "directory" if entry.is_dir else None
            if detailed:
                result.add(self._format_detailed(entry), style)
            else:
                result.add(entry.name + ("/" if entry.is_dir else ""), style)
        return result

    def _handle_cd(self, session: Session, arguments: list[str]) -> CommandResult:
        self._require("cd", arguments, 1)
        path = self._change_directory_uc.execute(session, arguments[0])
        return CommandResult([OutputLine(f"Current directory: {path}")])

    def _handle_mkdir(self, session: Session, arguments: list[str]) -> CommandResult:
        self._require("mkdir", arguments, 1)
        path = self._make_directory_uc.execute(session, arguments[0])
        return CommandResult([OutputLine(f"Directory created: {path}")])

    def _handle_rm(self, session: Session, arguments: list[str]) -> CommandResult:
        self._require("rm", arguments, 1)
        removal = self._remove_entry_uc.execute(session, arguments[0])
        kind = "Directory" if removal.is_dir else "File"
        return CommandResult([OutputLine(f"{kind} removed: {removal.path}")])

    def _handle_mv(self, session: Session, arguments: list[str]) -> CommandResult:
        force = self._parse_force("mv", arguments)
        src, dst = self._move_entry_uc.execute(
            session, arguments[0], arguments[1], force=force
        )
        return CommandResult([OutputLine(f"Moved: {src} -> {dst}")])

    def _handle_cp(self, session: Session, arguments: list[str]) -> CommandResult:
        force = self._parse_force("cp", arguments)
        src, dst = self._copy_file_uc.execute(
            session, arguments[0], arguments[1], force=force
        )
        return CommandResult([OutputLine(f"Copied: {src} -> {dst}")])

    def _handle_finfo(self, session: Session, arguments: list[str]) -> CommandResult:
        self._require("finfo", arguments, 1)
        entry = self._file_info_uc.execute(session, arguments[0])
        result = CommandResult()
        result.add(f"Name: {entry.name}")
        result.add(f"Path: {entry.path}")
        result.add(f"Size: {entry.size} bytes")
        result.add(f"Last modified: {self._format_time(entry)}")
        result.add(f"Type: {entry.kind}")
        result.add(f"Hidden: {entry.hidden}")
        result.add(f"Readable: {entry.readable}")
        result.add(f"Writable: {entry.writable}")
        result.add(f"Executable: {entry.executable}")
        return result

    def _handle_find(self, session: Session, arguments: list[str]) -> CommandResult:
        self._require("find", arguments, 1)
        text = arguments[0]
        result = CommandResult()
        result.add(f"Searching for '{text}' in {session.current_directory}...")
        matches = self._find_entries_uc.execute(session, text)
        if not matches:
            result.add("No files found")
            return result
        result.add("Found files:")
        for path in matches:
            result.add(path)
        return result

    def _handle_help(self, session: Session, arguments: list[str]) -> CommandResult:
        result = CommandResult()
        result.add("Available commands:")
        for spec in self.available_commands():
            result.add(f"  {spec['usage']:<22} - {spec['description']}")
        return result

    def _handle_exit(self, session: Session, arguments: list[str]) -> CommandResult:
        return CommandResult([OutputLine("Exiting...")], keep_running=False)

    @override
    def available_commands(self) -> list[CommandSpec]:
        return list(COMMANDS)

    @override
    def dispatch(
        self, session: Session, name: str, arguments: list[str]
    ) -> CommandResult:
        handler = self._handlers.get(name)
        if handler is None:
            raise ValueError(f"Unknown command: {name}")
        self._logger.debug(f"Dispatching {name} with arguments {arguments}")
        return handler(session, arguments)
