"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from fileshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fileshell.config.settings import settings
from fileshell.entities.Session import Session
from fileshell.ports.files.file_system_port import FileSystemPort
from fileshell.ports.shell.commands_port import CommandsHandlerPort
from fileshell.use_cases.files.change_directory import ChangeDirectoryUseCase
from fileshell.use_cases.files.copy_file import CopyFileUseCase
from fileshell.use_cases.files.file_info import FileInfoUseCase
from fileshell.use_cases.files.find_entries import FindEntriesUseCase
from fileshell.use_cases.files.list_directory import ListDirectoryUseCase
from fileshell.use_cases.files.make_directory import MakeDirectoryUseCase
from fileshell.use_cases.files.move_entry import MoveEntryUseCase
from fileshell.use_cases.files.remove_entry import RemoveEntryUseCase
from fileshell.use_cases.shell.commands_handler import ShellCommandsHandler


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def _get_or_create(self, key: str, factory):
        if key not in self._instances:
            self._instances[key] = factory()
        return self._instances[key]

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        return self._get_or_create(
            "file_system", lambda: LocalFileSystemAdapter(self._logger)
        )

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        return self._get_or_create(
            "list_directory_use_case",
            lambda: ListDirectoryUseCase(self.get_file_system(), self._logger),
        )

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        return self._get_or_create(
            "change_directory_use_case",
            lambda: ChangeDirectoryUseCase(self.get_file_system(), self._logger),
        )

    def get_make_directory_use_case(self) -> MakeDirectoryUseCase:
        return self._get_or_create(
            "make_directory_use_case",
            lambda: MakeDirectoryUseCase(self.get_file_system(), self._logger),
        )

    def get_remove_entry_use_case(self) -> RemoveEntryUseCase:
        return self._get_or_create(
            "remove_entry_use_case",
            lambda: RemoveEntryUseCase(self.get_file_system(), self._logger),
        )

    def get_move_entry_use_case(self) -> MoveEntryUseCase:
        return self._get_or_create(
            "move_entry_use_case",
            lambda: MoveEntryUseCase(self.get_file_system(), self._logger),
        )

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        return self._get_or_create(
            "copy_file_use_case",
            lambda: CopyFileUseCase(self.get_file_system(), self._logger),
        )

    def get_file_info_use_case(self) -> FileInfoUseCase:
        return self._get_or_create(
            "file_info_use_case",
            lambda: FileInfoUseCase(self.get_file_system(), self._logger),
        )

    def get_find_entries_use_case(self) -> FindEntriesUseCase:
        return self._get_or_create(
            "find_entries_use_case",
            lambda: FindEntriesUseCase(self.get_file_system(), self._logger),
        )

    def get_commands_handler(self) -> CommandsHandlerPort:
        """
        Registry of shell commands backed by the Files use cases.

        Returns:
            Configured ShellCommandsHandler
        """
        return self._get_or_create(
            "commands_handler",
            lambda: ShellCommandsHandler(
                self.get_list_directory_use_case(),
                self.get_change_directory_use_case(),
                self.get_make_directory_use_case(),
                self.get_remove_entry_use_case(),
                self.get_move_entry_use_case(),
                self.get_copy_file_use_case(),
                self.get_file_info_use_case(),
                self.get_find_entries_use_case(),
                date_format=settings.date_format,
                logger=self._logger,
            ),
        )

    def create_session(self, start_dir: Optional[str] = None) -> Session:
        """
        Create a new, independent session. Sessions are never cached.

        Args:
            start_dir: Initial directory; defaults to the configured start directory
        """
        return Session(start_dir or settings.start_dir)

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
