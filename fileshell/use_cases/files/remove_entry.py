"""
Use case for removing a file or a directory tree.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fileshell.entities.Session import Session
from fileshell.exceptions import (
    FileRepositoryError,
    NotFoundError,
    OperationFailedError,
)
from fileshell.ports.files.file_system_port import FileSystemPort
from fileshell.utils.paths import resolve_path


@dataclass(frozen=True)
class Removal:
    path: str
    is_dir: bool
    removed: int


class RemoveEntryUseCase:
    """Use case for deleting a file, or a directory and all of its contents."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> Removal:
        """
        Delete the target.

        A directory is deleted recursively, children before parents. The first
        failure stops the deletion and nothing is restored.

        Args:
            session: Session used to resolve the target
            name: Path of the file or directory to delete

        Returns:
            Removal describing what was deleted

        Raises:
            NotFoundError: If the target does not exist
            OperationFailedError: If a delete fails
        """
        try:
            path = resolve_path(session.current_directory, name)
            if not self._file_system.exists(path):
                raise NotFoundError(f"File or directory does not exist: {path}")
            is_tree = self._file_system.is_directory(
                path
            ) and not self._file_system.is_link(path)
            if is_tree:
                self._logger.info(f"Removing directory tree: {path}")
                removed = self._file_system.remove_tree(path)
                self._logger.info(f"Removed {removed} entries")
                return Removal(path=path, is_dir=True, removed=removed)
            self._logger.info(f"Removing file: {path}")
            self._file_system.remove_file(path)
            return Removal(path=path, is_dir=False, removed=1)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error removing entry: {e}")
            raise OperationFailedError(f"Failed to remove {name}: {str(e)}")