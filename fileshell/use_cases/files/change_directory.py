"""
Use case for changing the current directory.
"""

import logging
from typing import Optional

from fileshell.entities.Session import Session
from fileshell.exceptions import (
    FileRepositoryError,
    NotFoundError,
    OperationFailedError,
    WrongTypeError,
)
from fileshell.ports.files.file_system_port import FileSystemPort
from fileshell.utils.paths import resolve_path


class ChangeDirectoryUseCase:
    """Use case for moving a session to another directory."""

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

    def execute(self, session: Session, target: str) -> str:
        """
        Change the session's current directory.

        The session is left untouched unless the target exists and is a directory.

        Args:
            session: Session to update
            target: Relative or absolute path, or '..'

        Returns:
            The new current directory

        Raises:
            NoParentError: If target is '..' and the session is at a root
            NotFoundError: If the target does not exist
            WrongTypeError: If the target is not a directory
        """
        try:
            path = resolve_path(session.current_directory, target)
            self._logger.info(f"Changing directory to: {path}")
            if not self._file_system.exists(path):
                raise NotFoundError(f"Directory does not exist: {path}")
            if not self._file_system.is_directory(path):
                raise WrongTypeError(f"Not a directory: {path}")
            return session.change_directory(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing directory: {e}")
            raise OperationFailedError(f"Failed to change directory to {target}: {str(e)}")
