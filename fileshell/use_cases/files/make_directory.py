"""
Use case for creating a directory.
"""

import logging
from typing import Optional

from fileshell.entities.Session import Session
from fileshell.exceptions import (
    AlreadyExistsError,
    FileRepositoryError,
    OperationFailedError,
)
from fileshell.ports.files.file_system_port import FileSystemPort
from fileshell.utils.paths import resolve_path


class MakeDirectoryUseCase:
    """Use case for creating a single directory level."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> str:
        """
        Create one directory; missing parents are not created.

        Raises:
            AlreadyExistsError: If anything already exists at the target
            OperationFailedError: If the directory cannot be created
        """
        try:
            path = resolve_path(session.current_directory, name)
            if self._file_system.exists(path):
                raise AlreadyExistsError(f"Directory already exists: {path}")
            self._logger.info(f"Creating directory: {path}")
            self._file_system.make_directory(path)
            return path
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating directory: {e}")
            raise OperationFailedError(f"Failed to create directory {name}: {str(e)}")
