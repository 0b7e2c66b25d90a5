"""
Use case for inspecting a single file or directory.
"""

import logging
from typing import Optional

from fileshell.entities.DirectoryEntry import DirectoryEntry
from fileshell.entities.Session import Session
from fileshell.exceptions import (
    FileRepositoryError,
    NotFoundError,
    OperationFailedError,
)
from fileshell.ports.files.file_system_port import FileSystemPort
from fileshell.utils.paths import resolve_path


class FileInfoUseCase:
    """Use case for reading an entry's metadata."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> DirectoryEntry:
        try:
            path = resolve_path(session.current_directory, name)
            if not self._file_system.exists(path):
                raise NotFoundError(f"File does not exist: {path}")
            self._logger.info(f"Reading info for: {path}")
            return self._file_system.get_entry(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading file info: {e}")
            raise OperationFailedError(f"Failed to read info for {name}: {str(e)}")
