"""
Use case for listing the current directory.
"""

import logging
from typing import Optional

from fileshell.entities.DirectoryEntry import DirectoryEntry
from fileshell.entities.Session import Session
from fileshell.exceptions import FileRepositoryError, OperationFailedError
from fileshell.ports.files.file_system_port import FileSystemPort


class ListDirectoryUseCase:
    """Use case for listing the immediate children of the current directory."""

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

    def execute(self, session: Session) -> list[DirectoryEntry]:
        """
        List the current directory without recursing.

        Entries come back in whatever order the OS lists them; nothing is sorted.

        Args:
            session: Session whose current directory is listed

        Returns:
            List of DirectoryEntry entities

        Raises:
            FileRepositoryError: If listing fails
        """
        directory = session.current_directory
        try:
            self._logger.info(f"Listing directory: {directory}")
            entries = self._file_system.list_entries(directory)
            self._logger.info(f"Found {len(entries)} entries")
            return entries
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise OperationFailedError(f"Failed to list {directory}: {str(e)}")
