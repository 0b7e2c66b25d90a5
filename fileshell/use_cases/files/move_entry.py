"""
Use case for moving or renaming a file or directory.
"""

import logging
from typing import Optional

from fileshell.entities.Session import Session
from fileshell.exceptions import (
    AlreadyExistsError,
    FileRepositoryError,
    NotFoundError,
    OperationFailedError,
)
from fileshell.ports.files.file_system_port import FileSystemPort
from fileshell.utils.paths import resolve_path


class MoveEntryUseCase:
    """Use case for renaming an entry, optionally replacing the destination."""

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

    def execute(
        self, session: Session, source: str, destination: str, force: bool = False
    ) -> tuple[str, str]:
        """
        Move source to destination.

        Args:
            session: Session used to resolve both paths
            source: Entry to move
            destination: New location
            force: Replace an existing destination

        Returns:
            Resolved (source, destination) pair

        Raises:
            NotFoundError: If source does not exist
            AlreadyExistsError: If destination exists and force is False
            OperationFailedError: If the rename fails
        """
        try:
            src = resolve_path(session.current_directory, source)
            dst = resolve_path(session.current_directory, destination)
            if not self._file_system.exists(src):
                raise NotFoundError(f"Source does not exist: {src}")
            if self._file_system.exists(dst) and not force:
                raise AlreadyExistsError(
                    f"Destination already exists: {dst} (use -f to force overwrite)"
                )
            self._logger.info(f"Moving {src} -> {dst} (force={force})")
            self._file_system.move(src, dst)
            return src, dst
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error moving entry: {e}")
            raise OperationFailedError(
                f"Failed to move {source} to {destination}: {str(e)}"
            )
