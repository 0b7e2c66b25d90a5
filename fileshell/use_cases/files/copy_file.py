"""
Use case for copying a file.
"""

import logging
from typing import Optional

from fileshell.entities.Session import Session
from fileshell.exceptions import (
    AlreadyExistsError,
    FileRepositoryError,
    NotFoundError,
    OperationFailedError,
    WrongTypeError,
)
from fileshell.ports.files.file_system_port import FileSystemPort
from fileshell.utils.paths import resolve_path


class CopyFileUseCase:
    """Use case for copying a single file's bytes, optionally replacing the destination."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, session: Session, source: str, destination: str, force: bool = False
    ) -> tuple[str, str]:
        """
        Copy source to destination. Directories are refused.

        Returns:
            Resolved (source, destination) pair

        Raises:
            NotFoundError: If source does not exist
            WrongTypeError: If source is a directory
            AlreadyExistsError: If destination exists and force is False
            OperationFailedError: If the copy fails
        """
        try:
            src = resolve_path(session.current_directory, source)
            dst = resolve_path(session.current_directory, destination)
            if not self._file_system.exists(src):
                raise NotFoundError(f"Source does not exist: {src}")
            if self._file_system.is_directory(src):
                raise WrongTypeError("Cannot copy directories (use mv instead)")
            if self._file_system.exists(dst) and not force:
                raise AlreadyExistsError(
                    f"Destination already exists: {dst} (use -f to force overwrite)"
                )
            self._logger.info(f"Copying {src} -> {dst} (force={force})")
            self._file_system.copy_file(src, dst)
            return src, dst
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying file: {e}")
            raise OperationFailedError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )
