"""
Use case for searching entries by name below the current directory.
"""

import logging
import os
from typing import Optional

from fileshell.entities.Session import Session
from fileshell.exceptions import (
    FileRepositoryError,
    OperationFailedError,
    UsageError,
)
from fileshell.ports.files.file_system_port import FileSystemPort


class FindEntriesUseCase:
    """Use case for a recursive, case-sensitive substring search on entry names."""

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

    def execute(self, session: Session, text: str) -> list[str]:
        """
        Search the tree rooted at the current directory.

        Every node, the root and directories included, is matched on its base
        name. The search root is always the current directory.

        Args:
            session: Session whose current directory is searched
            text: Substring to look for (no globbing, no regex)

        Returns:
            Matching absolute paths in traversal order

        Raises:
            UsageError: If text is empty
            OperationFailedError: If any directory cannot be listed (aborts the search)
        """
        if not text:
            raise UsageError("Search text must not be empty")
        root = session.current_directory
        try:
            self._logger.info(f"Searching for '{text}' in directory: {root}")
            matches = [
                node.path
                for node in self._file_system.walk(root)
                if text in (os.path.basename(node.path) or node.path)
            ]
            self._logger.info(f"Found {len(matches)} entries matching '{text}'")
            return matches
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error searching entries: {e}")
            raise OperationFailedError(
                f"Failed to search {root} for '{text}': {str(e)}"
            )
