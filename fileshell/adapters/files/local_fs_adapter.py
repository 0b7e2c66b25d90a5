"""
Local file system adapter implementation for filesystem primitives.
"""

import logging
import os
import shutil
from typing import Iterator

from typing_extensions import override

from fileshell.entities.DirectoryEntry import DirectoryEntry
from fileshell.exceptions import FileRepositoryError, OperationFailedError
from fileshell.ports.files.file_system_port import FileSystemPort
from fileshell.utils.walker import WalkNode, walk_tree


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _create_entries(self, paths: list[str]) -> list[DirectoryEntry]:
        """
        Create DirectoryEntry entities from a list of paths.

        Args:
            paths: List of paths to convert to DirectoryEntry entities

        Returns:
            List of DirectoryEntry entities
        """
        entries: list[DirectoryEntry] = []
        for path in paths:
            try:
                entries.append(DirectoryEntry(path))
            except FileRepositoryError as e:
                # Entry vanished or cannot be stat'ed; keep listing the rest
                self._logger.warning(f"Could not process entry {path}: {e}")
                continue

        return entries

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_link(self, path: str) -> bool:
        return os.path.islink(path)

    @override
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        try:
            paths = [os.path.join(directory, name) for name in os.listdir(directory)]
        except OSError as e:
            raise OperationFailedError(str(e))
        return self._create_entries(paths)

    @override
    def get_entry(self, path: str) -> DirectoryEntry:
        return DirectoryEntry(path)

    @override
    def make_directory(self, path: str) -> None:
        try:
            os.mkdir(path)
        except OSError as e:
            raise OperationFailedError(str(e))

    @override
    def remove_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise OperationFailedError(str(e))

    @override
    def remove_tree(self, path: str) -> int:
        # Pre-order puts every directory before its contents, so walking the
        # collected nodes backwards deletes children before their parent.
        nodes = list(self.walk(path))
        removed = 0
        for node in reversed(nodes):
            try:
                if node.is_dir:
                    os.rmdir(node.path)
                else:
                    os.remove(node.path)
            except OSError as e:
                self._logger.error(
                    f"Recursive delete of {path} stopped after {removed} entries: {e}"
                )
                raise OperationFailedError(str(e))
            removed += 1
        return removed

    @override
    def move(self, source: str, destination: str) -> None:
        try:
            os.replace(source, destination)
        except OSError as e:
            raise OperationFailedError(str(e))

    @override
    def copy_file(self, source: str, destination: str) -> None:
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            raise OperationFailedError(str(e))

    @override
    def walk(self, root: str) -> Iterator[WalkNode]:
        try:
            yield from walk_tree(root)
        except OSError as e:
            raise OperationFailedError(str(e))
