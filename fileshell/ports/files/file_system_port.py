"""
File system port interface defining the contract for filesystem primitives.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from fileshell.entities.DirectoryEntry import DirectoryEntry
from fileshell.utils.walker import WalkNode


class FileSystemPort(ABC):
    """Port interface for filesystem operations.

    Every path handed to the port is already absolute and normalized.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything (including a dangling symlink) exists at path."""
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if path is an existing directory."""
        pass

    @abstractmethod
    def is_link(self, path: str) -> bool:
        """Return True if path is a symbolic link."""
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        """
        List the immediate children of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of DirectoryEntry entities, in the order the OS returns them

        Raises:
            OperationFailedError: If listing fails
        """
        pass

    @abstractmethod
    def get_entry(self, path: str) -> DirectoryEntry:
        """
        Inspect a single filesystem object.

        Raises:
            NotFoundError: If nothing exists at path
        """
        pass

    @abstractmethod
    def make_directory(self, path: str) -> None:
        """
        Create exactly one directory level.

        Raises:
            OperationFailedError: If the directory cannot be created
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """
        Delete a single non-directory entry.

        Raises:
            OperationFailedError: If deletion fails
        """
        pass

    @abstractmethod
    def remove_tree(self, path: str) -> int:
        """
        Delete a directory and everything under it, children before parents.

        Args:
            path: Directory to delete

        Returns:
            Number of entries deleted, the directory itself included

        Raises:
            OperationFailedError: On the first failure; what was already deleted stays deleted
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """
        Rename source to destination, replacing an existing destination.

        Raises:
            OperationFailedError: If the rename fails
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Copy the bytes of source to destination, replacing an existing destination.

        Raises:
            OperationFailedError: If the copy fails
        """
        pass

    @abstractmethod
    def walk(self, root: str) -> Iterator[WalkNode]:
        """
        Lazily traverse the subtree under root in depth-first pre-order.

        Raises:
            OperationFailedError: If a directory cannot be listed (ends the traversal)
        """
        pass
