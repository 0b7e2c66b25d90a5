"""
Directory entry domain entity.
"""

import os
import stat
from datetime import datetime
from typing import Any

from fileshell.exceptions import NotFoundError, OperationFailedError


class DirectoryEntry:
    """
    Snapshot of one filesystem object (file or directory) taken when the entity is built.
    """

    def __init__(self, path: str):
        """
        Initialize the DirectoryEntry entity.

        Args:
            path: Absolute path to the file or directory

        Raises:
            NotFoundError: If nothing exists at path
            OperationFailedError: If the entry cannot be stat'ed
        """
        if not os.path.lexists(path):
            raise NotFoundError(f"File does not exist: {path}")

        self.path = os.path.abspath(path)
        self.name = self._find_name()
        st = self._stat()
        self.is_dir = stat.S_ISDIR(st.st_mode)
        self.size: int = st.st_size
        self.modified = datetime.fromtimestamp(st.st_mtime)
        self.hidden = self._find_hidden(st)
        self.readable = os.access(self.path, os.R_OK)
        self.writable = os.access(self.path, os.W_OK)
        self.executable = os.access(self.path, os.X_OK)

    def _find_name(self) -> str:
        """Extract the base name, falling back to the path itself for a root."""
        return os.path.basename(self.path) or self.path

    def _stat(self) -> os.stat_result:
        """Stat the entry; dangling symlinks report the link itself."""
        try:
            return os.stat(self.path)
        except FileNotFoundError:
            try:
                return os.lstat(self.path)
            except OSError as e:
                raise OperationFailedError(str(e))
        except OSError as e:
            raise OperationFailedError(str(e))

    def _find_hidden(self, st: os.stat_result) -> bool:
        """Dot files are hidden; on Windows the hidden attribute counts too."""
        if self.name.startswith("."):
            return True
        attributes = getattr(st, "st_file_attributes", 0)
        return bool(attributes & getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0))

    @property
    def kind(self) -> str:
        return "Directory" if self.is_dir else "File"

    def get_details(self) -> dict[str, Any]:
        """
        Get comprehensive entry details.

        Returns:
            Dictionary with entry information
        """
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "modified": self.modified,
            "type": self.kind,
            "hidden": self.hidden,
            "readable": self.readable,
            "writable": self.writable,
            "executable": self.executable,
        }

    def __str__(self) -> str:
        """String representation of the DirectoryEntry."""
        return f"DirectoryEntry(name='{self.name}', size={self.size}, type='{self.kind}')"

    def __repr__(self) -> str:
        """Detailed string representation of the DirectoryEntry."""
        return f"DirectoryEntry(path='{self.path}')"
