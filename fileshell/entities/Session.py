"""
Session domain entity holding the shell's current directory.
"""

import os
import threading

from fileshell.exceptions import NotFoundError, WrongTypeError


class Session:
    """
    One shell session. Owns the current directory instead of a process-wide variable,
    so several sessions (or tests) can run side by side.
    """

    def __init__(self, start_dir: str):
        """
        Initialize the Session entity.

        Args:
            start_dir: Directory the session starts in

        Raises:
            NotFoundError: If start_dir does not exist
            WrongTypeError: If start_dir is not a directory
        """
        self._current_directory = self._validate(os.path.abspath(start_dir))
        # Serializes commands when a session is shared between threads.
        self.lock = threading.RLock()

    @staticmethod
    def _validate(path: str) -> str:
        if not os.path.exists(path):
            raise NotFoundError(f"Directory does not exist: {path}")
        if not os.path.isdir(path):
            raise WrongTypeError(f"Not a directory: {path}")
        return os.path.normpath(path)

    @property
    def current_directory(self) -> str:
        return self._current_directory

    def change_directory(self, path: str) -> str:
        """
        Replace the current directory with an existing directory.

        Args:
            path: Absolute, normalized directory path

        Returns:
            The new current directory
        """
        self._current_directory = self._validate(path)
        return self._current_directory

    def __repr__(self) -> str:
        return f"Session(current_directory='{self._current_directory}')"
