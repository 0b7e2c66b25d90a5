"""
Tests for the ChangeDirectoryUseCase.
"""

import os

import pytest

from fileshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fileshell.entities.Session import Session
from fileshell.exceptions import NoParentError, NotFoundError, WrongTypeError
from fileshell.use_cases.files.change_directory import ChangeDirectoryUseCase


@pytest.fixture
def use_case(mock_logger):
    return ChangeDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)


class TestChangeDirectoryUseCase:
    """Test cases for the ChangeDirectoryUseCase."""

    def test_relative_directory(self, use_case, session, temp_directory):
        result = use_case.execute(session, "subdir")

        assert result == os.path.join(temp_directory, "subdir")
        assert session.current_directory == result

    def test_parent_directory(self, use_case, temp_directory):
        session = Session(os.path.join(temp_directory, "subdir"))

        assert use_case.execute(session, "..") == temp_directory
        assert session.current_directory == temp_directory

    def test_trailing_separator_and_dot_segments(self, use_case, session, temp_directory):
        raw = os.path.join(".", "subdir", "..", "subdir") + os.sep
        assert use_case.execute(session, raw) == os.path.join(temp_directory, "subdir")

    def test_absolute_directory(self, use_case, session, temp_directory):
        target = os.path.join(temp_directory, "subdir")
        assert use_case.execute(session, target) == target

    def test_missing_directory(self, use_case, session, temp_directory):
        with pytest.raises(NotFoundError, match="Directory does not exist"):
            use_case.execute(session, "missing")
        assert session.current_directory == temp_directory

    def test_file_is_not_a_directory(self, use_case, session, temp_directory):
        with pytest.raises(WrongTypeError, match="Not a directory"):
            use_case.execute(session, "test1.txt")
        assert session.current_directory == temp_directory

    def test_parent_at_root(self, use_case):
        root = os.path.abspath(os.sep)
        session = Session(root)

        with pytest.raises(NoParentError, match="Already at root directory"):
            use_case.execute(session, "..")
        assert session.current_directory == root

    def test_repeated_parent_reaches_root_then_stops(self, use_case, session):
        """Walking up ends at the root and stays there."""
        root = os.path.abspath(os.sep)
        while session.current_directory != root:
            use_case.execute(session, "..")

        for _ in range(3):
            with pytest.raises(NoParentError):
                use_case.execute(session, "..")
            assert session.current_directory == root
