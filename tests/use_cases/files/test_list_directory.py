"""
Tests for the ListDirectoryUseCase.
"""

import pytest
from unittest.mock import MagicMock

from fileshell.entities.DirectoryEntry import DirectoryEntry
from fileshell.entities.Session import Session
from fileshell.exceptions import OperationFailedError
from fileshell.ports.files.file_system_port import FileSystemPort
from fileshell.use_cases.files.list_directory import ListDirectoryUseCase


class TestListDirectoryUseCase:
    """Test cases for the ListDirectoryUseCase."""

    def test_execute_success(self, session: Session, mock_logger):
        """Test entries come back untouched and unsorted."""
        # Create mock file system
        mock_file_system = MagicMock(spec=FileSystemPort)
        entry_b = MagicMock(spec=DirectoryEntry)
        entry_a = MagicMock(spec=DirectoryEntry)
        mock_file_system.list_entries.return_value = [entry_b, entry_a]

        use_case = ListDirectoryUseCase(mock_file_system, mock_logger)
        result = use_case.execute(session)

        assert result == [entry_b, entry_a]
        mock_file_system.list_entries.assert_called_once_with(
            session.current_directory
        )
        mock_logger.info.assert_any_call(
            f"Listing directory: {session.current_directory}"
        )
        mock_logger.info.assert_any_call("Found 2 entries")

    def test_execute_empty_directory(self, session: Session, mock_logger):
        mock_file_system = MagicMock(spec=FileSystemPort)
        mock_file_system.list_entries.return_value = []

        use_case = ListDirectoryUseCase(mock_file_system, mock_logger)

        assert use_case.execute(session) == []
        mock_logger.info.assert_any_call("Found 0 entries")

    def test_execute_repository_error(self, session: Session, mock_logger):
        """Test a FileRepositoryError is re-raised as is."""
        mock_file_system = MagicMock(spec=FileSystemPort)
        mock_file_system.list_entries.side_effect = OperationFailedError(
            "Permission denied"
        )

        use_case = ListDirectoryUseCase(mock_file_system, mock_logger)

        with pytest.raises(OperationFailedError, match="^Permission denied$"):
            use_case.execute(session)
        # No error log since the original exception is re-raised
        mock_logger.error.assert_not_called()

    def test_execute_unexpected_error(self, session: Session, mock_logger):
        """Test an unexpected exception is logged and wrapped."""
        mock_file_system = MagicMock(spec=FileSystemPort)
        mock_file_system.list_entries.side_effect = Exception("Unexpected error")

        use_case = ListDirectoryUseCase(mock_file_system, mock_logger)

        with pytest.raises(OperationFailedError, match="Unexpected error"):
            use_case.execute(session)
        mock_logger.error.assert_called_once_with(
            "Error listing directory: Unexpected error"
        )

    def test_initialization_without_logger(self):
        mock_file_system = MagicMock(spec=FileSystemPort)

        use_case = ListDirectoryUseCase(mock_file_system)

        assert use_case._logger is not None
        assert use_case._file_system == mock_file_system
