"""
Tests for outlook_backup.services.backup module.
"""

from unittest.mock import patch

import pytest

from outlook_backup.services.backup import BackupManager
from outlook_backup.utils.file_processor import FileProcessor
from tests.test_utils.fixtures import create_test_directory_structure, create_test_file


@pytest.mark.unit
class TestBackupManager:
    """Tests for BackupManager.copy_all."""

    def test_proceed_false_touches_nothing(self, temp_dir, mock_logger):
        """Test that a cancelled copy returns False and creates nothing."""
        source = create_test_file(temp_dir, "a.txt")
        destination = temp_dir / "backups" / "20240101_120000"

        assert BackupManager.copy_all([source], destination, proceed=False) is False
        assert not (temp_dir / "backups").exists()
        mock_logger.warning.assert_not_called()
        mock_logger.error.assert_not_called()

    def test_copies_present_and_skips_missing(self, temp_dir, mock_logger):
        """Test one present and one missing source."""
        present = create_test_file(temp_dir / "src", "a.txt", b"payload")
        missing = temp_dir / "src" / "missing.txt"
        destination = temp_dir / "vol" / "OutlookBackups" / "20240101_120000"

        assert BackupManager.copy_all([present, missing], destination, proceed=True) is True

        assert destination.is_dir()
        assert (destination / "a.txt").read_bytes() == b"payload"
        assert not (destination / "missing.txt").exists()
        mock_logger.warning.assert_called_once()
        assert "missing.txt" in str(mock_logger.warning.call_args)

    def test_missing_source_does_not_stop_later_copies(self, temp_dir, mock_logger):
        missing = temp_dir / "nope.pst"
        later = create_test_file(temp_dir, "later.txt")
        destination = temp_dir / "out"

        assert BackupManager.copy_all([missing, later], destination) is True
        assert (destination / "later.txt").exists()

    def test_existing_destination_is_not_an_error(self, temp_dir, mock_logger):
        source = create_test_file(temp_dir, "a.txt")
        destination = temp_dir / "out"
        destination.mkdir()

        assert BackupManager.copy_all([source], destination) is True

    def test_rerun_overwrites_changed_file(self, temp_dir, mock_logger):
        """Test that a second run replaces the first run's copy."""
        source = create_test_file(temp_dir, "notes.txt", b"run 1")
        destination = temp_dir / "out"

        assert BackupManager.copy_all([source], destination) is True
        source.write_bytes(b"run 2, longer content")
        assert BackupManager.copy_all([source], destination) is True

        assert (destination / "notes.txt").read_bytes() == b"run 2, longer content"

    def test_copies_directory_source(self, temp_dir, mock_logger):
        signatures = temp_dir / "Signatures"
        create_test_directory_structure(signatures, ["work.htm", "work_files/logo.png", "empty/"])
        destination = temp_dir / "out"

        assert BackupManager.copy_all([signatures], destination) is True

        assert (destination / "Signatures" / "work.htm").read_text() == "work.htm"
        assert (destination / "Signatures" / "work_files" / "logo.png").exists()
        assert (destination / "Signatures" / "empty").is_dir()

    def test_duplicate_sources_are_allowed(self, temp_dir, mock_logger):
        source = create_test_file(temp_dir, "a.txt")
        destination = temp_dir / "out"

        assert BackupManager.copy_all([source, source], destination) is True
        assert [p.name for p in destination.iterdir()] == ["a.txt"]

    def test_copies_in_list_order(self, temp_dir, mock_logger):
        first = create_test_file(temp_dir, "first.txt")
        second = create_test_file(temp_dir, "second.txt")
        destination = temp_dir / "out"

        with patch("outlook_backup.services.backup.FileProcessor.copy_into", wraps=FileProcessor.copy_into) as spy:
            BackupManager.copy_all([second, first], destination)

        assert [c[0][0] for c in spy.call_args_list] == [second, first]

    def test_copy_failure_aborts_and_keeps_partial_copies(self, temp_dir, mock_logger):
        """Test that an I/O error stops the loop without rollback."""
        first = create_test_file(temp_dir, "first.txt")
        second = create_test_file(temp_dir, "second.txt")
        third = create_test_file(temp_dir, "third.txt")
        destination = temp_dir / "out"

        real_copy = FileProcessor.copy_into

        def fail_on_second(source, dest_dir):
            if source == second:
                raise PermissionError("Access denied")
            return real_copy(source, dest_dir)

        with patch("outlook_backup.services.backup.FileProcessor.copy_into", side_effect=fail_on_second):
            assert BackupManager.copy_all([first, second, third], destination) is False

        assert (destination / "first.txt").exists()
        assert not (destination / "third.txt").exists()
        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert "second.txt" in str(call_args)
        assert call_args[1]["exc_info"] is True

    def test_directory_creation_failure(self, temp_dir, mock_logger):
        """Test that a destination which cannot be created returns False."""
        blocker = create_test_file(temp_dir, "blocker")
        source = create_test_file(temp_dir, "a.txt")

        assert BackupManager.copy_all([source], blocker / "nested") is False

        mock_logger.error.assert_called_once()
        assert "Failed to create backup folder" in str(mock_logger.error.call_args)

    def test_success_logs_summary(self, temp_dir, mock_logger):
        source = create_test_file(temp_dir, "a.txt", b"0" * 2048)
        missing = temp_dir / "missing.txt"

        BackupManager.copy_all([source, missing], temp_dir / "out")

        summary = str(mock_logger.info.call_args)
        assert "Copied 1 item(s)" in summary
        assert "2.00 KB" in summary
        assert "skipped 1" in summary
