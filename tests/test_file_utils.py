"""Tests for output naming and directory helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from goshot.utils.file_utils import FileUtils


class TestTimestamp:
    def test_utc_without_colons(self):
        now = datetime(2024, 5, 1, 12, 3, 4, tzinfo=timezone.utc)
        assert FileUtils.formatted_timestamp(now) == "2024-05-01T120304Z"

    def test_converts_to_utc(self):
        now = datetime(2024, 5, 1, 14, 3, 4, tzinfo=timezone(timedelta(hours=2)))
        assert FileUtils.formatted_timestamp(now) == "2024-05-01T120304Z"

    def test_current_time_has_no_colons(self):
        stamp = FileUtils.formatted_timestamp()
        assert ":" not in stamp
        assert stamp.endswith("Z")


class TestCapturePath:
    def test_one_based_suffix(self):
        assert FileUtils.capture_path("out", "TS", 0) == "out/TS_1.png"
        assert FileUtils.capture_path("out", "TS", 4) == "out/TS_5.png"


class TestEnsureDirectory:
    def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "new"
        assert FileUtils.ensure_directory_exists(str(target)) is True
        assert target.is_dir()

    def test_existing_directory_untouched(self, tmp_path):
        keep = tmp_path / "keep.txt"
        keep.write_text("x")
        assert FileUtils.ensure_directory_exists(str(tmp_path)) is False
        assert keep.read_text() == "x"

    def test_single_level_only(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FileUtils.ensure_directory_exists(str(tmp_path / "a" / "b"))

    def test_empty_path_is_an_error(self):
        with pytest.raises(FileNotFoundError):
            FileUtils.ensure_directory_exists("")
