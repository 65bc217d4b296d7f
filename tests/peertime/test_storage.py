"""Tests for blob stores."""

from pathlib import Path

import pytest

from peertime.storage import FileBlobStore, MemoryBlobStore, PersistenceError


class TestMemoryBlobStore:
    def test_starts_empty(self):
        assert MemoryBlobStore().get() is None

    def test_set_get_delete(self):
        store = MemoryBlobStore()
        store.set("{}")
        assert store.get() == "{}"
        store.delete()
        assert store.get() is None


class TestFileBlobStore:
    def test_missing_file_reads_none(self, tmp_path: Path):
        assert FileBlobStore(tmp_path / "nope.json").get() is None

    def test_round_trip(self, tmp_path: Path):
        store = FileBlobStore(tmp_path / "sub" / "tz.json")
        store.set('{"u1": "Asia/Tokyo"}')
        assert store.get() == '{"u1": "Asia/Tokyo"}'

    def test_delete(self, tmp_path: Path):
        path = tmp_path / "tz.json"
        store = FileBlobStore(path)
        store.set("{}")
        store.delete()
        assert not path.exists()

    def test_delete_missing_is_fine(self, tmp_path: Path):
        FileBlobStore(tmp_path / "tz.json").delete()

    def test_unwritable_raises_persistence_error(self, tmp_path: Path):
        # Parent "directory" is a regular file
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        store = FileBlobStore(blocker / "tz.json")
        with pytest.raises(PersistenceError):
            store.set("{}")

    def test_invalid_utf8_reads_none(self, tmp_path: Path):
        path = tmp_path / "tz.json"
        path.write_bytes(b'{"u1": "\xff\xfe"}')
        assert FileBlobStore(path).get() is None
