"""Tests for peertime.utils: peertime_dir, atomic writes."""

import json
from pathlib import Path

import pytest

from peertime.utils import atomic_write_text, peertime_dir


class TestPeertimeDir:
    def test_returns_env_var_path(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PEERTIME_DIR", "/custom/config")
        assert peertime_dir() == Path("/custom/config")

    def test_returns_default_without_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("PEERTIME_DIR", raising=False)
        assert peertime_dir() == Path.home() / ".peertime"


class TestAtomicWrite:
    def test_writes_text(self, tmp_path: Path):
        target = tmp_path / "blob.json"
        atomic_write_text(target, '{"a": "b"}')
        assert target.read_text(encoding="utf-8") == '{"a": "b"}'

    def test_creates_parent_directories(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "data.json"
        atomic_write_text(target, json.dumps({"u1": "Europe/Berlin"}))
        assert json.loads(target.read_text(encoding="utf-8")) == {"u1": "Europe/Berlin"}

    def test_overwrites_existing(self, tmp_path: Path):
        target = tmp_path / "blob.json"
        target.write_text("old")
        atomic_write_text(target, "new")
        assert target.read_text(encoding="utf-8") == "new"

    def test_no_temp_files_left_on_success(self, tmp_path: Path):
        target = tmp_path / "clean.json"
        atomic_write_text(target, "{}")
        assert list(tmp_path.glob(".*tmp*")) == []
