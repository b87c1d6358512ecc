"""Tests for arbiter_core.paths."""

from pathlib import Path

from arbiter_core.paths import Paths


class TestPaths:
    def test_default_root(self):
        assert Paths().root == Path("data")

    def test_root_accepts_str(self, tmp_path):
        assert Paths(str(tmp_path)).root == tmp_path

    def test_settings_file(self, tmp_path):
        p = Paths(tmp_path / "data")
        assert p.settings_file == tmp_path / "data" / "config" / "settings.json"

    def test_log_file(self, tmp_path):
        p = Paths(tmp_path / "data")
        assert p.log_file == tmp_path / "data" / "logs" / "arbiter.log"

    def test_ensure_dirs(self, tmp_path):
        p = Paths(tmp_path / "data")
        p.ensure_dirs()
        assert p.config_dir.is_dir()
        assert p.log_dir.is_dir()
