from __future__ import annotations

from pathlib import Path

from applog.lib import paths
from applog.lib.paths import DEFAULT_LOG_FILENAME, get_user_documents_dir, log_file_path


def test_log_file_path_uses_explicit_directory(tmp_path):
    assert log_file_path("t.txt", tmp_path) == tmp_path / "t.txt"


def test_log_file_path_defaults_to_documents_dir():
    path = log_file_path(DEFAULT_LOG_FILENAME)
    assert path.name == "applog.txt"
    assert path.parent == get_user_documents_dir()


def test_documents_dir_falls_back_to_home(monkeypatch, tmp_path):
    monkeypatch.setattr(paths, "_qt_documents_location", lambda: "")
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert get_user_documents_dir() == tmp_path / "Documents"


def test_documents_dir_comes_from_qt(monkeypatch, tmp_path):
    monkeypatch.setattr(paths, "_qt_documents_location", lambda: str(tmp_path / "Docs"))
    assert get_user_documents_dir() == tmp_path / "Docs"
    assert log_file_path("t.txt") == tmp_path / "Docs" / "t.txt"
