"""Unit tests for the local workspace."""

import os

import pytest

from dirsplit.workspace import LocalWorkspace, Workspace


class TestLocalWorkspace:
    def test_is_workspace(self, workspace):
        assert isinstance(workspace, Workspace)

    def test_defaults_to_cwd(self, tmp_dir, monkeypatch):
        monkeypatch.chdir(tmp_dir)
        assert LocalWorkspace().resolve() == tmp_dir.resolve()

    def test_list_files_skips_directories(self, tmp_dir, workspace, make_files):
        make_files("a", ".hidden")
        (tmp_dir / "sub").mkdir()
        assert sorted(workspace.list_files()) == [".hidden", "a"]

    def test_list_missing_directory(self, tmp_dir):
        with pytest.raises(OSError):
            LocalWorkspace(tmp_dir / "missing").list_files()

    def test_open_append(self, tmp_dir, workspace):
        with workspace.open_append("log", 0o600) as f:
            f.write("x\n")
        with workspace.open_append("log", 0o600) as f:
            f.write("y\n")
        assert workspace.read_text("log") == "x\ny\n"

    def test_make_dir_is_idempotent(self, tmp_dir, workspace):
        workspace.make_dir("out/nested", 0o700)
        workspace.make_dir("out/nested", 0o700)
        assert (tmp_dir / "out" / "nested").is_dir()

    def test_move(self, tmp_dir, workspace, make_files):
        make_files("a")
        workspace.make_dir("out", 0o700)
        workspace.move("a", "out")
        assert (tmp_dir / "out" / "a").read_text() == "a"
        assert not (tmp_dir / "a").exists()

    def test_move_missing(self, workspace):
        workspace.make_dir("out", 0o700)
        with pytest.raises(OSError):
            workspace.move("missing", "out")

    def test_stat_missing(self, workspace):
        with pytest.raises(FileNotFoundError):
            workspace.stat("missing")

    def test_abstract(self):
        with pytest.raises(TypeError):
            Workspace()

    @pytest.mark.skipif(os.name != "posix", reason="POSIX symlinks")
    def test_symlink_to_directory_is_listed(self, tmp_dir, workspace):
        (tmp_dir / "real").mkdir()
        (tmp_dir / "link").symlink_to(tmp_dir / "real")
        assert workspace.list_files() == ["link"]
