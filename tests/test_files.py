import subprocess
from unittest import mock

import pytest

from v_utils.files import OpenMode, open_path, open_with_mode, sync_file_with_git


def _commands(run_mock):
    return [c.args[0] for c in run_mock.call_args_list]


@pytest.fixture
def existing(tmp_path):
    f = tmp_path / "notes.md"
    f.write_text("x")
    return f


@mock.patch("subprocess.run")
def test_normal_missing_file_raises(run_mock, tmp_path):
    with pytest.raises(FileNotFoundError, match="File does not exist"):
        open_with_mode(tmp_path / "missing.md", OpenMode.NORMAL)
    assert run_mock.call_count == 0


@mock.patch("subprocess.run")
def test_normal_runs_editor(run_mock, existing):
    open_with_mode(existing, OpenMode.NORMAL)
    assert _commands(run_mock) == [["sh", "-c", f"$EDITOR {existing}"]]


@mock.patch("subprocess.run")
def test_force_runs_editor_on_missing_file(run_mock, tmp_path):
    target = tmp_path / "new.md"
    open_with_mode(target, OpenMode.FORCE)
    assert _commands(run_mock) == [["sh", "-c", f"$EDITOR {target}"]]


@mock.patch("subprocess.run")
def test_read_uses_nvim(run_mock, existing):
    open_with_mode(existing, OpenMode.READ)
    assert _commands(run_mock) == [["sh", "-c", f"nvim -R {existing}"]]


@mock.patch("subprocess.run")
def test_pager_uses_less(run_mock, existing):
    open_with_mode(existing, OpenMode.PAGER)
    assert _commands(run_mock) == [["sh", "-c", f"less {existing}"]]


@pytest.mark.parametrize("mode", [OpenMode.PAGER, OpenMode.READ])
@mock.patch("subprocess.run")
def test_other_modes_require_existing_file(run_mock, mode, tmp_path):
    with pytest.raises(FileNotFoundError):
        open_with_mode(tmp_path / "missing.md", mode)
    assert run_mock.call_count == 0


@mock.patch("subprocess.run", side_effect=OSError("no sh"))
def test_spawn_failure_is_reported(run_mock, existing):
    with pytest.raises(RuntimeError, match=r"\$EDITOR env variable is not defined"):
        open_with_mode(existing, OpenMode.NORMAL)


@mock.patch("subprocess.run")
def test_open_path_is_normal_mode(run_mock, existing):
    open_path(existing)
    assert _commands(run_mock) == [["sh", "-c", f"$EDITOR {existing}"]]


@mock.patch("subprocess.run")
def test_sync_without_opening(run_mock, existing):
    sync_file_with_git(existing)
    sp = existing.parent
    assert _commands(run_mock) == [
        ["sh", "-c", f'git -C "{sp}" pull'],
        ["sh", "-c", f'git -C "{sp}" add -A && git -C "{sp}" commit -m "." && git -C "{sp}" push'],
    ]


@mock.patch("subprocess.run")
def test_sync_directory_uses_directory_itself(run_mock, tmp_path):
    sync_file_with_git(tmp_path)
    assert _commands(run_mock)[0] == ["sh", "-c", f'git -C "{tmp_path}" pull']


@mock.patch("subprocess.run")
def test_sync_opens_between_pull_and_push(run_mock, existing):
    sync_file_with_git(existing, OpenMode.NORMAL)
    commands = _commands(run_mock)
    assert len(commands) == 3
    assert commands[1] == ["sh", "-c", f"$EDITOR {existing}"]


@mock.patch("subprocess.run")
def test_sync_missing_without_force_raises(run_mock, tmp_path):
    with pytest.raises(RuntimeError, match="Failed to read metadata"):
        sync_file_with_git(tmp_path / "missing.md", OpenMode.NORMAL)
    assert run_mock.call_count == 0


@mock.patch("subprocess.run")
def test_sync_force_creates_file(run_mock, tmp_path):
    target = tmp_path / "created.md"
    sync_file_with_git(target, OpenMode.FORCE)
    assert target.is_file()
    assert len(_commands(run_mock)) == 3


@mock.patch("subprocess.run")
def test_sync_open_failure_is_wrapped(run_mock, tmp_path):
    target = tmp_path / "sub"
    target.mkdir()
    missing_in_dir = target / "absent"
    with pytest.raises(RuntimeError):
        sync_file_with_git(missing_in_dir, OpenMode.READ)
    assert isinstance(subprocess.run, mock.MagicMock)